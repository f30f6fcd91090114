"""記録済み IMU 姿勢サンプルの読み込み。

CSV（roll_deg, pitch_deg, yaw_deg 列）または JSON（同じキーを持つ
オブジェクトのリスト）を RigidTransform の列に変換する。
"""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path

from pointing_kinematics.transform import RigidTransform

logger = logging.getLogger(__name__)

ANGLE_KEYS = ("roll_deg", "pitch_deg", "yaw_deg")


def _to_transform(record: dict, index: int) -> RigidTransform:
    try:
        roll, pitch, yaw = (float(record.get(key) or 0.0) for key in ANGLE_KEYS)
    except (TypeError, ValueError) as e:
        raise ValueError(f"サンプル {index} の角度が数値ではありません: {record}") from e
    return RigidTransform.from_rpy(roll, pitch, yaw, degrees=True)


def load_orientation_samples(path: str | Path) -> list[RigidTransform]:
    """姿勢サンプルを読み込む

    Args:
        path: CSV または JSON ファイルのパス

    Returns:
        IMU 姿勢のリスト

    Raises:
        FileNotFoundError: ファイルが存在しない場合
        ValueError: 形式が不正な場合
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"サンプルファイルが見つかりません: {path}")

    suffix = path.suffix.lower()
    if suffix == ".csv":
        with open(path, newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            columns = reader.fieldnames or []
            if not any(key in columns for key in ANGLE_KEYS):
                raise ValueError(f"CSV には {', '.join(ANGLE_KEYS)} のいずれかの列が必要です: {path}")
            records = list(reader)
    elif suffix == ".json":
        with open(path, encoding="utf-8") as f:
            try:
                records = json.load(f)
            except json.JSONDecodeError as e:
                raise ValueError(f"JSON解析エラー: {e}") from e
        if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
            raise ValueError("JSON サンプルはオブジェクトのリストである必要があります")
    else:
        raise ValueError(f"サポートされていないファイル形式: {suffix}")

    samples = [_to_transform(record, i) for i, record in enumerate(records)]
    logger.info(f"Loaded {len(samples)} orientation samples from {path}")
    return samples
