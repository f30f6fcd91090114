"""Export utilities for pointing results."""

from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Sequence

    from pointing_kinematics.kinematics import PointingState
    from pointing_kinematics.transform import RigidTransform

logger = logging.getLogger(__name__)

CSV_HEADER = [
    "index",
    "ray_x",
    "ray_y",
    "ray_z",
    "ray_pitch",
    "ray_yaw",
    "finger_x",
    "finger_y",
    "finger_z",
    "pointer_x",
    "pointer_y",
    "pointer_z",
    "pointer_yaw",
]


def _position_columns(tf: RigidTransform | None) -> list[str]:
    if tf is None:
        return ["", "", ""]
    return [f"{v:.6f}" for v in tf.origin]


class PointingExporter:
    """指差し結果のエクスポートクラス

    モデルの出力（PointingState）の系列を JSON / CSV に書き出す。
    """

    def __init__(self, output_dir: str | Path):
        """PointingExporterを初期化

        Args:
            output_dir: 出力ディレクトリ
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        logger.info(f"PointingExporter initialized: {self.output_dir}")

    def export_json(
        self,
        states: Sequence[PointingState],
        filename: str = "pointing.json",
        metadata: dict[str, Any] | None = None,
    ) -> Path:
        """結果をJSON形式でエクスポート

        Args:
            states: PointingState のリスト
            filename: 出力ファイル名
            metadata: 付加情報（身長・サーフェスなど）

        Returns:
            出力ファイルのパス
        """
        output_path = self.output_dir / filename

        data: dict[str, Any] = {
            "metadata": {
                "num_samples": len(states),
                "num_hits": sum(1 for state in states if state.has_pointer),
                **(metadata or {}),
            },
            "samples": [{"index": i, **state.to_dict()} for i, state in enumerate(states)],
        }

        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info(f"JSON exported: {output_path}")
        return output_path

    def export_csv(
        self,
        states: Sequence[PointingState],
        filename: str = "pointing.csv",
    ) -> Path:
        """結果をCSV形式でエクスポート

        交点がないサンプルの pointer 列は空欄になる。

        Args:
            states: PointingState のリスト
            filename: 出力ファイル名

        Returns:
            出力ファイルのパス
        """
        output_path = self.output_dir / filename

        with open(output_path, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(CSV_HEADER)

            for i, state in enumerate(states):
                row = [str(i)]
                row += _position_columns(state.ray)
                if state.ray is None:
                    row += ["", ""]
                else:
                    _, pitch, yaw = state.ray.rpy
                    row += [f"{pitch:.6f}", f"{yaw:.6f}"]
                row += _position_columns(state.finger)
                row += _position_columns(state.pointer)
                row.append("" if state.pointer is None else f"{state.pointer.rpy[2]:.6f}")
                writer.writerow(row)

        logger.info(f"CSV exported: {output_path}")
        return output_path
