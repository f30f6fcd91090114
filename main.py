#!/usr/bin/env python
"""
指差し運動学 - メインエントリーポイント

身長・利き手・IMU姿勢から指差しレイを推定し、
設定されたターゲット面（平面・円柱・球）との交点を計算して出力します。
"""

import logging
import sys

from tqdm import tqdm

from pointing_kinematics.cli import parse_arguments
from pointing_kinematics.config import ConfigManager
from pointing_kinematics.kinematics import KinematicModel
from pointing_kinematics.transform import RigidTransform
from pointing_kinematics.utils import PointingExporter, load_orientation_samples, setup_logging


def apply_overrides(config: ConfigManager, args) -> None:
    """コマンドライン引数で設定値を上書きする"""
    if args.height is not None:
        config.set("body.height_m", args.height)
    if args.handedness is not None:
        config.set("body.handedness", args.handedness)
    if args.output_format is not None:
        config.set("output.format", args.output_format)
    if args.debug:
        config.set("output.debug_mode", True)


def run_samples(model: KinematicModel, samples) -> list:
    """IMU 姿勢サンプルを順にモデルへ入力し、各時点の出力を返す"""
    states = []
    for imu_tf in tqdm(samples, desc="Pointing", unit="sample"):
        model.set_imu_transform(imu_tf)
        states.append(model.state)
    return states


def main(argv=None):
    """メイン処理"""
    args = parse_arguments(argv)

    # 初期ロギング設定（設定ファイル読み込み前）
    setup_logging(args.debug)
    logger = logging.getLogger(__name__)

    logger.info("=" * 80)
    logger.info("指差し運動学 起動")
    logger.info("=" * 80)

    try:
        logger.info(f"設定ファイルを読み込んでいます: {args.config}")
        config = ConfigManager(args.config)
        apply_overrides(config, args)
        config.validate()

        # ロギングを再設定（出力ディレクトリを反映）
        output_dir = config.get("output.directory", "output")
        log_path = setup_logging(config.get("output.debug_mode", False), output_dir)
        logger = logging.getLogger(__name__)
        logger.debug(f"ログファイル: {log_path}")

        model = KinematicModel.from_config(config)
        logger.info(
            f"モデルを初期化しました: 身長={model.body_height:.3f}m, "
            f"利き手={model.handedness.value}, サーフェス={model.surface!r}"
        )

        if args.samples:
            samples = load_orientation_samples(args.samples)
            states = run_samples(model, samples)
        else:
            if args.imu_rpy is not None:
                roll, pitch, yaw = args.imu_rpy
                model.set_imu_transform(RigidTransform.from_rpy(roll, pitch, yaw, degrees=True))
            states = [model.state]

        exporter = PointingExporter(output_dir)
        metadata = {
            "body_height_m": model.body_height,
            "handedness": model.handedness.value,
            "surface": model.surface.to_dict(),
        }
        if config.get("output.format", "json") == "csv":
            output_path = exporter.export_csv(states)
        else:
            output_path = exporter.export_json(states, metadata=metadata)

        hits = sum(1 for state in states if state.has_pointer)
        logger.info("=" * 80)
        logger.info(f"処理が正常に完了しました: {len(states)}サンプル, 交点あり {hits}")
        logger.info(f"出力ファイル: {output_path.absolute()}")
        logger.info("=" * 80)

        return 0

    except FileNotFoundError as e:
        logger.error(f"ファイルが見つかりません: {e}")
        return 1
    except ValueError as e:
        logger.error(f"設定エラー: {e}")
        return 1
    except KeyboardInterrupt:
        logger.warning("処理が中断されました")
        return 130


if __name__ == "__main__":
    sys.exit(main())
