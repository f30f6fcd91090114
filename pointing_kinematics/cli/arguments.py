"""Command-line argument parsing."""

import argparse

from pointing_kinematics.kinematics.body import Handedness


def parse_arguments(argv=None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（None の場合は sys.argv を使用）

    Returns:
        パース済み引数
    """
    parser = argparse.ArgumentParser(description="指差し運動学 - 身長とIMU姿勢からターゲット面上の指示点を計算")

    parser.add_argument(
        "--config",
        type=str,
        default="config.yaml",
        help="設定ファイルのパス（デフォルト: config.yaml）",
    )

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    parser.add_argument("--height", type=float, help="身長 [m]（設定ファイルの body.height_m を上書き）")

    parser.add_argument(
        "--handedness",
        choices=[h.value for h in Handedness],
        help="指差しに使う手（設定ファイルの body.handedness を上書き）",
    )

    parser.add_argument(
        "--imu-rpy",
        type=float,
        nargs=3,
        metavar=("ROLL", "PITCH", "YAW"),
        help="単一の IMU 姿勢 [deg]",
    )

    parser.add_argument("--samples", type=str, help="IMU 姿勢サンプルのファイル（CSV または JSON）")

    parser.add_argument(
        "--output-format",
        choices=["json", "csv"],
        help="出力形式（設定ファイルの output.format を上書き）",
    )

    args = parser.parse_args(argv)

    if args.imu_rpy is not None and args.samples is not None:
        parser.error("--imu-rpy と --samples は同時に指定できません")

    return args
