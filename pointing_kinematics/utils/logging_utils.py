"""Logging utilities for the pointing kinematics system."""

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FILENAME = "system.log"


def setup_logging(debug_mode: bool = False, output_dir: str = "output", log_filename: str = LOG_FILENAME) -> Path:
    """ルートロガーにコンソール出力とファイル出力を設定する

    再呼び出し時は既存のハンドラを閉じてから付け替えるため、
    設定ファイル読み込み後に出力ディレクトリを切り替えられる。

    Args:
        debug_mode: デバッグモードの場合True（DEBUG レベルで出力）
        output_dir: ログファイルを置くディレクトリ
        log_filename: ログファイル名

    Returns:
        ログファイルのパス
    """
    level = logging.DEBUG if debug_mode else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    log_path = Path(output_dir) / log_filename
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handlers = [
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(log_path, encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    return log_path
