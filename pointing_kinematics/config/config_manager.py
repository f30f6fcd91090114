"""Configuration management module for the pointing kinematics system."""

import copy
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from pointing_kinematics.kinematics.body import Handedness
from pointing_kinematics.surfaces.factory import SURFACE_PARAMETERS

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".yaml", ".yml", ".json")


def _config_format(path: Path) -> str:
    """拡張子から 'json' または 'yaml' を判定する"""
    ext = path.suffix.lower()
    if ext not in SUPPORTED_EXTENSIONS:
        raise ValueError(f"サポートされていないファイル形式: {ext}")
    return "json" if ext == ".json" else "yaml"


class ConfigManager:
    """設定ファイル管理クラス

    YAML/JSON形式の設定ファイルを読み込み、検証し、設定値を提供する。
    ファイルがない場合や空の場合は DEFAULT_CONFIG のコピーを使う。

    Attributes:
        config_path: 設定ファイルのパス
        config: 読み込まれた設定データ
    """

    # 必須項目の定義
    REQUIRED_KEYS = {
        "body": ["height_m"],
        "surface": ["type"],
        "output": ["directory"],
    }

    # デフォルト設定値
    DEFAULT_CONFIG = {
        "body": {
            "height_m": 1.835,
            "handedness": "ignore",
        },
        "surface": {
            "type": "horizontal_plane",
            "point": [0.0, 0.0, 0.0],
        },
        "output": {
            "directory": "output",
            "format": "json",
            "debug_mode": False,
        },
    }

    OUTPUT_FORMATS = ("json", "csv")

    def __init__(self, config_path: str = "config.yaml"):
        """ConfigManagerを初期化する

        Args:
            config_path: 設定ファイルのパス（デフォルト: config.yaml）
        """
        self.config_path = config_path
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        """設定ファイルを読み込む

        Raises:
            ValueError: 拡張子・構文・トップレベルの型が不正な場合
        """
        path = Path(self.config_path)
        if not path.exists():
            logger.warning(f"設定ファイル '{path}' が見つかりません。デフォルト設定を使用します。")
            return copy.deepcopy(self.DEFAULT_CONFIG)

        fmt = _config_format(path)
        try:
            text = path.read_text(encoding="utf-8")
        except OSError as e:
            raise ValueError(f"設定ファイルの読み込みに失敗しました: {e}") from e

        if fmt == "json":
            try:
                config = json.loads(text) if text.strip() else None
            except json.JSONDecodeError as e:
                raise ValueError(f"JSON解析エラー: {e}") from e
        else:
            try:
                config = yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise ValueError(f"YAML解析エラー: {e}") from e

        if config is None:
            logger.warning(f"設定ファイル '{path}' が空です。デフォルト設定を使用します。")
            return copy.deepcopy(self.DEFAULT_CONFIG)
        if not isinstance(config, dict):
            raise ValueError("設定ファイルのトップレベルは辞書型である必要があります。")

        logger.info(f"設定ファイル '{path}' を読み込みました。")
        return config

    def validate(self) -> bool:
        """設定値の妥当性を検証する

        必須項目の存在チェック、型チェック、値の範囲チェックを実行する。

        Returns:
            検証が成功した場合True

        Raises:
            ValueError: 設定値が不正な場合
        """
        for section, required_keys in self.REQUIRED_KEYS.items():
            if section not in self.config:
                raise ValueError(f"必須セクション '{section}' が設定ファイルに存在しません。")

            section_config = self.config[section]
            if not isinstance(section_config, dict):
                raise ValueError(f"セクション '{section}' は辞書型である必要があります。")
            missing = [key for key in required_keys if key not in section_config]
            if missing:
                raise ValueError(f"必須項目 '{section}.{missing[0]}' が設定ファイルに存在しません。")

        self._validate_body_config()
        self._validate_surface_config()

        # imu / world セクションは任意
        if "imu" in self.config:
            self._validate_numeric_section("imu", ["roll_deg", "pitch_deg", "yaw_deg"])
        if "world" in self.config:
            self._validate_numeric_section("world", ["x_m", "y_m", "z_m", "yaw_deg"])

        self._validate_output_config()

        logger.info("設定ファイルの検証が完了しました。")
        return True

    def _validate_body_config(self):
        """body セクションの検証"""
        body_config = self.config["body"]

        height = body_config.get("height_m")
        if isinstance(height, bool) or not isinstance(height, (int, float)) or height <= 0:
            raise ValueError("body.height_m は正の数値である必要があります。")

        if "handedness" in body_config:
            Handedness.parse(body_config["handedness"])

    def _validate_surface_config(self):
        """surface セクションの検証"""
        surface_config = self.config["surface"]

        surface_type = surface_config.get("type")
        if not isinstance(surface_type, str) or surface_type not in SURFACE_PARAMETERS:
            raise ValueError(
                f"surface.type は {', '.join(SURFACE_PARAMETERS)} のいずれかである必要があります。"
            )

        expected = SURFACE_PARAMETERS[surface_type]
        for key in expected:
            if key not in surface_config:
                raise ValueError(f"surface.type '{surface_type}' には surface.{key} が必要です。")
            self._validate_vector(f"surface.{key}", surface_config[key])

        for key in surface_config:
            if key != "type" and key not in expected:
                raise ValueError(f"surface.{key} は surface.type '{surface_type}' では使用できません。")

        for key in ("normal", "axis"):
            if key in surface_config and not any(surface_config[key]):
                raise ValueError(f"surface.{key} はゼロベクトルにできません。")

    def _validate_vector(self, key: str, value: Any):
        if not isinstance(value, list) or len(value) != 3:
            raise ValueError(f"{key} は [x, y, z] 形式の3要素リストである必要があります。")
        if not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in value):
            raise ValueError(f"{key} の各要素は数値である必要があります。")

    def _validate_numeric_section(self, section: str, keys):
        section_config = self.config.get(section)
        if not isinstance(section_config, dict):
            raise ValueError(f"セクション '{section}' は辞書型である必要があります。")
        for key in keys:
            value = section_config.get(key, 0.0)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"{section}.{key} は数値である必要があります。")

    def _validate_output_config(self):
        """output セクションの検証"""
        output_config = self.config["output"]

        if not isinstance(output_config.get("directory"), str):
            raise ValueError("output.directory は文字列である必要があります。")

        if output_config.get("format", "json") not in self.OUTPUT_FORMATS:
            raise ValueError(f"output.format は {', '.join(self.OUTPUT_FORMATS)} のいずれかである必要があります。")

        if not isinstance(output_config.get("debug_mode", False), bool):
            raise ValueError("output.debug_mode はブール値である必要があります。")

    def get(self, key: str, default: Any = None) -> Any:
        """ドット記法（例: 'body.height_m'）で設定値を取得する

        途中のキーが存在しない場合は default を返す。
        """
        node: Any = self.config
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def get_section(self, section: str) -> Dict[str, Any]:
        """設定セクション全体を取得する（存在しない場合は空の辞書）"""
        return self.config.get(section) or {}

    def set(self, key: str, value: Any):
        """ドット記法で設定値を変更する。途中のセクションは必要に応じて作成する。"""
        *parents, leaf = key.split(".")
        node = self.config
        for part in parents:
            node = node.setdefault(part, {})
        node[leaf] = value
        logger.debug(f"設定値を変更しました: {key} = {value}")

    def save(self, output_path: Optional[str] = None):
        """設定をファイルに保存する

        Args:
            output_path: 保存先パス（指定しない場合は元のパスに上書き）

        Raises:
            ValueError: サポートされていない拡張子の場合
            OSError: 書き込みに失敗した場合
        """
        path = Path(output_path or self.config_path)
        fmt = _config_format(path)

        if fmt == "json":
            text = json.dumps(self.config, indent=2, ensure_ascii=False)
        else:
            text = yaml.safe_dump(self.config, default_flow_style=False, allow_unicode=True, sort_keys=False)

        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            logger.error(f"設定ファイルの保存に失敗しました: {e}")
            raise
        logger.info(f"設定ファイルを保存しました: {path}")
