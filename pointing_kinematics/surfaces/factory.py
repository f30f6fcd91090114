"""サーフェスの生成（種別名 → クラス）。"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pointing_kinematics.surfaces.cylinder import Cylinder
from pointing_kinematics.surfaces.plane import HorizontalPlane, Plane
from pointing_kinematics.surfaces.sphere import Sphere

if TYPE_CHECKING:
    from collections.abc import Mapping

    from pointing_kinematics.surfaces.base import Surface

logger = logging.getLogger(__name__)

SURFACE_TYPES: dict[str, type[Surface]] = {
    Plane.kind: Plane,
    HorizontalPlane.kind: HorizontalPlane,
    Cylinder.kind: Cylinder,
    Sphere.kind: Sphere,
}

# 種別ごとのコンストラクタ引数
SURFACE_PARAMETERS: dict[str, tuple[str, ...]] = {
    Plane.kind: ("normal", "point"),
    HorizontalPlane.kind: ("point",),
    Cylinder.kind: ("axis", "point"),
    Sphere.kind: ("point",),
}


def create_surface(kind: str, **params: Any) -> Surface:
    """種別名からサーフェスを作成。

    Args:
        kind: 'plane', 'horizontal_plane', 'cylinder', 'sphere' のいずれか
        **params: 種別ごとのパラメータ（normal, axis, point）

    Returns:
        Surface インスタンス

    Raises:
        ValueError: 未知の種別、または不足・余分なパラメータがある場合
    """
    key = kind.strip().lower()
    if key not in SURFACE_TYPES:
        raise ValueError(f"未知のサーフェス種別: {kind}（{', '.join(SURFACE_TYPES)} のいずれか）")

    expected = SURFACE_PARAMETERS[key]
    missing = [name for name in expected if name not in params]
    if missing:
        raise ValueError(f"surface '{key}' にはパラメータ {missing} が必要です")
    unexpected = sorted(set(params) - set(expected))
    if unexpected:
        raise ValueError(f"surface '{key}' は {unexpected} を受け付けません")

    surface = SURFACE_TYPES[key](**{name: params[name] for name in expected})
    logger.debug(f"Surface created: {surface!r}")
    return surface


def surface_from_config(config: Mapping[str, Any]) -> Surface:
    """設定辞書（surface セクション）からサーフェスを作成。

    Args:
        config: {'type': ..., 'point': [...], ...} 形式の辞書

    Returns:
        Surface インスタンス
    """
    if "type" not in config:
        raise ValueError("surface.type が指定されていません")
    params = {name: value for name, value in config.items() if name != "type"}
    return create_surface(str(config["type"]), **params)
