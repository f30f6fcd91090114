"""円柱サーフェス。

注意: 交点の計算は円柱の軸が鉛直（Z軸方向）であることを前提とした近似。
半径の計算には L1 ノルム（成分の絶対値の和）を使用する。
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pointing_kinematics.surfaces.base import EPSILON, Surface, backward_direction, heading_transform, l1_norm

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pointing_kinematics.transform import RigidTransform

logger = logging.getLogger(__name__)


class Cylinder(Surface):
    """レイ始点を囲む円柱。

    Attributes:
        axis: 円柱の単位軸ベクトル
        point: 円柱面上の基準点 [meters]（軸からのオフセットが半径になる）
    """

    kind = "cylinder"
    DIRECTION_PARAMETERS = frozenset({"axis"})

    def __init__(self, axis: ArrayLike | None, point: ArrayLike | None):
        super().__init__([("axis", axis), ("point", point)])

    @property
    def axis(self) -> np.ndarray | None:
        return self.get_parameter("axis")

    @axis.setter
    def axis(self, value: ArrayLike | None) -> None:
        self.set_parameter("axis", value)

    @property
    def point(self) -> np.ndarray | None:
        return self.get_parameter("point")

    @point.setter
    def point(self, value: ArrayLike | None) -> None:
        self.set_parameter("point", value)

    @property
    def radius(self) -> float | None:
        """基準点の軸からのオフセット（L1 ノルム）"""
        axis = self.axis
        point = self.point
        if axis is None or point is None:
            return None
        return self._radius(axis, point)

    @staticmethod
    def _radius(axis: np.ndarray, point: np.ndarray) -> float:
        # 基準点を軸に射影し、その差分を半径とする
        return l1_norm(point - np.dot(point, axis) * axis)

    def intersect(self, ray: RigidTransform) -> RigidTransform | None:
        axis = self._require("axis")
        point = self._require("point")

        u = backward_direction(ray)
        if l1_norm(np.cross(u, axis)) <= EPSILON:
            # レイが円柱の軸と平行
            logger.debug("Ray is parallel to the cylinder axis")
            return None

        r = self._radius(axis, point)
        _, pitch, yaw = ray.rpy

        # TODO: 鉛直以外の軸に対応するにはレイと円柱面の二次方程式を解く必要がある
        offset = np.array([r * math.cos(yaw), r * math.sin(yaw), -r * math.tan(pitch)])
        return heading_transform(yaw, ray.origin + offset)
