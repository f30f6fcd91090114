"""球面サーフェス。

基準点の L1 ノルムを半径とし、レイ前方軸上の半径の位置を交点とする。
厳密なレイ-球交差ではなく方向への射影である。
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from pointing_kinematics.surfaces.base import Surface, heading_transform, l1_norm

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pointing_kinematics.transform import RigidTransform


class Sphere(Surface):
    """レイ始点を中心とする球面。"""

    kind = "sphere"

    def __init__(self, point: ArrayLike | None):
        super().__init__([("point", point)])

    @property
    def point(self) -> np.ndarray | None:
        return self.get_parameter("point")

    @point.setter
    def point(self, value: ArrayLike | None) -> None:
        self.set_parameter("point", value)

    @property
    def radius(self) -> float | None:
        point = self.point
        return None if point is None else l1_norm(point)

    def intersect(self, ray: RigidTransform) -> RigidTransform | None:
        r = l1_norm(self._require("point"))
        hit = ray.apply([r, 0.0, 0.0])
        _, _, yaw = ray.rpy
        return heading_transform(yaw, hit)
