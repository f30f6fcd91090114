"""平面サーフェス。

法線 n と平面上の点 p で定義される平面とレイの交点を計算する。
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

import numpy as np

from pointing_kinematics.surfaces.base import EPSILON, Surface, backward_direction, heading_transform

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

    from pointing_kinematics.transform import RigidTransform

logger = logging.getLogger(__name__)


class Plane(Surface):
    """任意の向きの平面。

    Attributes:
        normal: 平面の単位法線ベクトル
        point: 平面上の基準点 [meters]
    """

    kind = "plane"
    DIRECTION_PARAMETERS = frozenset({"normal"})

    def __init__(
        self,
        normal: ArrayLike | None,
        point: ArrayLike | None,
        *,
        lock_normal: bool = False,
    ):
        """初期化。

        Args:
            normal: 法線ベクトル（正規化される）
            point: 平面上の点
            lock_normal: True の場合、以後の法線の変更を禁止する
        """
        super().__init__(
            [("normal", normal), ("point", point)],
            locked=("normal",) if lock_normal else (),
        )

    @property
    def normal(self) -> np.ndarray | None:
        return self.get_parameter("normal")

    @normal.setter
    def normal(self, value: ArrayLike | None) -> None:
        self.set_parameter("normal", value)

    @property
    def point(self) -> np.ndarray | None:
        return self.get_parameter("point")

    @point.setter
    def point(self, value: ArrayLike | None) -> None:
        self.set_parameter("point", value)

    def intersect(self, ray: RigidTransform) -> RigidTransform | None:
        n = self._require("normal")
        p = self._require("point")

        u = backward_direction(ray)
        w = ray.origin - p

        denominator = float(np.dot(n, u))
        numerator = -float(np.dot(n, w))

        if abs(denominator) <= EPSILON:
            # レイが平面と平行
            logger.debug("Ray is parallel to the plane")
            return None

        s = numerator / denominator
        if s >= 0.0:
            # 交点がレイの後方
            logger.debug(f"Plane intersection behind the ray origin (s={s:.4f})")
            return None

        hit = ray.origin + s * u
        return heading_transform(math.atan2(hit[1], hit[0]), hit)


class HorizontalPlane(Plane):
    """法線が鉛直上向き (0, 0, 1) に固定された平面（床・テーブル面など）。"""

    kind = "horizontal_plane"

    def __init__(self, point: ArrayLike | None):
        """初期化。

        Args:
            point: 平面上の点（高さ z のみが交点に影響する）
        """
        super().__init__((0.0, 0.0, 1.0), point, lock_normal=True)
