"""Plane / HorizontalPlane のテスト。"""

import math

import numpy as np
import pytest

from pointing_kinematics.errors import LockedParameterError, MissingParameterError
from pointing_kinematics.surfaces import HorizontalPlane, Plane
from pointing_kinematics.transform import RigidTransform


class TestPlaneIntersection:
    """平面との交差判定のテスト"""

    def test_ray_straight_down_hits_below_origin(self, floor, downward_ray):
        """真下を向いたレイは始点の直下で交差する"""
        pointer = floor.intersect(downward_ray)

        assert pointer is not None
        np.testing.assert_allclose(pointer.origin, [0.0, 0.0, 0.0], atol=1e-9)

    def test_slanted_ray(self, floor):
        """斜め下向きのレイ"""
        # 高さ 1m から 45度下向き → 前方 1m の床面
        ray = RigidTransform.from_rpy(pitch=math.pi / 4, origin=(0.0, 0.0, 1.0))

        pointer = floor.intersect(ray)

        assert pointer is not None
        np.testing.assert_allclose(pointer.origin, [1.0, 0.0, 0.0], atol=1e-9)

    def test_parallel_ray_returns_none(self, floor):
        """平面と平行なレイは交点なし"""
        ray = RigidTransform.from_translation([0.0, 0.0, 1.0])

        assert floor.intersect(ray) is None

    def test_ray_pointing_away_returns_none(self, floor):
        """平面から離れる向きのレイは交点なし"""
        ray = RigidTransform.from_rpy(pitch=-0.3, origin=(0.0, 0.0, 1.0))

        assert floor.intersect(ray) is None

    def test_vertical_wall(self):
        """鉛直な壁との交差"""
        wall = Plane(normal=(-1.0, 0.0, 0.0), point=(3.0, 0.0, 0.0))
        ray = RigidTransform.from_rpy(yaw=0.3, origin=(0.0, 0.0, 1.5))

        pointer = wall.intersect(ray)

        assert pointer is not None
        np.testing.assert_allclose(pointer.origin, [3.0, 3.0 * math.tan(0.3), 1.5], atol=1e-9)

    def test_orientation_is_heading_of_hit_point(self):
        """交点の向きは原点から見た交点の方位角（yaw のみ）"""
        plane = HorizontalPlane(point=(0.0, 0.0, 0.2))
        ray = RigidTransform.from_rpy(pitch=0.6, yaw=-2.0, origin=(1.0, 1.0, 1.7))

        pointer = plane.intersect(ray)

        assert pointer is not None
        hit = pointer.origin
        assert hit[2] == pytest.approx(0.2)
        roll, pitch, yaw = pointer.rpy
        assert roll == pytest.approx(0.0, abs=1e-12)
        assert pitch == pytest.approx(0.0, abs=1e-12)
        assert yaw == pytest.approx(math.atan2(hit[1], hit[0]))

    def test_intersect_does_not_mutate(self, floor, downward_ray):
        """交差計算はパラメータを変更しない"""
        floor.intersect(downward_ray)

        np.testing.assert_allclose(floor.point, [0.0, 0.0, 0.0])
        np.testing.assert_allclose(floor.normal, [0.0, 0.0, 1.0])

    def test_missing_point_raises(self, downward_ray):
        """基準点が未設定の場合はエラー"""
        plane = Plane(normal=(0.0, 0.0, 1.0), point=None)

        with pytest.raises(MissingParameterError):
            plane.intersect(downward_ray)


class TestPlaneParameters:
    """平面パラメータのテスト"""

    def test_normal_is_normalized(self):
        """法線は正規化される"""
        plane = Plane(normal=(0.0, 0.0, 2.0), point=(0.0, 0.0, 0.0))

        np.testing.assert_allclose(plane.normal, [0.0, 0.0, 1.0])

    def test_set_normal_is_normalized(self):
        """設定した法線も正規化される"""
        plane = Plane(normal=(0.0, 0.0, 1.0), point=(0.0, 0.0, 0.0))

        plane.normal = (3.0, 4.0, 0.0)

        np.testing.assert_allclose(plane.normal, [0.6, 0.8, 0.0])

    def test_zero_normal_raises(self):
        """ゼロベクトルの法線はエラー"""
        with pytest.raises(ValueError):
            Plane(normal=(0.0, 0.0, 0.0), point=(0.0, 0.0, 0.0))

    def test_parameter_keys(self):
        """パラメータのキー"""
        plane = Plane(normal=(0.0, 0.0, 1.0), point=(0.0, 0.0, 0.0))

        assert plane.parameters.names == ("normal", "point")
        assert plane.kind == "plane"


class TestHorizontalPlane:
    """HorizontalPlaneのテスト"""

    def test_is_plane_with_vertical_normal(self, floor):
        """鉛直上向きの法線を持つ Plane"""
        assert isinstance(floor, Plane)
        np.testing.assert_allclose(floor.normal, [0.0, 0.0, 1.0])
        assert floor.locked_parameters == frozenset({"normal"})

    def test_normal_is_locked(self, floor):
        """法線は変更できない"""
        with pytest.raises(LockedParameterError):
            floor.normal = (1.0, 0.0, 0.0)

        np.testing.assert_allclose(floor.normal, [0.0, 0.0, 1.0])

    def test_bulk_update_of_normal_is_rejected(self, floor):
        """一括更新でも法線は変更できず、他の値も変更されない"""
        with pytest.raises(LockedParameterError):
            floor.update_parameters((1.0, 0.0, 0.0), (0.0, 0.0, 5.0))

        np.testing.assert_allclose(floor.point, [0.0, 0.0, 0.0])

    def test_point_can_be_moved(self, floor, downward_ray):
        """基準点は変更できる"""
        floor.point = (0.0, 0.0, 0.5)

        pointer = floor.intersect(downward_ray)

        assert pointer is not None
        assert pointer.origin[2] == pytest.approx(0.5)

    def test_to_dict(self, floor):
        """辞書表現には固定された法線を含めない"""
        assert floor.to_dict() == {
            "type": "horizontal_plane",
            "point": [0.0, 0.0, 0.0],
        }
