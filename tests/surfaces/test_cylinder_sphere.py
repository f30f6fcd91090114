"""Cylinder / Sphere のテスト。"""

import math

import numpy as np
import pytest

from pointing_kinematics.errors import MissingParameterError
from pointing_kinematics.surfaces import Cylinder, Sphere, l1_norm
from pointing_kinematics.transform import RigidTransform


def test_l1_norm():
    """成分の絶対値の和"""
    assert l1_norm(np.array([1.0, -2.0, 3.0])) == pytest.approx(6.0)


class TestCylinder:
    """Cylinderのテスト"""

    def test_radius_from_reference_point(self):
        """半径は基準点の軸からのオフセット"""
        cylinder = Cylinder(axis=(0.0, 0.0, 1.0), point=(2.0, 0.0, 5.0))

        assert cylinder.radius == pytest.approx(2.0)

    def test_radius_uses_l1_norm(self):
        """半径は L1 ノルムで計算される"""
        cylinder = Cylinder(axis=(0.0, 0.0, 1.0), point=(1.0, 1.0, 0.0))

        assert cylinder.radius == pytest.approx(2.0)

    def test_axis_is_normalized(self):
        """軸は正規化される"""
        cylinder = Cylinder(axis=(0.0, 0.0, 4.0), point=(2.0, 0.0, 0.0))

        np.testing.assert_allclose(cylinder.axis, [0.0, 0.0, 1.0])

    def test_vertical_cylinder_hit(self):
        """鉛直な円柱との交点"""
        cylinder = Cylinder(axis=(0.0, 0.0, 1.0), point=(2.0, 0.0, 0.0))
        ray = RigidTransform.from_rpy(pitch=0.2, yaw=0.5, origin=(0.0, 0.0, 1.5))

        pointer = cylinder.intersect(ray)

        assert pointer is not None
        expected = [2.0 * math.cos(0.5), 2.0 * math.sin(0.5), 1.5 - 2.0 * math.tan(0.2)]
        np.testing.assert_allclose(pointer.origin, expected, atol=1e-9)
        assert math.hypot(pointer.origin[0], pointer.origin[1]) == pytest.approx(2.0)

    def test_orientation_is_ray_heading(self):
        """交点の向きはレイの yaw"""
        cylinder = Cylinder(axis=(0.0, 0.0, 1.0), point=(2.0, 0.0, 0.0))
        ray = RigidTransform.from_rpy(pitch=-0.1, yaw=2.5, origin=(0.0, 0.0, 1.5))

        pointer = cylinder.intersect(ray)

        assert pointer is not None
        assert pointer.rpy == pytest.approx((0.0, 0.0, 2.5))

    def test_ray_parallel_to_axis_returns_none(self):
        """軸と平行なレイは交点なし"""
        cylinder = Cylinder(axis=(1.0, 0.0, 0.0), point=(0.0, 2.0, 0.0))
        ray = RigidTransform.from_translation([0.0, 0.0, 1.5])

        assert cylinder.intersect(ray) is None

    def test_missing_axis_raises(self):
        """軸が未設定の場合はエラー"""
        cylinder = Cylinder(axis=None, point=(2.0, 0.0, 0.0))

        assert cylinder.radius is None
        with pytest.raises(MissingParameterError):
            cylinder.intersect(RigidTransform.identity())


class TestSphere:
    """Sphereのテスト"""

    @pytest.mark.parametrize(
        "rpy",
        [(0.0, 0.0, 0.0), (0.0, 0.4, 1.0), (0.2, -0.7, -2.0)],
    )
    def test_hit_at_radius_along_ray(self, rpy):
        """交点はレイ前方軸上で始点から半径の距離"""
        sphere = Sphere(point=(1.0, 0.0, 0.0))
        ray = RigidTransform.from_rpy(*rpy, origin=(0.5, -0.5, 1.6))

        pointer = sphere.intersect(ray)

        assert pointer is not None
        assert np.linalg.norm(pointer.origin - ray.origin) == pytest.approx(1.0)
        np.testing.assert_allclose(pointer.origin, ray.apply([1.0, 0.0, 0.0]), atol=1e-12)

    def test_radius_uses_l1_norm(self):
        """半径は基準点の L1 ノルム"""
        sphere = Sphere(point=(1.0, -1.0, 0.5))
        ray = RigidTransform.from_translation([0.0, 0.0, 1.0])

        pointer = sphere.intersect(ray)

        assert sphere.radius == pytest.approx(2.5)
        np.testing.assert_allclose(pointer.origin, [2.5, 0.0, 1.0])

    def test_orientation_is_ray_heading(self):
        """交点の向きはレイの yaw のみ"""
        sphere = Sphere(point=(2.0, 0.0, 0.0))
        ray = RigidTransform.from_rpy(0.3, 0.4, -1.1)

        pointer = sphere.intersect(ray)

        assert pointer.rpy == pytest.approx((0.0, 0.0, -1.1))

    def test_missing_point_raises(self):
        """基準点が未設定の場合はエラー"""
        sphere = Sphere(point=None)

        with pytest.raises(MissingParameterError):
            sphere.intersect(RigidTransform.identity())
