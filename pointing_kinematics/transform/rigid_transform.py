"""剛体変換の定義。

回転と並進の組で姿勢を表す。子→親の順に合成できる。

座標系の定義:
    - X: 前方、Y: 左、Z: 上
    - roll/pitch/yaw: 内因性 Z-Y-X 回転（yaw → pitch → roll の順）
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Self

import numpy as np
from scipy.spatial.transform import Rotation

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def as_vector3(value: ArrayLike, name: str = "vector") -> np.ndarray:
    """値を float64 の3次元ベクトルに変換する。

    Args:
        value: 変換対象（長さ3のシーケンスまたは配列）
        name: エラーメッセージ用の名前

    Returns:
        形状 (3,) の配列

    Raises:
        ValueError: 形状が (3,) にならない場合
    """
    vector = np.asarray(value, dtype=np.float64).flatten()
    if vector.shape != (3,):
        raise ValueError(f"{name} must be (3,), got {vector.shape}")
    return vector


class RigidTransform:
    """剛体変換（回転 + 並進）。

    点 p に対して ``R @ p + t`` を適用する。
    合成 ``a * b`` は b を先に適用し、その結果に a を適用する。
    """

    __slots__ = ("_rotation", "_origin")

    def __init__(
        self,
        rotation: Rotation | None = None,
        origin: ArrayLike | None = None,
    ):
        """初期化。

        Args:
            rotation: 回転（None の場合は単位回転）
            origin: 並進 (3,) [meters]（None の場合は原点）
        """
        if rotation is None:
            rotation = Rotation.identity()
        if not isinstance(rotation, Rotation):
            raise TypeError(f"rotation must be scipy Rotation, got {type(rotation).__name__}")
        if not rotation.single:
            raise ValueError("rotation must be a single rotation")

        self._rotation = rotation
        self._origin = np.zeros(3) if origin is None else as_vector3(origin, "origin")

    @classmethod
    def identity(cls) -> Self:
        """単位変換を返す。"""
        return cls()

    @classmethod
    def from_translation(cls, translation: ArrayLike) -> Self:
        """並進のみの変換を作成。"""
        return cls(Rotation.identity(), translation)

    @classmethod
    def from_rpy(
        cls,
        roll: float = 0.0,
        pitch: float = 0.0,
        yaw: float = 0.0,
        origin: ArrayLike | None = None,
        degrees: bool = False,
    ) -> Self:
        """roll/pitch/yaw から変換を作成。

        Args:
            roll: X軸周り回転
            pitch: Y軸周り回転
            yaw: Z軸周り回転
            origin: 並進 (3,)
            degrees: 角度が度数法の場合 True

        Returns:
            RigidTransform インスタンス
        """
        rotation = Rotation.from_euler("ZYX", [yaw, pitch, roll], degrees=degrees)
        return cls(rotation, origin)

    @classmethod
    def from_matrix(cls, matrix: ArrayLike) -> Self:
        """4x4 同次変換行列から作成。"""
        matrix = np.asarray(matrix, dtype=np.float64)
        if matrix.shape != (4, 4):
            raise ValueError(f"matrix must be 4x4, got {matrix.shape}")
        return cls(Rotation.from_matrix(matrix[:3, :3]), matrix[:3, 3])

    @property
    def rotation(self) -> Rotation:
        """回転成分"""
        return self._rotation

    @property
    def origin(self) -> np.ndarray:
        """並進成分 (3,) [meters]"""
        return self._origin.copy()

    @property
    def rpy(self) -> tuple[float, float, float]:
        """回転を (roll, pitch, yaw) [radians] に分解する。"""
        yaw, pitch, roll = self._rotation.as_euler("ZYX")
        return (float(roll), float(pitch), float(yaw))

    def apply(self, points: ArrayLike) -> np.ndarray:
        """点（または点群 (N, 3)）に変換を適用する。

        回転してから並進する。
        """
        return self._rotation.apply(np.asarray(points, dtype=np.float64)) + self._origin

    def inverse(self) -> RigidTransform:
        """逆変換を返す。"""
        inv_rotation = self._rotation.inv()
        return RigidTransform(inv_rotation, -inv_rotation.apply(self._origin))

    def as_matrix(self) -> np.ndarray:
        """4x4 同次変換行列を返す。"""
        matrix = np.eye(4)
        matrix[:3, :3] = self._rotation.as_matrix()
        matrix[:3, 3] = self._origin
        return matrix

    def to_dict(self) -> dict[str, Any]:
        """シリアライズ用の辞書を返す。"""
        roll, pitch, yaw = self.rpy
        return {
            "origin": self._origin.tolist(),
            "quaternion_xyzw": self._rotation.as_quat().tolist(),
            "rpy": [roll, pitch, yaw],
        }

    def __mul__(self, other: RigidTransform) -> RigidTransform:
        if not isinstance(other, RigidTransform):
            return NotImplemented
        return RigidTransform(
            self._rotation * other._rotation,
            self._rotation.apply(other._origin) + self._origin,
        )

    def __repr__(self) -> str:
        roll, pitch, yaw = self.rpy
        x, y, z = self._origin
        return f"RigidTransform(origin=({x:.4f}, {y:.4f}, {z:.4f}), rpy=({roll:.4f}, {pitch:.4f}, {yaw:.4f}))"
