"""指差し運動学モデル。

身長・利き手・IMU姿勢から指差しレイを求め、ターゲットサーフェスとの
交点（ポインタ）を計算する。入力が更新されるたびにチェーン全体を再計算する。
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import math
from typing import TYPE_CHECKING, Any

import numpy as np
from scipy.spatial.transform import Rotation

from pointing_kinematics.kinematics.body import BodyProportions, Handedness
from pointing_kinematics.kinematics.chain import KinematicChain
from pointing_kinematics.surfaces import surface_from_config
from pointing_kinematics.transform import RigidTransform

if TYPE_CHECKING:
    from pointing_kinematics.config import ConfigManager
    from pointing_kinematics.surfaces import Surface

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PointingState:
    """モデル出力のスナップショット。

    Attributes:
        ray: 指差しレイ（原点 = 目、X軸 = 指差し方向）
        pointer: サーフェス上の交点、無効時は None
        finger: 指先の姿勢
        eyes: 目の姿勢
    """

    ray: RigidTransform | None
    pointer: RigidTransform | None
    finger: RigidTransform | None
    eyes: RigidTransform | None

    @property
    def has_pointer(self) -> bool:
        return self.pointer is not None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ray": None if self.ray is None else self.ray.to_dict(),
            "pointer": None if self.pointer is None else self.pointer.to_dict(),
            "finger": None if self.finger is None else self.finger.to_dict(),
            "eyes": None if self.eyes is None else self.eyes.to_dict(),
        }


def ray_from_points(eyes_position: np.ndarray, finger_position: np.ndarray) -> RigidTransform:
    """目から指先へ向かうレイを作成。

    レイの回転は yaw → pitch の順に合成し、roll は常に 0。

    Args:
        eyes_position: 目の位置 (3,)
        finger_position: 指先の位置 (3,)

    Returns:
        原点が目の位置、X軸が指差し方向の変換
    """
    direction = finger_position - eyes_position
    direction = direction / np.linalg.norm(direction)

    yaw_rotation = Rotation.from_euler("z", math.atan2(direction[1], direction[0]))
    yawed_forward = yaw_rotation.apply([1.0, 0.0, 0.0])
    pitch = math.atan2(-direction[2], float(np.dot(direction, yawed_forward)))
    pitch_rotation = Rotation.from_euler("y", pitch)

    return RigidTransform(yaw_rotation * pitch_rotation, eyes_position)


class KinematicModel:
    """指差し運動学モデル。

    サーフェスは構築時に接続され、パラメータ変更時にこのモデルへ通知する。
    モデルはサーフェスを所有し、サーフェス側はモデルを弱参照で保持する。
    """

    def __init__(
        self,
        body_height: float,
        surface: Surface,
        handedness: Handedness | str = Handedness.IGNORE,
    ):
        """初期化。

        Args:
            body_height: 身長 [meters]
            surface: ターゲットサーフェス
            handedness: 指差しに使う手

        Raises:
            ValueError: 身長が不正、またはサーフェスが別のモデルに接続済みの場合
        """
        self._proportions = BodyProportions.from_body_height(body_height)
        self._handedness = Handedness.parse(handedness)

        self._world_tf = RigidTransform.identity()
        self._imu_tf = RigidTransform.identity()

        self._chain: KinematicChain
        self._ray_tf: RigidTransform | None = None
        self._pointer_tf: RigidTransform | None = None
        self._finger_tf: RigidTransform | None = None
        self._eyes_tf: RigidTransform | None = None

        self._surface = surface
        surface.attach(self)

        logger.debug(
            f"KinematicModel initialized: body_height={self._proportions.body_height:.3f}, "
            f"handedness={self._handedness.value}, surface={surface!r}"
        )

        self.update_model()

    @classmethod
    def from_config(cls, config: ConfigManager) -> KinematicModel:
        """設定から KinematicModel を作成。

        Args:
            config: ConfigManager インスタンス

        Returns:
            KinematicModel インスタンス
        """
        surface = surface_from_config(config.get_section("surface"))
        model = cls(
            body_height=float(config.get("body.height_m")),
            surface=surface,
            handedness=config.get("body.handedness", Handedness.IGNORE.value),
        )

        world = config.get_section("world")
        if world:
            model.set_world_transform(
                RigidTransform.from_rpy(
                    yaw=float(world.get("yaw_deg", 0.0)),
                    origin=[
                        float(world.get("x_m", 0.0)),
                        float(world.get("y_m", 0.0)),
                        float(world.get("z_m", 0.0)),
                    ],
                    degrees=True,
                )
            )

        imu = config.get_section("imu")
        if imu:
            model.set_imu_transform(
                RigidTransform.from_rpy(
                    roll=float(imu.get("roll_deg", 0.0)),
                    pitch=float(imu.get("pitch_deg", 0.0)),
                    yaw=float(imu.get("yaw_deg", 0.0)),
                    degrees=True,
                )
            )

        return model

    @property
    def body_height(self) -> float:
        return self._proportions.body_height

    @property
    def proportions(self) -> BodyProportions:
        return self._proportions

    @property
    def handedness(self) -> Handedness:
        return self._handedness

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def chain(self) -> KinematicChain:
        """現在の運動学チェーン"""
        return self._chain

    @property
    def world_transform(self) -> RigidTransform:
        return self._world_tf

    @property
    def imu_transform(self) -> RigidTransform:
        return self._imu_tf

    @property
    def ray(self) -> RigidTransform | None:
        """指差しレイ"""
        return self._ray_tf

    @property
    def pointer(self) -> RigidTransform | None:
        """サーフェス上の指示点（交点がない場合は None）"""
        return self._pointer_tf

    @property
    def finger(self) -> RigidTransform | None:
        """指先の姿勢"""
        return self._finger_tf

    @property
    def eyes(self) -> RigidTransform | None:
        """目の姿勢"""
        return self._eyes_tf

    @property
    def state(self) -> PointingState:
        return PointingState(
            ray=self._ray_tf,
            pointer=self._pointer_tf,
            finger=self._finger_tf,
            eyes=self._eyes_tf,
        )

    def set_world_transform(self, tf: RigidTransform) -> None:
        """ワールド座標系での人物の姿勢を設定し、再計算する。"""
        self._world_tf = tf
        self.update_model()

    def set_imu_transform(self, tf: RigidTransform) -> None:
        """IMU の姿勢を設定し、再計算する。"""
        self._imu_tf = tf
        self.update_model()

    def set_handedness(self, handedness: Handedness | str) -> None:
        """指差しに使う手を変更し、再計算する。"""
        self._handedness = Handedness.parse(handedness)
        self.update_model()

    def on_surface_parameter_changed(self, name: str, value: np.ndarray | None) -> None:
        """サーフェスのパラメータ変更通知。"""
        logger.debug(f"Surface parameter '{name}' changed to {None if value is None else value.tolist()}")
        self.update_model()

    def update_model(self) -> None:
        """現在の入力からチェーン・レイ・ポインタをすべて再計算する。"""
        chain = KinematicChain.build(self._proportions, self._handedness, self._imu_tf)

        finger_tf = chain.finger_pose()
        eyes_tf = chain.eyes_pose()
        ray_tf = ray_from_points(eyes_tf.origin, finger_tf.origin)

        # 交差計算が失敗した場合は直前の出力をすべて保持する
        pointer_tf = self._surface.intersect(ray_tf)

        self._chain = chain
        self._ray_tf = ray_tf
        self._pointer_tf = pointer_tf
        self._finger_tf = finger_tf
        self._eyes_tf = eyes_tf

        if not logger.isEnabledFor(logging.DEBUG):
            return
        if pointer_tf is None:
            logger.debug(f"No intersection with {type(self._surface).__name__}: ray={ray_tf!r}")
        else:
            logger.debug(f"Pointer updated: {pointer_tf!r}")
