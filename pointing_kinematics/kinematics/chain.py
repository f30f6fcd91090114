"""人体の運動学チェーン。

足元 → 首 → 肩 → 手首 → 指先、および 首 → 目 の剛体変換の組。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

from pointing_kinematics.transform import RigidTransform

if TYPE_CHECKING:
    from pointing_kinematics.kinematics.body import BodyProportions, Handedness


@dataclass(frozen=True)
class KinematicChain:
    """運動学チェーンを構成する5つの変換。

    常に同じ入力（寸法・利き手・IMU姿勢）から一括で構築される。

    Attributes:
        footprint_to_neck: 足元 → 首（鉛直方向に肩の高さ）
        neck_to_eyes: 首 → 目（鉛直方向）
        neck_to_shoulder: 首 → 肩（IMU の回転 + 横方向オフセット）
        shoulder_to_wrist: 肩 → 手首（前方）
        wrist_to_finger: 手首 → 指先（前方）
    """

    footprint_to_neck: RigidTransform
    neck_to_eyes: RigidTransform
    neck_to_shoulder: RigidTransform
    shoulder_to_wrist: RigidTransform
    wrist_to_finger: RigidTransform

    @classmethod
    def build(
        cls,
        proportions: BodyProportions,
        handedness: Handedness,
        imu_transform: RigidTransform,
    ) -> Self:
        """寸法・利き手・IMU姿勢からチェーンを構築。

        Args:
            proportions: 人体寸法
            handedness: 指差しに使う手
            imu_transform: IMU の姿勢（回転成分のみ使用）

        Returns:
            KinematicChain インスタンス
        """
        sign = handedness.lateral_sign
        return cls(
            footprint_to_neck=RigidTransform.from_translation([0.0, 0.0, proportions.shoulder_height]),
            neck_to_eyes=RigidTransform.from_translation([0.0, 0.0, proportions.shoulder_to_eyes]),
            neck_to_shoulder=RigidTransform(
                imu_transform.rotation,
                [0.0, sign * proportions.shoulder_to_neck, 0.0],
            ),
            shoulder_to_wrist=RigidTransform.from_translation([proportions.shoulder_to_wrist, 0.0, 0.0]),
            wrist_to_finger=RigidTransform.from_translation([proportions.wrist_to_finger, 0.0, 0.0]),
        )

    def finger_pose(self) -> RigidTransform:
        """足元座標系での指先の姿勢"""
        return self.footprint_to_neck * self.neck_to_shoulder * self.shoulder_to_wrist * self.wrist_to_finger

    def eyes_pose(self) -> RigidTransform:
        """足元座標系での目の姿勢"""
        return self.footprint_to_neck * self.neck_to_eyes
