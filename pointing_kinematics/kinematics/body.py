"""身体寸法と利き手の定義。

身長 1.835 m の基準人体の寸法を、身長比で線形にスケーリングする。
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
import math
from typing import Self

# 基準身長 [meters]
REFERENCE_BODY_HEIGHT = 1.835

# 基準身長での各寸法 [meters]
REFERENCE_SHOULDER_HEIGHT = 1.47
REFERENCE_SHOULDER_TO_NECK = 0.18
REFERENCE_SHOULDER_TO_EYES = 0.22
REFERENCE_SHOULDER_TO_WRIST = 0.51
REFERENCE_WRIST_TO_FINGER = 0.18


class Handedness(str, Enum):
    """指差しに使う手。"""

    IGNORE = "ignore"
    LEFT_HAND = "left"
    RIGHT_HAND = "right"

    @property
    def lateral_sign(self) -> float:
        """首から肩への横方向（Y軸）オフセットの符号"""
        return _LATERAL_SIGNS[self]

    @classmethod
    def parse(cls, value: str | Handedness) -> Handedness:
        """文字列から Handedness を取得。

        'left', 'left_hand', 'leftHand' などの表記を受け付ける（大文字小文字は区別しない）。

        Raises:
            ValueError: 解釈できない値の場合
        """
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower().replace("_", "").replace("-", "")
        if key.endswith("hand"):
            key = key[: -len("hand")]
        for member in cls:
            if member.value == key:
                return member
        raise ValueError(f"handedness は 'ignore', 'left', 'right' のいずれかである必要があります: {value!r}")


_LATERAL_SIGNS = {
    Handedness.IGNORE: 0.0,
    Handedness.LEFT_HAND: 1.0,
    Handedness.RIGHT_HAND: -1.0,
}


@dataclass(frozen=True)
class BodyProportions:
    """身長から導出される人体寸法。

    Attributes:
        body_height: 身長 [meters]
        shoulder_height: 床から肩（首の付け根）までの高さ [meters]
        shoulder_to_neck: 首から肩関節までの横方向距離 [meters]
        shoulder_to_eyes: 肩の高さから目までの高さ [meters]
        shoulder_to_wrist: 肩から手首までの距離 [meters]
        wrist_to_finger: 手首から指先までの距離 [meters]
    """

    body_height: float
    shoulder_height: float
    shoulder_to_neck: float
    shoulder_to_eyes: float
    shoulder_to_wrist: float
    wrist_to_finger: float

    @classmethod
    def from_body_height(cls, body_height: float) -> Self:
        """身長から寸法を計算。

        Args:
            body_height: 身長 [meters]

        Returns:
            BodyProportions インスタンス

        Raises:
            ValueError: 身長が正の有限値でない場合
        """
        body_height = float(body_height)
        if not math.isfinite(body_height) or body_height <= 0:
            raise ValueError(f"body_height は正の数値である必要があります: {body_height}")

        scale = body_height / REFERENCE_BODY_HEIGHT
        return cls(
            body_height=body_height,
            shoulder_height=REFERENCE_SHOULDER_HEIGHT * scale,
            shoulder_to_neck=REFERENCE_SHOULDER_TO_NECK * scale,
            shoulder_to_eyes=REFERENCE_SHOULDER_TO_EYES * scale,
            shoulder_to_wrist=REFERENCE_SHOULDER_TO_WRIST * scale,
            wrist_to_finger=REFERENCE_WRIST_TO_FINGER * scale,
        )

    @property
    def scale(self) -> float:
        """基準身長に対する比率"""
        return self.body_height / REFERENCE_BODY_HEIGHT

    @property
    def arm_length(self) -> float:
        """肩から指先までの長さ [meters]"""
        return self.shoulder_to_wrist + self.wrist_to_finger
