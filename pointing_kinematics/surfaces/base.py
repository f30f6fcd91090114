"""ターゲットサーフェスの共通インターフェース。

各サーフェスは ParameterSet を1つ保持し、指差しレイとの交点を計算する。
パラメータが変更されると、接続されたモデル（オブザーバ）へ同期的に通知する。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
import logging
from typing import TYPE_CHECKING, Any, ClassVar, Protocol
import weakref

import numpy as np

from pointing_kinematics.errors import (
    ArityMismatchError,
    LockedParameterError,
    MissingParameterError,
    UnknownParameterError,
)
from pointing_kinematics.surfaces.parameters import ParameterSet, ParameterView
from pointing_kinematics.transform import RigidTransform, as_vector3

if TYPE_CHECKING:
    from numpy.typing import ArrayLike

logger = logging.getLogger(__name__)

# 倍精度の計算機イプシロン
EPSILON = float(np.finfo(np.float64).eps)

FORWARD_AXIS = np.array([1.0, 0.0, 0.0])


def l1_norm(vector: np.ndarray) -> float:
    """成分の絶対値の和を返す。"""
    return float(np.sum(np.abs(vector)))


def backward_direction(ray: RigidTransform) -> np.ndarray:
    """レイの前方軸と逆向きの単位ベクトルを返す。"""
    return ray.origin - ray.apply(FORWARD_AXIS)


def heading_transform(yaw: float, position: np.ndarray) -> RigidTransform:
    """水平面内の向き（yaw のみ）を持つ変換を作成。"""
    return RigidTransform.from_rpy(0.0, 0.0, yaw, origin=position)


class SurfaceObserver(Protocol):
    """サーフェスのパラメータ変更通知を受け取るポート。"""

    def on_surface_parameter_changed(self, name: str, value: np.ndarray | None) -> None:
        """パラメータ name が value に更新された。"""


class Surface(ABC):
    """ターゲットサーフェスの基底クラス。

    Attributes:
        kind: 設定ファイルで使用する種別名
        DIRECTION_PARAMETERS: 単位ベクトルに正規化されるパラメータ名
    """

    kind: ClassVar[str]
    DIRECTION_PARAMETERS: ClassVar[frozenset[str]] = frozenset()

    def __init__(
        self,
        params: Iterable[tuple[str, ArrayLike | None]],
        locked: Iterable[str] = (),
    ):
        """初期化。

        Args:
            params: (名前, 初期値) の順序付きシーケンス
            locked: 変更を禁止するパラメータ名
        """
        self._parameters = ParameterSet((name, self._prepare(name, value)) for name, value in params)
        self._locked = frozenset(locked)
        for name in self._locked:
            if name not in self._parameters:
                raise UnknownParameterError(name)
        self._observer_ref: weakref.ReferenceType[SurfaceObserver] | None = None

    @property
    def parameters(self) -> ParameterView:
        """パラメータの読み取り専用ビュー（変更は set_parameter を使う）"""
        return ParameterView(self._parameters)

    @property
    def locked_parameters(self) -> frozenset[str]:
        return self._locked

    @property
    def observer(self) -> SurfaceObserver | None:
        """接続中のオブザーバ（破棄済みの場合は None）"""
        if self._observer_ref is None:
            return None
        return self._observer_ref()

    def attach(self, observer: SurfaceObserver) -> None:
        """オブザーバを接続する。オブザーバへの参照は弱参照で保持する。

        Raises:
            ValueError: 別のオブザーバが既に接続されている場合
        """
        current = self.observer
        if current is not None and current is not observer:
            raise ValueError(f"{type(self).__name__} は既に別のモデルに接続されています")
        self._observer_ref = weakref.ref(observer)
        logger.debug(f"{type(self).__name__} attached to {type(observer).__name__}")

    def detach(self) -> None:
        self._observer_ref = None

    def get_parameter(self, name: str) -> np.ndarray | None:
        return self._parameters.get(name)

    def set_parameter(self, name: str, value: ArrayLike | None) -> None:
        """パラメータを更新し、オブザーバへ通知する。

        Args:
            name: パラメータ名
            value: 新しい値（None で未設定）

        Raises:
            UnknownParameterError: 存在しないパラメータの場合
            LockedParameterError: 固定されたパラメータの場合
        """
        if name not in self._parameters:
            raise UnknownParameterError(name)
        if name in self._locked:
            raise LockedParameterError(name)

        self._parameters.set(name, self._prepare(name, value))
        self._notify(name)

    def update_parameters(self, *values: ArrayLike | None, **pairs: ArrayLike | None) -> None:
        """パラメータを一括更新する。

        位置引数は宣言順にすべてのパラメータを指定し、キーワード引数は
        名前で指定する。いずれも None の値は現在値を保持する。
        書き込まれたパラメータごとにオブザーバへ通知する。

        Raises:
            TypeError: 位置引数とキーワード引数を同時に指定した場合
            ArityMismatchError: 位置引数の個数がパラメータ数と一致しない場合
            UnknownParameterError: 存在しないパラメータ名の場合
            LockedParameterError: 固定されたパラメータに値を指定した場合
        """
        if values and pairs:
            raise TypeError("位置引数とキーワード引数は同時に指定できません")

        if values:
            if len(values) != len(self._parameters):
                raise ArityMismatchError(len(self._parameters), len(values))
            items = list(zip(self._parameters.names, values))
        else:
            items = list(pairs.items())

        for name, value in items:
            if name not in self._parameters:
                raise UnknownParameterError(name)
            if value is not None and name in self._locked:
                raise LockedParameterError(name)

        prepared = [(name, self._prepare(name, value)) for name, value in items]
        if values:
            written = self._parameters.update_positional([value for _, value in prepared])
        else:
            written = self._parameters.update_keyed(prepared)

        for name in written:
            self._notify(name)

    def to_dict(self) -> dict[str, Any]:
        """種別と変更可能なパラメータを辞書で返す。"""
        data: dict[str, Any] = {"type": self.kind}
        for name, value in self._parameters.as_dict().items():
            if name in self._locked:
                continue
            data[name] = None if value is None else value.tolist()
        return data

    @abstractmethod
    def intersect(self, ray: RigidTransform) -> RigidTransform | None:
        """レイとの交点の位置と向きを返す。

        Args:
            ray: 指差しレイ（原点 = レイ始点、X軸 = 指差し方向）

        Returns:
            交点の変換、または None（有効な交点がない場合）

        Raises:
            MissingParameterError: 必要なパラメータが未設定の場合
        """

    def _require(self, name: str) -> np.ndarray:
        value = self._parameters.get(name)
        if value is None:
            raise MissingParameterError(name)
        return value

    def _prepare(self, name: str, value: ArrayLike | None) -> np.ndarray | None:
        if value is None:
            return None
        vector = as_vector3(value, name)
        if name in self.DIRECTION_PARAMETERS:
            norm = np.linalg.norm(vector)
            if norm < EPSILON:
                raise ValueError(f"{name} はゼロベクトルにできません")
            vector = vector / norm
        return vector

    def _notify(self, name: str) -> None:
        observer = self.observer
        if observer is None:
            return
        observer.on_surface_parameter_changed(name, self._parameters.get(name))

    def __repr__(self) -> str:
        params = ", ".join(
            f"{name}={None if value is None else np.round(value, 4).tolist()}"
            for name, value in self._parameters.as_dict().items()
        )
        return f"{type(self).__name__}({params})"
