"""サーフェスパラメータの名前付きベクトルコンテナ。

キー集合は構築時に固定され、以後は値のみ更新できる。
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import TYPE_CHECKING

import numpy as np

from pointing_kinematics.errors import ArityMismatchError, UnknownParameterError
from pointing_kinematics.transform import as_vector3

if TYPE_CHECKING:
    from numpy.typing import ArrayLike


def _coerce(name: str, value: ArrayLike | None) -> np.ndarray | None:
    if value is None:
        return None
    return as_vector3(value, name)


class ParameterSet:
    """固定キーを持つ 3次元ベクトルの順序付きマッピング。

    値は None（未設定）を取り得る。すべての更新操作は書き込み前に
    入力全体を検証するため、失敗した呼び出しは何も変更しない。

    Attributes:
        names: 宣言順のキー名
    """

    def __init__(self, params: Iterable[tuple[str, ArrayLike | None]]):
        """初期化。

        Args:
            params: (名前, 初期値) の順序付きシーケンス

        Raises:
            ValueError: キーが重複している、または値の形状が不正な場合
        """
        values: dict[str, np.ndarray | None] = {}
        for name, value in params:
            if name in values:
                raise ValueError(f"パラメータ '{name}' が重複しています")
            values[name] = _coerce(name, value)
        self._values = values

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._values)

    def get(self, name: str) -> np.ndarray | None:
        """値を取得する。

        Raises:
            UnknownParameterError: 存在しないキーの場合
        """
        self._check_name(name)
        value = self._values[name]
        return None if value is None else value.copy()

    def set(self, name: str, value: ArrayLike | None) -> None:
        """既存キーの値を置き換える（None で未設定に戻す）。

        Raises:
            UnknownParameterError: 存在しないキーの場合
        """
        self._check_name(name)
        self._values[name] = _coerce(name, value)

    def update_positional(self, values: Sequence[ArrayLike | None]) -> list[str]:
        """宣言順に並んだ値で一括更新する。None の位置は変更しない。

        Args:
            values: キー数と同じ長さの値のシーケンス

        Returns:
            実際に書き込まれたキー名のリスト

        Raises:
            ArityMismatchError: 値の個数がキー数と一致しない場合
        """
        if len(values) != len(self._values):
            raise ArityMismatchError(len(self._values), len(values))

        staged = [
            (name, _coerce(name, value))
            for name, value in zip(self._values, values)
            if value is not None
        ]
        return self._commit(staged)

    def update_keyed(
        self,
        pairs: Mapping[str, ArrayLike | None] | Iterable[tuple[str, ArrayLike | None]],
    ) -> list[str]:
        """(名前, 値) の組で一括更新する。None の値は無視する。

        Returns:
            実際に書き込まれたキー名のリスト

        Raises:
            UnknownParameterError: 存在しないキーが含まれる場合
        """
        items = pairs.items() if isinstance(pairs, Mapping) else pairs

        staged = []
        for name, value in items:
            self._check_name(name)
            if value is not None:
                staged.append((name, _coerce(name, value)))
        return self._commit(staged)

    def as_dict(self) -> dict[str, np.ndarray | None]:
        """現在値のコピーを辞書で返す。"""
        return {name: self.get(name) for name in self._values}

    def _commit(self, staged: list[tuple[str, np.ndarray]]) -> list[str]:
        for name, value in staged:
            self._values[name] = value
        return [name for name, _ in staged]

    def _check_name(self, name: str) -> None:
        if name not in self._values:
            raise UnknownParameterError(name)

    def __getitem__(self, name: str) -> np.ndarray | None:
        return self.get(name)

    def __setitem__(self, name: str, value: ArrayLike | None) -> None:
        self.set(name, value)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        items = ", ".join(
            f"{name}={None if value is None else value.tolist()}" for name, value in self._values.items()
        )
        return f"ParameterSet({items})"


class ParameterView(Mapping):
    """ParameterSet の読み取り専用ビュー。

    値の変更はサーフェスの set_parameter / update_parameters を経由する必要がある。
    読み出しは元の ParameterSet と同じくコピーを返す。
    """

    __slots__ = ("_source",)

    def __init__(self, source: ParameterSet):
        self._source = source

    @property
    def names(self) -> tuple[str, ...]:
        return self._source.names

    def get(self, name: str) -> np.ndarray | None:
        """値を取得する。

        Raises:
            UnknownParameterError: 存在しないキーの場合
        """
        return self._source.get(name)

    def as_dict(self) -> dict[str, np.ndarray | None]:
        return self._source.as_dict()

    def __getitem__(self, name: str) -> np.ndarray | None:
        return self._source.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._source

    def __iter__(self) -> Iterator[str]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return f"ParameterView({self._source!r})"
