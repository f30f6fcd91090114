"""契約違反を表す例外クラス。

いずれも呼び出し側のプログラミングミスを示すもので、
実行時の通常状態（交点なしなど）には使用しない。
"""


class PointingKinematicsError(Exception):
    """パッケージ共通の基底例外"""


class UnknownParameterError(PointingKinematicsError, KeyError):
    """ParameterSet に存在しないキーが指定された"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"パラメータ '{name}' は存在しません")

    def __str__(self) -> str:
        # KeyError はメッセージを repr で囲むため上書きする
        return self.args[0]


class ArityMismatchError(PointingKinematicsError, ValueError):
    """位置指定の一括更新で値の個数がキー数と一致しない"""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"値の個数が一致しません: 期待値 {expected}, 実際 {actual}")


class MissingParameterError(PointingKinematicsError, ValueError):
    """交差計算に必要なパラメータが未設定"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"パラメータ '{name}' が設定されていません")


class LockedParameterError(PointingKinematicsError, ValueError):
    """固定されたパラメータを変更しようとした"""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"パラメータ '{name}' は固定されているため変更できません")
