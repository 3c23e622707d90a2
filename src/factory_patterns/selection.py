"""Selection-key resolution shared by every factory.

Turns a caller-supplied key (an enum member or a string token) into exactly
one member of a closed enum, or fails loudly.

すべてのファクトリで共有する選択キーの解決処理。

呼び出し側が渡したキー（列挙メンバーまたは文字列トークン）を閉じた列挙型の
メンバーにただ一つ対応付け、対応しない場合は明示的に失敗させる。
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class UnknownSelectionKeyError(ValueError):
    """Raised when a selection key is outside the recognized set.

    認識されない選択キーが渡されたときに送出される例外。
    """

    def __init__(self, kind: str, key: object, available: tuple[str, ...]) -> None:
        self.kind = kind
        self.key = key
        self.available = available
        names = ", ".join(available)
        super().__init__(f"Unknown {kind}: {key!r}. Available {kind}s: {names}.")


def available_keys(enum_cls: type[Enum]) -> tuple[str, ...]:
    """Return the accepted string tokens of *enum_cls*.

    Returns:
        Sorted lowercase member names.
            小文字化したメンバー名のソート済みタプル。
    """
    return tuple(sorted(member.name.lower() for member in enum_cls))


def resolve_key(
    enum_cls: type[E],
    key: E | str,
    error_cls: type[UnknownSelectionKeyError] = UnknownSelectionKeyError,
    kind: str = "key",
) -> E:
    """Resolve *key* to a member of *enum_cls*.

    Strings are stripped and compared case-insensitively with the member
    names; the match must be exact. Prefixes, aliases, non-ASCII tokens and
    non-string values are rejected.

    *key* を *enum_cls* のメンバーに解決する。文字列は前後の空白を除去し、
    大文字小文字を区別せずにメンバー名と完全一致で照合する。

    Args:
        enum_cls: Closed set of selection tags.
            選択タグの閉じた集合。
        key: Enum member or string token.
            列挙メンバーまたは文字列トークン。
        error_cls: Error type raised on failure.
            失敗時に送出する例外型。
        kind: Noun used in the error message.
            エラーメッセージで使う名詞。

    Returns:
        The matching enum member.
            一致した列挙メンバー。

    Raises:
        UnknownSelectionKeyError: If *key* does not name a member.
            *key* がどのメンバーにも一致しない場合。
    """
    if isinstance(key, enum_cls):
        return key
    if isinstance(key, str):
        token = key.strip()
        # str.upper() folds some non-ASCII letters onto ASCII ones ("ı" -> "I")
        if token.isascii():
            member = enum_cls.__members__.get(token.upper())
            if member is not None:
                return member
    raise error_cls(kind, key, available_keys(enum_cls))
