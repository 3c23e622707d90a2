"""Transport factory.

Maps transport tokens such as ``"car"`` to concrete transport classes.

トランスポートのファクトリ。

``"car"`` などのトークンを具体的な実装クラスに解決する。
"""

from __future__ import annotations

import logging
from enum import Enum

from ..selection import available_keys, resolve_key
from ..trace import ConsoleTrace, TraceSink
from .base import Transport, UnknownTransportError
from .vehicles import Boat, Car, Plane

logger = logging.getLogger(__name__)


class TransportType(Enum):
    """Registered transport kinds.

    登録済みのトランスポート種別。
    """

    CAR = "car"
    BOAT = "boat"
    PLANE = "plane"


_TRANSPORTS: dict[TransportType, type[Transport]] = {
    TransportType.CAR: Car,
    TransportType.BOAT: Boat,
    TransportType.PLANE: Plane,
}


def available_transports() -> tuple[str, ...]:
    """Return registered transport names.

    Returns:
        Sorted transport names.
            利用可能なトランスポート名のソート済みタプル。
    """
    return available_keys(TransportType)


def create_transport(kind: TransportType | str, trace: TraceSink | None = None) -> Transport:
    """Instantiate a new transport for *kind*.

    Args:
        kind: :class:`TransportType` member or its name (case-insensitive,
            exact match).
            :class:`TransportType` のメンバーまたはその名前（大文字小文字を
            区別しない完全一致）。
        trace: Sink that receives travel messages. Defaults to stdout.
            移動メッセージを受け取るシンク。デフォルトは標準出力。

    Returns:
        Concrete transport instance.
            具体的なトランスポートインスタンス。

    Raises:
        UnknownTransportError: If *kind* is not registered.
            *kind* が未登録の場合。
    """
    resolved = resolve_key(TransportType, kind, UnknownTransportError, "transport")
    transport_cls = _TRANSPORTS[resolved]
    logger.debug("Creating %s for %r", transport_cls.__name__, kind)
    return transport_cls(trace if trace is not None else ConsoleTrace())
