"""Base interface for means of transport.

トランスポート（移動手段）の基底インターフェース。
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..selection import UnknownSelectionKeyError
from ..trace import TraceSink


class UnknownTransportError(UnknownSelectionKeyError):
    """Raised when a transport kind is not registered.

    未登録のトランスポート種別が指定されたときに送出される例外。
    """


class Transport(ABC):
    """Abstract means of transport.

    抽象トランスポート。すべての実装は :meth:`travel` を提供する。
    """

    def __init__(self, trace: TraceSink) -> None:
        """Initialize transport with the sink it reports to.

        Args:
            trace: Sink that receives travel messages.
                移動メッセージを受け取るシンク。
        """
        self._trace = trace

    @abstractmethod
    def travel(self) -> None:
        """Report one trip."""
