"""Trace sinks that receive the descriptive output of every variant.

Variants never print directly; they are handed a sink at construction time so
callers (and tests) decide where the text goes.

各バリアントの説明出力を受け取るトレースシンク。

バリアントは直接 print せず、生成時に渡されたシンクへ出力する。出力先は
呼び出し側（およびテスト）が決める。
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Protocol, TextIO, runtime_checkable

from .selection import UnknownSelectionKeyError, resolve_key


@runtime_checkable
class TraceSink(Protocol):
    """Anything that accepts one line of trace text.

    1 行分のトレース文字列を受け取るオブジェクト。
    """

    def emit(self, message: str) -> None:
        """Receive one line of trace text."""
        ...


class ConsoleTrace:
    """Write each message as a line on a text stream.

    ``stream`` を省略した場合は出力時点の ``sys.stdout`` に書き込む。
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    def emit(self, message: str) -> None:
        """Write *message* followed by a newline."""
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(f"{message}\n")


class RecordingTrace:
    """Keep emitted messages in memory, in order.

    出力されたメッセージを順番どおりメモリに保持する。
    """

    def __init__(self) -> None:
        self.messages: list[str] = []

    def emit(self, message: str) -> None:
        """Append *message* to :attr:`messages`."""
        self.messages.append(message)

    def clear(self) -> None:
        """Forget every recorded message."""
        self.messages.clear()


class LoggingTrace:
    """Forward messages to a :mod:`logging` logger."""

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self._logger = logger if logger is not None else logging.getLogger("factory_patterns.trace")
        self._level = level

    def emit(self, message: str) -> None:
        """Log *message* at the configured level."""
        self._logger.log(self._level, message)


class TraceKind(Enum):
    """Trace sink names accepted by :func:`create_trace`.

    :func:`create_trace` が受け付けるシンク名。
    """

    CONSOLE = "console"
    LOGGING = "logging"
    RECORDING = "recording"


class UnknownTraceSinkError(UnknownSelectionKeyError):
    """Raised when the configured trace sink name is not registered."""


_SINKS: dict[TraceKind, type] = {
    TraceKind.CONSOLE: ConsoleTrace,
    TraceKind.LOGGING: LoggingTrace,
    TraceKind.RECORDING: RecordingTrace,
}


def create_trace(kind: TraceKind | str = TraceKind.CONSOLE, **kwargs) -> TraceSink:
    """Build a trace sink from its configuration token.

    設定トークンからトレースシンクを生成する。

    Args:
        kind: ``console``, ``logging`` or ``recording``.
            ``console``、``logging``、``recording`` のいずれか。
        **kwargs: Passed to the sink constructor.
            シンクのコンストラクタに渡す引数。

    Raises:
        UnknownTraceSinkError: If *kind* is not a known sink.
            *kind* が未登録のシンク名の場合。
    """
    sink_cls = _SINKS[resolve_key(TraceKind, kind, UnknownTraceSinkError, "trace sink")]
    return sink_cls(**kwargs)
