"""Factory pattern demonstrations: a camera built from parts and a set of
transports, each created through a single selector function.

ファクトリパターンのデモ。部品から組み立てるカメラとトランスポートを、
それぞれ単一のセレクタ関数で生成する。
"""

from .camera import CameraMaker, UnknownCameraError, available_cameras, create_camera
from .selection import UnknownSelectionKeyError
from .trace import ConsoleTrace, LoggingTrace, RecordingTrace, TraceSink, create_trace
from .transport import TransportType, UnknownTransportError, available_transports, create_transport

__all__ = [
    "CameraMaker",
    "ConsoleTrace",
    "LoggingTrace",
    "RecordingTrace",
    "TraceSink",
    "TransportType",
    "UnknownCameraError",
    "UnknownSelectionKeyError",
    "UnknownTransportError",
    "available_cameras",
    "available_transports",
    "create_camera",
    "create_trace",
    "create_transport",
]
