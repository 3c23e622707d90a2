"""Transport abstraction and factory helpers.

トランスポートの抽象化とファクトリをまとめた公開モジュール。
"""

from .base import Transport, UnknownTransportError
from .factory import TransportType, available_transports, create_transport
from .vehicles import Boat, Car, Plane

__all__ = [
    "Boat",
    "Car",
    "Plane",
    "Transport",
    "TransportType",
    "UnknownTransportError",
    "available_transports",
    "create_transport",
]
