"""Concrete means of transport.

具体的なトランスポート実装。
"""

from __future__ import annotations

from .base import Transport


class Car(Transport):
    """Travel by road.

    自動車による移動。
    """

    def travel(self) -> None:
        """Report ``"Traveling by car!"``."""
        self._trace.emit("Traveling by car!")


class Boat(Transport):
    """Travel by water.

    船による移動。
    """

    def travel(self) -> None:
        """Report ``"Traveling by boat!"``."""
        self._trace.emit("Traveling by boat!")


class Plane(Transport):
    """Travel by air.

    飛行機による移動。
    """

    def travel(self) -> None:
        """Report ``"Traveling by plane!"``."""
        self._trace.emit("Traveling by plane!")
