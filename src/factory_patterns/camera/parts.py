"""Manufacturer-specific camera parts.

Each part reports its actions through the injected trace sink; the Canon and
Nikon parts differ only in their label.

メーカー別のカメラ部品。

各部品は注入されたトレースシンクへ動作を報告する。Canon と Nikon の部品は
ラベルのみが異なる。
"""

from __future__ import annotations

from .base import Film, Mirror, Shutter, TracedPart, format_exposure


class _LabelledFilm(TracedPart, Film):
    """Film that reports each step under its label.

    各動作をラベル付きで報告するフィルム。
    """

    def engage(self) -> None:
        """Report ``"<label> has been engaged"``."""
        self._report("engaged")

    def roll(self) -> None:
        """Report ``"<label> has been rolled"``."""
        self._report("rolled")

    def release(self) -> None:
        """Report ``"<label> has been released"``."""
        self._report("released")


class _LabelledMirror(TracedPart, Mirror):
    """Mirror that reports each step under its label.

    各動作をラベル付きで報告するミラー。
    """

    def open(self) -> None:
        """Report ``"<label> has been opened"``."""
        self._report("opened")

    def close(self) -> None:
        """Report ``"<label> has been closed"``."""
        self._report("closed")


class _LabelledShutter(TracedPart, Shutter):
    """Shutter that reports each step under its label.

    各動作をラベル付きで報告するシャッター。
    """

    def set_speed(self, seconds: float) -> None:
        """Report the exposure time in dial notation.

        Args:
            seconds: Exposure time in seconds.
                露光時間（秒）。
        """
        self._trace.emit(f"{self.label} speed has been set to {format_exposure(seconds)}")

    def initialize(self) -> None:
        """Report ``"<label> has been initialized"``."""
        self._report("initialized")

    def activate(self) -> None:
        """Report ``"<label> has been activated"``."""
        self._report("activated")

    def release(self) -> None:
        """Report ``"<label> has been released"``."""
        self._report("released")


class CanonFilm(_LabelledFilm):
    """Canon film transport. Canon 製フィルム送り。"""

    label = "Canon film"


class NikonFilm(_LabelledFilm):
    """Nikon film transport. Nikon 製フィルム送り。"""

    label = "Nikon film"


class CanonMirror(_LabelledMirror):
    """Canon reflex mirror. Canon 製ミラー。"""

    label = "Canon mirror"


class NikonMirror(_LabelledMirror):
    """Nikon reflex mirror. Nikon 製ミラー。"""

    label = "Nikon mirror"


class CanonShutter(_LabelledShutter):
    """Canon shutter. Canon 製シャッター。"""

    label = "Canon shutter"


class NikonShutter(_LabelledShutter):
    """Nikon shutter. Nikon 製シャッター。"""

    label = "Nikon shutter"
