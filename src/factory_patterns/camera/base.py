"""Capability contracts and the composite camera.

Defines the film, shutter and mirror contracts so the camera body only ever
depends on behavior, never on a particular manufacturer's parts.

カメラ部品のケイパビリティ契約と合成カメラ。

フィルム・シャッター・ミラーの契約を定義し、カメラ本体が特定メーカーの
部品ではなく振る舞いだけに依存するようにする。
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from math import isfinite
from numbers import Real

from ..selection import UnknownSelectionKeyError
from ..trace import TraceSink


class UnknownCameraError(UnknownSelectionKeyError):
    """Raised when a camera maker is not registered.

    未登録のカメラメーカーが指定されたときに送出される例外。
    """


class Film(ABC):
    """Film transport contract.

    フィルム送りの契約。
    """

    @abstractmethod
    def engage(self) -> None:
        """Engage the film with the take-up spool."""

    @abstractmethod
    def roll(self) -> None:
        """Advance the film by one frame."""

    @abstractmethod
    def release(self) -> None:
        """Release the film after the frame is positioned."""


class Mirror(ABC):
    """Reflex mirror contract.

    レフレックスミラーの契約。
    """

    @abstractmethod
    def open(self) -> None:
        """Flip the mirror up out of the light path."""

    @abstractmethod
    def close(self) -> None:
        """Return the mirror to the viewing position."""


class Shutter(ABC):
    """Shutter contract.

    シャッターの契約。
    """

    @abstractmethod
    def set_speed(self, seconds: float) -> None:
        """Set the exposure time.

        Args:
            seconds: Exposure time in seconds, e.g. ``1/125``.
                露光時間（秒）。例: ``1/125``。
        """

    @abstractmethod
    def initialize(self) -> None:
        """Cock the shutter."""

    @abstractmethod
    def activate(self) -> None:
        """Open the shutter for the set exposure."""

    @abstractmethod
    def release(self) -> None:
        """Close the shutter and return it to rest."""


class TracedPart:
    """Mixin that reports actions under a constant label.

    ``label`` は説明出力専用で、状態は保持しない。
    """

    label: str = "part"

    def __init__(self, trace: TraceSink) -> None:
        self._trace = trace

    def _report(self, action: str) -> None:
        self._trace.emit(f"{self.label} has been {action}")


def check_exposure(seconds: object) -> float:
    """Validate an exposure time.

    Returns:
        *seconds* as a float.
            float に変換した *seconds*。

    Raises:
        ValueError: If *seconds* is not a finite, positive real number.
            *seconds* が有限の正の実数でない場合。
    """
    if isinstance(seconds, bool) or not isinstance(seconds, Real):
        raise ValueError(f"Exposure time must be a number of seconds, got {seconds!r}.")
    if not isfinite(seconds) or seconds <= 0:
        raise ValueError(f"Exposure time must be positive and finite, got {seconds!r}.")
    return float(seconds)


def format_exposure(seconds: float) -> str:
    """Format an exposure time the way it is printed on a shutter dial.

    Returns:
        ``1/N`` below one second, ``Ns`` otherwise.
            1 秒未満は ``1/N``、それ以外は ``Ns``。

    Raises:
        ValueError: If *seconds* is not a finite, positive real number.
            *seconds* が有限の正の実数でない場合。
    """
    seconds = check_exposure(seconds)
    if seconds < 1:
        return f"1/{round(1 / seconds)}"
    return f"{seconds:g}s"


@dataclass(frozen=True)
class Camera:
    """A camera body assembled from independently chosen parts.

    Attributes:
        name: Display name, e.g. ``"Canon AE-1"``.
            表示名。
        film: Film transport.
            フィルム送り部品。
        shutter: Shutter unit.
            シャッター部品。
        mirror: Reflex mirror.
            ミラー部品。
        shutter_speed: Exposure time in seconds used by :meth:`take_picture`.
            :meth:`take_picture` で使う露光時間（秒）。

    独立に選択された部品から組み立てられたカメラ本体。生成後は不変。

    Raises:
        ValueError: If ``shutter_speed`` is not a finite, positive real number.
            ``shutter_speed`` が有限の正の実数でない場合。
    """

    name: str
    film: Film
    shutter: Shutter
    mirror: Mirror
    shutter_speed: float = 1 / 125

    def __post_init__(self) -> None:
        # checked at build time; take_picture never fails on the speed
        object.__setattr__(self, "shutter_speed", check_exposure(self.shutter_speed))

    def take_picture(self) -> None:
        """Expose one frame.

        The step order is fixed regardless of which parts were injected.

        1 コマ撮影する。注入された部品に関係なく手順の順序は固定。
        """
        self.film.engage()
        self.film.roll()
        self.film.release()
        self.mirror.open()
        self.shutter.set_speed(self.shutter_speed)
        self.shutter.initialize()
        self.shutter.activate()
        self.shutter.release()
        self.mirror.close()

    def describe(self) -> str:
        """Return a one-line summary of the body, its parts and exposure.

        カメラ名・部品・露光時間を 1 行で返す。
        """
        return (
            f"{self.name} ({type(self.film).__name__}, {type(self.shutter).__name__}, "
            f"{type(self.mirror).__name__}) @ {format_exposure(self.shutter_speed)}"
        )
