"""Camera factory.

Maps camera makers to the parts each one is assembled from.

カメラのファクトリ。

カメラメーカー名を、そのカメラを構成する部品の組み合わせに解決する。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from ..selection import available_keys, resolve_key
from ..trace import ConsoleTrace, TraceSink
from .base import Camera, Film, Mirror, Shutter, UnknownCameraError
from .parts import (
    CanonFilm,
    CanonMirror,
    CanonShutter,
    NikonFilm,
    NikonMirror,
    NikonShutter,
)

logger = logging.getLogger(__name__)


class CameraMaker(Enum):
    """Registered camera makers.

    登録済みのカメラメーカー。
    """

    CANON = "canon"
    NIKON = "nikon"


@dataclass(frozen=True)
class CameraModel:
    """Assembly recipe for one maker.

    Attributes:
        display_name: Name given to assembled cameras.
            組み立てたカメラに付ける表示名。
        film: Film class to inject.
            注入するフィルム部品クラス。
        shutter: Shutter class to inject.
            注入するシャッター部品クラス。
        mirror: Mirror class to inject.
            注入するミラー部品クラス。

    メーカーごとの組み立てレシピ。
    """

    display_name: str
    film: type[Film]
    shutter: type[Shutter]
    mirror: type[Mirror]


_MODELS: dict[CameraMaker, CameraModel] = {
    CameraMaker.CANON: CameraModel("Canon AE-1", CanonFilm, CanonShutter, CanonMirror),
    CameraMaker.NIKON: CameraModel("Nikon FM2", NikonFilm, NikonShutter, NikonMirror),
}


def available_cameras() -> tuple[str, ...]:
    """Return registered camera maker names.

    Returns:
        Sorted maker names.
            利用可能なメーカー名のソート済みタプル。
    """
    return available_keys(CameraMaker)


def create_camera(
    maker: CameraMaker | str,
    trace: TraceSink | None = None,
    shutter_speed: float | None = None,
) -> Camera:
    """Assemble a new camera for *maker*.

    Every call builds fresh parts; nothing is cached or shared.

    *maker* 用のカメラを新しく組み立てる。呼び出しごとに新しい部品を生成し、
    キャッシュや共有は行わない。

    Args:
        maker: :class:`CameraMaker` member or its name (case-insensitive).
            :class:`CameraMaker` のメンバーまたはその名前（大文字小文字を区別しない）。
        trace: Sink that receives the parts' output. Defaults to stdout.
            部品の出力を受け取るシンク。デフォルトは標準出力。
        shutter_speed: Exposure time in seconds. Defaults to ``1/125``.
            露光時間（秒）。デフォルトは ``1/125``。

    Returns:
        Fully assembled camera.
            組み立て済みのカメラ。

    Raises:
        UnknownCameraError: If *maker* is not registered.
            *maker* が未登録の場合。
        ValueError: If *shutter_speed* is not a finite, positive real number.
            *shutter_speed* が有限の正の実数でない場合。
    """
    resolved = resolve_key(CameraMaker, maker, UnknownCameraError, "camera maker")
    model = _MODELS[resolved]
    if trace is None:
        trace = ConsoleTrace()
    logger.debug("Assembling %s from %s", model.display_name, resolved.value)

    kwargs = {}
    if shutter_speed is not None:
        kwargs["shutter_speed"] = shutter_speed
    return Camera(
        name=model.display_name,
        film=model.film(trace),
        shutter=model.shutter(trace),
        mirror=model.mirror(trace),
        **kwargs,
    )
