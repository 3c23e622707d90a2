"""Camera simulation built from interchangeable parts.

Provides the part contracts, the composite camera and the factory that
assembles one per maker.

交換可能な部品から組み立てるカメラのシミュレーション。

部品の契約、合成カメラ、メーカーごとにカメラを組み立てるファクトリを
まとめた公開モジュール。
"""

from .base import Camera, Film, Mirror, Shutter, UnknownCameraError, check_exposure, format_exposure
from .factory import CameraMaker, CameraModel, available_cameras, create_camera

__all__ = [
    "Camera",
    "CameraMaker",
    "CameraModel",
    "Film",
    "Mirror",
    "Shutter",
    "UnknownCameraError",
    "available_cameras",
    "check_exposure",
    "create_camera",
    "format_exposure",
]
