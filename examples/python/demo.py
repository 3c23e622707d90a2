"""Factory demo script.

Builds the configured camera and transport through their factories, takes
one picture and makes one trip.

ファクトリのデモスクリプト。

設定されたカメラとトランスポートをファクトリ経由で生成し、1 枚撮影して
1 回移動する。
"""

import logging
import sys

from factory_patterns.camera import create_camera
from factory_patterns.config import get_config, reload_config, split_cli_config_path
from factory_patterns.trace import LoggingTrace, RecordingTrace, create_trace
from factory_patterns.transport import create_transport


def main(argv: list[str] | None = None) -> None:
    """Run the camera and transport demo.

    Optional CLI:
        [camera_maker [transport_kind]] [--config <path> / -c <path>]

    With ``sink = "recording"`` the trace is printed after the run. With
    ``sink = "logging"`` the trace is logged at INFO, so a ``log_level`` above
    INFO hides it; a note is printed in that case.

    カメラとトランスポートのデモを実行する。

    任意の CLI 引数:
        [カメラメーカー [トランスポート種別]] [--config <path> / -c <path>]
    """
    if argv is None:
        argv = sys.argv

    try:
        clean_argv, config_path = split_cli_config_path(argv)
    except ValueError as e:
        print(f"Invalid CLI arguments: {e}")
        return

    if len(clean_argv) > 3:
        print("Usage: python examples/python/demo.py [maker [transport]] [--config <config.toml>]")
        return

    if config_path is not None:
        reload_config(config_path)

    cfg = get_config()
    maker = clean_argv[1] if len(clean_argv) > 1 else cfg.camera.maker
    kind = clean_argv[2] if len(clean_argv) > 2 else cfg.transport.kind

    try:
        level = _resolve_log_level(cfg.trace.log_level)
        trace = create_trace(cfg.trace.sink)
        camera = create_camera(maker, trace=trace, shutter_speed=cfg.camera.shutter_speed)
        transport = create_transport(kind, trace=trace)
    except ValueError as e:
        print(f"Invalid config: {e}")
        raise SystemExit(1)

    logging.basicConfig(level=level)
    if isinstance(trace, LoggingTrace) and level > logging.INFO:
        print(f"Note: trace is logged at INFO and hidden by log_level={logging.getLevelName(level)}.")

    print(f"Camera: {camera.describe()}")
    camera.take_picture()
    print(f"Transport: {type(transport).__name__}")
    transport.travel()

    if isinstance(trace, RecordingTrace):
        print("Recorded trace:")
        for message in trace.messages:
            print(f"  {message}")


def _resolve_log_level(name: object) -> int:
    """Map a level name such as ``"info"`` to its :mod:`logging` number.

    Raises:
        ValueError: If *name* is not a standard level name.
            標準のログレベル名でない場合。
    """
    level = logging.getLevelNamesMapping().get(str(name).strip().upper())
    if level is None:
        raise ValueError(f"Unknown log level: {name!r}.")
    return level


if __name__ == "__main__":
    main()
