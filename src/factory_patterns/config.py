"""Centralized configuration loader for factory-patterns.

Reads config.toml from the project root into typed dataclasses, one per
section, falling back to defaults when the file or a field is absent.

factory-patterns の集中型設定ローダー。

プロジェクトルートの config.toml を読み込み、セクションごとの型付き
データクラスに変換する。ファイルまたは個々のフィールドが存在しない場合は
デフォルト値にフォールバックする。
"""

from __future__ import annotations

import re
import tomllib
from dataclasses import asdict, dataclass, field, fields
from fractions import Fraction
from math import isfinite
from pathlib import Path
from typing import Optional, Sequence

# Project root: two levels up from src/factory_patterns/config.py
_PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "config.toml"


# ── Section dataclasses ──────────────────────────────────────────────


@dataclass(frozen=True)
class CameraConfig:
    """Which camera to assemble and how to expose.

    Attributes:
        maker: Camera maker name, ``canon`` or ``nikon``.
            組み立てるカメラのメーカー名。
        shutter_speed: Exposure time in seconds. Fraction strings such as
            ``"1/125"`` are accepted in the TOML file.
            露光時間（秒）。TOML では ``"1/125"`` のような分数表記も可。

    カメラの選択と露光の設定。
    """

    maker: str = "canon"
    shutter_speed: float = 1 / 125


@dataclass(frozen=True)
class TransportConfig:
    """Which transport to create.

    Attributes:
        kind: ``car``, ``boat`` or ``plane``.
            ``car``、``boat``、``plane`` のいずれか。
    """

    kind: str = "car"


@dataclass(frozen=True)
class TraceConfig:
    """Where trace output goes.

    Attributes:
        sink: ``console``, ``logging`` or ``recording``.
            出力先シンク名。
        log_level: Level name passed to :func:`logging.basicConfig`.
            :func:`logging.basicConfig` に渡すログレベル名。
    """

    sink: str = "console"
    log_level: str = "INFO"


# ── Top-level config container ───────────────────────────────────────


@dataclass(frozen=True)
class AppConfig:
    """Top-level application configuration container.

    Attributes:
        camera: Camera selection.
            カメラの選択設定。
        transport: Transport selection.
            トランスポートの選択設定。
        trace: Trace output settings.
            トレース出力の設定。

    アプリケーション全体の設定コンテナ。
    """

    camera: CameraConfig = field(default_factory=CameraConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    trace: TraceConfig = field(default_factory=TraceConfig)


_SECTIONS: dict[str, type] = {
    "camera": CameraConfig,
    "transport": TransportConfig,
    "trace": TraceConfig,
}


# ── Loading logic ────────────────────────────────────────────────────

_FRACTION_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*/\s*(-?\d+(?:\.\d+)?)\s*$")


def _parse_number(value: object) -> object:
    """Convert a fraction string (e.g., "1/125") to a float.

    Other values are returned unchanged.

    分数表記の文字列（例: "1/125"）を float に変換する。それ以外はそのまま返す。
    """
    if isinstance(value, str):
        m = _FRACTION_RE.match(value)
        if m:
            return float(Fraction(m.group(1)) / Fraction(m.group(2)))
    return value


def _build_section(cls: type, data: dict, key: str):
    """Build a section dataclass from a TOML table, ignoring unknown keys.

    TOML テーブルからセクションのデータクラスを構築する。未知のキーは無視する。

    Raises:
        TypeError: If the section is not a TOML table.
            セクションが TOML テーブルでない場合。
    """
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise TypeError(f"[{key}] must be a table, got {type(section).__name__}.")
    field_types = {f.name: f.type for f in fields(cls)}
    filtered = {}
    for k, v in section.items():
        if k not in field_types:
            continue
        # 文字列フィールドには分数パースを適用しない
        if field_types[k] == "str" or field_types[k] is str:
            filtered[k] = v
        else:
            filtered[k] = _parse_number(v)
    return cls(**filtered)


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load configuration from a TOML file.

    TOML ファイルから設定を読み込む。ファイルがなければデフォルト値を返す。

    Args:
        config_path: Path to the TOML file. Defaults to ``config.toml`` in
            the project root.
            TOML 設定ファイルのパス。デフォルトはプロジェクトルートの
            ``config.toml``。

    Returns:
        A fully populated :class:`AppConfig` instance.
        完全に設定された :class:`AppConfig` インスタンス。
    """
    if config_path is None:
        config_path = _DEFAULT_CONFIG_PATH

    if not config_path.exists():
        return AppConfig()

    with open(config_path, "rb") as f:
        data = dict(tomllib.load(f))

    return AppConfig(**{name: _build_section(cls, data, name) for name, cls in _SECTIONS.items()})


def _format_toml_value(value: object) -> str:
    """Format a Python value as an inline TOML literal.

    Python の値を TOML リテラル文字列に整形する。
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if not isfinite(value):
            raise ValueError("TOML does not support NaN or Infinity.")
        return repr(value)
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    raise TypeError(f"Unsupported TOML value type: {type(value)!r}")


def _serialize_config_toml(config: AppConfig) -> str:
    """Serialize :class:`AppConfig` to TOML text."""
    lines: list[str] = []
    for section_name in _SECTIONS:
        lines.append(f"[{section_name}]")
        for key, value in asdict(getattr(config, section_name)).items():
            lines.append(f"{key} = {_format_toml_value(value)}")
        lines.append("")

    return "\n".join(lines).rstrip() + "\n"


def generate_config_file(
    config_path: Optional[Path] = None,
    config: Optional[AppConfig] = None,
    overwrite: bool = False,
) -> Path:
    """Write an :class:`AppConfig` out as a TOML file.

    ``config`` が未指定の場合はデフォルト設定で出力する。
    既存ファイルに上書きするには ``overwrite=True`` を指定する。

    Returns:
        The path to the generated TOML file.
        生成された TOML ファイルのパス。

    Raises:
        FileExistsError: If target file exists and ``overwrite`` is ``False``.
            出力先ファイルが存在し ``overwrite=False`` の場合。
    """
    if config_path is None:
        config_path = _DEFAULT_CONFIG_PATH
    if config is None:
        config = AppConfig()

    if config_path.exists() and not overwrite:
        raise FileExistsError(
            f"Config file already exists: {config_path}. "
            "Set overwrite=True to replace it."
        )

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(_serialize_config_toml(config), encoding="utf-8")
    return config_path


# ── Module-level cache ───────────────────────────────────────────────

_config: Optional[AppConfig] = None


def get_config(config_path: Optional[Path] = None) -> AppConfig:
    """Return the cached AppConfig, loading it on first call.

    キャッシュされた AppConfig を返す。初回呼び出し時に読み込みを行う。
    """
    global _config
    if _config is None:
        _config = load_config(config_path)
    return _config


def reload_config(config_path: Optional[Path] = None) -> AppConfig:
    """Force-reload configuration (useful for tests).

    設定を強制的に再読み込みする（テスト時に便利）。
    """
    global _config
    _config = load_config(config_path)
    return _config


def split_cli_config_path(argv: Sequence[str]) -> tuple[list[str], Optional[Path]]:
    """Split optional ``--config`` / ``-c`` from CLI arguments.

    CLI 引数からオプションの ``--config`` / ``-c`` を分離する。

    Args:
        argv: Raw CLI argument sequence (typically ``sys.argv``).
            生の CLI 引数列（通常は ``sys.argv``）。

    Returns:
        Tuple of ``(cleaned_argv, config_path_or_none)``.
            ``(整形後 argv, 設定パスまたは None)`` のタプル。

    Raises:
        ValueError: If config option is provided without a path.
            設定オプションにパスが指定されていない場合。
    """
    cleaned: list[str] = []
    config_path: Optional[Path] = None

    args = iter(argv)
    for arg in args:
        if arg in ("--config", "-c"):
            value = next(args, "")
        elif arg.startswith("--config="):
            value = arg.split("=", 1)[1]
        else:
            cleaned.append(arg)
            continue
        if value == "":
            raise ValueError("`--config` requires a file path.")
        config_path = Path(value)

    return cleaned, config_path
