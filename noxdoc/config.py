"""Configuration loading for noxdoc (.noxdoc.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".noxdoc.yml"
OUTPUT_FORMATS = ("json", "markdown")

DEFAULT_SOURCES = ("lib",)
DEFAULT_EXTENSIONS = (".js",)


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class NoxdocConfig:
    """Settings read from .noxdoc.yml, merged with command-line overrides."""

    root: Path
    sources: List[str] = field(default_factory=lambda: list(DEFAULT_SOURCES))
    output_dir: Optional[Path] = None
    format: str = "json"
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_paths: List[str] = field(default_factory=list)
    workers: Optional[int] = None

    def merged(self, **overrides: Any) -> "NoxdocConfig":
        """Return a copy where every non-``None`` override replaces the file value."""
        unknown = set(overrides) - set(self.__dataclass_fields__)
        if unknown:
            raise TypeError(f"Unknown configuration option(s): {', '.join(sorted(unknown))}")
        values = {key: value for key, value in overrides.items() if value is not None}
        if "sources" in values:
            values["sources"] = _split_sources(values["sources"])
        if "output_dir" in values:
            values["output_dir"] = _resolve_dir(self.root, values["output_dir"])
        if "format" in values:
            values["format"] = _validate_format(values["format"])
        if "extensions" in values:
            values["extensions"] = [_normalise_extension(ext) for ext in values["extensions"]]
        return replace(self, **values)


def load_config(config_path: Path) -> NoxdocConfig:
    """Load configuration from disk; defaults apply when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return NoxdocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = NoxdocConfig(root=root)

    sources = _as_str_list(data.get("sources"))
    if sources:
        config = replace(config, sources=_split_sources(sources))

    output_dir = _as_str(data.get("output_dir"))
    if output_dir:
        config = replace(config, output_dir=_resolve_dir(root, output_dir))

    fmt = _as_str(data.get("format"))
    if fmt:
        config = replace(config, format=_validate_format(fmt))

    extensions = _as_str_list(data.get("extensions"))
    if extensions:
        config = replace(config, extensions=[_normalise_extension(ext) for ext in extensions])

    config = replace(config, exclude_paths=_as_str_list(data.get("exclude_paths")))

    if "workers" in data and data["workers"] is not None:
        workers = _as_int(data.get("workers"))
        if workers is None or workers < 1:
            raise ConfigError("workers must be a positive integer")
        config = replace(config, workers=workers)

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded if loaded is not None else {}


def _split_sources(sources: Sequence[str] | str) -> List[str]:
    # "lib,test" names two sources, as on the command line
    if isinstance(sources, str):
        sources = [sources]
    result: List[str] = []
    for source in sources:
        result.extend(part.strip() for part in str(source).split(",") if part.strip())
    return result


def _resolve_dir(root: Path, value: Path | str) -> Path:
    path = Path(value).expanduser()
    return path if path.is_absolute() else root / path


def _validate_format(value: str) -> str:
    lowered = value.strip().lower()
    if lowered not in OUTPUT_FORMATS:
        raise ConfigError(f"Unsupported output format '{value}' (expected one of: {', '.join(OUTPUT_FORMATS)})")
    return lowered


def _normalise_extension(value: str) -> str:
    value = value.strip().lower()
    return value if value.startswith(".") else f".{value}"


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = ["CONFIG_FILENAME", "ConfigError", "NoxdocConfig", "OUTPUT_FORMATS", "load_config"]
