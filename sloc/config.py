"""Configuration loading for sloc (.sloc.yml)."""

from __future__ import annotations

import codecs
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".sloc.yml"

SORT_KEYS = ("f", "t", "c", "d", "b", "s", "a")
SORT_ORDERS = ("asc", "desc")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class SortConfig:
    """Default ordering applied to the report."""

    key: Optional[str] = None
    order: str = "asc"

    @property
    def descending(self) -> bool:
        return self.order == "desc"


@dataclass
class SlocConfig:
    """Settings read from .sloc.yml."""

    root: Path
    recursive: bool = False
    encoding: str = "utf-8"
    show_totals: bool = True
    sort: SortConfig = field(default_factory=SortConfig)
    exclude_paths: List[str] = field(default_factory=list)


def load_config(config_path: Path) -> SlocConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return SlocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = SlocConfig(root=root)

    recursive = _as_bool("recursive", data.get("recursive"))
    if recursive is not None:
        config.recursive = recursive

    show_totals = _as_bool("show_totals", data.get("show_totals"))
    if show_totals is not None:
        config.show_totals = show_totals

    encoding = _as_str(data.get("encoding"))
    if encoding:
        config.encoding = _validate_encoding(encoding)

    sort_data = data.get("sort")
    if isinstance(sort_data, str):
        sort_data = {"key": sort_data}
    config.sort = _parse_sort(_as_dict(sort_data))

    config.exclude_paths = _as_str_list(data.get("exclude_paths"))
    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    if not text.strip():
        return {}

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_sort(sort_data: Dict[str, Any]) -> SortConfig:
    sort = SortConfig()
    if not sort_data:
        return sort

    key = _as_str(sort_data.get("key"))
    if key is not None:
        key = key.strip().lower()
        if key not in SORT_KEYS:
            raise ConfigError(
                f"Unknown sort key '{key}'; expected one of: {', '.join(SORT_KEYS)}"
            )
        sort.key = key

    order = _as_str(sort_data.get("order"))
    if order is not None:
        order = order.strip().lower()
        if order not in SORT_ORDERS:
            raise ConfigError(f"Unknown sort order '{order}'; expected 'asc' or 'desc'")
        sort.order = order
    return sort


def _validate_encoding(name: str) -> str:
    try:
        codecs.lookup(name)
    except LookupError as exc:
        raise ConfigError(f"Unknown encoding '{name}'") from exc
    return name


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return None
    return str(value) if isinstance(value, (str, int, float)) else None


def _as_bool(key: str, value: Any) -> Optional[bool]:
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    raise ConfigError(f"'{key}' must be true or false, got {value!r}")


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "SORT_KEYS",
    "SORT_ORDERS",
    "SlocConfig",
    "SortConfig",
    "load_config",
]
