"""Configuration loading for uxguide (.uxguide.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .kb.constants import STACK_NAMES

CONFIG_FILENAME = ".uxguide.yml"
OUTPUT_FORMATS = ("markdown", "ascii")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed or holds invalid values."""


@dataclass
class SearchConfig:
    """Defaults for ui_search and ui_stack_guide."""

    max_results: int = 3


@dataclass
class DesignSystemConfig:
    """Defaults for design system generation."""

    auto_inject: bool = False
    default_stack: Optional[str] = None
    default_format: str = "markdown"


@dataclass
class UxGuideConfig:
    """Represents the settings defined in .uxguide.yml."""

    root: Path
    data_dir: Optional[Path] = None
    output_dir: Optional[Path] = None
    templates_dir: Optional[Path] = None
    log_file: Optional[Path] = None
    search: SearchConfig = field(default_factory=SearchConfig)
    design_system: DesignSystemConfig = field(default_factory=DesignSystemConfig)

    @property
    def path(self) -> Path:
        return self.root / CONFIG_FILENAME

    def resolved_output_dir(self) -> Path:
        return self.output_dir or self.root


def load_config(config_path: Path) -> UxGuideConfig:
    """Load configuration from a directory or a config file path."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return UxGuideConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    search = SearchConfig()
    search_data = _as_dict(data.get("search"))
    if "max_results" in search_data:
        max_results = _as_int(search_data.get("max_results"))
        if max_results is None or max_results < 1:
            raise ConfigError("search.max_results must be a positive integer")
        search.max_results = max_results

    design = DesignSystemConfig()
    design_data = _as_dict(data.get("design_system"))
    if design_data:
        design.auto_inject = _as_bool(design_data.get("auto_inject")) or False
        design.default_stack = _as_str(design_data.get("default_stack"))
        if design.default_stack is not None and design.default_stack not in STACK_NAMES:
            raise ConfigError(f"Unknown default_stack: {design.default_stack}")
        default_format = _as_str(design_data.get("default_format"))
        if default_format is not None:
            if default_format not in OUTPUT_FORMATS:
                raise ConfigError(f"Unknown default_format: {default_format}")
            design.default_format = default_format

    return UxGuideConfig(
        root=root,
        data_dir=_as_path(root, data.get("data_dir")),
        output_dir=_as_path(root, data.get("output_dir")),
        templates_dir=_as_path(root, data.get("templates_dir")),
        log_file=_as_path(root, data.get("log_file")),
        search=search,
        design_system=design,
    )


def save_config(config: UxGuideConfig) -> Path:
    """Write ``config`` back to ``<root>/.uxguide.yml`` and return the path."""
    payload: Dict[str, Any] = {
        "search": {"max_results": config.search.max_results},
        "design_system": {
            "auto_inject": config.design_system.auto_inject,
            "default_stack": config.design_system.default_stack,
            "default_format": config.design_system.default_format,
        },
    }
    for key in ("data_dir", "output_dir", "templates_dir", "log_file"):
        value = getattr(config, key)
        if value is not None:
            payload[key] = _relative_to_root(config.root, value)

    path = config.path
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(yaml.safe_dump(payload, sort_keys=False), encoding="utf-8")
    return path


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Any:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return {} if loaded is None else loaded


def _relative_to_root(root: Path, value: Path) -> str:
    try:
        return str(value.relative_to(root))
    except ValueError:
        return str(value)


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else (root / path).resolve()


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


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


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DesignSystemConfig",
    "OUTPUT_FORMATS",
    "SearchConfig",
    "UxGuideConfig",
    "load_config",
    "save_config",
]
