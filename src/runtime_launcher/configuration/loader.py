"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .launcher_settings import FeatureSettings, LauncherSettings, RuntimeOverrides

_RUNTIME_KEYS = ("moonrun", "node", "rustica_engine")
_FEATURE_KEYS = ("moongres",)


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_launcher_settings(config_path: Path | str) -> LauncherSettings:
    """Load and validate the launcher configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    features = _parse_features_section(parsed.get("features"))
    runtimes = _parse_runtimes_section(parsed.get("runtimes"), path.parent)
    return LauncherSettings(path=path, features=features, runtimes=runtimes)


def _parse_features_section(value: Any) -> FeatureSettings:
    section = _optional_mapping(value, "features")
    _reject_unknown_keys(section, _FEATURE_KEYS, "features")
    moongres = _optional_bool(section.get("moongres"), "features.moongres", default=False)
    return FeatureSettings(moongres=moongres)


def _parse_runtimes_section(value: Any, base_path: Path) -> RuntimeOverrides:
    section = _optional_mapping(value, "runtimes")
    _reject_unknown_keys(section, _RUNTIME_KEYS, "runtimes")
    resolved: dict[str, Path | None] = {}
    for key in _RUNTIME_KEYS:
        raw_path = _optional_string(section.get(key), f"runtimes.{key}")
        resolved[key] = _resolve_path(base_path, raw_path) if raw_path else None
    return RuntimeOverrides(**resolved)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _reject_unknown_keys(
    section: Mapping[str, Any], known_keys: tuple[str, ...], section_name: str
) -> None:
    unknown = sorted(str(key) for key in section if key not in known_keys)
    if unknown:
        raise ConfigurationError(
            f"Unknown keys in configuration section '{section_name}': {', '.join(unknown)}"
        )


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None
