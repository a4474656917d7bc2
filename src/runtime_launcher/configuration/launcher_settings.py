"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FeatureSettings:
    """Optional backends enabled for this installation."""

    moongres: bool = False


@dataclass(frozen=True)
class RuntimeOverrides:
    """Explicit runtime executable paths that bypass discovery."""

    moonrun: Path | None = None
    node: Path | None = None
    rustica_engine: Path | None = None

    def as_mapping(self) -> dict[str, Path]:
        candidates = {
            "moonrun": self.moonrun,
            "node": self.node,
            "rustica_engine": self.rustica_engine,
        }
        return {name: path for name, path in candidates.items() if path is not None}


@dataclass(frozen=True)
class LauncherSettings:
    """Top-level configuration aggregate."""

    path: Path | None = None
    features: FeatureSettings = field(default_factory=FeatureSettings)
    runtimes: RuntimeOverrides = field(default_factory=RuntimeOverrides)

    @staticmethod
    def default() -> LauncherSettings:
        return LauncherSettings()
