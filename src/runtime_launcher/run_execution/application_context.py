"""Process-level services shared by the command line commands."""

from __future__ import annotations

from dataclasses import dataclass

from runtime_launcher.configuration import LauncherSettings, load_launcher_settings
from runtime_launcher.runtime_discovery import (
    ExecutableSearch,
    RuntimeExecutableCache,
    ToolchainRuntimeLocator,
)


@dataclass(frozen=True)
class ApplicationContext:
    """Settings plus the runtime discovery services built once per process."""

    settings: LauncherSettings
    locator: ToolchainRuntimeLocator
    executable_cache: RuntimeExecutableCache

    @classmethod
    def create(
        cls,
        settings: LauncherSettings | None = None,
        *,
        search: ExecutableSearch | None = None,
    ) -> ApplicationContext:
        resolved_settings = settings or LauncherSettings.default()
        return cls(
            settings=resolved_settings,
            locator=ToolchainRuntimeLocator(
                search=search, moongres_enabled=resolved_settings.features.moongres
            ),
            executable_cache=RuntimeExecutableCache.from_settings(
                resolved_settings, search=search
            ),
        )

    @classmethod
    def from_config_path(cls, config_path: str | None) -> ApplicationContext:
        """Load settings from `config_path` when given, otherwise use defaults."""
        settings = load_launcher_settings(config_path) if config_path else None
        return cls.create(settings)
