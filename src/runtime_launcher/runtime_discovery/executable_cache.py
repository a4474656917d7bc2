"""Per-instance discovery of runtime executables used to run artifacts."""

from __future__ import annotations

import logging
import shutil
import threading
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path

from runtime_launcher.configuration.launcher_settings import LauncherSettings

ExecutableSearch = Callable[[str], str | None]

MOONRUN = "moonrun"
NODE = "node"
RUSTICA_ENGINE = "rustica_engine"

_BASE_CANDIDATES: dict[str, tuple[str, ...]] = {
    NODE: ("node", "node.cmd"),
    MOONRUN: ("moonrun",),
}
_MOONGRES_CANDIDATES: dict[str, tuple[str, ...]] = {
    RUSTICA_ENGINE: ("rustica-engine", "rustica-engine.exe"),
}

_LOGGER = logging.getLogger(__name__)


class UnknownRuntimeError(Exception):
    """Raised when a logical runtime name has no candidate executables."""


def runtime_candidates(*, moongres_enabled: bool = False) -> dict[str, tuple[str, ...]]:
    """Return prioritized executable names per logical runtime for a feature set."""
    candidates = dict(_BASE_CANDIDATES)
    if moongres_enabled:
        candidates.update(_MOONGRES_CANDIDATES)
    return candidates


class RuntimeExecutableCache:
    """A non-global cache for finding the executables that run built artifacts.

    Each logical runtime is searched at most once per instance, on first use.
    When no candidate is found the first candidate name is returned as-is, so a
    missing runtime surfaces when the process is spawned.
    """

    def __init__(
        self,
        candidates: Mapping[str, Sequence[str]] | None = None,
        *,
        overrides: Mapping[str, Path] | None = None,
        search: ExecutableSearch | None = None,
    ) -> None:
        table = candidates if candidates is not None else runtime_candidates()
        self._candidates = {name: tuple(names) for name, names in table.items() if names}
        self._overrides = dict(overrides or {})
        self._search = search or shutil.which
        self._locks = {name: threading.Lock() for name in self._candidates}
        self._resolved: dict[str, Path] = {}

    @classmethod
    def from_settings(
        cls, settings: LauncherSettings, *, search: ExecutableSearch | None = None
    ) -> RuntimeExecutableCache:
        return cls(
            runtime_candidates(moongres_enabled=settings.features.moongres),
            overrides=settings.runtimes.as_mapping(),
            search=search,
        )

    @property
    def runtime_names(self) -> tuple[str, ...]:
        return tuple(self._candidates)

    def resolve(self, logical_name: str) -> Path:
        """Return the executable path for a logical runtime name."""
        lock = self._locks.get(logical_name)
        if lock is None:
            raise UnknownRuntimeError(f"No executable candidates for runtime '{logical_name}'.")
        with lock:
            resolved = self._resolved.get(logical_name)
            if resolved is None:
                resolved = self._discover(logical_name)
                self._resolved[logical_name] = resolved
            return resolved

    def moonrun(self) -> Path:
        return self.resolve(MOONRUN)

    def node(self) -> Path:
        return self.resolve(NODE)

    def rustica_engine(self) -> Path:
        return self.resolve(RUSTICA_ENGINE)

    def _discover(self, logical_name: str) -> Path:
        override = self._overrides.get(logical_name)
        if override is not None:
            _LOGGER.debug("Using configured %s executable: %s", logical_name, override)
            return override
        candidates = self._candidates[logical_name]
        for candidate in candidates:
            located = self._search(candidate)
            if located:
                _LOGGER.debug("Resolved %s executable: %s", logical_name, located)
                return Path(located)
        _LOGGER.debug("No %s executable found, falling back to '%s'", logical_name, candidates[0])
        return Path(candidates[0])
