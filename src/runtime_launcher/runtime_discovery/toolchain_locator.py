"""Process-scope discovery of toolchain runtimes for diagnostics and tooling."""

from __future__ import annotations

import logging
import shutil
import sys
import threading
from collections.abc import Callable, Sequence
from pathlib import Path

from .executable_cache import ExecutableSearch

_MOONRUN_NAMES = ("moonrun",)
_NODE_NAMES = ("node.cmd", "node")
_PYTHON_NAMES = ("python3", "python", "python3.exe", "python.exe")
_RUSTICA_ENGINE_NAMES = ("rustica-engine.exe", "rustica-engine")

_LOGGER = logging.getLogger(__name__)


class ToolchainRuntimeLocator:
    """Locate runtimes once per instance, preferring the toolchain install directory.

    Results are optional: a runtime that cannot be found is reported as `None`.
    One locator is created by the application context and shared by reference.
    """

    def __init__(
        self,
        *,
        current_executable: Path | None = None,
        search: ExecutableSearch | None = None,
        moongres_enabled: bool = False,
    ) -> None:
        self._current_executable = (
            current_executable if current_executable is not None else _default_current_executable()
        )
        self._search = search or shutil.which
        self._moongres_enabled = moongres_enabled
        self._lock = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}
        self._located: dict[str, Path | None] = {}

    def moonrun(self) -> Path | None:
        return self._locate_once("moonrun", lambda: self._adjacent_then_path(_MOONRUN_NAMES))

    def node(self) -> Path | None:
        return self._locate_once("node", lambda: self._on_path(_NODE_NAMES))

    def python(self) -> Path | None:
        return self._locate_once("python", lambda: self._on_path(_PYTHON_NAMES))

    def rustica_engine(self) -> Path | None:
        if not self._moongres_enabled:
            return None
        return self._locate_once(
            "rustica_engine", lambda: self._adjacent_then_path(_RUSTICA_ENGINE_NAMES)
        )

    def report(self) -> tuple[tuple[str, Path | None], ...]:
        """Return every runtime this locator knows about with its location."""
        entries = [
            ("moonrun", self.moonrun()),
            ("node", self.node()),
            ("python", self.python()),
        ]
        if self._moongres_enabled:
            entries.append(("rustica_engine", self.rustica_engine()))
        return tuple(entries)

    def _locate_once(self, name: str, locate: Callable[[], Path | None]) -> Path | None:
        with self._lock:
            lock = self._locks.setdefault(name, threading.Lock())
        with lock:
            if name not in self._located:
                located = locate()
                _LOGGER.debug("Located %s runtime: %s", name, located or "not found")
                self._located[name] = located
            return self._located[name]

    def _adjacent_then_path(self, names: Sequence[str]) -> Path | None:
        if self._current_executable is not None:
            install_dir = self._current_executable.parent
            for name in names:
                candidate = install_dir / name
                if candidate.exists():
                    return candidate
        return self._on_path(names)

    def _on_path(self, names: Sequence[str]) -> Path | None:
        for name in names:
            located = self._search(name)
            if located:
                return Path(located)
        return None


def _default_current_executable() -> Path | None:
    launcher = sys.argv[0] if sys.argv else ""
    if not launcher:
        return None
    located = shutil.which(launcher)
    return Path(located or launcher).resolve()
