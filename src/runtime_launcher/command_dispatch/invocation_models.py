"""Command dispatch entities."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType


@dataclass
class InvocationDescriptor:
    """Process launch parameters: program, ordered arguments, optional cwd and env.

    `cwd` and `env` default to `None`, meaning they are inherited from the
    current process.
    """

    program: str
    args: list[str] = field(default_factory=list)
    cwd: Path | None = None
    env: Mapping[str, str] | None = None

    def append_args(self, *args: os.PathLike[str] | str) -> InvocationDescriptor:
        """Append trailing arguments, e.g. ones passed through to the guest program."""
        self.args.extend(os.fspath(arg) for arg in args)
        return self

    def argv(self) -> list[str]:
        return [self.program, *self.args]


class InvocationGuard:
    """An invocation descriptor that owns the temporary directory it depends on.

    The directory is removed exactly once when the guard is closed, either
    explicitly or by leaving a `with` block. Unclosed guards are still cleaned
    up when the temporary directory object is garbage collected.
    """

    def __init__(
        self,
        descriptor: InvocationDescriptor,
        temp_dir: tempfile.TemporaryDirectory[str] | None = None,
    ) -> None:
        self._descriptor = descriptor
        self._temp_dir = temp_dir

    @classmethod
    def from_descriptor(cls, descriptor: InvocationDescriptor) -> InvocationGuard:
        return cls(descriptor)

    @property
    def descriptor(self) -> InvocationDescriptor:
        return self._descriptor

    @property
    def temp_dir_path(self) -> Path | None:
        return Path(self._temp_dir.name) if self._temp_dir is not None else None

    def close(self) -> None:
        temp_dir, self._temp_dir = self._temp_dir, None
        if temp_dir is not None:
            temp_dir.cleanup()

    def __enter__(self) -> InvocationGuard:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
