"""Runtime discovery exports."""

from .executable_cache import (
    MOONRUN,
    NODE,
    RUSTICA_ENGINE,
    ExecutableSearch,
    RuntimeExecutableCache,
    UnknownRuntimeError,
    runtime_candidates,
)
from .toolchain_locator import ToolchainRuntimeLocator

__all__ = [
    "MOONRUN",
    "NODE",
    "RUSTICA_ENGINE",
    "ExecutableSearch",
    "RuntimeExecutableCache",
    "UnknownRuntimeError",
    "runtime_candidates",
    "ToolchainRuntimeLocator",
]
