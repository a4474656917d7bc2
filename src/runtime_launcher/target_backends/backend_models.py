"""Target backend entities."""

from __future__ import annotations

from enum import Enum


class UnknownBackendError(Exception):
    """Raised when a backend name does not match any target backend."""


class BackendUnavailableError(Exception):
    """Raised when a backend is selected while its feature is disabled."""


class TargetBackend(str, Enum):
    """Execution target of a compiled artifact."""

    WASM = "wasm"
    WASM_GC = "wasm-gc"
    JS = "js"
    NATIVE = "native"
    LLVM = "llvm"
    MOONGRES = "moongres"

    @property
    def is_experimental(self) -> bool:
        return self is TargetBackend.MOONGRES


_BACKEND_ALIASES = {
    "wasm_gc": TargetBackend.WASM_GC,
    "wasmgc": TargetBackend.WASM_GC,
}


def parse_target_backend(name: str) -> TargetBackend:
    """Convert user-provided backend text into a target backend."""
    key = (name or "").strip().lower()
    if key in _BACKEND_ALIASES:
        return _BACKEND_ALIASES[key]
    try:
        return TargetBackend(key)
    except ValueError as exc:
        choices = ", ".join(backend.value for backend in TargetBackend)
        raise UnknownBackendError(
            f"Unknown target backend '{name}'. Expected one of: {choices}."
        ) from exc


def reachable_backends(*, moongres_enabled: bool = False) -> tuple[TargetBackend, ...]:
    """Return backends that can be dispatched with the given feature set."""
    return tuple(
        backend for backend in TargetBackend if moongres_enabled or not backend.is_experimental
    )
