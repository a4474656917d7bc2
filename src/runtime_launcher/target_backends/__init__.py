"""Target backend exports."""

from .backend_models import (
    BackendUnavailableError,
    TargetBackend,
    UnknownBackendError,
    parse_target_backend,
    reachable_backends,
)

__all__ = [
    "TargetBackend",
    "UnknownBackendError",
    "BackendUnavailableError",
    "parse_target_backend",
    "reachable_backends",
]
