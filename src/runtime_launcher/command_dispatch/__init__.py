"""Command dispatch exports."""

from .backend_dispatch import (
    RUNNER_ARGS_SEPARATOR,
    build_invocation,
    build_invocation_cached,
)
from .invocation_models import InvocationDescriptor, InvocationGuard

__all__ = [
    "RUNNER_ARGS_SEPARATOR",
    "InvocationDescriptor",
    "InvocationGuard",
    "build_invocation",
    "build_invocation_cached",
]
