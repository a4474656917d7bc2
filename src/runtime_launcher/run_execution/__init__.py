"""Run execution domain exports."""

from .application_context import ApplicationContext
from .launch_use_case import (
    RunExecutionError,
    describe_invocation,
    execute_launch,
    prepare_invocation,
)
from .run_contracts import LaunchOutcome, LaunchRequest

__all__ = [
    "ApplicationContext",
    "LaunchRequest",
    "LaunchOutcome",
    "RunExecutionError",
    "describe_invocation",
    "execute_launch",
    "prepare_invocation",
]
