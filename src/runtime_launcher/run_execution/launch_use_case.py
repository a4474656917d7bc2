"""Launch use-case service: build an invocation for an artifact and run it."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from runtime_launcher.command_dispatch import (
    InvocationDescriptor,
    InvocationGuard,
    build_invocation_cached,
)
from runtime_launcher.driver_synthesis import DriverSynthesisError
from runtime_launcher.runtime_discovery import UnknownRuntimeError
from runtime_launcher.target_backends import (
    BackendUnavailableError,
    TargetBackend,
    UnknownBackendError,
    parse_target_backend,
)
from runtime_launcher.test_selection import TestArgs, TestSelectionError, parse_test_selection

from .application_context import ApplicationContext
from .run_contracts import LaunchOutcome, LaunchRequest

ProcessRunner = Callable[[InvocationDescriptor], int]


class RunExecutionError(Exception):
    """Raised when an artifact launch cannot be prepared or started."""


def prepare_invocation(request: LaunchRequest, context: ApplicationContext) -> InvocationGuard:
    """Build the guarded invocation for a launch request with guest args appended.

    The caller owns the returned guard and must close it.
    """
    try:
        backend = parse_target_backend(request.backend)
        test_args = _build_test_args(request)
        guard = build_invocation_cached(
            context.executable_cache,
            backend,
            _artifact_for(backend, request.artifact_path, test_args),
            test_args,
            moongres_enabled=context.settings.features.moongres,
        )
    except (
        UnknownBackendError,
        BackendUnavailableError,
        UnknownRuntimeError,
        TestSelectionError,
        DriverSynthesisError,
    ) as exc:
        raise RunExecutionError(str(exc)) from exc
    guard.descriptor.append_args(*request.guest_args)
    return guard


def describe_invocation(request: LaunchRequest, context: ApplicationContext) -> str:
    """Return the shell-quoted command line a launch request would run."""
    with prepare_invocation(request, context) as guard:
        return shlex.join(guard.descriptor.argv())


def execute_launch(
    request: LaunchRequest,
    context: ApplicationContext,
    *,
    run_process: ProcessRunner | None = None,
) -> LaunchOutcome:
    """Build, run and clean up one artifact invocation."""
    process_runner = run_process or _run_process
    with prepare_invocation(request, context) as guard:
        argv = tuple(guard.descriptor.argv())
        exit_code = process_runner(guard.descriptor)
    return LaunchOutcome(argv=argv, exit_code=exit_code)


def _artifact_for(backend: TargetBackend, artifact_path: str, test_args: TestArgs | None) -> str:
    """The JS test driver requires the artifact from its own temporary directory."""
    if backend is TargetBackend.JS and test_args is not None:
        return str(Path(artifact_path).resolve())
    return artifact_path


def _build_test_args(request: LaunchRequest) -> TestArgs | None:
    if request.test_package is None:
        if request.test_selections:
            raise TestSelectionError("Test selections require a test package.")
        return None
    selections = tuple(parse_test_selection(raw) for raw in request.test_selections)
    return TestArgs(package=request.test_package, file_and_index=selections)


def _run_process(descriptor: InvocationDescriptor) -> int:
    """Run one invocation to completion and wrap spawn errors with readable messages."""
    env = dict(descriptor.env) if descriptor.env is not None else None
    try:
        completed = subprocess.run(
            descriptor.argv(), cwd=descriptor.cwd, env=env, check=False
        )
    except FileNotFoundError as exc:
        raise RunExecutionError(f"Runtime executable not found: {descriptor.program}") from exc
    except PermissionError as exc:
        raise RunExecutionError(
            f"Runtime executable is not runnable: {descriptor.program}"
        ) from exc
    return completed.returncode
