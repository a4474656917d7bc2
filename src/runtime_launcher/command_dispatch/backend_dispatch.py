"""Backend command dispatch: which runtime runs an artifact, and with which arguments."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Callable
from pathlib import Path

from runtime_launcher.configuration.launcher_settings import LauncherSettings
from runtime_launcher.driver_synthesis.js_driver import synthesize_js_driver
from runtime_launcher.runtime_discovery.executable_cache import RuntimeExecutableCache
from runtime_launcher.target_backends.backend_models import BackendUnavailableError, TargetBackend
from runtime_launcher.test_selection.test_spec_models import (
    InvocationTestSpec,
    TestSpecContractError,
)

from .invocation_models import InvocationDescriptor, InvocationGuard

ArtifactPath = os.PathLike[str] | str
DriverSynthesizer = Callable[
    [ArtifactPath, InvocationTestSpec], tuple[tempfile.TemporaryDirectory[str], Path]
]

RUNNER_ARGS_SEPARATOR = "--"


def build_invocation(
    backend: TargetBackend,
    artifact_path: ArtifactPath,
    test_spec: InvocationTestSpec | None = None,
    *,
    settings: LauncherSettings | None = None,
) -> InvocationGuard:
    """Return a guarded command that runs `artifact_path` on `backend`.

    The returned descriptor is ready for more arguments, which are passed
    directly to the program being executed. `artifact_path` is the final build
    output: a `.wasm` file for the wasm backends, a `.js` file for js, or a
    native executable for native and llvm.

    When `test_spec` is given the artifact is a test executable; for the js
    backend this **creates temporary files** owned by the returned guard.
    """
    resolved_settings = settings or LauncherSettings.default()
    cache = RuntimeExecutableCache.from_settings(resolved_settings)
    return build_invocation_cached(
        cache,
        backend,
        artifact_path,
        test_spec,
        moongres_enabled=resolved_settings.features.moongres,
    )


def build_invocation_cached(
    cache: RuntimeExecutableCache,
    backend: TargetBackend,
    artifact_path: ArtifactPath,
    test_spec: InvocationTestSpec | None = None,
    *,
    moongres_enabled: bool = False,
    driver_synthesizer: DriverSynthesizer | None = None,
) -> InvocationGuard:
    """Like `build_invocation`, reusing runtime executables found by `cache`."""
    artifact = os.fspath(artifact_path)
    if backend in (TargetBackend.WASM, TargetBackend.WASM_GC):
        return InvocationGuard.from_descriptor(_bytecode_invocation(cache, artifact, test_spec))
    if backend is TargetBackend.MOONGRES:
        if not moongres_enabled:
            raise BackendUnavailableError(
                "The moongres backend is disabled. Enable features.moongres to use it."
            )
        return InvocationGuard.from_descriptor(_engine_invocation(cache, artifact, test_spec))
    if backend is TargetBackend.JS:
        return _js_invocation(
            cache, artifact, test_spec, driver_synthesizer or synthesize_js_driver
        )
    if backend in (TargetBackend.NATIVE, TargetBackend.LLVM):
        return InvocationGuard.from_descriptor(_native_invocation(artifact, test_spec))
    raise ValueError(f"Unsupported target backend: {backend!r}")


def _bytecode_invocation(
    cache: RuntimeExecutableCache, artifact: str, test_spec: InvocationTestSpec | None
) -> InvocationDescriptor:
    args: list[str] = []
    if test_spec is not None:
        args += ["--test-args", _serialized(test_spec)]
    args += [artifact, RUNNER_ARGS_SEPARATOR]
    return InvocationDescriptor(program=os.fspath(cache.moonrun()), args=args)


def _engine_invocation(
    cache: RuntimeExecutableCache, artifact: str, test_spec: InvocationTestSpec | None
) -> InvocationDescriptor:
    if test_spec is not None:
        args = ["moontest", "--spec", _serialized(test_spec)]
    else:
        args = ["run"]
    args += [artifact, RUNNER_ARGS_SEPARATOR]
    return InvocationDescriptor(program=os.fspath(cache.rustica_engine()), args=args)


def _js_invocation(
    cache: RuntimeExecutableCache,
    artifact: str,
    test_spec: InvocationTestSpec | None,
    driver_synthesizer: DriverSynthesizer,
) -> InvocationGuard:
    node = os.fspath(cache.node())
    if test_spec is None:
        return InvocationGuard.from_descriptor(InvocationDescriptor(program=node, args=[artifact]))
    serialized = _serialized(test_spec)
    temp_dir, driver_path = driver_synthesizer(artifact, test_spec)
    descriptor = InvocationDescriptor(
        program=node,
        args=["--enable-source-maps", os.fspath(driver_path), serialized],
    )
    return InvocationGuard(descriptor, temp_dir)


def _native_invocation(
    artifact: str, test_spec: InvocationTestSpec | None
) -> InvocationDescriptor:
    args = list(test_spec.native_argument_tokens()) if test_spec is not None else []
    return InvocationDescriptor(program=artifact, args=args)


def _serialized(test_spec: InvocationTestSpec) -> str:
    try:
        serialized = test_spec.serialized_form()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise TestSpecContractError(
            f"Test spec for package '{test_spec.package}' failed to serialize: {exc}"
        ) from exc
    if not isinstance(serialized, str):
        raise TestSpecContractError(
            f"Test spec for package '{test_spec.package}' serialized to "
            f"{type(serialized).__name__}, expected str."
        )
    return serialized
