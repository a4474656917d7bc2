"""Tests for target backend entities."""

from __future__ import annotations

import pytest
from runtime_launcher.target_backends import (
    TargetBackend,
    UnknownBackendError,
    parse_target_backend,
    reachable_backends,
)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("wasm", TargetBackend.WASM),
        ("WASM-GC", TargetBackend.WASM_GC),
        ("wasm_gc", TargetBackend.WASM_GC),
        (" js ", TargetBackend.JS),
        ("llvm", TargetBackend.LLVM),
    ],
)
def test_parse_target_backend_accepts_names_and_aliases(raw: str, expected: TargetBackend) -> None:
    assert parse_target_backend(raw) is expected


def test_parse_target_backend_rejects_unknown_names_with_choices() -> None:
    with pytest.raises(UnknownBackendError, match="Expected one of: wasm, wasm-gc"):
        parse_target_backend("jvm")


def test_reachable_backends_exclude_experimental_engine_by_default() -> None:
    backends = reachable_backends()

    assert TargetBackend.MOONGRES not in backends
    assert len(backends) == 5


def test_reachable_backends_include_experimental_engine_when_enabled() -> None:
    assert TargetBackend.MOONGRES in reachable_backends(moongres_enabled=True)
