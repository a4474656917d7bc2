"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LaunchRequest:
    """Input contract for launching one built artifact."""

    backend: str
    artifact_path: str
    test_package: str | None = None
    test_selections: tuple[str, ...] = ()
    guest_args: tuple[str, ...] = ()


@dataclass(frozen=True)
class LaunchOutcome:
    """Output contract for one launched artifact."""

    argv: tuple[str, ...]
    exit_code: int
