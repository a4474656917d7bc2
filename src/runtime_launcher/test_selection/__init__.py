"""Test selection exports."""

from .test_spec_models import (
    FileTestSelection,
    InvocationTestSpec,
    TestArgs,
    TestSelectionError,
    TestSpecContractError,
    parse_test_selection,
)

__all__ = [
    "FileTestSelection",
    "InvocationTestSpec",
    "TestArgs",
    "TestSelectionError",
    "TestSpecContractError",
    "parse_test_selection",
]
