"""Tests for test selection entities."""

from __future__ import annotations

import json

import pytest
from runtime_launcher.test_selection import (
    FileTestSelection,
    TestArgs,
    TestSelectionError,
    parse_test_selection,
)


def test_serialized_form_is_compact_json_with_ranges() -> None:
    args = TestArgs(
        package="moon/lib",
        file_and_index=(FileTestSelection("a_test.mbt", 0, 2),),
    )

    serialized = args.serialized_form()

    assert serialized == (
        '{"package":"moon/lib","file_and_index":[["a_test.mbt",{"start":0,"end":2}]]}'
    )
    assert json.loads(serialized)["package"] == "moon/lib"


def test_native_argument_tokens_join_selections_into_one_token() -> None:
    args = TestArgs(
        package="moon/lib",
        file_and_index=(
            FileTestSelection("a_test.mbt", 0, 2),
            FileTestSelection("b_wbtest.mbt", 3, 4),
        ),
    )

    assert args.native_argument_tokens() == ("a_test.mbt:0-2/b_wbtest.mbt:3-4",)


def test_native_argument_tokens_are_empty_without_selections() -> None:
    assert TestArgs(package="moon/lib").native_argument_tokens() == ()


def test_parse_test_selection_reads_range_and_single_index() -> None:
    assert parse_test_selection("lib/a_test.mbt:1-5") == FileTestSelection("lib/a_test.mbt", 1, 5)
    assert parse_test_selection("a_test.mbt:7") == FileTestSelection("a_test.mbt", 7, 8)


def test_parse_test_selection_keeps_colons_in_file_name() -> None:
    assert parse_test_selection("C:/src/a_test.mbt:0-1").file == "C:/src/a_test.mbt"


@pytest.mark.parametrize("raw", ["a_test.mbt", ":0-1", "a_test.mbt:x-1", "a_test.mbt:5-2"])
def test_parse_test_selection_rejects_invalid_text(raw: str) -> None:
    with pytest.raises(TestSelectionError):
        parse_test_selection(raw)
