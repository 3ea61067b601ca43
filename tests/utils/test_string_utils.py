from __future__ import annotations

import pytest

from utils.string_utils import StringUtils


def test_ensure_str_converts_none_and_non_strings() -> None:
    assert StringUtils.ensure_str(None) == ""
    assert StringUtils.ensure_str(12) == "12"  # type: ignore[arg-type]
    assert StringUtils.ensure_str("  keep  ") == "  keep  "


@pytest.mark.parametrize(("value", "expected"), [(None, True), ("", True), (" \n\t", True), (" a ", False)])
def test_is_blank(value: str | None, expected: bool) -> None:
    assert StringUtils.is_blank(value) is expected


def test_preview_shortens_and_escapes_newlines() -> None:
    assert StringUtils.preview("line1\nline2", limit=8) == "line1\\nl..."
    assert StringUtils.preview("short") == "short"
    assert StringUtils.preview("x" * 10, limit=0) == "x" * 10
