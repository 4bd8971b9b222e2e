"""Unit tests for shared config parsing helpers."""

import pytest

from limace.parsing import normalize_optional_string, parse_separator


def test_normalize_optional_string_handles_blank_values() -> None:
    """Normalization should return `None` for `None` and blank textual values."""

    assert normalize_optional_string(None) is None
    assert normalize_optional_string("") is None
    assert normalize_optional_string("   ") is None


def test_normalize_optional_string_strips_non_blank_values() -> None:
    """Normalization should return stripped content for non-empty values."""

    assert normalize_optional_string("  value  ") == "value"
    assert normalize_optional_string(42) == "42"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("_", "_"),
        (" . ", "."),
        (None, None),
        ("", None),
        (7, "7"),
    ],
)
def test_parse_separator_accepts_single_characters(value: object, expected: str | None) -> None:
    """Separator parsing should return one character or `None` for blanks."""

    assert parse_separator(value, "separator") == expected


def test_parse_separator_rejects_multiple_characters() -> None:
    """Separator parsing should name the field in its error."""

    with pytest.raises(ValueError, match="`separator` must be exactly one character"):
        parse_separator("--", "separator")
