"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_separator(value: object, field_name: str) -> str | None:
    """Parse a separator value, requiring exactly one non-whitespace character.

    Args:
        value: Raw value from a config source.
        field_name: Field name for an actionable validation error message.

    Returns:
        The separator character, or `None` when the value is missing or blank.

    Raises:
        ValueError: If the value holds more than one character.
    """

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None
    if len(normalized) != 1:
        raise ValueError(
            f"`{field_name}` must be exactly one character, got `{normalized}`."
        )
    return normalized
