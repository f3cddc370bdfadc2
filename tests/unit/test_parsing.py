"""Unit tests for shared config and CLI value parsing helpers."""

import pytest

from seourl.parsing import (
    normalize_optional_string,
    parse_env_flag,
    parse_positive_int,
)


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
    ("token", "expected"),
    [
        ("TrUe", True),
        ("  ON ", True),
        ("1", True),
        ("FALSE", False),
        (" oFf ", False),
        ("nO", False),
        (True, True),
    ],
)
def test_parse_env_flag_accepts_mixed_case_tokens(
    token: object, expected: bool
) -> None:
    """Permissive parsing should accept valid tokens case-insensitively."""

    assert parse_env_flag(token) is expected


@pytest.mark.parametrize("value", [None, "", "   ", "maybe", "2", object()])
def test_parse_env_flag_returns_none_for_invalid_tokens(value: object) -> None:
    """Permissive parsing should return `None` for invalid or blank inputs."""

    assert parse_env_flag(value) is None


@pytest.mark.parametrize(("value", "expected"), [(5, 5), (" 80 ", 80), ("1", 1)])
def test_parse_positive_int_accepts_ints_and_numeric_tokens(
    value: object, expected: int
) -> None:
    """Positive integers should parse from ints and stripped numeric text."""

    assert parse_positive_int(value, "max_length") == expected


@pytest.mark.parametrize("value", [0, -4, "0", " ", "ten", "2.5", True, None])
def test_parse_positive_int_rejects_invalid_values(value: object) -> None:
    """Booleans, blanks, non-numerics, and non-positive values should fail."""

    with pytest.raises(ValueError, match=r"`max_words` must be a positive integer\."):
        parse_positive_int(value, "max_words")
