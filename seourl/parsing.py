"""Value parsing shared by the YAML loader, `SEOURL_*` variables, and CLI options.

Config files, environment variables, and option strings all arrive as loosely
typed tokens; these helpers turn them into the strings, flags, and limits the
slug settings need.
"""

from __future__ import annotations

_FLAG_ON = frozenset({"1", "true", "yes", "on"})
_FLAG_OFF = frozenset({"0", "false", "no", "off"})


def normalize_optional_string(value: object) -> str | None:
    """Return the trimmed text of a setting, or `None` when it is unset or blank.

    YAML scalars such as `80` or `ru` and raw `SEOURL_*` strings are all
    accepted; a value like `"  "` counts as not provided so the next config
    source can take over.
    """

    text = "" if value is None else str(value).strip()
    return text or None


def parse_env_flag(value: object) -> bool | None:
    """Read an on/off switch such as `SEOURL_VERBOSE`.

    Returns `None` for unset or unrecognized tokens so callers can keep
    their default.
    """

    if isinstance(value, bool):
        return value
    token = normalize_optional_string(value)
    if token is None:
        return None
    token = token.lower()
    if token in _FLAG_ON:
        return True
    if token in _FLAG_OFF:
        return False
    return None


def parse_positive_int(value: object, field_name: str) -> int:
    """Parse a strictly positive integer from an int or a numeric text token.

    Args:
        value: Integer or textual value to parse.
        field_name: Field name for an actionable validation error message.

    Raises:
        ValueError: If the value is a boolean, not an integer, or not positive.
    """

    message = f"`{field_name}` must be a positive integer."
    if isinstance(value, bool):
        raise ValueError(message)
    if isinstance(value, int):
        parsed = value
    else:
        normalized = normalize_optional_string(value)
        if normalized is None:
            raise ValueError(message)
        try:
            parsed = int(normalized)
        except ValueError as exc:
            raise ValueError(message) from exc

    if parsed <= 0:
        raise ValueError(message)
    return parsed
