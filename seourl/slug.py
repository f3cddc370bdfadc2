"""Deterministic SEO slug construction and validation.

Responsibilities:
- Turn free-form text into lowercase, ASCII-only, hyphen-delimited slugs.
- Bound slug length without leaving partial trailing words.
- Check whether a string already has slug shape.

Key public functions:
- `generate_url`: full slug pipeline with a character limit.
- `generate_slug`: slug limited to a number of words.
- `is_valid_seo_url`: slug format predicate.
"""

from __future__ import annotations

import html
from html.entities import html5 as _HTML5_ENTITIES
import re

from .errors import InvalidLimitError
from .languages import LanguageCode
from .transliteration import transliterate

DEFAULT_MAX_LENGTH = 100
DEFAULT_MAX_WORDS = 5

# Whitespace excludes the U+001C..U+001F separators, which are stripped instead.
_DISALLOWED_RE = re.compile(r"[^a-z0-9\s-]|[\x1c-\x1f]")
_WHITESPACE_RE = re.compile(r"[^\S\x1c-\x1f]+")
_ENTITY_RE = re.compile(r"&(?:#[0-9]+|#[xX][0-9a-fA-F]+|[A-Za-z][A-Za-z0-9]*);")
_HYPHEN_RUN_RE = re.compile(r"-+")
_SEO_URL_RE = re.compile(r"[a-z0-9-]+")


def _require_positive_limit(value: object, field_name: str) -> int:
    """Return the limit when it is a positive integer, else raise `InvalidLimitError`."""

    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidLimitError(field_name, value)
    return value


def truncate_at_word_boundary(slug: str, max_length: int) -> str:
    """Cut a slug to `max_length`, dropping a trailing partial word when possible.

    The hard cut is kept when it contains no hyphen after index 0, so one long
    word is shortened to exactly `max_length` characters. A hyphen landing on
    the last kept position is found by the backward search and removed.
    """

    if len(slug) <= max_length:
        return slug
    truncated = slug[:max_length]
    last_hyphen = truncated.rfind("-")
    if last_hyphen > 0:
        truncated = truncated[:last_hyphen]
    return truncated


def _decode_reference(match: re.Match[str]) -> str:
    reference = match.group(0)
    if reference.startswith("&#"):
        return html.unescape(reference)
    # Exact names only; unknown names such as `&ampx;` stay literal.
    return _HTML5_ENTITIES.get(reference[1:], reference)


def decode_entities(text: str) -> str:
    """Decode semicolon-terminated named and numeric character references.

    Unterminated legacy forms such as `&amp` or `&copy2024` stay literal text.
    """

    return _ENTITY_RE.sub(_decode_reference, text)


def generate_url(
    text: str | None,
    language: LanguageCode | str = LanguageCode.AUTO,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> str:
    """Return an SEO-friendly slug for the text.

    Passes run in a fixed order: lowercase, transliterate, decode HTML
    entities, drop disallowed characters, turn whitespace runs into hyphens,
    collapse hyphen runs, trim edge hyphens, then truncate.

    Args:
        text: Source text. `None`, empty, and whitespace-only text yield `""`.
        language: Replacement table to use, or `AUTO` to detect one.
        max_length: Maximum slug length in characters.

    Raises:
        InvalidLimitError: If `max_length` is not a positive integer.
    """

    _require_positive_limit(max_length, "max_length")
    if text is None or not text.strip():
        return ""

    # str.lower() is locale-independent.
    value = text.lower()
    value = transliterate(value, language)
    value = decode_entities(value)
    value = _DISALLOWED_RE.sub("", value)
    value = _WHITESPACE_RE.sub("-", value)
    value = _HYPHEN_RUN_RE.sub("-", value)
    value = value.strip("-")
    return truncate_at_word_boundary(value, max_length)


def generate_slug(
    text: str | None,
    max_words: int = DEFAULT_MAX_WORDS,
    *,
    language: LanguageCode | str = LanguageCode.AUTO,
) -> str:
    """Return a slug of at most `max_words` hyphen-delimited words.

    Raises:
        InvalidLimitError: If `max_words` is not a positive integer.
    """

    _require_positive_limit(max_words, "max_words")
    if text is None or not text.strip():
        return ""

    url = generate_url(text, language)
    words = [word for word in url.split("-") if word]
    if len(words) <= max_words:
        return url
    return "-".join(words[:max_words])


def is_valid_seo_url(url: str | None) -> bool:
    """Return whether the value is a non-empty, well-formed slug."""

    if url is None or not url.strip():
        return False
    return (
        _SEO_URL_RE.fullmatch(url) is not None
        and not url.startswith("-")
        and not url.endswith("-")
        and "--" not in url
    )
