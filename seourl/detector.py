"""Heuristic language detection from characteristic characters.

Responsibilities:
- Pick a concrete `LanguageCode` for text when the caller passes `AUTO`.
- Keep detection a fixed first-match-wins priority chain over raw code points.

Detection never weighs frequency or context. Character sets overlap on
purpose (Turkish marks also occur in Azerbaijani, French and German text),
and the earliest rule in `DETECTION_RULES` wins.
"""

from __future__ import annotations

from typing import Callable

from .languages import LanguageCode

CharacterTest = Callable[[str], bool]

DEFAULT_LANGUAGE = LanguageCode.TR


def _any_of(characters: str) -> CharacterTest:
    """Build a test matching text containing any of the given characters."""

    members = frozenset(characters)

    def _test(text: str) -> bool:
        return not members.isdisjoint(text)

    return _test


def _any_in_ranges(*ranges: tuple[str, str]) -> CharacterTest:
    """Build a test matching text containing a character in any inclusive range."""

    def _test(text: str) -> bool:
        return any(low <= character <= high for character in text for low, high in ranges)

    return _test


DETECTION_RULES: tuple[tuple[CharacterTest, LanguageCode], ...] = (
    (_any_of("çğıöşüÇĞIÖŞÜ"), LanguageCode.TR),
    (_any_of("əÄäÖöÜüÇçĞğışŞş"), LanguageCode.AZ),
    (_any_of("äöüßÄÖÜ"), LanguageCode.DE),
    (_any_of("àâäéèêëïîôöùûüÿæœçÀÂÄÉÈÊËÏÎÔÖÙÛÜŸÆŒÇ"), LanguageCode.FR),
    (_any_of("áéíñóúüÁÉÍÑÓÚÜ"), LanguageCode.ES),
    (_any_in_ranges(("а", "я"), ("А", "Я")), LanguageCode.RU),
    (_any_in_ranges(("α", "ω"), ("Α", "Ω")), LanguageCode.EL),
    (_any_in_ranges(("\u0627", "\u064a")), LanguageCode.AR),
    (_any_in_ranges(("\u4e00", "\u9fff")), LanguageCode.ZH_CN),
    (_any_in_ranges(("\u10d0", "\u10f0")), LanguageCode.KA),
)


def detect_language(text: str | None) -> LanguageCode:
    """Return the first language whose characteristic test matches the text.

    Args:
        text: Input text, usually already lowercased by the slug builder.

    Returns:
        Detected concrete language, or Turkish when no rule matches.
    """

    if not text:
        return DEFAULT_LANGUAGE
    for test, language in DETECTION_RULES:
        if test(text):
            return language
    return DEFAULT_LANGUAGE
