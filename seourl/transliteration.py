"""Transliteration dispatch from a language code to its replacement table.

Responsibilities:
- Resolve `AUTO` through the detector before choosing a table.
- Pass text through unchanged for codes without a table.
"""

from __future__ import annotations

from .detector import detect_language
from .languages import LanguageCode
from .tables import table_for


def resolve_language(text: str, language: LanguageCode | str | None) -> LanguageCode | None:
    """Return the concrete language that will be used for the text.

    `AUTO` and `None` trigger detection; unknown codes resolve to `None`.
    """

    if language is None:
        return detect_language(text)
    code = LanguageCode.parse(language)
    if code is None:
        return None
    if code.is_auto:
        return detect_language(text)
    return code


def transliterate(text: str, language: LanguageCode | str | None = LanguageCode.AUTO) -> str:
    """Replace language-specific characters with ASCII using one table.

    Args:
        text: Input text; unmapped characters are left for later stripping.
        language: Concrete code, `AUTO`, or a code token such as `"ru"`.

    Returns:
        Text after the table substitution, or the input unchanged when the
        code does not resolve to a supported language.
    """

    code = resolve_language(text, language)
    if code is None:
        return text
    table = table_for(code)
    if table is None:
        return text
    return table.replace(text)
