"""Replacement tables for Slavic languages.

Russian, Ukrainian, Belarusian, Bulgarian and Serbian transliterate Cyrillic;
Serbian also folds its Latin alphabet. The remaining tables strip Latin
diacritics.
"""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable, with_uppercase

RUSSIAN = ReplacementTable(
    LanguageCode.RU,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
            "ё": "e", "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k",
            "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r",
            "с": "s", "т": "t", "у": "u", "ф": "f", "х": "h", "ц": "ts",
            "ч": "ch", "ш": "sh", "щ": "sch", "ъ": "", "ы": "y", "ь": "",
            "э": "e", "ю": "yu", "я": "ya",
        }
    ),
)

UKRAINIAN = ReplacementTable(
    LanguageCode.UK,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "h", "ґ": "g", "д": "d",
            "е": "e", "є": "ie", "ж": "zh", "з": "z", "и": "y", "і": "i",
            "ї": "i", "й": "i", "к": "k", "л": "l", "м": "m", "н": "n",
            "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
            "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sch",
            "ь": "", "ю": "iu", "я": "ia",
        }
    ),
)

BELARUSIAN = ReplacementTable(
    LanguageCode.BY,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "h", "д": "d", "е": "e",
            "ё": "yo", "ж": "zh", "з": "z", "і": "i", "й": "y", "к": "k",
            "л": "l", "м": "m", "н": "n", "о": "o", "п": "p", "р": "r",
            "с": "s", "т": "t", "у": "u", "ў": "w", "ф": "f", "х": "kh",
            "ц": "ts", "ч": "ch", "ш": "sh", "ы": "y", "ь": "", "э": "e",
            "ю": "yu", "я": "ya",
        }
    ),
)

BULGARIAN = ReplacementTable(
    LanguageCode.BG,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
            "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k", "л": "l",
            "м": "m", "н": "n", "о": "o", "п": "p", "р": "r", "с": "s",
            "т": "t", "у": "u", "ф": "f", "х": "h", "ц": "ts", "ч": "ch",
            "ш": "sh", "щ": "sht", "ъ": "a", "ь": "", "ю": "yu", "я": "ya",
        }
    ),
)

SERBIAN = ReplacementTable(
    LanguageCode.SR,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "ђ": "dj",
            "е": "e", "ж": "zh", "з": "z", "и": "i", "ј": "j", "к": "k",
            "л": "l", "љ": "lj", "м": "m", "н": "n", "њ": "nj", "о": "o",
            "п": "p", "р": "r", "с": "s", "т": "t", "ћ": "c", "у": "u",
            "ф": "f", "х": "h", "ц": "c", "ч": "ch", "џ": "dz", "ш": "sh",
            # Latin alphabet
            "č": "c", "ć": "c", "đ": "dj", "š": "s", "ž": "z",
        }
    ),
)

CROATIAN = ReplacementTable(
    LanguageCode.HR,
    with_uppercase({"č": "c", "ć": "c", "đ": "d", "š": "s", "ž": "z"}),
)

SLOVENIAN = ReplacementTable(
    LanguageCode.SL,
    with_uppercase({"č": "c", "š": "s", "ž": "z"}),
)

POLISH = ReplacementTable(
    LanguageCode.PL,
    with_uppercase(
        {
            "ą": "a", "ć": "c", "ę": "e", "ł": "l", "ń": "n", "ó": "o",
            "ś": "s", "ź": "z", "ż": "z",
        }
    ),
)

CZECH = ReplacementTable(
    LanguageCode.CS,
    with_uppercase(
        {
            "á": "a", "č": "c", "ď": "d", "é": "e", "ě": "e", "í": "i",
            "ň": "n", "ó": "o", "ř": "r", "š": "s", "ť": "t", "ú": "u",
            "ů": "u", "ý": "y", "ž": "z",
        }
    ),
)

SLOVAK = ReplacementTable(
    LanguageCode.SK,
    with_uppercase(
        {
            "á": "a", "ä": "a", "č": "c", "ď": "d", "é": "e", "í": "i",
            "ĺ": "l", "ľ": "l", "ň": "n", "ó": "o", "ô": "o", "ŕ": "r",
            "š": "s", "ť": "t", "ú": "u", "ý": "y", "ž": "z",
        }
    ),
)

TABLES = (
    RUSSIAN,
    UKRAINIAN,
    BELARUSIAN,
    BULGARIAN,
    SERBIAN,
    CROATIAN,
    SLOVENIAN,
    POLISH,
    CZECH,
    SLOVAK,
)
