"""Replacement tables for Turkic languages and Tajik.

Turkish, Azerbaijani, Uzbek and Turkmen use Latin-script tables; Kazakh,
Kyrgyz and Tajik are Cyrillic-to-Latin tables.
"""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable, with_uppercase

TURKISH = ReplacementTable(
    LanguageCode.TR,
    {
        **with_uppercase(
            {"ç": "c", "ğ": "g", "ı": "i", "ö": "o", "ş": "s", "ü": "u"}
        ),
        "İ": "i",
    },
)

AZERBAIJANI = ReplacementTable(
    LanguageCode.AZ,
    {
        **with_uppercase(
            {"ə": "e", "ç": "c", "ğ": "g", "ı": "i", "ö": "o", "ş": "s", "ü": "u"}
        ),
        "İ": "i",
    },
)

KAZAKH = ReplacementTable(
    LanguageCode.KK,
    with_uppercase(
        {
            "а": "a", "ә": "a", "б": "b", "в": "v", "г": "g", "ғ": "gh",
            "д": "d", "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i",
            "й": "y", "к": "k", "қ": "q", "л": "l", "м": "m", "н": "n",
            "ң": "ng", "о": "o", "ө": "o", "п": "p", "р": "r", "с": "s",
            "т": "t", "у": "u", "ұ": "u", "ү": "u", "ф": "f", "х": "kh",
            "һ": "h", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch", "ъ": "",
            "ы": "y", "і": "i", "ь": "", "э": "e", "ю": "yu", "я": "ya",
        }
    ),
)

KYRGYZ = ReplacementTable(
    LanguageCode.KY,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
            "ё": "yo", "ж": "zh", "з": "z", "и": "i", "й": "y", "к": "k",
            "л": "l", "м": "m", "н": "n", "ң": "ng", "о": "o", "ө": "o",
            "п": "p", "р": "r", "с": "s", "т": "t", "у": "u", "ү": "u",
            "ф": "f", "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "shch",
            "ъ": "", "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
        }
    ),
)

UZBEK = ReplacementTable(
    LanguageCode.UZ,
    with_uppercase(
        {
            "ā": "a", "č": "c", "ḡ": "g", "ḫ": "h", "ī": "i", "ñ": "n",
            "ō": "o", "ö": "o", "š": "s", "ū": "u", "ü": "u", "ž": "z",
        }
    ),
)

TURKMEN = ReplacementTable(
    LanguageCode.TK,
    with_uppercase(
        {
            "ä": "a", "ç": "c", "ž": "z", "ň": "n", "ö": "o", "ş": "s",
            "ü": "u", "ý": "y",
        }
    ),
)

TAJIK = ReplacementTable(
    LanguageCode.TG,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "ғ": "gh", "д": "d",
            "е": "e", "ё": "yo", "ж": "zh", "з": "z", "и": "i", "ӣ": "i",
            "й": "y", "к": "k", "қ": "q", "л": "l", "м": "m", "н": "n",
            "о": "o", "п": "p", "р": "r", "с": "s", "т": "t", "у": "u",
            "ӯ": "u", "ф": "f", "х": "kh", "ҳ": "h", "ч": "ch", "ҷ": "j",
            "ш": "sh", "ъ": "", "э": "e", "ю": "yu", "я": "ya",
        }
    ),
)

TABLES = (TURKISH, AZERBAIJANI, KAZAKH, KYRGYZ, UZBEK, TURKMEN, TAJIK)
