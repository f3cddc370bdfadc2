"""Replacement tables for Arabic-script languages and Hebrew."""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable

ARABIC = ReplacementTable(
    LanguageCode.AR,
    {
        "ا": "a", "ب": "b", "ت": "t", "ث": "th", "ج": "j", "ح": "h",
        "خ": "kh", "د": "d", "ذ": "dh", "ر": "r", "ز": "z", "س": "s",
        "ش": "sh", "ص": "s", "ض": "d", "ط": "t", "ظ": "z", "ع": "a",
        "غ": "gh", "ف": "f", "ق": "q", "ك": "k", "ل": "l", "م": "m",
        "ن": "n", "ه": "h", "و": "w", "ي": "y", "ة": "h", "ى": "a",
        "ء": "", "آ": "a", "أ": "a", "إ": "i", "ئ": "e", "ؤ": "o",
    },
)

HEBREW = ReplacementTable(
    LanguageCode.HE,
    {
        "א": "a", "ב": "b", "ג": "g", "ד": "d", "ה": "h", "ו": "v",
        "ז": "z", "ח": "ch", "ט": "t", "י": "y", "כ": "k", "ל": "l",
        "מ": "m", "נ": "n", "ס": "s", "ע": "a", "פ": "p", "צ": "ts",
        "ק": "q", "ר": "r", "ש": "sh", "ת": "t",
        # Final forms
        "ך": "k", "ם": "m", "ן": "n", "ף": "f", "ץ": "ts",
    },
)

PERSIAN = ReplacementTable(
    LanguageCode.FA,
    {
        "ا": "a", "ب": "b", "پ": "p", "ت": "t", "ث": "s", "ج": "j",
        "چ": "ch", "ح": "h", "خ": "kh", "د": "d", "ذ": "z", "ر": "r",
        "ز": "z", "ژ": "zh", "س": "s", "ش": "sh", "ص": "s", "ض": "z",
        "ط": "t", "ظ": "z", "ع": "a", "غ": "gh", "ف": "f", "ق": "gh",
        "ک": "k", "گ": "g", "ل": "l", "م": "m", "ن": "n", "و": "v",
        "ه": "h", "ی": "y", "آ": "a", "أ": "a", "إ": "e", "ء": "",
    },
)

URDU = ReplacementTable(
    LanguageCode.UR,
    {
        "ا": "a", "ب": "b", "پ": "p", "ت": "t", "ٹ": "t", "ث": "s",
        "ج": "j", "چ": "ch", "ح": "h", "خ": "kh", "د": "d", "ڈ": "d",
        "ذ": "z", "ر": "r", "ڑ": "r", "ز": "z", "ژ": "zh", "س": "s",
        "ش": "sh", "ص": "s", "ض": "z", "ط": "t", "ظ": "z", "ع": "a",
        "غ": "gh", "ف": "f", "ق": "q", "ک": "k", "گ": "g", "ل": "l",
        "م": "m", "ن": "n", "ں": "n", "و": "w", "ہ": "h", "ھ": "h",
        "ء": "", "ی": "y", "ے": "e", "آ": "a", "أ": "a", "إ": "i",
        "ئ": "e", "ؤ": "o", "ة": "h", "ى": "a",
    },
)

TABLES = (ARABIC, HEBREW, PERSIAN, URDU)
