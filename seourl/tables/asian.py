"""Replacement tables for East and Southeast Asian scripts and Mongolian.

Chinese, Korean and Thai have no letter table: their blocks are deleted.
Japanese maps the basic Hiragana syllabary and deletes CJK ideographs.
"""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable, with_uppercase

CJK_UNIFIED_IDEOGRAPHS = (0x4E00, 0x9FFF)
HANGUL_SYLLABLES = (0xAC00, 0xD7AF)
THAI_BLOCK = (0x0E00, 0x0E7F)

CHINESE_SIMPLIFIED = ReplacementTable(
    LanguageCode.ZH_CN, {}, removed_ranges=(CJK_UNIFIED_IDEOGRAPHS,)
)
CHINESE_TRADITIONAL = ReplacementTable(
    LanguageCode.ZH_TW, {}, removed_ranges=(CJK_UNIFIED_IDEOGRAPHS,)
)

JAPANESE = ReplacementTable(
    LanguageCode.JA,
    {
        "あ": "a", "い": "i", "う": "u", "え": "e", "お": "o",
        "か": "ka", "き": "ki", "く": "ku", "け": "ke", "こ": "ko",
        "さ": "sa", "し": "shi", "す": "su", "せ": "se", "そ": "so",
        "た": "ta", "ち": "chi", "つ": "tsu", "て": "te", "と": "to",
        "な": "na", "に": "ni", "ぬ": "nu", "ね": "ne", "の": "no",
        "は": "ha", "ひ": "hi", "ふ": "fu", "へ": "he", "ほ": "ho",
        "ま": "ma", "み": "mi", "む": "mu", "め": "me", "も": "mo",
        "や": "ya", "ゆ": "yu", "よ": "yo",
        "ら": "ra", "り": "ri", "る": "ru", "れ": "re", "ろ": "ro",
        "わ": "wa", "を": "wo", "ん": "n",
    },
    removed_ranges=(CJK_UNIFIED_IDEOGRAPHS,),
)

KOREAN = ReplacementTable(LanguageCode.KO, {}, removed_ranges=(HANGUL_SYLLABLES,))

THAI = ReplacementTable(LanguageCode.TH, {}, removed_ranges=(THAI_BLOCK,))

VIETNAMESE = ReplacementTable(
    LanguageCode.VI,
    with_uppercase(
        {
            "à": "a", "á": "a", "ả": "a", "ã": "a", "ạ": "a",
            "ă": "a", "ằ": "a", "ắ": "a", "ẳ": "a", "ẵ": "a", "ặ": "a",
            "â": "a", "ầ": "a", "ấ": "a", "ẩ": "a", "ẫ": "a", "ậ": "a",
            "đ": "d",
            "è": "e", "é": "e", "ẻ": "e", "ẽ": "e", "ẹ": "e",
            "ê": "e", "ề": "e", "ế": "e", "ể": "e", "ễ": "e", "ệ": "e",
            "ì": "i", "í": "i", "ỉ": "i", "ĩ": "i", "ị": "i",
            "ò": "o", "ó": "o", "ỏ": "o", "õ": "o", "ọ": "o",
            "ô": "o", "ồ": "o", "ố": "o", "ổ": "o", "ỗ": "o", "ộ": "o",
            "ơ": "o", "ờ": "o", "ớ": "o", "ở": "o", "ỡ": "o", "ợ": "o",
            "ù": "u", "ú": "u", "ủ": "u", "ũ": "u", "ụ": "u",
            "ư": "u", "ừ": "u", "ứ": "u", "ử": "u", "ữ": "u", "ự": "u",
            "ỳ": "y", "ý": "y", "ỷ": "y", "ỹ": "y", "ỵ": "y",
        }
    ),
)

BURMESE = ReplacementTable(
    LanguageCode.MY,
    {
        "က": "k", "ခ": "kh", "ဂ": "g", "ဃ": "gh", "င": "ng",
        "စ": "s", "ဆ": "hs", "ဇ": "z", "ဈ": "jh", "ဉ": "ny",
        "ည": "nw", "တ": "t", "ထ": "ht", "ဒ": "d", "ဓ": "dh",
        "န": "n", "ပ": "p", "ဖ": "f", "ဗ": "b", "ဘ": "bh",
        "မ": "m", "ယ": "y", "ရ": "r", "လ": "l", "ဝ": "w",
        "သ": "th", "ဟ": "h", "ဠ": "l", "အ": "a",
    },
)

KHMER = ReplacementTable(
    LanguageCode.KM,
    {
        "ក": "k", "ខ": "kh", "គ": "g", "ឃ": "gh", "ង": "ng",
        "ច": "ch", "ឆ": "chh", "ជ": "j", "ឈ": "jh", "ញ": "ny",
        "ដ": "d", "ឋ": "th", "ឌ": "d", "ឍ": "dh", "ណ": "n",
        "ត": "t", "ថ": "th", "ទ": "t", "ធ": "th", "ន": "n",
        "ប": "b", "ផ": "ph", "ព": "p", "ភ": "ph", "ម": "m",
        "យ": "y", "រ": "r", "ល": "l", "វ": "v", "ស": "s",
        "ហ": "h", "ឡ": "l", "អ": "a",
    },
)

LAO = ReplacementTable(
    LanguageCode.LO,
    {
        "ກ": "k", "ຂ": "kh", "ຄ": "k", "ງ": "ng", "ຈ": "ch",
        "ສ": "s", "ຊ": "s", "ຍ": "ny", "ດ": "d", "ຕ": "t",
        "ຖ": "th", "ທ": "th", "ນ": "n", "ບ": "b", "ປ": "p",
        "ຜ": "ph", "ຝ": "f", "ພ": "ph", "ຟ": "f", "ມ": "m",
        "ຢ": "y", "ຣ": "r", "ລ": "l", "ວ": "w", "ຫ": "h",
        "ອ": "o", "ຮ": "h",
    },
)

MONGOLIAN = ReplacementTable(
    LanguageCode.MN,
    with_uppercase(
        {
            "а": "a", "б": "b", "в": "v", "г": "g", "д": "d", "е": "e",
            "ё": "yo", "ж": "j", "з": "z", "и": "i", "й": "i", "к": "k",
            "л": "l", "м": "m", "н": "n", "о": "o", "ө": "o", "п": "p",
            "р": "r", "с": "s", "т": "t", "у": "u", "ү": "u", "ф": "f",
            "х": "kh", "ц": "ts", "ч": "ch", "ш": "sh", "щ": "sh", "ъ": "",
            "ы": "y", "ь": "", "э": "e", "ю": "yu", "я": "ya",
        }
    ),
)

TABLES = (
    CHINESE_SIMPLIFIED,
    CHINESE_TRADITIONAL,
    JAPANESE,
    KOREAN,
    VIETNAMESE,
    THAI,
    BURMESE,
    KHMER,
    LAO,
    MONGOLIAN,
)
