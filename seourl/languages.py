"""Supported language codes for slug transliteration.

Responsibilities:
- Define the closed set of language/script identifiers accepted by the API.
- Parse user-supplied code tokens (CLI flags, config values) into enum members.

Key types:
- `LanguageCode`: concrete language codes plus the `AUTO` detection sentinel.
"""

from __future__ import annotations

from enum import Enum

from .parsing import normalize_optional_string


class LanguageCode(str, Enum):
    """Language or script selecting one replacement table.

    `AUTO` is a sentinel meaning "detect from content" and has no table of its own.
    """

    TR = "tr"
    AZ = "az"
    DE = "de"
    FR = "fr"
    ES = "es"
    PT = "pt"
    IT = "it"
    SV = "sv"
    NO = "no"
    DA = "da"
    FI = "fi"
    PL = "pl"
    CS = "cs"
    SK = "sk"
    HU = "hu"
    RO = "ro"
    BG = "bg"
    HR = "hr"
    SR = "sr"
    SL = "sl"
    LT = "lt"
    LV = "lv"
    ET = "et"
    RU = "ru"
    UK = "uk"
    BY = "by"
    EL = "el"
    AR = "ar"
    HE = "he"
    FA = "fa"
    UR = "ur"
    ZH_CN = "zh-cn"
    ZH_TW = "zh-tw"
    JA = "ja"
    KO = "ko"
    VI = "vi"
    TH = "th"
    HI = "hi"
    BN = "bn"
    TA = "ta"
    TE = "te"
    MR = "mr"
    GU = "gu"
    KN = "kn"
    ML = "ml"
    PA = "pa"
    OR = "or"
    AS = "as"
    NE = "ne"
    SI = "si"
    MY = "my"
    KM = "km"
    LO = "lo"
    KA = "ka"
    MN = "mn"
    KK = "kk"
    KY = "ky"
    UZ = "uz"
    TG = "tg"
    TK = "tk"
    AUTO = "auto"

    def __str__(self) -> str:
        return self.value

    @property
    def is_auto(self) -> bool:
        """Return whether this member is the detection sentinel."""

        return self is LanguageCode.AUTO

    @classmethod
    def parse(cls, value: object) -> LanguageCode | None:
        """Parse a code token case-insensitively, accepting `_` or `-` separators.

        Args:
            value: Enum member, member name (`ZH_CN`), or value (`zh-cn`).

        Returns:
            Matching member, or `None` when the token is blank or unknown.
        """

        if isinstance(value, cls):
            return value
        token = normalize_optional_string(value)
        if token is None:
            return None
        normalized = token.lower().replace("_", "-")
        try:
            return cls(normalized)
        except ValueError:
            return None

    @classmethod
    def concrete(cls) -> tuple[LanguageCode, ...]:
        """Return every member that maps to a replacement table, in declaration order."""

        return tuple(member for member in cls if member is not cls.AUTO)
