"""Replacement tables for Latin-script European languages, Greek and Georgian."""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable, with_uppercase

GERMAN = ReplacementTable(
    LanguageCode.DE,
    with_uppercase({"ä": "a", "ö": "o", "ü": "u", "ß": "s"}),
)

FRENCH = ReplacementTable(
    LanguageCode.FR,
    with_uppercase(
        {
            "à": "a", "â": "a", "ä": "a", "é": "e", "è": "e", "ê": "e",
            "ë": "e", "ï": "i", "î": "i", "ô": "o", "ö": "o", "ù": "u",
            "û": "u", "ü": "u", "ÿ": "y", "æ": "a", "œ": "o", "ç": "c",
        }
    ),
)

SPANISH = ReplacementTable(
    LanguageCode.ES,
    with_uppercase(
        {"á": "a", "é": "e", "í": "i", "ñ": "n", "ó": "o", "ú": "u", "ü": "u"}
    ),
)

PORTUGUESE = ReplacementTable(
    LanguageCode.PT,
    with_uppercase(
        {
            "á": "a", "à": "a", "â": "a", "ã": "a", "ä": "a",
            "é": "e", "è": "e", "ê": "e",
            "í": "i", "ì": "i", "î": "i",
            "ó": "o", "ò": "o", "ô": "o", "õ": "o", "ö": "o",
            "ú": "u", "ù": "u", "û": "u", "ü": "u",
            "ç": "c",
        }
    ),
)

ITALIAN = ReplacementTable(
    LanguageCode.IT,
    with_uppercase(
        {
            "à": "a", "è": "e", "é": "e", "ì": "i", "í": "i", "ò": "o",
            "ó": "o", "ù": "u", "ú": "u",
        }
    ),
)

SWEDISH = ReplacementTable(
    LanguageCode.SV,
    with_uppercase({"å": "a", "ä": "a", "ö": "o"}),
)

NORWEGIAN = ReplacementTable(
    LanguageCode.NO,
    with_uppercase({"å": "a", "æ": "a", "ø": "o"}),
)

DANISH = ReplacementTable(
    LanguageCode.DA,
    with_uppercase({"å": "a", "æ": "a", "ø": "o"}),
)

FINNISH = ReplacementTable(
    LanguageCode.FI,
    with_uppercase({"ä": "a", "ö": "o", "å": "a"}),
)

HUNGARIAN = ReplacementTable(
    LanguageCode.HU,
    with_uppercase(
        {
            "á": "a", "é": "e", "í": "i", "ó": "o", "ö": "o", "ő": "o",
            "ú": "u", "ü": "u", "ű": "u",
        }
    ),
)

ROMANIAN = ReplacementTable(
    LanguageCode.RO,
    with_uppercase(
        # Both comma-below and legacy cedilla forms of s and t.
        {"ă": "a", "â": "a", "î": "i", "ș": "s", "ş": "s", "ț": "t", "ţ": "t"}
    ),
)

LITHUANIAN = ReplacementTable(
    LanguageCode.LT,
    with_uppercase(
        {
            "ą": "a", "č": "c", "ę": "e", "ė": "e", "į": "i", "š": "s",
            "ų": "u", "ū": "u", "ž": "z",
        }
    ),
)

LATVIAN = ReplacementTable(
    LanguageCode.LV,
    with_uppercase(
        {
            "ā": "a", "č": "c", "ē": "e", "ģ": "g", "ī": "i", "ķ": "k",
            "ļ": "l", "ņ": "n", "š": "s", "ū": "u", "ž": "z",
        }
    ),
)

ESTONIAN = ReplacementTable(
    LanguageCode.ET,
    with_uppercase({"ä": "a", "ö": "o", "ü": "u", "õ": "o", "š": "s", "ž": "z"}),
)

GREEK = ReplacementTable(
    LanguageCode.EL,
    with_uppercase(
        {
            "α": "a", "β": "b", "γ": "g", "δ": "d", "ε": "e", "ζ": "z",
            "η": "i", "θ": "th", "ι": "i", "κ": "k", "λ": "l", "μ": "m",
            "ν": "n", "ξ": "ks", "ο": "o", "π": "p", "ρ": "r", "σ": "s",
            "ς": "s", "τ": "t", "υ": "y", "φ": "f", "χ": "ch", "ψ": "ps",
            "ω": "o",
        }
    ),
)

GEORGIAN = ReplacementTable(
    LanguageCode.KA,
    {
        "ა": "a", "ბ": "b", "გ": "g", "დ": "d", "ე": "e", "ვ": "v",
        "ზ": "z", "თ": "t", "ი": "i", "კ": "k", "ლ": "l", "მ": "m",
        "ნ": "n", "ო": "o", "პ": "p", "ჟ": "zh", "რ": "r", "ს": "s",
        "ტ": "t", "უ": "u", "ფ": "f", "ქ": "q", "ღ": "gh", "ყ": "q",
        "შ": "sh", "ჩ": "ch", "ც": "ts", "ძ": "dz", "წ": "ts", "ჭ": "ch",
        "ხ": "kh", "ჯ": "j", "ჰ": "h",
    },
)

TABLES = (
    GERMAN,
    FRENCH,
    SPANISH,
    PORTUGUESE,
    ITALIAN,
    SWEDISH,
    NORWEGIAN,
    DANISH,
    FINNISH,
    HUNGARIAN,
    ROMANIAN,
    LITHUANIAN,
    LATVIAN,
    ESTONIAN,
    GREEK,
    GEORGIAN,
)
