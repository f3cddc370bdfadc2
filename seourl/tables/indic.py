"""Replacement tables for Indic scripts and Sinhala.

Most tables map independent consonants and vowels to a single Latin letter.
Hindi deletes the whole Devanagari block instead; Marathi and Nepali share
that script but carry letter tables.
"""

from __future__ import annotations

from ..languages import LanguageCode
from .base import ReplacementTable

DEVANAGARI_BLOCK = (0x0900, 0x097F)

HINDI = ReplacementTable(LanguageCode.HI, {}, removed_ranges=(DEVANAGARI_BLOCK,))

BENGALI = ReplacementTable(
    LanguageCode.BN,
    {
        # Consonants
        "ক": "k", "খ": "k", "গ": "g", "ঘ": "g", "ঙ": "n",
        "চ": "c", "ছ": "c", "জ": "j", "ঝ": "j", "ঞ": "n",
        "ট": "t", "ঠ": "t", "ড": "d", "ঢ": "d", "ণ": "n",
        "ত": "t", "থ": "t", "দ": "d", "ধ": "d", "ন": "n",
        "প": "p", "ফ": "p", "ব": "b", "ভ": "b", "ম": "m",
        "য": "j", "র": "r", "ল": "l", "শ": "s", "ষ": "s",
        "স": "s", "হ": "h",
        # Vowels
        "অ": "a", "আ": "a", "ই": "i", "ঈ": "i", "উ": "u",
        "ঊ": "u", "ঋ": "r", "এ": "e", "ঐ": "a", "ও": "o", "ঔ": "a",
    },
)

TAMIL = ReplacementTable(
    LanguageCode.TA,
    {
        # Consonants
        "க": "k", "ங": "n", "ச": "c", "ஞ": "n", "ட": "t",
        "ண": "n", "த": "t", "ந": "n", "ப": "p", "ம": "m",
        "ய": "y", "ர": "r", "ல": "l", "வ": "v", "ழ": "z",
        "ள": "l", "ற": "r", "ன": "n", "ஜ": "j", "ஶ": "s",
        "ஷ": "s", "ஸ": "s", "ஹ": "h",
        # Vowels
        "அ": "a", "ஆ": "a", "இ": "i", "ஈ": "i", "உ": "u",
        "ஊ": "u", "எ": "e", "ஏ": "e", "ஐ": "a", "ஒ": "o",
        "ஓ": "o", "ஔ": "a",
    },
)

TELUGU = ReplacementTable(
    LanguageCode.TE,
    {
        # Consonants
        "క": "k", "ఖ": "k", "గ": "g", "ఘ": "g", "ఙ": "n",
        "చ": "c", "ఛ": "c", "జ": "j", "ఝ": "j", "ఞ": "n",
        "ట": "t", "ఠ": "t", "డ": "d", "ఢ": "d", "ణ": "n",
        "త": "t", "థ": "t", "ద": "d", "ధ": "d", "న": "n",
        "ప": "p", "ఫ": "p", "బ": "b", "భ": "b", "మ": "m",
        "య": "y", "ర": "r", "ల": "l", "వ": "v", "శ": "s",
        "ష": "s", "స": "s", "హ": "h", "ళ": "l",
        # Vowels
        "అ": "a", "ఆ": "a", "ఇ": "i", "ఈ": "i", "ఉ": "u",
        "ఊ": "u", "ఎ": "e", "ఏ": "e", "ఐ": "a", "ఒ": "o",
        "ఓ": "o", "ఔ": "a",
    },
)

MARATHI = ReplacementTable(
    LanguageCode.MR,
    {
        # Consonants
        "क": "k", "ख": "k", "ग": "g", "घ": "g", "ङ": "n",
        "च": "c", "छ": "c", "ज": "j", "झ": "j", "ञ": "n",
        "ट": "t", "ठ": "t", "ड": "d", "ढ": "d", "ण": "n",
        "त": "t", "थ": "t", "द": "d", "ध": "d", "न": "n",
        "प": "p", "फ": "p", "ब": "b", "भ": "b", "म": "m",
        "य": "y", "र": "r", "ल": "l", "व": "v", "श": "s",
        "ष": "s", "स": "s", "ह": "h", "ळ": "l",
        # Vowels
        "अ": "a", "आ": "a", "इ": "i", "ई": "i", "उ": "u",
        "ऊ": "u", "ऋ": "r", "ए": "e", "ऐ": "a", "ओ": "o",
        "औ": "a",
    },
)

GUJARATI = ReplacementTable(
    LanguageCode.GU,
    {
        # Consonants
        "ક": "k", "ખ": "k", "ગ": "g", "ઘ": "g", "ઙ": "n",
        "ચ": "c", "છ": "c", "જ": "j", "ઝ": "j", "ઞ": "n",
        "ટ": "t", "ઠ": "t", "ડ": "d", "ઢ": "d", "ણ": "n",
        "ત": "t", "થ": "t", "દ": "d", "ધ": "d", "ન": "n",
        "પ": "p", "ફ": "p", "બ": "b", "ભ": "b", "મ": "m",
        "ય": "y", "ર": "r", "લ": "l", "વ": "v", "શ": "s",
        "ષ": "s", "સ": "s", "હ": "h", "ળ": "l",
        # Vowels
        "અ": "a", "આ": "a", "ઇ": "i", "ઈ": "i", "ઉ": "u",
        "ઊ": "u", "ઋ": "r", "એ": "e", "ઐ": "a", "ઓ": "o", "ઔ": "a",
    },
)

KANNADA = ReplacementTable(
    LanguageCode.KN,
    {
        # Consonants
        "ಕ": "k", "ಖ": "k", "ಗ": "g", "ಘ": "g", "ಙ": "n",
        "ಚ": "c", "ಛ": "c", "ಜ": "j", "ಝ": "j", "ಞ": "n",
        "ಟ": "t", "ಠ": "t", "ಡ": "d", "ಢ": "d", "ಣ": "n",
        "ತ": "t", "ಥ": "t", "ದ": "d", "ಧ": "d", "ನ": "n",
        "ಪ": "p", "ಫ": "p", "ಬ": "b", "ಭ": "b", "ಮ": "m",
        "ಯ": "y", "ರ": "r", "ಲ": "l", "ವ": "v", "ಶ": "s",
        "ಷ": "s", "ಸ": "s", "ಹ": "h", "ಳ": "l",
        # Vowels
        "ಅ": "a", "ಆ": "a", "ಇ": "i", "ಈ": "i", "ಉ": "u",
        "ಊ": "u", "ಋ": "r", "ಎ": "e", "ಏ": "e", "ಐ": "a",
        "ಒ": "o", "ಓ": "o", "ಔ": "a",
    },
)

MALAYALAM = ReplacementTable(
    LanguageCode.ML,
    {
        # Consonants
        "ക": "k", "ഖ": "k", "ഗ": "g", "ഘ": "g", "ങ": "n",
        "ച": "c", "ഛ": "c", "ജ": "j", "ഝ": "j", "ഞ": "n",
        "ട": "t", "ഠ": "t", "ഡ": "d", "ഢ": "d", "ണ": "n",
        "ത": "t", "ഥ": "t", "ദ": "d", "ധ": "d", "ന": "n",
        "പ": "p", "ഫ": "p", "ബ": "b", "ഭ": "b", "മ": "m",
        "യ": "y", "ര": "r", "ല": "l", "വ": "v", "ശ": "s",
        "ഷ": "s", "സ": "s", "ഹ": "h", "ള": "l", "ഴ": "z",
        "റ": "r",
        # Vowels
        "അ": "a", "ആ": "a", "ഇ": "i", "ഈ": "i", "ഉ": "u",
        "ഊ": "u", "ഋ": "r", "എ": "e", "ഏ": "e", "ഐ": "a",
        "ഒ": "o", "ഓ": "o", "ഔ": "a",
    },
)

PUNJABI = ReplacementTable(
    LanguageCode.PA,
    {
        # Consonants
        "ਕ": "k", "ਖ": "k", "ਗ": "g", "ਘ": "g", "ਙ": "n",
        "ਚ": "c", "ਛ": "c", "ਜ": "j", "ਝ": "j", "ਞ": "n",
        "ਟ": "t", "ਠ": "t", "ਡ": "d", "ਢ": "d", "ਣ": "n",
        "ਤ": "t", "ਥ": "t", "ਦ": "d", "ਧ": "d", "ਨ": "n",
        "ਪ": "p", "ਫ": "p", "ਬ": "b", "ਭ": "b", "ਮ": "m",
        "ਯ": "y", "ਰ": "r", "ਲ": "l", "ਵ": "v",
        "ਸ": "s", "ਹ": "h",
        # Vowels
        "ਅ": "a", "ਆ": "a", "ਇ": "i", "ਈ": "i", "ਉ": "u",
        "ਊ": "u", "ਏ": "e", "ਐ": "a", "ਓ": "o", "ਔ": "a",
    },
)

ORIYA = ReplacementTable(
    LanguageCode.OR,
    {
        # Consonants
        "କ": "k", "ଖ": "k", "ଗ": "g", "ଘ": "g", "ଙ": "n",
        "ଚ": "c", "ଛ": "c", "ଜ": "j", "ଝ": "j", "ଞ": "n",
        "ଟ": "t", "ଠ": "t", "ଡ": "d", "ଢ": "d", "ଣ": "n",
        "ତ": "t", "ଥ": "t", "ଦ": "d", "ଧ": "d", "ନ": "n",
        "ପ": "p", "ଫ": "p", "ବ": "b", "ଭ": "b", "ମ": "m",
        "ଯ": "y", "ର": "r", "ଲ": "l", "ଶ": "s",
        "ଷ": "s", "ସ": "s", "ହ": "h", "ଳ": "l",
        # Vowels
        "ଅ": "a", "ଆ": "a", "ଇ": "i", "ଈ": "i", "ଉ": "u",
        "ଊ": "u", "ଋ": "r", "ଏ": "e", "ଐ": "a", "ଓ": "o", "ଔ": "a",
    },
)

ASSAMESE = ReplacementTable(
    LanguageCode.AS,
    {
        # Consonants
        "ক": "k", "খ": "k", "গ": "g", "ঘ": "g", "ঙ": "n",
        "চ": "c", "ছ": "c", "জ": "j", "ঝ": "j", "ঞ": "n",
        "ট": "t", "ঠ": "t", "ড": "d", "ঢ": "d", "ণ": "n",
        "ত": "t", "থ": "t", "দ": "d", "ধ": "d", "ন": "n",
        "প": "p", "ফ": "p", "ব": "b", "ভ": "b", "ম": "m",
        "য": "j", "ৰ": "r", "ল": "l", "ৱ": "w", "শ": "s",
        "ষ": "s", "স": "s", "হ": "h",
        # Vowels
        "অ": "a", "আ": "a", "ই": "i", "ঈ": "i", "উ": "u",
        "ঊ": "u", "ঋ": "r", "এ": "e", "ঐ": "a", "ও": "o", "ঔ": "a",
    },
)

NEPALI = ReplacementTable(
    LanguageCode.NE,
    {
        # Consonants
        "क": "k", "ख": "k", "ग": "g", "घ": "g", "ङ": "n",
        "च": "c", "छ": "c", "ज": "j", "झ": "j", "ञ": "n",
        "ट": "t", "ठ": "t", "ड": "d", "ढ": "d", "ण": "n",
        "त": "t", "थ": "t", "द": "d", "ध": "d", "न": "n",
        "प": "p", "फ": "p", "ब": "b", "भ": "b", "म": "m",
        "य": "y", "र": "r", "ल": "l", "व": "v", "श": "s",
        "ष": "s", "स": "s", "ह": "h",
        # Vowels
        "अ": "a", "आ": "a", "इ": "i", "ई": "i", "उ": "u",
        "ऊ": "u", "ऋ": "r", "ए": "e", "ऐ": "a", "ओ": "o", "औ": "a",
    },
)

SINHALA = ReplacementTable(
    LanguageCode.SI,
    {
        # Consonants
        "ක": "k", "ඛ": "kh", "ග": "g", "ඝ": "gh", "ඞ": "ng",
        "ච": "ch", "ඡ": "chh", "ජ": "j", "ඣ": "jh", "ඤ": "ny",
        "ට": "t", "ඨ": "th", "ඩ": "d", "ඪ": "dh", "ණ": "n",
        "ත": "th", "ථ": "th", "ද": "d", "ධ": "dh", "න": "n",
        "ප": "p", "ඵ": "ph", "බ": "b", "භ": "bh", "ම": "m",
        "ය": "y", "ර": "r", "ල": "l", "ව": "v", "ශ": "sh",
        "ෂ": "sh", "ස": "s", "හ": "h", "ළ": "l", "ෆ": "f",
        # Vowels
        "අ": "a", "ආ": "a", "ඇ": "ae", "ඈ": "aae", "ඉ": "i",
        "ඊ": "i", "උ": "u", "ඌ": "u", "ඍ": "ri", "ඎ": "rii",
        "ඏ": "lu", "ඐ": "luu", "එ": "e", "ඒ": "ee", "ඓ": "ai",
        "ඔ": "o", "ඕ": "oo", "ඖ": "au",
    },
)

TABLES = (
    HINDI,
    BENGALI,
    TAMIL,
    TELUGU,
    MARATHI,
    GUJARATI,
    KANNADA,
    MALAYALAM,
    PUNJABI,
    ORIYA,
    ASSAMESE,
    NEPALI,
    SINHALA,
)
