"""Immutable character replacement tables.

Responsibilities:
- Hold one language's source-character to ASCII replacement mapping.
- Apply the mapping in a single pass with `str.translate`.
- Delete whole Unicode blocks for scripts that are not transliterated.

Key types:
- `ReplacementTable`: read-only table built once at import time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Mapping

from ..languages import LanguageCode

_REPLACEMENT_RE = re.compile(r"[a-z]*")


@dataclass(frozen=True, slots=True)
class ReplacementTable:
    """Character replacement table for one language.

    Attributes:
        language: Language code served by this table.
        replacements: Single code point keys mapped to lowercase ASCII strings.
            An empty string deletes the character.
        removed_ranges: Inclusive code point ranges deleted outright.
    """

    language: LanguageCode
    replacements: Mapping[str, str]
    removed_ranges: tuple[tuple[int, int], ...] = ()
    _translation: Mapping[int, str | None] = field(
        init=False, repr=False, compare=False, default_factory=dict
    )

    def __post_init__(self) -> None:
        """Validate entries and freeze the precomputed translation map."""

        replacements = dict(self.replacements)
        for source, target in replacements.items():
            if len(source) != 1:
                raise ValueError(
                    f"{self.language.name} table key `{source}` must be one code point."
                )
            if not _REPLACEMENT_RE.fullmatch(target):
                raise ValueError(
                    f"{self.language.name} table maps `{source}` to non-ASCII `{target}`."
                )
            if any(character in replacements for character in target):
                raise ValueError(
                    f"{self.language.name} table output `{target}` contains a table key."
                )

        translation: dict[int, str | None] = {}
        for start, end in self.removed_ranges:
            if start > end:
                raise ValueError(f"{self.language.name} table has empty range {start:#x}-{end:#x}.")
            for code_point in range(start, end + 1):
                translation[code_point] = None
        for source, target in replacements.items():
            if ord(source) in translation:
                raise ValueError(
                    f"{self.language.name} table key `{source}` overlaps a removed range."
                )
            translation[ord(source)] = target

        object.__setattr__(self, "replacements", MappingProxyType(replacements))
        object.__setattr__(self, "_translation", MappingProxyType(translation))

    def replace(self, text: str) -> str:
        """Replace mapped characters and drop removed ranges; keep everything else."""

        return text.translate(self._translation)

    def __contains__(self, character: object) -> bool:
        if not isinstance(character, str) or len(character) != 1:
            return False
        return ord(character) in self._translation


def with_uppercase(lowercase: Mapping[str, str]) -> dict[str, str]:
    """Return a mapping extended with single code point uppercase counterparts.

    Keys whose uppercase form is unchanged or expands to several characters
    (such as `ß`) are kept as-is without an uppercase entry.
    """

    mapping = dict(lowercase)
    for source, target in lowercase.items():
        upper = source.upper()
        if upper == source or len(upper) != 1:
            continue
        existing = mapping.get(upper)
        if existing is not None and existing != target:
            raise ValueError(f"Uppercase `{upper}` conflicts: `{existing}` vs `{target}`.")
        mapping[upper] = target
    return mapping
