"""Core datatypes shared across seourl modules.

Responsibilities:
- Represent immutable records returned by batch slug generation.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..languages import LanguageCode


@dataclass(frozen=True, slots=True)
class SlugResult:
    """One generated slug together with its source text.

    Attributes:
        source: Input text as given by the caller.
        slug: Generated slug, possibly empty.
        language: Concrete language used for transliteration, or `None`
            when the requested code had no table.
    """

    source: str
    slug: str
    language: LanguageCode | None

    @property
    def is_empty(self) -> bool:
        """Return whether the source produced no slug characters."""

        return not self.slug
