"""Per-language replacement tables.

This package holds one immutable `ReplacementTable` per concrete
`LanguageCode`, grouped by script family, and the registry used by the
transliteration dispatcher.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from ..languages import LanguageCode
from . import asian, european, indic, middle_eastern, slavic, turkic
from .base import ReplacementTable


def _build_registry() -> Mapping[LanguageCode, ReplacementTable]:
    """Index every table by language and require full coverage of concrete codes."""

    registry: dict[LanguageCode, ReplacementTable] = {}
    for module in (turkic, slavic, european, middle_eastern, indic, asian):
        for table in module.TABLES:
            if table.language in registry:
                raise RuntimeError(f"Duplicate replacement table for `{table.language.name}`.")
            registry[table.language] = table

    missing = [code.name for code in LanguageCode.concrete() if code not in registry]
    if missing:
        raise RuntimeError(f"Missing replacement tables: {', '.join(missing)}.")
    return MappingProxyType(registry)


TABLES_BY_LANGUAGE = _build_registry()


def table_for(language: LanguageCode) -> ReplacementTable | None:
    """Return the table for a concrete language, or `None` for `AUTO`."""

    return TABLES_BY_LANGUAGE.get(language)


__all__ = ["ReplacementTable", "TABLES_BY_LANGUAGE", "table_for"]
