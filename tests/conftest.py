"""Shared pytest fixtures for the full seourl test suite."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clear_seourl_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep `SEOURL_*` variables from the host shell out of config resolution."""

    for key in ("SEOURL_LANGUAGE", "SEOURL_MAX_LENGTH", "SEOURL_MAX_WORDS", "SEOURL_VERBOSE"):
        monkeypatch.delenv(key, raising=False)
