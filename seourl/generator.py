"""Configured slug generation service.

Responsibilities:
- Bind a `SlugConfig` to the pure slug functions.
- Emit stage events through `RunLogger` without logging input text.

Key types:
- `SeoUrlGenerator`: facade used by the CLI and by applications that want
  configuration-driven defaults.
"""

from __future__ import annotations

from typing import Iterable

from .config import SlugConfig
from .detector import detect_language
from .languages import LanguageCode
from .models.datatypes import SlugResult
from .slug import generate_slug, generate_url, is_valid_seo_url
from .telemetry.logger import RunLogger
from .transliteration import resolve_language


class SeoUrlGenerator:
    """Generate slugs with configured language and limits."""

    def __init__(
        self,
        config: SlugConfig | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Validate config and keep an optional run logger."""

        self.config = config or SlugConfig()
        self.config.validate()
        self._language = self.config.language_code
        self._run_logger = run_logger

    @property
    def language(self) -> LanguageCode:
        """Return the configured language code."""

        return self._language

    def url(self, text: str | None) -> str:
        """Return a length-bounded slug for the text."""

        return self._url_result(text or "").slug

    def slug(self, text: str | None) -> str:
        """Return a word-bounded slug for the text."""

        value = generate_slug(text, self.config.max_words, language=self._language)
        self._log("slug", "complete", words=value.count("-") + 1 if value else 0)
        return value

    def validate(self, url: str | None) -> bool:
        """Return whether the value already has slug shape."""

        valid = is_valid_seo_url(url)
        self._log("validate", "complete", valid="true" if valid else "false")
        return valid

    def detect(self, text: str | None) -> LanguageCode:
        """Return the detected language for lowercased text, as the builder sees it."""

        language = detect_language((text or "").lower())
        self._log("detect", "complete", language=language.value)
        return language

    def url_many(self, lines: Iterable[str]) -> list[SlugResult]:
        """Return one result per non-blank line, preserving input order."""

        results = [self._url_result(line) for line in lines if line.strip()]
        self._log("batch", "complete", count=len(results))
        return results

    def _url_result(self, text: str) -> SlugResult:
        """Generate one slug and record the language that served it."""

        language = resolve_language(text.lower(), self._language)
        if self._language.is_auto and language is not None:
            self._debug("detect", "resolved", language=language.value)
        value = generate_url(text, self._language, self.config.max_length)
        if not value:
            self._warn("url", "empty", language=language.value if language else "none")
        self._log(
            "url",
            "complete",
            language=language.value if language else "none",
            length=len(value),
        )
        return SlugResult(source=text, slug=value, language=language)

    def _log(self, stage: str, event: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_event(stage, event, **context)

    def _debug(self, stage: str, event: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_debug(stage, event, **context)

    def _warn(self, stage: str, event: str, **context: object) -> None:
        if self._run_logger is not None:
            self._run_logger.log_warning(stage, event, **context)
