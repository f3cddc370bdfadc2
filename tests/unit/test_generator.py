"""Unit tests for the configured slug generation service."""

from __future__ import annotations

import io

import pytest

from seourl.config import SlugConfig
from seourl.generator import SeoUrlGenerator
from seourl.languages import LanguageCode
from seourl.models import SlugResult
from seourl.telemetry.logger import RunLogger


def test_generator_applies_configured_limits_and_language() -> None:
    """Config values should drive the language and both limits."""

    generator = SeoUrlGenerator(SlugConfig(language="ru", max_length=10, max_words=1))

    assert generator.language is LanguageCode.RU
    assert generator.url("Привет большой мир") == "privet"
    assert generator.slug("Привет большой мир") == "privet"


def test_generator_defaults_match_module_functions() -> None:
    """The default generator should behave like the plain functions."""

    generator = SeoUrlGenerator()

    assert generator.url("Café à Paris") == "cafe-a-paris"
    assert generator.url(None) == ""
    assert generator.slug("one two three four five six") == "one-two-three-four-five"
    assert generator.validate("cafe-a-paris") is True
    assert generator.validate("Cafe") is False


def test_generator_detect_lowercases_before_detection() -> None:
    """Detection should see the same lowercased text the builder sees."""

    generator = SeoUrlGenerator()

    assert generator.detect("ÄRGER") == LanguageCode.AZ
    assert generator.detect("ПРИВЕТ") == LanguageCode.RU
    assert generator.detect(None) == LanguageCode.TR


def test_generator_url_many_skips_blank_lines_and_keeps_order() -> None:
    """Batch generation should return one result per non-blank line in order."""

    generator = SeoUrlGenerator()

    results = generator.url_many(["Привет мир", "", "   ", "Café", "!!!"])

    assert results == [
        SlugResult(source="Привет мир", slug="privet-mir", language=LanguageCode.RU),
        SlugResult(source="Café", slug="cafe", language=LanguageCode.FR),
        SlugResult(source="!!!", slug="", language=LanguageCode.TR),
    ]
    assert results[2].is_empty


def test_generator_rejects_invalid_config() -> None:
    """Invalid configs should fail at construction."""

    with pytest.raises(ValueError, match="Unsupported `language`"):
        SeoUrlGenerator(SlugConfig(language="xx"))


def test_generator_logs_stage_events() -> None:
    """Stage events should go to the run logger without echoing input text."""

    sink = io.StringIO()
    generator = SeoUrlGenerator(run_logger=RunLogger(sink=sink, level="DEBUG"))

    generator.url_many(["Привет", "!!!"])

    lines = sink.getvalue().splitlines()
    assert lines == [
        "[slug] level=DEBUG stage=detect event=resolved language=ru",
        "[slug] level=INFO stage=url event=complete language=ru length=6",
        "[slug] level=DEBUG stage=detect event=resolved language=tr",
        "[slug] level=WARNING stage=url event=empty language=tr",
        "[slug] level=INFO stage=url event=complete language=tr length=0",
        "[slug] level=INFO stage=batch event=complete count=2",
    ]
    assert "Привет" not in sink.getvalue()
