"""Configuration model and loaders for seourl.

Responsibilities:
- Define slug generation settings as a typed dataclass.
- Provide deterministic precedence resolution for runtime overrides.
- Provide loader entry points for file- and environment-based configuration.

Key types:
- `SlugConfig`: normalized settings for slug generation.
- `RuntimeConfigSources`: optional value sources for precedence resolution.
- `ConfigLoader`: static construction helpers for `SlugConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .languages import LanguageCode
from .parsing import normalize_optional_string, parse_positive_int
from .slug import DEFAULT_MAX_LENGTH, DEFAULT_MAX_WORDS

_ENV_LANGUAGE = "SEOURL_LANGUAGE"
_ENV_MAX_LENGTH = "SEOURL_MAX_LENGTH"
_ENV_MAX_WORDS = "SEOURL_MAX_WORDS"


@dataclass(frozen=True, slots=True)
class RuntimeConfigSources:
    """Source mappings used for deterministic runtime value precedence.

    Attributes:
        cli: Values explicitly provided by CLI arguments.
        env: Values loaded from environment variables.
    """

    cli: Mapping[str, str] = field(default_factory=dict)
    env: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class SlugConfig:
    """Settings for one slug generation session.

    Attributes:
        language: Language code token, `auto` to detect from content.
        max_length: Maximum characters for `generate_url` results.
        max_words: Maximum words for `generate_slug` results.
    """

    language: str = LanguageCode.AUTO.value
    max_length: int = DEFAULT_MAX_LENGTH
    max_words: int = DEFAULT_MAX_WORDS

    @property
    def language_code(self) -> LanguageCode:
        """Return the configured language as an enum member."""

        code = LanguageCode.parse(self.language)
        if code is None:
            raise ValueError(_unsupported_language_message(self.language))
        return code

    def validate(self) -> None:
        """Validate configuration values before slug generation."""

        if LanguageCode.parse(self.language) is None:
            raise ValueError(_unsupported_language_message(self.language))
        parse_positive_int(self.max_length, "max_length")
        parse_positive_int(self.max_words, "max_words")

    def resolved(self, sources: RuntimeConfigSources | None = None) -> SlugConfig:
        """Return a validated config with runtime overrides applied.

        Precedence for each key is:
        `cli` > `env` > config field value.
        """

        resolved_sources = sources if sources is not None else RuntimeConfigSources()
        language = self._resolve_value(
            "language", _ENV_LANGUAGE, self.language, resolved_sources
        )
        max_length = self._resolve_value(
            "max_length", _ENV_MAX_LENGTH, self.max_length, resolved_sources
        )
        max_words = self._resolve_value(
            "max_words", _ENV_MAX_WORDS, self.max_words, resolved_sources
        )

        config = SlugConfig(
            language=str(language),
            max_length=parse_positive_int(max_length, "max_length"),
            max_words=parse_positive_int(max_words, "max_words"),
        )
        config.validate()
        return config

    @staticmethod
    def _resolve_value(
        key: str,
        env_key: str,
        default_value: object,
        sources: RuntimeConfigSources,
    ) -> object:
        """Resolve one value from sources in deterministic precedence order."""

        cli_value = _normalized_lookup(sources.cli, key)
        if cli_value is not None:
            return cli_value

        env_value = _normalized_lookup(sources.env, env_key)
        if env_value is not None:
            return env_value

        return default_value


class ConfigLoader:
    """Factory methods for creating `SlugConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"language", "max_length", "max_words"})

    @staticmethod
    def from_yaml(path: Path) -> SlugConfig:
        """Create a validated config from a YAML file."""

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)

        return ConfigLoader._build_config_from_mapping(payload, source_label=f"YAML `{path}`")

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> SlugConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        language = _normalized_lookup(env_map, _ENV_LANGUAGE) or LanguageCode.AUTO.value
        max_length = ConfigLoader._optional_env_positive_int(env_map, _ENV_MAX_LENGTH)
        max_words = ConfigLoader._optional_env_positive_int(env_map, _ENV_MAX_WORDS)

        config = SlugConfig(
            language=language,
            max_length=max_length or DEFAULT_MAX_LENGTH,
            max_words=max_words or DEFAULT_MAX_WORDS,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(payload: Mapping[str, Any], source_label: str) -> SlugConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        raw_language = payload.get("language")
        if raw_language is False:
            # YAML 1.1 reads an unquoted `no` (Norwegian) as a boolean.
            raw_language = LanguageCode.NO.value
        language = normalize_optional_string(raw_language) or LanguageCode.AUTO.value
        if LanguageCode.parse(language) is None:
            raise ValueError(f"{source_label}: {_unsupported_language_message(language)}")
        max_length = ConfigLoader._optional_positive_int(
            payload, "max_length", source_label, default=DEFAULT_MAX_LENGTH
        )
        max_words = ConfigLoader._optional_positive_int(
            payload, "max_words", source_label, default=DEFAULT_MAX_WORDS
        )

        config = SlugConfig(
            language=language,
            max_length=max_length,
            max_words=max_words,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_positive_int(
        payload: Mapping[str, Any], key: str, source_label: str, default: int
    ) -> int:
        """Read and validate a positive integer payload field."""

        if key not in payload or normalize_optional_string(payload[key]) is None:
            return default
        try:
            return parse_positive_int(payload[key], key)
        except ValueError as exc:
            raise ValueError(f"{source_label} field `{key}` must be a positive integer.") from exc

    @staticmethod
    def _optional_env_positive_int(env: Mapping[str, str], key: str) -> int | None:
        """Read an optional positive integer from environment mapping."""

        raw_value = _normalized_lookup(env, key)
        if raw_value is None:
            return None
        try:
            return parse_positive_int(raw_value, key)
        except ValueError as exc:
            raise ValueError(f"Environment variable `{key}` must be a positive integer.") from exc


def _normalized_lookup(mapping: Mapping[str, str], key: str) -> str | None:
    """Return a stripped mapping value for a key or `None` when missing/blank."""

    if key not in mapping:
        return None
    return normalize_optional_string(mapping.get(key))


def _unsupported_language_message(value: object) -> str:
    """Build the shared error message for unknown language codes."""

    return (
        f"Unsupported `language` value `{value}`; "
        "run `seourl languages` for supported codes."
    )
