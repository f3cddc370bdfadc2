"""Unit tests for YAML/environment configuration loader behavior."""

from __future__ import annotations

from pathlib import Path

import pytest

from seourl.config import ConfigLoader, RuntimeConfigSources, SlugConfig
from seourl.languages import LanguageCode


def test_config_loader_from_yaml_loads_valid_config_and_normalizes_values(
    tmp_path: Path,
) -> None:
    """YAML loader should parse valid payloads and normalize typed/blank values."""

    config_path = tmp_path / "seourl.yml"
    config_path.write_text(
        """
language: " RU "
max_length: " 80 "
max_words: 4
""".strip(),
        encoding="utf-8",
    )

    config = ConfigLoader.from_yaml(config_path)

    assert config.language_code is LanguageCode.RU
    assert config.max_length == 80
    assert config.max_words == 4


def test_config_loader_from_yaml_uses_defaults_for_empty_file(tmp_path: Path) -> None:
    """An empty YAML document should produce the default config."""

    config_path = tmp_path / "empty.yml"
    config_path.write_text("", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path) == SlugConfig()


def test_config_loader_from_yaml_reads_unquoted_norwegian_code(tmp_path: Path) -> None:
    """An unquoted `no` should still select Norwegian rather than a boolean."""

    config_path = tmp_path / "norwegian.yml"
    config_path.write_text("language: no\n", encoding="utf-8")

    assert ConfigLoader.from_yaml(config_path).language_code is LanguageCode.NO


def test_config_loader_from_yaml_rejects_unknown_keys(tmp_path: Path) -> None:
    """YAML loader should fail clearly on unknown fields."""

    unknown_path = tmp_path / "unknown.yml"
    unknown_path.write_text("language: tr\nseparator: _\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): separator"):
        ConfigLoader.from_yaml(unknown_path)


def test_config_loader_from_yaml_rejects_invalid_typed_values(tmp_path: Path) -> None:
    """YAML loader should reject invalid typed tokens with actionable errors."""

    invalid_int_path = tmp_path / "invalid-int.yml"
    invalid_int_path.write_text("max_length: 0\n", encoding="utf-8")

    with pytest.raises(ValueError, match="field `max_length` must be a positive integer"):
        ConfigLoader.from_yaml(invalid_int_path)

    invalid_language_path = tmp_path / "invalid-language.yml"
    invalid_language_path.write_text("language: klingon\n", encoding="utf-8")

    with pytest.raises(ValueError, match="Unsupported `language` value `klingon`"):
        ConfigLoader.from_yaml(invalid_language_path)

    retired_key_path = tmp_path / "extra.yml"
    retired_key_path.write_text("extra:\n  site: blog\n", encoding="utf-8")

    with pytest.raises(ValueError, match=r"unsupported key\(s\): extra"):
        ConfigLoader.from_yaml(retired_key_path)


def test_config_loader_from_yaml_rejects_non_mapping_and_broken_yaml(tmp_path: Path) -> None:
    """Root payloads must be mappings and syntax errors must surface as `ValueError`."""

    list_path = tmp_path / "list.yml"
    list_path.write_text("- tr\n- ru\n", encoding="utf-8")

    with pytest.raises(ValueError, match="top-level mapping/object"):
        ConfigLoader.from_yaml(list_path)

    broken_path = tmp_path / "broken.yml"
    broken_path.write_text("language: [tr\n", encoding="utf-8")

    with pytest.raises(ValueError, match="is not valid YAML"):
        ConfigLoader.from_yaml(broken_path)


def test_config_loader_from_yaml_propagates_missing_file(tmp_path: Path) -> None:
    """Missing files should raise `FileNotFoundError` for the CLI to map."""

    with pytest.raises(FileNotFoundError):
        ConfigLoader.from_yaml(tmp_path / "absent.yml")


def test_config_loader_from_env_loads_runtime_values_and_normalizes_blanks() -> None:
    """Environment loader should parse runtime keys and normalize blank strings."""

    env = {
        "SEOURL_LANGUAGE": " de ",
        "SEOURL_MAX_LENGTH": " 60 ",
        "SEOURL_MAX_WORDS": "   ",
    }

    config = ConfigLoader.from_env(env)

    assert config.language_code is LanguageCode.DE
    assert config.max_length == 60
    assert config.max_words == 5


def test_config_loader_from_env_rejects_invalid_integers() -> None:
    """Environment integers should name the offending variable."""

    with pytest.raises(
        ValueError, match="Environment variable `SEOURL_MAX_WORDS` must be a positive integer"
    ):
        ConfigLoader.from_env({"SEOURL_MAX_WORDS": "-1"})


def test_resolved_applies_cli_over_env_over_config_values() -> None:
    """Runtime precedence should be `cli` > `env` > config field value."""

    base = SlugConfig(language="fr", max_length=50, max_words=3)
    sources = RuntimeConfigSources(
        cli={"language": "ru"},
        env={"SEOURL_LANGUAGE": "de", "SEOURL_MAX_LENGTH": "70"},
    )

    resolved = base.resolved(sources)

    assert resolved.language_code is LanguageCode.RU
    assert resolved.max_length == 70
    assert resolved.max_words == 3


def test_resolved_ignores_blank_runtime_values() -> None:
    """Blank CLI or environment values should fall through to the next source."""

    base = SlugConfig(language="tr", max_words=2)
    sources = RuntimeConfigSources(cli={"max_words": " "}, env={"SEOURL_LANGUAGE": ""})

    resolved = base.resolved(sources)

    assert resolved.language_code is LanguageCode.TR
    assert resolved.max_words == 2


def test_resolved_rejects_invalid_runtime_values() -> None:
    """Invalid runtime overrides should fail validation."""

    with pytest.raises(ValueError, match="`max_length` must be a positive integer"):
        SlugConfig().resolved(RuntimeConfigSources(cli={"max_length": "0"}))

    with pytest.raises(ValueError, match="Unsupported `language` value `xx`"):
        SlugConfig().resolved(RuntimeConfigSources(env={"SEOURL_LANGUAGE": "xx"}))


def test_slug_config_validate_rejects_bad_fields() -> None:
    """Direct construction should be checked by `validate`."""

    with pytest.raises(ValueError, match="Unsupported `language`"):
        SlugConfig(language="zz").validate()
    with pytest.raises(ValueError, match="`max_words` must be a positive integer"):
        SlugConfig(max_words=0).validate()
