"""CLI command tests for slug generation, validation, and detection."""

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from seourl.cli import app
from seourl.languages import LanguageCode


def test_url_command_prints_slug_for_joined_words() -> None:
    """Positional words should be joined and turned into one slug."""

    runner = CliRunner()

    result = runner.invoke(app, ["url", "Café", "à", "Paris"])

    assert result.exit_code == 0
    assert result.stdout == "cafe-a-paris\n"


def test_url_command_honors_language_and_max_length() -> None:
    """Explicit language and length options should reach the builder."""

    runner = CliRunner()

    result = runner.invoke(
        app, ["url", "--language", "ru", "--max-length", "10", "Привет большой мир"]
    )

    assert result.exit_code == 0
    assert result.stdout == "privet\n"


def test_url_command_reads_input_file_lines(tmp_path: Path) -> None:
    """Each non-blank input line should produce one slug in order."""

    input_path = tmp_path / "titles.txt"
    input_path.write_text("Привет мир\n\nGroße Straße\n   \nHello World\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["url", "--input", str(input_path)])

    assert result.exit_code == 0
    assert result.stdout.splitlines() == ["privet-mir", "grose-strase", "hello-world"]


def test_url_command_shows_source_when_requested(tmp_path: Path) -> None:
    """`--show-source` should prefix slugs with their source line."""

    input_path = tmp_path / "titles.txt"
    input_path.write_text("Hello World\n", encoding="utf-8")
    runner = CliRunner()

    result = runner.invoke(app, ["url", "--input", str(input_path), "--show-source"])

    assert result.exit_code == 0
    assert result.stdout == "Hello World\thello-world\n"


def test_url_command_applies_config_file_with_cli_override(tmp_path: Path) -> None:
    """YAML values should apply unless a CLI option overrides them."""

    config_path = tmp_path / "seourl.yml"
    config_path.write_text("language: ru\nmax_length: 40\n", encoding="utf-8")
    runner = CliRunner()

    from_config = runner.invoke(app, ["url", "--config", str(config_path), "Café"])
    overridden = runner.invoke(
        app, ["url", "--config", str(config_path), "--language", "fr", "Café"]
    )

    assert from_config.exit_code == 0
    assert from_config.stdout == "caf\n"
    assert overridden.exit_code == 0
    assert overridden.stdout == "cafe\n"


def test_slug_command_limits_words_and_reads_environment(monkeypatch: MonkeyPatch) -> None:
    """Word limits should come from the CLI first, then the environment."""

    runner = CliRunner()

    default_result = runner.invoke(app, ["slug", "one two three four five six seven"])
    cli_result = runner.invoke(app, ["slug", "--max-words", "3", "one two three four"])
    monkeypatch.setenv("SEOURL_MAX_WORDS", "2")
    env_result = runner.invoke(app, ["slug", "one two three four"])

    assert default_result.stdout == "one-two-three-four-five\n"
    assert cli_result.stdout == "one-two-three\n"
    assert env_result.stdout == "one-two\n"


def test_validate_command_reports_validity_through_exit_code() -> None:
    """Valid slugs should exit 0 and invalid ones exit 1."""

    runner = CliRunner()

    valid = runner.invoke(app, ["validate", "hello-world"])
    invalid = runner.invoke(app, ["validate", "Hello--World"])

    assert valid.exit_code == 0
    assert valid.stdout == "valid\n"
    assert invalid.exit_code == 1
    assert invalid.stdout == "invalid\n"


def test_detect_command_prints_language_code() -> None:
    """Detection should print the lowercase code token."""

    runner = CliRunner()

    assert runner.invoke(app, ["detect", "Привет"]).stdout == "ru\n"
    assert runner.invoke(app, ["detect", "hello"]).stdout == "tr\n"
    assert runner.invoke(app, ["detect", "中文"]).stdout == "zh-cn\n"


def test_languages_command_lists_concrete_codes() -> None:
    """Language listing should print every concrete code and omit `auto`."""

    runner = CliRunner()

    result = runner.invoke(app, ["languages"])

    rows = result.stdout.splitlines()
    assert result.exit_code == 0
    assert len(rows) == len(LanguageCode.concrete())
    assert "zh-cn" in rows
    assert "auto" not in rows
    assert rows == sorted(rows)


def test_url_command_verbose_writes_stage_logs() -> None:
    """Verbose mode should emit stage events alongside the slug."""

    runner = CliRunner()

    result = runner.invoke(app, ["url", "--verbose", "Привет"])

    assert result.exit_code == 0
    assert "privet" in result.output
    assert "[slug] level=INFO stage=url event=complete language=ru length=6" in result.output
    assert "[slug] level=DEBUG stage=detect event=resolved language=ru" in result.output


def test_url_command_enables_logs_from_verbose_environment_flag(
    monkeypatch: MonkeyPatch,
) -> None:
    """A truthy `SEOURL_VERBOSE` should enable stage logs without `--verbose`."""

    monkeypatch.setenv("SEOURL_VERBOSE", " Yes ")
    runner = CliRunner()

    result = runner.invoke(app, ["url", "Hello"])

    assert result.exit_code == 0
    assert "[slug] level=INFO stage=url event=complete language=tr length=5" in result.output


def test_url_command_ignores_unrecognized_verbose_flag(monkeypatch: MonkeyPatch) -> None:
    """Unrecognized flag tokens should leave logging off."""

    monkeypatch.setenv("SEOURL_VERBOSE", "maybe")
    runner = CliRunner()

    result = runner.invoke(app, ["url", "Hello"])

    assert result.exit_code == 0
    assert result.output == "hello\n"
