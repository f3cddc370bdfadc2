"""Command-line interface for seourl.

Responsibilities:
- Expose user-facing commands for slug generation, validation, and detection.
- Convert CLI arguments into `SlugConfig` and run `SeoUrlGenerator`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_language_list, echo_slug_results, exit_with_command_error
from .config import ConfigLoader, RuntimeConfigSources, SlugConfig
from .errors import CommandStageError
from .generator import SeoUrlGenerator
from .languages import LanguageCode
from .parsing import normalize_optional_string, parse_env_flag
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="seourl",
    no_args_is_help=True,
    help="Generate SEO-friendly URL slugs from multilingual text.",
)

_ENV_VERBOSE = "SEOURL_VERBOSE"

LanguageOption = Annotated[
    str | None,
    typer.Option(
        "--language",
        "-l",
        help="Language code (`auto` to detect). Run `seourl languages` for the list.",
    ),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config with slug defaults."),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Write stage logs to stderr."),
]


def _load_yaml_config(config_path: Path | None) -> SlugConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None,
    runtime_cli_values: dict[str, str],
) -> SlugConfig:
    """Resolve effective config from YAML defaults, environment, and CLI overrides."""

    base_config = _load_yaml_config(config_file) or SlugConfig()
    try:
        return base_config.resolved(
            RuntimeConfigSources(cli=runtime_cli_values, env=os.environ)
        )
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=str(exc),
            hint="Check `--language`, `--max-length`, `--max-words` and `SEOURL_*` variables.",
        ) from exc


def _runtime_cli_values(
    language: str | None,
    max_length: int | None = None,
    max_words: int | None = None,
) -> dict[str, str]:
    """Collect explicitly provided CLI values as string overrides."""

    values: dict[str, str] = {}
    if normalize_optional_string(language) is not None:
        values["language"] = str(language)
    if max_length is not None:
        values["max_length"] = str(max_length)
    if max_words is not None:
        values["max_words"] = str(max_words)
    return values


def _build_run_logger(verbose: bool) -> RunLogger | None:
    """Return a stderr run logger when verbose output is requested."""

    if verbose or parse_env_flag(os.environ.get(_ENV_VERBOSE)):
        return RunLogger(level="DEBUG")
    return None


def _log_failure(run_logger: RunLogger | None, exc: Exception) -> None:
    """Record a stage failure when verbose logging is active."""

    if run_logger is None:
        return
    stage = exc.stage if isinstance(exc, CommandStageError) else "run"
    run_logger.log_stage_failure(stage, type(exc).__name__)


def _read_input_lines(input_file: Path) -> list[str]:
    """Read UTF-8 input lines and map file failures to stage errors."""

    try:
        return input_file.read_text(encoding="utf-8").splitlines()
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file not found: `{input_file}`.",
            hint="Provide an existing UTF-8 text file via `--input <path>`.",
        ) from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Failed to read input file `{input_file}`: {exc}",
            hint="Verify the file is readable UTF-8 text.",
        ) from exc


def _joined_text(text: list[str] | None) -> str | None:
    """Join positional words into one source text, `None` when absent."""

    if not text:
        return None
    return " ".join(text)


@app.command("url")
def url_command(
    text: Annotated[
        list[str] | None,
        typer.Argument(help="Source text; multiple words are joined with spaces."),
    ] = None,
    language: LanguageOption = None,
    max_length: Annotated[
        int | None,
        typer.Option("--max-length", help="Maximum slug length in characters."),
    ] = None,
    input_file: Annotated[
        Path | None,
        typer.Option("--input", "-i", help="Text file; one slug per non-blank line."),
    ] = None,
    show_source: Annotated[
        bool,
        typer.Option("--show-source", help="Prefix each slug with its source line."),
    ] = False,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate a length-bounded slug for text or for each line of a file."""

    source_text = _joined_text(text)
    if (source_text is None) == (input_file is None):
        exit_with_command_error(
            "url",
            CommandStageError(
                stage="input",
                detail="Provide exactly one input source: `TEXT...` or `--input <path>`.",
                hint="Use `seourl url --help` for usage examples.",
            ),
        )
    run_logger = _build_run_logger(verbose)
    try:
        config = _resolve_config(
            config_file, _runtime_cli_values(language, max_length=max_length)
        )
        generator = SeoUrlGenerator(config, run_logger=run_logger)
        if input_file is not None:
            results = generator.url_many(_read_input_lines(input_file))
        else:
            results = generator.url_many([source_text or ""])
    except Exception as exc:
        _log_failure(run_logger, exc)
        exit_with_command_error("url", exc)

    echo_slug_results(results, show_source=show_source)


@app.command("slug")
def slug_command(
    text: Annotated[list[str], typer.Argument(help="Source text.")],
    max_words: Annotated[
        int | None,
        typer.Option("--max-words", help="Maximum number of words in the slug."),
    ] = None,
    language: LanguageOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Generate a slug limited to a number of words."""

    run_logger = _build_run_logger(verbose)
    try:
        config = _resolve_config(
            config_file, _runtime_cli_values(language, max_words=max_words)
        )
        generator = SeoUrlGenerator(config, run_logger=run_logger)
        value = generator.slug(" ".join(text))
    except Exception as exc:
        _log_failure(run_logger, exc)
        exit_with_command_error("slug", exc)

    typer.echo(value)


@app.command("validate")
def validate_command(
    url: Annotated[str, typer.Argument(help="Candidate slug to check.")],
) -> None:
    """Print `valid` or `invalid`; exit code 1 when invalid."""

    if SeoUrlGenerator().validate(url):
        typer.echo("valid")
        return
    typer.echo("invalid")
    raise typer.Exit(code=1)


@app.command("detect")
def detect_command(
    text: Annotated[list[str], typer.Argument(help="Text to inspect.")],
) -> None:
    """Print the language code the detector picks for the text."""

    typer.echo(SeoUrlGenerator().detect(" ".join(text)).value)


@app.command("languages")
def languages_command() -> None:
    """List supported language codes."""

    echo_language_list(LanguageCode.concrete())


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
