"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
generated slug rows, and the supported language listing.
"""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError
from .languages import LanguageCode
from .models.datatypes import SlugResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CommandStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_slug_results(results: Iterable[SlugResult], show_source: bool = False) -> None:
    """Print one slug per line, optionally tab-prefixed with its source text."""

    for result in results:
        if show_source:
            typer.echo(f"{result.source.strip()}\t{result.slug}")
        else:
            typer.echo(result.slug)


def echo_language_list(languages: Iterable[LanguageCode]) -> None:
    """Print supported language codes in sorted order."""

    for code in sorted(language.value for language in languages):
        typer.echo(code)
