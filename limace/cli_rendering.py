"""CLI output and error rendering helpers."""

from __future__ import annotations

from typing import Iterable, NoReturn

import typer

from .errors import CommandStageError


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


def echo_slugs(slugs: Iterable[str]) -> None:
    """Print one slug per line, keeping empty slugs as blank lines."""

    for slug in slugs:
        typer.echo(slug)
