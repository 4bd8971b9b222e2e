"""Command-line interface for limace.

Responsibilities:
- Expose user-facing commands for slug generation.
- Resolve effective slug settings from defaults, YAML, environment, and CLI.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_slugs, exit_with_command_error
from .config import SEPARATOR_ENV_KEY, ConfigLoader, SlugConfig
from .errors import CommandStageError
from .parsing import normalize_optional_string
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="limace",
    no_args_is_help=True,
    help="Convert text into lowercase ASCII slugs.",
)

_STDIN_MARKER = "-"


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
    except Exception as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify YAML syntax and file permissions.",
        ) from exc


def _resolve_config(
    config_file: Path | None, separator: str | None
) -> tuple[SlugConfig, str]:
    """Resolve effective settings and the name of the source that won.

    Precedence from lowest to highest: default, YAML file, environment, CLI.
    """

    config = SlugConfig()
    source = "default"

    loaded_config = _load_yaml_config(config_file)
    if loaded_config is not None:
        config, source = loaded_config, "yaml"

    if normalize_optional_string(os.environ.get(SEPARATOR_ENV_KEY)) is not None:
        try:
            config, source = ConfigLoader.from_env(), "env"
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid environment variable `{SEPARATOR_ENV_KEY}`: {exc}",
                hint=f"Set `{SEPARATOR_ENV_KEY}` to one non-alphanumeric character.",
            ) from exc

    if separator is not None:
        cli_config = SlugConfig(separator=separator)
        try:
            cli_config.validate()
        except ValueError as exc:
            raise CommandStageError(
                stage="config",
                detail=f"Invalid `--separator` value: {exc}",
                hint="Pass one non-alphanumeric character, for example `-` or `_`.",
            ) from exc
        config, source = cli_config, "cli"

    return config, source


def _read_stdin_lines() -> list[str]:
    """Read input texts from stdin, one per line."""

    stream = typer.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream]


@app.command("slugify")
def slugify_command(
    texts: Annotated[
        list[str] | None,
        typer.Argument(
            help="Texts to slugify. Reads one text per stdin line when omitted or `-`.",
        ),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Separator character (overrides config)."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with slug defaults.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Emit phase logs on stderr."),
    ] = False,
) -> None:
    """Print the slug of each input text on its own line."""

    run_logger = RunLogger(enabled=verbose)
    stage = "config"
    try:
        run_logger.log_stage_start(stage)
        config, source = _resolve_config(config_file, separator)
        run_logger.log_stage_complete(stage, source=source)

        stage = "slugify"
        if not texts or texts == [_STDIN_MARKER]:
            inputs = _read_stdin_lines()
        else:
            inputs = texts
        run_logger.log_stage_start(stage, count=len(inputs))
        slugifier = config.to_slugifier()
        slugs = [slugifier.slugify(text) for text in inputs]
        run_logger.log_stage_complete(stage, count=len(slugs))
    except Exception as exc:
        run_logger.log_stage_failure(stage, type(exc).__name__)
        exit_with_command_error("slugify", exc)

    echo_slugs(slugs)


@app.command("show-config")
def show_config_command(
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with slug defaults.",
        ),
    ] = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Separator character (overrides config)."),
    ] = None,
) -> None:
    """Print the effective slug settings and where they came from."""

    try:
        config, source = _resolve_config(config_file, separator)
    except Exception as exc:
        exit_with_command_error("show-config", exc)

    typer.echo(f"Separator: {config.separator!r}")
    typer.echo(f"Source: {source}")


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
