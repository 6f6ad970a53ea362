# src/plancli/main.py
"""Entry-point for the plancli command line."""

from __future__ import annotations

import logging
from typing import Optional

import typer

from plancli.commands.models import app as models_app
from plancli.config.defaults import DEFAULT_LOG_LEVEL
from plancli.config.env_vars import EnvVar
from plancli.config.logging import setup_logging
from plancli.config.settings import CLISettings

logger = logging.getLogger(__name__)

app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    help="Command line client for the plan service.",
)


@app.callback()
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL, "--log-level", envvar=EnvVar.LOG_LEVEL.value, help="Set log level"
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", envvar=EnvVar.LOG_FILE.value, help="Write a rotating debug log"
    ),
) -> None:
    """Configure logging and settings shared by every subcommand."""
    try:
        setup_logging(level=log_level, quiet=quiet, verbose=verbose, log_file=log_file)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e

    ctx.obj = CLISettings.from_env()
    logger.debug(f"Settings: home={ctx.obj.home_dir} timeout={ctx.obj.http_timeout}")


app.add_typer(models_app, name="models")


def main() -> None:
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    main()
