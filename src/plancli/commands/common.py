# src/plancli/commands/common.py
"""Helpers shared by command implementations."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn

import typer
from chuk_term.ui import output

from plancli.api.client import ApiClient
from plancli.config.settings import CLISettings
from plancli.context import (
    AuthContext,
    ProjectContext,
    SessionError,
    resolve_auth,
    resolve_project,
)

logger = logging.getLogger(__name__)

CLI_NAME = "plancli"


def fail(message: str) -> NoReturn:
    """Report ``message`` and end the command with exit status 1."""
    output.error(message)
    raise typer.Exit(code=1)


def print_cmds(*cmds: str) -> None:
    """Suggest follow-up commands."""
    output.print("")
    for cmd in cmds:
        output.hint(f"{CLI_NAME} {cmd}")


def get_settings(ctx: typer.Context | None) -> CLISettings:
    """Settings stored by the root callback, or fresh ones from the environment."""
    if ctx is not None and isinstance(ctx.obj, CLISettings):
        return ctx.obj
    return CLISettings.from_env()


def require_auth(settings: CLISettings) -> AuthContext:
    try:
        return resolve_auth(settings)
    except SessionError as e:
        fail(str(e))


def require_project(start: Path | None = None) -> ProjectContext:
    try:
        return resolve_project(start)
    except SessionError as e:
        fail(str(e))


def open_client(settings: CLISettings, auth: AuthContext) -> ApiClient:
    """Create an API client for the resolved credentials."""
    logger.debug(f"Using API host {auth.api_host}")
    return ApiClient(
        base_url=auth.api_host,
        token=auth.token,
        org_id=auth.org_id,
        timeout=settings.http_timeout,
    )
