# src/plancli/commands/models.py
"""`plancli models` command group."""

from __future__ import annotations

from typing import Optional

import typer

from plancli.commands.actions.models import (
    CreateModelParams,
    create_custom_model,
    delete_custom_model,
    list_available_models,
    show_model_settings,
)
from plancli.commands.common import get_settings

app = typer.Typer(
    add_completion=False,
    help="Show model settings and manage custom models.",
)


@app.callback(invoke_without_command=True)
def models(ctx: typer.Context) -> None:
    """Show model settings for the current plan."""
    if ctx.invoked_subcommand is None:
        show_model_settings(get_settings(ctx))


@app.command("available")
def available(
    ctx: typer.Context,
    custom: bool = typer.Option(
        False, "--custom", "-c", help="List custom models only"
    ),
) -> None:
    """List all available models."""
    list_available_models(get_settings(ctx), custom_only=custom)


@app.command("create")
def create(
    ctx: typer.Context,
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Model name"),
    provider: Optional[str] = typer.Option(None, "--provider", "-p", help="Provider"),
    base_url: Optional[str] = typer.Option(None, "--base-url", help="Base URL"),
    max_tokens: Optional[str] = typer.Option(
        None, "--max-tokens", help="Max tokens"
    ),
    api_key_env_var: Optional[str] = typer.Option(
        None, "--api-key-env-var", help="API key environment variable"
    ),
    description: Optional[str] = typer.Option(
        None, "--description", "-d", help="Description"
    ),
) -> None:
    """Create a custom model. Options left out are prompted for."""
    params = CreateModelParams(
        model_name=name,
        provider=provider,
        base_url=base_url,
        max_tokens=max_tokens,
        api_key_env_var=api_key_env_var,
        description=description,
    )
    create_custom_model(get_settings(ctx), params)


@app.command("delete")
def delete(
    ctx: typer.Context,
    name_or_index: Optional[str] = typer.Argument(
        None, metavar="[NAME-OR-INDEX]", help="Model name or its # in 'models available'"
    ),
) -> None:
    """Delete a custom model by name or index."""
    delete_custom_model(get_settings(ctx), name_or_index)
