# src/plancli/commands/actions/models.py
"""
Model command actions: show settings, list, create and delete custom models.

Every action fetches what it needs from the API on each call; nothing is
cached between invocations.
"""

from __future__ import annotations

import logging
from pathlib import Path

from chuk_term.ui import ask, format_table, output
from pydantic import BaseModel, Field, ValidationError

from plancli.api.errors import ApiError
from plancli.commands.common import (
    fail,
    open_client,
    print_cmds,
    require_auth,
    require_project,
)
from plancli.config.settings import CLISettings
from plancli.core.model_resolver import (
    CustomModelResolver,
    InvalidSelectionError,
)
from plancli.domain import AVAILABLE_MODELS, DEFAULT_MODEL_SET
from plancli.domain.models import CustomModel, ModelOverrides, ModelSet

logger = logging.getLogger(__name__)

NO_OVERRIDE = "no override"


class CreateModelParams(BaseModel):
    """Values supplied on the command line for `models create`.

    Anything left as None is prompted for.
    """

    model_name: str | None = Field(default=None, description="Model name")
    provider: str | None = Field(default=None, description="Provider name")
    base_url: str | None = Field(default=None, description="Provider API base URL")
    max_tokens: str | None = Field(default=None, description="Max tokens (integer)")
    api_key_env_var: str | None = Field(
        default=None, description="Env var holding the provider API key"
    )
    description: str | None = Field(default=None, description="Optional description")

    model_config = {"protected_namespaces": ()}


# ── models ──────────────────────────────────────────────────────────────────


def show_model_settings(settings: CLISettings, start_dir: Path | None = None) -> None:
    """Render the current plan's model set, planner defaults and overrides."""
    auth = require_auth(settings)
    project = require_project(start_dir)

    if not project.has_current_plan:
        output.info("No current plan")
        return

    try:
        with open_client(settings, auth) as client:
            with output.loading("Loading settings..."):
                plan_settings = client.get_settings(project.plan_id, project.branch)
    except ApiError as e:
        fail(f"Error getting settings: {e}")

    model_set = plan_settings.model_set or DEFAULT_MODEL_SET

    _render_model_set(model_set)
    _render_planner_overrides(plan_settings.model_overrides)

    print_cmds("models available", "models create")


def _render_model_set(model_set: ModelSet) -> None:
    output.print_table(
        format_table(
            [{model_set.name: model_set.description}],
            title="Current Model Set",
            columns=[model_set.name],
        )
    )

    rows = []
    for role_config in model_set.role_configs():
        base = role_config.base_model_config
        rows.append(
            {
                "Role": role_config.role.value,
                "Provider": base.provider,
                "Model": base.model_name,
                "Temperature": f"{role_config.temperature:.1f}",
                "Top P": f"{role_config.top_p:.1f}",
            }
        )
    output.print_table(
        format_table(
            rows,
            title="Models",
            columns=["Role", "Provider", "Model", "Temperature", "Top P"],
        )
    )

    planner = model_set.planner
    output.print_table(
        format_table(
            [
                {
                    "Max Tokens": str(planner.base_model_config.max_tokens),
                    "Max Convo Tokens": str(planner.max_convo_tokens),
                    "Reserved Output Tokens": str(planner.reserved_output_tokens),
                }
            ],
            title="Planner Defaults",
            columns=["Max Tokens", "Max Convo Tokens", "Reserved Output Tokens"],
        )
    )


def _override_value(value: int | None) -> str:
    return NO_OVERRIDE if value is None else str(value)


def _render_planner_overrides(overrides: ModelOverrides) -> None:
    rows = [
        {"Name": "Max Tokens", "Value": _override_value(overrides.max_tokens)},
        {
            "Name": "Max Convo Tokens",
            "Value": _override_value(overrides.max_convo_tokens),
        },
        {
            "Name": "Reserved Output Tokens",
            "Value": _override_value(overrides.reserved_output_tokens),
        },
    ]
    output.print_table(
        format_table(rows, title="Planner Overrides", columns=["Name", "Value"])
    )


# ── models available ────────────────────────────────────────────────────────


def list_available_models(
    settings: CLISettings, custom_only: bool = False, start_dir: Path | None = None
) -> None:
    """List built-in models (unless ``custom_only``) and custom models."""
    auth = require_auth(settings)
    project = require_project(start_dir)

    if not project.has_current_plan:
        output.info("No current plan")
        return

    try:
        with open_client(settings, auth) as client:
            with output.loading("Fetching custom models..."):
                custom_models = client.list_custom_models()
    except ApiError as e:
        fail(f"Error fetching custom models: {e}")

    if not custom_only:
        builtin_rows = [
            {
                "Provider": model.provider,
                "Name": model.model_name,
                "Max Tokens": str(model.max_tokens),
                "API Key Env Var": model.api_key_env_var,
                "URL": model.base_url,
            }
            for model in AVAILABLE_MODELS
        ]
        output.print_table(
            format_table(
                builtin_rows,
                title="Built-in Models",
                columns=["Provider", "Name", "Max Tokens", "API Key Env Var", "URL"],
            )
        )

    if custom_models:
        custom_rows = [
            {
                "#": str(i),
                "Provider": model.provider,
                "Name": model.model_name,
                "Max Tokens": str(model.max_tokens),
                "API Key Env Var": model.api_key_env_var,
                "URL": model.base_url,
            }
            for i, model in enumerate(custom_models, start=1)
        ]
        output.print_table(
            format_table(
                custom_rows,
                title="Custom Models",
                columns=["#", "Provider", "Name", "Max Tokens", "API Key Env Var", "URL"],
            )
        )
    elif custom_only:
        output.info("No custom models")

    if custom_only:
        print_cmds("models", "models create")
    else:
        print_cmds("models available --custom", "models", "models create")


# ── models create ───────────────────────────────────────────────────────────


def _value_or_ask(value: str | None, message: str) -> str:
    if value is not None:
        return value
    return (ask(message) or "").strip()


def collect_custom_model(params: CreateModelParams) -> CustomModel:
    """Fill in missing fields interactively and validate the result."""
    model_name = _value_or_ask(params.model_name, "Enter model name:")
    provider = _value_or_ask(params.provider, "Enter provider:")
    base_url = _value_or_ask(params.base_url, "Enter base URL:")

    max_tokens_str = _value_or_ask(params.max_tokens, "Enter max tokens:")
    try:
        max_tokens = int(max_tokens_str)
    except ValueError:
        fail(f"Invalid number for max tokens: {max_tokens_str!r}")

    api_key_env_var = _value_or_ask(
        params.api_key_env_var, "Enter API key environment variable:"
    )
    description = _value_or_ask(params.description, "Enter description (optional):")

    try:
        return CustomModel(
            model_name=model_name,
            provider=provider,
            base_url=base_url,
            max_tokens=max_tokens,
            api_key_env_var=api_key_env_var,
            description=description,
        )
    except ValidationError as e:
        fail(f"Invalid model: {e}")


def create_custom_model(settings: CLISettings, params: CreateModelParams) -> None:
    """Collect a custom model definition and create it on the service."""
    auth = require_auth(settings)
    model = collect_custom_model(params)

    try:
        with open_client(settings, auth) as client:
            with output.loading("Creating model..."):
                client.create_custom_model(model)
    except ApiError as e:
        fail(f"Error creating model: {e}")

    logger.info(f"Created custom model '{model.model_name}'")
    output.success("Model created successfully.")


# ── models delete ───────────────────────────────────────────────────────────


def delete_custom_model(settings: CLISettings, name_or_index: str | None = None) -> None:
    """Delete one custom model, chosen by name, 1-based index, or interactively."""
    auth = require_auth(settings)

    with open_client(settings, auth) as client:
        try:
            with output.loading("Fetching custom models..."):
                models = client.list_custom_models()
        except ApiError as e:
            fail(f"Error fetching custom models: {e}")

        if not models:
            output.info("No custom models available to delete.")
            return

        resolver = CustomModelResolver(
            prompt=ask,
            display=output.print,
            heading="Select a model to delete:",
        )
        try:
            target = resolver.resolve(name_or_index, models)
        except InvalidSelectionError as e:
            fail(str(e))

        if not target.id:
            fail(f"Custom model '{target.model_name}' has no id")

        try:
            with output.loading(f"Deleting model '{target.model_name}'..."):
                client.delete_custom_model(target.id)
        except ApiError as e:
            fail(f"Error deleting custom model: {e}")

    output.success(f"Custom model '{target.model_name}' deleted successfully.")
