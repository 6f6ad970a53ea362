# tests/commands/test_main_app.py
"""Tests for the root Typer app and the models command group wiring."""

from unittest.mock import patch

from typer.testing import CliRunner

from plancli.config.settings import CLISettings
from plancli.main import app

runner = CliRunner()

COMMANDS = "plancli.commands.models"


def test_models_group_registered():
    result = runner.invoke(app, ["models", "--help"])
    assert result.exit_code == 0
    for sub in ("available", "create", "delete"):
        assert sub in result.stdout


def test_bare_models_shows_settings():
    with patch(f"{COMMANDS}.show_model_settings") as mock_show:
        result = runner.invoke(app, ["models"])
    assert result.exit_code == 0
    mock_show.assert_called_once()
    assert isinstance(mock_show.call_args[0][0], CLISettings)


def test_available_custom_flag():
    with patch(f"{COMMANDS}.list_available_models") as mock_list:
        result = runner.invoke(app, ["models", "available", "-c"])
    assert result.exit_code == 0
    assert mock_list.call_args.kwargs == {"custom_only": True}


def test_available_default_lists_everything():
    with patch(f"{COMMANDS}.list_available_models") as mock_list:
        runner.invoke(app, ["models", "available"])
    assert mock_list.call_args.kwargs == {"custom_only": False}


def test_delete_passes_token():
    with patch(f"{COMMANDS}.delete_custom_model") as mock_delete:
        result = runner.invoke(app, ["models", "delete", "claude"])
    assert result.exit_code == 0
    assert mock_delete.call_args[0][1] == "claude"


def test_delete_without_token():
    with patch(f"{COMMANDS}.delete_custom_model") as mock_delete:
        runner.invoke(app, ["models", "delete"])
    assert mock_delete.call_args[0][1] is None


def test_delete_rejects_extra_arguments():
    with patch(f"{COMMANDS}.delete_custom_model") as mock_delete:
        result = runner.invoke(app, ["models", "delete", "a", "b"])
    assert result.exit_code != 0
    mock_delete.assert_not_called()


def test_create_options_become_params():
    with patch(f"{COMMANDS}.create_custom_model") as mock_create:
        result = runner.invoke(
            app,
            ["models", "create", "--name", "m", "--provider", "openai", "--max-tokens", "42"],
        )
    assert result.exit_code == 0
    params = mock_create.call_args[0][1]
    assert params.model_name == "m"
    assert params.provider == "openai"
    assert params.max_tokens == "42"
    assert params.base_url is None


def test_invalid_log_level():
    result = runner.invoke(app, ["--log-level", "LOUD", "models"])
    assert result.exit_code == 2


def test_missing_credentials_exit_code(tmp_path, monkeypatch):
    monkeypatch.setenv("PLANCLI_HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    result = runner.invoke(app, ["models", "delete", "1"])
    assert result.exit_code == 1
