"""Common test fixtures for plancli tests."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from plancli.config.env_vars import EnvVar
from plancli.config.settings import CLISettings
from plancli.domain.models import CustomModel


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's real environment out of the tests."""
    for var in EnvVar:
        if var is not EnvVar.HOME:
            monkeypatch.delenv(var.value, raising=False)


@pytest.fixture
def settings(tmp_path):
    """Settings pointing at an empty per-test home directory."""
    return CLISettings(home_dir=tmp_path / "home")


@pytest.fixture
def authed(monkeypatch):
    """Provide credentials through the environment."""
    monkeypatch.setenv(EnvVar.API_TOKEN.value, "test-token")
    monkeypatch.setenv(EnvVar.ORG_ID.value, "org-1")


def _make_project(root, plan_id="plan-1", branch="main"):
    """Create a project directory under ``root`` and return ``root``."""
    project_dir = root / ".plancli"
    project_dir.mkdir(parents=True, exist_ok=True)
    (project_dir / "project.json").write_text(json.dumps({"id": "proj-1"}))
    if plan_id is not None:
        (project_dir / "current_plan.json").write_text(
            json.dumps({"planId": plan_id, "branch": branch})
        )
    return root


@pytest.fixture
def make_project():
    """Factory for project directories (plan_id=None means no current plan)."""
    return _make_project


@pytest.fixture
def project_dir(tmp_path):
    """A working directory inside a project with a current plan."""
    return _make_project(tmp_path / "work")


@pytest.fixture
def two_models():
    return [
        CustomModel(id="a", model_name="gpt", provider="openai", max_tokens=8000),
        CustomModel(id="b", model_name="claude", provider="anthropic", max_tokens=200000),
    ]


@pytest.fixture
def mock_client():
    """An ApiClient stand-in usable as a context manager."""
    client = MagicMock()
    client.__enter__.return_value = client
    client.__exit__.return_value = False
    return client


@pytest.fixture(autouse=True)
def restore_root_logger():
    """setup_logging replaces root handlers; put the originals back."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)
