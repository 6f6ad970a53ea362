# src/plancli/context.py
"""Session context: who is calling, and which plan the working directory points at."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from plancli.config.defaults import (
    CURRENT_PLAN_FILENAME,
    DEFAULT_API_HOST,
    DEFAULT_BRANCH,
    PROJECT_DIRNAME,
    PROJECT_FILENAME,
)
from plancli.config.env_vars import EnvVar, get_env
from plancli.config.settings import CLISettings

logger = logging.getLogger(__name__)


class SessionError(Exception):
    """Base class for auth/project resolution failures."""


class NotAuthenticatedError(SessionError):
    """No usable token or organization."""


class NoProjectError(SessionError):
    """The working directory is not inside a project."""


class AuthContext(BaseModel):
    """Credentials for the API."""

    token: str = Field(min_length=1)
    org_id: str = Field(min_length=1)
    api_host: str = DEFAULT_API_HOST

    model_config = {"frozen": True}


class ProjectContext(BaseModel):
    """The project containing the working directory and its current plan."""

    root: Path
    project_id: str
    plan_id: str | None = None
    branch: str = DEFAULT_BRANCH

    model_config = {"frozen": True}

    @property
    def has_current_plan(self) -> bool:
        return bool(self.plan_id)


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise SessionError(f"Could not parse {path}: {e}") from e
    except OSError as e:
        raise SessionError(f"Could not read {path}: {e}") from e
    if not isinstance(data, dict):
        raise SessionError(f"Expected a JSON object in {path}")
    return data


def resolve_auth(settings: CLISettings) -> AuthContext:
    """
    Resolve API credentials.

    Environment variables take precedence over the credentials file
    (``<home>/auth.json`` with ``token``, ``orgId`` and ``host`` keys).

    Raises:
        NotAuthenticatedError: if no token or no organization is configured.
    """
    stored: dict[str, Any] = {}
    if settings.auth_file.is_file():
        stored = _read_json(settings.auth_file)
        logger.debug(f"Loaded credentials from {settings.auth_file}")

    token = get_env(EnvVar.API_TOKEN) or stored.get("token")
    org_id = get_env(EnvVar.ORG_ID) or stored.get("orgId")
    api_host = settings.api_host or stored.get("host") or DEFAULT_API_HOST

    if not token:
        raise NotAuthenticatedError(
            f"Not signed in. Set {EnvVar.API_TOKEN.value} or add a token to {settings.auth_file}"
        )
    if not org_id:
        raise NotAuthenticatedError(
            f"No organization selected. Set {EnvVar.ORG_ID.value} or add orgId to {settings.auth_file}"
        )

    return AuthContext(token=token, org_id=org_id, api_host=api_host)


def find_project_dir(start: Path) -> Path | None:
    """Walk up from ``start`` looking for a project directory."""
    start = start.resolve()
    for candidate in (start, *start.parents):
        project_dir = candidate / PROJECT_DIRNAME
        if (project_dir / PROJECT_FILENAME).is_file():
            return project_dir
    return None


def resolve_project(start: Path | None = None) -> ProjectContext:
    """
    Resolve the project (and current plan, if any) for ``start``.

    Raises:
        NoProjectError: if no project directory is found.
    """
    start = start or Path.cwd()
    project_dir = find_project_dir(start)
    if project_dir is None:
        raise NoProjectError(
            f"No project found in {start} or any parent directory"
        )

    project = _read_json(project_dir / PROJECT_FILENAME)
    project_id = project.get("id")
    if not project_id:
        raise NoProjectError(f"{project_dir / PROJECT_FILENAME} has no project id")

    plan_id = None
    branch = DEFAULT_BRANCH
    current_plan_file = project_dir / CURRENT_PLAN_FILENAME
    if current_plan_file.is_file():
        current = _read_json(current_plan_file)
        plan_id = current.get("planId") or None
        branch = current.get("branch") or DEFAULT_BRANCH

    logger.debug(f"Resolved project {project_id} (plan={plan_id}, branch={branch})")
    return ProjectContext(
        root=project_dir.parent, project_id=project_id, plan_id=plan_id, branch=branch
    )
