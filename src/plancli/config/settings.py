"""Runtime settings resolved from environment variables and defaults."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from plancli.config.defaults import (
    AUTH_FILENAME,
    DEFAULT_HOME_DIRNAME,
    DEFAULT_HTTP_REQUEST_TIMEOUT,
)
from plancli.config.env_vars import EnvVar, get_env, get_env_float


class CLISettings(BaseModel):
    """Resolved CLI settings. Immutable after creation."""

    home_dir: Path = Field(description="Per-user plancli directory")
    api_host: str | None = Field(
        default=None, description="API host override (env wins over credentials file)"
    )
    http_timeout: float = Field(
        default=DEFAULT_HTTP_REQUEST_TIMEOUT, gt=0, description="HTTP request timeout"
    )

    model_config = {"frozen": True}

    @property
    def auth_file(self) -> Path:
        return self.home_dir / AUTH_FILENAME

    @classmethod
    def from_env(cls) -> CLISettings:
        """Build settings from the process environment."""
        home = get_env(EnvVar.HOME_DIR)
        home_dir = Path(home).expanduser() if home else Path.home() / DEFAULT_HOME_DIRNAME
        return cls(
            home_dir=home_dir,
            api_host=get_env(EnvVar.API_HOST),
            http_timeout=get_env_float(
                EnvVar.HTTP_TIMEOUT, DEFAULT_HTTP_REQUEST_TIMEOUT
            ),
        )
