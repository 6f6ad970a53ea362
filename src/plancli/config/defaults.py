"""Default configuration values - no more magic numbers!

All default values should be defined here, not hardcoded in the code.
"""

from __future__ import annotations


# ================================================================
# API Defaults
# ================================================================

DEFAULT_API_HOST = "https://api.plandex.ai"
"""Default base URL of the plan service API."""

DEFAULT_HTTP_REQUEST_TIMEOUT = 30.0
"""Default timeout for HTTP requests (seconds)."""

DEFAULT_HTTP_CONNECT_TIMEOUT = 10.0
"""Default timeout for HTTP connections (seconds)."""

ORG_ID_HEADER = "X-Org-Id"
"""Header carrying the active organization id."""


# ================================================================
# Filesystem Defaults
# ================================================================

DEFAULT_HOME_DIRNAME = ".plancli"
"""Per-user directory (under $HOME) holding credentials."""

AUTH_FILENAME = "auth.json"
"""Credentials file inside the home directory."""

PROJECT_DIRNAME = ".plancli"
"""Per-project directory, searched upward from the working directory."""

PROJECT_FILENAME = "project.json"
"""Project descriptor inside the project directory."""

CURRENT_PLAN_FILENAME = "current_plan.json"
"""Pointer to the current plan and branch inside the project directory."""

DEFAULT_BRANCH = "main"
"""Branch used when the current plan file does not name one."""


# ================================================================
# Logging Defaults
# ================================================================

DEFAULT_LOG_LEVEL = "WARNING"
"""Default console log level."""

DEFAULT_LOG_MAX_BYTES = 5 * 1024 * 1024
"""Rotate the log file after 5 MB."""

DEFAULT_LOG_BACKUP_COUNT = 3
"""Number of rotated log files to keep."""
