"""
Configuration for plancli.

Defaults, environment variables, logging, and resolved runtime settings.
"""

from plancli.config.env_vars import EnvVar, get_env
from plancli.config.logging import get_logger, setup_logging
from plancli.config.settings import CLISettings

__all__ = [
    "CLISettings",
    "EnvVar",
    "get_env",
    "get_logger",
    "setup_logging",
]
