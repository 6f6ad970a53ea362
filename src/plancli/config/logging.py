# plancli/config/logging.py
"""
Centralized logging configuration for plancli.

Includes secret redaction (always active) and optional file logging
with rotation.
"""

from __future__ import annotations

import logging
import re
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from plancli.config.defaults import (
    DEFAULT_LOG_BACKUP_COUNT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_LOG_MAX_BYTES,
)


# ── Secret redaction ─────────────────────────────────────────────────────────

# Patterns that match sensitive values in log messages
_SECRET_PATTERNS: list[tuple[re.Pattern[str], str]] = [
    # Bearer tokens: "Bearer eyJ..." or "Bearer sk-..."
    (re.compile(r"(Bearer\s+)\S+", re.IGNORECASE), r"\1[REDACTED]"),
    # Provider API keys: sk-... (OpenAI / Anthropic style)
    (re.compile(r"\bsk-[A-Za-z0-9_-]{10,}\b"), "[REDACTED_API_KEY]"),
    # Generic "api_key=..." or "token: ..." values
    (
        re.compile(r"((?:api[_-]?key|token)\s*[=:]\s*)['\"]?[^\s'\"]+['\"]?", re.IGNORECASE),
        r"\1[REDACTED]",
    ),
    # JSON-ish credential fields: "token": "..."
    (
        re.compile(r'("(?:token|access_token)"\s*:\s*")[^"]+(")', re.IGNORECASE),
        r"\1[REDACTED]\2",
    ),
]


def redact(message: str) -> str:
    """Apply every secret pattern to ``message``."""
    for pattern, replacement in _SECRET_PATTERNS:
        message = pattern.sub(replacement, message)
    return message


class SecretRedactingFilter(logging.Filter):
    """Logging filter that redacts secrets from log messages.

    Catches Bearer tokens, API keys (sk-...) and credential fields.
    Always active on all handlers.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact(record.msg)
        # Also redact formatted args if they've been interpolated
        if record.args:
            record.msg = redact(record.getMessage())
            record.args = None
        return True


# Module-level singleton so callers can add it to custom handlers
secret_filter = SecretRedactingFilter()


# ── Core setup ───────────────────────────────────────────────────────────────

_THIRD_PARTY_LOGGERS = ("httpx", "httpcore", "urllib3", "asyncio")


def setup_logging(
    level: str = DEFAULT_LOG_LEVEL,
    quiet: bool = False,
    verbose: bool = False,
    format_style: str = "simple",
    log_file: str | None = None,
) -> None:
    """
    Configure centralized logging for plancli and its dependencies.

    Args:
        level: Base logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        quiet: If True, suppress most output except errors
        verbose: If True, enable debug logging
        format_style: "simple", "detailed", or "json"
        log_file: Optional file path for rotating file log (DEBUG level).
                  Expands ~ and creates parent directories automatically.
    """
    if quiet:
        log_level = logging.ERROR
    elif verbose:
        log_level = logging.DEBUG
    else:
        numeric_level = getattr(logging, level.upper(), None)
        if not isinstance(numeric_level, int):
            raise ValueError(f"Invalid log level: {level}")
        log_level = numeric_level

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    if format_style == "json":
        formatter = logging.Formatter(
            '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
            '"message": "%(message)s", "logger": "%(name)s"}'
        )
    elif format_style == "detailed":
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s"
        )
    else:  # simple
        formatter = logging.Formatter("%(levelname)-8s %(message)s")

    # Console goes to stderr so tables on stdout stay clean
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    console_handler.addFilter(secret_filter)

    root_logger.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if log_file:
        _add_file_handler(root_logger, log_file)

    # Silence noisy third-party loggers unless in debug mode
    third_party_level = logging.DEBUG if log_level <= logging.DEBUG else logging.ERROR
    for logger_name in _THIRD_PARTY_LOGGERS:
        logging.getLogger(logger_name).setLevel(third_party_level)

    logging.getLogger("plancli").setLevel(log_level)


def _add_file_handler(root_logger: logging.Logger, log_file: str) -> None:
    """Add a rotating file handler with JSON format and secret redaction."""
    path = Path(log_file).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)

    file_formatter = logging.Formatter(
        '{"timestamp": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "line": %(lineno)d, "message": "%(message)s"}'
    )

    file_handler = RotatingFileHandler(
        str(path),
        maxBytes=DEFAULT_LOG_MAX_BYTES,
        backupCount=DEFAULT_LOG_BACKUP_COUNT,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(file_formatter)
    file_handler.addFilter(secret_filter)

    # File handler always logs at DEBUG so root must accept DEBUG too
    if root_logger.level > logging.DEBUG:
        root_logger.setLevel(logging.DEBUG)

    root_logger.addHandler(file_handler)


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the plancli namespace."""
    return logging.getLogger(f"plancli.{name}")
