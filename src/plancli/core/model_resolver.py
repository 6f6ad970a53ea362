# src/plancli/core/model_resolver.py
"""Custom model resolution: name-or-index token -> one CustomModel."""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence

from plancli.domain.models import CustomModel

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?\d+")

Prompt = Callable[[str], str]


class ModelSelectionError(Exception):
    """Base class for resolution failures."""


class NoCustomModelsError(ModelSelectionError):
    """There is nothing to choose from."""


class InvalidSelectionError(ModelSelectionError):
    """The interactive answer was not a listed number."""


def _parse_int(value: str) -> int | None:
    value = value.strip()
    if not _INT_RE.fullmatch(value):
        return None
    return int(value)


def _default_prompt(message: str) -> str:
    from chuk_term.ui import ask

    return ask(message) or ""


def _default_display(line: str) -> None:
    from chuk_term.ui import output

    output.print(line)


class CustomModelResolver:
    """Resolves a user-supplied token against the current custom model list.

    Precedence, first match wins:

    1. an integer token within ``[1, len(models)]`` selects by 1-based position
    2. otherwise the first model whose name equals the token exactly
    3. otherwise (or with no token) the user picks from a numbered list

    Numeric tokens are always tried as positions first, so a model named
    ``"2"`` is only reachable by name when fewer than two models exist.
    """

    def __init__(
        self,
        prompt: Prompt | None = None,
        display: Callable[[str], None] | None = None,
        heading: str = "Select a model:",
    ):
        self.prompt = prompt or _default_prompt
        self.display = display or _default_display
        self.heading = heading

    def resolve(self, token: str | None, models: Sequence[CustomModel]) -> CustomModel:
        """
        Resolve ``token`` to exactly one model.

        Raises:
            NoCustomModelsError: if ``models`` is empty (no prompt is shown)
            InvalidSelectionError: if the interactive answer is out of range
                or not a number
        """
        if not models:
            raise NoCustomModelsError("No custom models available")

        if token is not None:
            match = self.match(token, models)
            if match is not None:
                return match
            logger.debug(f"No custom model matches '{token}', asking interactively")

        return self.select_interactively(models)

    @staticmethod
    def match(token: str, models: Sequence[CustomModel]) -> CustomModel | None:
        """Non-interactive part of resolution: index first, then exact name."""
        index = _parse_int(token)
        if index is not None and 1 <= index <= len(models):
            logger.debug(f"Resolved '{token}' as index {index}")
            return models[index - 1]

        for model in models:
            if model.model_name == token:
                logger.debug(f"Resolved '{token}' by name (id={model.id})")
                return model

        return None

    def select_interactively(self, models: Sequence[CustomModel]) -> CustomModel:
        """Show a numbered list and read one selection. No retry."""
        self.display(self.heading)
        for i, model in enumerate(models, start=1):
            self.display(f"{i}: {model.model_name}")

        answer = self.prompt(f"Enter a number (1-{len(models)})")
        index = _parse_int(answer or "")
        if index is None or not 1 <= index <= len(models):
            raise InvalidSelectionError(f"Invalid selection: {answer!r}")

        return models[index - 1]


def resolve_custom_model(
    token: str | None,
    models: Sequence[CustomModel],
    prompt: Prompt | None = None,
) -> CustomModel:
    """Convenience wrapper around :class:`CustomModelResolver`."""
    return CustomModelResolver(prompt=prompt).resolve(token, models)
