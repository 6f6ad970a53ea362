"""Core logic independent of the command layer."""

from plancli.core.model_resolver import (
    CustomModelResolver,
    InvalidSelectionError,
    ModelSelectionError,
    NoCustomModelsError,
    resolve_custom_model,
)

__all__ = [
    "CustomModelResolver",
    "InvalidSelectionError",
    "ModelSelectionError",
    "NoCustomModelsError",
    "resolve_custom_model",
]
