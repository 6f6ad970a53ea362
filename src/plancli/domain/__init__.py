"""Domain types for model configuration."""

from plancli.domain.builtin import AVAILABLE_MODELS, DEFAULT_MODEL_SET
from plancli.domain.models import (
    BaseModelConfig,
    CustomModel,
    ModelOverrides,
    ModelProvider,
    ModelRole,
    ModelRoleConfig,
    ModelSet,
    PlannerRoleConfig,
    PlanSettings,
)

__all__ = [
    "AVAILABLE_MODELS",
    "DEFAULT_MODEL_SET",
    "BaseModelConfig",
    "CustomModel",
    "ModelOverrides",
    "ModelProvider",
    "ModelRole",
    "ModelRoleConfig",
    "ModelSet",
    "PlannerRoleConfig",
    "PlanSettings",
]
