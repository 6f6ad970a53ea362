# src/plancli/domain/models.py
"""Pydantic models for model configuration records exchanged with the API."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WireModel(BaseModel):
    """Base for API payloads: snake_case in Python, camelCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        protected_namespaces=(),
    )

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")


class ModelProvider(str, Enum):
    """Providers with built-in models."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    OPENROUTER = "openrouter"
    TOGETHER = "together"
    CUSTOM = "custom"


class ModelRole(str, Enum):
    """Roles a model can fill within a model set."""

    PLANNER = "planner"
    PLAN_SUMMARY = "summarizer"
    BUILDER = "builder"
    NAME = "names"
    COMMIT_MSG = "commit-messages"
    EXEC_STATUS = "exec-status"


class CustomModel(WireModel):
    """A user-defined provider/model configuration."""

    id: str | None = Field(default=None, description="Service-assigned identifier")
    model_name: str = Field(min_length=1, description="Model name, used as lookup key")
    provider: str = Field(description="Provider name")
    base_url: str = Field(default="", description="Provider API base URL")
    max_tokens: int = Field(description="Context window size in tokens")
    api_key_env_var: str = Field(
        default="", description="Environment variable holding the provider API key"
    )
    description: str = Field(default="", description="Free-form description")


class BaseModelConfig(WireModel):
    """Provider-level settings for a concrete model."""

    provider: str
    model_name: str
    max_tokens: int
    api_key_env_var: str = ""
    base_url: str = ""


class ModelRoleConfig(WireModel):
    """A model assigned to a role, with sampling parameters."""

    role: ModelRole
    base_model_config: BaseModelConfig
    temperature: float = 0.0
    top_p: float = 0.0


class PlannerRoleConfig(ModelRoleConfig):
    """Planner role config; carries conversation token limits as well."""

    max_convo_tokens: int = 0
    reserved_output_tokens: int = 0


class ModelSet(WireModel):
    """A named bundle of role assignments."""

    name: str
    description: str = ""
    planner: PlannerRoleConfig
    plan_summary: ModelRoleConfig
    builder: ModelRoleConfig
    namer: ModelRoleConfig
    commit_msg: ModelRoleConfig
    exec_status: ModelRoleConfig

    def role_configs(self) -> list[ModelRoleConfig]:
        """Role configs in display order."""
        return [
            self.planner,
            self.plan_summary,
            self.builder,
            self.namer,
            self.commit_msg,
            self.exec_status,
        ]


class ModelOverrides(WireModel):
    """Per-plan overrides of planner limits; None means no override."""

    max_tokens: int | None = None
    max_convo_tokens: int | None = None
    reserved_output_tokens: int | None = None


class PlanSettings(WireModel):
    """Settings of a plan branch."""

    model_set: ModelSet | None = None
    model_overrides: ModelOverrides = Field(default_factory=ModelOverrides)
