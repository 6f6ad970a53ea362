"""Built-in model catalogue and the default model set - no magic strings!"""

from __future__ import annotations

from plancli.domain.models import (
    BaseModelConfig,
    ModelProvider,
    ModelRole,
    ModelRoleConfig,
    ModelSet,
    PlannerRoleConfig,
)

OPENAI_BASE_URL = "https://api.openai.com/v1"
ANTHROPIC_BASE_URL = "https://api.anthropic.com/v1"
OPENROUTER_BASE_URL = "https://openrouter.ai/api/v1"
TOGETHER_BASE_URL = "https://api.together.xyz/v1"

OPENAI_API_KEY_ENV = "OPENAI_API_KEY"
ANTHROPIC_API_KEY_ENV = "ANTHROPIC_API_KEY"
OPENROUTER_API_KEY_ENV = "OPENROUTER_API_KEY"
TOGETHER_API_KEY_ENV = "TOGETHER_API_KEY"


def _openai(name: str, max_tokens: int) -> BaseModelConfig:
    return BaseModelConfig(
        provider=ModelProvider.OPENAI.value,
        model_name=name,
        max_tokens=max_tokens,
        api_key_env_var=OPENAI_API_KEY_ENV,
        base_url=OPENAI_BASE_URL,
    )


GPT_4O = _openai("gpt-4o", 128000)
GPT_4O_MINI = _openai("gpt-4o-mini", 128000)
GPT_4_TURBO = _openai("gpt-4-turbo", 128000)

AVAILABLE_MODELS: list[BaseModelConfig] = [
    GPT_4O,
    GPT_4O_MINI,
    GPT_4_TURBO,
    BaseModelConfig(
        provider=ModelProvider.ANTHROPIC.value,
        model_name="claude-3-5-sonnet-latest",
        max_tokens=200000,
        api_key_env_var=ANTHROPIC_API_KEY_ENV,
        base_url=ANTHROPIC_BASE_URL,
    ),
    BaseModelConfig(
        provider=ModelProvider.ANTHROPIC.value,
        model_name="claude-3-5-haiku-latest",
        max_tokens=200000,
        api_key_env_var=ANTHROPIC_API_KEY_ENV,
        base_url=ANTHROPIC_BASE_URL,
    ),
    BaseModelConfig(
        provider=ModelProvider.OPENROUTER.value,
        model_name="anthropic/claude-3.5-sonnet",
        max_tokens=200000,
        api_key_env_var=OPENROUTER_API_KEY_ENV,
        base_url=OPENROUTER_BASE_URL,
    ),
    BaseModelConfig(
        provider=ModelProvider.TOGETHER.value,
        model_name="meta-llama/Meta-Llama-3.1-405B-Instruct-Turbo",
        max_tokens=130000,
        api_key_env_var=TOGETHER_API_KEY_ENV,
        base_url=TOGETHER_BASE_URL,
    ),
]


DEFAULT_MODEL_SET = ModelSet(
    name="Default",
    description="OpenAI gpt-4o for planning and building, gpt-4o-mini for lighter roles.",
    planner=PlannerRoleConfig(
        role=ModelRole.PLANNER,
        base_model_config=GPT_4O,
        temperature=0.3,
        top_p=0.3,
        max_convo_tokens=10000,
        reserved_output_tokens=4096,
    ),
    plan_summary=ModelRoleConfig(
        role=ModelRole.PLAN_SUMMARY,
        base_model_config=GPT_4O,
        temperature=0.2,
        top_p=0.2,
    ),
    builder=ModelRoleConfig(
        role=ModelRole.BUILDER,
        base_model_config=GPT_4O,
        temperature=0.1,
        top_p=0.1,
    ),
    namer=ModelRoleConfig(
        role=ModelRole.NAME,
        base_model_config=GPT_4O_MINI,
        temperature=0.8,
        top_p=0.5,
    ),
    commit_msg=ModelRoleConfig(
        role=ModelRole.COMMIT_MSG,
        base_model_config=GPT_4O_MINI,
        temperature=0.8,
        top_p=0.5,
    ),
    exec_status=ModelRoleConfig(
        role=ModelRole.EXEC_STATUS,
        base_model_config=GPT_4O,
        temperature=0.1,
        top_p=0.1,
    ),
)

__all__ = ["AVAILABLE_MODELS", "DEFAULT_MODEL_SET"]
