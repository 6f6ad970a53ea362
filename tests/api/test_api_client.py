# tests/api/test_api_client.py
"""Tests for ApiClient using httpx.MockTransport."""

from __future__ import annotations

import json

import httpx
import pytest

from plancli.api import ApiClient, ApiConnectionError, ApiResponseError
from plancli.domain.models import CustomModel

BASE = "https://api.example.test"


def _client(handler) -> ApiClient:
    return ApiClient(
        base_url=BASE + "/",
        token="tok-123",
        org_id="org-9",
        transport=httpx.MockTransport(handler),
    )


class TestListCustomModels:
    def test_parses_camel_case_payload_in_order(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["request"] = request
            return httpx.Response(
                200,
                json=[
                    {
                        "id": "a",
                        "modelName": "gpt",
                        "provider": "openai",
                        "baseUrl": "https://api.openai.com/v1",
                        "maxTokens": 8000,
                        "apiKeyEnvVar": "OPENAI_API_KEY",
                        "description": "",
                        "createdAt": "ignored",
                    },
                    {"id": "b", "modelName": "claude", "provider": "anthropic", "maxTokens": 200000},
                ],
            )

        with _client(handler) as client:
            models = client.list_custom_models()

        assert [m.id for m in models] == ["a", "b"]
        assert models[0].base_url == "https://api.openai.com/v1"
        assert models[0].api_key_env_var == "OPENAI_API_KEY"

        request = seen["request"]
        assert request.method == "GET"
        assert request.url == httpx.URL(f"{BASE}/custom_models")
        assert request.headers["Authorization"] == "Bearer tok-123"
        assert request.headers["X-Org-Id"] == "org-9"

    def test_empty_body_means_no_models(self):
        with _client(lambda r: httpx.Response(200)) as client:
            assert client.list_custom_models() == []

    def test_null_body_means_no_models(self):
        with _client(lambda r: httpx.Response(200, json=None)) as client:
            assert client.list_custom_models() == []

    def test_malformed_payload(self):
        with _client(lambda r: httpx.Response(200, json=[{"id": "x"}])) as client:
            with pytest.raises(ApiResponseError, match="Malformed custom model list"):
                client.list_custom_models()

    def test_invalid_json(self):
        with _client(lambda r: httpx.Response(200, content=b"<html>")) as client:
            with pytest.raises(ApiResponseError, match="Invalid JSON"):
                client.list_custom_models()


class TestCreateAndDelete:
    def test_create_posts_body_without_id(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            seen["body"] = json.loads(request.content)
            return httpx.Response(200)

        model = CustomModel(
            id="should-not-be-sent",
            model_name="my-model",
            provider="openai",
            base_url="http://localhost:8000/v1",
            max_tokens=4096,
            api_key_env_var="MY_KEY",
            description="local",
        )
        with _client(handler) as client:
            client.create_custom_model(model)

        assert seen["method"] == "POST"
        assert seen["path"] == "/custom_models"
        assert seen["body"] == {
            "modelName": "my-model",
            "provider": "openai",
            "baseUrl": "http://localhost:8000/v1",
            "maxTokens": 4096,
            "apiKeyEnvVar": "MY_KEY",
            "description": "local",
        }

    def test_delete_targets_id(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["method"] = request.method
            seen["path"] = request.url.path
            return httpx.Response(204)

        with _client(handler) as client:
            client.delete_custom_model("m-1")

        assert seen["method"] == "DELETE"
        assert seen["path"] == "/custom_models/m-1"


class TestGetSettings:
    def test_settings_without_model_set(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["path"] = request.url.path
            return httpx.Response(
                200,
                json={"modelSet": None, "modelOverrides": {"maxTokens": 9000}},
            )

        with _client(handler) as client:
            settings = client.get_settings("plan-1", "main")

        assert seen["path"] == "/plans/plan-1/main/settings"
        assert settings.model_set is None
        assert settings.model_overrides.max_tokens == 9000
        assert settings.model_overrides.max_convo_tokens is None

    def test_settings_with_model_set(self):
        role = {
            "baseModelConfig": {"provider": "openai", "modelName": "gpt-4o", "maxTokens": 128000},
            "temperature": 0.5,
            "topP": 0.25,
        }
        payload = {
            "modelSet": {
                "name": "Custom set",
                "description": "mine",
                "planner": {**role, "role": "planner", "maxConvoTokens": 10, "reservedOutputTokens": 5},
                "planSummary": {**role, "role": "summarizer"},
                "builder": {**role, "role": "builder"},
                "namer": {**role, "role": "names"},
                "commitMsg": {**role, "role": "commit-messages"},
                "execStatus": {**role, "role": "exec-status"},
            }
        }
        with _client(lambda r: httpx.Response(200, json=payload)) as client:
            settings = client.get_settings("plan-1", "main")

        assert settings.model_set.name == "Custom set"
        assert settings.model_set.planner.max_convo_tokens == 10
        assert settings.model_set.builder.top_p == 0.25
        assert settings.model_overrides.max_tokens is None


class TestErrors:
    def test_error_status_uses_server_message(self):
        handler = lambda r: httpx.Response(409, json={"msg": "model already exists"})
        with _client(handler) as client:
            with pytest.raises(ApiResponseError) as exc_info:
                client.create_custom_model(
                    CustomModel(model_name="x", provider="openai", max_tokens=1)
                )
        assert exc_info.value.status_code == 409
        assert str(exc_info.value) == "model already exists (status 409)"

    def test_error_status_falls_back_to_text(self):
        handler = lambda r: httpx.Response(500, text="boom")
        with _client(handler) as client:
            with pytest.raises(ApiResponseError, match="boom"):
                client.list_custom_models()

    def test_error_status_with_empty_body(self):
        handler = lambda r: httpx.Response(401)
        with _client(handler) as client:
            with pytest.raises(ApiResponseError, match="Unauthorized"):
                client.list_custom_models()

    def test_transport_failure(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with _client(handler) as client:
            with pytest.raises(ApiConnectionError, match="connection refused"):
                client.list_custom_models()
