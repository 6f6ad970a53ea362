# src/plancli/api/client.py
"""HTTP client for the plan service.

Thin wrapper over ``httpx.Client``: every call is one request, errors are
mapped onto :mod:`plancli.api.errors`, payloads onto pydantic models.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from plancli.api.errors import ApiConnectionError, ApiError, ApiResponseError
from plancli.config.defaults import (
    DEFAULT_HTTP_CONNECT_TIMEOUT,
    DEFAULT_HTTP_REQUEST_TIMEOUT,
    ORG_ID_HEADER,
)
from plancli.domain.models import CustomModel, PlanSettings

logger = logging.getLogger(__name__)

_CUSTOM_MODELS = TypeAdapter(list[CustomModel])


class ApiClient:
    """Synchronous client for the plan service API."""

    def __init__(
        self,
        base_url: str,
        token: str,
        org_id: str,
        timeout: float = DEFAULT_HTTP_REQUEST_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self._client = httpx.Client(
            base_url=self.base_url,
            headers={
                "Authorization": f"Bearer {token}",
                ORG_ID_HEADER: org_id,
                "Accept": "application/json",
            },
            timeout=httpx.Timeout(timeout, connect=DEFAULT_HTTP_CONNECT_TIMEOUT),
            transport=transport,
        )

    # ── lifecycle ──────────────────────────────────────────────────────────

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> ApiClient:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ── custom models ──────────────────────────────────────────────────────

    def list_custom_models(self) -> list[CustomModel]:
        """Fetch all custom models, in the order the service returns them."""
        response = self._request("GET", "/custom_models")
        payload = self._json(response)
        if payload is None:
            return []
        try:
            return _CUSTOM_MODELS.validate_python(payload)
        except ValidationError as e:
            raise ApiResponseError(f"Malformed custom model list: {e}") from e

    def create_custom_model(self, model: CustomModel) -> None:
        """Create a custom model. The service assigns its id."""
        body = model.to_wire()
        body.pop("id", None)
        self._request("POST", "/custom_models", json=body)

    def delete_custom_model(self, model_id: str) -> None:
        """Delete the custom model with the given id."""
        self._request("DELETE", f"/custom_models/{quote(model_id, safe='')}")

    # ── settings ───────────────────────────────────────────────────────────

    def get_settings(self, plan_id: str, branch: str) -> PlanSettings:
        """Fetch the settings of a plan branch."""
        path = f"/plans/{quote(plan_id, safe='')}/{quote(branch, safe='')}/settings"
        payload = self._json(self._request("GET", path))
        try:
            return PlanSettings.model_validate(payload or {})
        except ValidationError as e:
            raise ApiResponseError(f"Malformed plan settings: {e}") from e

    # ── internals ──────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        logger.debug(f"{method} {self.base_url}{path}")
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            logger.debug(f"{method} {path} failed: {e}")
            raise ApiConnectionError(f"Could not reach {self.base_url}: {e}") from e

        if response.is_error:
            raise ApiResponseError(
                _error_message(response), status_code=response.status_code
            )
        return response

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise ApiResponseError(
                f"Invalid JSON in response: {e}", status_code=response.status_code
            ) from e


def _error_message(response: httpx.Response) -> str:
    """Best-effort extraction of the server's error message."""
    try:
        data = response.json()
    except ValueError:
        data = None

    if isinstance(data, dict):
        for key in ("msg", "error", "message"):
            value = data.get(key)
            if isinstance(value, str) and value:
                return value

    text = response.text.strip()
    return text or response.reason_phrase or "Request failed"


__all__ = ["ApiClient", "ApiError"]
