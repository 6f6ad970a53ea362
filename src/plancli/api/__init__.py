"""Client for the plan service API."""

from plancli.api.client import ApiClient
from plancli.api.errors import ApiConnectionError, ApiError, ApiResponseError

__all__ = ["ApiClient", "ApiConnectionError", "ApiError", "ApiResponseError"]
