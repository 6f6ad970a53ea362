"""Errors raised by the API client."""

from __future__ import annotations


class ApiError(Exception):
    """Base class for failures talking to the plan service."""


class ApiConnectionError(ApiError):
    """The request never produced a response (DNS, refused, timeout...)."""


class ApiResponseError(ApiError):
    """The service answered with an error status or an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"{message} (status {self.status_code})"
