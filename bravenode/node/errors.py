"""Exceptions raised while running the Brave Search node."""

from __future__ import annotations

from typing import Any


class BraveSearchError(Exception):
    """Base class for per-item search failures."""

    status: int | None = None
    response_data: Any = None


class MissingCredentialError(BraveSearchError):
    """Raised when no API key can be resolved from the credentials."""

    def __init__(self, message: str = "No API key provided in credentials"):
        super().__init__(message)


class EmptyResponseError(BraveSearchError):
    """Raised when the API answers with no body."""

    def __init__(self, message: str = "Empty response from Brave Search API"):
        super().__init__(message)


class InvalidResponseShapeError(BraveSearchError):
    """Raised when the body has no ``web.results`` list.

    The raw body is kept on ``body`` so callers can inspect what came back.
    """

    def __init__(self, body: Any, serialized: str):
        super().__init__(f"Invalid response structure. Got: {serialized}")
        self.body = body


class ApiRequestFailedError(BraveSearchError):
    """Raised on a non-2xx status or a transport-level failure."""

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        response_data: Any = None,
    ):
        super().__init__(message)
        self.status = status
        self.response_data = response_data


class ParameterValidationError(BraveSearchError):
    """Raised when an item's parameters do not match the node schema."""

    def __init__(self, errors: list[str]):
        super().__init__("Invalid parameters: " + "; ".join(errors))
        self.errors = errors


class UnknownOperationError(BraveSearchError):
    """Raised for an operation the node does not implement."""

    def __init__(self, operation: Any):
        super().__init__(f"Unknown operation: {operation}")
        self.operation = operation


class NodeOperationError(Exception):
    """Single structured failure that aborts a fail-fast execution."""

    def __init__(
        self,
        message: str,
        *,
        item_index: int,
        description: str | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.item_index = item_index
        self.description = description

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "message": self.message,
            "itemIndex": self.item_index,
        }
        if self.description is not None:
            payload["description"] = self.description
        return payload
