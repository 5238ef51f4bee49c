"""Brave Search API adapter."""

import json
from typing import Any

import httpx

from bravenode.config.schema import BRAVE_SEARCH_URL
from bravenode.node.errors import (
    ApiRequestFailedError,
    EmptyResponseError,
    InvalidResponseShapeError,
    MissingCredentialError,
)
from bravenode.node.models import SearchResult


async def search_brave(
    *,
    params: dict[str, Any],
    api_key: str,
    base_url: str = BRAVE_SEARCH_URL,
) -> dict[str, Any]:
    """Run one web search and return the normalized response payload."""
    if not api_key:
        raise MissingCredentialError()

    try:
        async with httpx.AsyncClient() as client:
            response = await client.get(
                base_url,
                params=params,
                headers={
                    "X-Subscription-Token": api_key,
                    "Accept": "application/json",
                },
            )
            response.raise_for_status()
    except httpx.HTTPStatusError as e:
        raise _request_failed(e, e.response) from e
    except httpx.HTTPError as e:
        raise _request_failed(e, None) from e

    return normalize_response(_decode_body(response))


def normalize_response(data: Any) -> dict[str, Any]:
    """Replace ``web.results`` with normalized entries, keeping every other field."""
    web = data.get("web") if isinstance(data, dict) else None
    if not isinstance(web, dict) or not isinstance(web.get("results"), list):
        raise InvalidResponseShapeError(data, _dump(data))

    return {
        **data,
        "web": {
            **web,
            "results": [SearchResult.from_raw(item).to_dict() for item in web["results"]],
        },
    }


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        raise EmptyResponseError()
    try:
        data = response.json()
    except ValueError:
        raise InvalidResponseShapeError(response.text, _dump(response.text)) from None
    if not data and not isinstance(data, (dict, list)):
        raise EmptyResponseError()
    return data


def _request_failed(error: Exception, response: httpx.Response | None) -> ApiRequestFailedError:
    status = response.status_code if response is not None else None
    data = _response_data(response)
    message = (
        f"API Request failed: {error}. "
        f"Status: {status if status is not None else 'Unknown'}. "
        f"Response: {_dump(data) if data is not None else 'Unknown'}"
    )
    return ApiRequestFailedError(message, status=status, response_data=data)


def _response_data(response: httpx.Response | None) -> Any:
    if response is None or not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _dump(data: Any) -> str:
    return json.dumps(data, ensure_ascii=False, default=str)
