"""Item loop for the Brave Search node."""

from __future__ import annotations

import json
from typing import Any, Protocol

from loguru import logger

from bravenode.config.schema import BRAVE_SEARCH_URL
from bravenode.node.base import validate_schema
from bravenode.node.brave import search_brave
from bravenode.node.credentials import CREDENTIAL_TYPE, CredentialProvider
from bravenode.node.errors import (
    MissingCredentialError,
    NodeOperationError,
    ParameterValidationError,
    UnknownOperationError,
)
from bravenode.node.models import SAFESEARCH_LEVELS, ErrorRecord, ExecutionItem, SearchRequest

WEB_SEARCH = "webSearch"
OPERATIONS: tuple[str, ...] = (WEB_SEARCH,)

ADDITIONAL_FIELDS_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "country": {
            "type": "string",
            "description": "Country code for search results (e.g., US, GB)",
        },
        "count": {
            "type": "integer",
            "minimum": 1,
            "maximum": 20,
            "description": "Number of results to return (max: 20)",
        },
        "offset": {
            "type": "integer",
            "minimum": 0,
            "description": "Offset for pagination",
        },
        "safesearch": {
            "type": "string",
            "enum": list(SAFESEARCH_LEVELS),
            "description": "Safe search setting",
        },
    },
}

NODE_PARAMETERS: dict[str, Any] = {
    "type": "object",
    "properties": {
        "operation": {
            "type": "string",
            "enum": list(OPERATIONS),
            "description": "Operation to perform",
        },
        "query": {
            "type": "string",
            "minLength": 1,
            "description": "The search query to execute",
        },
        "additionalFields": ADDITIONAL_FIELDS_SCHEMA,
    },
    "required": ["query"],
}


class ItemSource(Protocol):
    """Yields the ordered input records of one execution."""

    def get_input_data(self) -> list[dict[str, Any]]: ...


class ResultSink(Protocol):
    """Receives either the full output list or one fatal failure."""

    def emit(self, items: list[ExecutionItem]) -> None: ...

    def fail(self, error: NodeOperationError) -> None: ...


class ListItemSource:
    """Item source backed by a list of parameter mappings."""

    def __init__(self, items: list[dict[str, Any]]):
        self._items = list(items)

    def get_input_data(self) -> list[dict[str, Any]]:
        return list(self._items)


class CollectingSink:
    """Result sink that keeps whatever it was given."""

    def __init__(self) -> None:
        self.items: list[ExecutionItem] | None = None
        self.error: NodeOperationError | None = None

    def emit(self, items: list[ExecutionItem]) -> None:
        self.items = items

    def fail(self, error: NodeOperationError) -> None:
        self.error = error


class BraveSearchNode:
    """Run Brave web searches for a batch of workflow items."""

    description = "Make requests to Brave Search API"

    def __init__(
        self,
        credentials: CredentialProvider,
        *,
        continue_on_fail: bool = False,
        base_url: str = BRAVE_SEARCH_URL,
    ):
        self._credentials = credentials
        self.continue_on_fail = continue_on_fail
        self.base_url = base_url or BRAVE_SEARCH_URL

    async def run(self, source: ItemSource, sink: ResultSink) -> list[ExecutionItem] | None:
        """Execute all items from ``source`` and hand the outcome to ``sink``."""
        try:
            output = await self.execute(source.get_input_data())
        except NodeOperationError as e:
            sink.fail(e)
            return None
        sink.emit(output)
        return output

    async def execute(
        self,
        items: list[dict[str, Any]],
        *,
        continue_on_fail: bool | None = None,
    ) -> list[ExecutionItem]:
        """
        Process ``items`` in order, one request at a time.

        With continue-on-fail every item yields exactly one output entry.
        Without it the first failure raises ``NodeOperationError`` and the
        remaining items are not attempted.
        """
        tolerant = self.continue_on_fail if continue_on_fail is None else continue_on_fail
        output: list[ExecutionItem] = []

        for index, item in enumerate(items):
            query: str | None = None
            params: dict[str, Any] | None = None
            try:
                operation = item.get("operation", WEB_SEARCH)
                if operation != WEB_SEARCH:
                    raise UnknownOperationError(operation)

                query = item.get("query")
                errors = validate_schema(self._item_parameters(item), NODE_PARAMETERS)
                if errors:
                    raise ParameterValidationError(errors)

                credentials = self._credentials.get_credentials(CREDENTIAL_TYPE)
                api_key = (credentials or {}).get("apiKey")
                if not api_key:
                    raise MissingCredentialError()

                request = SearchRequest.from_parameters(query, item.get("additionalFields"))
                params = request.to_params()
                logger.debug("Brave search item {}: params={}", index, params)

                response = await search_brave(params=params, api_key=api_key, base_url=self.base_url)
                output.append(ExecutionItem(json=response, item_index=index))
            except Exception as e:
                if tolerant:
                    logger.warning("Brave search item {} failed: {}", index, e)
                    record = ErrorRecord.from_exception(e, query=query, params=params)
                    output.append(ExecutionItem(json=record.to_dict(), item_index=index, error=True))
                    continue

                logger.error("Brave search aborted at item {}: {}", index, e)
                raise NodeOperationError(
                    f"Execution failed: {e}",
                    item_index=index,
                    description=_describe_response(e),
                ) from e

        logger.info("Brave search finished: {} item(s) processed", len(output))
        return output

    @staticmethod
    def _item_parameters(item: dict[str, Any]) -> dict[str, Any]:
        params = {
            "operation": item.get("operation", WEB_SEARCH),
            "additionalFields": item.get("additionalFields") or {},
        }
        if item.get("query") is not None:
            params["query"] = item["query"]
        return params


def _describe_response(error: Exception) -> str | None:
    data = getattr(error, "response_data", None)
    if not data:
        return None
    return f"API Response: {json.dumps(data, ensure_ascii=False, default=str)}"
