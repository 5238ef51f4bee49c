"""Brave Search exposed as an agent tool."""

from __future__ import annotations

import json
from typing import Any

from bravenode.config.schema import BRAVE_SEARCH_URL
from bravenode.node.base import Tool
from bravenode.node.credentials import CredentialProvider
from bravenode.node.execution import ADDITIONAL_FIELDS_SCHEMA, BraveSearchNode
from bravenode.node.models import OPTIONAL_FIELDS


class BraveSearchTool(Tool):
    """Run a single Brave web search and return the JSON result."""

    name = "brave_search"
    description = (
        "Search the web with the Brave Search API. "
        "Returns the API response with normalized title, url and description per result."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "minLength": 1,
                "description": "The search query to execute",
            },
            **ADDITIONAL_FIELDS_SCHEMA["properties"],
        },
        "required": ["query"],
    }

    def __init__(
        self,
        credentials: CredentialProvider,
        base_url: str = BRAVE_SEARCH_URL,
        node: BraveSearchNode | None = None,
    ):
        self._node = node or BraveSearchNode(credentials, base_url=base_url)

    async def execute(self, query: str = "", **kwargs: Any) -> str:
        params = {"query": query, **kwargs}
        errors = self.validate_params(params)
        if errors:
            return json.dumps({"error": "Invalid parameters: " + "; ".join(errors)}, ensure_ascii=False)

        additional_fields = {
            key: kwargs[key] for key in OPTIONAL_FIELDS if kwargs.get(key) is not None
        }
        output = await self._node.execute(
            [{"operation": "webSearch", "query": query, "additionalFields": additional_fields}],
            continue_on_fail=True,
        )
        return json.dumps(output[0].json, ensure_ascii=False)
