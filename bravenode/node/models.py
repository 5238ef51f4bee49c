"""Data models for Brave Search requests, results and node output."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

SafeSearch = Literal["strict", "moderate", "off"]

SAFESEARCH_LEVELS: tuple[SafeSearch, ...] = ("strict", "moderate", "off")
OPTIONAL_FIELDS: tuple[str, ...] = ("country", "count", "offset", "safesearch")

NO_DETAILS = "No additional error details available"
UNKNOWN_STATUS = "Unknown status"
NO_QUERY = "No query provided"
NO_PARAMS = "No params available"


@dataclass(frozen=True, slots=True)
class SearchRequest:
    """One web search built from an item's parameters."""

    query: str
    additional_fields: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_parameters(cls, query: str, additional_fields: dict[str, Any] | None) -> "SearchRequest":
        return cls(query=query, additional_fields=dict(additional_fields or {}))

    def to_params(self) -> dict[str, Any]:
        """Merge ``q`` with the optional fields; absent fields stay absent."""
        return {"q": self.query, **self.additional_fields}


@dataclass(slots=True)
class SearchResult:
    """Normalized web result entry."""

    title: str = ""
    url: str = ""
    description: str = ""
    raw: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_raw(cls, raw: Any) -> "SearchResult":
        data = raw if isinstance(raw, dict) else {}
        return cls(
            title=data.get("title") or "",
            url=data.get("url") or "",
            description=data.get("description") or "",
            raw=dict(data),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            **self.raw,
            "title": self.title,
            "url": self.url,
            "description": self.description,
        }


@dataclass(slots=True)
class ErrorRecord:
    """Inline record emitted for a failed item when continue-on-fail is set."""

    error: str
    details: Any = NO_DETAILS
    status: int | str = UNKNOWN_STATUS
    query: str = NO_QUERY
    params: dict[str, Any] | str = NO_PARAMS

    @classmethod
    def from_exception(
        cls,
        exc: BaseException,
        *,
        query: str | None,
        params: dict[str, Any] | None,
    ) -> "ErrorRecord":
        response_data = getattr(exc, "response_data", None)
        status = getattr(exc, "status", None)
        return cls(
            error=str(exc),
            details=response_data or NO_DETAILS,
            status=status or UNKNOWN_STATUS,
            query=query or NO_QUERY,
            params=params or NO_PARAMS,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.error,
            "details": self.details,
            "status": self.status,
            "query": self.query,
            "params": self.params,
        }


@dataclass(slots=True)
class ExecutionItem:
    """Output entry paired with the index of the input item it came from."""

    json: dict[str, Any]
    item_index: int
    error: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"json": self.json, "pairedItem": {"item": self.item_index}}
