"""Brave Search node package."""

from bravenode.node.brave import normalize_response, search_brave
from bravenode.node.credentials import (
    CREDENTIAL_TYPE,
    ConfigCredentialProvider,
    CredentialProvider,
    StaticCredentialProvider,
)
from bravenode.node.errors import (
    ApiRequestFailedError,
    BraveSearchError,
    EmptyResponseError,
    InvalidResponseShapeError,
    MissingCredentialError,
    NodeOperationError,
    ParameterValidationError,
    UnknownOperationError,
)
from bravenode.node.execution import (
    BraveSearchNode,
    CollectingSink,
    ItemSource,
    ListItemSource,
    ResultSink,
)
from bravenode.node.models import ErrorRecord, ExecutionItem, SearchRequest, SearchResult
from bravenode.node.tool import BraveSearchTool

__all__ = [
    "BraveSearchNode",
    "BraveSearchTool",
    "ItemSource",
    "ListItemSource",
    "ResultSink",
    "CollectingSink",
    "CredentialProvider",
    "ConfigCredentialProvider",
    "StaticCredentialProvider",
    "CREDENTIAL_TYPE",
    "SearchRequest",
    "SearchResult",
    "ErrorRecord",
    "ExecutionItem",
    "search_brave",
    "normalize_response",
    "BraveSearchError",
    "MissingCredentialError",
    "EmptyResponseError",
    "InvalidResponseShapeError",
    "ApiRequestFailedError",
    "ParameterValidationError",
    "UnknownOperationError",
    "NodeOperationError",
]
