import json

from bravenode.node.brave import normalize_response
from bravenode.node.errors import ApiRequestFailedError, MissingCredentialError
from bravenode.node.models import ErrorRecord, ExecutionItem, SearchRequest, SearchResult


def test_search_request_merges_query_with_optional_fields() -> None:
    request = SearchRequest.from_parameters(
        "python asyncio",
        {"country": "US", "count": 5, "offset": 2, "safesearch": "strict"},
    )

    assert request.to_params() == {
        "q": "python asyncio",
        "country": "US",
        "count": 5,
        "offset": 2,
        "safesearch": "strict",
    }


def test_search_request_without_fields_only_sends_query() -> None:
    assert SearchRequest.from_parameters("python", None).to_params() == {"q": "python"}
    assert SearchRequest.from_parameters("python", {}).to_params() == {"q": "python"}


def test_search_request_copies_fields() -> None:
    fields = {"count": 3}
    request = SearchRequest.from_parameters("python", fields)
    fields["count"] = 20

    assert request.to_params() == {"q": "python", "count": 3}


def test_search_result_defaults_falsy_fields_to_empty_string() -> None:
    result = SearchResult.from_raw({"title": None, "url": "", "language": "en"})

    assert result.to_dict() == {
        "title": "",
        "url": "",
        "language": "en",
        "description": "",
    }


def test_search_result_from_non_mapping() -> None:
    assert SearchResult.from_raw(None).to_dict() == {"title": "", "url": "", "description": ""}


def test_normalize_response_does_not_mutate_input() -> None:
    raw = {"web": {"results": [{"title": None, "url": "https://example.com"}]}}
    snapshot = json.loads(json.dumps(raw))

    normalized = normalize_response(raw)

    assert raw == snapshot
    assert normalized["web"]["results"][0]["title"] == ""


def test_error_record_uses_placeholders() -> None:
    record = ErrorRecord.from_exception(MissingCredentialError(), query=None, params=None)

    assert record.to_dict() == {
        "error": "No API key provided in credentials",
        "details": "No additional error details available",
        "status": "Unknown status",
        "query": "No query provided",
        "params": "No params available",
    }


def test_error_record_carries_api_failure_details() -> None:
    exc = ApiRequestFailedError("API Request failed: boom", status=500, response_data={"error": "x"})
    record = ErrorRecord.from_exception(exc, query="python", params={"q": "python"})

    assert record.status == 500
    assert record.details == {"error": "x"}
    assert record.query == "python"
    assert record.params == {"q": "python"}


def test_execution_item_pairs_index() -> None:
    item = ExecutionItem(json={"web": {"results": []}}, item_index=3)

    assert item.to_dict() == {"json": {"web": {"results": []}}, "pairedItem": {"item": 3}}
    assert item.error is False
