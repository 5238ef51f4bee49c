import json

import httpx
import pytest

from bravenode.cli import build_items, main, parse_args


def _write_config(tmp_path, **node) -> str:
    path = tmp_path / "config.json"
    path.write_text(
        json.dumps({"brave": {"apiKey": "cli-key"}, "node": node}),
        encoding="utf-8",
    )
    return str(path)


def test_build_items_only_includes_given_fields() -> None:
    args = parse_args(["python", "rust", "--count", "3"])

    assert build_items(args) == [
        {"operation": "webSearch", "query": "python", "additionalFields": {"count": 3}},
        {"operation": "webSearch", "query": "rust", "additionalFields": {"count": 3}},
    ]


def test_help_describes_node(capsys) -> None:
    with pytest.raises(SystemExit):
        parse_args(["--help"])

    assert "Make requests to Brave Search API" in capsys.readouterr().out


def test_main_prints_items(tmp_path, brave_stub, capsys) -> None:
    brave_stub.queue({"web": {"results": [{"title": "T", "url": "https://example.com"}]}})

    code = main(["python", "--config", _write_config(tmp_path), "--country", "US"])
    output = json.loads(capsys.readouterr().out)

    assert code == 0
    assert output[0]["pairedItem"] == {"item": 0}
    assert output[0]["json"]["web"]["results"][0]["description"] == ""
    assert brave_stub.calls[0]["params"] == {"q": "python", "country": "US"}
    assert brave_stub.calls[0]["headers"]["X-Subscription-Token"] == "cli-key"


def test_main_returns_error_code_on_fatal_failure(tmp_path, brave_stub, capsys) -> None:
    brave_stub.queue(httpx.Response(503, json={"error": "down"}))

    code = main(["python", "rust", "--config", _write_config(tmp_path)])
    captured = capsys.readouterr()
    output = json.loads(captured.err)

    assert code == 1
    assert captured.out == ""
    assert output["itemIndex"] == 0
    assert output["description"] == 'API Response: {"error": "down"}'
    assert len(brave_stub.calls) == 1


def test_main_continue_on_fail_from_config(tmp_path, brave_stub, capsys) -> None:
    brave_stub.queue(httpx.Response(503, json={"error": "down"}))

    code = main(["python", "rust", "--config", _write_config(tmp_path, continueOnFail=True)])
    output = json.loads(capsys.readouterr().out)

    assert code == 0
    assert [entry["json"]["status"] for entry in output] == [503, 503]
    assert len(brave_stub.calls) == 2
