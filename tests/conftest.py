from typing import Any

import httpx
import pytest


class BraveStub:
    """Records outbound Brave calls and replays queued responses.

    Each queued entry is a JSON payload (served as 200), an ``httpx.Response``
    or an exception to raise. The last entry is reused once the queue runs out.
    """

    def __init__(self) -> None:
        self.calls: list[dict[str, Any]] = []
        self.responses: list[Any] = [{"web": {"results": []}}]

    def queue(self, *responses: Any) -> None:
        self.responses = list(responses)

    def _next(self) -> Any:
        index = min(len(self.calls) - 1, len(self.responses) - 1)
        return self.responses[index]

    def build_client(self):
        stub = self

        class StubClient:
            async def __aenter__(self):
                return self

            async def __aexit__(self, exc_type, exc, tb):
                return False

            async def get(self, url, params=None, headers=None):
                stub.calls.append({"url": url, "params": params, "headers": headers})
                request = httpx.Request("GET", url, params=params)
                response = stub._next()
                if isinstance(response, Exception):
                    raise response
                if isinstance(response, httpx.Response):
                    response.request = request
                    return response
                return httpx.Response(200, json=response, request=request)

        return StubClient


@pytest.fixture
def brave_stub(monkeypatch: pytest.MonkeyPatch) -> BraveStub:
    stub = BraveStub()
    monkeypatch.setattr("bravenode.node.brave.httpx.AsyncClient", stub.build_client())
    return stub
