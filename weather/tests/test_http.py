from __future__ import annotations

# ruff: noqa: S101
import asyncio
from collections.abc import Callable

import httpx
import pytest

from weather.engines.errors import (
    FetchTimeoutError,
    HttpStatusError,
    TransportError,
)
from weather.engines.http import USER_AGENT, HttpClient


class RecordingTransport(httpx.MockTransport):
    """MockTransport that remembers requests and whether it was closed."""

    def __init__(
        self, handler: Callable[[httpx.Request], httpx.Response]
    ) -> None:
        self.requests: list[httpx.Request] = []
        self.closed = False

        def _handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_handler)

    async def aclose(self) -> None:
        self.closed = True


def _client(transport: httpx.AsyncBaseTransport) -> HttpClient:
    return HttpClient(host="api.example.test", transport=transport)


def test_get_text_returns_body_and_sends_user_agent() -> None:
    transport = RecordingTransport(
        lambda request: httpx.Response(200, text='{"ok": true}')
    )
    body = asyncio.run(_client(transport).get_text("/data?q=Tokyo&x=1"))

    assert body == '{"ok": true}'
    request = transport.requests[0]
    assert request.method == "GET"
    assert str(request.url) == "https://api.example.test/data?q=Tokyo&x=1"
    assert request.headers["User-Agent"] == USER_AGENT
    assert transport.closed is True


@pytest.mark.parametrize(
    ("status_code", "expected"),
    [
        (404, "HTTP 404: Not Found"),
        (401, "HTTP 401: Unauthorized"),
        (503, "HTTP 503: Service Unavailable"),
        (204, "HTTP 204: No Content"),
    ],
)
def test_non_200_status_raises_http_status_error(
    status_code: int, expected: str
) -> None:
    transport = RecordingTransport(
        lambda request: httpx.Response(status_code)
    )
    with pytest.raises(HttpStatusError) as excinfo:
        asyncio.run(_client(transport).get_text("/data"))

    assert excinfo.value.status_code == status_code
    assert str(excinfo.value) == expected
    assert excinfo.value.kind == "http_status"


def test_redirects_are_not_followed() -> None:
    transport = RecordingTransport(
        lambda request: httpx.Response(
            302, headers={"Location": "https://elsewhere.test/"}
        )
    )
    with pytest.raises(HttpStatusError) as excinfo:
        asyncio.run(_client(transport).get_text("/data"))

    assert excinfo.value.status_code == 302
    assert len(transport.requests) == 1


def test_timeout_raises_and_closes_connection() -> None:
    def slow(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    transport = RecordingTransport(slow)
    with pytest.raises(FetchTimeoutError, match="Request timeout"):
        asyncio.run(_client(transport).get_text("/data"))

    assert transport.closed is True
    assert len(transport.requests) == 1


def test_transport_failure_carries_underlying_message() -> None:
    def unreachable(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError(
            "Name or service not known", request=request
        )

    transport = RecordingTransport(unreachable)
    with pytest.raises(TransportError, match="Name or service not known"):
        asyncio.run(_client(transport).get_text("/data"))

    assert transport.closed is True


def test_client_uses_configured_timeout(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured: dict[str, object] = {}
    original_init = httpx.AsyncClient.__init__

    def spy_init(self: httpx.AsyncClient, **kwargs: object) -> None:
        captured.update(kwargs)
        original_init(self, **kwargs)  # type: ignore[arg-type]

    monkeypatch.setattr(httpx.AsyncClient, "__init__", spy_init)
    transport = RecordingTransport(lambda request: httpx.Response(200))
    client = HttpClient(
        host="api.example.test", timeout=5.0, transport=transport
    )
    asyncio.run(client.get_text("/data"))

    timeout = captured["timeout"]
    assert isinstance(timeout, httpx.Timeout)
    assert timeout.connect == 5.0
    assert timeout.read == 5.0
    assert captured["follow_redirects"] is False
