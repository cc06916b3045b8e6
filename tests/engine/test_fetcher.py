from __future__ import annotations

import time
from dataclasses import fields

import httpx
import pytest

from multi_search.engine import Fetcher
from multi_search.errors import ProtocolError, TransportError


def test_fetcher_applies_injected_headers(settings, fixed_headers, mock_client) -> None:
    captured: dict = {}

    def handler(request: httpx.Request) -> httpx.Response:
        captured["user_agent"] = request.headers.get("user-agent")
        captured["url"] = str(request.url)
        return httpx.Response(200, text="<html>ok</html>")

    fetcher = Fetcher(settings, header_factory=fixed_headers, client=mock_client(handler))
    request = fetcher.build_request("https://html.duckduckgo.com/html?q=foo")
    assert request.timeout == pytest.approx(1.0)

    response = fetcher.fetch(request)

    assert captured["user_agent"] == "test-agent/l"
    assert captured["url"].startswith("https://html.duckduckgo.com/html")
    assert response.status_code == 200
    assert response.text == "<html>ok</html>"


def test_non_200_is_protocol_error(settings, fixed_headers, mock_client) -> None:
    fetcher = Fetcher(
        settings,
        header_factory=fixed_headers,
        client=mock_client(lambda request: httpx.Response(503, text="busy")),
    )
    with pytest.raises(ProtocolError) as info:
        fetcher.fetch(fetcher.build_request("https://bing.com/search?q=foo"))
    assert info.value.status_code == 503
    assert info.value.url == "https://bing.com/search?q=foo"


@pytest.mark.parametrize("error", [httpx.ConnectError, httpx.ReadTimeout])
def test_transport_failures_are_wrapped(settings, fixed_headers, mock_client, error) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise error("boom", request=request)

    fetcher = Fetcher(settings, header_factory=fixed_headers, client=mock_client(handler))
    with pytest.raises(TransportError) as info:
        fetcher.fetch(fetcher.build_request("https://www.mojeek.com/search?q=foo"))
    assert isinstance(info.value.__cause__, httpx.HTTPError)


def test_fetcher_keeps_injected_client_open(settings, fixed_headers, mock_client) -> None:
    client = mock_client(lambda request: httpx.Response(200, text="x"))
    with Fetcher(settings, header_factory=fixed_headers, client=client):
        pass
    assert not client.is_closed


def test_timeout_bounds_the_whole_body(settings, fixed_headers, mock_client) -> None:
    def drip():
        for _ in range(20):
            time.sleep(0.15)
            yield b"<p>x</p>"

    fetcher = Fetcher(
        settings.model_copy(update={"timeout_ms": 400}),
        header_factory=fixed_headers,
        client=mock_client(lambda request: httpx.Response(200, content=drip())),
    )
    started = time.monotonic()
    with pytest.raises(TransportError, match="timed out"):
        fetcher.fetch(fetcher.build_request("https://search.brave.com/search?q=foo"))
    assert time.monotonic() - started < 1.5


def test_body_is_decoded_with_declared_charset(settings, fixed_headers, mock_client) -> None:
    fetcher = Fetcher(
        settings,
        header_factory=fixed_headers,
        client=mock_client(
            lambda request: httpx.Response(
                200, content="café".encode("latin-1"), headers={"Content-Type": "text/html; charset=latin-1"}
            )
        ),
    )
    response = fetcher.fetch(fetcher.build_request("https://www.qwant.com/?q=foo"))
    assert response.text == "café"


def test_response_carries_only_url_status_and_text(settings, fixed_headers, mock_client) -> None:
    fetcher = Fetcher(
        settings,
        header_factory=fixed_headers,
        client=mock_client(lambda request: httpx.Response(200, text="ok", headers={"Server": "mock"})),
    )
    response = fetcher.fetch(fetcher.build_request("https://www.bing.com/search?q=foo"))
    assert [f.name for f in fields(response)] == ["url", "status_code", "text"]
