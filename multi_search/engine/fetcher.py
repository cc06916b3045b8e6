"""Single-attempt HTTP fetching of engine result pages."""

from __future__ import annotations

import time
from dataclasses import dataclass

import httpx
import structlog

from ..config import OSHint, SearchSettings
from ..errors import ProtocolError, TransportError
from ..infra import BrowserHeaderFactory, HeaderFactory


@dataclass(slots=True)
class FetchRequest:
    """Input for the fetcher."""

    url: str
    headers: dict[str, str] | None = None
    timeout: float | None = None


@dataclass(slots=True)
class FetchResponse:
    """Standardised response wrapper."""

    url: str
    status_code: int
    text: str


class Fetcher:
    """Issue one timed GET per URL with browser-like headers."""

    def __init__(
        self,
        settings: SearchSettings,
        header_factory: HeaderFactory | None = None,
        client: httpx.Client | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.header_factory = header_factory or BrowserHeaderFactory()
        self.logger = logger or structlog.get_logger("multi_search.fetcher")
        self._owns_client = client is None
        self._client = client or httpx.Client(
            follow_redirects=True,
            timeout=settings.timeout_seconds,
            limits=httpx.Limits(
                max_connections=settings.concurrency,
                max_keepalive_connections=settings.concurrency,
            ),
        )

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def build_request(self, url: str, os_hint: OSHint | None = None) -> FetchRequest:
        headers = self.header_factory(os_hint or self.settings.os_hint)
        return FetchRequest(url=url, headers=headers, timeout=self.settings.timeout_seconds)

    def fetch(self, request: FetchRequest) -> FetchResponse:
        """Execute ``request``; transport faults and non-200 answers raise.

        The timeout bounds the whole request including the body; httpx alone
        only bounds each connect/read/write phase.
        """

        timeout = request.timeout or self.settings.timeout_seconds
        deadline = time.monotonic() + timeout
        try:
            with self._client.stream("GET", request.url, headers=request.headers, timeout=timeout) as response:
                if response.status_code != 200:
                    raise ProtocolError(response.status_code, url=request.url)
                chunks: list[bytes] = []
                for chunk in response.iter_bytes():
                    _check_deadline(request.url, deadline, timeout)
                    chunks.append(chunk)
                _check_deadline(request.url, deadline, timeout)
                text = b"".join(chunks).decode(response.encoding or "utf-8", errors="replace")
                final_url = str(response.url)
                status_code = response.status_code
        except httpx.TimeoutException as exc:
            raise TransportError(f"request timed out for {request.url}: {exc}", url=request.url) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"unable to make request for {request.url}: {exc}", url=request.url) from exc
        self.logger.debug("fetch_ok", url=request.url, status=status_code)
        return FetchResponse(url=final_url, status_code=status_code, text=text)


def _check_deadline(url: str, deadline: float, timeout: float) -> None:
    if time.monotonic() > deadline:
        raise TransportError(f"request timed out for {url}: exceeded {timeout:.3f}s", url=url)


__all__ = ["FetchRequest", "FetchResponse", "Fetcher"]
