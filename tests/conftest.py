"""Shared fixtures: settings, canned result pages and mock HTTP clients."""

from __future__ import annotations

from typing import Callable, Iterator

import httpx
import pytest

from multi_search.config import OSHint, QueryRequest, SearchSettings

DUCK_PAGE = """
<html><body>
<div class="result results_links web-result">
  <div class="links_main links_deep result__body">
    <a class="result__a" href="//duckduckgo.com/l/?uddg=https%3A%2F%2Fexample.com%2Fone&amp;rut=abc123">Example
      one    title</a>
  </div>
</div>
<div class="result results_links web-result">
  <div class="links_main links_deep result__body">
    <a class="result__a" href="https://example.org/two">Example two</a>
  </div>
</div>
</body></html>
"""

BING_PAGE = """
<html><body><ol id="b_results">
<li class="b_algo">
  <h2><a href="https://example.com/bing">Bing result</a></h2>
  <div class="b_caption"><p>First   bing
  blurb</p></div>
</li>
<li class="b_algo">
  <h2>No link here</h2>
</li>
</ol></body></html>
"""

QWANT_PAGE = """
<html><body>
<article class="web result">
  <a href="https://lite.qwant.com/redirect">Qwant title</a>
  <span class="url">https://example.net/qwant</span>
  <p class="desc">Qwant   blurb text</p>
</article>
<article class="news result">
  <span class="url">https://example.net/ignored</span>
</article>
</body></html>
"""

YAHOO_PAGE = """
<html><body>
<div class="dd algo algo-sr">
  <h3 class="title"><a href="https://r.search.yahoo.com/_ylt=Awr/RV=2/RE=1/RO=10/RU=https%3a%2f%2fexample.com%2fyahoo/RK=2/RS=abc-">Yahoo title</a></h3>
  <div class="compText aAbs"><p>Yahoo blurb</p></div>
</div>
</body></html>
"""

BRAVE_PAGE = """
<html><body><div id="results">
<div class="snippet fdb" data-type="web">
  <a class="result-header" href="https://example.com/brave">
    <span class="snippet-title">Brave title</span>
  </a>
  <div class="snippet-content">
    <p class="snippet-description">Brave   first
    blurb</p>
  </div>
</div>
<div class="snippet fdb" data-type="web">
  <div class="wrapper"><a class="result-header" href="https://example.com/nested">Nested</a></div>
  <div class="snippet-content"><p class="snippet-description">Second</p></div>
</div>
</div></body></html>
"""

MOJEEK_PAGE = """
<html><body>
<ul class="results-standard">
  <li>
    <a class="ob" href="https://example.com/mojeek">Mojeek title</a>
    <p class="i">example.com</p>
    <p class="s">Mojeek blurb</p>
  </li>
  <li>
    <h2><a class="ob" href="https://example.com/heading">Heading link</a></h2>
    <div><p class="s">nested blurb</p></div>
  </li>
</ul>
<ul class="results-news"><li><a class="ob" href="https://example.com/news">News</a></li></ul>
</body></html>
"""


@pytest.fixture
def settings() -> SearchSettings:
    return SearchSettings(concurrency=4, timeout_ms=1000, max_length=500, os_hint=OSHint.LINUX)


@pytest.fixture
def fixed_headers() -> Callable[[OSHint], dict[str, str]]:
    def _factory(os_hint: OSHint) -> dict[str, str]:
        return {"User-Agent": f"test-agent/{os_hint.value}"}

    return _factory


@pytest.fixture
def query_builder() -> Callable[..., QueryRequest]:
    def _builder(**overrides) -> QueryRequest:
        base = {"base_term": "foo", "terms": ()}
        base.update(overrides)
        return QueryRequest(**base)

    return _builder


@pytest.fixture
def mock_client() -> Iterator[Callable[[Callable[[httpx.Request], httpx.Response]], httpx.Client]]:
    clients: list[httpx.Client] = []

    def _build(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield _build
    for client in clients:
        client.close()


@pytest.fixture
def pages() -> dict[str, str]:
    return {
        "bing": BING_PAGE,
        "brave": BRAVE_PAGE,
        "duck": DUCK_PAGE,
        "mojeek": MOJEEK_PAGE,
        "qwant": QWANT_PAGE,
        "yahoo": YAHOO_PAGE,
    }
