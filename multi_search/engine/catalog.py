"""Static engine descriptors and URL-to-engine dispatch."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence

from ..errors import EngineMismatchError


class LinkMode(str, Enum):
    """How the destination link is read from a result row."""

    ATTRIBUTE = "attribute"
    TEXT = "text"


@dataclass(frozen=True, slots=True)
class EngineDescriptor:
    """URL template and selectors for one search engine result page."""

    name: str
    base_url: str
    item_selector: str
    link_selector: str
    blurb_selector: str
    link_mode: LinkMode = LinkMode.ATTRIBUTE

    def query_url(self, query: str) -> str:
        return f"{self.base_url}{query}"


BING = EngineDescriptor(
    name="bing",
    base_url="https://bing.com/search?q=",
    item_selector="li.b_algo",
    link_selector="h2 a",
    blurb_selector="div.b_caption p",
)
BRAVE = EngineDescriptor(
    name="brave",
    base_url="https://search.brave.com/search?q=",
    item_selector="div.fdb",
    link_selector="div.fdb > a.result-header",
    blurb_selector="div.snippet-content p.snippet-description",
)
DUCK = EngineDescriptor(
    name="duck",
    base_url="https://html.duckduckgo.com/html?q=",
    item_selector="div.web-result",
    link_selector="div.links_main > a",
    blurb_selector="div.links_main > a",
)
MOJEEK = EngineDescriptor(
    name="mojeek",
    base_url="https://www.mojeek.com/search?q=",
    item_selector="ul.results-standard > li",
    link_selector="li > a.ob",
    blurb_selector="li > p.s",
)
# lite.qwant.com prints the destination as plain text in a span.
QWANT = EngineDescriptor(
    name="qwant",
    base_url="https://lite.qwant.com/?q=",
    item_selector="article[class='web result']",
    link_selector="article[class='web result'] > span",
    blurb_selector="article[class='web result'] > p.desc",
    link_mode=LinkMode.TEXT,
)
YAHOO = EngineDescriptor(
    name="yahoo",
    base_url="https://search.yahoo.com/search?p=",
    item_selector="div.algo",
    link_selector="h3 > a",
    blurb_selector="div.compText",
)

CATALOG: Mapping[str, EngineDescriptor] = MappingProxyType(
    {engine.name: engine for engine in (BING, BRAVE, DUCK, MOJEEK, QWANT, YAHOO)}
)

PRIVACY_ENGINES: tuple[EngineDescriptor, ...] = (BRAVE, DUCK, MOJEEK, QWANT)
STANDARD_ENGINES: tuple[EngineDescriptor, ...] = (BING, BRAVE, DUCK, YAHOO)

# Evaluated in order; first prefix wins.
URL_MATCHERS: tuple[tuple[str, EngineDescriptor], ...] = tuple(
    (engine.base_url, engine) for engine in CATALOG.values()
)


def engine_set(privacy: bool) -> tuple[EngineDescriptor, ...]:
    """Return the active engine subset for a run."""

    return PRIVACY_ENGINES if privacy else STANDARD_ENGINES


def match_engine(
    url: str,
    matchers: Sequence[tuple[str, EngineDescriptor]] = URL_MATCHERS,
) -> EngineDescriptor:
    """Resolve the descriptor owning ``url`` or raise :class:`EngineMismatchError`."""

    for prefix, engine in matchers:
        if url.startswith(prefix):
            return engine
    raise EngineMismatchError(url)


__all__ = [
    "CATALOG",
    "EngineDescriptor",
    "LinkMode",
    "PRIVACY_ENGINES",
    "STANDARD_ENGINES",
    "URL_MATCHERS",
    "engine_set",
    "match_engine",
]
