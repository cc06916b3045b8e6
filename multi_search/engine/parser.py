"""Result-page parsing and per-engine row extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from selectolax.parser import HTMLParser, Node

from ..errors import ParseError
from .catalog import EngineDescriptor, LinkMode


@dataclass(frozen=True, slots=True)
class ExtractedItem:
    """Raw link and blurb read from one result row."""

    raw_link: str
    raw_blurb: str


def parse_document(html: str, url: str | None = None) -> HTMLParser:
    """Parse a response body, raising :class:`ParseError` when it is unusable."""

    if not html or not html.strip():
        raise ParseError("cannot parse response body: empty document", url=url)
    try:
        document = HTMLParser(html)
    except (TypeError, ValueError) as exc:
        raise ParseError(f"cannot parse response body: {exc}", url=url) from exc
    if document.root is None:
        raise ParseError("cannot parse response body: no root element", url=url)
    return document


class ResponseExtractor:
    """Walk result rows of a parsed page using the engine's selectors."""

    def extract(self, document: HTMLParser, engine: EngineDescriptor) -> Iterator[ExtractedItem]:
        for row in document.css(engine.item_selector):
            yield ExtractedItem(
                raw_link=self._read_link(row, engine),
                raw_blurb=self._read_text(row, engine.blurb_selector),
            )

    def extract_html(self, html: str, engine: EngineDescriptor, url: str | None = None) -> list[ExtractedItem]:
        return list(self.extract(parse_document(html, url), engine))

    @staticmethod
    def _read_link(row: Node, engine: EngineDescriptor) -> str:
        node = row.css_first(engine.link_selector)
        if node is None:
            return ""
        if engine.link_mode is LinkMode.TEXT:
            return node.text()
        return node.attributes.get("href") or ""

    @staticmethod
    def _read_text(row: Node, selector: str) -> str:
        return "".join(node.text() for node in row.css(selector))


__all__ = ["ExtractedItem", "ResponseExtractor", "parse_document"]
