"""Link and blurb clean-up applied to every extracted result row."""

from __future__ import annotations

import re
from dataclasses import dataclass
from urllib.parse import unquote_plus

import structlog

from ..errors import LinkDecodeError

_NO_BLANK = re.compile(r"\s{2,}")
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


@dataclass(frozen=True, slots=True)
class RedirectWrapper:
    """Click-tracking URL shape wrapping the real destination."""

    prefix: str
    start_marker: str
    end_marker: str

    def matches(self, link: str) -> bool:
        return link.startswith(self.prefix)

    def unwrap(self, link: str) -> str:
        _, found, tail = link.partition(self.start_marker)
        if not found:
            return link
        destination, _, _ = tail.partition(self.end_marker)
        return destination


# Evaluated in order; first matching prefix wins.
REDIRECT_WRAPPERS: tuple[RedirectWrapper, ...] = (
    # //duckduckgo.com/l/?uddg=<destination>&rut=<tracking>
    RedirectWrapper(prefix="//duck", start_marker="=", end_marker="&rut"),
    # https://r.search.yahoo.com/.../RU=<destination>/RK=<tracking>
    RedirectWrapper(prefix="https://r.search.yahoo.com/", start_marker="/RU=", end_marker="/RK="),
)


@dataclass(frozen=True, slots=True)
class PrintableResult:
    """Cleaned result item ready for the output sink."""

    blurb: str
    link: str


def decode_link(raw: str) -> str:
    """Query-unescape ``raw``; malformed escapes raise :class:`LinkDecodeError`."""

    if _BAD_ESCAPE.search(raw):
        raise LinkDecodeError(f"invalid percent-escape in {raw!r}")
    try:
        return unquote_plus(raw, errors="strict")
    except UnicodeDecodeError as exc:
        raise LinkDecodeError(f"undecodable bytes in {raw!r}") from exc


class LinkNormalizer:
    """Decode links and strip engine redirect wrappers."""

    def __init__(
        self,
        wrappers: tuple[RedirectWrapper, ...] = REDIRECT_WRAPPERS,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.wrappers = wrappers
        self.logger = logger or structlog.get_logger("multi_search.normalize")

    def __call__(self, raw: str) -> str:
        return self.normalize(raw)

    def normalize(self, raw: str) -> str:
        try:
            link = decode_link(raw)
        except LinkDecodeError as exc:
            self.logger.warning("link_decode_error", link=raw, error=str(exc))
            return ""
        for wrapper in self.wrappers:
            if wrapper.matches(link):
                return wrapper.unwrap(link)
        return link


class BlurbNormalizer:
    """Collapse whitespace and cap blurb length."""

    def __init__(self, max_length: int = 500) -> None:
        self.max_length = max_length

    def __call__(self, raw: str) -> str:
        return self.normalize(raw)

    def normalize(self, raw: str) -> str:
        blurb = _NO_BLANK.sub(" ", raw)
        blurb = blurb.strip()
        blurb = blurb.replace("\n", "")
        return blurb[: self.max_length]


__all__ = [
    "BlurbNormalizer",
    "LinkNormalizer",
    "PrintableResult",
    "REDIRECT_WRAPPERS",
    "RedirectWrapper",
    "decode_link",
]
