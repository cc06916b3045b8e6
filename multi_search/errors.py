"""Exception taxonomy shared by the search pipeline."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for every error raised by multi-search."""


class ConfigurationError(SearchError):
    """Invalid run configuration; fatal before any request is made."""


class PipelineError(SearchError):
    """Failure confined to the pipeline of a single URL."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url


class TransportError(PipelineError):
    """Connection failure or timeout."""


class ProtocolError(PipelineError):
    """Engine answered with a non-200 status."""

    def __init__(self, status_code: int, url: str | None = None) -> None:
        super().__init__(f"HTTP response: {status_code} for {url}", url=url)
        self.status_code = status_code


class ParseError(PipelineError):
    """Response body could not be parsed as HTML."""


class EngineMismatchError(PipelineError):
    """URL matched no catalog entry; the engine catalog has drifted."""

    def __init__(self, url: str) -> None:
        super().__init__(
            f"mismatched url {url}, check if one of the search engines has changed",
            url=url,
        )


class LinkDecodeError(SearchError):
    """Raw link could not be percent-decoded."""


__all__ = [
    "ConfigurationError",
    "EngineMismatchError",
    "LinkDecodeError",
    "ParseError",
    "PipelineError",
    "ProtocolError",
    "SearchError",
    "TransportError",
]
