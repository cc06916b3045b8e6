"""Engine components orchestrating plan → fetch → parse → normalize → export."""

from .catalog import (
    CATALOG,
    PRIVACY_ENGINES,
    STANDARD_ENGINES,
    EngineDescriptor,
    LinkMode,
    engine_set,
    match_engine,
)
from .fetcher import FetchRequest, FetchResponse, Fetcher
from .normalize import BlurbNormalizer, LinkNormalizer, PrintableResult
from .parser import ExtractedItem, ResponseExtractor, parse_document
from .planner import QueryPlanner, format_query
from .thread_pool import FetchWorkerPool

__all__ = [
    "BlurbNormalizer",
    "CATALOG",
    "EngineDescriptor",
    "ExtractedItem",
    "FetchRequest",
    "FetchResponse",
    "FetchWorkerPool",
    "Fetcher",
    "LinkMode",
    "LinkNormalizer",
    "PRIVACY_ENGINES",
    "PrintableResult",
    "QueryPlanner",
    "ResponseExtractor",
    "STANDARD_ENGINES",
    "engine_set",
    "format_query",
    "match_engine",
    "parse_document",
]
