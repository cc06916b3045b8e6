"""Turn a query request into the ordered stream of engine URLs."""

from __future__ import annotations

from typing import Iterator, Sequence

from ..config import QueryRequest
from .catalog import EngineDescriptor, engine_set


def format_query(base: str, term: str, *, exact: bool, search_exact: bool, multi_exact: bool) -> str:
    """Combine base and term under the highest-precedence quoting mode."""

    if exact:
        return f'"{base}+{term}"'
    if search_exact:
        return f'"{base}"+{term}'
    if multi_exact:
        return f'{base}+"{term}"'
    return f"{base}+{term}"


class QueryPlanner:
    """Generate request URLs term-major, engine-minor."""

    def __init__(self, request: QueryRequest, engines: Sequence[EngineDescriptor] | None = None) -> None:
        self.request = request
        self.engines = tuple(engines) if engines is not None else engine_set(request.privacy)

    def __iter__(self) -> Iterator[str]:
        return self.urls()

    def __len__(self) -> int:
        return len(self.engines) * max(1, len(self.request.terms))

    def urls(self) -> Iterator[str]:
        request = self.request
        if not request.terms:
            for engine in self.engines:
                yield engine.query_url(request.base_term)
            return
        for term in request.terms:
            query = format_query(
                request.base_term,
                term,
                exact=request.exact,
                search_exact=request.search_exact,
                multi_exact=request.multi_exact,
            )
            for engine in self.engines:
                yield engine.query_url(query)


__all__ = ["QueryPlanner", "format_query"]
