"""Run orchestrator wiring planning, fetching, extraction and output."""

from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import Iterable

import structlog

from .config import QueryRequest, SearchSettings
from .engine import (
    BlurbNormalizer,
    Fetcher,
    FetchWorkerPool,
    LinkNormalizer,
    PrintableResult,
    QueryPlanner,
    ResponseExtractor,
    match_engine,
    parse_document,
)
from .engine.exporter import StreamExporter
from .errors import EngineMismatchError, PipelineError
from .infra import HeaderFactory


@dataclass(slots=True)
class RunSummary:
    """Counters describing one search run."""

    urls: int = 0
    succeeded: int = 0
    failed: int = 0
    results: int = 0


class SearchRunner:
    """Fan one query out to every engine and stream cleaned results."""

    def __init__(
        self,
        settings: SearchSettings,
        exporter: StreamExporter | None = None,
        fetcher: Fetcher | None = None,
        header_factory: HeaderFactory | None = None,
        logger: structlog.BoundLogger | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger or structlog.get_logger("multi_search.runner")
        self.exporter = exporter or StreamExporter(include_urls=settings.include_urls)
        self._owns_fetcher = fetcher is None
        self.fetcher = fetcher or Fetcher(settings, header_factory=header_factory, logger=self.logger)
        self.pool = FetchWorkerPool(settings.concurrency, logger=self.logger)
        self.extractor = ResponseExtractor()
        self.clean_link = LinkNormalizer(logger=self.logger)
        self.clean_blurb = BlurbNormalizer(settings.max_length)
        self._summary = RunSummary()
        self._summary_lock = Lock()

    # ------------------------------------------------------------------
    def run(self, request: QueryRequest) -> RunSummary:
        return self.run_urls(QueryPlanner(request))

    def run_urls(self, urls: Iterable[str]) -> RunSummary:
        self._summary = RunSummary()
        on_submit = self.exporter.echo_query if self.settings.debug else None
        try:
            self._summary.urls = self.pool.run(urls, self.search, on_submit=on_submit)
        finally:
            self.exporter.flush()
            if self._owns_fetcher:
                self.fetcher.close()
        self.logger.info(
            "run_complete",
            urls=self._summary.urls,
            succeeded=self._summary.succeeded,
            failed=self._summary.failed,
            results=self._summary.results,
        )
        return self._summary

    # ------------------------------------------------------------------
    def search(self, url: str) -> int:
        """Run the full pipeline for one URL; failures stay with this URL."""

        try:
            results = self._search(url)
        except EngineMismatchError as exc:
            self.logger.error("engine_mismatch", url=url, error=str(exc))
        except PipelineError as exc:
            self.logger.warning("search_failed", url=url, kind=type(exc).__name__, error=str(exc))
        except Exception as exc:  # noqa: BLE001
            self.logger.exception("search_crashed", url=url, error=str(exc))
        else:
            self._record(succeeded=1, results=results)
            return results
        self._record(failed=1)
        return 0

    def _search(self, url: str) -> int:
        engine = match_engine(url)
        response = self.fetcher.fetch(self.fetcher.build_request(url))
        document = parse_document(response.text, url=url)
        count = 0
        for item in self.extractor.extract(document, engine):
            self.exporter.export(
                PrintableResult(
                    blurb=self.clean_blurb(item.raw_blurb),
                    link=self.clean_link(item.raw_link),
                )
            )
            count += 1
        self.logger.debug("search_done", url=url, engine=engine.name, results=count)
        return count

    def _record(self, succeeded: int = 0, failed: int = 0, results: int = 0) -> None:
        with self._summary_lock:
            self._summary.succeeded += succeeded
            self._summary.failed += failed
            self._summary.results += results


__all__ = ["RunSummary", "SearchRunner"]
