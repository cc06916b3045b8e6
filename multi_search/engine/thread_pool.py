"""Bounded thread pool running one pipeline per URL."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, wait
from threading import BoundedSemaphore
from typing import Callable, Iterable, TypeVar

import structlog

T = TypeVar("T")


class FetchWorkerPool:
    """Admit at most ``max_workers`` pipelines at once and join them all.

    The producer blocks on the admission gate, so URLs are pulled from the
    source iterable only as slots free up.
    """

    def __init__(self, max_workers: int = 10, logger: structlog.BoundLogger | None = None) -> None:
        if max_workers < 1:
            raise ValueError("max_workers must be >= 1")
        self.max_workers = max_workers
        self.logger = logger or structlog.get_logger("multi_search.pool")

    def run(
        self,
        items: Iterable[T],
        task: Callable[[T], object],
        on_submit: Callable[[T], None] | None = None,
    ) -> int:
        """Run ``task`` for every item and return the number of items submitted."""

        gate = BoundedSemaphore(self.max_workers)
        futures: list[Future] = []
        with ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="search") as executor:
            for item in items:
                gate.acquire()
                try:
                    future = executor.submit(task, item)
                except BaseException:
                    gate.release()
                    raise
                future.add_done_callback(self._finisher(gate, item))
                futures.append(future)
                if on_submit is not None:
                    on_submit(item)
            wait(futures)
        return len(futures)

    def _finisher(self, gate: BoundedSemaphore, item: object) -> Callable[[Future], None]:
        def _done(future: Future) -> None:
            gate.release()
            exc = future.exception()
            if exc is not None:
                self.logger.error("pipeline_crashed", item=str(item), error=repr(exc))

        return _done


__all__ = ["FetchWorkerPool"]
