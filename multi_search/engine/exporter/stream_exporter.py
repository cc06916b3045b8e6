"""Line-oriented result writer for stdout or any text stream."""

from __future__ import annotations

import sys
from threading import Lock
from typing import Iterable, TextIO

from ..normalize import PrintableResult
from .base import BaseExporter


class StreamExporter(BaseExporter):
    """Write each result as link?/blurb/blank-line without interleaving."""

    def __init__(self, stream: TextIO | None = None, include_urls: bool = True) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.include_urls = include_urls
        self._lock = Lock()
        self.count = 0

    def export(self, result: PrintableResult) -> None:
        lines: list[str] = []
        if self.include_urls and result.blurb:
            lines.append(result.link)
        lines.append(result.blurb)
        lines.append("")
        with self._lock:
            self.stream.write(_join(lines))
            self.count += 1

    def echo_query(self, url: str) -> None:
        self.write_block(["*****", f"query: {url}", "*****", ""])

    def write_block(self, lines: Iterable[str]) -> None:
        with self._lock:
            self.stream.write(_join(lines))

    def flush(self) -> None:
        with self._lock:
            self.stream.flush()

    def close(self) -> None:
        self.flush()


def _join(lines: Iterable[str]) -> str:
    return "".join(f"{line}\n" for line in lines)


__all__ = ["StreamExporter"]
