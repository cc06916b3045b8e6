"""Result sink interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..normalize import PrintableResult


class BaseExporter(ABC):
    """Uniform sink contract for cleaned result items."""

    @abstractmethod
    def export(self, result: PrintableResult) -> None:
        """Write a single result block."""

    @abstractmethod
    def flush(self) -> None:
        """Flush buffered data to destination."""

    @abstractmethod
    def close(self) -> None:
        """Release underlying resources."""


__all__ = ["BaseExporter"]
