"""Exporter implementations."""

from .base import BaseExporter
from .stream_exporter import StreamExporter

__all__ = ["BaseExporter", "StreamExporter"]
