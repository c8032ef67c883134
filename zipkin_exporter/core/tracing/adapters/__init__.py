"""Span export adapters for the Zipkin exporter."""

from .base import ExportResult, ExportResultCode, SpanExportAdapter
from .http import ZipkinHttpAdapter
from .memory import InMemorySpanAdapter

__all__ = [
    # Base
    "SpanExportAdapter",
    "ExportResult",
    "ExportResultCode",
    # Adapters
    "ZipkinHttpAdapter",
    "InMemorySpanAdapter",
]
