"""In-memory span adapter for testing and development."""

from __future__ import annotations

from typing import Any, override

from .base import ExportResult, SpanExportAdapter


class InMemorySpanAdapter(SpanExportAdapter):
    """
    Stores submitted batches in memory - useful for testing and development.

    Each export_spans call is kept as its own batch so tests can check how
    many submissions happened.
    """

    def __init__(self) -> None:
        self._batches: list[list[dict[str, Any]]] = []

    def __repr__(self) -> str:
        return f"InMemorySpanAdapter(batches={len(self._batches)})"

    @property
    @override
    def name(self) -> str:
        return "in-memory"

    def get_batches(self) -> list[list[dict[str, Any]]]:
        """Get every submitted batch, oldest first."""
        return [list(batch) for batch in self._batches]

    def get_all_spans(self) -> list[dict[str, Any]]:
        """Get all stored spans across batches."""
        return [span for batch in self._batches for span in batch]

    def get_spans_by_name(self, name: str) -> list[dict[str, Any]]:
        """Get spans with an exact name match."""
        return [span for span in self.get_all_spans() if span.get("name") == name]

    def clear(self) -> None:
        """Clear all stored batches."""
        self._batches.clear()

    @override
    async def export_spans(self, spans: list[dict[str, Any]]) -> ExportResult:
        """Export spans by storing them in memory."""
        self._batches.append(list(spans))
        return ExportResult.success()
