"""OpenTelemetry SDK SpanExporter backed by ZipkinExporter."""

from __future__ import annotations

import logging
import threading
from collections.abc import Sequence
from typing import override

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.sdk.trace.export import SpanExporter, SpanExportResult

from .adapters import ExportResult
from .exporter import ZipkinExporter

logger = logging.getLogger(__name__)

SHUTDOWN_TIMEOUT_SECONDS = 30.0


class ZipkinSpanExporter(SpanExporter):
    """
    Plugs ZipkinExporter into OpenTelemetry span processors.

    Register it with SimpleSpanProcessor or BatchSpanProcessor. export()
    schedules delivery and returns SUCCESS straight away, so a slow or dead
    collector never stalls the processor. force_flush() and shutdown() wait,
    bounded by a timeout, for deliveries still in flight. Delivery outcomes
    are counted.

    Usage:
        provider = TracerProvider()
        exporter = ZipkinExporter(ZipkinExporterConfig(service_name="my-service"))
        provider.add_span_processor(BatchSpanProcessor(ZipkinSpanExporter(exporter)))
    """

    def __init__(self, exporter: ZipkinExporter) -> None:
        self._exporter = exporter
        self._lock = threading.Lock()
        self._exported_batches = 0
        self._failed_batches = 0

    def __repr__(self) -> str:
        return f"ZipkinSpanExporter({self._exporter!r})"

    @property
    def exported_batches(self) -> int:
        with self._lock:
            return self._exported_batches

    @property
    def failed_batches(self) -> int:
        with self._lock:
            return self._failed_batches

    @override
    def export(self, spans: Sequence[ReadableSpan]) -> SpanExportResult:
        self._exporter.export(spans, self._record_result)
        return SpanExportResult.SUCCESS

    @override
    def shutdown(self) -> None:
        if not self._exporter.force_flush(SHUTDOWN_TIMEOUT_SECONDS):
            logger.warning("Zipkin deliveries still pending at shutdown")
        self._exporter.shutdown()

    @override
    def force_flush(self, timeout_millis: int = 30000) -> bool:
        return self._exporter.force_flush(timeout_millis / 1000)

    def _record_result(self, result: ExportResult) -> None:
        with self._lock:
            if result.is_success:
                self._exported_batches += 1
            else:
                self._failed_batches += 1
        logger.debug("Zipkin delivery finished: %s", result.code.name)
