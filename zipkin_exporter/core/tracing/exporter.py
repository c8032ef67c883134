"""Zipkin span exporter: transforms span batches and delivers them without blocking."""

from __future__ import annotations

import asyncio
import functools
import threading
import time
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from .adapters import ExportResult, SpanExportAdapter, ZipkinHttpAdapter
from .transform import has_negative_duration, to_zipkin_span

if TYPE_CHECKING:
    from opentelemetry.sdk.trace import ReadableSpan

    from ..config import ZipkinExporterConfig
    from ..types import ZipkinSpan

ResultCallback = Callable[[ExportResult], None]


class ZipkinExporter:
    """
    Exports OpenTelemetry spans to a Zipkin collector.

    Every export() call converts its spans and makes exactly one adapter
    submission. The caller never waits on the network: delivery runs as a
    task on the running event loop, or on a short-lived worker thread when
    there is no running loop. The outcome goes to the result callback, which
    is invoked exactly once per call.

    Delivery is best effort. Failures are logged and reported as FAILED, never
    raised and never retried. Batching over time belongs to a span processor.

    Usage:
        config = ZipkinExporterConfig(service_name="my-service")
        exporter = ZipkinExporter(config)
        exporter.export(spans, lambda result: print(result.code))
    """

    def __init__(
        self,
        config: ZipkinExporterConfig,
        adapter: SpanExportAdapter | None = None,
    ) -> None:
        """
        Initialize the exporter.

        Args:
            config: Exporter configuration
            adapter: Delivery mechanism. Defaults to HTTP POST to config.url.
        """
        self._config = config
        self._logger = config.logger
        self._adapter = adapter or ZipkinHttpAdapter(
            config.url,
            timeout_seconds=config.timeout_seconds,
            headers=config.headers,
        )
        # Strong references so scheduled deliveries are not garbage collected
        self._tasks: dict[asyncio.Task[ExportResult], threading.Event] = {}
        # Guards _tasks and _pending, the count of deliveries whose callback has not run
        self._in_flight = threading.Condition()
        self._pending = 0

    def __repr__(self) -> str:
        return f"ZipkinExporter(service={self._config.service_name}, adapter={self._adapter!r})"

    @property
    def config(self) -> ZipkinExporterConfig:
        return self._config

    @property
    def adapter(self) -> SpanExportAdapter:
        return self._adapter

    def export(self, spans: Sequence[ReadableSpan], result_callback: ResultCallback) -> None:
        """
        Export a batch of spans.

        Returns as soon as the delivery is scheduled. An empty batch succeeds
        immediately without contacting the adapter.
        """
        batch = self._to_zipkin_payload(spans)
        if not batch:
            self._logger.debug("Zipkin send with empty spans")
            self._notify(result_callback, ExportResult.success())
            return

        self._schedule(batch, result_callback)

    async def export_async(self, spans: Sequence[ReadableSpan]) -> ExportResult:
        """Export a batch and wait for the delivery result."""
        batch = self._to_zipkin_payload(spans)
        if not batch:
            self._logger.debug("Zipkin send with empty spans")
            return ExportResult.success()
        return await self._send(batch)

    @property
    def pending_deliveries(self) -> int:
        """Number of exports whose result callback has not run yet."""
        with self._in_flight:
            return self._pending

    def force_flush(self, timeout_seconds: float = 30.0) -> bool:
        """
        Block until in-flight deliveries finish or the timeout expires.

        Deliveries running as tasks on the caller's own event loop cannot
        progress while it blocks, so they are not waited for here; use
        force_flush_async from that loop instead.

        Returns:
            True if no delivery is still pending
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        deadline = time.monotonic() + timeout_seconds
        with self._in_flight:
            local = sum(
                1
                for task, finished in self._tasks.items()
                if loop is not None and task.get_loop() is loop and not finished.is_set()
            )
            while self._pending > local:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    break
                self._in_flight.wait(remaining)
            return self._pending == 0

    async def force_flush_async(self, timeout_seconds: float = 30.0) -> bool:
        """Wait for in-flight deliveries, including tasks on the running loop."""
        loop = asyncio.get_running_loop()
        with self._in_flight:
            local = [task for task in self._tasks if task.get_loop() is loop]

        deadline = time.monotonic() + timeout_seconds
        if local:
            await asyncio.wait(local, timeout=timeout_seconds)

        remaining = max(deadline - time.monotonic(), 0)
        return await asyncio.to_thread(self.force_flush, remaining)

    def shutdown(self, result_callback: ResultCallback | None = None) -> None:
        """
        Shut the exporter down.

        With force_flush enabled this makes one optimistic flush of an empty
        batch. Queued spans live in the span processor, which drains them
        before calling shutdown. Safe to call repeatedly; the exporter keeps
        accepting exports afterwards.
        """
        if self._config.force_flush:
            self.export([], result_callback or _ignore_result)
        else:
            self._notify(result_callback, ExportResult.success())

    def to_zipkin_span(self, span: ReadableSpan) -> ZipkinSpan:
        """Transform one span using this exporter's service name and tag names."""
        return to_zipkin_span(
            span,
            self._config.service_name,
            self._config.status_code_tag_name,
            self._config.status_description_tag_name,
        )

    def _to_zipkin_payload(self, spans: Sequence[ReadableSpan]) -> tuple[dict[str, Any], ...]:
        payload = []
        for span in spans:
            if has_negative_duration(span):
                self._logger.debug(
                    "Span %s ends before it starts; duration clamped to 0",
                    span.name,
                )
            payload.append(self.to_zipkin_span(span).to_dict())
        return tuple(payload)

    def _schedule(self, batch: tuple[dict[str, Any], ...], result_callback: ResultCallback) -> None:
        finished = threading.Event()
        with self._in_flight:
            self._pending += 1
        delivery = self._deliver(batch, result_callback, finished)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            task = loop.create_task(delivery)
            with self._in_flight:
                self._tasks[task] = finished
            task.add_done_callback(functools.partial(self._on_task_done, result_callback, finished))
            return

        # Non-daemon so the interpreter waits for the final batch at exit
        thread = threading.Thread(
            target=asyncio.run,
            args=(delivery,),
            daemon=False,
            name="zipkin-exporter-send",
        )
        thread.start()

    def _on_task_done(
        self,
        result_callback: ResultCallback,
        finished: threading.Event,
        task: asyncio.Task[ExportResult],
    ) -> None:
        with self._in_flight:
            self._tasks.pop(task, None)
        # A task cancelled before its first step never runs _deliver's body
        if task.cancelled():
            self._finish(result_callback, ExportResult.failed("delivery cancelled before completion"), finished)

    async def _deliver(
        self,
        batch: tuple[dict[str, Any], ...],
        result_callback: ResultCallback,
        finished: threading.Event,
    ) -> ExportResult:
        result = ExportResult.failed("delivery did not complete")
        try:
            result = await self._send(batch)
        except asyncio.CancelledError:
            result = ExportResult.failed("delivery cancelled before completion")
            self._logger.error(
                "Zipkin export of %d spans via %s cancelled",
                len(batch),
                self._adapter.name,
            )
            raise
        finally:
            self._finish(result_callback, result, finished)
        return result

    async def _send(self, batch: tuple[dict[str, Any], ...]) -> ExportResult:
        try:
            result = await self._adapter.export_spans(list(batch))
        except Exception as error:
            result = ExportResult.failed(error)

        if not result.is_success:
            self._logger.error(
                "Zipkin export of %d spans via %s failed: %s",
                len(batch),
                self._adapter.name,
                result.error,
            )
        return result

    def _finish(
        self,
        result_callback: ResultCallback,
        result: ExportResult,
        finished: threading.Event,
    ) -> None:
        with self._in_flight:
            if finished.is_set():
                return
            finished.set()

        self._notify(result_callback, result)

        with self._in_flight:
            self._pending -= 1
            self._in_flight.notify_all()

    def _notify(self, result_callback: ResultCallback | None, result: ExportResult) -> None:
        if result_callback is None:
            return
        try:
            result_callback(result)
        except Exception as error:
            self._logger.error("Export result callback raised: %s", error)


def _ignore_result(result: ExportResult) -> None:
    pass
