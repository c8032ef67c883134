"""HTTP adapter posting span batches to a Zipkin collector."""

from __future__ import annotations

import asyncio
import logging
from typing import Any, override

import aiohttp

from .base import ExportResult, SpanExportAdapter

logger = logging.getLogger(__name__)


class ZipkinHttpAdapter(SpanExportAdapter):
    """
    Sends span batches to the Zipkin v2 HTTP API as a JSON array.

    A fresh aiohttp session is opened per request, so nothing stays open
    between exports. Any 2xx response counts as success. There are no
    retries.
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        """
        Initialize the HTTP adapter.

        Args:
            url: Zipkin collector endpoint, e.g. http://localhost:9411/api/v2/spans
            timeout_seconds: Total request timeout. None means no timeout.
            headers: Extra headers sent with every request
        """
        self._url = url
        self._timeout_seconds = timeout_seconds
        self._headers = {"Content-Type": "application/json", **(headers or {})}

    def __repr__(self) -> str:
        return f"ZipkinHttpAdapter(url={self._url})"

    @property
    @override
    def name(self) -> str:
        return "http"

    @property
    def url(self) -> str:
        return self._url

    @override
    async def export_spans(self, spans: list[dict[str, Any]]) -> ExportResult:
        """POST the batch to the collector."""
        timeout = aiohttp.ClientTimeout(total=self._timeout_seconds)
        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.post(self._url, json=spans, headers=self._headers) as response:
                    if 200 <= response.status < 300:
                        logger.debug("Exported %d spans to %s", len(spans), self._url)
                        return ExportResult.success()

                    error_text = await response.text()
                    return ExportResult.failed(
                        f"Zipkin export failed (status {response.status}): {error_text}"
                    )

        except (aiohttp.ClientError, asyncio.TimeoutError) as error:
            return ExportResult.failed(error)
