"""Tests for span export adapters."""

import asyncio
import unittest

import pytest

from zipkin_exporter.core.tracing.adapters import (
    ExportResult,
    ExportResultCode,
    InMemorySpanAdapter,
    ZipkinHttpAdapter,
)


def _wire_span(name: str = "test-span", span_id: str = "b" * 16) -> dict:
    return {
        "traceId": "a" * 32,
        "id": span_id,
        "name": name,
        "timestamp": 1_000_000,
        "duration": 5000,
        "localEndpoint": {"serviceName": "svc"},
        "tags": {"ot.status_code": "OK"},
    }


class TestExportResult(unittest.TestCase):
    """Tests for ExportResult dataclass."""

    def test_success_result(self):
        result = ExportResult.success()
        self.assertEqual(result.code, ExportResultCode.SUCCESS)
        self.assertIsNone(result.error)
        self.assertTrue(result.is_success)

    def test_failed_result_with_exception(self):
        error = ValueError("test error")
        result = ExportResult.failed(error)
        self.assertEqual(result.code, ExportResultCode.FAILED)
        self.assertEqual(result.error, error)
        self.assertFalse(result.is_success)

    def test_failed_result_with_string(self):
        result = ExportResult.failed("test error message")
        self.assertEqual(result.code, ExportResultCode.FAILED)
        self.assertIsInstance(result.error, Exception)
        self.assertEqual(str(result.error), "test error message")


class TestInMemorySpanAdapter(unittest.TestCase):
    """Tests for InMemorySpanAdapter."""

    def setUp(self):
        self.adapter = InMemorySpanAdapter()

    def test_name(self):
        self.assertEqual(self.adapter.name, "in-memory")

    def test_repr(self):
        self.assertEqual(repr(self.adapter), "InMemorySpanAdapter(batches=0)")
        asyncio.run(self.adapter.export_spans([_wire_span()]))
        self.assertEqual(repr(self.adapter), "InMemorySpanAdapter(batches=1)")

    def test_keeps_batches_separate(self):
        asyncio.run(self.adapter.export_spans([_wire_span("a"), _wire_span("b")]))
        asyncio.run(self.adapter.export_spans([_wire_span("c")]))

        batches = self.adapter.get_batches()
        self.assertEqual([[s["name"] for s in batch] for batch in batches], [["a", "b"], ["c"]])
        self.assertEqual(len(self.adapter.get_all_spans()), 3)

    def test_get_spans_by_name(self):
        asyncio.run(self.adapter.export_spans([_wire_span("GET /users"), _wire_span("GET /orders")]))

        spans = self.adapter.get_spans_by_name("GET /users")
        self.assertEqual(len(spans), 1)
        self.assertEqual(spans[0]["name"], "GET /users")

    def test_export_returns_success(self):
        result = asyncio.run(self.adapter.export_spans([_wire_span()]))
        self.assertEqual(result.code, ExportResultCode.SUCCESS)

    def test_clear(self):
        asyncio.run(self.adapter.export_spans([_wire_span()]))
        self.adapter.clear()
        self.assertEqual(self.adapter.get_batches(), [])

    def test_stored_batch_is_a_copy(self):
        batch = [_wire_span()]
        asyncio.run(self.adapter.export_spans(batch))
        batch.append(_wire_span("late"))
        self.assertEqual(len(self.adapter.get_all_spans()), 1)


class TestZipkinHttpAdapter:
    """Tests for ZipkinHttpAdapter against a local collector."""

    def test_name_and_repr(self):
        adapter = ZipkinHttpAdapter("http://zipkin:9411/api/v2/spans")
        assert adapter.name == "http"
        assert repr(adapter) == "ZipkinHttpAdapter(url=http://zipkin:9411/api/v2/spans)"

    def test_posts_json_array(self, zipkin_server):
        adapter = ZipkinHttpAdapter(zipkin_server.url)
        spans = [_wire_span("a"), _wire_span("b", span_id="c" * 16)]

        result = asyncio.run(adapter.export_spans(spans))

        assert result.code == ExportResultCode.SUCCESS
        assert zipkin_server.requests == [spans]
        assert zipkin_server.request_headers[0]["Content-Type"] == "application/json"

    def test_sends_extra_headers(self, zipkin_server):
        adapter = ZipkinHttpAdapter(zipkin_server.url, headers={"X-Tenant": "blue"})

        asyncio.run(adapter.export_spans([_wire_span()]))

        assert zipkin_server.request_headers[0]["X-Tenant"] == "blue"

    def test_non_2xx_is_failure(self, failing_zipkin_server):
        adapter = ZipkinHttpAdapter(failing_zipkin_server.url)

        result = asyncio.run(adapter.export_spans([_wire_span()]))

        assert result.code == ExportResultCode.FAILED
        assert "503" in str(result.error)
        assert "collector unavailable" in str(result.error)

    def test_connection_error_is_failure(self, unused_url):
        adapter = ZipkinHttpAdapter(unused_url, timeout_seconds=2.0)

        result = asyncio.run(adapter.export_spans([_wire_span()]))

        assert result.code == ExportResultCode.FAILED
        assert result.error is not None

    def test_does_not_raise_on_timeout(self, mocker):
        import aiohttp

        mocker.patch.object(aiohttp.ClientSession, "post", side_effect=asyncio.TimeoutError())
        adapter = ZipkinHttpAdapter("http://zipkin:9411/api/v2/spans")

        result = asyncio.run(adapter.export_spans([_wire_span()]))

        assert result.code == ExportResultCode.FAILED
        assert isinstance(result.error, asyncio.TimeoutError)

    @pytest.mark.parametrize("status", [200, 202, 204])
    def test_any_2xx_is_success(self, status):
        from tests.utils import ZipkinTestServer

        with ZipkinTestServer(status=status) as server:
            result = asyncio.run(ZipkinHttpAdapter(server.url).export_spans([_wire_span()]))

        assert result.code == ExportResultCode.SUCCESS
