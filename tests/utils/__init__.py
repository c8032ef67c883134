"""Test utilities for the Zipkin exporter."""

from .test_helpers import DEFAULT_SPAN_ID, DEFAULT_TRACE_ID, create_test_span, wait_for
from .zipkin_test_server import ZipkinTestServer

__all__ = [
    "create_test_span",
    "wait_for",
    "DEFAULT_TRACE_ID",
    "DEFAULT_SPAN_ID",
    "ZipkinTestServer",
]
