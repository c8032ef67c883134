"""Pytest configuration and fixtures for Zipkin exporter tests."""

from __future__ import annotations

from collections.abc import Generator
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from tests.utils import ZipkinTestServer
    from zipkin_exporter.core.tracing.adapters import InMemorySpanAdapter


@pytest.fixture
def in_memory_adapter() -> InMemorySpanAdapter:
    """Create a fresh InMemorySpanAdapter for testing."""
    from zipkin_exporter.core.tracing.adapters import InMemorySpanAdapter

    return InMemorySpanAdapter()


@pytest.fixture
def zipkin_server() -> Generator[ZipkinTestServer, None, None]:
    """Run a fake Zipkin collector answering 202."""
    from tests.utils import ZipkinTestServer

    with ZipkinTestServer() as server:
        yield server


@pytest.fixture
def failing_zipkin_server() -> Generator[ZipkinTestServer, None, None]:
    """Run a fake Zipkin collector answering 503."""
    from tests.utils import ZipkinTestServer

    with ZipkinTestServer(status=503) as server:
        yield server


@pytest.fixture
def unused_url() -> str:
    """URL of a port nothing listens on."""
    from tests.utils.zipkin_test_server import find_free_port

    return f"http://127.0.0.1:{find_free_port()}/api/v2/spans"
