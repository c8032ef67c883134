"""Zipkin span exporter for the OpenTelemetry Python SDK."""

from .core import (
    DEFAULT_ZIPKIN_URL,
    STATUS_CODE_TAG_NAME,
    STATUS_DESCRIPTION_TAG_NAME,
    ExporterLogger,
    NoopLogger,
    StdlibLogger,
    ZipkinAnnotation,
    ZipkinEndpoint,
    ZipkinExporterConfig,
    ZipkinSpan,
    ZipkinSpanKind,
)
from .core.logger import LogLevel, configure_logger, get_log_level, set_log_level
from .core.tracing import ZipkinExporter, ZipkinSpanExporter, to_zipkin_span
from .core.tracing.adapters import (
    ExportResult,
    ExportResultCode,
    InMemorySpanAdapter,
    SpanExportAdapter,
    ZipkinHttpAdapter,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "ZipkinExporter",
    "ZipkinSpanExporter",
    "to_zipkin_span",
    # Config
    "ZipkinExporterConfig",
    "DEFAULT_ZIPKIN_URL",
    "STATUS_CODE_TAG_NAME",
    "STATUS_DESCRIPTION_TAG_NAME",
    # Types
    "ZipkinSpan",
    "ZipkinSpanKind",
    "ZipkinEndpoint",
    "ZipkinAnnotation",
    # Logger
    "ExporterLogger",
    "NoopLogger",
    "StdlibLogger",
    "LogLevel",
    "configure_logger",
    "set_log_level",
    "get_log_level",
    # Adapters
    "SpanExportAdapter",
    "ExportResult",
    "ExportResultCode",
    "InMemorySpanAdapter",
    "ZipkinHttpAdapter",
]
