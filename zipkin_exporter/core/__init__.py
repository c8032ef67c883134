"""Core module for the Zipkin exporter."""

from .config import (
    DEFAULT_TIMEOUT_SECONDS,
    STATUS_CODE_TAG_NAME,
    STATUS_DESCRIPTION_TAG_NAME,
    ZipkinExporterConfig,
)
from .logger import ExporterLogger, NoopLogger, StdlibLogger
from .types import (
    DEFAULT_ZIPKIN_URL,
    ZipkinAnnotation,
    ZipkinEndpoint,
    ZipkinSpan,
    ZipkinSpanKind,
)

__all__ = [
    # Config
    "ZipkinExporterConfig",
    "DEFAULT_TIMEOUT_SECONDS",
    "STATUS_CODE_TAG_NAME",
    "STATUS_DESCRIPTION_TAG_NAME",
    # Logger
    "ExporterLogger",
    "NoopLogger",
    "StdlibLogger",
    # Types
    "DEFAULT_ZIPKIN_URL",
    "ZipkinAnnotation",
    "ZipkinEndpoint",
    "ZipkinSpan",
    "ZipkinSpanKind",
]
