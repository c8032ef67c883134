"""Span transformation and delivery for the Zipkin exporter."""

from .exporter import ResultCallback, ZipkinExporter
from .otel_bridge import ZipkinSpanExporter
from .transform import (
    attribute_to_tag_value,
    format_span_id,
    format_trace_id,
    has_negative_duration,
    ns_to_us,
    otel_kind_to_zipkin,
    to_zipkin_span,
)

__all__ = [
    # Exporters
    "ZipkinExporter",
    "ZipkinSpanExporter",
    "ResultCallback",
    # Transform
    "to_zipkin_span",
    "format_trace_id",
    "format_span_id",
    "ns_to_us",
    "otel_kind_to_zipkin",
    "attribute_to_tag_value",
    "has_negative_duration",
]
