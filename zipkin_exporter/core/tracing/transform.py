"""Conversion of OpenTelemetry spans to Zipkin v2 spans.

Everything here is pure: the same span and tag names always produce the same
ZipkinSpan, and nothing performs I/O.

Span events become annotations whose value is the event name. Zipkin
annotations carry a single string, so event attributes are not exported.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from opentelemetry.sdk.trace import ReadableSpan
from opentelemetry.trace import SpanKind as OTelSpanKind
from opentelemetry.trace.status import StatusCode as OTelStatusCode

from ..config import STATUS_CODE_TAG_NAME, STATUS_DESCRIPTION_TAG_NAME
from ..types import ZipkinAnnotation, ZipkinEndpoint, ZipkinSpan, ZipkinSpanKind

_KIND_MAP: dict[OTelSpanKind, ZipkinSpanKind] = {
    OTelSpanKind.SERVER: ZipkinSpanKind.SERVER,
    OTelSpanKind.CLIENT: ZipkinSpanKind.CLIENT,
    OTelSpanKind.PRODUCER: ZipkinSpanKind.PRODUCER,
    OTelSpanKind.CONSUMER: ZipkinSpanKind.CONSUMER,
}


def format_trace_id(trace_id: int) -> str:
    """Format trace ID as 32-character hex string."""
    return format(trace_id, "032x")


def format_span_id(span_id: int) -> str:
    """Format span ID as 16-character hex string."""
    return format(span_id, "016x")


def ns_to_us(ns: int) -> int:
    """Convert nanoseconds to microseconds, rounding half up."""
    return (ns + 500) // 1000


def otel_kind_to_zipkin(kind: Any) -> ZipkinSpanKind | None:
    """Map an OpenTelemetry span kind to Zipkin. INTERNAL and unknown kinds map to None."""
    if isinstance(kind, OTelSpanKind):
        return _KIND_MAP.get(kind)
    return None


def attribute_to_tag_value(value: Any) -> str:
    """Flatten an attribute value into the string form Zipkin tags require."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Sequence):
        return json.dumps(list(value), separators=(",", ":"))
    return str(value)


def has_negative_duration(span: ReadableSpan) -> bool:
    """True if the span ended before it started."""
    if span.start_time is None or span.end_time is None:
        return False
    return span.end_time < span.start_time


def _status_tags(
    span: ReadableSpan,
    status_code_tag_name: str,
    status_description_tag_name: str,
) -> dict[str, str]:
    status = span.status
    code = status.status_code if status is not None else OTelStatusCode.UNSET
    tags = {status_code_tag_name: code.name}
    description = status.description if status is not None else None
    if description:
        tags[status_description_tag_name] = description
    return tags


def to_zipkin_span(
    span: ReadableSpan,
    service_name: str,
    status_code_tag_name: str = STATUS_CODE_TAG_NAME,
    status_description_tag_name: str = STATUS_DESCRIPTION_TAG_NAME,
) -> ZipkinSpan:
    """
    Convert an OpenTelemetry ReadableSpan to a Zipkin span.

    Args:
        span: Finished span from the OpenTelemetry SDK
        service_name: Reported as localEndpoint.serviceName
        status_code_tag_name: Tag key for the status code (always emitted)
        status_description_tag_name: Tag key for the status description
            (emitted only when the description is non-empty)

    Returns:
        ZipkinSpan ready to be serialized

    Raises:
        ValueError: If the span lacks its context or start/end timestamps.
    """
    context = span.context
    if context is None:
        raise ValueError(f"Span {span.name!r} has no span context")
    if span.start_time is None or span.end_time is None:
        raise ValueError(f"Span {span.name!r} has not ended")

    tags = {key: attribute_to_tag_value(value) for key, value in (span.attributes or {}).items()}
    tags.update(_status_tags(span, status_code_tag_name, status_description_tag_name))

    annotations = [
        ZipkinAnnotation(timestamp=ns_to_us(event.timestamp), value=event.name)
        for event in span.events
    ]

    parent = span.parent

    return ZipkinSpan(
        trace_id=format_trace_id(context.trace_id),
        id=format_span_id(context.span_id),
        parent_id=format_span_id(parent.span_id) if parent is not None else None,
        name=span.name,
        timestamp=ns_to_us(span.start_time),
        duration=ns_to_us(max(span.end_time - span.start_time, 0)),
        local_endpoint=ZipkinEndpoint(service_name=service_name),
        kind=otel_kind_to_zipkin(span.kind),
        tags=tags,
        annotations=annotations,
    )
