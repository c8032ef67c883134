"""Core types and data structures for the Zipkin exporter."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


DEFAULT_ZIPKIN_URL = "http://localhost:9411/api/v2/spans"


class ZipkinSpanKind(Enum):
    """
    Span kinds understood by the Zipkin v2 API.
    OpenTelemetry's INTERNAL kind has no counterpart and is omitted on the wire.
    """

    CLIENT = "CLIENT"
    SERVER = "SERVER"
    PRODUCER = "PRODUCER"
    CONSUMER = "CONSUMER"


@dataclass(frozen=True)
class ZipkinEndpoint:
    """Network context of the service that recorded the span."""

    service_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {"serviceName": self.service_name}


@dataclass(frozen=True)
class ZipkinAnnotation:
    """Timestamped event attached to a Zipkin span."""

    # Epoch microseconds
    timestamp: int
    value: str

    def to_dict(self) -> Dict[str, Any]:
        return {"timestamp": self.timestamp, "value": self.value}


@dataclass(frozen=True)
class ZipkinSpan:
    """
    Zipkin v2 span as accepted by POST /api/v2/spans.

    Timestamps and durations are in microseconds. Optional fields left as
    None (or empty annotations) are omitted from the JSON payload.
    """

    trace_id: str
    id: str
    name: str
    timestamp: int
    duration: int
    local_endpoint: ZipkinEndpoint
    parent_id: Optional[str] = None
    kind: Optional[ZipkinSpanKind] = None
    tags: Dict[str, str] = field(default_factory=dict)
    annotations: List[ZipkinAnnotation] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Render the span as a Zipkin v2 JSON object."""
        result: Dict[str, Any] = {
            "traceId": self.trace_id,
            "name": self.name,
            "id": self.id,
        }
        if self.parent_id is not None:
            result["parentId"] = self.parent_id
        if self.kind is not None:
            result["kind"] = self.kind.value
        result["timestamp"] = self.timestamp
        result["duration"] = self.duration
        result["localEndpoint"] = self.local_endpoint.to_dict()
        result["tags"] = dict(self.tags)
        if self.annotations:
            result["annotations"] = [annotation.to_dict() for annotation in self.annotations]
        return result
