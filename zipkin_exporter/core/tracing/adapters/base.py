"""Base types for span export adapters."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ExportResultCode(Enum):
    """Outcome of a single export."""

    SUCCESS = 0
    FAILED = 1


@dataclass(frozen=True)
class ExportResult:
    """Result reported back to the caller of an export."""

    code: ExportResultCode
    error: Exception | None = None

    @classmethod
    def success(cls) -> ExportResult:
        return cls(code=ExportResultCode.SUCCESS)

    @classmethod
    def failed(cls, error: Exception | str) -> ExportResult:
        if not isinstance(error, Exception):
            error = Exception(error)
        return cls(code=ExportResultCode.FAILED, error=error)

    @property
    def is_success(self) -> bool:
        return self.code is ExportResultCode.SUCCESS


class SpanExportAdapter(ABC):
    """
    Delivers a serialized span batch somewhere.

    Adapters report failures through the returned ExportResult and must not
    raise from export_spans.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Short identifier used in log messages."""

    @abstractmethod
    async def export_spans(self, spans: list[dict[str, Any]]) -> ExportResult:
        """Submit one batch of Zipkin JSON spans."""
