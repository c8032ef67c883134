"""Exporter configuration."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any

from .logger import ExporterLogger, NoopLogger
from .types import DEFAULT_ZIPKIN_URL

logger = logging.getLogger(__name__)

STATUS_CODE_TAG_NAME = "ot.status_code"
STATUS_DESCRIPTION_TAG_NAME = "ot.status_description"
DEFAULT_TIMEOUT_SECONDS = 10.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ZipkinExporterConfig:
    """Configuration captured by ZipkinExporter at construction."""

    service_name: str
    """Reported as localEndpoint.serviceName on every span. Required."""

    url: str = DEFAULT_ZIPKIN_URL
    """Zipkin collector endpoint receiving the JSON span batch."""

    status_code_tag_name: str = STATUS_CODE_TAG_NAME
    """Tag key carrying the span status code."""

    status_description_tag_name: str = STATUS_DESCRIPTION_TAG_NAME
    """Tag key carrying the span status description, when there is one."""

    force_flush: bool = True
    """Whether shutdown() performs a final flush."""

    logger: ExporterLogger = field(default_factory=NoopLogger)
    """Diagnostic sink with debug() and error()."""

    timeout_seconds: float | None = DEFAULT_TIMEOUT_SECONDS
    """Total request timeout applied by the HTTP adapter. None disables it."""

    headers: dict[str, str] = field(default_factory=dict)
    """Extra static headers sent with every request."""

    def __post_init__(self) -> None:
        if not self.service_name:
            raise ValueError("service_name is required")
        # Empty strings fall back to the defaults
        if not self.url:
            object.__setattr__(self, "url", DEFAULT_ZIPKIN_URL)
        if not self.status_code_tag_name:
            object.__setattr__(self, "status_code_tag_name", STATUS_CODE_TAG_NAME)
        if not self.status_description_tag_name:
            object.__setattr__(self, "status_description_tag_name", STATUS_DESCRIPTION_TAG_NAME)

    @classmethod
    def from_env(cls, **overrides: Any) -> ZipkinExporterConfig:
        """Create config from environment variables.

        Environment variables:
        - OTEL_SERVICE_NAME: service name
        - OTEL_EXPORTER_ZIPKIN_ENDPOINT: collector URL
        - OTEL_EXPORTER_ZIPKIN_TIMEOUT: request timeout in milliseconds
        - ZIPKIN_EXPORTER_FORCE_FLUSH: flush on shutdown (true/false)

        Keyword arguments take precedence over the environment.
        """
        values: dict[str, Any] = {}

        service_name = os.environ.get("OTEL_SERVICE_NAME")
        if service_name:
            values["service_name"] = service_name

        url = os.environ.get("OTEL_EXPORTER_ZIPKIN_ENDPOINT")
        if url:
            values["url"] = url

        timeout_ms = os.environ.get("OTEL_EXPORTER_ZIPKIN_TIMEOUT")
        if timeout_ms:
            try:
                values["timeout_seconds"] = int(timeout_ms) / 1000
            except ValueError:
                logger.warning("Ignoring invalid OTEL_EXPORTER_ZIPKIN_TIMEOUT: %s", timeout_ms)

        force_flush = os.environ.get("ZIPKIN_EXPORTER_FORCE_FLUSH")
        if force_flush:
            normalized = force_flush.strip().lower()
            if normalized in _TRUE_VALUES:
                values["force_flush"] = True
            elif normalized in _FALSE_VALUES:
                values["force_flush"] = False
            else:
                logger.warning("Ignoring invalid ZIPKIN_EXPORTER_FORCE_FLUSH: %s", force_flush)

        values.update(overrides)
        if not values.get("service_name"):
            raise ValueError("service_name is required (pass it or set OTEL_SERVICE_NAME)")
        return cls(**values)
