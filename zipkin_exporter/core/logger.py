"""Logging setup and the logger capability handed to the exporter."""

from __future__ import annotations

import logging
from typing import Any, Literal, Protocol, runtime_checkable

LogLevel = Literal["silent", "error", "warn", "info", "debug"]

PACKAGE_LOGGER_NAME = "zipkin_exporter"

_LEVELS: dict[str, int] = {
    "silent": logging.CRITICAL + 10,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}

_current_level: LogLevel = "info"


@runtime_checkable
class ExporterLogger(Protocol):
    """Diagnostic sink used by the exporter. Implementations must not raise."""

    def debug(self, msg: str, *args: Any) -> None: ...

    def error(self, msg: str, *args: Any) -> None: ...


class NoopLogger:
    """Logger that discards everything. Used when no logger is configured."""

    def debug(self, msg: str, *args: Any) -> None:
        pass

    def error(self, msg: str, *args: Any) -> None:
        pass

    def __repr__(self) -> str:
        return "NoopLogger()"


class StdlibLogger:
    """Routes exporter diagnostics to a standard library logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or logging.getLogger(PACKAGE_LOGGER_NAME)

    def __repr__(self) -> str:
        return f"StdlibLogger(name={self._logger.name})"

    def debug(self, msg: str, *args: Any) -> None:
        self._logger.debug(msg, *args)

    def error(self, msg: str, *args: Any) -> None:
        self._logger.error(msg, *args)


def configure_logger(log_level: LogLevel = "info", prefix: str = "ZipkinExporter") -> logging.Logger:
    """
    Configure the package logger hierarchy.

    Installs a single stream handler on the package logger (idempotent),
    applies the prefix to it and sets the requested level.

    Args:
        log_level: One of silent, error, warn, info, debug
        prefix: Tag prepended to every record emitted by the package

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    formatter = logging.Formatter(f"[{prefix}] %(levelname)s %(name)s: %(message)s")

    handler = next(
        (h for h in logger.handlers if getattr(h, "_zipkin_exporter_handler", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._zipkin_exporter_handler = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
        logger.propagate = False
    handler.setFormatter(formatter)

    set_log_level(log_level)
    return logger


def set_log_level(log_level: LogLevel) -> None:
    """Change the level of the package logger."""
    global _current_level

    if log_level not in _LEVELS:
        raise ValueError(f"Unknown log level: {log_level!r}")

    _current_level = log_level
    logging.getLogger(PACKAGE_LOGGER_NAME).setLevel(_LEVELS[log_level])


def get_log_level() -> LogLevel:
    """Return the level last applied with set_log_level."""
    return _current_level
