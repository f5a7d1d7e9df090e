# SPDX-License-Identifier: MIT
# Copyright (c) 2026 identity-backends contributors

"""Structured logging for identity providers.

Providers log through the small :class:`Logger` interface so a deployment can
choose JSON lines on stdout or an in-memory sink for tests:

    >>> from identity_backends.log import create_logger
    >>> logger = create_logger(logger_type="stdout", level="DEBUG", name="authn")
    >>> logger.info("Provider initialized", provider="rest", base_url="https://idp")
"""

import json
import logging
import os
import sys
from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

DEFAULT_LOGGER_NAME = "identity_backends"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class Logger(ABC):
    """Abstract structured logger.

    Keyword arguments passed to any method are emitted as structured fields
    alongside the message.
    """

    @abstractmethod
    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        pass

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log("DEBUG", message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log("INFO", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log("WARNING", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._log("ERROR", message, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        """Log an error with the active exception attached."""
        kwargs.setdefault("exc_info", True)
        self._log("ERROR", message, **kwargs)


class StdoutLogger(Logger):
    """Writes one JSON object per line to stdout.

    Records are mirrored to the stdlib logger of the same name so handlers
    and pytest's ``caplog`` see them too.
    """

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        if self.level not in _LEVELS:
            raise ValueError(f"Invalid log level: {level}. Must be one of {list(_LEVELS)}")
        self.name = name or DEFAULT_LOGGER_NAME
        self._stdlib_logger = logging.getLogger(self.name)

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        if _LEVELS[level] < _LEVELS[self.level]:
            return

        exc_info = kwargs.pop("exc_info", None)
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": level,
            "logger": self.name,
            "message": message,
        }
        if kwargs:
            entry["extra"] = kwargs

        try:
            print(json.dumps(entry, default=str), file=sys.stdout, flush=True)
        except Exception as e:
            # Plain text when a field cannot be serialized
            print(f"{level}: {message} (JSON serialization failed: {e})", file=sys.stderr, flush=True)

        extra = {"extra": kwargs} if kwargs else None
        self._stdlib_logger.log(_LEVELS[level], message, exc_info=exc_info, extra=extra)


class SilentLogger(Logger):
    """Keeps log entries in memory; every level is recorded."""

    def __init__(self, level: str = "INFO", name: str | None = None):
        self.level = level.upper()
        self.name = name or DEFAULT_LOGGER_NAME
        self.logs: list[dict[str, Any]] = []

    def _log(self, level: str, message: str, **kwargs: Any) -> None:
        entry: dict[str, Any] = {"level": level, "message": message}
        if kwargs:
            entry["extra"] = kwargs
        self.logs.append(entry)

    def get_logs(self, level: str | None = None) -> list[dict[str, Any]]:
        if level is None:
            return list(self.logs)
        return [entry for entry in self.logs if entry["level"] == level]

    def has_log(self, message: str, level: str | None = None) -> bool:
        """Check whether any recorded message contains ``message``."""
        return any(message in entry["message"] for entry in self.get_logs(level))

    def clear_logs(self) -> None:
        self.logs.clear()


def _default(value: str | None, env_var: str, fallback: str) -> str:
    return value or os.getenv(env_var) or fallback


def create_logger(
    logger_type: str | None = None,
    level: str | None = None,
    name: str | None = None,
) -> Logger:
    """Create a logger from explicit values, then environment, then defaults.

    Args:
        logger_type: "stdout" or "silent" (env IDENTITY_LOG_TYPE, default "stdout")
        level: DEBUG, INFO, WARNING or ERROR (env IDENTITY_LOG_LEVEL, default "INFO")
        name: Logger name (env IDENTITY_LOG_NAME, default "identity_backends")

    Raises:
        ValueError: If logger_type or level is not recognized
    """
    logger_type = _default(logger_type, "IDENTITY_LOG_TYPE", "stdout").lower()
    level = _default(level, "IDENTITY_LOG_LEVEL", "INFO").upper()
    name = _default(name, "IDENTITY_LOG_NAME", DEFAULT_LOGGER_NAME)

    if logger_type == "stdout":
        return StdoutLogger(level=level, name=name)
    if logger_type == "silent":
        return SilentLogger(level=level, name=name)
    raise ValueError(f"Unknown logger_type: {logger_type}. Must be one of: stdout, silent")
