"""
Structured logging handle for handlers that emit diagnostic events.

acquire_logger() is a scoped acquisition: the yielded StructuredLogger is
flushed on every exit path, including when the body raises.
"""

import json
import logging
import os
from contextlib import contextmanager
from typing import Any, Iterator, Mapping

from common.exceptions import LoggerException


class StructuredLogger:
    """Logger wrapper accepting a field mapping plus a human-readable message."""

    def __init__(self, logger: logging.Logger):
        self._logger = logger

    @property
    def name(self) -> str:
        return self._logger.name

    def info(self, fields: Mapping[str, Any], message: str) -> None:
        self._log(logging.INFO, fields, message)

    def warning(self, fields: Mapping[str, Any], message: str) -> None:
        self._log(logging.WARNING, fields, message)

    def error(self, fields: Mapping[str, Any], message: str) -> None:
        self._log(logging.ERROR, fields, message)

    def _log(self, level: int, fields: Mapping[str, Any], message: str) -> None:
        fields = dict(fields)
        try:
            self._logger.log(
                level,
                "%s %s",
                message,
                json.dumps(fields, default=str),
                extra={"fields": fields},
            )
        except Exception as e:
            raise LoggerException(f"Failed to write log record: {e}") from e

    def flush(self) -> None:
        logger = self._logger
        while logger is not None:
            for handler in logger.handlers:
                handler.flush()
            logger = logger.parent if logger.propagate else None


@contextmanager
def acquire_logger(name: str) -> Iterator[StructuredLogger]:
    """
    Acquire a structured logger for the duration of a block.

    Raises:
        LoggerException: If the logger cannot be configured
    """
    try:
        logger = logging.getLogger(name)
        logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())
    except Exception as e:
        raise LoggerException(f"Unable to acquire logger {name}: {e}") from e

    structured = StructuredLogger(logger)
    try:
        yield structured
    finally:
        structured.flush()
