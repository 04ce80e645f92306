"""Logging setup for TextBuddy sessions."""

from __future__ import annotations

import json
import logging
import sys
from typing import IO, Any

PLAIN_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Records logged with ``extra={"command": ...}`` carry that command kind
    as a ``command`` field.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        command = getattr(record, "command", None)
        if command:
            log_entry["command"] = command
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry)


def setup_logging(
    level: str = "WARNING",
    json_output: bool = False,
    stream: IO[str] | None = None,
) -> logging.Handler:
    """Point the ``textbuddy`` logger at a single stream handler.

    Logs default to stderr so they stay out of the feedback on stdout.
    Each call replaces the handler installed by the previous one.

    Args:
        level: Log level string (DEBUG, INFO, WARNING, ERROR). Unknown
            names fall back to WARNING.
        json_output: If True, use JsonFormatter.
        stream: Where records go. Defaults to sys.stderr.

    Returns:
        The installed handler.
    """
    logger = logging.getLogger("textbuddy")
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))

    for existing in list(logger.handlers):
        logger.removeHandler(existing)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))

    logger.addHandler(handler)
    return handler
