"""Logging setup for the command line.

Library modules only create ``logging.getLogger(__name__)`` loggers; this
module attaches a single stderr handler to the ``projectkit`` logger.
"""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, TextIO

import click

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "error": logging.ERROR,
}
LOG_FORMATS = ("text", "json")

_LEVEL_COLORS = {
    logging.DEBUG: "blue",
    logging.INFO: "green",
    logging.WARNING: "yellow",
    logging.ERROR: "red",
    logging.CRITICAL: "red",
}


class ColorFormatter(logging.Formatter):
    """``LEVEL message`` lines, with the level coloured when ``color`` is set."""

    def __init__(self, color: bool) -> None:
        super().__init__()
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        level = f"{record.levelname:<7}"
        if self.color:
            level = click.style(level, fg=_LEVEL_COLORS.get(record.levelno), bold=True)
        message = f"{level} {record.getMessage()}"
        if record.exc_info:
            message = f"{message}\n{self.formatException(record.exc_info)}"
        return message


class JsonFormatter(logging.Formatter):
    """One JSON object per record."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["error"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(
    level: str = "info",
    log_format: str = "text",
    quiet: bool = False,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Route ``projectkit`` log records to ``stream`` (stderr by default).

    ``quiet`` overrides ``level`` and lets only errors through.
    """
    target = stream if stream is not None else sys.stderr

    handler = logging.StreamHandler(target)
    if log_format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(ColorFormatter(color=target.isatty()))

    logger = logging.getLogger("projectkit")
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(logging.ERROR if quiet else LOG_LEVELS[level])
    return logger
