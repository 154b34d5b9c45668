"""Logging helpers for tagprint.

The library only emits records on loggers under ``tagprint``; handlers are
installed by the application, either directly via setup_logging() or from a
config file's ``logging`` section via configure_logging().

Output modes:
- Human mode: [LEVEL] message
- JSON mode: {"level":"...","ts":"...","msg":"...", ...structured fields}
"""

import json
import logging
import sys
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING, Any, TextIO

if TYPE_CHECKING:
    from tagprint.config import LoggingConfig


class LogMode(Enum):
    """Logging output mode."""

    HUMAN = "human"
    JSON = "json"


class HumanFormatter(logging.Formatter):
    """Format: [LEVEL] message"""

    def format(self, record: logging.LogRecord) -> str:
        return f"[{record.levelname}] {record.getMessage()}"


class JSONFormatter(logging.Formatter):
    """Formatter for JSON lines output (machine-readable).

    Fields passed to structured() are merged into the top-level object.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as JSON."""
        log_entry: dict[str, Any] = {
            "level": record.levelname,
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "msg": record.getMessage(),
        }

        if hasattr(record, "extra_data"):
            log_entry.update(record.extra_data)

        return json.dumps(log_entry)


def structured(logger: logging.Logger, level: int, msg: str, **data: Any) -> None:
    """Log a message carrying additional structured fields.

    Args:
        logger: Logger to emit on
        level: Log level
        msg: Log message
        **data: Fields merged into JSON output
    """
    logger.log(level, msg, extra={"extra_data": data})


def setup_logging(
    mode: LogMode = LogMode.HUMAN,
    level: int = logging.INFO,
    stream: TextIO | None = None,
) -> None:
    """Configure the ``tagprint`` logger with the specified mode.

    Args:
        mode: Output mode (human, json)
        level: Minimum log level
        stream: Output stream (default: stderr)
    """
    logger = logging.getLogger("tagprint")
    logger.setLevel(level)

    logger.handlers.clear()

    if mode == LogMode.JSON:
        formatter: logging.Formatter = JSONFormatter()
    else:
        formatter = HumanFormatter()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def configure_logging(config: "LoggingConfig", stream: TextIO | None = None) -> None:
    """Configure logging from the ``logging`` section of a config file.

    Args:
        config: Validated logging configuration
        stream: Output stream (default: stderr)
    """
    setup_logging(mode=LogMode(config.mode), level=config.level_number, stream=stream)
