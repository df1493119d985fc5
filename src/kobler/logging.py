"""
Structured logging for the Kobler adapter.

Log lines go to stderr so stdout stays free for adapter output.
Per-call fields (bidder code, auction id) are bound through LogContext,
which leaves any context the host has bound untouched.
"""

import logging
import os
import sys
from typing import Any

import structlog


def configure_logging(
    level: str = "INFO",
    format: str = "json",
    show_timestamps: bool = True,
) -> None:
    """
    Configure structured logging.

    Args:
        level: Log level, overridden by $LOG_LEVEL
        format: 'json' or 'console', overridden by $LOG_FORMAT
        show_timestamps: Whether to include ISO timestamps
    """
    level = os.getenv("LOG_LEVEL", level).upper()
    format = os.getenv("LOG_FORMAT", format).lower()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level, logging.INFO),
        force=True,
    )

    processors: list[structlog.typing.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if show_timestamps:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if format == "console":
        processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    """Get a structured logger by name."""
    return structlog.get_logger(name)


def adapter_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for request building and response interpretation."""
    return get_logger("kobler.adapter")


def config_logger() -> structlog.stdlib.BoundLogger:
    """Get logger for configuration loading."""
    return get_logger("kobler.config")


class LogContext:
    """
    Bind fields to every log line emitted inside the block.

    On exit only the keys bound here are restored to their previous
    state; context bound by the caller survives.
    """

    def __init__(self, **context: Any):
        self.context = context
        self._bound = None

    def __enter__(self) -> "LogContext":
        self._bound = structlog.contextvars.bound_contextvars(**self.context)
        self._bound.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._bound.__exit__(exc_type, exc_val, exc_tb)
        self._bound = None


# Initialize with defaults on module load
configure_logging()
