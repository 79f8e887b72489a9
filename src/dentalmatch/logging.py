"""Structured logging setup for the matching pipeline and CLI."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

LOG_FORMATS = ("json", "console")


def _stderr_logger_factory(*args: Any) -> structlog.PrintLogger:
    # Resolved per logger so a swapped sys.stderr (test runners, CliRunner) is honoured.
    return structlog.PrintLogger(sys.stderr)


def configure_logging(level: str = "INFO", *, log_format: str = "json") -> None:
    """Send structlog events to stderr, keeping stdout for command output."""
    log_level = getattr(logging, level.upper(), logging.INFO)
    if log_format not in LOG_FORMATS:
        raise ValueError(f"Unsupported log format: {log_format!r}")

    logging.basicConfig(level=log_level, format="%(message)s", stream=sys.stderr)

    processors: list[Any] = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
    ]
    if log_format == "console":
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    else:
        processors.extend(
            [
                structlog.processors.dict_tracebacks,
                structlog.processors.JSONRenderer(ensure_ascii=False),
            ]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=_stderr_logger_factory,
        cache_logger_on_first_use=True,
    )
