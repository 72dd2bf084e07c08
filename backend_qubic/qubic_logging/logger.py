"""
Structured JSON logging: timestamp, event_type, wallet_id, risk context.

structlog with ISO timestamps, log level, and consistent keys for aggregation.
All modules should use get_logger() and log a snake_case event_type with
keyword context (transaction_id, wallet_id, score, ...).

LOG_LEVEL and LOG_FORMAT are read through backend_qubic.config.env, so a
project .env is loaded before the first configuration. That module imports
nothing from backend_qubic, which keeps this package free of circular imports.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

from backend_qubic.config.env import get_log_format, get_log_level


def resolve_log_level(name: str | None = None) -> int:
    """Numeric stdlib level for name, or for LOG_LEVEL when name is None. Unknown names give INFO."""
    level = logging.getLevelName((name or get_log_level()).upper())
    return level if isinstance(level, int) else logging.INFO


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def configure_structlog(level: int | None = None, fmt: str | None = None) -> None:
    """
    Configure structlog: JSON or console renderer, timestamp, level, event_type.

    level and fmt default to LOG_LEVEL and LOG_FORMAT from the environment (.env included).
    """
    if level is None:
        level = resolve_log_level()
    if fmt is None:
        fmt = get_log_format()
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _normalize_event,
    ]
    if fmt == "json":
        shared_processors.append(structlog.processors.JSONRenderer())
    else:
        shared_processors.append(
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
        )
    structlog.configure(
        processors=shared_processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


# One-time configuration on first import
if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("transaction_ingested", transaction_id=7, score=60, level="MEDIUM")

    Output (JSON): {"event_type": "transaction_ingested", "transaction_id": 7, ...,
    "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_wallet(wallet_id: str) -> structlog.BoundLogger:
    """Return a logger with wallet_id bound to all subsequent log calls."""
    return get_logger("backend_qubic").bind(wallet_id=wallet_id)
