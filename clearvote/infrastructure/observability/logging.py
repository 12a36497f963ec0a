"""structlog setup for the registry.

Production writes one JSON object per line, anything else gets the coloured
console renderer. LOG_LEVEL picks the threshold (default INFO).

A production entry for a successful registration looks like:
    {"event": "voter_registered", "level": "info",
     "timestamp": "2026-01-01T00:00:00Z", "app": "clearvote",
     "service": "VoterRegistryService", "component": "registry",
     "operation": "register", "caller": "ST2...", "voter_id": 7,
     "correlation_id": "..."}
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from clearvote.infrastructure.observability.correlation import correlation_id_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
APP_NAME = "clearvote"


def _resolve_level(level_name: str | None) -> int:
    name = (level_name or os.getenv(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def add_app_name(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def configure_structlog(
    environment: str = "production", log_level: str | None = None
) -> None:
    """Configure structlog once at process start.

    Args:
        environment: "production" selects JSON output.
        log_level: Explicit level name; falls back to LOG_LEVEL, then INFO.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, add_app_name),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
    ]
    if environment == "production":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_resolve_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "registry"
) -> structlog.BoundLogger:
    """Logger pre-bound with the service name and its component."""
    return structlog.get_logger().bind(service=service_name, component=component)
