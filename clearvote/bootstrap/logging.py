"""Logging bootstrap: apply a RegistryConfig to structlog."""

from __future__ import annotations

from clearvote.config.registry_config import RegistryConfig
from clearvote.infrastructure.observability import configure_structlog


def configure_logging(config: RegistryConfig) -> None:
    """Configure structlog for the config's environment."""
    configure_structlog(environment=config.environment)


__all__ = ["configure_logging"]
