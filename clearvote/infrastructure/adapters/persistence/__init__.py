"""Persistence adapters."""

from clearvote.infrastructure.adapters.persistence.sql_registry_state_repository import (
    SqlRegistryStateRepository,
)

__all__ = ["SqlRegistryStateRepository"]
