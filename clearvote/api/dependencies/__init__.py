"""API dependencies."""

from clearvote.api.dependencies.registry import (
    CALLER_HEADER,
    get_caller_identity,
    get_registry_service,
)

__all__ = ["CALLER_HEADER", "get_caller_identity", "get_registry_service"]
