"""Application services for the voter registry."""

from clearvote.application.services.audit_emitter import AuditEmitter
from clearvote.application.services.base import LoggingMixin
from clearvote.application.services.voter_registry_service import (
    DEFAULT_MAX_BATCH_SIZE,
    VoterRegistryService,
)

__all__ = [
    "DEFAULT_MAX_BATCH_SIZE",
    "AuditEmitter",
    "LoggingMixin",
    "VoterRegistryService",
]
