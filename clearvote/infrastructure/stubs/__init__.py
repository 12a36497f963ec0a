"""In-memory stubs for the registry ports."""

from clearvote.infrastructure.stubs.audit_event_sink_stub import InMemoryAuditEventSink
from clearvote.infrastructure.stubs.height_source_stub import ManualHeightSource
from clearvote.infrastructure.stubs.registry_state_repository_stub import (
    InMemoryRegistryStateRepository,
)

__all__ = [
    "InMemoryAuditEventSink",
    "InMemoryRegistryStateRepository",
    "ManualHeightSource",
]
