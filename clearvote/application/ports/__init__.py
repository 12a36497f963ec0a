"""Ports (abstract interfaces) the registry depends on."""

from clearvote.application.ports.audit_event_sink import AuditEventSink
from clearvote.application.ports.height_source import HeightSource
from clearvote.application.ports.registry_state_repository import (
    RegistryStateRepository,
)

__all__ = ["AuditEventSink", "HeightSource", "RegistryStateRepository"]
