"""Port definition for the audit event sink.

The registry PUBLISHES one event per successful mutation. Indexers and
observers consume the sink independently; the registry neither waits for
nor expects an acknowledgment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from clearvote.domain.events.audit_event import AuditEvent


class AuditEventSink(ABC):
    """Append-only output channel for audit events."""

    @abstractmethod
    def append(self, event: AuditEvent) -> None:
        """Append one event. Fire-and-forget from the registry's perspective.

        Args:
            event: The audit event to append.
        """
        ...
