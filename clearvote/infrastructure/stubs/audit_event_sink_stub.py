"""In-memory audit event sink for testing.

Captures emitted events so tests can assert on the audit trail
independently of registry state.

Usage:
    sink = InMemoryAuditEventSink()
    ...
    assert sink.event_types() == ["voter-registered", "voter-approved"]
"""

from __future__ import annotations

from clearvote.application.ports.audit_event_sink import AuditEventSink
from clearvote.domain.events.audit_event import AuditEvent


class InMemoryAuditEventSink(AuditEventSink):
    """Append-only list of audit events."""

    def __init__(self) -> None:
        self._events: list[AuditEvent] = []
        self._fail_next_append: Exception | None = None

    def append(self, event: AuditEvent) -> None:
        if self._fail_next_append is not None:
            error, self._fail_next_append = self._fail_next_append, None
            raise error
        self._events.append(event)

    # ========================================
    # Test helper methods
    # ========================================

    @property
    def events(self) -> list[AuditEvent]:
        """Copy of all captured events, oldest first."""
        return list(self._events)

    def event_types(self) -> list[str]:
        """Event names in emission order."""
        return [event.event_type for event in self._events]

    def events_of_type(self, event_type: str) -> list[AuditEvent]:
        """Captured events with the given name."""
        return [event for event in self._events if event.event_type == event_type]

    def last(self) -> AuditEvent | None:
        """Most recent event, or None."""
        return self._events[-1] if self._events else None

    def clear(self) -> None:
        """Forget captured events (for test setup)."""
        self._events.clear()

    def fail_next_append(self, error: Exception) -> None:
        """Make the next append raise the given error (simulates a full disk)."""
        self._fail_next_append = error
