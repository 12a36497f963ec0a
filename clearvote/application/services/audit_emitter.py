"""Audit emitter service.

Wraps committed event payloads in AuditEvent envelopes stamped with the
current ledger height and appends them to the sink in order. The emitter
is called only after a unit of work has been committed, so a failed call
never reaches it. Sink failures are logged and skipped: the mutation is
already durable, and the remaining events of the unit are still appended.
"""

from __future__ import annotations

from collections.abc import Iterable

from clearvote.application.ports.audit_event_sink import AuditEventSink
from clearvote.application.ports.height_source import HeightSource
from clearvote.application.services.base import LoggingMixin
from clearvote.domain.events.audit_event import AuditEvent, AuditPayload


class AuditEmitter(LoggingMixin):
    """Publishes registry audit events to an append-only sink."""

    def __init__(self, sink: AuditEventSink, height_source: HeightSource) -> None:
        """Initialize the emitter.

        Args:
            sink: Destination for emitted events.
            height_source: Ledger height used to stamp each envelope.
        """
        self._sink = sink
        self._height_source = height_source
        self._init_logger(component="audit")

    def emit(self, payloads: Iterable[AuditPayload]) -> list[AuditEvent]:
        """Emit payloads in order.

        Args:
            payloads: Payloads of one committed unit of work.

        Returns:
            The envelopes the sink accepted.
        """
        height = self._height_source.current_height()
        emitted: list[AuditEvent] = []
        for payload in payloads:
            event = AuditEvent.from_payload(payload, height=height)
            log = self._log_operation("emit", event_type=event.event_type)
            try:
                self._sink.append(event)
            except Exception:
                log.exception("audit_emit_failed", height=height, **_log_fields(event))
                continue
            emitted.append(event)
            log.debug("audit_event_emitted", height=height, **_log_fields(event))
        return emitted


def _log_fields(event: AuditEvent) -> dict[str, object]:
    """Payload fields as log-friendly keyword names."""
    return {key.replace("-", "_"): value for key, value in event.payload.items()}
