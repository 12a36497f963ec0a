"""Audit sink adapters."""

from clearvote.infrastructure.adapters.audit.json_lines_audit_event_sink import (
    JsonLinesAuditEventSink,
)

__all__ = ["JsonLinesAuditEventSink"]
