"""Audit event envelope.

Every successful registry mutation produces one AuditEvent. The envelope's
wire content is the event name plus the payload fields:

    {"event": "voter-approved", "voter": "ST2...", "id": 1, "official": "ST1..."}

Downstream indexers depend on these field names and value shapes, so the
payload classes own their to_dict() output and the envelope never renames
or reorders it.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Protocol


class AuditPayload(Protocol):
    """Structural type shared by all registry event payloads."""

    EVENT_TYPE: str

    def to_dict(self) -> dict[str, Any]: ...


def canonical_json(content: dict[str, Any]) -> bytes:
    """Serialize content as sorted-key compact JSON bytes."""
    return json.dumps(content, sort_keys=True, separators=(",", ":")).encode("utf-8")


@dataclass(frozen=True)
class AuditEvent:
    """Emitted audit record - immutable.

    Attributes:
        event_type: Event name (e.g. "voter-registered").
        payload: Payload field map, already in wire shape.
        height: Ledger height observed when the event was emitted.
    """

    event_type: str
    payload: dict[str, Any]
    height: int

    @classmethod
    def from_payload(cls, payload: AuditPayload, height: int) -> AuditEvent:
        """Wrap a payload dataclass in an envelope."""
        return cls(event_type=payload.EVENT_TYPE, payload=payload.to_dict(), height=height)

    def to_dict(self) -> dict[str, Any]:
        """Wire content: event name followed by the payload fields."""
        return {"event": self.event_type, **self.payload}

    def to_record(self) -> dict[str, Any]:
        """Wire content plus emission metadata, for persisting sinks."""
        return {"height": self.height, **self.to_dict()}

    def signable_content(self) -> bytes:
        """Canonical bytes of the wire content."""
        return canonical_json(self.to_dict())
