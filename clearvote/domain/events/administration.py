"""Administrative event payloads.

Emitted by admin-only operations, which keep working while the registry
is paused:
- admin-transferred
- pause-toggled
- official-added / official-removed
- next-id-reset
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clearvote.domain.events.audit_event import canonical_json

ADMIN_TRANSFERRED_EVENT_TYPE: str = "admin-transferred"
PAUSE_TOGGLED_EVENT_TYPE: str = "pause-toggled"
OFFICIAL_ADDED_EVENT_TYPE: str = "official-added"
OFFICIAL_REMOVED_EVENT_TYPE: str = "official-removed"
NEXT_ID_RESET_EVENT_TYPE: str = "next-id-reset"


@dataclass(frozen=True, eq=True)
class AdminTransferredPayload:
    """Payload for admin transfer events.

    Attributes:
        old_admin: Admin before the transfer (the caller).
        new_admin: Admin after the transfer.
    """

    EVENT_TYPE = ADMIN_TRANSFERRED_EVENT_TYPE

    old_admin: str
    new_admin: str

    def __post_init__(self) -> None:
        if not self.new_admin.strip():
            raise ValueError("AdminTransferredPayload requires a non-empty new_admin")

    def to_dict(self) -> dict[str, Any]:
        return {"old-admin": self.old_admin, "new-admin": self.new_admin}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class PauseToggledPayload:
    """Payload emitted whenever the admin sets the pause flag."""

    EVENT_TYPE = PAUSE_TOGGLED_EVENT_TYPE

    paused: bool
    admin: str

    def to_dict(self) -> dict[str, Any]:
        return {"paused": self.paused, "admin": self.admin}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class OfficialAddedPayload:
    """Payload for granting official authority."""

    EVENT_TYPE = OFFICIAL_ADDED_EVENT_TYPE

    official: str
    admin: str

    def to_dict(self) -> dict[str, Any]:
        return {"official": self.official, "admin": self.admin}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class OfficialRemovedPayload:
    """Payload for withdrawing official authority."""

    EVENT_TYPE = OFFICIAL_REMOVED_EVENT_TYPE

    official: str
    admin: str

    def to_dict(self) -> dict[str, Any]:
        return {"official": self.official, "admin": self.admin}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class NextIdResetPayload:
    """Payload for the forward-only id counter reset.

    Attributes:
        old_id: Counter value before the reset.
        new_id: Counter value after the reset (strictly greater).
        admin: Caller that performed the reset.
    """

    EVENT_TYPE = NEXT_ID_RESET_EVENT_TYPE

    old_id: int
    new_id: int
    admin: str

    def __post_init__(self) -> None:
        if self.new_id <= self.old_id:
            raise ValueError(
                f"NextIdResetPayload new_id ({self.new_id}) must exceed old_id ({self.old_id})"
            )

    def to_dict(self) -> dict[str, Any]:
        return {"old-id": self.old_id, "new-id": self.new_id, "admin": self.admin}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})
