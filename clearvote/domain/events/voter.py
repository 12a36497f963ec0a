"""Voter lifecycle event payloads.

One payload per voter-facing mutation:
- voter-registered: a new PENDING record was created
- voter-approved: an official or the admin approved a PENDING record
- voter-revoked: an official or the admin revoked a record
- voter-self-revoked: a voter revoked their own record
- metadata-updated: a voter replaced their metadata hash

Field names are hyphenated to match the on-ledger print events.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from clearvote.domain.events.audit_event import canonical_json
from clearvote.domain.models.metadata_hash import MetadataHash

VOTER_REGISTERED_EVENT_TYPE: str = "voter-registered"
VOTER_APPROVED_EVENT_TYPE: str = "voter-approved"
VOTER_REVOKED_EVENT_TYPE: str = "voter-revoked"
VOTER_SELF_REVOKED_EVENT_TYPE: str = "voter-self-revoked"
METADATA_UPDATED_EVENT_TYPE: str = "metadata-updated"


@dataclass(frozen=True, eq=True)
class VoterRegisteredPayload:
    """Payload for voter registration events.

    Attributes:
        voter: Identity that registered.
        voter_id: Id allocated to the new record.
        metadata_hash: Digest supplied at registration.
    """

    EVENT_TYPE = VOTER_REGISTERED_EVENT_TYPE

    voter: str
    voter_id: int
    metadata_hash: MetadataHash

    def to_dict(self) -> dict[str, Any]:
        return {
            "voter": self.voter,
            "id": self.voter_id,
            "metadata-hash": self.metadata_hash.hex(),
        }

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class VoterApprovedPayload:
    """Payload for approval events.

    Attributes:
        voter: Identity whose record was approved.
        voter_id: Registration id of that record.
        official: Caller that approved (an official or the admin).
    """

    EVENT_TYPE = VOTER_APPROVED_EVENT_TYPE

    voter: str
    voter_id: int
    official: str

    def to_dict(self) -> dict[str, Any]:
        return {"voter": self.voter, "id": self.voter_id, "official": self.official}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class VoterRevokedPayload:
    """Payload for revocation by an official or the admin."""

    EVENT_TYPE = VOTER_REVOKED_EVENT_TYPE

    voter: str
    voter_id: int
    official: str

    def to_dict(self) -> dict[str, Any]:
        return {"voter": self.voter, "id": self.voter_id, "official": self.official}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class VoterSelfRevokedPayload:
    """Payload for a voter revoking their own record.

    Emitted on every successful self-revoke, including the idempotent
    re-revoke of an already REVOKED record.
    """

    EVENT_TYPE = VOTER_SELF_REVOKED_EVENT_TYPE

    voter: str
    voter_id: int

    def to_dict(self) -> dict[str, Any]:
        return {"voter": self.voter, "id": self.voter_id}

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})


@dataclass(frozen=True, eq=True)
class MetadataUpdatedPayload:
    """Payload for metadata hash replacement."""

    EVENT_TYPE = METADATA_UPDATED_EVENT_TYPE

    voter: str
    voter_id: int
    metadata_hash: MetadataHash

    def to_dict(self) -> dict[str, Any]:
        return {
            "voter": self.voter,
            "id": self.voter_id,
            "metadata-hash": self.metadata_hash.hex(),
        }

    def signable_content(self) -> bytes:
        return canonical_json({"event": self.EVENT_TYPE, **self.to_dict()})
