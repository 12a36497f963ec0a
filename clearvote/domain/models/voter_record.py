"""Voter record model.

A VoterRecord is created once at registration and never deleted. Removal
is represented by the REVOKED terminal status so the audit history stays
intact. Records are immutable; every transition produces a new record.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any

from clearvote.domain.models.identity import Identity
from clearvote.domain.models.metadata_hash import MetadataHash


class VoterStatus(Enum):
    """Lifecycle status of a voter record.

    Values are the numeric codes used by the deployed contract.
    """

    PENDING = 0
    APPROVED = 1
    REVOKED = 2

    @property
    def label(self) -> str:
        """Lowercase name used in logs, errors and API responses."""
        return self.name.lower()

    @classmethod
    def from_label(cls, label: str) -> VoterStatus:
        """Look up a status by its label (case-insensitive).

        Raises:
            ValueError: If the label is unknown.
        """
        try:
            return cls[label.upper()]
        except KeyError:
            raise ValueError(f"Unknown voter status: {label!r}") from None


@dataclass(frozen=True, eq=True)
class VoterRecord:
    """Registry entry for one voter - immutable.

    Attributes:
        voter: Identity that owns the record (primary key).
        voter_id: Registration id, assigned once and never changed.
        eligibility: Cached flag, always equal to status == APPROVED.
        registration_height: Ledger height observed at registration.
        status: Current lifecycle status.
        metadata_hash: 32-byte digest supplied by the voter.
    """

    voter: Identity
    voter_id: int
    eligibility: bool
    registration_height: int
    status: VoterStatus
    metadata_hash: MetadataHash

    @classmethod
    def create(
        cls,
        voter: Identity,
        voter_id: int,
        registration_height: int,
        metadata_hash: MetadataHash,
    ) -> VoterRecord:
        """Create a freshly registered (PENDING) record."""
        return cls(
            voter=voter,
            voter_id=voter_id,
            eligibility=False,
            registration_height=registration_height,
            status=VoterStatus.PENDING,
            metadata_hash=metadata_hash,
        )

    def with_status(self, status: VoterStatus) -> VoterRecord:
        """Return a copy in the given status with eligibility kept in sync."""
        return replace(self, status=status, eligibility=status is VoterStatus.APPROVED)

    def with_metadata(self, metadata_hash: MetadataHash) -> VoterRecord:
        """Return a copy carrying a new metadata hash."""
        return replace(self, metadata_hash=metadata_hash)

    @property
    def is_eligible(self) -> bool:
        """Eligibility recomputed from status, not read from the cached flag."""
        return self.status is VoterStatus.APPROVED

    def to_dict(self) -> dict[str, Any]:
        """Convert to serializable dictionary."""
        return {
            "voter": self.voter,
            "id": self.voter_id,
            "eligibility": self.eligibility,
            "registration_height": self.registration_height,
            "status": self.status.label,
            "metadata_hash": self.metadata_hash.hex(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> VoterRecord:
        """Rebuild a record from to_dict() output."""
        return cls(
            voter=data["voter"],
            voter_id=int(data["id"]),
            eligibility=bool(data["eligibility"]),
            registration_height=int(data["registration_height"]),
            status=VoterStatus.from_label(data["status"]),
            metadata_hash=MetadataHash.from_hex(data["metadata_hash"]),
        )
