"""Voter lifecycle state machine.

States:
    PENDING   - entered only by registration
    APPROVED  - approved by an official or the admin
    REVOKED   - terminal

Transitions are forward-only. The three revoking paths differ on purpose:
- approve: only from PENDING (no re-approval of approved or revoked records)
- revoke: from any non-REVOKED status, rejects an already REVOKED record
- self_revoke: from any status, an already REVOKED record is rewritten as-is

The functions here take and return immutable VoterRecords and raise
domain errors; the caller decides when to commit the result.
"""

from __future__ import annotations

from clearvote.domain.errors.registry import (
    AlreadyRegisteredError,
    InvalidStatusError,
    NotRegisteredError,
)
from clearvote.domain.models.identity import Identity
from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.domain.models.registry_state import RegistryState
from clearvote.domain.models.voter_record import VoterRecord, VoterStatus
from clearvote.domain.services import id_allocator

# Valid status transitions (from -> to)
VALID_TRANSITIONS: dict[VoterStatus, frozenset[VoterStatus]] = {
    VoterStatus.PENDING: frozenset({VoterStatus.APPROVED, VoterStatus.REVOKED}),
    VoterStatus.APPROVED: frozenset({VoterStatus.REVOKED}),
    VoterStatus.REVOKED: frozenset(),
}

TERMINAL_STATUSES: frozenset[VoterStatus] = frozenset({VoterStatus.REVOKED})


def is_valid_transition(from_status: VoterStatus, to_status: VoterStatus) -> bool:
    """Check if a status transition is valid."""
    return to_status in VALID_TRANSITIONS.get(from_status, frozenset())


def get_valid_next_states(status: VoterStatus) -> list[VoterStatus]:
    """Get valid next statuses, ordered by status code."""
    return sorted(VALID_TRANSITIONS.get(status, frozenset()), key=lambda s: s.value)


def is_terminal_status(status: VoterStatus) -> bool:
    """Check if a status is terminal."""
    return status in TERMINAL_STATUSES


def require_record(state: RegistryState, voter: Identity) -> VoterRecord:
    """Fetch a record that must exist.

    Raises:
        NotRegisteredError: If the identity has no record.
    """
    record = state.get_record(voter)
    if record is None:
        raise NotRegisteredError(voter)
    return record


def register(
    state: RegistryState,
    voter: Identity,
    metadata_hash: MetadataHash,
    height: int,
) -> VoterRecord:
    """Create a PENDING record for the voter and store it in the state.

    Args:
        state: Working copy of the registry state.
        voter: Registering identity (the caller).
        metadata_hash: Digest supplied by the voter.
        height: Current ledger height.

    Returns:
        The new record.

    Raises:
        AlreadyRegisteredError: If the voter already has a record.
    """
    existing = state.get_record(voter)
    if existing is not None:
        raise AlreadyRegisteredError(voter, existing.voter_id)
    voter_id = id_allocator.allocate(state, voter)
    record = VoterRecord.create(
        voter=voter,
        voter_id=voter_id,
        registration_height=height,
        metadata_hash=metadata_hash,
    )
    state.records[voter] = record
    return record


def approve(record: VoterRecord) -> VoterRecord:
    """Approve a PENDING record.

    Raises:
        InvalidStatusError: If the record is not PENDING.
    """
    if record.status is not VoterStatus.PENDING:
        raise InvalidStatusError(
            record.voter, record.status.label, VoterStatus.APPROVED.label
        )
    return record.with_status(VoterStatus.APPROVED)


def revoke(record: VoterRecord) -> VoterRecord:
    """Revoke a PENDING or APPROVED record.

    Raises:
        InvalidStatusError: If the record is already REVOKED.
    """
    if not is_valid_transition(record.status, VoterStatus.REVOKED):
        raise InvalidStatusError(
            record.voter, record.status.label, VoterStatus.REVOKED.label
        )
    return record.with_status(VoterStatus.REVOKED)


def self_revoke(record: VoterRecord) -> VoterRecord:
    """Revoke a record on its owner's request, whatever its status."""
    return record.with_status(VoterStatus.REVOKED)


def update_metadata(record: VoterRecord, metadata_hash: MetadataHash) -> VoterRecord:
    """Replace the metadata hash; status and eligibility are untouched."""
    return record.with_metadata(metadata_hash)
