"""Voter registry service - the public call surface.

Every mutating call follows the same unit of work:
1. Gate: pause check (non-admin operations) and role check
2. Apply: transitions run against a scratch copy of the state
3. Commit: the repository saves the copy, then its writes are merged into
   the live state
4. Emit: one audit event per successful mutation, after the commit. A sink
   failure is logged by the emitter and never undoes a committed call

A call that fails at any step before the commit leaves the live state
untouched and emits nothing. Calls are serialized by a per-instance lock.

Batch calls check the gate once for the whole batch, then apply the
singular transition to each element, skipping elements whose transition
fails. They commit once and return the number of elements that succeeded.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Collection, Sequence

from clearvote.application.ports.height_source import HeightSource
from clearvote.application.ports.registry_state_repository import (
    RegistryStateRepository,
)
from clearvote.application.services.audit_emitter import AuditEmitter
from clearvote.application.services.base import LoggingMixin
from clearvote.domain.errors.registry import InvalidTargetError
from clearvote.domain.events.administration import (
    AdminTransferredPayload,
    NextIdResetPayload,
    OfficialAddedPayload,
    OfficialRemovedPayload,
    PauseToggledPayload,
)
from clearvote.domain.events.audit_event import AuditPayload
from clearvote.domain.events.voter import (
    MetadataUpdatedPayload,
    VoterApprovedPayload,
    VoterRegisteredPayload,
    VoterRevokedPayload,
    VoterSelfRevokedPayload,
)
from clearvote.domain.exceptions import InvalidInputError, RegistryError
from clearvote.domain.models.identity import Identity, Role
from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.domain.models.registry_state import RegistryState
from clearvote.domain.models.voter_record import VoterRecord
from clearvote.domain.services import access_control, id_allocator, voter_lifecycle

DEFAULT_MAX_BATCH_SIZE = 100

# Per-element transition applied by batch calls: (working, caller, voter) -> payload
_ElementTransition = Callable[[RegistryState, Identity, Identity], AuditPayload]


class VoterRegistryService(LoggingMixin):
    """Permissioned voter registry.

    Example:
        >>> service = VoterRegistryService(
        ...     repository=InMemoryRegistryStateRepository(),
        ...     height_source=ManualHeightSource(100),
        ...     emitter=AuditEmitter(InMemoryAuditEventSink(), height_source),
        ...     initial_admin="ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM",
        ... )
        >>> service.register("ST2CY5V39NHDP5P0TP2KS8AMGE0MC0H7ADD0T0GVK", MetadataHash.zero())
        1
    """

    def __init__(
        self,
        repository: RegistryStateRepository,
        height_source: HeightSource,
        emitter: AuditEmitter,
        initial_admin: Identity,
        max_batch_size: int = DEFAULT_MAX_BATCH_SIZE,
    ) -> None:
        """Initialize the service, loading persisted state if any.

        Args:
            repository: Persistence for the registry state.
            height_source: Ledger height used for registration heights.
            emitter: Audit emitter fed after each commit.
            initial_admin: Admin of a fresh registry (ignored if state exists).
            max_batch_size: Upper bound on batch call length.

        Raises:
            ValueError: If max_batch_size < 1 or persisted state is inconsistent.
        """
        if max_batch_size < 1:
            raise ValueError(f"max_batch_size must be positive, got {max_batch_size}")
        self._repository = repository
        self._height_source = height_source
        self._emitter = emitter
        self._max_batch_size = max_batch_size
        self._lock = threading.RLock()
        self._init_logger()

        state = repository.load()
        if state is None:
            state = RegistryState.initial(initial_admin)
            repository.save(state, ())
            self._log.info("registry_initialized", admin=state.admin)
        else:
            violations = state.find_violations()
            if violations:
                self._log.error("registry_state_inconsistent", violations=violations)
                raise ValueError(
                    "Persisted registry state is inconsistent: " + "; ".join(violations)
                )
            self._log.info(
                "registry_loaded",
                admin=state.admin,
                paused=state.paused,
                next_id=state.next_id,
                voters=len(state.records),
            )
        self._state = state

    @property
    def max_batch_size(self) -> int:
        """Upper bound on batch call length."""
        return self._max_batch_size

    # ========================================
    # Administrative operations
    # ========================================

    def transfer_admin(self, caller: Identity, new_admin: Identity) -> bool:
        """Hand administrative control to another identity.

        Raises:
            NotAuthorizedError: If the caller is not the admin.
            ZeroAddressError: If new_admin is empty.
            InvalidTargetError: If new_admin is the caller.
        """
        log = self._log_operation("transfer_admin", caller=caller, new_admin=new_admin)
        with self._lock, self._rejections_logged(log):
            access_control.require_admin(self._state, caller, "transfer_admin")
            access_control.require_identity(new_admin, "transfer_admin")
            if new_admin == caller:
                raise InvalidTargetError(new_admin, "admin cannot transfer to itself")
            working = self._state.copy()
            working.admin = new_admin
            self._commit(working, (), [AdminTransferredPayload(caller, new_admin)])
        log.info("admin_transferred")
        return True

    def set_paused(self, caller: Identity, paused: bool) -> bool:
        """Set the global pause flag.

        Returns:
            The new flag value.

        Raises:
            NotAuthorizedError: If the caller is not the admin.
        """
        log = self._log_operation("set_paused", caller=caller, paused=paused)
        with self._lock, self._rejections_logged(log):
            access_control.require_admin(self._state, caller, "set_paused")
            working = self._state.copy()
            working.paused = bool(paused)
            self._commit(working, (), [PauseToggledPayload(working.paused, caller)])
        log.info("registry_paused" if paused else "registry_unpaused")
        return bool(paused)

    def add_official(self, caller: Identity, official: Identity) -> bool:
        """Grant official authority. Adding an existing official succeeds.

        Raises:
            NotAuthorizedError: If the caller is not the admin.
            ZeroAddressError: If official is empty.
        """
        log = self._log_operation("add_official", caller=caller, official=official)
        with self._lock, self._rejections_logged(log):
            access_control.require_admin(self._state, caller, "add_official")
            access_control.require_identity(official, "add_official")
            working = self._state.copy()
            working.officials.add(official)
            self._commit(working, (), [OfficialAddedPayload(official, caller)])
        log.info("official_added")
        return True

    def remove_official(self, caller: Identity, official: Identity) -> bool:
        """Withdraw official authority. Removing a non-member succeeds.

        Raises:
            NotAuthorizedError: If the caller is not the admin.
            ZeroAddressError: If official is empty.
        """
        log = self._log_operation("remove_official", caller=caller, official=official)
        with self._lock, self._rejections_logged(log):
            access_control.require_admin(self._state, caller, "remove_official")
            access_control.require_identity(official, "remove_official")
            working = self._state.copy()
            working.officials.discard(official)
            self._commit(working, (), [OfficialRemovedPayload(official, caller)])
        log.info("official_removed")
        return True

    def reset_next_id(self, caller: Identity, new_id: int) -> int:
        """Move the id counter forward.

        Returns:
            The new counter value.

        Raises:
            InvalidInputError: If new_id is not a positive integer.
            NotAuthorizedError: If the caller is not the admin.
            InvalidIdError: If new_id does not exceed the current counter.
        """
        _validate_voter_id(new_id)
        log = self._log_operation("reset_next_id", caller=caller, new_id=new_id)
        with self._lock, self._rejections_logged(log):
            access_control.require_admin(self._state, caller, "reset_next_id")
            working = self._state.copy()
            old_id = id_allocator.reset_next_id(working, new_id)
            self._commit(working, (), [NextIdResetPayload(old_id, new_id, caller)])
        log.info("next_id_reset", old_id=old_id)
        return new_id

    # ========================================
    # Self-service operations
    # ========================================

    def register(self, caller: Identity, metadata_hash: MetadataHash | bytes) -> int:
        """Register the caller as a PENDING voter.

        Returns:
            The allocated registration id.

        Raises:
            InvalidInputError: If the metadata hash is not 32 bytes.
            RegistryPausedError: If the registry is paused.
            AlreadyRegisteredError: If the caller already has a record.
        """
        digest = _coerce_metadata_hash(metadata_hash)
        log = self._log_operation("register", caller=caller)
        with self._lock, self._rejections_logged(log):
            access_control.require_not_paused(self._state, "register")
            working = self._state.copy()
            record = voter_lifecycle.register(
                working, caller, digest, self._height_source.current_height()
            )
            self._commit(
                working,
                (caller,),
                [VoterRegisteredPayload(caller, record.voter_id, digest)],
            )
        log.info(
            "voter_registered",
            voter_id=record.voter_id,
            registration_height=record.registration_height,
        )
        return record.voter_id

    def self_revoke(self, caller: Identity) -> bool:
        """Revoke the caller's own record, whatever its current status.

        Re-revoking an already REVOKED record succeeds and emits again.

        Raises:
            RegistryPausedError: If the registry is paused.
            NotRegisteredError: If the caller has no record.
        """
        log = self._log_operation("self_revoke", caller=caller)
        with self._lock, self._rejections_logged(log):
            access_control.require_not_paused(self._state, "self_revoke")
            record = voter_lifecycle.require_record(self._state, caller)
            updated = voter_lifecycle.self_revoke(record)
            working = self._state.copy()
            working.records[caller] = updated
            self._commit(
                working, (caller,), [VoterSelfRevokedPayload(caller, updated.voter_id)]
            )
        log.info("voter_self_revoked", previous_status=record.status.label)
        return True

    def update_metadata(self, caller: Identity, metadata_hash: MetadataHash | bytes) -> bool:
        """Replace the caller's metadata hash.

        Any registered caller may update their own record, in any status.

        Raises:
            InvalidInputError: If the metadata hash is not 32 bytes.
            RegistryPausedError: If the registry is paused.
            NotRegisteredError: If the caller has no record.
        """
        digest = _coerce_metadata_hash(metadata_hash)
        log = self._log_operation("update_metadata", caller=caller)
        with self._lock, self._rejections_logged(log):
            access_control.require_not_paused(self._state, "update_metadata")
            record = voter_lifecycle.require_record(self._state, caller)
            updated = voter_lifecycle.update_metadata(record, digest)
            working = self._state.copy()
            working.records[caller] = updated
            self._commit(
                working,
                (caller,),
                [MetadataUpdatedPayload(caller, updated.voter_id, digest)],
            )
        log.info("metadata_updated", voter_id=updated.voter_id)
        return True

    # ========================================
    # Official operations
    # ========================================

    def approve(self, caller: Identity, voter: Identity) -> bool:
        """Approve a PENDING voter.

        Raises:
            RegistryPausedError: If the registry is paused.
            NotAuthorizedError: If the caller is neither admin nor official.
            NotRegisteredError: If the voter has no record.
            InvalidStatusError: If the voter is not PENDING.
        """
        log = self._log_operation("approve", caller=caller, voter=voter)
        with self._lock, self._rejections_logged(log):
            self._require_official_gate(caller, "approve")
            working = self._state.copy()
            payload = _apply_approve(working, caller, voter)
            self._commit(working, (voter,), [payload])
        log.info("voter_approved", voter_id=payload.voter_id)
        return True

    def revoke(self, caller: Identity, voter: Identity) -> bool:
        """Revoke a PENDING or APPROVED voter.

        Raises:
            RegistryPausedError: If the registry is paused.
            NotAuthorizedError: If the caller is neither admin nor official.
            NotRegisteredError: If the voter has no record.
            InvalidStatusError: If the voter is already REVOKED.
        """
        log = self._log_operation("revoke", caller=caller, voter=voter)
        with self._lock, self._rejections_logged(log):
            self._require_official_gate(caller, "revoke")
            working = self._state.copy()
            payload = _apply_revoke(working, caller, voter)
            self._commit(working, (voter,), [payload])
        log.info("voter_revoked", voter_id=payload.voter_id)
        return True

    def batch_approve(self, caller: Identity, voters: Sequence[Identity]) -> int:
        """Approve each voter in order, skipping those that cannot be approved.

        Returns:
            Number of voters approved by this call.

        Raises:
            InvalidInputError: If the batch exceeds max_batch_size.
            RegistryPausedError: If the registry is paused.
            NotAuthorizedError: If the caller is neither admin nor official.
        """
        return self._run_batch("batch_approve", caller, voters, _apply_approve)

    def batch_revoke(self, caller: Identity, voters: Sequence[Identity]) -> int:
        """Revoke each voter in order, skipping those that cannot be revoked.

        Returns:
            Number of voters revoked by this call.

        Raises:
            InvalidInputError: If the batch exceeds max_batch_size.
            RegistryPausedError: If the registry is paused.
            NotAuthorizedError: If the caller is neither admin nor official.
        """
        return self._run_batch("batch_revoke", caller, voters, _apply_revoke)

    # ========================================
    # Read-only queries
    # ========================================

    def is_eligible(self, voter: Identity) -> bool:
        """Check eligibility, recomputed from status.

        Raises:
            NotRegisteredError: If the voter has no record.
        """
        with self._lock:
            return voter_lifecycle.require_record(self._state, voter).is_eligible

    def get_record(self, voter: Identity) -> VoterRecord | None:
        """Return the voter's record, or None if unregistered."""
        with self._lock:
            return self._state.get_record(voter)

    def get_record_by_id(self, voter_id: int) -> VoterRecord:
        """Return the record registered under an id.

        Raises:
            InvalidIdError: If no voter was registered under this id.
        """
        with self._lock:
            voter = id_allocator.lookup(self._state, voter_id)
            return voter_lifecycle.require_record(self._state, voter)

    def get_next_id(self) -> int:
        """Return the id the next registration will receive."""
        with self._lock:
            return self._state.next_id

    def get_admin(self) -> Identity:
        """Return the current administrator."""
        with self._lock:
            return self._state.admin

    def is_paused(self) -> bool:
        """Return the global pause flag."""
        with self._lock:
            return self._state.paused

    def is_official(self, identity: Identity) -> bool:
        """Check official membership."""
        with self._lock:
            return access_control.is_official(self._state, identity)

    def resolve_role(self, caller: Identity) -> Role:
        """Resolve the caller's role against the current state."""
        with self._lock:
            return access_control.resolve_role(self._state, caller)

    # ========================================
    # Internals
    # ========================================

    def _require_official_gate(self, caller: Identity, operation: str) -> None:
        access_control.require_not_paused(self._state, operation)
        access_control.require_authorized(self._state, caller, operation)

    def _run_batch(
        self,
        operation: str,
        caller: Identity,
        voters: Sequence[Identity],
        apply: _ElementTransition,
    ) -> int:
        if len(voters) > self._max_batch_size:
            raise InvalidInputError(
                f"{operation} accepts at most {self._max_batch_size} voters, "
                f"got {len(voters)}"
            )
        log = self._log_operation(operation, caller=caller, requested=len(voters))
        with self._lock, self._rejections_logged(log):
            self._require_official_gate(caller, operation)
            working = self._state.copy()
            payloads: list[AuditPayload] = []
            touched: list[Identity] = []
            for voter in voters:
                try:
                    payloads.append(apply(working, caller, voter))
                except RegistryError as exc:
                    log.debug(
                        "batch_element_skipped",
                        voter=voter,
                        kind=exc.KIND,
                        error_code=exc.ERROR_CODE,
                    )
                    continue
                touched.append(voter)
            if payloads:
                self._commit(working, touched, payloads)
        log.info("batch_completed", succeeded=len(payloads))
        return len(payloads)

    def _commit(
        self,
        working: RegistryState,
        touched_voters: Collection[Identity],
        payloads: list[AuditPayload],
    ) -> None:
        """Persist the working copy, merge it into the live state, then emit."""
        self._repository.save(working, touched_voters)
        self._state.merge(working)
        self._emitter.emit(payloads)


def _apply_approve(
    working: RegistryState, caller: Identity, voter: Identity
) -> VoterApprovedPayload:
    record = voter_lifecycle.approve(voter_lifecycle.require_record(working, voter))
    working.records[voter] = record
    return VoterApprovedPayload(voter, record.voter_id, caller)


def _apply_revoke(
    working: RegistryState, caller: Identity, voter: Identity
) -> VoterRevokedPayload:
    record = voter_lifecycle.revoke(voter_lifecycle.require_record(working, voter))
    working.records[voter] = record
    return VoterRevokedPayload(voter, record.voter_id, caller)


def _coerce_metadata_hash(value: MetadataHash | bytes) -> MetadataHash:
    if isinstance(value, MetadataHash):
        return value
    try:
        return MetadataHash(value)
    except ValueError as exc:
        raise InvalidInputError(str(exc)) from exc


def _validate_voter_id(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(f"voter id must be an integer, got {type(value).__name__}")
    if value < 1:
        raise InvalidInputError(f"voter id must be positive, got {value}")
