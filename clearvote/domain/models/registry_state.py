"""Registry state model.

RegistryState is the complete persisted layout of the registry:
admin, paused flag, next-id counter, official set, identity -> record map
and id -> identity map. One instance is owned by one service; there is no
process-wide singleton.
"""

from __future__ import annotations

from collections import ChainMap
from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass, field
from typing import TypeVar

from clearvote.domain.models.identity import Identity
from clearvote.domain.models.voter_record import VoterRecord

FIRST_VOTER_ID = 1

_K = TypeVar("_K")
_V = TypeVar("_V")


@dataclass
class RegistryState:
    """Mutable registry state.

    Attributes:
        admin: Identity of the sole administrator. Never empty.
        paused: Global pause flag.
        next_id: Next registration id to allocate (starts at 1).
        officials: Identities holding delegated authority.
        records: Voter records keyed by identity.
        id_index: Reverse index id -> identity, written only at registration.
    """

    admin: Identity
    paused: bool = False
    next_id: int = FIRST_VOTER_ID
    officials: set[Identity] = field(default_factory=set)
    records: MutableMapping[Identity, VoterRecord] = field(default_factory=dict)
    id_index: MutableMapping[int, Identity] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.admin or not self.admin.strip():
            raise ValueError("RegistryState requires a non-empty admin identity")
        if self.next_id < FIRST_VOTER_ID:
            raise ValueError(f"next_id must be >= {FIRST_VOTER_ID}, got {self.next_id}")

    @classmethod
    def initial(cls, admin: Identity) -> RegistryState:
        """Create the state of a freshly deployed registry."""
        return cls(admin=admin)

    def copy(self) -> RegistryState:
        """Return a scratch overlay for a unit of work.

        Record and id-index writes land in empty maps layered over this
        state's maps, so the cost does not grow with the number of voters.
        Reads fall through to this state. Fold the overlay back with merge().
        """
        return RegistryState(
            admin=self.admin,
            paused=self.paused,
            next_id=self.next_id,
            officials=set(self.officials),
            records=ChainMap({}, self.records),
            id_index=ChainMap({}, self.id_index),
        )

    def snapshot(self) -> RegistryState:
        """Return a fully independent copy with plain containers."""
        return RegistryState(
            admin=self.admin,
            paused=self.paused,
            next_id=self.next_id,
            officials=set(self.officials),
            records=dict(self.records),
            id_index=dict(self.id_index),
        )

    def merge(self, working: RegistryState) -> None:
        """Fold a committed overlay from copy() into this state."""
        self.admin = working.admin
        self.paused = working.paused
        self.next_id = working.next_id
        self.officials = set(working.officials)
        self.records.update(_overlay_writes(working.records))
        self.id_index.update(_overlay_writes(working.id_index))

    def get_record(self, voter: Identity) -> VoterRecord | None:
        """Return the record for an identity, or None."""
        return self.records.get(voter)

    def find_violations(self) -> list[str]:
        """Check structural invariants and describe every violation found.

        Used after loading persisted state; an empty list means consistent.
        """
        violations: list[str] = []
        for voter_id, voter in self.id_index.items():
            record = self.records.get(voter)
            if record is None:
                violations.append(f"id {voter_id} maps to {voter!r} which has no record")
            elif record.voter_id != voter_id:
                violations.append(
                    f"id {voter_id} maps to {voter!r} whose record has id {record.voter_id}"
                )
        for voter, record in self.records.items():
            if record.voter != voter:
                violations.append(f"record keyed {voter!r} belongs to {record.voter!r}")
            if record.voter_id >= self.next_id:
                violations.append(
                    f"record id {record.voter_id} is not below next_id {self.next_id}"
                )
            if record.eligibility != record.is_eligible:
                violations.append(f"eligibility flag of {voter!r} disagrees with status")
        return violations


def _overlay_writes(mapping: Mapping[_K, _V]) -> Mapping[_K, _V]:
    # writes made through a copy() overlay live in its first map
    if isinstance(mapping, ChainMap):
        return mapping.maps[0]
    return mapping
