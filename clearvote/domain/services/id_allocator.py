"""Registration id allocation.

Ids start at 1, increase by one per registration and are never reused.
The reverse index (id -> identity) is written only here, at allocation
time, and never rewritten afterwards.
"""

from __future__ import annotations

from clearvote.domain.errors.registry import InvalidIdError
from clearvote.domain.models.identity import Identity
from clearvote.domain.models.registry_state import RegistryState


def allocate(state: RegistryState, voter: Identity) -> int:
    """Allocate the next id for a registering voter.

    Only called from registration. Mutates the given state.

    Args:
        state: Working copy of the registry state.
        voter: Identity being registered.

    Returns:
        The allocated id.
    """
    voter_id = state.next_id
    state.next_id = voter_id + 1
    state.id_index[voter_id] = voter
    return voter_id


def reset_next_id(state: RegistryState, new_id: int) -> int:
    """Move the id counter forward (emergency escape hatch).

    Existing records and index entries are untouched; gaps in the id
    sequence are expected after a reset.

    Args:
        state: Working copy of the registry state.
        new_id: New counter value, strictly greater than the current one.

    Returns:
        The previous counter value.

    Raises:
        InvalidIdError: If new_id does not exceed the current counter.
    """
    if new_id <= state.next_id:
        raise InvalidIdError(
            new_id, f"must be greater than the current next id {state.next_id}"
        )
    old_id = state.next_id
    state.next_id = new_id
    return old_id


def lookup(state: RegistryState, voter_id: int) -> Identity:
    """Resolve an id to the identity that registered it.

    Raises:
        InvalidIdError: If no identity was ever registered under this id.
    """
    voter = state.id_index.get(voter_id)
    if voter is None:
        raise InvalidIdError(voter_id, "no voter registered under this id", lookup_miss=True)
    return voter
