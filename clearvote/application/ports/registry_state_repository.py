"""Registry state repository port.

Persists the full registry layout (admin, paused flag, next id, official
set, voter records, id index) so that it survives a process restart when
durable storage is configured.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Collection

from clearvote.domain.models.identity import Identity
from clearvote.domain.models.registry_state import RegistryState


class RegistryStateRepository(ABC):
    """Abstract interface for loading and saving registry state."""

    @abstractmethod
    def load(self) -> RegistryState | None:
        """Load the persisted state.

        Returns:
            The stored state, or None if nothing has been stored yet.
        """
        ...

    @abstractmethod
    def save(self, state: RegistryState, touched_voters: Collection[Identity]) -> None:
        """Persist a committed state atomically.

        Scalar fields and the official set are always written. Only the
        records of touched_voters (and their id index entries) are written;
        all other records are unchanged since the previous save.

        Args:
            state: State to persist.
            touched_voters: Identities whose records changed in this unit of work.
        """
        ...
