"""In-memory registry state repository.

WARNING: Not durable - state is lost on restart. Used by tests and when
no database URL is configured.
"""

from __future__ import annotations

from collections.abc import Collection

from clearvote.application.ports.registry_state_repository import (
    RegistryStateRepository,
)
from clearvote.domain.models.identity import Identity
from clearvote.domain.models.registry_state import RegistryState


class InMemoryRegistryStateRepository(RegistryStateRepository):
    """Keeps a private copy of the last saved state."""

    def __init__(self, state: RegistryState | None = None) -> None:
        self._state = state.snapshot() if state is not None else None
        self._save_count = 0
        self._fail_next_save: Exception | None = None

    def load(self) -> RegistryState | None:
        return self._state.snapshot() if self._state is not None else None

    def save(self, state: RegistryState, touched_voters: Collection[Identity]) -> None:
        if self._fail_next_save is not None:
            error, self._fail_next_save = self._fail_next_save, None
            raise error
        self._state = state.snapshot()
        self._save_count += 1

    # ========================================
    # Test helper methods
    # ========================================

    @property
    def save_count(self) -> int:
        """Number of successful saves."""
        return self._save_count

    def fail_next_save(self, error: Exception) -> None:
        """Make the next save raise the given error (simulates storage failure)."""
        self._fail_next_save = error
