"""Unit tests for the in-memory registry stubs."""

import pytest

from clearvote.domain.events import AuditEvent, VoterSelfRevokedPayload
from clearvote.domain.models.registry_state import RegistryState
from clearvote.infrastructure.stubs import (
    InMemoryAuditEventSink,
    InMemoryRegistryStateRepository,
    ManualHeightSource,
)


class TestManualHeightSource:
    def test_initial_height(self) -> None:
        assert ManualHeightSource().current_height() == 0
        assert ManualHeightSource(42).current_height() == 42

    def test_advance(self) -> None:
        heights = ManualHeightSource(10)
        heights.advance()
        heights.advance(4)
        assert heights.current_height() == 15

    def test_set_height_forward(self) -> None:
        heights = ManualHeightSource(10)
        heights.set_height(10)
        heights.set_height(99)
        assert heights.current_height() == 99

    def test_set_height_backwards_rejected(self) -> None:
        heights = ManualHeightSource(10)
        with pytest.raises(ValueError):
            heights.set_height(9)
        assert heights.current_height() == 10

    def test_negative_initial_rejected(self) -> None:
        with pytest.raises(ValueError):
            ManualHeightSource(-1)


class TestInMemoryAuditEventSink:
    def test_captures_in_order(self) -> None:
        sink = InMemoryAuditEventSink()
        first = AuditEvent.from_payload(VoterSelfRevokedPayload("V1", 1), height=1)
        second = AuditEvent.from_payload(VoterSelfRevokedPayload("V2", 2), height=2)
        sink.append(first)
        sink.append(second)

        assert sink.events == [first, second]
        assert sink.last() is second
        assert sink.event_types() == ["voter-self-revoked"] * 2
        assert sink.events_of_type("voter-registered") == []

    def test_clear(self) -> None:
        sink = InMemoryAuditEventSink()
        sink.append(AuditEvent.from_payload(VoterSelfRevokedPayload("V1", 1), height=1))
        sink.clear()
        assert sink.events == []
        assert sink.last() is None


class TestInMemoryRegistryStateRepository:
    def test_empty_load(self) -> None:
        assert InMemoryRegistryStateRepository().load() is None

    def test_save_stores_a_copy(self) -> None:
        repository = InMemoryRegistryStateRepository()
        state = RegistryState.initial("ADMIN")
        repository.save(state, ())
        state.officials.add("LATE")

        loaded = repository.load()
        assert loaded is not None
        assert loaded.officials == set()
        assert repository.save_count == 1

    def test_save_of_overlay_stores_plain_snapshot(self) -> None:
        repository = InMemoryRegistryStateRepository()
        live = RegistryState.initial("ADMIN")
        working = live.copy()
        working.id_index[1] = "V1"
        repository.save(working, ())
        working.id_index[2] = "V2"

        loaded = repository.load()
        assert loaded is not None
        assert type(loaded.id_index) is dict
        assert loaded.id_index == {1: "V1"}

    def test_fail_next_save(self) -> None:
        repository = InMemoryRegistryStateRepository(RegistryState.initial("ADMIN"))
        repository.fail_next_save(RuntimeError("boom"))
        changed = RegistryState.initial("OTHER")

        with pytest.raises(RuntimeError):
            repository.save(changed, ())
        loaded = repository.load()
        assert loaded is not None
        assert loaded.admin == "ADMIN"

        repository.save(changed, ())
        loaded = repository.load()
        assert loaded is not None
        assert loaded.admin == "OTHER"
