"""Unit tests for RegistryState."""

from collections import ChainMap

import pytest

from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.domain.models.registry_state import FIRST_VOTER_ID, RegistryState
from clearvote.domain.models.voter_record import VoterRecord, VoterStatus


def _state_with_voter() -> RegistryState:
    state = RegistryState.initial("ADMIN")
    state.records["V1"] = VoterRecord.create("V1", 1, 10, MetadataHash.zero())
    state.id_index[1] = "V1"
    state.next_id = 2
    return state


class TestInitialState:
    def test_initial_values(self) -> None:
        state = RegistryState.initial("ADMIN")
        assert state.admin == "ADMIN"
        assert state.paused is False
        assert state.next_id == FIRST_VOTER_ID == 1
        assert state.officials == set()
        assert state.records == {}
        assert state.id_index == {}

    @pytest.mark.parametrize("admin", ["", "   "])
    def test_rejects_empty_admin(self, admin: str) -> None:
        with pytest.raises(ValueError, match="admin"):
            RegistryState.initial(admin)

    def test_rejects_next_id_below_one(self) -> None:
        with pytest.raises(ValueError, match="next_id"):
            RegistryState(admin="ADMIN", next_id=0)


class TestCopy:
    def test_copy_is_independent(self) -> None:
        """Mutating a copy never leaks into the original."""
        state = _state_with_voter()
        working = state.copy()
        working.officials.add("OFF")
        working.records["V2"] = VoterRecord.create("V2", 2, 11, MetadataHash.zero())
        working.id_index[2] = "V2"
        working.next_id = 3
        working.paused = True

        assert state.officials == set()
        assert "V2" not in state.records
        assert 2 not in state.id_index
        assert state.next_id == 2
        assert state.paused is False

    def test_copy_reads_through_to_live_records(self) -> None:
        state = _state_with_voter()
        working = state.copy()
        assert working.records["V1"] is state.records["V1"]
        assert working.id_index[1] == "V1"
        assert "V1" in working.records

    def test_copy_overlay_holds_only_writes(self) -> None:
        """Building a unit of work does not copy existing records."""
        state = RegistryState.initial("ADMIN")
        for n in range(1, 51):
            voter = f"V{n}"
            state.records[voter] = VoterRecord.create(voter, n, 10, MetadataHash.zero())
            state.id_index[n] = voter
        state.next_id = 51

        working = state.copy()
        added = VoterRecord.create("V51", 51, 11, MetadataHash.zero())
        working.records["V51"] = added

        assert isinstance(working.records, ChainMap)
        assert working.records.maps[0] == {"V51": added}
        assert working.records.maps[1] is state.records
        assert len(working.records) == 51

    def test_merge_folds_writes_into_live_state(self) -> None:
        state = _state_with_voter()
        working = state.copy()
        approved = state.records["V1"].with_status(VoterStatus.APPROVED)
        working.records["V1"] = approved
        working.records["V2"] = VoterRecord.create("V2", 2, 11, MetadataHash.zero())
        working.id_index[2] = "V2"
        working.next_id = 3
        working.officials.add("OFF")
        working.admin = "NEW_ADMIN"
        working.paused = True

        state.merge(working)

        assert isinstance(state.records, dict)
        assert state.records["V1"] is approved
        assert set(state.records) == {"V1", "V2"}
        assert state.id_index == {1: "V1", 2: "V2"}
        assert state.next_id == 3
        assert state.officials == {"OFF"}
        assert state.admin == "NEW_ADMIN"
        assert state.paused is True
        assert state.find_violations() == []

    def test_snapshot_is_plain_and_independent(self) -> None:
        state = _state_with_voter()
        working = state.copy()
        working.records["V2"] = VoterRecord.create("V2", 2, 11, MetadataHash.zero())
        working.id_index[2] = "V2"
        working.next_id = 3

        snapshot = working.snapshot()
        state.records.clear()

        assert type(snapshot.records) is dict
        assert type(snapshot.id_index) is dict
        assert set(snapshot.records) == {"V1", "V2"}

    def test_get_record(self) -> None:
        state = _state_with_voter()
        assert state.get_record("V1") is not None
        assert state.get_record("nobody") is None


class TestFindViolations:
    def test_consistent_state(self) -> None:
        assert _state_with_voter().find_violations() == []

    def test_index_points_to_missing_record(self) -> None:
        state = _state_with_voter()
        state.id_index[5] = "ghost"
        assert any("ghost" in v for v in state.find_violations())

    def test_record_id_not_below_next_id(self) -> None:
        state = _state_with_voter()
        state.next_id = 1
        assert any("next_id" in v for v in state.find_violations())

    def test_eligibility_flag_disagrees(self) -> None:
        state = _state_with_voter()
        record = state.records["V1"]
        state.records["V1"] = VoterRecord(
            voter=record.voter,
            voter_id=record.voter_id,
            eligibility=True,
            registration_height=record.registration_height,
            status=VoterStatus.PENDING,
            metadata_hash=record.metadata_hash,
        )
        assert any("eligibility" in v for v in state.find_violations())
