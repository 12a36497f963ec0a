"""Unit tests for registry event payloads and the AuditEvent envelope."""

import json

import pytest

from clearvote.domain.events import (
    AdminTransferredPayload,
    AuditEvent,
    MetadataUpdatedPayload,
    NextIdResetPayload,
    OfficialAddedPayload,
    OfficialRemovedPayload,
    PauseToggledPayload,
    VoterApprovedPayload,
    VoterRegisteredPayload,
    VoterRevokedPayload,
    VoterSelfRevokedPayload,
)
from clearvote.domain.events.audit_event import canonical_json
from clearvote.domain.models.metadata_hash import MetadataHash

DIGEST = MetadataHash(b"\x0f" * 32)


class TestWireContent:
    """Event names and field names consumed by indexers."""

    @pytest.mark.parametrize(
        ("payload", "expected"),
        [
            (
                VoterRegisteredPayload("V1", 1, DIGEST),
                {"event": "voter-registered", "voter": "V1", "id": 1, "metadata-hash": "0f" * 32},
            ),
            (
                VoterApprovedPayload("V1", 1, "OFF"),
                {"event": "voter-approved", "voter": "V1", "id": 1, "official": "OFF"},
            ),
            (
                VoterRevokedPayload("V1", 1, "OFF"),
                {"event": "voter-revoked", "voter": "V1", "id": 1, "official": "OFF"},
            ),
            (
                VoterSelfRevokedPayload("V1", 1),
                {"event": "voter-self-revoked", "voter": "V1", "id": 1},
            ),
            (
                MetadataUpdatedPayload("V1", 1, DIGEST),
                {"event": "metadata-updated", "voter": "V1", "id": 1, "metadata-hash": "0f" * 32},
            ),
            (
                AdminTransferredPayload("A", "B"),
                {"event": "admin-transferred", "old-admin": "A", "new-admin": "B"},
            ),
            (
                PauseToggledPayload(True, "A"),
                {"event": "pause-toggled", "paused": True, "admin": "A"},
            ),
            (
                OfficialAddedPayload("OFF", "A"),
                {"event": "official-added", "official": "OFF", "admin": "A"},
            ),
            (
                OfficialRemovedPayload("OFF", "A"),
                {"event": "official-removed", "official": "OFF", "admin": "A"},
            ),
            (
                NextIdResetPayload(5, 100, "A"),
                {"event": "next-id-reset", "old-id": 5, "new-id": 100, "admin": "A"},
            ),
        ],
    )
    def test_envelope_content(self, payload: object, expected: dict) -> None:
        event = AuditEvent.from_payload(payload, height=7)  # type: ignore[arg-type]
        assert event.to_dict() == expected
        assert event.event_type == expected["event"]
        assert payload.signable_content() == event.signable_content()  # type: ignore[attr-defined]


class TestEnvelope:
    def test_to_record_adds_height(self) -> None:
        event = AuditEvent.from_payload(VoterSelfRevokedPayload("V1", 3), height=42)
        assert event.to_record() == {
            "height": 42,
            "event": "voter-self-revoked",
            "voter": "V1",
            "id": 3,
        }

    def test_canonical_json_is_sorted_and_compact(self) -> None:
        assert canonical_json({"b": 1, "a": "x"}) == b'{"a":"x","b":1}'
        assert json.loads(canonical_json({"b": 1})) == {"b": 1}


class TestPayloadValidation:
    def test_admin_transfer_requires_new_admin(self) -> None:
        with pytest.raises(ValueError):
            AdminTransferredPayload("A", "")

    def test_next_id_reset_must_move_forward(self) -> None:
        with pytest.raises(ValueError):
            NextIdResetPayload(10, 10, "A")
