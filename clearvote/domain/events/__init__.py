"""Audit event payloads emitted by the voter registry."""

from clearvote.domain.events.administration import (
    ADMIN_TRANSFERRED_EVENT_TYPE,
    NEXT_ID_RESET_EVENT_TYPE,
    OFFICIAL_ADDED_EVENT_TYPE,
    OFFICIAL_REMOVED_EVENT_TYPE,
    PAUSE_TOGGLED_EVENT_TYPE,
    AdminTransferredPayload,
    NextIdResetPayload,
    OfficialAddedPayload,
    OfficialRemovedPayload,
    PauseToggledPayload,
)
from clearvote.domain.events.audit_event import AuditEvent, AuditPayload, canonical_json
from clearvote.domain.events.voter import (
    METADATA_UPDATED_EVENT_TYPE,
    VOTER_APPROVED_EVENT_TYPE,
    VOTER_REGISTERED_EVENT_TYPE,
    VOTER_REVOKED_EVENT_TYPE,
    VOTER_SELF_REVOKED_EVENT_TYPE,
    MetadataUpdatedPayload,
    VoterApprovedPayload,
    VoterRegisteredPayload,
    VoterRevokedPayload,
    VoterSelfRevokedPayload,
)

__all__ = [
    "ADMIN_TRANSFERRED_EVENT_TYPE",
    "METADATA_UPDATED_EVENT_TYPE",
    "NEXT_ID_RESET_EVENT_TYPE",
    "OFFICIAL_ADDED_EVENT_TYPE",
    "OFFICIAL_REMOVED_EVENT_TYPE",
    "PAUSE_TOGGLED_EVENT_TYPE",
    "VOTER_APPROVED_EVENT_TYPE",
    "VOTER_REGISTERED_EVENT_TYPE",
    "VOTER_REVOKED_EVENT_TYPE",
    "VOTER_SELF_REVOKED_EVENT_TYPE",
    "AdminTransferredPayload",
    "AuditEvent",
    "AuditPayload",
    "MetadataUpdatedPayload",
    "NextIdResetPayload",
    "OfficialAddedPayload",
    "OfficialRemovedPayload",
    "PauseToggledPayload",
    "VoterApprovedPayload",
    "VoterRegisteredPayload",
    "VoterRevokedPayload",
    "VoterSelfRevokedPayload",
    "canonical_json",
]
