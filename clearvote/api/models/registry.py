"""Voter registry API models.

Pydantic models for registry requests and responses. Metadata hashes
travel as 64-character hex strings (an optional 0x prefix is accepted).
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.domain.models.voter_record import VoterRecord


class TransferAdminRequest(BaseModel):
    """Request to hand administrative control to another identity."""

    new_admin: str = Field(..., description="Identity of the new administrator")


class SetPausedRequest(BaseModel):
    """Request to set the global pause flag."""

    paused: bool = Field(..., description="New pause flag value")


class AddOfficialRequest(BaseModel):
    """Request to grant official authority."""

    official: str = Field(..., description="Identity receiving official authority")


class ResetNextIdRequest(BaseModel):
    """Request to move the id counter forward."""

    new_id: int = Field(..., ge=1, description="New next-id value")


class MetadataHashRequest(BaseModel):
    """Request carrying a 32-byte metadata digest (register, update metadata).

    Attributes:
        metadata_hash: Hex encoding of the 32-byte digest.
    """

    metadata_hash: str = Field(
        ...,
        description="Hex encoded 32-byte metadata digest",
        examples=["0x" + "ab" * 32],
    )

    @field_validator("metadata_hash")
    @classmethod
    def validate_metadata_hash(cls, v: str) -> str:
        """Validate the hash decodes to exactly 32 bytes."""
        MetadataHash.from_hex(v.strip())
        return v.strip()

    def to_metadata_hash(self) -> MetadataHash:
        return MetadataHash.from_hex(self.metadata_hash)


class BatchRequest(BaseModel):
    """Request listing voters for batch approve/revoke."""

    voters: list[str] = Field(..., description="Voter identities, processed in order")


class OperationResponse(BaseModel):
    """Acknowledgement of a successful mutation."""

    success: bool = True


class RegisterResponse(BaseModel):
    """Response from registration."""

    voter_id: int = Field(..., description="Allocated registration id")


class PausedResponse(BaseModel):
    """Response from set_paused."""

    paused: bool


class NextIdResponse(BaseModel):
    """Response from reset_next_id."""

    next_id: int


class BatchResponse(BaseModel):
    """Response from batch approve/revoke."""

    succeeded: int = Field(..., description="Number of voters transitioned")


class VoterRecordResponse(BaseModel):
    """A voter record.

    Attributes:
        voter: Registered identity.
        voter_id: Registration id.
        eligibility: True only while APPROVED.
        registration_height: Ledger height at registration.
        status: Lowercase status label (pending, approved or revoked).
        metadata_hash: Hex encoded metadata digest.
    """

    voter: str
    voter_id: int
    eligibility: bool
    registration_height: int
    status: str
    metadata_hash: str

    @classmethod
    def from_record(cls, record: VoterRecord) -> VoterRecordResponse:
        return cls(
            voter=record.voter,
            voter_id=record.voter_id,
            eligibility=record.eligibility,
            registration_height=record.registration_height,
            status=record.status.label,
            metadata_hash=record.metadata_hash.hex(),
        )


class EligibilityResponse(BaseModel):
    """Eligibility of one voter."""

    voter: str
    eligible: bool


class RegistryStatusResponse(BaseModel):
    """Registry-wide settings."""

    admin: str
    paused: bool
    next_id: int


class OfficialStatusResponse(BaseModel):
    """Official membership and resolved role of one identity."""

    identity: str
    is_official: bool
    role: str
