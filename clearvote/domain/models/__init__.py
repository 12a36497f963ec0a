"""Domain models for the voter registry."""

from clearvote.domain.models.identity import Identity, Role, is_zero_address
from clearvote.domain.models.metadata_hash import METADATA_HASH_SIZE, MetadataHash
from clearvote.domain.models.registry_state import FIRST_VOTER_ID, RegistryState
from clearvote.domain.models.voter_record import VoterRecord, VoterStatus

__all__ = [
    "FIRST_VOTER_ID",
    "METADATA_HASH_SIZE",
    "Identity",
    "MetadataHash",
    "RegistryState",
    "Role",
    "VoterRecord",
    "VoterStatus",
    "is_zero_address",
]
