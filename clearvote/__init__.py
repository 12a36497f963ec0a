"""
ClearVote - Permissioned Voter Registry

Tracks voters through an eligibility workflow (registration, review,
approval, revocation and metadata updates) gated by a single administrator
and a set of delegated officials.

Registry guarantees:
- Status only moves forward (PENDING -> APPROVED -> REVOKED)
- Registration ids are never reused
- Every successful mutation emits exactly one audit event
- A failed call commits nothing
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
