"""Caller identities and roles.

Identities are ledger principals carried as plain strings. The ledger
authenticates the caller; the registry only compares identities.
"""

from __future__ import annotations

from enum import Enum

# Type alias for a ledger principal (e.g. "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM")
Identity = str


class Role(Enum):
    """Role a caller resolves to against the current registry state."""

    ADMIN = "admin"
    OFFICIAL = "official"
    ORDINARY = "ordinary"


def is_zero_address(identity: Identity | None) -> bool:
    """Check whether an identity is empty (the zero address).

    Args:
        identity: Identity to check.

    Returns:
        True if the identity is None, empty, or whitespace only.
    """
    return identity is None or not identity.strip()
