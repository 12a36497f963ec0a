"""Access control for the voter registry.

Role resolution is a pure function of the current admin and official set.
Every mutating registry call goes through the gates in this module before
touching any record, so role rules live in one place.

Roles:
    ADMIN: the single administrator (takes precedence over OFFICIAL)
    OFFICIAL: identities delegated approve/revoke authority
    ORDINARY: everyone else, limited to self-service on their own record
"""

from __future__ import annotations

from clearvote.domain.errors.registry import (
    NotAuthorizedError,
    RegistryPausedError,
    ZeroAddressError,
)
from clearvote.domain.models.identity import Identity, Role, is_zero_address
from clearvote.domain.models.registry_state import RegistryState


def is_admin(state: RegistryState, caller: Identity) -> bool:
    """Check whether the caller is the administrator."""
    return caller == state.admin


def is_official(state: RegistryState, caller: Identity) -> bool:
    """Check whether the caller holds delegated official authority."""
    return caller in state.officials


def is_authorized(state: RegistryState, caller: Identity) -> bool:
    """Check whether the caller may act on other identities' records."""
    return is_admin(state, caller) or is_official(state, caller)


def resolve_role(state: RegistryState, caller: Identity) -> Role:
    """Resolve the caller's role against the current state.

    Args:
        state: Current registry state.
        caller: Authenticated caller identity.

    Returns:
        ADMIN, OFFICIAL or ORDINARY.
    """
    if is_admin(state, caller):
        return Role.ADMIN
    if is_official(state, caller):
        return Role.OFFICIAL
    return Role.ORDINARY


def require_not_paused(state: RegistryState, operation: str) -> None:
    """Pause gate for every non-admin mutation.

    Raises:
        RegistryPausedError: If the registry is paused.
    """
    if state.paused:
        raise RegistryPausedError(operation)


def require_admin(state: RegistryState, caller: Identity, operation: str) -> None:
    """Role gate for admin-only operations.

    Raises:
        NotAuthorizedError: If the caller is not the admin.
    """
    if not is_admin(state, caller):
        raise NotAuthorizedError(caller, operation, required_role=Role.ADMIN.value)


def require_authorized(state: RegistryState, caller: Identity, operation: str) -> None:
    """Role gate for operations on other identities' records.

    Raises:
        NotAuthorizedError: If the caller is neither admin nor official.
    """
    if not is_authorized(state, caller):
        raise NotAuthorizedError(caller, operation, required_role="admin or official")


def require_identity(identity: Identity, operation: str) -> None:
    """Reject the zero address as an admin or official value.

    Raises:
        ZeroAddressError: If the identity is empty.
    """
    if is_zero_address(identity):
        raise ZeroAddressError(operation)
