"""Unit tests for access control gates and role resolution."""

import pytest

from clearvote.domain.errors import (
    NotAuthorizedError,
    RegistryPausedError,
    ZeroAddressError,
)
from clearvote.domain.models.identity import Role, is_zero_address
from clearvote.domain.models.registry_state import RegistryState
from clearvote.domain.services import access_control


@pytest.fixture
def state() -> RegistryState:
    state = RegistryState.initial("ADMIN")
    state.officials.add("OFF")
    return state


class TestRoleResolution:
    def test_admin(self, state: RegistryState) -> None:
        assert access_control.resolve_role(state, "ADMIN") is Role.ADMIN

    def test_official(self, state: RegistryState) -> None:
        assert access_control.resolve_role(state, "OFF") is Role.OFFICIAL

    def test_ordinary(self, state: RegistryState) -> None:
        assert access_control.resolve_role(state, "SOMEONE") is Role.ORDINARY

    def test_admin_takes_precedence_over_official(self, state: RegistryState) -> None:
        """An admin who is also in the official set resolves to ADMIN."""
        state.officials.add("ADMIN")
        assert access_control.resolve_role(state, "ADMIN") is Role.ADMIN

    def test_is_authorized(self, state: RegistryState) -> None:
        assert access_control.is_authorized(state, "ADMIN") is True
        assert access_control.is_authorized(state, "OFF") is True
        assert access_control.is_authorized(state, "SOMEONE") is False


class TestGates:
    def test_require_admin_rejects_official(self, state: RegistryState) -> None:
        with pytest.raises(NotAuthorizedError) as exc_info:
            access_control.require_admin(state, "OFF", "set_paused")
        assert exc_info.value.ERROR_CODE == 100

    def test_require_admin_passes_admin(self, state: RegistryState) -> None:
        access_control.require_admin(state, "ADMIN", "set_paused")

    def test_require_authorized_rejects_ordinary(self, state: RegistryState) -> None:
        with pytest.raises(NotAuthorizedError):
            access_control.require_authorized(state, "SOMEONE", "approve")

    def test_require_not_paused(self, state: RegistryState) -> None:
        access_control.require_not_paused(state, "register")
        state.paused = True
        with pytest.raises(RegistryPausedError):
            access_control.require_not_paused(state, "register")

    @pytest.mark.parametrize("identity", ["", "  "])
    def test_require_identity_rejects_zero_address(self, identity: str) -> None:
        assert is_zero_address(identity)
        with pytest.raises(ZeroAddressError):
            access_control.require_identity(identity, "add_official")

    def test_require_identity_accepts_identity(self) -> None:
        assert not is_zero_address("ST1")
        access_control.require_identity("ST1", "add_official")
