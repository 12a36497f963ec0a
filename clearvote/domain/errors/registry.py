"""Voter registry domain errors.

This module defines one error class per failure kind of the registry:
- NotAuthorizedError: caller lacks the required role
- AlreadyRegisteredError: duplicate registration
- NotRegisteredError: target identity has no record
- InvalidStatusError: transition illegal from the current status
- RegistryPausedError: system-wide pause in effect
- ZeroAddressError: empty identity supplied where one is required
- InvalidTargetError: identity value rejected for the operation
- InvalidIdError: id reset not strictly increasing, or id lookup miss

Error codes 100-104 match the deployed contract so that indexers reading
either source agree on the meaning of a code.
"""

from __future__ import annotations

from typing import Any

from clearvote.domain.exceptions import RegistryError


class NotAuthorizedError(RegistryError):
    """Raised when the caller lacks the role an operation requires.

    Example:
        >>> raise NotAuthorizedError(caller="ST3...", operation="approve")
    """

    ERROR_CODE = 100
    KIND = "NotAuthorized"
    HTTP_STATUS = 403

    def __init__(self, caller: str, operation: str, required_role: str = "") -> None:
        self.caller = caller
        self.operation = operation
        self.required_role = required_role
        detail = f" (requires {required_role})" if required_role else ""
        super().__init__(f"Caller {caller!r} is not authorized to {operation}{detail}")

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["caller"] = self.caller
        result["operation"] = self.operation
        return result


class AlreadyRegisteredError(RegistryError):
    """Raised when an identity that already has a record registers again."""

    ERROR_CODE = 101
    KIND = "AlreadyRegistered"
    HTTP_STATUS = 409

    def __init__(self, voter: str, voter_id: int) -> None:
        self.voter = voter
        self.voter_id = voter_id
        super().__init__(f"Voter {voter!r} is already registered with id {voter_id}")


class NotRegisteredError(RegistryError):
    """Raised when an operation targets an identity without a record."""

    ERROR_CODE = 102
    KIND = "NotRegistered"
    HTTP_STATUS = 404

    def __init__(self, voter: str) -> None:
        self.voter = voter
        super().__init__(f"Voter {voter!r} is not registered")


class InvalidStatusError(RegistryError):
    """Raised when the requested transition is illegal from the current status.

    Attributes:
        voter: Identity whose record was targeted.
        current_status: Status label the record had at the time of the call.
        attempted_status: Status label the call tried to reach.
    """

    ERROR_CODE = 103
    KIND = "InvalidStatus"
    HTTP_STATUS = 409

    def __init__(self, voter: str, current_status: str, attempted_status: str) -> None:
        self.voter = voter
        self.current_status = current_status
        self.attempted_status = attempted_status
        super().__init__(
            f"Voter {voter!r} cannot move from {current_status} to {attempted_status}"
        )

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        result["current_status"] = self.current_status
        result["attempted_status"] = self.attempted_status
        return result


class RegistryPausedError(RegistryError):
    """Raised when a non-admin mutation is attempted while paused.

    This error is expected during a pause. Do NOT retry until the
    administrator unpauses the registry.
    """

    ERROR_CODE = 104
    KIND = "Paused"
    HTTP_STATUS = 503

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Registry is paused - {operation} blocked")


class ZeroAddressError(RegistryError):
    """Raised when an empty identity is supplied as an admin or official."""

    ERROR_CODE = 105
    KIND = "ZeroAddress"
    HTTP_STATUS = 422

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} requires a non-empty identity")


class InvalidTargetError(RegistryError):
    """Raised when the target identity is rejected (e.g. admin transfer to self)."""

    ERROR_CODE = 106
    KIND = "InvalidTarget"
    HTTP_STATUS = 422

    def __init__(self, target: str, reason: str) -> None:
        self.target = target
        self.reason = reason
        super().__init__(f"Invalid target {target!r}: {reason}")


class InvalidIdError(RegistryError):
    """Raised for an id reset that does not move forward, or an unknown id."""

    ERROR_CODE = 107
    KIND = "InvalidId"
    HTTP_STATUS = 422

    def __init__(self, voter_id: int, reason: str, *, lookup_miss: bool = False) -> None:
        self.voter_id = voter_id
        self.reason = reason
        self.lookup_miss = lookup_miss
        super().__init__(f"Invalid id {voter_id}: {reason}")

    def to_rfc7807(self, instance: str) -> dict[str, Any]:
        problem = super().to_rfc7807(instance)
        if self.lookup_miss:
            problem["status"] = 404
        return problem
