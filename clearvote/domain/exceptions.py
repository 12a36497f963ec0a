"""Base exception classes for the ClearVote domain layer."""

from __future__ import annotations

from typing import Any


class RegistryError(Exception):
    """Base exception for all registry errors.

    Every failed registry call raises a subclass of this error. A raised
    RegistryError means the call committed nothing: no state change, no
    audit event.

    Subclasses define:
        ERROR_CODE: Numeric code compatible with the on-ledger contract.
        KIND: Stable error kind name reported to callers.
        HTTP_STATUS: Status used when the error crosses the HTTP boundary.
    """

    ERROR_CODE: int = 0
    KIND: str = "RegistryError"
    HTTP_STATUS: int = 400

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        self.message = message
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a serializable dictionary for logs and responses."""
        return {
            "kind": self.KIND,
            "error_code": self.ERROR_CODE,
            "message": self.message,
        }

    def to_rfc7807(self, instance: str) -> dict[str, Any]:
        """Convert to RFC 7807 problem details format.

        Args:
            instance: The request instance URI (e.g., /v1/registry/voters).

        Returns:
            RFC 7807 compliant error body.
        """
        return {
            "type": f"urn:clearvote:registry:{self.KIND}",
            "title": self.KIND,
            "status": self.HTTP_STATUS,
            "detail": self.message,
            "instance": instance,
            "error_code": self.ERROR_CODE,
        }


class InvalidInputError(ValueError):
    """Raised when a caller supplies a malformed argument.

    Covers values no registry state could accept (a metadata hash of the wrong
    size, a non-positive id, an oversize batch). Unlike RegistryError it
    carries no contract error code, and it is the only ValueError the HTTP
    layer reports as a client error.
    """
