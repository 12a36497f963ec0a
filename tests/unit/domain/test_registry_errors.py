"""Unit tests for registry error classes.

Each error kind carries a stable code, kind name and HTTP status, and
renders RFC 7807 problem details.
"""

import pytest

from clearvote.domain.errors import (
    AlreadyRegisteredError,
    InvalidIdError,
    InvalidStatusError,
    InvalidTargetError,
    NotAuthorizedError,
    NotRegisteredError,
    RegistryError,
    RegistryPausedError,
    ZeroAddressError,
)


class TestErrorCodes:
    """Codes, kinds and statuses of every error."""

    @pytest.mark.parametrize(
        ("error", "code", "kind", "http_status"),
        [
            (NotAuthorizedError("ST1", "approve"), 100, "NotAuthorized", 403),
            (AlreadyRegisteredError("ST1", 1), 101, "AlreadyRegistered", 409),
            (NotRegisteredError("ST1"), 102, "NotRegistered", 404),
            (InvalidStatusError("ST1", "revoked", "approved"), 103, "InvalidStatus", 409),
            (RegistryPausedError("register"), 104, "Paused", 503),
            (ZeroAddressError("add_official"), 105, "ZeroAddress", 422),
            (InvalidTargetError("ST1", "self"), 106, "InvalidTarget", 422),
            (InvalidIdError(5, "too small"), 107, "InvalidId", 422),
        ],
    )
    def test_error_identity(
        self, error: RegistryError, code: int, kind: str, http_status: int
    ) -> None:
        """Every error exposes its code, kind and HTTP status."""
        assert isinstance(error, RegistryError)
        assert error.ERROR_CODE == code
        assert error.KIND == kind
        assert error.HTTP_STATUS == http_status

    def test_paused_message_names_operation(self) -> None:
        """The paused error names the blocked operation."""
        error = RegistryPausedError("register")
        assert "register" in str(error)


class TestSerialization:
    """to_dict and to_rfc7807 output."""

    def test_to_dict(self) -> None:
        error = NotRegisteredError("ST1")
        assert error.to_dict() == {
            "kind": "NotRegistered",
            "error_code": 102,
            "message": error.message,
        }

    def test_to_rfc7807(self) -> None:
        """Problem details carry the URN type, status and error code."""
        error = NotAuthorizedError("ST9", "approve")
        problem = error.to_rfc7807("/v1/registry/voters/ST1/approve")

        assert problem["type"] == "urn:clearvote:registry:NotAuthorized"
        assert problem["title"] == "NotAuthorized"
        assert problem["status"] == 403
        assert problem["instance"] == "/v1/registry/voters/ST1/approve"
        assert problem["error_code"] == 100

    def test_invalid_id_lookup_miss_is_404(self) -> None:
        """An unknown id renders as not found rather than unprocessable."""
        problem = InvalidIdError(42, "unknown", lookup_miss=True).to_rfc7807("/x")
        assert problem["status"] == 404
        assert problem["error_code"] == 107

    def test_invalid_id_reset_is_422(self) -> None:
        problem = InvalidIdError(1, "not forward").to_rfc7807("/x")
        assert problem["status"] == 422
