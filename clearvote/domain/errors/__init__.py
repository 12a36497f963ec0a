"""Domain errors for ClearVote.

Registry failures inherit from RegistryError; malformed arguments raise
InvalidInputError.
"""

from clearvote.domain.errors.registry import (
    AlreadyRegisteredError,
    InvalidIdError,
    InvalidStatusError,
    InvalidTargetError,
    NotAuthorizedError,
    NotRegisteredError,
    RegistryPausedError,
    ZeroAddressError,
)
from clearvote.domain.exceptions import InvalidInputError, RegistryError

__all__: list[str] = [
    "AlreadyRegisteredError",
    "InvalidIdError",
    "InvalidInputError",
    "InvalidStatusError",
    "InvalidTargetError",
    "NotAuthorizedError",
    "NotRegisteredError",
    "RegistryError",
    "RegistryPausedError",
    "ZeroAddressError",
]
