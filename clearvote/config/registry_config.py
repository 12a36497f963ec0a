"""Voter registry configuration.

Environment Variables:
- CLEARVOTE_ADMIN: Admin identity of a fresh registry
  (default: ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM)
- CLEARVOTE_MAX_BATCH_SIZE: Upper bound on batch call length (default: 100)
- CLEARVOTE_INITIAL_HEIGHT: Starting ledger height (default: 0)
- CLEARVOTE_DATABASE_URL: SQLAlchemy URL; unset keeps state in memory
- CLEARVOTE_AUDIT_LOG_PATH: JSON-lines audit file; unset keeps events in memory
- CLEARVOTE_ENVIRONMENT: "production" for JSON logs (default: production)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_ADMIN = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
DEFAULT_MAX_BATCH_SIZE = 100
DEFAULT_ENVIRONMENT = "production"


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_optional_env(key: str) -> str | None:
    """Get a string environment variable, treating blank as unset."""
    value = os.environ.get(key, "").strip()
    return value or None


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for one registry deployment.

    Attributes:
        admin: Admin identity used only when no persisted state exists.
        max_batch_size: Upper bound on batch_approve/batch_revoke length.
        initial_height: Starting height of the manual height source.
        database_url: SQLAlchemy URL for durable state, or None for in-memory.
        audit_log_path: Path of the JSON-lines audit log, or None for in-memory.
        environment: Logging renderer selection.
    """

    admin: str = DEFAULT_ADMIN
    max_batch_size: int = DEFAULT_MAX_BATCH_SIZE
    initial_height: int = 0
    database_url: str | None = None
    audit_log_path: str | None = None
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.admin:
            raise ValueError("admin must be a non-empty identity")
        if self.max_batch_size < 1:
            raise ValueError(
                f"max_batch_size must be positive, got {self.max_batch_size}"
            )
        if self.initial_height < 0:
            raise ValueError(
                f"initial_height must be non-negative, got {self.initial_height}"
            )

    @property
    def is_durable(self) -> bool:
        """Whether registry state survives a restart."""
        return self.database_url is not None

    @classmethod
    def from_environment(cls) -> RegistryConfig:
        """Create config from environment variables with defaults.

        Returns:
            RegistryConfig with values from environment or defaults.

        Raises:
            ValueError: If a set value is out of range.
        """
        return cls(
            admin=os.environ.get("CLEARVOTE_ADMIN", DEFAULT_ADMIN).strip(),
            max_batch_size=_get_int_env(
                "CLEARVOTE_MAX_BATCH_SIZE", DEFAULT_MAX_BATCH_SIZE
            ),
            initial_height=_get_int_env("CLEARVOTE_INITIAL_HEIGHT", 0),
            database_url=_get_optional_env("CLEARVOTE_DATABASE_URL"),
            audit_log_path=_get_optional_env("CLEARVOTE_AUDIT_LOG_PATH"),
            environment=os.environ.get("CLEARVOTE_ENVIRONMENT", DEFAULT_ENVIRONMENT),
        )


# In-memory config for unit tests
TEST_REGISTRY_CONFIG = RegistryConfig(max_batch_size=10, environment="development")
