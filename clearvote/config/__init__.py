"""Configuration for ClearVote."""

from clearvote.config.registry_config import (
    DEFAULT_ADMIN,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__ = ["DEFAULT_ADMIN", "TEST_REGISTRY_CONFIG", "RegistryConfig"]
