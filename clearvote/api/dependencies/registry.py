"""Voter registry API dependencies.

The registry service comes from the bootstrap singleton. Tests replace it
with app.dependency_overrides or create_app(service=...).

The caller identity is taken from the X-Caller-Identity header, set by the
authenticating gateway in front of this API.
"""

from typing import Annotated

from fastapi import Header, HTTPException, status

from clearvote.application.services.voter_registry_service import (
    VoterRegistryService,
)
from clearvote.bootstrap.registry import get_registry_service as _get_registry_service

CALLER_HEADER = "X-Caller-Identity"


def get_registry_service() -> VoterRegistryService:
    """Get the registry service instance."""
    return _get_registry_service()


def get_caller_identity(
    x_caller_identity: Annotated[
        str | None,
        Header(description="Authenticated caller identity. Required for mutations."),
    ] = None,
) -> str:
    """Extract the caller identity from header.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if not x_caller_identity or not x_caller_identity.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{CALLER_HEADER} header is required",
        )
    return x_caller_identity.strip()
