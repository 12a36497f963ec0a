"""FastAPI application entry point for ClearVote.

Run with:
    uvicorn clearvote.api.main:app
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from clearvote import __version__
from clearvote.api.dependencies.registry import get_registry_service
from clearvote.api.middleware.logging_middleware import LoggingMiddleware
from clearvote.api.routes.registry import router as registry_router
from clearvote.application.services.voter_registry_service import (
    VoterRegistryService,
)
from clearvote.bootstrap.logging import configure_logging
from clearvote.config.registry_config import RegistryConfig
from clearvote.domain.exceptions import InvalidInputError, RegistryError

HTTP_422_UNPROCESSABLE = 422

logger = structlog.get_logger()


async def registry_error_handler(request: Request, exc: RegistryError) -> JSONResponse:
    """Render a RegistryError as RFC 7807 problem details."""
    problem = exc.to_rfc7807(str(request.url.path))
    return JSONResponse(status_code=problem["status"], content={"detail": problem})


async def invalid_input_error_handler(
    request: Request, exc: InvalidInputError
) -> JSONResponse:
    """Render malformed input rejected by the service as 422.

    Other ValueErrors (for example inconsistent persisted state found while
    building the service) are server faults and fall through to a 500.
    """
    return JSONResponse(
        status_code=HTTP_422_UNPROCESSABLE,
        content={
            "detail": {
                "type": "urn:clearvote:registry:InvalidInput",
                "title": "InvalidInput",
                "status": HTTP_422_UNPROCESSABLE,
                "detail": str(exc),
                "instance": str(request.url.path),
            }
        },
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    config = RegistryConfig.from_environment()
    configure_logging(config)
    logger.info("clearvote_api_starting", environment=config.environment)
    yield


def create_app(service: VoterRegistryService | None = None) -> FastAPI:
    """Create the FastAPI application.

    Args:
        service: Registry service to serve; the bootstrap singleton built
            from the environment is used when omitted.
    """
    app = FastAPI(
        title="ClearVote Registry API",
        description="Permissioned voter registry",
        version=__version__,
        lifespan=lifespan,
    )
    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(RegistryError, registry_error_handler)
    app.add_exception_handler(InvalidInputError, invalid_input_error_handler)
    app.include_router(registry_router)
    if service is not None:
        app.dependency_overrides[get_registry_service] = lambda: service
    return app


app = create_app()
