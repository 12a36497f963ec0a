"""Bootstrap wiring for the voter registry service.

Selects adapters from RegistryConfig:
- CLEARVOTE_DATABASE_URL set: SqlRegistryStateRepository (schema created on startup)
- otherwise: InMemoryRegistryStateRepository
- CLEARVOTE_AUDIT_LOG_PATH set: JsonLinesAuditEventSink
- otherwise: InMemoryAuditEventSink

The height source is always a ManualHeightSource starting at
CLEARVOTE_INITIAL_HEIGHT; the host advances it as the ledger grows.
"""

from __future__ import annotations

from structlog import get_logger

from clearvote.application.ports.audit_event_sink import AuditEventSink
from clearvote.application.ports.registry_state_repository import (
    RegistryStateRepository,
)
from clearvote.application.services.audit_emitter import AuditEmitter
from clearvote.application.services.voter_registry_service import (
    VoterRegistryService,
)
from clearvote.config.registry_config import RegistryConfig
from clearvote.infrastructure.adapters.audit.json_lines_audit_event_sink import (
    JsonLinesAuditEventSink,
)
from clearvote.infrastructure.adapters.persistence.sql_registry_state_repository import (
    SqlRegistryStateRepository,
)
from clearvote.infrastructure.stubs.audit_event_sink_stub import InMemoryAuditEventSink
from clearvote.infrastructure.stubs.height_source_stub import ManualHeightSource
from clearvote.infrastructure.stubs.registry_state_repository_stub import (
    InMemoryRegistryStateRepository,
)

logger = get_logger()

_registry_service: VoterRegistryService | None = None
_height_source: ManualHeightSource | None = None


def build_repository(config: RegistryConfig) -> RegistryStateRepository:
    """Create the state repository selected by the config."""
    if config.database_url is None:
        return InMemoryRegistryStateRepository()
    repository = SqlRegistryStateRepository.from_url(config.database_url)
    repository.create_schema()
    return repository


def build_audit_sink(config: RegistryConfig) -> AuditEventSink:
    """Create the audit sink selected by the config."""
    if config.audit_log_path is None:
        return InMemoryAuditEventSink()
    return JsonLinesAuditEventSink(config.audit_log_path)


def build_registry_service(
    config: RegistryConfig,
    height_source: ManualHeightSource | None = None,
) -> VoterRegistryService:
    """Wire a registry service from configuration.

    Args:
        config: Deployment configuration.
        height_source: Height source to share with the host; a new one
            starting at config.initial_height is created when omitted.

    Returns:
        A ready VoterRegistryService.
    """
    if height_source is None:
        height_source = ManualHeightSource(config.initial_height)
    service = VoterRegistryService(
        repository=build_repository(config),
        height_source=height_source,
        emitter=AuditEmitter(build_audit_sink(config), height_source),
        initial_admin=config.admin,
        max_batch_size=config.max_batch_size,
    )
    logger.info(
        "registry_service_built",
        durable=config.is_durable,
        audit_log=config.audit_log_path,
        max_batch_size=config.max_batch_size,
    )
    return service


def get_height_source() -> ManualHeightSource:
    """Get the process-wide height source instance."""
    global _height_source
    if _height_source is None:
        _height_source = ManualHeightSource(RegistryConfig.from_environment().initial_height)
    return _height_source


def get_registry_service() -> VoterRegistryService:
    """Get the process-wide registry service, built from the environment."""
    global _registry_service
    if _registry_service is None:
        _registry_service = build_registry_service(
            RegistryConfig.from_environment(), get_height_source()
        )
    return _registry_service


def set_registry_service(service: VoterRegistryService) -> None:
    """Set custom registry service for testing."""
    global _registry_service
    _registry_service = service


def reset_registry_dependencies() -> None:
    """Reset all singleton instances for testing."""
    global _registry_service, _height_source
    _registry_service = None
    _height_source = None
