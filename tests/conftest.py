"""
Pytest configuration and shared fixtures for ClearVote tests.

Testing Standards:
- Unit tests go in tests/unit/<layer>/
- Services are wired with the in-memory stubs from clearvote.infrastructure.stubs
- Files (SQLite databases, JSON-lines logs) live under tmp_path
"""

import pytest

from clearvote.application.services.audit_emitter import AuditEmitter
from clearvote.application.services.voter_registry_service import (
    VoterRegistryService,
)
from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.infrastructure.stubs import (
    InMemoryAuditEventSink,
    InMemoryRegistryStateRepository,
    ManualHeightSource,
)
from tests.helpers.identities import ADMIN, INITIAL_HEIGHT, OFFICIAL


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from clearvote import __version__

    return __version__


@pytest.fixture
def metadata_hash() -> MetadataHash:
    """A non-zero 32-byte metadata digest."""
    return MetadataHash(bytes(range(32)))


@pytest.fixture
def other_metadata_hash() -> MetadataHash:
    """A second digest distinct from metadata_hash."""
    return MetadataHash(b"\xaa" * 32)


@pytest.fixture
def height_source() -> ManualHeightSource:
    return ManualHeightSource(INITIAL_HEIGHT)


@pytest.fixture
def sink() -> InMemoryAuditEventSink:
    return InMemoryAuditEventSink()


@pytest.fixture
def repository() -> InMemoryRegistryStateRepository:
    return InMemoryRegistryStateRepository()


@pytest.fixture
def service(
    repository: InMemoryRegistryStateRepository,
    height_source: ManualHeightSource,
    sink: InMemoryAuditEventSink,
) -> VoterRegistryService:
    """Fresh registry administered by ADMIN, max batch size 10."""
    return VoterRegistryService(
        repository=repository,
        height_source=height_source,
        emitter=AuditEmitter(sink, height_source),
        initial_admin=ADMIN,
        max_batch_size=10,
    )


@pytest.fixture
def staffed_service(
    service: VoterRegistryService, sink: InMemoryAuditEventSink
) -> VoterRegistryService:
    """Registry with OFFICIAL appointed; the sink starts empty."""
    service.add_official(ADMIN, OFFICIAL)
    sink.clear()
    return service
