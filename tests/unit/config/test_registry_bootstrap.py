"""Unit tests for registry bootstrap wiring."""

from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog

from clearvote.bootstrap.logging import configure_logging
from clearvote.bootstrap.registry import (
    build_audit_sink,
    build_registry_service,
    build_repository,
    get_registry_service,
    reset_registry_dependencies,
    set_registry_service,
)
from clearvote.config import TEST_REGISTRY_CONFIG, RegistryConfig
from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.infrastructure.adapters.audit import JsonLinesAuditEventSink
from clearvote.infrastructure.adapters.persistence import SqlRegistryStateRepository
from clearvote.infrastructure.stubs import (
    InMemoryAuditEventSink,
    InMemoryRegistryStateRepository,
    ManualHeightSource,
)
from tests.helpers.identities import ADMIN, VOTER_A


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for var in ("CLEARVOTE_DATABASE_URL", "CLEARVOTE_AUDIT_LOG_PATH", "CLEARVOTE_ADMIN"):
        monkeypatch.delenv(var, raising=False)
    reset_registry_dependencies()
    yield
    reset_registry_dependencies()


class TestAdapterSelection:
    def test_in_memory_by_default(self) -> None:
        config = RegistryConfig()
        assert isinstance(build_repository(config), InMemoryRegistryStateRepository)
        assert isinstance(build_audit_sink(config), InMemoryAuditEventSink)

    def test_durable_adapters(self, tmp_path: Path) -> None:
        config = RegistryConfig(
            database_url=f"sqlite:///{tmp_path / 'registry.db'}",
            audit_log_path=str(tmp_path / "audit.jsonl"),
        )
        repository = build_repository(config)
        assert isinstance(repository, SqlRegistryStateRepository)
        assert repository.load() is None
        assert isinstance(build_audit_sink(config), JsonLinesAuditEventSink)


class TestBuildRegistryService:
    def test_uses_config(self) -> None:
        heights = ManualHeightSource(33)
        service = build_registry_service(
            RegistryConfig(admin=ADMIN, max_batch_size=7), heights
        )
        assert service.get_admin() == ADMIN
        assert service.max_batch_size == 7
        service.register(VOTER_A, MetadataHash.zero())
        record = service.get_record(VOTER_A)
        assert record is not None
        assert record.registration_height == 33

    def test_initial_height_from_config(self) -> None:
        service = build_registry_service(RegistryConfig(initial_height=9))
        service.register(VOTER_A, MetadataHash.zero())
        record = service.get_record(VOTER_A)
        assert record is not None
        assert record.registration_height == 9

    def test_durable_service_writes_audit_file(self, tmp_path: Path) -> None:
        config = RegistryConfig(
            database_url=f"sqlite:///{tmp_path / 'registry.db'}",
            audit_log_path=str(tmp_path / "audit.jsonl"),
        )
        build_registry_service(config).register(VOTER_A, MetadataHash.zero())

        restarted = build_registry_service(config)
        assert restarted.get_next_id() == 2
        assert (tmp_path / "audit.jsonl").read_text().count("\n") == 1


class TestSingleton:
    def test_singleton_is_reused(self) -> None:
        assert get_registry_service() is get_registry_service()

    def test_set_registry_service(self) -> None:
        custom = build_registry_service(RegistryConfig(admin=VOTER_A))
        set_registry_service(custom)
        assert get_registry_service() is custom


class TestConfigureLogging:
    @pytest.fixture(autouse=True)
    def restore_structlog(self) -> Iterator[None]:
        yield
        structlog.reset_defaults()

    def test_development_config_uses_console(self) -> None:
        configure_logging(TEST_REGISTRY_CONFIG)
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_config_uses_json(self) -> None:
        configure_logging(RegistryConfig(environment="production"))
        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
