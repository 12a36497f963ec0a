"""SQL registry state repository (SQLAlchemy).

Persists the registry layout in four tables:
- registry_meta: single row with admin, paused flag and next id
- registry_officials: official identities
- voter_records: one row per voter (identity is the primary key)
- voter_ids: reverse index id -> identity, insert-only

Works with SQLite and PostgreSQL URLs. Each save runs in one transaction,
so a crash never leaves a half-written unit of work.

Usage:
    repository = SqlRegistryStateRepository.from_url("sqlite:///registry.db")
    repository.create_schema()
    state = repository.load()
"""

from __future__ import annotations

from collections.abc import Collection

from sqlalchemy import Connection, Engine, create_engine, text
from structlog import get_logger

from clearvote.application.ports.registry_state_repository import (
    RegistryStateRepository,
)
from clearvote.domain.models.identity import Identity
from clearvote.domain.models.metadata_hash import MetadataHash
from clearvote.domain.models.registry_state import RegistryState
from clearvote.domain.models.voter_record import VoterRecord, VoterStatus

logger = get_logger()

_SCHEMA_STATEMENTS: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS registry_meta (
        singleton INTEGER PRIMARY KEY CHECK (singleton = 1),
        admin TEXT NOT NULL,
        paused BOOLEAN NOT NULL,
        next_id BIGINT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS registry_officials (
        identity TEXT PRIMARY KEY
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS voter_records (
        voter TEXT PRIMARY KEY,
        voter_id BIGINT NOT NULL UNIQUE,
        eligibility BOOLEAN NOT NULL,
        registration_height BIGINT NOT NULL,
        status SMALLINT NOT NULL,
        metadata_hash TEXT NOT NULL
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS voter_ids (
        voter_id BIGINT PRIMARY KEY,
        voter TEXT NOT NULL
    )
    """,
)


class SqlRegistryStateRepository(RegistryStateRepository):
    """Durable registry state backed by a SQLAlchemy engine."""

    def __init__(self, engine: Engine) -> None:
        """Initialize with an existing engine.

        Args:
            engine: SQLAlchemy engine (SQLite or PostgreSQL).
        """
        self._engine = engine
        self._log = logger.bind(service="sql_registry_state_repository")

    @classmethod
    def from_url(cls, url: str) -> SqlRegistryStateRepository:
        """Create a repository from a database URL.

        postgres:// URLs are normalized to the postgresql:// scheme
        SQLAlchemy expects.
        """
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql://", 1)

        # Mask password in logs
        log_url = url
        if "@" in url:
            before_at, after_at = url.split("@", 1)
            if before_at.count(":") > 1:
                user_part = before_at.rsplit(":", 1)[0]
                log_url = f"{user_part}:***@{after_at}"
        logger.info("creating_database_engine", url=log_url)

        return cls(create_engine(url, pool_pre_ping=True))

    @property
    def engine(self) -> Engine:
        return self._engine

    def create_schema(self) -> None:
        """Create the registry tables if they do not exist (idempotent)."""
        with self._engine.begin() as conn:
            for statement in _SCHEMA_STATEMENTS:
                conn.execute(text(statement))
        self._log.info("registry_schema_ready", dialect=self._engine.dialect.name)

    def load(self) -> RegistryState | None:
        with self._engine.connect() as conn:
            meta = conn.execute(
                text("SELECT admin, paused, next_id FROM registry_meta WHERE singleton = 1")
            ).fetchone()
            if meta is None:
                return None

            officials = {
                row[0]
                for row in conn.execute(text("SELECT identity FROM registry_officials"))
            }
            records = {
                row[0]: _record_from_row(row)
                for row in conn.execute(
                    text("""
                        SELECT voter, voter_id, eligibility, registration_height,
                               status, metadata_hash
                        FROM voter_records
                    """)
                )
            }
            id_index = {
                int(row[0]): row[1]
                for row in conn.execute(text("SELECT voter_id, voter FROM voter_ids"))
            }

        self._log.debug("registry_state_loaded", voters=len(records))
        return RegistryState(
            admin=meta[0],
            paused=bool(meta[1]),
            next_id=int(meta[2]),
            officials=officials,
            records=records,
            id_index=id_index,
        )

    def save(self, state: RegistryState, touched_voters: Collection[Identity]) -> None:
        with self._engine.begin() as conn:
            self._save_meta(conn, state)
            self._save_officials(conn, state)
            for voter in dict.fromkeys(touched_voters):
                record = state.records.get(voter)
                if record is None:
                    continue
                self._save_record(conn, record)
                if state.id_index.get(record.voter_id) == voter:
                    self._save_id_entry(conn, record.voter_id, voter)

    def _save_meta(self, conn: Connection, state: RegistryState) -> None:
        conn.execute(
            text("""
                INSERT INTO registry_meta (singleton, admin, paused, next_id)
                VALUES (1, :admin, :paused, :next_id)
                ON CONFLICT (singleton) DO UPDATE SET
                    admin = excluded.admin,
                    paused = excluded.paused,
                    next_id = excluded.next_id
            """),
            {"admin": state.admin, "paused": state.paused, "next_id": state.next_id},
        )

    def _save_officials(self, conn: Connection, state: RegistryState) -> None:
        conn.execute(text("DELETE FROM registry_officials"))
        if state.officials:
            conn.execute(
                text("INSERT INTO registry_officials (identity) VALUES (:identity)"),
                [{"identity": official} for official in sorted(state.officials)],
            )

    def _save_record(self, conn: Connection, record: VoterRecord) -> None:
        conn.execute(
            text("""
                INSERT INTO voter_records (
                    voter, voter_id, eligibility, registration_height,
                    status, metadata_hash
                )
                VALUES (
                    :voter, :voter_id, :eligibility, :registration_height,
                    :status, :metadata_hash
                )
                ON CONFLICT (voter) DO UPDATE SET
                    eligibility = excluded.eligibility,
                    status = excluded.status,
                    metadata_hash = excluded.metadata_hash
            """),
            {
                "voter": record.voter,
                "voter_id": record.voter_id,
                "eligibility": record.eligibility,
                "registration_height": record.registration_height,
                "status": record.status.value,
                "metadata_hash": record.metadata_hash.hex(),
            },
        )

    def _save_id_entry(self, conn: Connection, voter_id: int, voter: Identity) -> None:
        conn.execute(
            text("""
                INSERT INTO voter_ids (voter_id, voter)
                VALUES (:voter_id, :voter)
                ON CONFLICT (voter_id) DO NOTHING
            """),
            {"voter_id": voter_id, "voter": voter},
        )


def _record_from_row(row: tuple) -> VoterRecord:
    return VoterRecord(
        voter=row[0],
        voter_id=int(row[1]),
        eligibility=bool(row[2]),
        registration_height=int(row[3]),
        status=VoterStatus(int(row[4])),
        metadata_hash=MetadataHash.from_hex(row[5]),
    )
