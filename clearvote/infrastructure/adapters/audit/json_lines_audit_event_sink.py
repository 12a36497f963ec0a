"""JSON-lines audit event sink.

Appends one canonical JSON object per emitted event to a file:

    {"event":"voter-registered","height":100,"id":1,"metadata-hash":"...","voter":"ST2..."}

The file is opened in append mode for every event, so several processes
tailing or rotating it never see a partially rewritten history.
"""

from __future__ import annotations

import json
import threading
from pathlib import Path
from typing import Any

from structlog import get_logger

from clearvote.application.ports.audit_event_sink import AuditEventSink
from clearvote.domain.events.audit_event import AuditEvent, canonical_json

logger = get_logger()


class JsonLinesAuditEventSink(AuditEventSink):
    """Append-only audit log file, one event per line."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._lock = threading.Lock()
        self._log = logger.bind(service="json_lines_audit_event_sink", path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    def append(self, event: AuditEvent) -> None:
        line = canonical_json(event.to_record()) + b"\n"
        with self._lock, self._path.open("ab") as handle:
            handle.write(line)
        self._log.debug("audit_event_written", event_type=event.event_type)

    def read_records(self) -> list[dict[str, Any]]:
        """Read back every written record, oldest first.

        Returns:
            Decoded records; empty if the file does not exist yet.
        """
        if not self._path.exists():
            return []
        with self._path.open("r", encoding="utf-8") as handle:
            return [json.loads(line) for line in handle if line.strip()]
