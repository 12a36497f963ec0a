"""Logging mixin shared by the registry services.

Services call `_init_logger()` once in `__init__`, then open an
operation-scoped logger per call:

    log = self._log_operation("approve", caller=caller, voter=voter)
    with self._rejections_logged(log):
        ...
"""

from collections.abc import Iterator
from contextlib import contextmanager

import structlog

from clearvote.domain.exceptions import RegistryError
from clearvote.infrastructure.observability.logging import get_logger_for_service


class LoggingMixin:
    """Structured logging for registry services.

    Attributes:
        _log: Logger bound with the concrete service class name.
    """

    _log: structlog.BoundLogger

    def _init_logger(self, component: str = "registry") -> None:
        self._log = get_logger_for_service(self.__class__.__name__, component)

    def _log_operation(self, operation: str, **context: object) -> structlog.BoundLogger:
        """Bind the operation name and call context (caller, voter, ...).

        The correlation id is added at render time by the observability
        processor, so it is not bound here.
        """
        return self._log.bind(operation=operation, **context)

    @contextmanager
    def _rejections_logged(self, log: structlog.BoundLogger) -> Iterator[None]:
        """Log a RegistryError raised in the block as a rejection, then re-raise.

        Rejections are expected outcomes (wrong role, paused registry, bad
        status), so they go out at info without a traceback.
        """
        try:
            yield
        except RegistryError as exc:
            log.info("operation_rejected", kind=exc.KIND, error_code=exc.ERROR_CODE)
            raise
