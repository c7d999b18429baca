"""BaseService — shared foundation for the relgraph services.

Every service receives :class:`RelgraphSettings` at construction time
and owns exactly one engine. Engine errors a caller can act on are
converted to ``ok=False`` results by :meth:`BaseService._error_result`.
"""

from __future__ import annotations

import logging

from relgraph.config.settings import RelgraphSettings
from relgraph.domain.errors import (
    EntityNotFoundError,
    OriginNotFoundError,
    PaperNotFoundError,
    RelgraphError,
)
from relgraph.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ContactService(BaseService):
            def trace(self, person: str, contagion_time: int) -> ServiceResult:
                try:
                    infected = self._tracer.contact_trace(person, contagion_time)
                except EntityNotFoundError as exc:
                    return self._error_result("trace", exc)
                ...
    """

    def __init__(self, settings: RelgraphSettings | None = None) -> None:
        self._settings = settings if settings is not None else RelgraphSettings()

    @property
    def settings(self) -> RelgraphSettings:
        return self._settings

    @staticmethod
    def _error_result(op: str, exc: RelgraphError) -> ServiceResult:
        """Map an engine exception to a structured error result."""
        detail: dict[str, str] = {}
        if isinstance(exc, EntityNotFoundError):
            code = "NOT_FOUND"
            detail["entity"] = exc.entity
        elif isinstance(exc, PaperNotFoundError):
            code = "NOT_FOUND"
            detail["paper"] = exc.paper
        elif isinstance(exc, OriginNotFoundError):
            code = "ORIGIN_NOT_FOUND"
            detail["origin"] = exc.origin
        else:
            code = "ERROR"
        logger.debug("%s failed: %s", op, exc)
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=str(exc), detail=detail),
        )
