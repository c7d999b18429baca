"""ConsistencyService — assertion consistency wrapped in ServiceResult."""

from __future__ import annotations

from collections.abc import Iterable

from relgraph.config.settings import RelgraphSettings
from relgraph.domain.records import Assertion
from relgraph.engines.consistency import ConsistencyChecker
from relgraph.services.base import BaseService
from relgraph.services.result import ServiceResult
from relgraph.services.telemetry import trace_span, traced


class ConsistencyService(BaseService):
    """Checks whether a fixed set of assertions can all hold."""

    def __init__(
        self,
        assertions: Iterable[Assertion],
        settings: RelgraphSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._assertions = list(assertions)
        self._checker = ConsistencyChecker(self._assertions)

    @traced
    def check(self) -> ServiceResult:
        """Report consistency and, if inconsistent, one offending cycle."""
        with trace_span("cycle_search") as span:
            cycle = self._checker.find_contradiction()
            if span:
                span.annotate("entities", len(self._checker.graph))

        return ServiceResult(
            ok=True,
            op="check",
            data={
                "consistent": cycle is None,
                "assertions": len(self._assertions),
                "entities": len(self._checker.graph),
                "cycle": [a.model_dump(mode="json") for a in cycle or []],
            },
        )
