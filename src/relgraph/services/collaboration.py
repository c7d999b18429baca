"""CollaborationService — collaboration distances wrapped in ServiceResult.

The engine is built lazily on first query, so a missing origin surfaces
as an ``ORIGIN_NOT_FOUND`` result from whichever query runs first rather
than as an exception at service construction.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from typing import Any

import networkx as nx

from relgraph.config.settings import RelgraphSettings
from relgraph.domain.errors import (
    EntityNotFoundError,
    OriginNotFoundError,
    PaperNotFoundError,
)
from relgraph.domain.records import CoAuthorship
from relgraph.engines.collaboration import CollaborationDistanceEngine
from relgraph.services.base import BaseService
from relgraph.services.result import ServiceError, ServiceResult
from relgraph.services.telemetry import trace_span, traced


class CollaborationService(BaseService):
    """Queries over a co-authorship record set."""

    def __init__(
        self,
        records: Iterable[CoAuthorship],
        settings: RelgraphSettings | None = None,
    ) -> None:
        super().__init__(settings)
        self._records = list(records)
        self._engine: CollaborationDistanceEngine | None = None

    @property
    def engine(self) -> CollaborationDistanceEngine:
        """Return the engine, building it on first access.

        Raises:
            OriginNotFoundError: If the configured origin is not in the records.
        """
        if self._engine is None:
            with trace_span("build_engine") as span:
                self._engine = CollaborationDistanceEngine(
                    self._records, origin=self._settings.collaboration.origin
                )
                if span:
                    span.annotate("authors", len(self._engine.graph))
                    span.annotate("edges", self._engine.graph.edge_count)
        return self._engine

    # ------------------------------------------------------------------
    # distance — hop and weighted distance of one entity
    # ------------------------------------------------------------------

    @traced
    def distance(self, entity: str) -> ServiceResult:
        """Hop and weighted distance from the origin.

        Both are None when *entity* is unreachable.
        """
        try:
            engine = self.engine
            hops = engine.distance_of(entity)
            weighted = engine.weighted_distance_of(entity)
        except (EntityNotFoundError, OriginNotFoundError) as exc:
            return self._error_result("distance", exc)

        reachable = not math.isinf(weighted)
        return ServiceResult(
            ok=True,
            op="distance",
            data={
                "entity": entity,
                "origin": engine.origin,
                "reachable": reachable,
                "hops": hops if reachable else None,
                "weighted": round(weighted, 6) if reachable else None,
            },
        )

    # ------------------------------------------------------------------
    # papers / collaborators — one-hop neighbourhood
    # ------------------------------------------------------------------

    @traced
    def papers(self, entity: str) -> ServiceResult:
        try:
            papers = self.engine.papers_of(entity)
        except (EntityNotFoundError, OriginNotFoundError) as exc:
            return self._error_result("papers", exc)
        return ServiceResult(
            ok=True,
            op="papers",
            data={"entity": entity, "count": len(papers), "items": sorted(papers)},
        )

    @traced
    def collaborators(self, entity: str) -> ServiceResult:
        try:
            collaborators = self.engine.collaborators_of(entity)
        except (EntityNotFoundError, OriginNotFoundError) as exc:
            return self._error_result("collaborators", exc)
        return ServiceResult(
            ok=True,
            op="collaborators",
            data={"entity": entity, "count": len(collaborators), "items": sorted(collaborators)},
        )

    # ------------------------------------------------------------------
    # average — mean author distance of a paper
    # ------------------------------------------------------------------

    @traced
    def average(self, paper: str) -> ServiceResult:
        try:
            avg = self.engine.average_distance_of(paper)
        except (PaperNotFoundError, OriginNotFoundError) as exc:
            return self._error_result("average", exc)

        warnings: list[str] = []
        if math.isinf(avg):
            warnings.append(f"Paper '{paper}' has authors unreachable from the origin")
        return ServiceResult(
            ok=True,
            op="average",
            data={"paper": paper, "average": None if math.isinf(avg) else avg},
            warnings=warnings,
        )

    # ------------------------------------------------------------------
    # summary — whole-graph connectivity
    # ------------------------------------------------------------------

    @traced
    def summary(self) -> ServiceResult:
        try:
            engine = self.engine
        except OriginNotFoundError as exc:
            return self._error_result("summary", exc)

        unreachable = [e for e in engine.entities() if math.isinf(engine.weighted_distance_of(e))]
        return ServiceResult(
            ok=True,
            op="summary",
            data={
                "origin": engine.origin,
                "authors": len(engine.graph),
                "edges": engine.graph.edge_count,
                "connected_to_all": engine.is_origin_connected_to_all(),
                "unreachable": unreachable,
            },
        )

    # ------------------------------------------------------------------
    # chain — one shortest co-authorship chain from the origin
    # ------------------------------------------------------------------

    @traced
    def chain(self, entity: str) -> ServiceResult:
        """Find one minimum-hop chain of co-authors from the origin to *entity*.

        Each step after the first names a paper linking it to the previous
        author. Ties between papers are broken alphabetically.
        """
        try:
            engine = self.engine
            engine.graph.index_of(entity)
        except (EntityNotFoundError, OriginNotFoundError) as exc:
            return self._error_result("chain", exc)

        with trace_span("export_graph"):
            g = engine.graph.to_networkx()

        try:
            node_path = nx.shortest_path(g, engine.origin, entity)
        except nx.NetworkXNoPath:
            return ServiceResult(
                ok=False,
                op="chain",
                error=ServiceError(
                    code="NO_PATH",
                    message=f"No co-authorship chain between '{engine.origin}' and '{entity}'",
                ),
            )

        steps: list[dict[str, Any]] = [{"author": node_path[0], "paper": None}]
        for prev, author in zip(node_path, node_path[1:], strict=False):
            shared = sorted(attrs["payload"] for attrs in g[prev][author].values())
            steps.append({"author": author, "paper": shared[0]})

        return ServiceResult(
            ok=True,
            op="chain",
            data={
                "origin": engine.origin,
                "entity": entity,
                "length": len(node_path) - 1,
                "steps": steps,
            },
        )
