"""CollaborationDistanceEngine — co-authorship distances from a fixed origin.

Builds a directed multigraph with one edge per ordered pair of distinct
co-authors per paper, then runs Dijkstra twice from the origin: once with
unit costs (hop count, the classic Erdős number) and once with each edge
costing ``1 / papers shared by the pair``. Both distance vectors are
computed at construction; every distance query afterwards is an O(1)
index lookup.
"""

from __future__ import annotations

import heapq
import logging
import math
import sys
from collections import Counter
from collections.abc import Callable, Iterable
from typing import TypeAlias

from relgraph.domain.errors import OriginNotFoundError, PaperNotFoundError
from relgraph.domain.records import CoAuthorship
from relgraph.infrastructure.graph.engine import Edge, LabelledGraph

logger = logging.getLogger(__name__)

DEFAULT_ORIGIN = "Paul Erdös"

# Returned by distance_of / weighted_distance_of when no path exists.
UNREACHABLE_HOPS = sys.maxsize
UNREACHABLE_WEIGHT = math.inf

_CostFn: TypeAlias = Callable[[Edge[str]], float]


def _unit_cost(edge: Edge[str]) -> float:
    return 1.0


def _edge_weight(edge: Edge[str]) -> float:
    return edge.weight


class CollaborationDistanceEngine:
    """Precomputed collaboration distances from *origin*.

    Args:
        records: Co-authorship records. Paper ids and author labels are
            assumed unique.
        origin: The entity distances are measured from.

    Raises:
        OriginNotFoundError: If *origin* appears in none of the records.
    """

    def __init__(self, records: Iterable[CoAuthorship], *, origin: str = DEFAULT_ORIGIN) -> None:
        self._origin = origin
        self._graph: LabelledGraph[str] = LabelledGraph()
        self._papers: dict[str, tuple[str, ...]] = {}

        for record in records:
            self._insert_paper(record)

        if origin not in self._graph:
            raise OriginNotFoundError(origin)

        self._hops = self._shortest_paths(_unit_cost)
        self._assign_weights()
        self._weighted = self._shortest_paths(_edge_weight)

        logger.debug(
            "Collaboration graph built: %d authors, %d papers, %d edges",
            len(self._graph),
            len(self._papers),
            self._graph.edge_count,
        )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _insert_paper(self, record: CoAuthorship) -> None:
        self._papers[record.paper] = record.authors
        for author in record.authors:
            self._graph.ensure_vertex(author)
        for author in record.authors:
            for other in record.authors:
                if author != other:
                    self._graph.add_edge(author, other, record.paper)

    def _assign_weights(self) -> None:
        """Rewrite every edge cost to 1 / (papers shared by its endpoints).

        Must finish before the weighted pass reads ``edge.weight``.
        """
        for index in range(len(self._graph)):
            edges = self._graph.adjacency(index)
            shared = Counter(edge.target for edge in edges)
            for edge in edges:
                edge.weight = 1.0 / shared[edge.target]

    def _shortest_paths(self, cost: _CostFn) -> list[float]:
        """Single-source Dijkstra from the origin over a binary heap.

        Stale heap entries (recorded distance no longer the live best)
        are discarded on pop instead of being removed from the heap.
        """
        n = len(self._graph)
        dist = [math.inf] * n
        visited = [False] * n
        start = self._graph.index_of(self._origin)
        dist[start] = 0.0
        frontier: list[tuple[float, int]] = [(0.0, start)]

        while frontier:
            d, u = heapq.heappop(frontier)
            if visited[u] or d > dist[u]:
                continue
            visited[u] = True
            for edge in self._graph.adjacency(u):
                v = edge.target
                if visited[v]:
                    continue
                candidate = d + cost(edge)
                if candidate < dist[v]:
                    dist[v] = candidate
                    heapq.heappush(frontier, (candidate, v))
        return dist

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def origin(self) -> str:
        return self._origin

    @property
    def graph(self) -> LabelledGraph[str]:
        """The underlying co-authorship graph. Treat as read-only."""
        return self._graph

    def entities(self) -> list[str]:
        """Every author, in first-appearance order."""
        return self._graph.labels()

    def distance_of(self, entity: str) -> int:
        """Minimum co-authorship hops from the origin.

        Returns :data:`UNREACHABLE_HOPS` if *entity* has no path to the
        origin. The origin itself is at distance 0.
        """
        d = self._hops[self._graph.index_of(entity)]
        return UNREACHABLE_HOPS if math.isinf(d) else int(d)

    def weighted_distance_of(self, entity: str) -> float:
        """Weighted distance, or :data:`UNREACHABLE_WEIGHT` if unreachable."""
        return self._weighted[self._graph.index_of(entity)]

    def is_origin_connected_to_all(self) -> bool:
        return not any(math.isinf(d) for d in self._hops)

    def papers_of(self, entity: str) -> set[str]:
        """Distinct papers on the entity's outgoing co-authorship edges."""
        return {edge.payload for edge in self._graph.edges_of(entity)}

    def collaborators_of(self, entity: str) -> set[str]:
        return {self._graph.label_of(edge.target) for edge in self._graph.edges_of(entity)}

    def average_distance_of(self, paper: str) -> float:
        """Mean hop distance of the paper's authors.

        Infinite if any author is unreachable from the origin.

        Raises:
            PaperNotFoundError: If *paper* was not in the input.
        """
        authors = self._papers.get(paper)
        if authors is None:
            raise PaperNotFoundError(paper)
        total = sum(self._hops[self._graph.index_of(author)] for author in authors)
        return total / len(authors)
