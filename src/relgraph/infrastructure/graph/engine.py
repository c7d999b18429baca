"""Graph core — dense-indexed adjacency lists keyed by opaque labels.

Every engine builds its own private instance. Labels map to dense integer
indices on first registration; the registry is append-only, so an index
stays valid for the lifetime of the graph. Adjacency lists are plain
Python lists indexed by vertex, so traversals work on ints rather than
label-keyed dicts.
"""

from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

import networkx as nx

from relgraph.domain.errors import DuplicateVertexError, EntityNotFoundError

P = TypeVar("P")


@dataclass(slots=True)
class Edge(Generic[P]):
    """A directed arc between two registered vertices."""

    source: int
    target: int
    payload: P
    weight: float = 1.0


class LabelledGraph(Generic[P]):
    """Adjacency-list multigraph with a label -> index registry.

    Parallel edges are kept; ``edges_of`` yields them in insertion order.
    """

    def __init__(self) -> None:
        self._index: dict[str, int] = {}
        self._labels: list[str] = []
        self._adjacency: list[list[Edge[P]]] = []
        self._edge_count = 0

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    @property
    def edge_count(self) -> int:
        return self._edge_count

    # ------------------------------------------------------------------
    # Registry
    # ------------------------------------------------------------------

    def add_vertex(self, label: str) -> int:
        """Register *label* and return its new index.

        Raises:
            DuplicateVertexError: If *label* is already registered.
        """
        if label in self._index:
            raise DuplicateVertexError(label)
        idx = len(self._labels)
        self._index[label] = idx
        self._labels.append(label)
        self._adjacency.append([])
        return idx

    def ensure_vertex(self, label: str) -> int:
        """Return the index of *label*, registering it if new."""
        idx = self._index.get(label)
        if idx is None:
            idx = self.add_vertex(label)
        return idx

    def index_of(self, label: str) -> int:
        try:
            return self._index[label]
        except KeyError:
            raise EntityNotFoundError(label) from None

    def label_of(self, index: int) -> str:
        return self._labels[index]

    def labels(self) -> list[str]:
        """All labels in registration (index) order."""
        return list(self._labels)

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: str, target: str, payload: P, weight: float = 1.0) -> Edge[P]:
        """Append a directed edge; both endpoints must already be registered."""
        edge = Edge(self.index_of(source), self.index_of(target), payload, weight)
        self._insert(edge)
        self._edge_count += 1
        return edge

    def _insert(self, edge: Edge[P]) -> None:
        self._adjacency[edge.source].append(edge)

    def edges_of(self, label: str) -> list[Edge[P]]:
        """Outgoing edges of *label*. The list is live; do not mutate it."""
        return self._adjacency[self.index_of(label)]

    def adjacency(self, index: int) -> list[Edge[P]]:
        """Outgoing edges by dense index, for hot traversal loops."""
        return self._adjacency[index]

    def iter_edges(self) -> Iterator[Edge[P]]:
        for edges in self._adjacency:
            yield from edges

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_networkx(self) -> nx.MultiDiGraph:
        """Copy the graph into a NetworkX MultiDiGraph keyed by label.

        Each stored edge becomes one NetworkX edge with ``payload`` and
        ``weight`` attributes, so parallel edges survive the export.
        """
        g = nx.MultiDiGraph()
        # Isolated vertices must be visible to NetworkX algorithms too
        g.add_nodes_from(self._labels)
        for edge in self.iter_edges():
            g.add_edge(
                self._labels[edge.source],
                self._labels[edge.target],
                payload=edge.payload,
                weight=edge.weight,
            )
        return g


class TimelineGraph(LabelledGraph[int]):
    """Graph whose adjacency lists stay sorted by integer timestamp payload.

    Equal timestamps keep insertion order. An edge-key set gives O(1)
    lookups for ``has_edge`` so duplicate contacts can be suppressed.
    """

    def __init__(self) -> None:
        super().__init__()
        self._keys: set[tuple[int, int, int]] = set()

    def _insert(self, edge: Edge[int]) -> None:
        bisect.insort_right(self._adjacency[edge.source], edge, key=_timestamp)
        self._keys.add((edge.source, edge.target, edge.payload))

    def has_edge(self, source: str, target: str, payload: int) -> bool:
        if source not in self._index or target not in self._index:
            return False
        return (self._index[source], self._index[target], payload) in self._keys

    def edges_from(self, label: str, start: int) -> list[Edge[int]]:
        """Outgoing edges of *label* with timestamp >= *start*, ascending."""
        edges = self.edges_of(label)
        return edges[bisect.bisect_left(edges, start, key=_timestamp) :]


def _timestamp(edge: Edge[int]) -> int:
    return edge.payload
