"""ContactTracer — timestamped contact graph and forward spread tracing.

Each contact adds a symmetric pair of edges carrying the meeting time.
Adjacency lists are kept in ascending time order, so "met at or after t"
queries binary-search to the first qualifying edge instead of scanning.

Spread rule: an entity contagious from time t infects everyone it meets
at or after t, and each newly infected entity becomes contagious
``incubation`` time units after the contact that infected it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from relgraph.domain.errors import EntityNotFoundError
from relgraph.domain.records import Contact
from relgraph.infrastructure.graph.engine import Edge, TimelineGraph

logger = logging.getLogger(__name__)

DEFAULT_INCUBATION = 60


class ContactTracer:
    """Incrementally built contact graph.

    Not thread-safe: callers must serialise :meth:`add_trace` against
    concurrent queries on the same instance.
    """

    def __init__(
        self,
        contacts: Iterable[Contact] = (),
        *,
        incubation: int = DEFAULT_INCUBATION,
    ) -> None:
        self._graph = TimelineGraph()
        self._incubation = incubation
        # (origin, contagion_time) -> infected set; cleared on every new contact
        self._traces: dict[tuple[str, int], frozenset[str]] = {}
        for contact in contacts:
            self.add_trace(contact)

    def __len__(self) -> int:
        return len(self._graph)

    @property
    def incubation(self) -> int:
        return self._incubation

    def entities(self) -> list[str]:
        return self._graph.labels()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def add_trace(self, contact: Contact) -> bool:
        """Record a contact in both directions.

        Returns False, changing nothing, if the same ordered pair already
        met at the same time.
        """
        a, b, t = contact.person1, contact.person2, contact.time
        if self._graph.has_edge(a, b, t):
            return False
        self._graph.ensure_vertex(a)
        self._graph.ensure_vertex(b)
        self._graph.add_edge(a, b, t)
        if not self._graph.has_edge(b, a, t):
            self._graph.add_edge(b, a, t)
        self._traces.clear()
        return True

    # ------------------------------------------------------------------
    # Point queries
    # ------------------------------------------------------------------

    def contact_times_between(self, person1: str, person2: str) -> list[int]:
        """Every time the two met, ascending. Empty if they never met."""
        target = self._graph.index_of(person2)
        return [edge.payload for edge in self._graph.edges_of(person1) if edge.target == target]

    def contacts_of(self, person: str) -> set[str]:
        return {self._graph.label_of(edge.target) for edge in self._graph.edges_of(person)}

    def contacts_after(self, person: str, timestamp: int) -> set[str]:
        """Entities *person* met at or after *timestamp* (inclusive)."""
        return {
            self._graph.label_of(edge.target)
            for edge in self._graph.edges_from(person, timestamp)
        }

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def contact_trace(self, person: str, contagion_time: int) -> set[str]:
        """Everyone *person* may have infected, directly or transitively.

        Depth-first: the first contagion time at which an entity is
        reached wins, and it is never revisited. *person* is excluded
        from the result.
        """
        if person not in self._graph:
            raise EntityNotFoundError(person)

        key = (person, contagion_time)
        cached = self._traces.get(key)
        if cached is None:
            cached = frozenset(self._spread(person, contagion_time))
            self._traces[key] = cached
            logger.debug(
                "Traced %d contacts from %s at t=%d", len(cached), person, contagion_time
            )
        return set(cached)

    def _spread(self, person: str, contagion_time: int) -> set[str]:
        origin = self._graph.index_of(person)
        visited = {origin}
        stack: list[Iterator[Edge[int]]] = [iter(self._graph.edges_from(person, contagion_time))]

        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                stack.pop()
                continue
            if edge.target in visited:
                continue
            visited.add(edge.target)
            label = self._graph.label_of(edge.target)
            stack.append(iter(self._graph.edges_from(label, edge.payload + self._incubation)))

        visited.discard(origin)
        return {self._graph.label_of(index) for index in visited}
