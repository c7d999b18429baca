"""ConsistencyChecker — can a set of ordering assertions all hold at once?

Each assertion becomes a directed edge A -> B; simultaneous assertions add
the reverse edge B -> A as well. Entities joined by simultaneous edges
coincide, so they are collapsed into one *moment* before the search: a
cycle made only of simultaneous edges is the same fact stated twice, not
a contradiction. What remains is a directed graph of moments linked by
one-directional edges, and any cycle in it (including a self-loop, i.e.
"A precedes B" while A coincides with B) is unsatisfiable.

The search is an iterative depth-first traversal with an explicit frame
stack. ``on_path`` is cleared when a frame is popped, so a moment reached
again along a different, non-overlapping branch is not mistaken for a
cycle.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from relgraph.domain.records import Assertion, AssertionType
from relgraph.infrastructure.graph.engine import Edge, LabelledGraph

logger = logging.getLogger(__name__)


class ConsistencyChecker:
    """Detects contradictory cycles in a fixed set of assertions."""

    def __init__(self, assertions: Iterable[Assertion]) -> None:
        self._graph: LabelledGraph[AssertionType] = LabelledGraph()
        for assertion in assertions:
            self._insert(assertion)

        self._checked = False
        self._contradiction: list[Assertion] | None = None

    def _insert(self, assertion: Assertion) -> None:
        a, b = assertion.person_a, assertion.person_b
        self._graph.ensure_vertex(a)
        self._graph.ensure_vertex(b)
        self._graph.add_edge(a, b, assertion.type)
        if assertion.symmetric:
            self._graph.add_edge(b, a, assertion.type)

    @property
    def graph(self) -> LabelledGraph[AssertionType]:
        return self._graph

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def are_facts_consistent(self) -> bool:
        return self.find_contradiction() is None

    def find_contradiction(self) -> list[Assertion] | None:
        """Return the one-directional assertions forming a contradictory cycle.

        Consecutive assertions in the returned list are linked either
        directly or through entities asserted to be simultaneous. Returns
        None when the assertions are consistent. The result is computed
        on first call and cached.
        """
        if not self._checked:
            self._contradiction = self._search()
            self._checked = True
        return self._contradiction

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def _moments(self) -> list[int]:
        """Union-find over simultaneous edges; returns each vertex's root."""
        parent = list(range(len(self._graph)))

        def find(i: int) -> int:
            while parent[i] != i:
                parent[i] = parent[parent[i]]
                i = parent[i]
            return i

        for edge in self._graph.iter_edges():
            if edge.payload is AssertionType.SIMULTANEOUS:
                ra, rb = find(edge.source), find(edge.target)
                if ra != rb:
                    parent[max(ra, rb)] = min(ra, rb)
        return [find(i) for i in range(len(parent))]

    def _search(self) -> list[Assertion] | None:
        moment = self._moments()
        members: dict[int, list[int]] = {}
        for vertex, root in enumerate(moment):
            members.setdefault(root, []).append(vertex)

        def outgoing(root: int) -> Iterator[Edge[AssertionType]]:
            for vertex in members[root]:
                for edge in self._graph.adjacency(vertex):
                    if edge.payload is AssertionType.ONE_DIRECTIONAL:
                        yield edge

        visited: set[int] = set()
        on_path: set[int] = set()

        for start in members:
            if start in visited:
                continue
            visited.add(start)
            on_path.add(start)
            stack: list[tuple[int, Iterator[Edge[AssertionType]]]] = [(start, outgoing(start))]
            # trail[k] is the edge leading from stack[k] into stack[k + 1]
            trail: list[Edge[AssertionType]] = []

            while stack:
                current, edges = stack[-1]
                edge = next(edges, None)
                if edge is None:
                    stack.pop()
                    on_path.discard(current)
                    if trail:
                        trail.pop()
                    continue

                nxt = moment[edge.target]
                if nxt in on_path:
                    entry = next(k for k, (root, _) in enumerate(stack) if root == nxt)
                    cycle = [self._as_assertion(e) for e in (*trail[entry:], edge)]
                    logger.debug(
                        "Contradictory cycle: %s",
                        " -> ".join(f"{a.person_a}<{a.person_b}" for a in cycle),
                    )
                    return cycle
                if nxt in visited:
                    continue
                visited.add(nxt)
                on_path.add(nxt)
                trail.append(edge)
                stack.append((nxt, outgoing(nxt)))

        return None

    def _as_assertion(self, edge: Edge[AssertionType]) -> Assertion:
        return Assertion(
            person_a=self._graph.label_of(edge.source),
            person_b=self._graph.label_of(edge.target),
            type=edge.payload,
        )
