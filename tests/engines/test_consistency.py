"""Tests for ConsistencyChecker — contradictory cycle detection."""

from __future__ import annotations

from relgraph.domain.records import AssertionType
from relgraph.engines.consistency import ConsistencyChecker
from tests.conftest import before, same


class TestConstruction:
    def test_directional_assertion_adds_one_edge(self) -> None:
        checker = ConsistencyChecker([before("A", "B")])
        assert checker.graph.edge_count == 1
        assert checker.graph.edges_of("B") == []

    def test_simultaneous_assertion_adds_both_directions(self) -> None:
        checker = ConsistencyChecker([same("A", "B")])
        assert checker.graph.edge_count == 2
        assert [e.payload for e in checker.graph.edges_of("B")] == [AssertionType.SIMULTANEOUS]


class TestConsistent:
    def test_empty(self) -> None:
        assert ConsistencyChecker([]).are_facts_consistent()

    def test_chain(self) -> None:
        facts = [before("A", "B"), before("B", "C"), before("C", "D")]
        assert ConsistencyChecker(facts).are_facts_consistent()

    def test_simultaneous_triangle(self) -> None:
        facts = [same("A", "B"), same("B", "C"), same("C", "A")]
        assert ConsistencyChecker(facts).are_facts_consistent()

    def test_mutual_pair_stated_twice(self) -> None:
        assert ConsistencyChecker([same("A", "B"), same("B", "A")]).are_facts_consistent()
        assert ConsistencyChecker([same("A", "B"), same("A", "B")]).are_facts_consistent()

    def test_self_simultaneous(self) -> None:
        assert ConsistencyChecker([same("A", "A")]).are_facts_consistent()

    def test_diamond_reconvergence(self) -> None:
        """D is reached twice along separate branches; not a cycle."""
        facts = [before("A", "B"), before("A", "C"), before("B", "D"), before("C", "D")]
        assert ConsistencyChecker(facts).are_facts_consistent()

    def test_ordering_between_moments(self) -> None:
        facts = [same("A", "B"), before("B", "C"), same("C", "D"), before("A", "D")]
        assert ConsistencyChecker(facts).are_facts_consistent()

    def test_long_chain_does_not_recurse(self) -> None:
        facts = [before(f"p{i}", f"p{i + 1}") for i in range(20_000)]
        assert ConsistencyChecker(facts).are_facts_consistent()


class TestInconsistent:
    def test_directional_triangle(self) -> None:
        facts = [before("A", "B"), before("B", "C"), before("C", "A")]
        assert not ConsistencyChecker(facts).are_facts_consistent()

    def test_two_cycle(self) -> None:
        assert not ConsistencyChecker([before("A", "B"), before("B", "A")]).are_facts_consistent()

    def test_self_precedence(self) -> None:
        assert not ConsistencyChecker([before("A", "A")]).are_facts_consistent()

    def test_mixed_cycle(self) -> None:
        facts = [before("A", "B"), same("B", "C"), before("C", "A")]
        assert not ConsistencyChecker(facts).are_facts_consistent()

    def test_precedes_and_coincides(self) -> None:
        assert not ConsistencyChecker([same("A", "B"), before("A", "B")]).are_facts_consistent()

    def test_directional_edge_inside_simultaneous_group(self) -> None:
        facts = [same("A", "B"), same("B", "C"), before("A", "C")]
        assert not ConsistencyChecker(facts).are_facts_consistent()

    def test_cycle_in_later_component(self) -> None:
        facts = [before("A", "B"), before("X", "Y"), before("Y", "Z"), before("Z", "X")]
        assert not ConsistencyChecker(facts).are_facts_consistent()

    def test_long_cycle(self) -> None:
        facts = [before(f"p{i}", f"p{i + 1}") for i in range(5_000)]
        facts.append(before("p5000", "p0"))
        assert not ConsistencyChecker(facts).are_facts_consistent()


class TestFindContradiction:
    def test_none_when_consistent(self) -> None:
        assert ConsistencyChecker([before("A", "B")]).find_contradiction() is None

    def test_returns_cycle_in_path_order(self) -> None:
        facts = [before("A", "B"), before("B", "C"), before("C", "A")]
        cycle = ConsistencyChecker(facts).find_contradiction()
        assert cycle == facts

    def test_cycle_through_simultaneous_entities(self) -> None:
        facts = [before("A", "B"), same("B", "C"), before("C", "A")]
        cycle = ConsistencyChecker(facts).find_contradiction()
        assert cycle is not None
        assert all(a.type is AssertionType.ONE_DIRECTIONAL for a in cycle)
        assert {(a.person_a, a.person_b) for a in cycle} == {("A", "B"), ("C", "A")}

    def test_result_is_cached(self) -> None:
        checker = ConsistencyChecker([before("A", "B"), before("B", "A")])
        assert checker.find_contradiction() is checker.find_contradiction()
