"""Tests for ConsistencyService."""

from __future__ import annotations

from relgraph.config.settings import RelgraphSettings
from relgraph.services.consistency import ConsistencyService
from tests.conftest import before, same


class TestCheck:
    def test_consistent(self) -> None:
        result = ConsistencyService([same("A", "B"), before("B", "C")], RelgraphSettings()).check()
        assert result.ok
        assert result.data == {"consistent": True, "assertions": 2, "entities": 3, "cycle": []}

    def test_inconsistent_reports_cycle(self) -> None:
        facts = [before("A", "B"), before("B", "A")]
        result = ConsistencyService(facts, RelgraphSettings()).check()
        assert result.ok
        assert result.data["consistent"] is False
        assert result.data["cycle"] == [
            {"person_a": "A", "person_b": "B", "type": "one_directional"},
            {"person_a": "B", "person_b": "A", "type": "one_directional"},
        ]
