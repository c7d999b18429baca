"""Tests for CollaborationService — envelopes, error codes, chains."""

from __future__ import annotations

from collections.abc import Generator

import pytest

from relgraph.config.settings import RelgraphSettings
from relgraph.domain.records import CoAuthorship
from relgraph.services.collaboration import CollaborationService
from relgraph.services.telemetry import disable_telemetry, enable_telemetry
from tests.conftest import ERDOS, paper_records


@pytest.fixture
def service(papers: list[CoAuthorship]) -> CollaborationService:
    return CollaborationService(papers, RelgraphSettings())


class TestDistance:
    def test_reachable(self, service: CollaborationService) -> None:
        result = service.distance("C")
        assert result.ok
        assert result.op == "distance"
        assert result.data == {
            "entity": "C",
            "origin": ERDOS,
            "reachable": True,
            "hops": 2,
            "weighted": 1.5,
        }

    def test_unreachable(self, service: CollaborationService) -> None:
        result = service.distance("E")
        assert result.ok
        assert result.data["reachable"] is False
        assert result.data["hops"] is None
        assert result.data["weighted"] is None

    def test_unknown_entity(self, service: CollaborationService) -> None:
        result = service.distance("Nobody")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NOT_FOUND"
        assert result.error.detail == {"entity": "Nobody"}

    def test_missing_origin(self) -> None:
        svc = CollaborationService(paper_records({"P": ["A", "B"]}), RelgraphSettings())
        result = svc.distance("A")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "ORIGIN_NOT_FOUND"
        assert result.error.detail == {"origin": ERDOS}

    def test_origin_from_settings(self) -> None:
        settings = RelgraphSettings(collaboration={"origin": "Hub"})
        svc = CollaborationService(paper_records({"P": ["Hub", "A"]}), settings)
        assert svc.distance("A").data["hops"] == 1


class TestNeighbourhood:
    def test_papers_sorted(self, service: CollaborationService) -> None:
        result = service.papers("A")
        assert result.data == {"entity": "A", "count": 3, "items": ["P1", "P2", "P6"]}

    def test_collaborators_sorted(self, service: CollaborationService) -> None:
        result = service.collaborators("C")
        assert result.data["items"] == ["A", "B", "D"]

    def test_unknown(self, service: CollaborationService) -> None:
        assert service.papers("Nobody").error.code == "NOT_FOUND"  # type: ignore[union-attr]
        assert service.collaborators("Nobody").error.code == "NOT_FOUND"  # type: ignore[union-attr]


class TestAverage:
    def test_average(self, service: CollaborationService) -> None:
        result = service.average("P4")
        assert result.ok
        assert result.data == {"paper": "P4", "average": 2.5}
        assert result.warnings == []

    def test_unreachable_authors_warn(self, service: CollaborationService) -> None:
        result = service.average("P5")
        assert result.ok
        assert result.data["average"] is None
        assert len(result.warnings) == 1

    def test_unknown_paper(self, service: CollaborationService) -> None:
        result = service.average("Missing")
        assert not result.ok
        assert result.error is not None
        assert result.error.detail == {"paper": "Missing"}


class TestSummary:
    def test_summary(self, service: CollaborationService) -> None:
        result = service.summary()
        assert result.ok
        assert result.data["origin"] == ERDOS
        assert result.data["authors"] == 7
        assert result.data["connected_to_all"] is False
        assert result.data["unreachable"] == ["E", "F"]


class TestChain:
    def test_chain_names_linking_papers(self, service: CollaborationService) -> None:
        result = service.chain("D")
        assert result.ok
        assert result.data["length"] == 3
        steps = result.data["steps"]
        assert steps[0] == {"author": ERDOS, "paper": None}
        assert steps[-1] == {"author": "D", "paper": "P4"}
        assert [s["author"] for s in steps][2] == "C"

    def test_chain_to_origin(self, service: CollaborationService) -> None:
        result = service.chain(ERDOS)
        assert result.data["length"] == 0

    def test_no_path(self, service: CollaborationService) -> None:
        result = service.chain("E")
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "NO_PATH"

    def test_unknown(self, service: CollaborationService) -> None:
        assert service.chain("Nobody").error.code == "NOT_FOUND"  # type: ignore[union-attr]


class TestTelemetry:
    @pytest.fixture(autouse=True)
    def _telemetry(self) -> Generator[None]:
        enable_telemetry()
        yield
        disable_telemetry()

    def test_first_query_records_engine_build(self, service: CollaborationService) -> None:
        result = service.distance("A")
        assert result.meta is not None
        build = result.meta["telemetry"]["children"][0]
        assert build["name"] == "build_engine"
        assert build["annotations"]["authors"] == 7

    def test_later_queries_reuse_engine(self, service: CollaborationService) -> None:
        service.distance("A")
        result = service.distance("B")
        assert result.meta is not None
        assert "children" not in result.meta["telemetry"]
