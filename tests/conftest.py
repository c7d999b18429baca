"""Shared pytest fixtures and record builders for relgraph tests."""

from __future__ import annotations

from collections.abc import Iterable

import pytest

from relgraph.domain.records import Assertion, AssertionType, CoAuthorship, Contact
from relgraph.engines.collaboration import DEFAULT_ORIGIN

ERDOS = DEFAULT_ORIGIN


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's RELGRAPH_* environment out of the tests."""
    monkeypatch.delenv("RELGRAPH_CONFIG", raising=False)
    monkeypatch.delenv("RELGRAPH_COLLABORATION__ORIGIN", raising=False)
    monkeypatch.delenv("RELGRAPH_CONTACT__INCUBATION", raising=False)


@pytest.fixture
def papers() -> list[CoAuthorship]:
    """Small co-authorship set with one component cut off from the origin.

    Hop distances: origin 0, A 1, B 1, C 2, D 3, E and F unreachable.
    The origin and A share two papers (P1, P6).
    """
    return paper_records(
        {
            "P1": [ERDOS, "A", "B"],
            "P2": ["A", "C"],
            "P3": ["B", "C"],
            "P4": ["C", "D"],
            "P5": ["E", "F"],
            "P6": [ERDOS, "A"],
            "P7": ["D"],
        }
    )


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def paper_records(papers: dict[str, Iterable[str]]) -> list[CoAuthorship]:
    return [CoAuthorship(paper=p, authors=tuple(a)) for p, a in papers.items()]


def before(a: str, b: str) -> Assertion:
    return Assertion(person_a=a, person_b=b, type=AssertionType.ONE_DIRECTIONAL)


def same(a: str, b: str) -> Assertion:
    return Assertion(person_a=a, person_b=b, type=AssertionType.SIMULTANEOUS)


def met(a: str, b: str, time: int) -> Contact:
    return Contact(person1=a, person2=b, time=time)
