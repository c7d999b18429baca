"""Analytic engines — each builds a private graph from its records.

Engines may import from domain and infrastructure.
They must never import from services or config.
"""

from relgraph.engines.collaboration import (
    DEFAULT_ORIGIN,
    UNREACHABLE_HOPS,
    UNREACHABLE_WEIGHT,
    CollaborationDistanceEngine,
)
from relgraph.engines.consistency import ConsistencyChecker
from relgraph.engines.contact import DEFAULT_INCUBATION, ContactTracer

__all__ = [
    "DEFAULT_INCUBATION",
    "DEFAULT_ORIGIN",
    "UNREACHABLE_HOPS",
    "UNREACHABLE_WEIGHT",
    "CollaborationDistanceEngine",
    "ConsistencyChecker",
    "ContactTracer",
]
