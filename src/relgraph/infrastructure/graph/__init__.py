"""Graph core used by every engine."""

from relgraph.infrastructure.graph.engine import Edge, LabelledGraph, TimelineGraph

__all__ = ["Edge", "LabelledGraph", "TimelineGraph"]
