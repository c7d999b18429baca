"""Error taxonomy shared by the graph core, engines, and services.

Lookup failures subclass :class:`LookupError` so callers that only care
about "not there" can catch the builtin. Duplicate contacts are not
errors; see :meth:`ContactTracer.add_trace`.
"""

from __future__ import annotations


class RelgraphError(Exception):
    """Base class for every error raised by relgraph."""


class EntityNotFoundError(RelgraphError, LookupError):
    """A query referenced an entity that was never registered."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"Entity '{entity}' not found in graph")
        self.entity = entity


class PaperNotFoundError(RelgraphError, LookupError):
    """A query referenced a paper absent from the co-authorship input."""

    def __init__(self, paper: str) -> None:
        super().__init__(f"Paper '{paper}' not found")
        self.paper = paper


class DuplicateVertexError(RelgraphError, ValueError):
    """Strict vertex registration hit an existing label."""

    def __init__(self, entity: str) -> None:
        super().__init__(f"Entity '{entity}' is already registered")
        self.entity = entity


class ConfigurationError(RelgraphError):
    """Invalid configuration or engine setup."""


class OriginNotFoundError(ConfigurationError):
    """The configured origin entity does not appear in any record."""

    def __init__(self, origin: str) -> None:
        super().__init__(
            f"Origin '{origin}' does not appear in the co-authorship records; "
            "check [collaboration] origin in relgraph.toml"
        )
        self.origin = origin
