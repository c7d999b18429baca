"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, relgraph.toml only contains
overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from relgraph.engines.collaboration import DEFAULT_ORIGIN
from relgraph.engines.contact import DEFAULT_INCUBATION


class CollaborationConfig(BaseModel):
    """[collaboration] section."""

    model_config = {"frozen": True}

    origin: str = DEFAULT_ORIGIN


class ContactConfig(BaseModel):
    """[contact] section."""

    model_config = {"frozen": True}

    incubation: int = Field(default=DEFAULT_INCUBATION, ge=0)


class LoggingConfig(BaseModel):
    """[logging] section."""

    model_config = {"frozen": True}

    verbose: bool = False
    log_json: bool = False


class RelgraphConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    collaboration: CollaborationConfig = Field(default_factory=CollaborationConfig)
    contact: ContactConfig = Field(default_factory=ContactConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
