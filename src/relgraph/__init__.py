"""relgraph — graph analytics over labelled entity-relationship records."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from relgraph.config.settings import RelgraphSettings

__version__ = "0.1.0"


def configure(settings: RelgraphSettings | None = None, **overrides: Any) -> RelgraphSettings:
    """Load settings and apply the ``[logging]`` section.

    Call once at application startup. When *settings* is None they are
    loaded via :meth:`RelgraphSettings.load` with *overrides*. Verbose
    logging also turns on service telemetry.
    """
    from relgraph.config.logging import configure_logging
    from relgraph.config.settings import RelgraphSettings
    from relgraph.services.telemetry import enable_telemetry

    if settings is None:
        settings = RelgraphSettings.load(**overrides)

    configure_logging(verbose=settings.logging.verbose, log_json=settings.logging.log_json)
    if settings.logging.verbose:
        enable_telemetry()
    return settings
