"""Infrastructure layer — the shared graph core.

This layer depends on stdlib and third-party libs (NetworkX).
It must never import from engines, services, or config.
The engines bridge between domain records and infrastructure.
"""
