"""Domain layer — record types and the error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from engines, services, infrastructure, or config.
"""
