"""Domain layer — value types and their codec.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
