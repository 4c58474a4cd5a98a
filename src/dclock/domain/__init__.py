"""Domain layer — calendar and decimal-time arithmetic.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
