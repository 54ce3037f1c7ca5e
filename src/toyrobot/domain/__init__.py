"""Domain layer — directions, commands, and the error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
