"""Service layer — parsing, dispatch, constraints, and the run loop.

Services may import from domain, infrastructure, and plugins.
They must never import from commands or output.
"""
