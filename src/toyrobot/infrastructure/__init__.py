"""Infrastructure layer — reading command lines from files and stdin.

This layer depends on stdlib and third-party libs only.
It may raise domain errors but must never import from services or commands.
"""
