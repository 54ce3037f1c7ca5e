"""Command-line toy robot simulator."""

__version__ = "0.4.0"
