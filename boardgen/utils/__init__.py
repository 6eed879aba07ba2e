"""Utility modules for boardgen.

- logging: console and JSON-lines logging setup
"""

from .logging import JSONFormatter, setup_logging

__all__ = [
    "JSONFormatter",
    "setup_logging",
]
