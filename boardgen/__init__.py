"""boardgen - printable Codenames board and spymaster key generation.

Modules:
- layout: 5x5 grid helpers and capacity checks
- assigner: random tile placement
- key: spymaster key generation
- words: word board building
- formatter: aligned text and rich rendering
"""

from boardgen.errors import (
    BoardError,
    CapacityError,
    ConfigError,
    InsufficientWordsError,
    WordSourceError,
)
from boardgen.key import KeyGenerator, SpyKey, TeamMarker
from boardgen.words import WordBoardBuilder

__version__ = "0.1.0"

__all__ = [
    "BoardError",
    "CapacityError",
    "ConfigError",
    "InsufficientWordsError",
    "WordSourceError",
    "KeyGenerator",
    "SpyKey",
    "TeamMarker",
    "WordBoardBuilder",
]
