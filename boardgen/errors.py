"""Error types raised by board generation."""


class BoardError(Exception):
    """Base class for all boardgen errors."""


class CapacityError(BoardError):
    """More tiles were requested than the grid has empty cells."""

    def __init__(self, requested: int, available: int):
        self.requested = requested
        self.available = available
        super().__init__(
            f"Cannot fill a board with {available} empty spaces {requested} times"
        )


class InsufficientWordsError(BoardError):
    """Not enough unique words to fill a board."""

    def __init__(self, required: int, available: int):
        self.required = required
        self.available = available
        super().__init__(f"Need at least {required} unique words, got {available}")


class WordSourceError(BoardError):
    """A word list file is missing, unreadable or malformed."""


class ConfigError(BoardError):
    """A settings file is missing or malformed."""
