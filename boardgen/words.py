"""Word board construction."""

import logging
import random
from typing import Iterable, List, Optional, Sequence

from boardgen.errors import InsufficientWordsError
from boardgen.layout import Grid, cell_position, create_empty

logger = logging.getLogger(__name__)


def unique_words(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping the first occurrence of each."""
    return list(dict.fromkeys(words))


class WordBoardBuilder:
    """Lays 25 words out row by row on a 5x5 board."""

    BOARD_SIDE = 5
    BOARD_SIZE = BOARD_SIDE * BOARD_SIDE

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng or random

    def build(self, words: Sequence[str], shuffle: bool = True) -> Grid:
        """Build a word board.

        Args:
            words: Candidate words. With ``shuffle`` this is a pool that is
                deduplicated and shuffled before 25 words are taken. Without
                it, the first 25 words are placed exactly in the given order.
            shuffle: Whether ``words`` is a pool to draw from

        Returns:
            5x5 grid, word ``i`` at row ``i // 5``, column ``i % 5``

        Raises:
            InsufficientWordsError: If fewer than 25 unique words are given
        """
        if shuffle:
            selected = unique_words(words)
        else:
            selected = list(words[:self.BOARD_SIZE])

        available = len(unique_words(selected))
        if available < self.BOARD_SIZE:
            raise InsufficientWordsError(required=self.BOARD_SIZE, available=available)

        if shuffle:
            self.rng.shuffle(selected)

        board = create_empty(self.BOARD_SIDE)
        for i, word in enumerate(selected[:self.BOARD_SIZE]):
            row, col = cell_position(i, self.BOARD_SIDE)
            board[row][col] = word

        logger.info(
            f"Word board built from {available} unique words "
            f"({'shuffled pool' if shuffle else 'exact order'})"
        )
        return board
