"""Tests for word board construction."""

import random

import pytest

from boardgen.errors import InsufficientWordsError
from boardgen.words import WordBoardBuilder, unique_words


def make_words(count, prefix="WORD"):
    return [f"{prefix}{i}" for i in range(count)]


class TestUniqueWords:
    """Test cases for unique_words."""

    def test_keeps_first_occurrence_order(self):
        """Test that duplicates are dropped without reordering."""
        assert unique_words(["B", "A", "B", "C", "A"]) == ["B", "A", "C"]


class TestWordBoardBuilder:
    """Test cases for WordBoardBuilder."""

    def setup_method(self):
        """Setup for each test."""
        self.builder = WordBoardBuilder(random.Random(42))

    def test_board_shape(self):
        """Test that the board is 5x5."""
        board = self.builder.build(make_words(40))

        assert len(board) == 5
        assert all(len(row) == 5 for row in board)

    def test_pool_with_duplicates_has_unique_cells(self):
        """Test that a pool with repeats yields 25 distinct words."""
        pool = make_words(30) + make_words(30)
        board = self.builder.build(pool)
        cells = [word for row in board for word in row]

        assert len(cells) == 25
        assert len(set(cells)) == 25
        assert set(cells) <= set(pool)

    def test_pool_is_shuffled(self):
        """Test that repeated builds do not always pick the same words."""
        pool = make_words(40) + make_words(10)
        selections = {
            frozenset(word for row in self.builder.build(pool) for word in row)
            for _ in range(50)
        }
        assert len(selections) > 1

    def test_exact_pool_size_uses_every_word(self):
        """Test that a pool of exactly 25 unique words uses all of them."""
        pool = make_words(25) + make_words(5)
        for _ in range(10):
            board = self.builder.build(pool)
            assert {word for row in board for word in row} == set(make_words(25))

    def test_too_few_unique_words(self):
        """Test that 24 distinct words after dedup are rejected."""
        pool = make_words(24) + make_words(24)

        with pytest.raises(InsufficientWordsError) as exc_info:
            self.builder.build(pool)

        assert exc_info.value.required == 25
        assert exc_info.value.available == 24

    def test_exact_order_preserved(self):
        """Test that literal words keep their order, row by row."""
        words = make_words(25)
        board = self.builder.build(words, shuffle=False)

        assert board[2][3] == words[13]
        assert [word for row in board for word in row] == words

    def test_exact_mode_rejects_repeated_words(self):
        """Test that 25 literal words with a repeat are rejected."""
        words = make_words(24) + ["WORD0"]

        with pytest.raises(InsufficientWordsError):
            self.builder.build(words, shuffle=False)

    def test_exact_mode_too_few_words(self):
        """Test that fewer than 25 literal words are rejected."""
        with pytest.raises(InsufficientWordsError):
            self.builder.build(make_words(20), shuffle=False)

    def test_build_does_not_mutate_input(self):
        """Test that the caller's word list is left as given."""
        pool = make_words(30)
        original = list(pool)
        self.builder.build(pool)
        assert pool == original
