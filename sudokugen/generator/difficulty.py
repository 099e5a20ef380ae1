"""Difficulty levels and their empty-cell thresholds."""

from __future__ import annotations

from enum import Enum


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    EXTREME = "extreme"

    @property
    def min_empty_cells(self) -> int:
        """Published minimum number of empty cells in a generated puzzle."""
        return MIN_EMPTY_CELLS[self]

    @property
    def removal_target(self) -> int:
        """How many cells one removal pass tries to clear."""
        return REMOVAL_TARGETS[self]


MIN_EMPTY_CELLS = {
    Difficulty.EASY: 25,
    Difficulty.MEDIUM: 35,
    Difficulty.HARD: 45,
    Difficulty.EXTREME: 55,
}

REMOVAL_TARGETS = {
    Difficulty.EASY: 30,
    Difficulty.MEDIUM: 40,
    Difficulty.HARD: 50,
    Difficulty.EXTREME: 60,
}
