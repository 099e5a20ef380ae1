"""Puzzle generation facade: fill, remove, encode."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass

from ..solver.backtracking import (
    Grid,
    SudokuSolver,
    count_empty_cells,
    empty_grid,
    shuffled_candidates,
)
from .codec import decode_identifier, encode_grid
from .difficulty import Difficulty
from .remover import DEFAULT_MAX_ATTEMPTS, remove_preserving_uniqueness

_LOGGER = logging.getLogger(__name__)

# Retries beyond this are logged as a warning.
_RETRY_WARNING_THRESHOLD = 10


@dataclass(frozen=True)
class SudokuResult:
    identifier: str
    puzzle: Grid
    solution: Grid


class SudokuGenerator:
    """Generates puzzles with a unique solution and restores them by identifier."""

    def __init__(
        self,
        max_removal_attempts: int = DEFAULT_MAX_ATTEMPTS,
        rng: random.Random | None = None,
    ):
        self.max_removal_attempts = max_removal_attempts
        self.rng = rng
        # Number of full generations the last generate_sudoku() call needed.
        self.last_attempts = 0

    def create_solved_grid(self) -> Grid:
        """Fill an empty grid with a random valid solution."""
        solver = SudokuSolver(candidates=shuffled_candidates(self.rng))
        return solver.fill(empty_grid())

    def remove_numbers(self, solved_grid: Grid, difficulty: Difficulty) -> Grid:
        return remove_preserving_uniqueness(
            solved_grid,
            difficulty,
            max_attempts=self.max_removal_attempts,
            rng=self.rng,
        )

    def generate_sudoku(self, difficulty: Difficulty | str = Difficulty.MEDIUM) -> SudokuResult:
        """
        Generate a puzzle whose empty-cell count meets the difficulty minimum.

        A removal pass that falls short discards the solved grid as well and
        starts over from a fresh one.
        """
        difficulty = Difficulty(difficulty)
        attempts = 0
        while True:
            attempts += 1
            solved_grid = self.create_solved_grid()
            puzzle = self.remove_numbers(solved_grid, difficulty)
            empty_cells = count_empty_cells(puzzle)
            if empty_cells >= difficulty.min_empty_cells:
                break
            _LOGGER.debug(
                "attempt %d produced %d empty cells, need %d (difficulty=%s)",
                attempts,
                empty_cells,
                difficulty.min_empty_cells,
                difficulty.value,
            )
            if attempts == _RETRY_WARNING_THRESHOLD:
                _LOGGER.warning(
                    "Generation at difficulty=%s needed %d attempts so far",
                    difficulty.value,
                    attempts,
                )

        self.last_attempts = attempts
        return SudokuResult(
            identifier=encode_grid(solved_grid),
            puzzle=puzzle,
            solution=solved_grid,
        )

    def generate_from_identifier(
        self, identifier: str, difficulty: Difficulty | str = Difficulty.MEDIUM
    ) -> SudokuResult:
        """
        Rebuild the solution encoded in ``identifier`` and derive a new puzzle.

        The empty-cell minimum is not enforced here since the solved grid is
        fixed; the puzzle is whatever one removal pass yields.

        Raises:
            InvalidIdentifier: if the identifier does not decode to a solved grid.
        """
        difficulty = Difficulty(difficulty)
        solved_grid = decode_identifier(identifier)
        puzzle = self.remove_numbers(solved_grid, difficulty)
        return SudokuResult(identifier=identifier, puzzle=puzzle, solution=solved_grid)

    def generate_multiple_sudoku(
        self, count: int = 1, difficulty: Difficulty | str = Difficulty.MEDIUM
    ) -> list[SudokuResult]:
        return [self.generate_sudoku(difficulty) for _ in range(count)]


def generate_solved_grid() -> Grid:
    return SudokuGenerator().create_solved_grid()


def generate_puzzle(difficulty: Difficulty | str = Difficulty.MEDIUM) -> tuple[Grid, Grid]:
    """Return ``(puzzle, solution)``."""
    result = SudokuGenerator().generate_sudoku(difficulty)
    return result.puzzle, result.solution


def generate_puzzle_with_id(difficulty: Difficulty | str = Difficulty.MEDIUM) -> SudokuResult:
    return SudokuGenerator().generate_sudoku(difficulty)


def restore_from_identifier(
    identifier: str, difficulty: Difficulty | str = Difficulty.MEDIUM
) -> SudokuResult:
    return SudokuGenerator().generate_from_identifier(identifier, difficulty)


def generate_multiple(
    count: int = 1, difficulty: Difficulty | str = Difficulty.MEDIUM
) -> list[SudokuResult]:
    return SudokuGenerator().generate_multiple_sudoku(count, difficulty)
