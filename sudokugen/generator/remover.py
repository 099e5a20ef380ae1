"""Turn a solved grid into a puzzle that keeps a unique solution."""

from __future__ import annotations

import copy
import logging
import random

from ..solver.backtracking import Grid, SudokuSolver
from .difficulty import Difficulty

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 300


def remove_preserving_uniqueness(
    solved_grid: Grid,
    difficulty: Difficulty,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    rng: random.Random | None = None,
) -> Grid:
    """Clear random cells of a copy of ``solved_grid`` while the result stays unique.

    Each attempt empties one random filled cell and keeps it empty only if the
    grid still has exactly one solution. A cell whose removal broke uniqueness
    is not tried again: clearing more cells can only add solutions. Stops once
    ``difficulty.removal_target`` cells are cleared, ``max_attempts`` checks
    were spent, or no candidate cell is left.
    """
    source = rng if rng is not None else random
    target = Difficulty(difficulty).removal_target
    puzzle = copy.deepcopy(solved_grid)
    solver = SudokuSolver()

    candidates = [(r, c) for r in range(9) for c in range(9) if puzzle[r][c] != 0]
    removed = 0
    attempts = 0

    while removed < target and attempts < max_attempts and candidates:
        row, col = candidates.pop(source.randrange(len(candidates)))
        attempts += 1

        backup = puzzle[row][col]
        puzzle[row][col] = 0
        if solver.has_unique_solution(puzzle):
            removed += 1
        else:
            puzzle[row][col] = backup

    _LOGGER.debug(
        "removed %d/%d cells in %d attempts (difficulty=%s)",
        removed,
        target,
        attempts,
        Difficulty(difficulty).value,
    )
    return puzzle
