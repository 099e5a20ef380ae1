"""Backtracking solver exports."""

from .backtracking import (
    Grid,
    SudokuSolver,
    ascending_candidates,
    count_empty_cells,
    empty_grid,
    has_unique_solution,
    is_solved_grid,
    is_valid,
    is_valid_grid,
    shuffled_candidates,
    solve,
)

__all__ = [
    "Grid",
    "SudokuSolver",
    "ascending_candidates",
    "count_empty_cells",
    "empty_grid",
    "has_unique_solution",
    "is_solved_grid",
    "is_valid",
    "is_valid_grid",
    "shuffled_candidates",
    "solve",
]
