"""Sudoku solver using backtracking algorithm."""

import copy
import random
from typing import Callable, List, Optional, Sequence, Tuple

Grid = List[List[int]]

# Returns the order in which candidate digits are tried at one empty cell.
CandidateSupplier = Callable[[], Sequence[int]]

DIGITS = tuple(range(1, 10))
_ALL_DIGITS = 0b1111111110  # bits 1..9


def _box_index(row: int, col: int) -> int:
    return (row // 3) * 3 + col // 3


def ascending_candidates() -> Sequence[int]:
    """Deterministic 1..9 order, enough when only the solution count matters."""
    return DIGITS


def shuffled_candidates(rng: Optional[random.Random] = None) -> CandidateSupplier:
    """Build a supplier yielding a fresh random permutation of 1..9 per call."""
    source = rng if rng is not None else random

    def supplier() -> Sequence[int]:
        digits = list(DIGITS)
        source.shuffle(digits)
        return digits

    return supplier


def is_valid(grid: Grid, row: int, col: int, num: int) -> bool:
    """
    Check if placing num at (row, col) is valid.

    The cell itself is skipped, so a provisional value already stored at
    (row, col) does not count as a conflict.

    Args:
        grid: Current grid state
        row: Row index
        col: Column index
        num: Number to place (1-9)

    Returns:
        True if placement is valid, False otherwise
    """
    # Check row
    for c in range(9):
        if c != col and grid[row][c] == num:
            return False

    # Check column
    for r in range(9):
        if r != row and grid[r][col] == num:
            return False

    # Check 3x3 box
    box_row = (row // 3) * 3
    box_col = (col // 3) * 3

    for r in range(box_row, box_row + 3):
        for c in range(box_col, box_col + 3):
            if (r, c) != (row, col) and grid[r][c] == num:
                return False

    return True


class SudokuSolver:
    """Solves, fills and counts Sudoku grids using backtracking."""

    def __init__(self, candidates: CandidateSupplier = ascending_candidates):
        self.candidates = candidates
        self.solutions_count = 0

    def solve(self, grid: Grid) -> Optional[Grid]:
        """
        Solve a Sudoku puzzle.

        Args:
            grid: 9x9 list of lists with 0 for empty cells

        Returns:
            Solved 9x9 grid if solution exists, None otherwise
        """
        self.solutions_count = 0
        grid_copy = copy.deepcopy(grid)
        if not self._is_consistent_grid(grid_copy):
            return None
        if self._solve_recursive(grid_copy):
            return grid_copy
        return None

    def fill(self, grid: Grid) -> Grid:
        """
        Complete ``grid`` in place and return it.

        Used with a shuffled supplier to manufacture solved grids. An empty
        9x9 grid is always fillable, so failing here is a bug rather than a
        recoverable condition.
        """
        if not self._solve_recursive(grid):
            raise RuntimeError("Backtracking failed to fill the grid")
        return grid

    def _solve_recursive(self, grid: Grid) -> bool:
        """Recursively solve the puzzle using backtracking."""
        empty = self._find_empty_cell(grid)
        if not empty:
            return True

        row, col = empty

        for num in self.candidates():
            if is_valid(grid, row, col, num):
                grid[row][col] = num

                if self._solve_recursive(grid):
                    return True

                grid[row][col] = 0

        return False

    def _find_empty_cell(self, grid: Grid) -> Optional[Tuple[int, int]]:
        """
        Find the next empty cell (contains 0).

        Args:
            grid: Current grid state

        Returns:
            Tuple of (row, col) if empty cell found, None otherwise
        """
        for r in range(9):
            for c in range(9):
                if grid[r][c] == 0:
                    return (r, c)
        return None

    def count_solutions(self, grid: Grid, max_count: int = 2) -> int:
        """
        Count number of solutions (up to max_count).

        Args:
            grid: 9x9 grid to solve
            max_count: Stop counting after finding this many solutions

        Returns:
            Number of solutions found
        """
        self.solutions_count = 0
        grid_copy = copy.deepcopy(grid)
        if not self._is_consistent_grid(grid_copy):
            return 0

        # Bitmasks of digits already used per row, column and box.
        rows, cols, boxes = [0] * 9, [0] * 9, [0] * 9
        empties = []
        for r in range(9):
            for c in range(9):
                num = grid_copy[r][c]
                if num == 0:
                    empties.append((r, c))
                    continue
                bit = 1 << num
                rows[r] |= bit
                cols[c] |= bit
                boxes[_box_index(r, c)] |= bit

        self._count_solutions_recursive(
            grid_copy, empties, rows, cols, boxes, max_count
        )
        return self.solutions_count

    def has_unique_solution(self, grid: Grid) -> bool:
        """True iff ``grid`` has exactly one completion."""
        return self.count_solutions(grid, max_count=2) == 1

    def _count_solutions_recursive(
        self,
        grid: Grid,
        empties: List[Tuple[int, int]],
        rows: List[int],
        cols: List[int],
        boxes: List[int],
        max_count: int,
    ) -> None:
        """Recursively count solutions, stopping at max_count.

        Branches on the empty cell with the fewest legal digits (first in
        row-major order on ties), which keeps the full search small enough
        to run once per removed cell.
        """
        if self.solutions_count >= max_count:
            return

        best: Optional[Tuple[int, int]] = None
        best_mask = 0
        best_options = 10
        for r, c in empties:
            if grid[r][c] != 0:
                continue
            mask = ~(rows[r] | cols[c] | boxes[_box_index(r, c)]) & _ALL_DIGITS
            options = mask.bit_count()
            if options < best_options:
                best, best_mask, best_options = (r, c), mask, options
                if options <= 1:
                    break

        if best is None:
            self.solutions_count += 1
            return
        if best_options == 0:
            return

        row, col = best
        box = _box_index(row, col)

        for num in self.candidates():
            bit = 1 << num
            if not best_mask & bit:
                continue
            grid[row][col] = num
            rows[row] |= bit
            cols[col] |= bit
            boxes[box] |= bit

            self._count_solutions_recursive(
                grid, empties, rows, cols, boxes, max_count
            )

            grid[row][col] = 0
            rows[row] &= ~bit
            cols[col] &= ~bit
            boxes[box] &= ~bit
            if self.solutions_count >= max_count:
                return

    def _is_consistent_grid(self, grid: Grid) -> bool:
        """Check existing non-zero givens are mutually consistent."""
        for r in range(9):
            for c in range(9):
                num = grid[r][c]
                if num != 0 and not is_valid(grid, r, c, num):
                    return False
        return True


def solve(grid: Grid) -> Optional[Grid]:
    """Convenience function to solve a Sudoku grid."""
    solver = SudokuSolver()
    return solver.solve(grid)


def has_unique_solution(grid: Grid) -> bool:
    """Convenience function for the uniqueness check."""
    return SudokuSolver().has_unique_solution(grid)


def empty_grid() -> Grid:
    return [[0] * 9 for _ in range(9)]


def count_empty_cells(grid: Grid) -> int:
    return sum(1 for row in grid for cell in row if cell == 0)


def is_valid_grid(grid: Grid) -> bool:
    """
    Validate that a grid has correct structure and initial values.

    Args:
        grid: 9x9 grid to validate

    Returns:
        True if grid is valid, False otherwise
    """
    if not isinstance(grid, list) or len(grid) != 9:
        return False

    for row in grid:
        if not isinstance(row, list) or len(row) != 9:
            return False
        for cell in row:
            if not isinstance(cell, int) or cell < 0 or cell > 9:
                return False

    # Check no duplicate values in rows, cols, boxes
    solver = SudokuSolver()
    return solver._is_consistent_grid(grid)


def is_solved_grid(grid: Grid) -> bool:
    """True when every row, column and box is a permutation of 1..9."""
    return is_valid_grid(grid) and count_empty_cells(grid) == 0
