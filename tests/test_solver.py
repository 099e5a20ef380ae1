"""Tests for the backtracking solver."""

import random

import pytest

from sudokugen.solver.backtracking import (
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

from .conftest import assert_sudoku_invariant


def _unsolvable_grid():
    # Givens are consistent, but (0, 8) can only be 9 and 9 sits below it.
    grid = empty_grid()
    grid[0][:8] = [1, 2, 3, 4, 5, 6, 7, 8]
    grid[1][8] = 9
    return grid


class TestIsValid:
    def test_rejects_row_column_and_box_conflicts(self, puzzle_grid):
        assert is_valid(puzzle_grid, 0, 2, 5) is False  # row
        assert is_valid(puzzle_grid, 2, 0, 8) is False  # column
        assert is_valid(puzzle_grid, 1, 1, 8) is False  # box

    def test_accepts_legal_candidate(self, puzzle_grid):
        assert is_valid(puzzle_grid, 0, 2, 4) is True

    def test_ignores_value_already_at_target_cell(self, solved_grid):
        for r in range(9):
            for c in range(9):
                assert is_valid(solved_grid, r, c, solved_grid[r][c])

    def test_does_not_mutate_grid(self, puzzle_grid):
        before = [row[:] for row in puzzle_grid]
        is_valid(puzzle_grid, 4, 4, 5)
        assert puzzle_grid == before


class TestCandidateSuppliers:
    def test_ascending_order(self):
        assert list(ascending_candidates()) == list(range(1, 10))

    def test_shuffled_is_permutation_drawn_per_call(self):
        supplier = shuffled_candidates(random.Random(3))
        orders = [tuple(supplier()) for _ in range(20)]
        for order in orders:
            assert sorted(order) == list(range(1, 10))
        assert len(set(orders)) > 1


class TestSolve:
    def test_solves_known_puzzle(self, puzzle_grid, solved_grid):
        assert solve(puzzle_grid) == solved_grid

    def test_does_not_mutate_input(self, puzzle_grid):
        before = [row[:] for row in puzzle_grid]
        solve(puzzle_grid)
        assert puzzle_grid == before

    def test_solved_grid_is_returned_unchanged(self, solved_grid):
        assert solve(solved_grid) == solved_grid

    def test_unsolvable_grid_returns_none(self):
        assert solve(_unsolvable_grid()) is None

    def test_inconsistent_givens_return_none(self):
        grid = empty_grid()
        grid[0][0] = 5
        grid[0][5] = 5
        assert solve(grid) is None
        assert SudokuSolver().count_solutions(grid) == 0


class TestFill:
    def test_random_fill_produces_solved_grid(self):
        grid = SudokuSolver(candidates=shuffled_candidates()).fill(empty_grid())
        assert count_empty_cells(grid) == 0
        assert_sudoku_invariant(grid)
        assert is_solved_grid(grid)

    def test_seeded_fill_is_reproducible(self):
        first = SudokuSolver(shuffled_candidates(random.Random(7))).fill(empty_grid())
        second = SudokuSolver(shuffled_candidates(random.Random(7))).fill(empty_grid())
        assert first == second

    def test_fills_differ_between_runs(self):
        grids = {
            str(SudokuSolver(shuffled_candidates()).fill(empty_grid())) for _ in range(5)
        }
        assert len(grids) == 5

    def test_fill_failure_raises(self):
        with pytest.raises(RuntimeError):
            SudokuSolver().fill(_unsolvable_grid())


class TestCountSolutions:
    def test_unique_for_known_puzzle(self, puzzle_grid):
        assert SudokuSolver().count_solutions(puzzle_grid) == 1
        assert has_unique_solution(puzzle_grid) is True

    def test_four_clues_have_multiple_solutions(self):
        grid = empty_grid()
        grid[0][0], grid[0][1], grid[1][0], grid[1][1] = 1, 2, 3, 4
        assert SudokuSolver().count_solutions(grid) == 2
        assert has_unique_solution(grid) is False

    def test_empty_grid_stops_at_cap(self):
        assert SudokuSolver().count_solutions(empty_grid(), max_count=2) == 2
        assert SudokuSolver().count_solutions(empty_grid(), max_count=5) == 5

    def test_full_random_fill_is_unique(self):
        grid = SudokuSolver(shuffled_candidates()).fill(empty_grid())
        assert has_unique_solution(grid) is True

    def test_unsolvable_grid_has_zero_solutions(self):
        assert SudokuSolver().count_solutions(_unsolvable_grid()) == 0
        assert has_unique_solution(_unsolvable_grid()) is False

    def test_does_not_mutate_input(self, puzzle_grid):
        before = [row[:] for row in puzzle_grid]
        SudokuSolver().count_solutions(puzzle_grid)
        assert puzzle_grid == before


class TestIsValidGrid:
    def test_accepts_puzzle(self, puzzle_grid):
        assert is_valid_grid(puzzle_grid) is True

    @pytest.mark.parametrize(
        "grid",
        [
            [],
            [[0] * 9] * 8,
            [[0] * 8 for _ in range(9)],
            [[10] + [0] * 8] + [[0] * 9 for _ in range(8)],
            [[-1] + [0] * 8] + [[0] * 9 for _ in range(8)],
        ],
    )
    def test_rejects_malformed_grid(self, grid):
        assert is_valid_grid(grid) is False

    def test_rejects_duplicate_givens(self):
        grid = empty_grid()
        grid[3][3] = 7
        grid[5][5] = 7
        assert is_valid_grid(grid) is False

    def test_is_solved_grid(self, solved_grid, puzzle_grid):
        assert is_solved_grid(solved_grid) is True
        assert is_solved_grid(puzzle_grid) is False
