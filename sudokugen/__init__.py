"""Sudoku puzzle generator with reversible puzzle identifiers."""

from .generator import (
    Difficulty,
    InvalidIdentifier,
    SudokuGenerator,
    SudokuResult,
    decode_identifier,
    encode_grid,
    generate_multiple,
    generate_puzzle,
    generate_puzzle_with_id,
    generate_solved_grid,
    restore_from_identifier,
)
from .solver import SudokuSolver, has_unique_solution, solve

__version__ = "1.0.0"

__all__ = [
    "Difficulty",
    "InvalidIdentifier",
    "SudokuGenerator",
    "SudokuResult",
    "SudokuSolver",
    "decode_identifier",
    "encode_grid",
    "generate_multiple",
    "generate_puzzle",
    "generate_puzzle_with_id",
    "generate_solved_grid",
    "has_unique_solution",
    "restore_from_identifier",
    "solve",
]
