"""Puzzle generator exports."""

from .codec import InvalidIdentifier, decode_identifier, encode_grid
from .difficulty import Difficulty
from .puzzles import (
    SudokuGenerator,
    SudokuResult,
    generate_multiple,
    generate_puzzle,
    generate_puzzle_with_id,
    generate_solved_grid,
    restore_from_identifier,
)
from .remover import remove_preserving_uniqueness

__all__ = [
    "Difficulty",
    "InvalidIdentifier",
    "SudokuGenerator",
    "SudokuResult",
    "decode_identifier",
    "encode_grid",
    "generate_multiple",
    "generate_puzzle",
    "generate_puzzle_with_id",
    "generate_solved_grid",
    "remove_preserving_uniqueness",
    "restore_from_identifier",
]
