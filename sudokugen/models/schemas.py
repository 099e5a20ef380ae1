"""Pydantic models for API requests and responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..generator.difficulty import Difficulty


class SudokuGrid(BaseModel):
    """A Sudoku grid."""

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "cells": [
                    [5, 3, 0, 0, 7, 0, 0, 0, 0],
                    [6, 0, 0, 1, 9, 5, 0, 0, 0],
                    [0, 9, 8, 0, 0, 0, 0, 6, 0],
                    [8, 0, 0, 0, 6, 0, 0, 0, 3],
                    [4, 0, 0, 8, 0, 3, 0, 0, 1],
                    [7, 0, 0, 0, 2, 0, 0, 0, 6],
                    [0, 6, 0, 0, 0, 0, 2, 8, 0],
                    [0, 0, 0, 4, 1, 9, 0, 0, 5],
                    [0, 0, 0, 0, 8, 0, 0, 7, 9],
                ]
            }
        }
    )

    cells: list[list[int]] = Field(description="9x9 grid (0 for empty cells)")


class SolveRequest(BaseModel):
    """Request to solve a Sudoku grid."""

    grid: SudokuGrid = Field(description="The Sudoku puzzle to solve")


class SolveResponse(BaseModel):
    """Response from solving a Sudoku."""

    success: bool = Field(description="Whether the puzzle was solved")
    original: list[list[int]] = Field(description="Original grid")
    solved: list[list[int]] | None = Field(description="Solved grid (if successful)")
    message: str = Field(description="Status message")


class GenerateRequest(BaseModel):
    """Request to generate a new puzzle."""

    difficulty: Difficulty | None = Field(
        default=None, description="Difficulty level (server default if omitted)"
    )


class BatchGenerateRequest(BaseModel):
    """Request to generate several puzzles at once."""

    count: int = Field(default=1, ge=1, description="Number of puzzles")
    difficulty: Difficulty | None = Field(
        default=None, description="Difficulty level (server default if omitted)"
    )


class RestoreRequest(BaseModel):
    """Request to rebuild a puzzle from its identifier."""

    identifier: str = Field(description="Identifier returned by a generate call")
    difficulty: Difficulty | None = Field(
        default=None, description="Difficulty level (server default if omitted)"
    )


class PuzzleResponse(BaseModel):
    """A generated puzzle with its solution."""

    identifier: str = Field(description="URL-safe identifier of the solution")
    difficulty: Difficulty = Field(description="Difficulty used for cell removal")
    puzzle: list[list[int]] = Field(description="Puzzle grid (0 for empty cells)")
    solution: list[list[int]] = Field(description="Solved grid")
    empty_cells: int = Field(description="Number of empty cells in the puzzle")


class BatchGenerateResponse(BaseModel):
    """Several generated puzzles."""

    puzzles: list[PuzzleResponse] = Field(description="Generated puzzles")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service status")
    version: str = Field(description="Package version")
