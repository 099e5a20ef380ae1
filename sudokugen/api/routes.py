"""API routes for the Sudoku generator application."""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from .. import __version__
from ..config import GeneratorSettings, load_settings
from ..generator.codec import InvalidIdentifier
from ..generator.difficulty import Difficulty
from ..generator.puzzles import SudokuGenerator, SudokuResult
from ..models.schemas import (
    BatchGenerateRequest,
    BatchGenerateResponse,
    GenerateRequest,
    HealthResponse,
    PuzzleResponse,
    RestoreRequest,
    SolveRequest,
    SolveResponse,
)
from ..solver.backtracking import SudokuSolver, count_empty_cells, is_valid_grid

router = APIRouter()
_SETTINGS: GeneratorSettings | None = None
_LOGGER = logging.getLogger(__name__)


def _get_settings() -> GeneratorSettings:
    global _SETTINGS

    if _SETTINGS is None:
        _SETTINGS = load_settings()
    return _SETTINGS


def _generator() -> SudokuGenerator:
    return SudokuGenerator(max_removal_attempts=_get_settings().removal_attempts)


def _resolve_difficulty(difficulty: Difficulty | None) -> Difficulty:
    return difficulty if difficulty is not None else _get_settings().default_difficulty


def _puzzle_response(result: SudokuResult, difficulty: Difficulty) -> PuzzleResponse:
    return PuzzleResponse(
        identifier=result.identifier,
        difficulty=difficulty,
        puzzle=result.puzzle,
        solution=result.solution,
        empty_cells=count_empty_cells(result.puzzle),
    )


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


# Generation is CPU-bound, so these handlers are plain functions and run in
# FastAPI's threadpool instead of blocking the event loop.


@router.post("/api/v1/sudoku:generate", response_model=PuzzleResponse, tags=["Sudoku"])
def generate_sudoku(request: GenerateRequest):
    """Generate a new puzzle with a unique solution."""
    difficulty = _resolve_difficulty(request.difficulty)
    generator = _generator()
    result = generator.generate_sudoku(difficulty)
    _LOGGER.info(
        "generated %s puzzle in %d attempt(s)", difficulty.value, generator.last_attempts
    )
    return _puzzle_response(result, difficulty)


@router.post(
    "/api/v1/sudoku:generateBatch",
    response_model=BatchGenerateResponse,
    tags=["Sudoku"],
)
def generate_sudoku_batch(request: BatchGenerateRequest):
    """Generate several independent puzzles."""
    max_batch = _get_settings().max_batch
    if request.count > max_batch:
        raise HTTPException(
            status_code=400,
            detail=f"count must be at most {max_batch}",
        )

    difficulty = _resolve_difficulty(request.difficulty)
    results = _generator().generate_multiple_sudoku(request.count, difficulty)
    return BatchGenerateResponse(
        puzzles=[_puzzle_response(result, difficulty) for result in results]
    )


@router.post("/api/v1/sudoku:restore", response_model=PuzzleResponse, tags=["Sudoku"])
def restore_sudoku(request: RestoreRequest):
    """
    Rebuild a puzzle from an identifier returned by a generate call.

    The solution is always the encoded one; the removed cells are chosen anew.
    """
    difficulty = _resolve_difficulty(request.difficulty)
    try:
        result = _generator().generate_from_identifier(request.identifier, difficulty)
    except InvalidIdentifier as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _puzzle_response(result, difficulty)


@router.post("/api/v1/sudoku:solve", response_model=SolveResponse, tags=["Sudoku"])
def solve_sudoku(request: SolveRequest):
    """
    Solve a Sudoku puzzle from a JSON grid.

    Expected JSON format:
    {
        "grid": {
            "cells": [[row1], [row2], ...]
        }
    }
    Where each row is a list of 9 integers (0 for empty).
    """
    grid = request.grid.cells

    # Validate grid format
    if not is_valid_grid(grid):
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Invalid Sudoku grid format",
        )

    solver = SudokuSolver()
    solution_count = solver.count_solutions(grid, max_count=2)
    if solution_count == 0:
        return SolveResponse(
            success=False, original=grid, solved=None, message="Puzzle has no solution"
        )
    if solution_count > 1:
        return SolveResponse(
            success=False,
            original=grid,
            solved=None,
            message="Puzzle has multiple solutions",
        )

    return SolveResponse(
        success=True,
        original=grid,
        solved=solver.solve(grid),
        message="Puzzle solved successfully",
    )
