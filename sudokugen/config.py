"""Environment-driven settings for the generator service."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import TypeVar

from .generator.difficulty import Difficulty
from .generator.remover import DEFAULT_MAX_ATTEMPTS

_LOGGER = logging.getLogger(__name__)

_T = TypeVar("_T", int, float, str)


def _env(name: str, default: _T) -> _T:
    """Read an environment variable, converting to the same type as *default*."""
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return type(default)(raw)
    except (TypeError, ValueError):
        _LOGGER.warning("Ignoring invalid %s=%r, using %r", name, raw, default)
        return default


@dataclass
class GeneratorSettings:
    default_difficulty: Difficulty = Difficulty.MEDIUM
    removal_attempts: int = DEFAULT_MAX_ATTEMPTS
    max_batch: int = 50


def load_settings() -> GeneratorSettings:
    """
    Build settings from ``SUDOKU_*`` environment variables.

    Raises:
        ValueError: if ``SUDOKU_DEFAULT_DIFFICULTY`` names no known difficulty.
    """
    difficulty = _env("SUDOKU_DEFAULT_DIFFICULTY", Difficulty.MEDIUM.value)
    return GeneratorSettings(
        default_difficulty=Difficulty(difficulty.strip().lower()),
        removal_attempts=max(1, _env("SUDOKU_REMOVAL_ATTEMPTS", DEFAULT_MAX_ATTEMPTS)),
        max_batch=max(1, _env("SUDOKU_MAX_BATCH", 50)),
    )
