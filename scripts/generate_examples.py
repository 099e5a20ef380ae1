"""Generate puzzles, print them, and restore them from their identifiers."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudokugen.generator.difficulty import Difficulty
from sudokugen.generator.puzzles import SudokuGenerator
from sudokugen.solver.backtracking import Grid, count_empty_cells

LOGGER = logging.getLogger("generate_examples")


def format_grid(grid: Grid) -> str:
    """Render a grid as text, with '.' for empty cells and box separators."""
    lines = []
    for r, row in enumerate(grid):
        if r and r % 3 == 0:
            lines.append("------+-------+------")
        cells = [str(v) if v else "." for v in row]
        lines.append(" | ".join(" ".join(cells[i:i + 3]) for i in (0, 3, 6)))
    return "\n".join(lines)


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Sudoku generation walkthrough")
    parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default=Difficulty.HARD.value,
        help="Difficulty of the generated puzzles",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=3,
        help="Number of puzzles to generate in the batch step",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for reproducible output",
    )
    parser.add_argument("--debug", action="store_true")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    _configure_logging(args.debug)

    rng = random.Random(args.seed) if args.seed is not None else None
    generator = SudokuGenerator(rng=rng)
    difficulty = Difficulty(args.difficulty)

    print(f"=== Generate ({difficulty.value}) ===")
    original = generator.generate_sudoku(difficulty)
    LOGGER.info("generation took %d attempt(s)", generator.last_attempts)
    print(format_grid(original.puzzle))
    print(f"empty cells: {count_empty_cells(original.puzzle)}")
    print(f"id: {original.identifier}")

    print("\n=== Restore at every difficulty ===")
    for level in Difficulty:
        restored = generator.generate_from_identifier(original.identifier, level)
        print(
            f"{level.value}: empty cells={count_empty_cells(restored.puzzle)} "
            f"solution matches={restored.solution == original.solution}"
        )

    print(f"\n=== Batch of {args.count} ===")
    for idx, item in enumerate(generator.generate_multiple_sudoku(args.count, difficulty), 1):
        restored = generator.generate_from_identifier(item.identifier, difficulty)
        print(f"\nSudoku #{idx}: {item.identifier}")
        print(format_grid(item.puzzle))
        print(f"restored solution matches: {restored.solution == item.solution}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
