# tests/conftest.py
from pathlib import Path

import pytest

from sudoku_grid import Grid, load_puzzle_file

PUZZLE_DIR = Path(__file__).resolve().parents[1] / "puzzles"

EASY_SOLUTION = [
    [2, 4, 5, 8, 9, 3, 7, 1, 6],
    [8, 1, 3, 5, 7, 6, 9, 2, 4],
    [7, 6, 9, 2, 1, 4, 5, 3, 8],
    [5, 3, 6, 9, 8, 7, 1, 4, 2],
    [4, 9, 2, 1, 6, 5, 8, 7, 3],
    [1, 7, 8, 4, 3, 2, 6, 5, 9],
    [6, 8, 4, 7, 2, 1, 3, 9, 5],
    [3, 2, 1, 6, 5, 9, 4, 8, 7],
    [9, 5, 7, 3, 4, 8, 2, 6, 1],
]


@pytest.fixture
def load_puzzle_resource():
    """Load (puzzle, solution) from a bundled puzzle file by name."""
    def _load(name):
        return load_puzzle_file(PUZZLE_DIR / name)
    return _load


@pytest.fixture
def easy(load_puzzle_resource):
    puzzle, _ = load_puzzle_resource("easy.txt")
    return puzzle


@pytest.fixture
def easy_solution():
    return Grid.from_rows(EASY_SOLUTION)
