# sudoku_solvers.py
from enum import Enum
from typing import Dict, Union

from sudoku_forward_check import BacktrackSolver, SudokuSolver


class UnsupportedAlgorithmError(ValueError):
    """Requested algorithm has no implementation."""


# ----------------------------
# Algorithm variants
# ----------------------------
class Algorithm(Enum):
    BACKTRACK = "backtrack"
    NORVIG = "norvig"
    DLX = "dlx"


ALGORITHM_LABELS: Dict[Algorithm, str] = {
    Algorithm.BACKTRACK: "Backtracking with forward-checking",
    Algorithm.NORVIG: "Peter Norvig's constraint propagation and search",
    Algorithm.DLX: "Algorithm X with Dancing Links (DLX) by Donald Knuth",
}


def describe(algorithm: Algorithm) -> str:
    return ALGORITHM_LABELS[algorithm]


def _as_algorithm(algorithm: Union[Algorithm, str]) -> Algorithm:
    if isinstance(algorithm, Algorithm):
        return algorithm
    try:
        return Algorithm(str(algorithm).strip().lower())
    except ValueError:
        raise UnsupportedAlgorithmError(f"Invalid sudoku algorithm specified: {algorithm}") from None


# ----------------------------
# Solver factory
# ----------------------------
def get_solver(algorithm: Union[Algorithm, str] = Algorithm.BACKTRACK) -> SudokuSolver:
    """Return a new solver for the algorithm, or raise UnsupportedAlgorithmError."""
    algorithm = _as_algorithm(algorithm)
    if algorithm is Algorithm.BACKTRACK:
        return BacktrackSolver()
    raise UnsupportedAlgorithmError(f"Sudoku algorithm not implemented: {algorithm.value} ({describe(algorithm)})")
