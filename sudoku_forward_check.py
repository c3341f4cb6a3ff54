# sudoku_forward_check.py
from abc import ABC, abstractmethod
from typing import List
import logging

from sudoku_csp import Cell, is_consistent, is_valid_guess, order_cells
from sudoku_grid import EMPTY, Grid

log = logging.getLogger(__name__)


class UnsolvableError(Exception):
    """Signals that a puzzle has no valid solution."""


class SudokuSolver(ABC):
    """A strategy that fills a grid in place."""

    @abstractmethod
    def solve(self, grid: Grid) -> Grid:
        """Solve grid in place and return it, or raise UnsolvableError."""


# ----------------------------
# Guess selection
# ----------------------------
def next_valid_guess(grid: Grid, cell: Cell) -> bool:
    """
    Move cell.cursor to the first remaining candidate that violates no constraint.
    The cursor is left on the guess so the caller can commit it.
    Return False when no candidate from the cursor onwards is valid.
    """
    while cell.cursor < len(cell.candidates):
        candidate_guess = cell.candidates[cell.cursor]
        if is_valid_guess(grid, cell.row, cell.column, candidate_guess):
            return True
        cell.cursor += 1
    return False


# ----------------------------
# Backtracking Solver (forward checking on the initial plan)
# ----------------------------
class BacktrackSolver(SudokuSolver):
    """
    Backtracking solver over a fixed plan of empty cells.
      - single-candidate cells are fixed up front and the rest ordered most constrained first
      - each cell keeps a cursor so backtracking resumes after the guess it had committed
      - givens that already conflict are rejected before any search
      - on failure the grid is restored to the state it was in before solve() was called
    """

    def __init__(self):
        # instrumentation counters, reset on every solve
        self.assignments_count = 0
        self.backtracks_count = 0

    def solve(self, grid: Grid) -> Grid:
        self.assignments_count = 0
        self.backtracks_count = 0

        if not is_consistent(grid):
            log.info("The puzzle has conflicting givens!")
            raise UnsolvableError(
                f"The puzzle has conflicting givens and cannot be solved using {type(self).__name__}"
            )

        initially_empty = grid.empty_cells()
        plan: List[Cell] = order_cells(grid)

        position = 0
        while position < len(plan):
            cell = plan[position]

            if next_valid_guess(grid, cell):
                # assign
                guess = cell.candidates[cell.cursor]
                grid.set(cell.row, cell.column, guess)
                cell.cursor += 1
                self.assignments_count += 1
                log.debug("ASSIGN (%d, %d) = %d", cell.row, cell.column, guess)
                position += 1
                continue

            # dead end: empty the cell and start it over next time it is reached
            grid.set(cell.row, cell.column, EMPTY)
            cell.cursor = 0
            self.backtracks_count += 1

            if position == 0:
                self._restore(grid, initially_empty)
                log.info("The puzzle is unsolvable!")
                raise UnsolvableError(f"The puzzle could not be solved using {type(self).__name__}")

            position -= 1
            log.debug("UNASSIGN (%d, %d) (backtracking)", cell.row, cell.column)

        log.info(
            "Solved %d empty cells (assignments: %d, backtracks: %d)",
            len(initially_empty), self.assignments_count, self.backtracks_count,
        )
        return grid

    @staticmethod
    def _restore(grid: Grid, initially_empty):
        """Clear every cell that was empty before solving, including fixed single candidates."""
        for row, column in initially_empty:
            grid.set(row, column, EMPTY)
