# sudoku_csp.py
from dataclasses import dataclass
from typing import List, Set, Tuple
import logging

from sudoku_grid import BOX_SIZE, DIGITS, EMPTY, SIZE, Grid, Variable

log = logging.getLogger(__name__)


# ----------------------------
# CSP Components: Domain, Constraints
# ----------------------------
def box_origin(row: int, column: int) -> Variable:
    """Return the top-left coordinate of the 3x3 box containing (row, column)."""
    return (row // BOX_SIZE) * BOX_SIZE, (column // BOX_SIZE) * BOX_SIZE


def candidates(grid: Grid, row: int, column: int) -> Set[int]:
    """Return the digits not yet placed in the cell's row, column and 3x3 box."""
    used_in_row = {grid.value(row, peer_column) for peer_column in range(SIZE)}
    used_in_column = {grid.value(peer_row, column) for peer_row in range(SIZE)}
    box_start_row, box_start_column = box_origin(row, column)
    used_in_box = {
        grid.value(box_row_index, box_column_index)
        for box_row_index in range(box_start_row, box_start_row + BOX_SIZE)
        for box_column_index in range(box_start_column, box_start_column + BOX_SIZE)
    }
    # empty cells hold 0, which is never a digit
    return set(DIGITS - (used_in_row | used_in_column | used_in_box))


def is_valid_guess(grid: Grid, row: int, column: int, guess: int) -> bool:
    """Check row, column and box constraints for guess. Skip the cell itself when scanning."""
    # Row constraint (skip the cell itself)
    for peer_column in range(SIZE):
        if peer_column == column:
            continue
        if grid.value(row, peer_column) == guess:
            return False

    # Column constraint (skip the cell itself)
    for peer_row in range(SIZE):
        if peer_row == row:
            continue
        if grid.value(peer_row, column) == guess:
            return False

    # Box constraint (3x3) (skip the cell itself)
    box_start_row, box_start_column = box_origin(row, column)
    for box_row_index in range(box_start_row, box_start_row + BOX_SIZE):
        for box_column_index in range(box_start_column, box_start_column + BOX_SIZE):
            if box_row_index == row and box_column_index == column:
                continue
            if grid.value(box_row_index, box_column_index) == guess:
                return False

    return True


def peers_of(var: Variable) -> List[Variable]:
    """Return list of peer coordinates that share row, column, or 3x3 box with var (excluding var)."""
    row, column = var
    peers: List[Variable] = []

    # row peers
    for peer_column in range(SIZE):
        if peer_column != column:
            peers.append((row, peer_column))

    # column peers
    for peer_row in range(SIZE):
        if peer_row != row:
            peers.append((peer_row, column))

    # box peers
    box_start_row, box_start_column = box_origin(row, column)
    for box_row_index in range(box_start_row, box_start_row + BOX_SIZE):
        for box_column_index in range(box_start_column, box_start_column + BOX_SIZE):
            peer_variable = (box_row_index, box_column_index)
            if peer_variable != var and peer_variable not in peers:
                peers.append(peer_variable)

    return peers


def is_consistent(grid: Grid) -> bool:
    """True when no placed digit repeats within its row, column or box."""
    for row in range(SIZE):
        for column in range(SIZE):
            digit = grid.value(row, column)
            if digit == EMPTY:
                continue
            if any(grid.value(*peer) == digit for peer in peers_of((row, column))):
                return False
    return True


def is_solved(grid: Grid) -> bool:
    return not grid.empty_cells() and is_consistent(grid)


# ----------------------------
# Search plan: cells ordered by remaining candidates
# ----------------------------
@dataclass
class Cell:
    """
    Search record for one empty cell.
    `candidates` is fixed when the plan is built; `cursor` indexes the next one to try.
    """

    row: int
    column: int
    candidates: Tuple[int, ...]
    cursor: int = 0

    @property
    def variable(self) -> Variable:
        return self.row, self.column


def num_candidates(cell: Cell) -> int:
    """Sort key: ascending number of candidates."""
    return len(cell.candidates)


def _eliminate_single_candidate(grid: Grid) -> Tuple[bool, List[Cell]]:
    """
    One pass over the empty cells.
    Returns (True, []) as soon as a single-candidate cell is fixed in the grid,
    otherwise (False, cells) with every empty cell and its candidates.
    """
    cells: List[Cell] = []
    for row, column in grid.empty_cells():
        cell_candidates = sorted(candidates(grid, row, column))
        if len(cell_candidates) == 1:
            grid.set(row, column, cell_candidates[0])
            log.debug("Fixed single candidate (%d, %d) = %d", row, column, cell_candidates[0])
            return True, []
        cells.append(Cell(row, column, tuple(cell_candidates)))
    return False, cells


def order_cells(grid: Grid) -> List[Cell]:
    """
    Build the search plan for the grid's empty cells:
      - cells with exactly one candidate are fixed in the grid, then the pass restarts
      - remaining cells are stable-sorted by number of candidates (most constrained first)
    """
    fixed_count = 0
    while True:
        fixed, cells = _eliminate_single_candidate(grid)
        if not fixed:
            break
        fixed_count += 1

    plan = sorted(cells, key=num_candidates)
    log.debug("Plan has %d cells after fixing %d single candidates", len(plan), fixed_count)
    return plan
