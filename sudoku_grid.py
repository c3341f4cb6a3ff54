# sudoku_grid.py
from typing import List, Tuple, Optional
import re

# ----------------------------
# Config
# ----------------------------
SIZE = 9
BOX_SIZE = 3
DIGITS = frozenset(range(1, SIZE + 1))
EMPTY = 0

# ----------------------------
# Types
# ----------------------------
Variable = Tuple[int, int]
Rows = List[List[int]]

# tokens are separated by whitespace and box pipes
TOKEN_SEPARATOR = re.compile(r"[\s|]+")
ROW_SEPARATOR = "------+------+------"


class InvalidDimensionsError(ValueError):
    """Grid constructed with non-positive or unequal row/column counts."""


class OutOfRangeError(IndexError):
    """Coordinate outside the grid bounds."""


# ----------------------------
# Grid
# ----------------------------
class Grid:
    """
    Square table of digits addressed by (row, column).
      - 0 marks an empty cell
      - values are not validated on write; the solver keeps them consistent
    """

    def __init__(self, rows: int = SIZE, columns: int = SIZE):
        if rows <= 0:
            raise InvalidDimensionsError(f"Number of grid rows must be > 0. Specified: {rows}")
        if columns <= 0:
            raise InvalidDimensionsError(f"Number of grid columns must be > 0. Specified: {columns}")
        if rows != columns:
            raise InvalidDimensionsError(
                f"Number of grid rows must be equal to number of grid columns. Rows: {rows} =/= Columns: {columns}"
            )
        self._cells: Rows = [[EMPTY] * columns for _ in range(rows)]

    @classmethod
    def from_rows(cls, rows: Rows) -> "Grid":
        """Build a grid from a list of row lists."""
        column_counts = {len(row) for row in rows}
        if len(column_counts) > 1:
            raise InvalidDimensionsError(f"Rows have differing lengths: {sorted(column_counts)}")
        grid = cls(len(rows), column_counts.pop() if column_counts else 0)
        for row_index, row in enumerate(rows):
            grid._cells[row_index] = [int(digit) for digit in row]
        return grid

    @property
    def size(self) -> int:
        return len(self._cells)

    def _check_coordinates(self, row: int, column: int):
        if not 0 <= row < self.size:
            raise OutOfRangeError(f"Invalid row coordinate: {row}")
        if not 0 <= column < self.size:
            raise OutOfRangeError(f"Invalid column coordinate: {column}")

    def value(self, row: int, column: int) -> int:
        """Return the digit at (row, column), 0 if empty."""
        self._check_coordinates(row, column)
        return self._cells[row][column]

    def set(self, row: int, column: int, digit: int):
        self._check_coordinates(row, column)
        self._cells[row][column] = digit

    def empty_cells(self) -> List[Variable]:
        """Return coordinates of empty cells in row-major order."""
        return [
            (row, column)
            for row in range(self.size)
            for column in range(self.size)
            if self._cells[row][column] == EMPTY
        ]

    def rows(self) -> Rows:
        return [list(row) for row in self._cells]

    def copy(self) -> "Grid":
        return Grid.from_rows(self._cells)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __repr__(self) -> str:
        return f"Grid({self._cells!r})"

    def __str__(self) -> str:
        return render_grid(self)


# ----------------------------
# Load puzzle text
# ----------------------------
def _parse_row(tokens: List[str]) -> List[int]:
    row: List[int] = []
    for token in tokens:
        if token[0].isdigit():
            digit = int(token)
            if digit > SIZE:
                raise ValueError(f"Invalid digit in puzzle row: {token}")
            row.append(digit)
        else:
            # unsolved cell
            row.append(EMPTY)
    return row


def _build_block(rows: Rows, block_name: str) -> Grid:
    if len(rows) != SIZE:
        raise ValueError(f"{block_name} must have {SIZE} rows, found {len(rows)}")
    return Grid.from_rows(rows)


def load_puzzle(text: str) -> Tuple[Grid, Optional[Grid]]:
    """
    Parse puzzle text into (puzzle, solution).
      - a line with nine tokens is a grid row; non-digit tokens (e.g. '.') are empty cells
      - the first blank line after the puzzle rows starts the optional solution block
      - anything else (box separator lines) is ignored
    """
    puzzle_rows: Rows = []
    solution_rows: Rows = []
    in_solution = False

    for line in text.splitlines():
        tokens = [token for token in TOKEN_SEPARATOR.split(line.strip()) if token]

        if len(tokens) == SIZE:
            target_rows = solution_rows if in_solution else puzzle_rows
            if len(target_rows) == SIZE:
                raise ValueError(f"Too many rows in {'solution' if in_solution else 'puzzle'} block")
            target_rows.append(_parse_row(tokens))
        elif not tokens and puzzle_rows:
            in_solution = True

    puzzle = _build_block(puzzle_rows, "Puzzle")
    solution = _build_block(solution_rows, "Solution") if solution_rows else None
    return puzzle, solution


def load_puzzle_file(path) -> Tuple[Grid, Optional[Grid]]:
    """Load (puzzle, solution) from a puzzle text file."""
    with open(path, encoding="utf-8") as puzzle_file:
        return load_puzzle(puzzle_file.read())


# ----------------------------
# Print Sudoku
# ----------------------------
def render_grid(grid: Grid) -> str:
    lines: List[str] = []
    for row_index in range(grid.size):
        if row_index != 0 and row_index % BOX_SIZE == 0:
            lines.append(ROW_SEPARATOR)
        row_str = ""
        for column_index in range(grid.size):
            if column_index != 0 and column_index % BOX_SIZE == 0:
                row_str += "|"
            val = grid.value(row_index, column_index)
            row_str += (str(val) if val != EMPTY else ".") + " "
        lines.append(row_str.rstrip())
    return "\n".join(lines) + "\n"


def print_grid(grid: Grid):
    print(render_grid(grid))
