# sudoku_plot.py
from typing import Optional
import logging

import matplotlib.pyplot as plt

from sudoku_grid import BOX_SIZE, EMPTY, SIZE, Grid

log = logging.getLogger(__name__)

# ----------------------------
# Config
# ----------------------------
GIVEN_COLOR = "#000000"
SOLVED_COLOR = "#1f78b4"
BOX_LINE_WIDTH = 2.0
CELL_LINE_WIDTH = 0.5


# ----------------------------
# Visualization helper (optional)
# ----------------------------
def plot_grid(grid: Grid, out_png: str = "sudoku_solved.png", givens: Optional[Grid] = None,
              title: str = "Sudoku (backtracking solver)") -> str:
    """
    Save the grid as a PNG.
    Digits that were empty in `givens` are drawn in SOLVED_COLOR; without `givens` every digit counts as given.
    """
    fig, ax = plt.subplots(1, 1, figsize=(6, 6))

    for line_index in range(SIZE + 1):
        linewidth = BOX_LINE_WIDTH if line_index % BOX_SIZE == 0 else CELL_LINE_WIDTH
        ax.plot([0, SIZE], [line_index, line_index], color="black", linewidth=linewidth)
        ax.plot([line_index, line_index], [0, SIZE], color="black", linewidth=linewidth)

    for row in range(SIZE):
        for column in range(SIZE):
            digit = grid.value(row, column)
            if digit == EMPTY:
                continue
            is_given = givens is None or givens.value(row, column) != EMPTY
            # row 0 is drawn at the top
            ax.text(column + 0.5, SIZE - row - 0.5, str(digit), ha="center", va="center", fontsize=16,
                    color=GIVEN_COLOR if is_given else SOLVED_COLOR)

    ax.set_xlim(0, SIZE)
    ax.set_ylim(0, SIZE)
    ax.set_aspect("equal")
    ax.set_axis_off()
    plt.title(title)
    plt.tight_layout()
    fig.savefig(out_png, dpi=200)
    log.info("Saved grid to %s", out_png)
    plt.close(fig)
    return out_png
