# tests/test_sudoku_grid.py
import pytest

from sudoku_grid import (
    Grid,
    InvalidDimensionsError,
    OutOfRangeError,
    load_puzzle,
    render_grid,
)


@pytest.mark.parametrize("rows, columns", [(0, 9), (9, 0), (-1, -1), (9, 8)])
def test_invalid_dimensions_rejected(rows, columns):
    with pytest.raises(InvalidDimensionsError):
        Grid(rows, columns)


def test_from_rows_rejects_ragged_rows():
    with pytest.raises(InvalidDimensionsError):
        Grid.from_rows([[0] * 9] * 8 + [[0] * 8])


def test_new_grid_is_empty():
    grid = Grid()
    assert grid.size == 9
    assert len(grid.empty_cells()) == 81


@pytest.mark.parametrize("row, column", [(-1, 0), (0, -1), (9, 0), (0, 9)])
def test_out_of_range_access(row, column):
    grid = Grid()
    with pytest.raises(OutOfRangeError):
        grid.value(row, column)
    with pytest.raises(OutOfRangeError):
        grid.set(row, column, 5)


def test_set_and_clear():
    grid = Grid()
    grid.set(4, 7, 3)
    assert grid.value(4, 7) == 3
    grid.set(4, 7, 0)
    assert grid.value(4, 7) == 0


def test_empty_cells_row_major():
    grid = Grid.from_rows([[1] * 9 for _ in range(9)])
    grid.set(5, 2, 0)
    grid.set(0, 8, 0)
    grid.set(5, 1, 0)
    assert grid.empty_cells() == [(0, 8), (5, 1), (5, 2)]


def test_cell_values(easy):
    # first row of easy.txt reads ". 4 . | . . . | . . ."
    assert easy.value(0, 0) == 0
    assert easy.value(0, 1) == 4
    assert easy.value(1, 0) == 8


def test_load_reads_solution_block(load_puzzle_resource, easy_solution):
    puzzle, solution = load_puzzle_resource("easy.txt")
    assert solution == easy_solution
    assert len(puzzle.empty_cells()) == 20


def test_load_without_solution_block(load_puzzle_resource):
    puzzle, solution = load_puzzle_resource("unsolvable.txt")
    assert solution is None
    assert puzzle.value(0, 2) == 1
    assert puzzle.value(3, 0) == 8


def test_load_ignores_decorations_and_leading_blank_lines():
    text = "\n\n" + "\n".join(
        ["+-------+-------+-------+"]
        + ["| 1 2 3 | 4 5 6 | 7 8 9 |"] * 3
        + ["|-------+-------+-------|"]
        + ["|\t. . . | . . . | . . . |"] * 6
    )
    puzzle, solution = load_puzzle(text)
    assert solution is None
    assert puzzle.value(2, 8) == 9
    assert puzzle.value(3, 0) == 0


def test_load_too_few_rows():
    with pytest.raises(ValueError):
        load_puzzle("1 2 3 4 5 6 7 8 9\n")


def test_load_too_many_rows():
    with pytest.raises(ValueError):
        load_puzzle("\n".join([". . . . . . . . ."] * 10))


def test_load_partial_solution_block():
    text = "\n".join([". . . . . . . . ."] * 9) + "\n\n" + "1 2 3 4 5 6 7 8 9\n"
    with pytest.raises(ValueError):
        load_puzzle(text)


def test_load_rejects_multi_digit_tokens():
    with pytest.raises(ValueError):
        load_puzzle("\n".join(["12 . . . . . . . ."] + [". . . . . . . . ."] * 8))


def test_render_format(easy):
    lines = render_grid(easy).splitlines()
    assert len(lines) == 11
    assert lines[0] == ". 4 . |. . . |. . ."
    assert lines[1] == "8 . 3 |5 7 6 |9 2 4"
    assert lines[3] == "------+------+------"
    assert lines[7] == "------+------+------"
    assert str(easy) == render_grid(easy)


def test_render_round_trip(load_puzzle_resource):
    for name in ("easy.txt", "medium.txt", "hard.txt", "unsolvable.txt", "unsolvable_row.txt"):
        puzzle, _ = load_puzzle_resource(name)
        reloaded, solution = load_puzzle(render_grid(puzzle))
        assert reloaded == puzzle
        assert solution is None


def test_copy_is_independent(easy):
    duplicate = easy.copy()
    assert duplicate == easy
    duplicate.set(0, 0, 2)
    assert easy.value(0, 0) == 0
    assert duplicate != easy
