# sudoku.py
from pathlib import Path
from typing import List, Optional
import argparse
import logging
import time

from sudoku_forward_check import UnsolvableError
from sudoku_grid import Grid, load_puzzle_file, print_grid
from sudoku_plot import plot_grid
from sudoku_solvers import Algorithm, UnsupportedAlgorithmError, describe, get_solver

log = logging.getLogger(__name__)

# ----------------------------
# Config
# ----------------------------
PUZZLE_DIR = Path(__file__).resolve().parent / "puzzles"
DEFAULT_PUZZLES = ["easy.txt", "medium.txt"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles by backtracking search.")
    parser.add_argument(
        "puzzles", nargs="*", type=Path,
        default=[PUZZLE_DIR / name for name in DEFAULT_PUZZLES],
        help="puzzle text files (default: bundled easy and medium puzzles)",
    )
    parser.add_argument(
        "--algorithm", default=Algorithm.BACKTRACK.value,
        choices=[algorithm.value for algorithm in Algorithm],
        help="solving algorithm",
    )
    parser.add_argument("--plot", metavar="OUT_PNG", help="save the last solved grid as a PNG")
    parser.add_argument("-v", "--verbose", action="store_true", help="log every assignment and backtrack")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        solver = get_solver(args.algorithm)
    except UnsupportedAlgorithmError as exc:
        log.error("%s", exc)
        return 2
    log.info("Started Sudoku Puzzle Solver: %s", describe(Algorithm(args.algorithm)))

    failures = 0
    last_solved: Optional[Grid] = None
    last_givens: Optional[Grid] = None

    for puzzle_path in args.puzzles:
        try:
            puzzle, known_solution = load_puzzle_file(puzzle_path)
        except (OSError, ValueError) as load_exc:
            log.error("Could not load puzzle file %s: %s", puzzle_path, load_exc)
            failures += 1
            continue

        print(f"=== Given puzzle ({puzzle_path.name}) ===")
        print_grid(puzzle)
        givens = puzzle.copy()

        start_time = time.perf_counter()
        try:
            solver.solve(puzzle)
        except UnsolvableError as exc:
            log.warning("Failed to solve puzzle %s: %s", puzzle_path, exc)
            print("No solution found.\n")
            failures += 1
            continue
        elapsed_time = time.perf_counter() - start_time

        print("=== Solved puzzle ===")
        print_grid(puzzle)
        if known_solution is not None and puzzle != known_solution:
            log.warning("Solution for %s differs from the solution bundled with the puzzle", puzzle_path)
        print(f"Assignments: {solver.assignments_count}, Backtracks: {solver.backtracks_count}, "
              f"Time: {elapsed_time:.4f}s\n")
        last_solved, last_givens = puzzle, givens

    if args.plot and last_solved is not None:
        plot_grid(last_solved, out_png=args.plot, givens=last_givens)

    return 1 if failures else 0


# ----------------------------
# Main
# ----------------------------
if __name__ == "__main__":
    raise SystemExit(main())
