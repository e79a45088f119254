import argparse
import json
from pathlib import Path
from typing import Any, Optional

from console import STATUS_DELAY_SECONDS, CommandLoop
from solver.solver import VISUALIZE_DELAY_SECONDS, solve_puzzle
from solver.state import Board
from solver.types import Rows, SolvedRows


def run(known_grid: Optional[Rows] = None, fixed_mask: Optional[list[list[bool]]] = None) -> SolvedRows:
    return solve_puzzle(known_grid=known_grid, fixed_mask=fixed_mask)


def run_with_trace(
    known_grid: Optional[Rows] = None,
    fixed_mask: Optional[list[list[bool]]] = None,
) -> tuple[SolvedRows, list[str]]:
    trace_log: list[str] = []
    result = solve_puzzle(known_grid=known_grid, fixed_mask=fixed_mask, trace=True, trace_log=trace_log)
    return result, trace_log


def run_interactive(
    known_grid: Optional[Rows] = None,
    fixed_mask: Optional[list[list[bool]]] = None,
    visualize_delay: float = VISUALIZE_DELAY_SECONDS,
    status_delay: float = STATUS_DELAY_SECONDS,
    color: bool = True,
) -> None:
    board = Board.from_rows(known_grid, fixed_mask)
    CommandLoop(board, visualize_delay=visualize_delay, status_delay=status_delay, color=color).run()


def load_puzzle_from_file(input_path: str) -> tuple[Rows, Optional[list[list[bool]]]]:
    path = Path(input_path)
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"input file is not valid JSON: {input_path}") from exc

    if not isinstance(payload, dict):
        raise ValueError("JSON root must be an object")

    known_grid = payload.get("known_grid")
    if known_grid is None:
        raise ValueError("JSON must include 'known_grid'")

    return known_grid, payload.get("fixed_mask")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Edit and solve 9x9 sudoku puzzles in the terminal")
    parser.add_argument("--input", help="Path to a JSON file with known_grid and optional fixed_mask")
    parser.add_argument("--solve", action="store_true", help="Solve the input puzzle and print JSON instead of starting the editor")
    parser.add_argument("--trace", action="store_true", help="Include solver trace output with --solve")
    parser.add_argument(
        "--visualize-delay",
        type=float,
        default=VISUALIZE_DELAY_SECONDS,
        help="Seconds each candidate stays on screen during a visualized solve",
    )
    parser.add_argument(
        "--status-delay",
        type=float,
        default=STATUS_DELAY_SECONDS,
        help="Seconds the solved / not solvable message stays on screen",
    )
    parser.add_argument("--no-color", action="store_true", help="Do not highlight given digits")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()

    try:
        known_grid, fixed_mask = (None, None) if args.input is None else load_puzzle_from_file(args.input)
        if args.solve:
            if known_grid is None:
                raise ValueError("--solve requires --input")
            if args.trace:
                solution, trace_log = run_with_trace(known_grid=known_grid, fixed_mask=fixed_mask)
                print(json.dumps({"solution": solution, "trace": trace_log}, indent=2))
            else:
                solution = run(known_grid=known_grid, fixed_mask=fixed_mask)
                print(json.dumps({"solution": solution}, indent=2))
        else:
            run_interactive(
                known_grid=known_grid,
                fixed_mask=fixed_mask,
                visualize_delay=args.visualize_delay,
                status_delay=args.status_delay,
                color=not args.no_color,
            )
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")
