from typing import Optional

from rules.rules import BOARD_SIZE, BOX_SIZE

from .types import Grid, SolvedRows, TraceLog


def cell_index(row: int, col: int) -> int:
    return row * BOARD_SIZE + col


def box_origin(row: int, col: int) -> tuple[int, int]:
    return (row // BOX_SIZE) * BOX_SIZE, (col // BOX_SIZE) * BOX_SIZE


def grid_to_rows(grid: Grid) -> SolvedRows:
    return [grid[row * BOARD_SIZE:(row + 1) * BOARD_SIZE] for row in range(BOARD_SIZE)]


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def indent(depth: int) -> str:
    return "  " * depth
