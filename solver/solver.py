import time
from typing import Callable, Optional, Sequence

from rules.rules import CELL_COUNT, EMPTY

from .search import search_first_solution
from .types import FixedMask, Grid, Renderer, SearchOutcome, SolvedRows, TraceLog, TraceStep
from .utils import grid_to_rows, trace as _trace
from .validation import find_conflicts, normalize_fixed_mask, normalize_grid


VISUALIZE_DELAY_SECONDS = 0.1


def solve(
    grid: Grid,
    fixed_mask: Optional[FixedMask] = None,
    visualize: bool = False,
    render: Optional[Renderer] = None,
    delay: float = VISUALIZE_DELAY_SECONDS,
    sleep: Callable[[float], None] = time.sleep,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[TraceStep]] = None,
    trace_meta: Optional[dict[str, bool]] = None,
    trace_max_steps: int = 1000,
) -> SearchOutcome:
    """Fill the empty cells of ``grid`` in place with the first valid completion.

    Cells are chosen in row-major order and digits tried from 1 to 9. When
    ``visualize`` is set, every candidate is drawn through ``render`` and held
    for ``delay`` seconds before it is checked. On failure every digit placed
    by the search is removed again, so only the givens remain. Digits outside
    ``fixed_mask`` left over from an earlier solve are cleared before searching.
    """
    if len(grid) != CELL_COUNT:
        raise ValueError(f"grid must have {CELL_COUNT} cells")
    if fixed_mask is None:
        fixed_mask = [value != EMPTY for value in grid]
    elif len(fixed_mask) != CELL_COUNT:
        raise ValueError(f"fixed_mask must have {CELL_COUNT} cells")
    if trace_max_steps < 1:
        raise ValueError("trace_max_steps must be >= 1")

    unsolve(grid, fixed_mask)

    trace_enabled = trace or trace_steps is not None
    empty_cells = sum(1 for value in grid if value == EMPTY)
    _trace(trace_enabled, trace_log, f"Initialized search: empty_cells={empty_cells}")

    conflicts = find_conflicts(grid)
    if conflicts:
        _trace(trace_enabled, trace_log, f"Known values conflict at {conflicts}; skipping search")
        return SearchOutcome.UNSOLVABLE

    found = search_first_solution(
        grid=grid,
        fixed_mask=fixed_mask,
        visualize=visualize,
        render=render,
        delay=delay,
        sleep=sleep,
        trace_enabled=trace_enabled,
        trace_log=trace_log,
        trace_steps=trace_steps,
        trace_meta=trace_meta,
        trace_max_steps=trace_max_steps,
        depth=0,
    )
    return SearchOutcome.SOLVED if found else SearchOutcome.UNSOLVABLE


def unsolve(grid: Grid, fixed_mask: FixedMask) -> None:
    for index, fixed in enumerate(fixed_mask):
        if not fixed:
            grid[index] = EMPTY


def solve_puzzle(
    known_grid: Optional[Sequence],
    fixed_mask: Optional[Sequence] = None,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[TraceStep]] = None,
    trace_meta: Optional[dict[str, bool]] = None,
    trace_max_steps: int = 1000,
) -> SolvedRows:
    grid = normalize_grid(known_grid)
    mask = normalize_fixed_mask(fixed_mask, grid)

    outcome = solve(
        grid,
        mask,
        trace=trace,
        trace_log=trace_log,
        trace_steps=trace_steps,
        trace_meta=trace_meta,
        trace_max_steps=trace_max_steps,
    )
    if outcome is SearchOutcome.UNSOLVABLE:
        raise ValueError("No valid solution for the provided known grid")

    return grid_to_rows(grid)


def unsolve_puzzle(known_grid: Sequence, fixed_mask: Sequence) -> SolvedRows:
    grid = normalize_grid(known_grid)
    mask = normalize_fixed_mask(fixed_mask, grid)
    unsolve(grid, mask)
    return grid_to_rows(grid)
