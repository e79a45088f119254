from typing import Callable, Optional

from rules.rules import BOARD_SIZE, EMPTY, MAX_VALUE, MIN_VALUE

from .types import FixedMask, Grid, Renderer, TraceLog, TraceStep
from .utils import cell_index, grid_to_rows, indent, trace
from .validation import is_valid


def find_empty_cell(grid: Grid) -> Optional[tuple[int, int]]:
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            if grid[cell_index(row, col)] == EMPTY:
                return row, col
    return None


def search_first_solution(
    grid: Grid,
    fixed_mask: FixedMask,
    visualize: bool,
    render: Optional[Renderer],
    delay: float,
    sleep: Callable[[float], None],
    trace_enabled: bool,
    trace_log: Optional[TraceLog],
    trace_steps: Optional[list[TraceStep]],
    trace_meta: Optional[dict[str, bool]],
    trace_max_steps: int,
    depth: int,
) -> bool:
    def record_step(
        event: str,
        message: str,
        row: Optional[int] = None,
        col: Optional[int] = None,
        value: Optional[int] = None,
    ) -> None:
        if trace_steps is None:
            return
        if len(trace_steps) >= trace_max_steps:
            if trace_meta is not None:
                trace_meta["truncated"] = True
            return
        trace_steps.append(
            {
                "event": event,
                "message": message,
                "depth": depth,
                "row": row,
                "col": col,
                "value": value,
                "grid": grid_to_rows(grid),
            }
        )

    def log_line(message: str) -> None:
        if trace_log is not None and len(trace_log) >= trace_max_steps:
            if trace_meta is not None:
                trace_meta["truncated"] = True
            return
        trace(trace_enabled, trace_log, message)

    choice = find_empty_cell(grid)
    if choice is None:
        message = f"{indent(depth)}All cells assigned"
        log_line(message)
        record_step("complete", message)
        return True

    r, c = choice
    index = cell_index(r, c)
    message = f"{indent(depth)}Select cell ({r}, {c})"
    log_line(message)
    record_step("select_cell", message, row=r, col=c)

    for value in range(MIN_VALUE, MAX_VALUE + 1):
        if visualize:
            # invalid candidates are shown too
            grid[index] = value
            if render is not None:
                render(grid, fixed_mask)
            sleep(delay)
            grid[index] = EMPTY

        if not is_valid(grid, value, r, c):
            continue

        message = f"{indent(depth)}Try value {value} at ({r}, {c})"
        log_line(message)
        record_step("try_value", message, row=r, col=c, value=value)
        grid[index] = value

        if search_first_solution(
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
            depth=depth + 1,
        ):
            message = f"{indent(depth)}Accept value {value} at ({r}, {c})"
            log_line(message)
            record_step("accept_value", message, row=r, col=c, value=value)
            return True

        message = f"{indent(depth)}Backtrack on ({r}, {c}) value {value}"
        log_line(message)
        record_step("backtrack", message, row=r, col=c, value=value)
        grid[index] = EMPTY

    message = f"{indent(depth)}No valid values remain for ({r}, {c})"
    log_line(message)
    record_step("prune_branch", message, row=r, col=c)
    return False
