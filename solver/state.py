import time
from typing import Callable, Optional, Sequence

from rules.rules import CELL_COUNT, EMPTY

from .solver import VISUALIZE_DELAY_SECONDS, solve, unsolve
from .types import FixedMask, Grid, Renderer, SearchOutcome, SolvedRows
from .utils import cell_index, grid_to_rows
from .validation import normalize_fixed_mask, normalize_grid, validate_coordinate, validate_digit


class Board:
    """Grid and given-mask pair edited by one command loop.

    Coordinates are 0-based here.
    """

    def __init__(self, grid: Optional[Grid] = None, fixed_mask: Optional[FixedMask] = None) -> None:
        self.grid: Grid = list(grid) if grid is not None else [EMPTY] * CELL_COUNT
        self.fixed_mask: FixedMask = list(fixed_mask) if fixed_mask is not None else [False] * CELL_COUNT

    @classmethod
    def from_rows(cls, known_grid: Optional[Sequence], fixed_mask: Optional[Sequence] = None) -> "Board":
        grid = normalize_grid(known_grid)
        return cls(grid, normalize_fixed_mask(fixed_mask, grid))

    def enter(self, row: int, col: int, value: int) -> None:
        index = cell_index(validate_coordinate(row, "row"), validate_coordinate(col, "col"))
        self.grid[index] = validate_digit(value)
        self.fixed_mask[index] = True

    def delete(self, row: int, col: int) -> None:
        index = cell_index(validate_coordinate(row, "row"), validate_coordinate(col, "col"))
        self.grid[index] = EMPTY
        self.fixed_mask[index] = False

    def reset(self) -> None:
        self.grid[:] = [EMPTY] * CELL_COUNT
        self.fixed_mask[:] = [False] * CELL_COUNT

    def unsolve(self) -> None:
        unsolve(self.grid, self.fixed_mask)

    def solve(
        self,
        visualize: bool = False,
        render: Optional[Renderer] = None,
        delay: float = VISUALIZE_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> SearchOutcome:
        return solve(self.grid, self.fixed_mask, visualize=visualize, render=render, delay=delay, sleep=sleep)

    def rows(self) -> SolvedRows:
        return grid_to_rows(self.grid)
