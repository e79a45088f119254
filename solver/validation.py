from typing import Optional, Sequence

from rules.rules import BOARD_SIZE, BOX_SIZE, CELL_COUNT, EMPTY, MAX_VALUE, MIN_VALUE

from .types import FixedMask, Grid
from .utils import box_origin, cell_index


def is_valid(grid: Grid, value: int, row: int, col: int) -> bool:
    """Return False if ``value`` already sits in the row, column or box of ``(row, col)``.

    The target cell itself is never compared, so the check also holds for a
    cell that already contains ``value``.
    """
    for c in range(BOARD_SIZE):
        if c != col and grid[cell_index(row, c)] == value:
            return False

    for r in range(BOARD_SIZE):
        if r != row and grid[cell_index(r, col)] == value:
            return False

    box_row, box_col = box_origin(row, col)
    for r in range(box_row, box_row + BOX_SIZE):
        for c in range(box_col, box_col + BOX_SIZE):
            if (r, c) == (row, col):
                continue
            if grid[cell_index(r, c)] == value:
                return False

    return True


def find_conflicts(grid: Grid) -> list[tuple[int, int]]:
    conflicts: list[tuple[int, int]] = []
    for row in range(BOARD_SIZE):
        for col in range(BOARD_SIZE):
            value = grid[cell_index(row, col)]
            if value != EMPTY and not is_valid(grid, value, row, col):
                conflicts.append((row, col))
    return conflicts


def validate_coordinate(value: int, name: str) -> int:
    if not _is_int(value):
        raise ValueError(f"{name} must be an integer")
    if value < 0 or value >= BOARD_SIZE:
        raise ValueError(f"{name} must be between 0 and {BOARD_SIZE - 1}")
    return value


def validate_digit(value: int) -> int:
    if not _is_int(value):
        raise ValueError("value must be an integer")
    if value < MIN_VALUE or value > MAX_VALUE:
        raise ValueError(f"value must be between {MIN_VALUE} and {MAX_VALUE}")
    return value


def normalize_grid(known_grid: Optional[Sequence]) -> Grid:
    if known_grid is None:
        return [EMPTY] * CELL_COUNT

    cells = _flatten(known_grid, "known_grid")
    grid: Grid = []
    for value in cells:
        if value is None:
            grid.append(EMPTY)
            continue
        if not _is_int(value):
            raise ValueError("known_grid entries must be integers or None")
        if value != EMPTY and (value < MIN_VALUE or value > MAX_VALUE):
            raise ValueError(f"known_grid integers must be between {MIN_VALUE} and {MAX_VALUE}, or 0 for empty")
        grid.append(value)

    return grid


def normalize_fixed_mask(fixed_mask: Optional[Sequence], grid: Grid) -> FixedMask:
    if fixed_mask is None:
        return [value != EMPTY for value in grid]

    flags = _flatten(fixed_mask, "fixed_mask")
    mask: FixedMask = []
    for index, flag in enumerate(flags):
        if not isinstance(flag, bool):
            raise ValueError("fixed_mask entries must be booleans")
        if flag and grid[index] == EMPTY:
            raise ValueError("fixed_mask cannot mark an empty cell as given")
        mask.append(flag)

    return mask


def _flatten(values: Sequence, name: str) -> list:
    if not isinstance(values, (list, tuple)):
        raise ValueError(f"{name} must be a list")

    if len(values) == CELL_COUNT and not any(isinstance(item, (list, tuple)) for item in values):
        return list(values)

    if len(values) != BOARD_SIZE:
        raise ValueError(f"{name} must have {BOARD_SIZE} rows of {BOARD_SIZE} cells or {CELL_COUNT} cells")

    flat: list = []
    for row in values:
        if not isinstance(row, (list, tuple)) or len(row) != BOARD_SIZE:
            raise ValueError(f"{name} must have {BOARD_SIZE} rows of {BOARD_SIZE} cells or {CELL_COUNT} cells")
        flat.extend(row)
    return flat


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
