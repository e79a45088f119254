from typing import Callable, Optional

from rules.rules import BOARD_SIZE, EMPTY
from solver.types import FixedMask, Grid


CLEAR_SCREEN = "\x1bc"
TITLE = "SMORT - Sudoku Meets Optimized Recursive Traversal"
GIVEN_COLOR = "\x1b[93m"
RESET_COLOR = "\x1b[0m"


def render_cell(value: int, given: bool, color: bool = True) -> str:
    if value == EMPTY:
        return "[ ]"
    if given and color:
        return f"[{GIVEN_COLOR}{value}{RESET_COLOR}]"
    return f"[{value}]"


def render_board(grid: Grid, fixed_mask: FixedMask, color: bool = True) -> str:
    lines = []
    for row in range(BOARD_SIZE):
        start = row * BOARD_SIZE
        cells = [
            render_cell(grid[index], fixed_mask[index], color=color)
            for index in range(start, start + BOARD_SIZE)
        ]
        lines.append(" ".join(cells))
    return "\n".join(lines)


def render_frame(grid: Grid, fixed_mask: FixedMask, status: Optional[str] = None, color: bool = True) -> str:
    parts = [CLEAR_SCREEN + TITLE, render_board(grid, fixed_mask, color=color)]
    if status:
        parts.append(status)
    return "\n".join(parts)


class Screen:
    """Redraws the whole viewport for every frame."""

    def __init__(self, write: Callable[[str], None] = print, color: bool = True) -> None:
        self.write = write
        self.color = color

    def draw(self, grid: Grid, fixed_mask: FixedMask, status: Optional[str] = None) -> None:
        self.write(render_frame(grid, fixed_mask, status=status, color=self.color))

    def visualizer(self, status: str = "Solving Slowly and Printing Each Step for Visualization"):
        def render(grid: Grid, fixed_mask: FixedMask) -> None:
            self.draw(grid, fixed_mask, status=status)

        return render
