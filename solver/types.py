from enum import Enum
from typing import Callable, Optional


Grid = list[int]
FixedMask = list[bool]
Rows = list[list[Optional[int]]]
SolvedRows = list[list[int]]
TraceLog = list[str]
TraceStep = dict[str, object]
Renderer = Callable[[Grid, FixedMask], None]


class SearchOutcome(str, Enum):
    SOLVED = "solved"
    UNSOLVABLE = "unsolvable"
