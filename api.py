from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from solver.solver import solve_puzzle, unsolve_puzzle
from solver.validation import is_valid, normalize_grid, validate_coordinate, validate_digit


class SolveRequest(BaseModel):
    known_grid: list[list[Optional[int]]] = Field(
        ...,
        description="9x9 grid with digits 1-9 for known values and 0 or null for empty cells",
    )
    fixed_mask: Optional[list[list[bool]]] = Field(
        default=None,
        description="9x9 flags marking user givens. Defaults to every filled cell.",
    )
    trace: bool = Field(default=False, description="Include solver trace output in the response")
    trace_steps: bool = Field(default=False, description="Include structured trace steps for walkthrough/debugging.")
    trace_max_steps: int = Field(default=1000, ge=1, le=20000, description="Maximum number of trace steps, and of trace lines, to return.")


class TraceStepResponse(BaseModel):
    event: str
    message: str
    depth: int
    row: Optional[int] = None
    col: Optional[int] = None
    value: Optional[int] = None
    grid: list[list[int]]


class SolveResponse(BaseModel):
    solution: list[list[int]]
    grid_rows: list[str]
    grid_text: str
    trace: Optional[list[str]] = None
    trace_steps: Optional[list[TraceStepResponse]] = None
    trace_truncated: bool = False


class UnsolveRequest(BaseModel):
    grid: list[list[Optional[int]]] = Field(..., description="9x9 grid holding givens and solved digits")
    fixed_mask: list[list[bool]] = Field(..., description="9x9 flags marking user givens to keep")


class UnsolveResponse(BaseModel):
    grid: list[list[int]]


class CheckRequest(BaseModel):
    grid: list[list[Optional[int]]] = Field(..., description="9x9 grid to check the placement against")
    value: int = Field(..., description="Candidate digit 1-9")
    row: int = Field(..., description="0-based row of the target cell")
    col: int = Field(..., description="0-based column of the target cell")


class CheckResponse(BaseModel):
    valid: bool


app = FastAPI(
    title="Sudoku Solver API",
    description="Solve 9x9 sudoku grids with row-major backtracking and strip solved digits back to the givens.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest) -> SolveResponse:
    try:
        if request.trace or request.trace_steps:
            trace_log: list[str] = []
            trace_steps: list[dict[str, object]] = []
            trace_meta = {"truncated": False}
            solution = solve_puzzle(
                known_grid=request.known_grid,
                fixed_mask=request.fixed_mask,
                trace=True,
                trace_log=trace_log,
                trace_steps=trace_steps if request.trace_steps else None,
                trace_meta=trace_meta,
                trace_max_steps=request.trace_max_steps,
            )
            grid_rows = _format_grid_rows(solution)
            return SolveResponse(
                solution=solution,
                grid_rows=grid_rows,
                grid_text="\n".join(grid_rows),
                trace=trace_log if request.trace else None,
                trace_steps=trace_steps if request.trace_steps else None,
                trace_truncated=trace_meta["truncated"],
            )

        solution = solve_puzzle(known_grid=request.known_grid, fixed_mask=request.fixed_mask)
        grid_rows = _format_grid_rows(solution)
        return SolveResponse(solution=solution, grid_rows=grid_rows, grid_text="\n".join(grid_rows))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/unsolve", response_model=UnsolveResponse)
def unsolve(request: UnsolveRequest) -> UnsolveResponse:
    try:
        return UnsolveResponse(grid=unsolve_puzzle(request.grid, request.fixed_mask))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/check", response_model=CheckResponse)
def check(request: CheckRequest) -> CheckResponse:
    try:
        grid = normalize_grid(request.grid)
        value = validate_digit(request.value)
        row = validate_coordinate(request.row, "row")
        col = validate_coordinate(request.col, "col")
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    return CheckResponse(valid=is_valid(grid, value, row, col))


def _format_grid_rows(solution: list[list[int]]) -> list[str]:
    return [" ".join(str(value) for value in row) for row in solution]
