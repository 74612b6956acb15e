from typing import Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from rules.rules import DEFAULT_COUNT_CAP, DEFAULT_TRACE_MAX_STEPS, MAX_TRACE_MAX_STEPS
from sudoku.board import format_board_rows
from sudoku.logger import get_logger
from sudoku.solver import (
    check_board,
    check_placement,
    count_solutions,
    generate_new_puzzle,
    list_candidates,
    solve_board,
    solve_with_events,
)

LOGGER = get_logger(__name__)

BOARD_DESCRIPTION = "9x9 grid with digits 1-9 for filled cells and null for empty cells"


class BoardRequest(BaseModel):
    board: list[list[Optional[int]]] = Field(..., description=BOARD_DESCRIPTION)


class CellRequest(BoardRequest):
    row: int = Field(..., ge=0, le=8, description="Row index, 0-based")
    col: int = Field(..., ge=0, le=8, description="Column index, 0-based")


class PlacementRequest(CellRequest):
    value: int = Field(..., description="Digit to place; anything outside 1-9 is never valid")


class PlacementResponse(BaseModel):
    valid: bool


class CandidatesResponse(BaseModel):
    row: int
    col: int
    candidates: list[int]


class ValidateResponse(BaseModel):
    board_valid: bool
    solved: bool
    conflicts: list[list[bool]]


class SolveRequest(BaseModel):
    board: Optional[list[list[Optional[int]]]] = Field(
        default=None,
        description=f"{BOARD_DESCRIPTION}. Omit to solve an empty board.",
    )
    trace: bool = Field(default=False, description="Include solver trace output in the response")
    trace_steps: bool = Field(default=False, description="Include try/place/backtrack steps for visualization.")
    trace_max_steps: int = Field(
        default=DEFAULT_TRACE_MAX_STEPS,
        ge=1,
        le=MAX_TRACE_MAX_STEPS,
        description="Maximum number of steps to return.",
    )


class SearchEventResponse(BaseModel):
    event: str
    message: str
    depth: int
    row: int
    col: int
    value: Optional[int] = None
    board: list[list[Optional[int]]]


class StepStatsResponse(BaseModel):
    attempts: int
    placements: int
    backtracks: int


class SolveResponse(BaseModel):
    solved: bool
    solution: Optional[list[list[int]]] = None
    grid_rows: Optional[list[str]] = None
    grid_text: Optional[str] = None
    message: str
    trace: Optional[list[str]] = None
    trace_steps: Optional[list[SearchEventResponse]] = None
    trace_stats: Optional[StepStatsResponse] = None
    trace_truncated: bool = False


class CountRequest(BoardRequest):
    cap: int = Field(default=DEFAULT_COUNT_CAP, ge=1, le=1000, description="Stop counting after this many solutions")


class CountResponse(BaseModel):
    count: int
    cap: int
    unique: bool
    capped: bool


class GenerateRequest(BaseModel):
    difficulty: str = Field(default="easy", description="Difficulty: easy, medium, hard, or random")
    seed: Optional[int] = Field(default=None, description="Seed for a reproducible puzzle")


class GenerateResponse(BaseModel):
    difficulty: str
    puzzle: list[list[Optional[int]]]
    solution: list[list[int]]
    fixed_mask: list[list[bool]]
    target_removals: int
    removed: int
    grid_rows: list[str]


app = FastAPI(
    title="Sudoku Engine API",
    description="Generate 9x9 Sudoku puzzles with a unique solution, validate boards, and solve them step by step.",
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


@app.post("/validate", response_model=ValidateResponse)
def validate(request: BoardRequest) -> ValidateResponse:
    try:
        return ValidateResponse(**check_board(request.board))
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/placement", response_model=PlacementResponse)
def placement(request: PlacementRequest) -> PlacementResponse:
    try:
        valid = check_placement(request.board, request.row, request.col, request.value)
        return PlacementResponse(valid=valid)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/candidates", response_model=CandidatesResponse)
def candidates(request: CellRequest) -> CandidatesResponse:
    try:
        values = list_candidates(request.board, request.row, request.col)
        return CandidatesResponse(row=request.row, col=request.col, candidates=values)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/solve", response_model=SolveResponse)
def solve(request: SolveRequest) -> SolveResponse:
    try:
        trace_log: Optional[list[str]] = [] if request.trace else None
        if request.trace_steps:
            result = solve_with_events(request.board, max_steps=request.trace_max_steps, trace_log=trace_log)
            return _build_solve_response(
                result["solution"],
                trace_log=trace_log,
                trace_steps=result["events"],
                trace_stats=result["stats"],
                trace_truncated=result["truncated"],
            )

        solution = solve_board(request.board, trace=request.trace, trace_log=trace_log)
        return _build_solve_response(solution, trace_log=trace_log)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/count", response_model=CountResponse)
def count(request: CountRequest) -> CountResponse:
    try:
        found = count_solutions(request.board, cap=request.cap)
        return CountResponse(count=found, cap=request.cap, unique=found == 1, capped=found >= request.cap)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.post("/generate", response_model=GenerateResponse)
def generate(request: GenerateRequest) -> GenerateResponse:
    try:
        result = generate_new_puzzle(request.difficulty, seed=request.seed)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    LOGGER.info("Generated %s puzzle with %d empty cells", result["difficulty"], result["removed"])
    return GenerateResponse(**result, grid_rows=format_board_rows(result["puzzle"]))


def _build_solve_response(
    solution: Optional[list[list[int]]],
    trace_log: Optional[list[str]] = None,
    trace_steps: Optional[list[dict[str, object]]] = None,
    trace_stats: Optional[dict[str, int]] = None,
    trace_truncated: bool = False,
) -> SolveResponse:
    if solution is None:
        return SolveResponse(
            solved=False,
            message="No solution found.",
            trace=trace_log,
            trace_steps=trace_steps,
            trace_stats=trace_stats,
            trace_truncated=trace_truncated,
        )

    grid_rows = format_board_rows(solution)
    return SolveResponse(
        solved=True,
        solution=solution,
        grid_rows=grid_rows,
        grid_text="\n".join(grid_rows),
        message="Solved.",
        trace=trace_log,
        trace_steps=trace_steps,
        trace_stats=trace_stats,
        trace_truncated=trace_truncated,
    )
