import random
from typing import Optional

from rules.rules import DEFAULT_COUNT_CAP

from .board import fixed_mask_from_board
from .constraints import find_conflicts, is_board_valid, is_solved, is_valid_placement, possible_candidates
from .counting import count_solutions_capped
from .events import record_solve_events, step_stats
from .generator import generate_puzzle, generate_solved_board
from .search import search_first_solution
from .state import build_initial_state
from .types import Board, Difficulty, PuzzleResult, SearchEvent, SolvedBoard, TraceLog
from .utils import trace as emit_trace
from .validation import validate_and_normalize_known_board, validate_cell, validate_max_steps


def check_placement(known_board: Board, row: int, col: int, value: int) -> bool:
    board = validate_and_normalize_known_board(known_board)
    validate_cell(row, col)
    return is_valid_placement(board, row, col, value)


def list_candidates(known_board: Board, row: int, col: int) -> list[int]:
    board = validate_and_normalize_known_board(known_board)
    validate_cell(row, col)
    return possible_candidates(board, row, col)


def check_board(known_board: Board) -> dict[str, object]:
    board = validate_and_normalize_known_board(known_board)
    return {
        "board_valid": is_board_valid(board),
        "solved": is_solved(board),
        "conflicts": find_conflicts(board),
    }


def solve_board(
    known_board: Optional[Board] = None,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[SearchEvent]] = None,
    trace_meta: Optional[dict[str, bool]] = None,
    trace_max_steps: Optional[int] = None,
) -> Optional[SolvedBoard]:
    """Solve instantly; return the completed board or None if there is no completion.

    ``known_board`` is never modified.
    """
    validate_max_steps(trace_max_steps)
    board, empty_positions = build_initial_state(known_board)

    emit_trace(trace, trace_log, f"Initialized search: empty_cells={len(empty_positions)}")

    if not is_board_valid(board):
        emit_trace(trace, trace_log, "Given cells conflict; no completion exists")
        return None

    if not search_first_solution(
        board,
        trace_enabled=trace,
        trace_log=trace_log,
        trace_steps=trace_steps,
        trace_meta=trace_meta,
        trace_max_steps=trace_max_steps,
    ):
        return None

    return [[value for value in row if value is not None] for row in board]


def count_solutions(known_board: Optional[Board] = None, cap: int = DEFAULT_COUNT_CAP) -> int:
    board, _ = build_initial_state(known_board)
    return count_solutions_capped(board, cap=cap)


def solve_with_events(
    known_board: Optional[Board] = None,
    max_steps: Optional[int] = None,
    trace_log: Optional[TraceLog] = None,
) -> dict[str, object]:
    """Record the step events of one search, writing its text trace to ``trace_log`` if given.

    When recording was truncated the solution is not in the last event and is
    found with a second, silent search.
    """
    validate_max_steps(max_steps)
    board, empty_positions = build_initial_state(known_board)
    emit_trace(trace_log is not None, trace_log, f"Initialized search: empty_cells={len(empty_positions)}")
    events, solved, truncated = record_solve_events(board, max_steps=max_steps, trace_log=trace_log)
    solution = None
    if solved:
        solution = events[-1]["board"] if events and not truncated else solve_board(board)
    return {
        "events": events,
        "solved": solved,
        "truncated": truncated,
        "solution": solution,
        "fixed_mask": fixed_mask_from_board(board),
        "stats": step_stats(events, len(events) - 1),
    }


def generate_full_board(seed: Optional[int] = None) -> SolvedBoard:
    return generate_solved_board(random.Random(seed))


def generate_new_puzzle(difficulty: Difficulty = "easy", seed: Optional[int] = None) -> PuzzleResult:
    return generate_puzzle(difficulty, rng=random.Random(seed))
