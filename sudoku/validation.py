from typing import Optional

from rules.rules import BOARD_SIZE, DIFFICULTY_REMOVALS, MAX_TRACE_MAX_STEPS, MAX_VALUE, MIN_VALUE, RANDOM_DIFFICULTY

from .board import make_empty_board
from .types import Board, Difficulty


def validate_and_normalize_known_board(known_board: Optional[Board]) -> Board:
    if known_board is None:
        return make_empty_board()

    if not isinstance(known_board, list) or len(known_board) != BOARD_SIZE:
        raise ValueError(f"board must be a list of {BOARD_SIZE} rows")

    normalized_board: Board = []
    for row in known_board:
        if not isinstance(row, list) or len(row) != BOARD_SIZE:
            raise ValueError(f"board rows must be lists of {BOARD_SIZE} cells")

        normalized_row = []
        for value in row:
            if value is None:
                normalized_row.append(None)
                continue
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError("board entries must be integers or None")
            if value < MIN_VALUE or value > MAX_VALUE:
                raise ValueError(f"board integers must be between {MIN_VALUE} and {MAX_VALUE}")
            normalized_row.append(value)

        normalized_board.append(normalized_row)

    return normalized_board


def validate_cell(r: int, c: int) -> None:
    for name, index in (("row", r), ("col", c)):
        if isinstance(index, bool) or not isinstance(index, int):
            raise ValueError(f"{name} must be an integer")
        if index < 0 or index >= BOARD_SIZE:
            raise ValueError(f"{name} must be between 0 and {BOARD_SIZE - 1}")


def validate_difficulty(difficulty: Difficulty) -> None:
    allowed = [*DIFFICULTY_REMOVALS, RANDOM_DIFFICULTY]
    if difficulty not in allowed:
        raise ValueError(f"difficulty must be one of: {', '.join(allowed)}")


def validate_cap(cap: int) -> None:
    if isinstance(cap, bool) or not isinstance(cap, int):
        raise ValueError("cap must be an integer")
    if cap < 1:
        raise ValueError("cap must be >= 1")


def validate_max_steps(max_steps: Optional[int]) -> None:
    if max_steps is None:
        return
    if isinstance(max_steps, bool) or not isinstance(max_steps, int):
        raise ValueError("max_steps must be an integer")
    if max_steps < 1:
        raise ValueError("max_steps must be >= 1")
    if max_steps > MAX_TRACE_MAX_STEPS:
        raise ValueError(f"max_steps must be <= {MAX_TRACE_MAX_STEPS}")
