from typing import Optional

from .board import clone_board
from .types import Board, Cell
from .validation import validate_and_normalize_known_board


InitialState = tuple[Board, list[Cell]]


def build_initial_state(known_board: Optional[Board]) -> InitialState:
    """Validate the caller's board and return a private working copy plus its empty cells."""
    board = clone_board(validate_and_normalize_known_board(known_board))
    empty_positions = [(r, c) for r, row in enumerate(board) for c, value in enumerate(row) if value is None]
    return board, empty_positions


def apply_value(board: Board, r: int, c: int, value: int) -> None:
    board[r][c] = value


def revert_value(board: Board, r: int, c: int) -> None:
    board[r][c] = None
