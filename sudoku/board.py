"""Board model: a 9x9 grid of optional digits and read-only queries over it."""

from typing import Optional

from rules.rules import BOARD_SIZE, BOX_SIZE

from .types import Board, Cell, FixedMask


def make_empty_board() -> Board:
    return [[None for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def clone_board(board: Board) -> Board:
    return [row[:] for row in board]


def box_origin(r: int, c: int) -> Cell:
    return (r // BOX_SIZE) * BOX_SIZE, (c // BOX_SIZE) * BOX_SIZE


def row_values(board: Board, r: int) -> list[int]:
    return [value for value in board[r] if value is not None]


def col_values(board: Board, c: int) -> list[int]:
    return [row[c] for row in board if row[c] is not None]


def box_values(board: Board, r: int, c: int) -> list[int]:
    top, left = box_origin(r, c)
    values: list[int] = []
    for rr in range(top, top + BOX_SIZE):
        for cc in range(left, left + BOX_SIZE):
            value = board[rr][cc]
            if value is not None:
                values.append(value)
    return values


def box_cells(box_index: int) -> list[Cell]:
    top = (box_index // BOX_SIZE) * BOX_SIZE
    left = (box_index % BOX_SIZE) * BOX_SIZE
    return [(rr, cc) for rr in range(top, top + BOX_SIZE) for cc in range(left, left + BOX_SIZE)]


def find_first_empty_cell(board: Board) -> Optional[Cell]:
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if board[r][c] is None:
                return r, c
    return None


def count_empty_cells(board: Board) -> int:
    return sum(1 for row in board for value in row if value is None)


def all_cells() -> list[Cell]:
    return [(r, c) for r in range(BOARD_SIZE) for c in range(BOARD_SIZE)]


def fixed_mask_from_board(board: Board) -> FixedMask:
    """Mark the cells that belong to the puzzle itself (filled at generation time)."""
    return [[value is not None for value in row] for row in board]


def empty_mask() -> FixedMask:
    return [[False for _ in range(BOARD_SIZE)] for _ in range(BOARD_SIZE)]


def format_board_rows(board: Board, empty: str = ".") -> list[str]:
    return [" ".join(empty if value is None else str(value) for value in row) for row in board]
