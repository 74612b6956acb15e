from rules.rules import BOARD_SIZE, MAX_VALUE, MIN_VALUE

from .board import box_cells, box_values, col_values, empty_mask, row_values
from .types import Board, Cell, FixedMask


def is_valid_placement(board: Board, r: int, c: int, value: int) -> bool:
    """Return True when ``value`` can be written into the empty cell (r, c).

    Coordinates or digits of the wrong type or out of range are rejected with
    False rather than an error, since callers may forward partially validated
    user input.
    """
    if not (_is_index(r) and _is_index(c)):
        return False
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    if not MIN_VALUE <= value <= MAX_VALUE:
        return False
    if board[r][c] is not None:
        return False
    return (
        value not in board[r]
        and value not in col_values(board, c)
        and value not in box_values(board, r, c)
    )


def possible_candidates(board: Board, r: int, c: int) -> list[int]:
    if not (_is_index(r) and _is_index(c)):
        return []
    if board[r][c] is not None:
        return []
    return [value for value in range(MIN_VALUE, MAX_VALUE + 1) if is_valid_placement(board, r, c, value)]


def candidate_grid(board: Board) -> list[list[list[int]]]:
    return [[possible_candidates(board, r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE)]


def is_board_valid(board: Board) -> bool:
    for r in range(BOARD_SIZE):
        if _has_duplicates(row_values(board, r)):
            return False
    for c in range(BOARD_SIZE):
        if _has_duplicates(col_values(board, c)):
            return False
    for box_index in range(BOARD_SIZE):
        values = [board[r][c] for r, c in box_cells(box_index) if board[r][c] is not None]
        if _has_duplicates(values):
            return False
    return True


def is_solved(board: Board) -> bool:
    return all(value is not None for row in board for value in row) and is_board_valid(board)


def find_conflicts(board: Board) -> FixedMask:
    mask = empty_mask()
    units: list[list[Cell]] = []
    units.extend([(r, c) for c in range(BOARD_SIZE)] for r in range(BOARD_SIZE))
    units.extend([(r, c) for r in range(BOARD_SIZE)] for c in range(BOARD_SIZE))
    units.extend(box_cells(box_index) for box_index in range(BOARD_SIZE))

    for unit in units:
        seen: dict[int, list[Cell]] = {}
        for r, c in unit:
            value = board[r][c]
            if value is not None:
                seen.setdefault(value, []).append((r, c))
        for cells in seen.values():
            if len(cells) > 1:
                for r, c in cells:
                    mask[r][c] = True

    return mask


def _has_duplicates(values: list[int]) -> bool:
    return len(set(values)) != len(values)


def _is_index(index: int) -> bool:
    return not isinstance(index, bool) and isinstance(index, int) and 0 <= index < BOARD_SIZE
