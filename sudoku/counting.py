from rules.rules import DEFAULT_COUNT_CAP

from .board import clone_board
from .constraints import is_board_valid
from .search import count_all_solutions
from .types import Board
from .validation import validate_cap


def count_solutions_capped(board: Board, cap: int = DEFAULT_COUNT_CAP) -> int:
    """Return the number of completions of ``board``, never more than ``cap``.

    ``board`` must already be normalized; it is not modified. A board whose
    filled cells already conflict has no completions.
    """
    validate_cap(cap)
    if not is_board_valid(board):
        return 0
    progress_state = {"solutions_found": 0, "nodes_visited": 0}
    return count_all_solutions(clone_board(board), cap, progress_state)


def has_unique_solution(board: Board) -> bool:
    return count_solutions_capped(board, cap=2) == 1
