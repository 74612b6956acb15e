from typing import Callable, Optional

from .board import clone_board, find_first_empty_cell
from .constraints import is_valid_placement
from .state import apply_value, revert_value
from .types import Board, ProgressState, SearchEvent, TraceLog
from .utils import ascending_digits, indent, trace


DigitOrder = Callable[[], list[int]]


def search_first_solution(
    board: Board,
    digit_order: DigitOrder = ascending_digits,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
    trace_steps: Optional[list[SearchEvent]] = None,
    trace_meta: Optional[dict[str, bool]] = None,
    trace_max_steps: Optional[int] = None,
    depth: int = 0,
) -> bool:
    """Fill ``board`` in place with the first completion found.

    The next cell is always the first empty one in row-major order and the
    digits for it come from ``digit_order``, called once per activation. On
    failure every placement made by this call has been undone.
    """

    def record_step(event: str, message: str, row: int, col: int, value: Optional[int]) -> None:
        if trace_steps is None:
            return
        if trace_max_steps is not None and len(trace_steps) >= trace_max_steps:
            if trace_meta is not None:
                trace_meta["truncated"] = True
            return
        trace_steps.append(
            {
                "event": event,
                "message": message,
                "depth": depth,
                "row": row,
                "col": col,
                "value": value,
                "board": clone_board(board),
            }
        )

    cell = find_first_empty_cell(board)
    if cell is None:
        trace(trace_enabled, trace_log, f"{indent(depth)}All cells filled")
        return True

    r, c = cell
    trace(trace_enabled, trace_log, f"{indent(depth)}Select cell ({r}, {c})")

    for value in digit_order():
        message = f"{indent(depth)}Try value {value} at ({r}, {c})"
        trace(trace_enabled, trace_log, message)
        record_step("try", message, r, c, value)

        if not is_valid_placement(board, r, c, value):
            continue

        apply_value(board, r, c, value)
        message = f"{indent(depth)}Place value {value} at ({r}, {c})"
        trace(trace_enabled, trace_log, message)
        record_step("place", message, r, c, value)

        if search_first_solution(
            board=board,
            digit_order=digit_order,
            trace_enabled=trace_enabled,
            trace_log=trace_log,
            trace_steps=trace_steps,
            trace_meta=trace_meta,
            trace_max_steps=trace_max_steps,
            depth=depth + 1,
        ):
            return True

        revert_value(board, r, c)
        message = f"{indent(depth)}Backtrack on ({r}, {c}) value {value}"
        trace(trace_enabled, trace_log, message)
        record_step("backtrack", message, r, c, None)

    trace(trace_enabled, trace_log, f"{indent(depth)}No valid values remain for ({r}, {c})")
    return False


def count_all_solutions(board: Board, cap: int, progress_state: ProgressState) -> int:
    """Count completions of ``board`` but stop as soon as ``cap`` of them are found.

    The board is restored to its original contents before returning.
    """
    progress_state["nodes_visited"] += 1

    cell = find_first_empty_cell(board)
    if cell is None:
        progress_state["solutions_found"] += 1
        return 1

    r, c = cell
    total = 0
    for value in ascending_digits():
        if not is_valid_placement(board, r, c, value):
            continue

        apply_value(board, r, c, value)
        total += count_all_solutions(board, cap - total, progress_state)
        revert_value(board, r, c)

        if total >= cap:
            break

    return total
