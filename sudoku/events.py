"""Step events for visualizing the backtracking search.

The search runs once to completion and every try/place/backtrack is recorded
with a snapshot of the board after the step. Drivers index into the recorded
list for next/previous navigation; nothing is replayed.
"""

from typing import Iterator, Optional

from .board import clone_board
from .constraints import is_board_valid
from .search import search_first_solution
from .types import Board, SearchEvent, StepStats, TraceLog
from .utils import cell_label, trace

EVENT_KINDS = ("try", "place", "backtrack")


def record_solve_events(
    board: Board,
    max_steps: Optional[int] = None,
    trace_log: Optional[TraceLog] = None,
) -> tuple[list[SearchEvent], bool, bool]:
    """Return ``(events, solved, truncated)`` for a search started on ``board``.

    Digits are tried in ascending order, so the same board always yields the
    same events. With ``max_steps`` recording stops early but the search still
    runs to its end, so ``solved`` is always accurate. When ``trace_log`` is
    given the same search also writes its text trace there.
    """
    events: list[SearchEvent] = []
    trace_meta = {"truncated": False}
    if not is_board_valid(board):
        trace(trace_log is not None, trace_log, "Given cells conflict; no completion exists")
        return events, False, False

    solved = search_first_solution(
        clone_board(board),
        trace_enabled=trace_log is not None,
        trace_log=trace_log,
        trace_steps=events,
        trace_meta=trace_meta,
        trace_max_steps=max_steps,
    )
    return events, solved, trace_meta["truncated"]


def iter_solve_events(board: Board) -> Iterator[SearchEvent]:
    """Yield the events of one search; the full list is recorded before the first one is yielded."""
    events, _, _ = record_solve_events(board)
    yield from events


def step_stats(events: list[SearchEvent], index: int) -> StepStats:
    stats = {"attempts": 0, "placements": 0, "backtracks": 0}
    if index < 0:
        return stats
    for event in events[: index + 1]:
        if event["event"] == "try":
            stats["attempts"] += 1
        elif event["event"] == "place":
            stats["placements"] += 1
        elif event["event"] == "backtrack":
            stats["backtracks"] += 1
    return stats


def board_at_step(base: Board, events: list[SearchEvent], index: int) -> Board:
    if index < 0:
        return clone_board(base)
    if index >= len(events):
        raise IndexError(f"step index {index} is out of range for {len(events)} events")
    return clone_board(events[index]["board"])


def describe_event(event: SearchEvent) -> str:
    label = {"try": "Try", "place": "Place", "backtrack": "Backtrack"}[event["event"]]
    text = f"{label} at {cell_label(event['row'], event['col'])}"
    if event["value"] is not None:
        text += f" = {event['value']}"
    return text
