import argparse
import json
import logging
from pathlib import Path
from typing import Any, Optional

from rules.rules import BOARD_SIZE, DEFAULT_COUNT_CAP, DIFFICULTY_REMOVALS, RANDOM_DIFFICULTY
from sudoku.logger import configure_logging
from sudoku.solver import count_solutions, generate_new_puzzle, solve_board


def run(known_board: Optional[list[list[Optional[int]]]] = None) -> Optional[list[list[int]]]:
    return solve_board(known_board)


def run_with_trace(
    known_board: Optional[list[list[Optional[int]]]] = None,
) -> tuple[Optional[list[list[int]]], list[str]]:
    trace_log: list[str] = []
    result = solve_board(known_board, trace=True, trace_log=trace_log)
    return result, trace_log


def parse_board_string(text: str) -> list[list[Optional[int]]]:
    """Parse an 81-character board where '.' or '0' marks an empty cell."""
    cells = [char for char in text if not char.isspace()]
    if len(cells) != BOARD_SIZE * BOARD_SIZE:
        raise ValueError(f"board string must have {BOARD_SIZE * BOARD_SIZE} cells, got {len(cells)}")

    values: list[Optional[int]] = []
    for char in cells:
        if char in {".", "0"}:
            values.append(None)
        elif char.isdigit():
            values.append(int(char))
        else:
            raise ValueError(f"board string contains invalid character: {char!r}")

    return [values[r * BOARD_SIZE : (r + 1) * BOARD_SIZE] for r in range(BOARD_SIZE)]


def load_board_from_file(input_path: str) -> list[list[Optional[int]]]:
    path = Path(input_path)
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"input file is not valid JSON: {input_path}") from exc

    if not isinstance(payload, dict):
        raise ValueError("JSON root must be an object")

    board = payload.get("board")
    if board is None:
        raise ValueError("JSON must include 'board'")
    if isinstance(board, str):
        return parse_board_string(board)

    return board


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve, count, or generate 9x9 Sudoku boards")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", help="Path to a JSON file with a 'board' (9x9 list or 81-character string)")
    source.add_argument(
        "--generate",
        choices=[*DIFFICULTY_REMOVALS, RANDOM_DIFFICULTY],
        help="Generate a puzzle with a unique solution",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible generation")
    parser.add_argument("--trace", action="store_true", help="Include solver trace output")
    parser.add_argument("--count", action="store_true", help="Count solutions instead of solving")
    parser.add_argument("--cap", type=int, default=DEFAULT_COUNT_CAP, help="Stop counting after this many solutions")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


if __name__ == "__main__":
    args = _build_parser().parse_args()
    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    try:
        if args.generate:
            result = generate_new_puzzle(args.generate, seed=args.seed)
            print(json.dumps(result, indent=2))
        else:
            known_board = load_board_from_file(args.input)
            if args.count:
                print(json.dumps({"count": count_solutions(known_board, cap=args.cap), "cap": args.cap}, indent=2))
            elif args.trace:
                solution, trace_log = run_with_trace(known_board)
                print(json.dumps({"solution": solution, "trace": trace_log}, indent=2))
            else:
                print(json.dumps({"solution": run(known_board)}, indent=2))
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")
