"""Full-board generation and uniqueness-preserving puzzle carving."""

import random
from typing import Optional

from rules.rules import DIFFICULTY_REMOVALS, RANDOM_DIFFICULTY

from .board import all_cells, clone_board, count_empty_cells, fixed_mask_from_board, make_empty_board
from .counting import count_solutions_capped
from .logger import get_logger
from .search import search_first_solution
from .types import Difficulty, PuzzleResult, SolvedBoard
from .utils import shuffled_digits
from .validation import validate_difficulty

LOGGER = get_logger(__name__)


def generate_solved_board(rng: Optional[random.Random] = None) -> SolvedBoard:
    """Build a random complete board.

    The digit order is reshuffled at every cell, not once per board, so
    repeated calls give different boards.
    """
    rng = rng or random.Random()
    board = make_empty_board()
    if not search_first_solution(board, digit_order=lambda: shuffled_digits(rng)):
        raise RuntimeError("search failed to fill an empty board")
    return [[value for value in row if value is not None] for row in board]


def resolve_difficulty(difficulty: Difficulty, rng: random.Random) -> Difficulty:
    validate_difficulty(difficulty)
    if difficulty == RANDOM_DIFFICULTY:
        return rng.choice(sorted(DIFFICULTY_REMOVALS))
    return difficulty


def generate_puzzle(difficulty: Difficulty = "easy", rng: Optional[random.Random] = None) -> PuzzleResult:
    """Carve a puzzle with exactly one solution out of a fresh full board.

    Cells are visited in random order and a removal is kept only if the board
    still has a single completion. When the removal target cannot be reached
    the puzzle is simply denser than requested.
    """
    rng = rng or random.Random()
    difficulty = resolve_difficulty(difficulty, rng)
    target_removals = DIFFICULTY_REMOVALS[difficulty]

    solution = generate_solved_board(rng)
    puzzle = clone_board(solution)

    positions = all_cells()
    rng.shuffle(positions)

    removed = 0
    attempts = 0
    for r, c in positions:
        if removed >= target_removals:
            break
        attempts += 1

        backup = puzzle[r][c]
        puzzle[r][c] = None

        if count_solutions_capped(puzzle, cap=2) != 1:
            puzzle[r][c] = backup
            LOGGER.debug("Kept (%d, %d): removal breaks uniqueness", r, c)
        else:
            removed += 1

    if removed < target_removals:
        LOGGER.info(
            "Carved %s puzzle with %d of %d requested removals", difficulty, removed, target_removals
        )
    else:
        LOGGER.debug("Carved %s puzzle in %d attempts", difficulty, attempts)

    return {
        "puzzle": puzzle,
        "solution": solution,
        "fixed_mask": fixed_mask_from_board(puzzle),
        "difficulty": difficulty,
        "target_removals": target_removals,
        "removed": count_empty_cells(puzzle),
    }
