import copy
import unittest

from sample_boards import DEAD_END, PUZZLE, SOLUTION, empty_board, solution_with_holes
from sudoku.constraints import is_board_valid, is_solved
from sudoku.counting import count_solutions_capped
from sudoku.solver import (
    check_board,
    check_placement,
    count_solutions,
    generate_full_board,
    generate_new_puzzle,
    list_candidates,
    solve_board,
    solve_with_events,
)


class TestSolveBoard(unittest.TestCase):
    def test_solves_empty_board(self) -> None:
        result = solve_board(empty_board())
        self.assertIsNotNone(result)
        self.assertEqual(sum(1 for row in result for value in row if value is not None), 81)
        self.assertTrue(is_board_valid(result))

    def test_solves_without_board(self) -> None:
        self.assertTrue(is_solved(solve_board()))

    def test_solves_known_puzzle_without_mutating_input(self) -> None:
        known_board = copy.deepcopy(PUZZLE)
        self.assertEqual(solve_board(known_board), SOLUTION)
        self.assertEqual(known_board, PUZZLE)

    def test_returns_complete_board_unchanged(self) -> None:
        self.assertEqual(solve_board(SOLUTION), SOLUTION)

    def test_returns_none_when_unsolvable(self) -> None:
        self.assertIsNone(solve_board(DEAD_END))

    def test_returns_none_when_givens_conflict(self) -> None:
        board = empty_board()
        board[0][0] = 5
        board[0][3] = 5
        trace_log: list[str] = []
        self.assertIsNone(solve_board(board, trace=True, trace_log=trace_log))
        self.assertTrue(any("conflict" in line for line in trace_log))

    def test_trace_mode_records_search_steps(self) -> None:
        trace_log: list[str] = []
        result = solve_board(solution_with_holes([(2, 2), (5, 5)]), trace=True, trace_log=trace_log)
        self.assertEqual(result, SOLUTION)
        self.assertTrue(trace_log[0].startswith("Initialized search: empty_cells=2"))
        self.assertTrue(any("Select cell" in line for line in trace_log))
        self.assertTrue(any("Try value" in line for line in trace_log))

    def test_raises_when_board_is_not_9x9(self) -> None:
        with self.assertRaises(ValueError):
            solve_board([[None] * 9 for _ in range(8)])
        with self.assertRaises(ValueError):
            solve_board([[None] * 8 for _ in range(9)])

    def test_raises_when_value_out_of_range(self) -> None:
        for bad_value in (0, 10, -3):
            board = empty_board()
            board[3][3] = bad_value
            with self.assertRaises(ValueError):
                solve_board(board)

    def test_raises_when_value_is_not_an_integer(self) -> None:
        for bad_value in ("5", 5.0, True):
            board = empty_board()
            board[0][0] = bad_value
            with self.assertRaises(ValueError):
                solve_board(board)


class TestFacadeQueries(unittest.TestCase):
    def test_check_placement(self) -> None:
        board = empty_board()
        board[0][0] = 5
        board[0][3] = 5
        self.assertFalse(check_placement(board, 0, 5, 5))
        self.assertTrue(check_placement(board, 1, 5, 4))
        self.assertFalse(check_placement(board, 1, 5, 12))

    def test_list_candidates(self) -> None:
        self.assertEqual(list_candidates(PUZZLE, 0, 2), [1, 2, 4])

    def test_list_candidates_rejects_bad_coordinates(self) -> None:
        with self.assertRaises(ValueError):
            list_candidates(PUZZLE, 9, 0)

    def test_check_placement_rejects_wrong_digit_types(self) -> None:
        for bad_value in (None, "5", True, 0.5):
            self.assertFalse(check_placement(empty_board(), 0, 0, bad_value), bad_value)

    def test_check_placement_rejects_bad_coordinates_like_list_candidates(self) -> None:
        board = empty_board()
        board[0][0] = 5
        for bad_index in (True, 0.5, None, "1", 9):
            with self.assertRaises(ValueError):
                check_placement(board, bad_index, 1, 5)
            with self.assertRaises(ValueError):
                check_placement(board, 1, bad_index, 5)
            with self.assertRaises(ValueError):
                list_candidates(board, bad_index, 1)

    def test_check_board_reports_conflicts(self) -> None:
        board = empty_board()
        board[0][0] = 5
        board[0][3] = 5
        result = check_board(board)
        self.assertFalse(result["board_valid"])
        self.assertFalse(result["solved"])
        self.assertTrue(result["conflicts"][0][0])

    def test_check_board_on_solution(self) -> None:
        result = check_board(SOLUTION)
        self.assertTrue(result["board_valid"])
        self.assertTrue(result["solved"])

    def test_count_solutions(self) -> None:
        self.assertEqual(count_solutions(empty_board(), cap=2), 2)
        self.assertEqual(count_solutions(PUZZLE), 1)
        self.assertEqual(count_solutions(DEAD_END), 0)

    def test_repeated_counts_start_from_fresh_state(self) -> None:
        self.assertEqual([count_solutions(empty_board(), cap=3) for _ in range(2)], [3, 3])
        self.assertEqual(count_solutions_capped(PUZZLE, 2), count_solutions_capped(PUZZLE, 2))


class TestFacadeEventsAndGeneration(unittest.TestCase):
    def test_solve_with_events_matches_instant_solve(self) -> None:
        board = solution_with_holes([(0, 0), (3, 4), (7, 7), (8, 0)])
        result = solve_with_events(board)
        self.assertTrue(result["solved"])
        self.assertEqual(result["solution"], solve_board(board))
        self.assertEqual(result["events"][-1]["board"], result["solution"])
        self.assertFalse(result["fixed_mask"][0][0])
        self.assertTrue(result["fixed_mask"][0][1])
        self.assertEqual(sum(result["stats"].values()), len(result["events"]))

    def test_solve_with_events_when_truncated_still_reports_solution(self) -> None:
        board = solution_with_holes([(0, 0), (3, 4), (7, 7), (8, 0)])
        result = solve_with_events(board, max_steps=2)
        self.assertTrue(result["truncated"])
        self.assertEqual(result["solution"], SOLUTION)

    def test_solve_with_events_unsolvable(self) -> None:
        result = solve_with_events(DEAD_END)
        self.assertFalse(result["solved"])
        self.assertIsNone(result["solution"])

    def test_solve_with_events_writes_text_trace_from_the_same_search(self) -> None:
        trace_log: list[str] = []
        result = solve_with_events(solution_with_holes([(0, 0), (3, 4), (7, 7)]), trace_log=trace_log)
        self.assertTrue(result["solved"])
        self.assertEqual(trace_log[0], "Initialized search: empty_cells=3")
        tries = [line for line in trace_log if "Try value" in line]
        self.assertEqual(len(tries), result["stats"]["attempts"])

    def test_solve_with_events_rejects_non_integer_max_steps(self) -> None:
        for bad_max_steps in ("3", 2.5, True):
            with self.assertRaises(ValueError):
                solve_with_events(SOLUTION, max_steps=bad_max_steps)

    def test_generate_full_board_with_seed(self) -> None:
        board = generate_full_board(seed=4)
        self.assertTrue(is_solved(board))
        self.assertEqual(board, generate_full_board(seed=4))

    def test_generate_new_puzzle(self) -> None:
        result = generate_new_puzzle("easy", seed=9)
        self.assertEqual(result["difficulty"], "easy")
        self.assertEqual(count_solutions(result["puzzle"]), 1)


if __name__ == "__main__":
    unittest.main()
