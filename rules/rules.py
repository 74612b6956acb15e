BOARD_SIZE = 9
BOX_SIZE = 3
MIN_VALUE = 1
MAX_VALUE = 9

# cells removed from a full board for each difficulty (out of 81)
DIFFICULTY_REMOVALS = {
    "easy": 40,
    "medium": 50,
    "hard": 58,
}
RANDOM_DIFFICULTY = "random"

DEFAULT_COUNT_CAP = 2

DEFAULT_TRACE_MAX_STEPS = 1000
MAX_TRACE_MAX_STEPS = 200000
