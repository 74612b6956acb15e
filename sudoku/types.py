from typing import Optional


Board = list[list[Optional[int]]]
SolvedBoard = list[list[int]]
FixedMask = list[list[bool]]
Cell = tuple[int, int]
TraceLog = list[str]
SearchEvent = dict[str, object]
StepStats = dict[str, int]
ProgressState = dict[str, int]
PuzzleResult = dict[str, object]
Difficulty = str
