import random
from typing import Optional

from rules.rules import MAX_VALUE, MIN_VALUE

from .types import TraceLog


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def indent(depth: int) -> str:
    return "  " * depth


def ascending_digits() -> list[int]:
    return list(range(MIN_VALUE, MAX_VALUE + 1))


def shuffled_digits(rng: random.Random) -> list[int]:
    digits = ascending_digits()
    rng.shuffle(digits)
    return digits


def cell_label(r: int, c: int) -> str:
    return f"R{r + 1}C{c + 1}"
