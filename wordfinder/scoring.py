from __future__ import annotations
from typing import Callable

# Any function from an accepted word to the points it earns
ScoreCalculator = Callable[[str], int]


def points(word: str) -> int:
    # one point per letter
    return len(word)
