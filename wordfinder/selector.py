from __future__ import annotations
import logging
import random
from pathlib import Path
from typing import List, Optional, Sequence, Union

from . import config
from .errors import EmptyCandidateList, WordListUnavailable

logger = logging.getLogger(__name__)

def select(candidates: Sequence[str], rng: Optional[random.Random] = None) -> str:
    if not candidates:
        raise EmptyCandidateList("Cannot choose a root word from an empty list")
    return (rng or random).choice(candidates)

def load_candidates(path: Union[str, Path]) -> List[str]:
    # one word per line, blank lines skipped
    try:
        with open(path, 'r', encoding='utf-8') as fid:
            words = [line.strip().lower() for line in fid]
    except OSError as exc:
        raise WordListUnavailable(f"Could not load root words from {path}") from exc
    return [w for w in words if w]

class RootWordSelector:
    def __init__(self, min_length: int = config.MIN_ROOT_LENGTH, rng: Optional[random.Random] = None):
        self.min_length = min_length
        self.rng = rng or random.Random()

    def eligible(self, candidates: Sequence[str]) -> List[str]:
        words = (c.strip().lower() for c in candidates)
        return [w for w in words if len(w) >= self.min_length and w.isascii() and w.isalpha()]

    def select(self, candidates: Sequence[str]) -> str:
        pool = self.eligible(candidates)
        if len(pool) < len(candidates):
            logger.debug("Dropped %d root word candidates shorter than %d letters or non-alphabetic",
                         len(candidates) - len(pool), self.min_length)
        return select(pool, self.rng)
