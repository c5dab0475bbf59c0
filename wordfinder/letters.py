from __future__ import annotations
from collections import Counter
from typing import Dict


# The letters of a root word, counted with multiplicity
class LetterMultiset:
    def __init__(self, word: str):
        self._counts: Counter[str] = Counter(word)

    @classmethod
    def _from_counts(cls, counts: Counter[str]) -> 'LetterMultiset':
        bag = cls('')
        bag._counts = +counts
        return bag

    def __len__(self) -> int:
        return sum(self._counts.values())

    def __repr__(self) -> str:
        letters = ''.join(sorted(self._counts.elements()))
        return f"LetterMultiset({letters!r})"

    def counts(self) -> Dict[str, int]:
        return dict(self._counts)

    def contains(self, word: str) -> bool:
        # Consume letters from a scratch copy, never the stored counts
        remaining = dict(self._counts)
        for letter in word:
            left = remaining.get(letter, 0)
            if left <= 0:
                return False
            remaining[letter] = left - 1
        return True

    def remove(self, word: str) -> 'LetterMultiset':
        # new bag; self is left as it was
        if not self.contains(word):
            raise ValueError(f"{word!r} cannot be spelled from {self!r}")
        return self._from_counts(self._counts - Counter(word))
