import random

import pytest

from wordfinder.errors import EmptyCandidateList, WordFinderError, WordListUnavailable
from wordfinder.selector import RootWordSelector, load_candidates, select


def test_single_candidate_is_always_chosen():
    for _ in range(20):
        assert select(["silkworm"]) == "silkworm"


def test_empty_list_fails():
    with pytest.raises(EmptyCandidateList):
        select([])


def test_empty_candidate_list_is_a_wordfinder_error():
    assert issubclass(EmptyCandidateList, WordFinderError)


def test_seeded_selection_is_reproducible():
    words = ["silkworm", "barnacle", "hedgehog", "treasure"]
    first = RootWordSelector(rng=random.Random(42)).select(words)
    second = RootWordSelector(rng=random.Random(42)).select(words)
    assert first == second
    assert first in words


def test_selection_covers_candidates():
    words = ["silkworm", "barnacle", "hedgehog"]
    selector = RootWordSelector(rng=random.Random(0))
    seen = {selector.select(words) for _ in range(200)}
    assert seen == set(words)


def test_filter_drops_short_and_non_alphabetic_words():
    selector = RootWordSelector(min_length=4)
    assert selector.eligible(["cat", " Silkworm ", "ice-cream", "moon", "", "caf\u00e9s"]) == ["silkworm", "moon"]


def test_filter_leaving_nothing_fails():
    with pytest.raises(EmptyCandidateList):
        RootWordSelector(min_length=4).select(["cat", "dog"])


def test_load_candidates(tmp_path):
    path = tmp_path / "start.txt"
    path.write_text("silkworm\nBarnacle\n\n  hedgehog  \n", encoding="utf-8")
    assert load_candidates(path) == ["silkworm", "barnacle", "hedgehog"]


def test_load_candidates_missing_file(tmp_path):
    with pytest.raises(WordListUnavailable):
        load_candidates(tmp_path / "missing.txt")
