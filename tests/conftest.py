import random

import pytest

from wordfinder.dictionary import DictionaryService
from wordfinder.game_logic import GameSession
from wordfinder.managers.game import SessionManager
from wordfinder.selector import RootWordSelector


@pytest.fixture
def dictionary():
    """Demo English dictionary bundled with the package."""
    return DictionaryService()


@pytest.fixture
def session(dictionary):
    return GameSession("silkworm", dictionary, session_id="test")


@pytest.fixture
def manager(dictionary):
    return SessionManager(dictionary, ["silkworm"], selector=RootWordSelector(rng=random.Random(7)))
