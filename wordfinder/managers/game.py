from __future__ import annotations
import logging
from pathlib import Path
from typing import Dict, List, Optional, Sequence

from .. import config
from ..dictionary import DictionaryOracle
from ..errors import SessionNotFound, WordListUnavailable
from ..game_logic import GameSession
from ..messages import alert_for
from ..schemas import Rejected, SubmitResult
from ..selector import RootWordSelector, load_candidates

logger = logging.getLogger(__name__)

def load_start_words(path: Path = config.START_WORDS_PATH) -> List[str]:
    # Falling back to a single built-in root word is an app decision, not the engine's
    try:
        return load_candidates(path)
    except WordListUnavailable:
        logger.warning("Start word list %s unavailable, using %r", path, config.DEFAULT_ROOT_WORD)
        return [config.DEFAULT_ROOT_WORD]

class SessionManager:
    def __init__(
        self,
        dictionary: DictionaryOracle,
        candidates: Sequence[str],
        selector: Optional[RootWordSelector] = None,
    ):
        self.dictionary = dictionary
        self.candidates = list(candidates)
        self.selector = selector or RootWordSelector()
        self.sessions: Dict[str, GameSession] = {}

    def new_game(self, session_id: Optional[str] = None) -> GameSession:
        root = self.selector.select(self.candidates)
        session = GameSession(root, self.dictionary, session_id=session_id)
        # replaces any previous round under the same id
        self.sessions[session.id] = session
        logger.info("Session %s started with root word %r", session.id, root)
        return session

    def get(self, session_id: str) -> GameSession:
        try:
            return self.sessions[session_id]
        except KeyError:
            raise SessionNotFound(session_id) from None

    def end(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)

    def submit(self, session_id: str, word: str) -> SubmitResult:
        session = self.get(session_id)
        outcome = session.submit(word)
        title = message = None
        if isinstance(outcome, Rejected):
            title, message = alert_for(outcome.reason, session.root_word)
            logger.info("Session %s: %r rejected (%s)", session_id, word, outcome.reason.value)
        elif outcome is not None:
            logger.info("Session %s: %r accepted, score %d", session_id, word, session.score)
        return SubmitResult(outcome=outcome, title=title, message=message, state=session.to_state())
