from __future__ import annotations
import logging
import uuid
from typing import List, Optional

from . import config
from .dictionary import DictionaryOracle
from .errors import InvalidRootWord
from .letters import LetterMultiset
from .schemas import Accepted, Rejected, RejectionReason, SessionState, ValidationOutcome
from .scoring import ScoreCalculator, points

logger = logging.getLogger(__name__)

class GameSession:
    # submit is the only mutation; rejections leave the session untouched

    def __init__(
        self,
        root_word: str,
        dictionary: DictionaryOracle,
        session_id: Optional[str] = None,
        scorer: ScoreCalculator = points,
        min_word_length: int = config.MIN_WORD_LENGTH,
        min_root_length: int = config.MIN_ROOT_LENGTH,
        language: str = config.LANGUAGE,
    ):
        root = root_word.strip().lower()
        if len(root) < min_root_length or not (root.isascii() and root.isalpha()):
            raise InvalidRootWord(
                f"Root word must be at least {min_root_length} letters a-z, got {root_word!r}"
            )
        self.id = session_id or uuid.uuid4().hex
        self.root_word = root
        self.letters = LetterMultiset(root)
        self.dictionary = dictionary
        self.scorer = scorer
        self.min_word_length = min_word_length
        self.language = language
        self.used_words: List[str] = []
        self.score = 0

    def is_original(self, word: str) -> bool:
        return word not in self.used_words

    def is_possible(self, word: str) -> bool:
        return self.letters.contains(word)

    def is_real(self, word: str) -> bool:
        return self.dictionary.is_valid(word, self.language)

    def check(self, word: str) -> Optional[RejectionReason]:
        # Cheap checks first; the dictionary lookup goes last
        if len(word) <= self.min_word_length:
            return RejectionReason.TOO_SHORT
        if word == self.root_word:
            return RejectionReason.MATCHES_ROOT
        if not self.is_original(word):
            return RejectionReason.ALREADY_USED
        if not self.is_possible(word):
            return RejectionReason.NOT_POSSIBLE
        if not self.is_real(word):
            return RejectionReason.NOT_A_REAL_WORD
        return None

    def submit(self, raw: str) -> Optional[ValidationOutcome]:
        answer = raw.strip().lower()
        if not answer:
            return None

        reason = self.check(answer)
        if reason is not None:
            logger.debug("Session %s rejected %r: %s", self.id, answer, reason.value)
            return Rejected(reason=reason)

        awarded = self.scorer(answer)
        self.used_words.insert(0, answer)
        self.score += awarded
        logger.debug("Session %s accepted %r for %d points", self.id, answer, awarded)
        return Accepted(points=awarded)

    def to_state(self) -> SessionState:
        return SessionState(
            id=self.id,
            rootWord=self.root_word,
            usedWords=list(self.used_words),
            score=self.score,
        )
