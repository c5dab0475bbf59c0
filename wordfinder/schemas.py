from __future__ import annotations
from enum import Enum
from pydantic import BaseModel, Field
from typing import Annotated, List, Literal, Optional, Union

class RejectionReason(str, Enum):
    TOO_SHORT = 'too_short'
    MATCHES_ROOT = 'matches_root'
    ALREADY_USED = 'already_used'
    NOT_POSSIBLE = 'not_possible'
    NOT_A_REAL_WORD = 'not_a_real_word'

class Accepted(BaseModel):
    kind: Literal['accepted'] = 'accepted'
    points: int

class Rejected(BaseModel):
    kind: Literal['rejected'] = 'rejected'
    reason: RejectionReason

ValidationOutcome = Annotated[Union[Accepted, Rejected], Field(discriminator='kind')]

class SessionState(BaseModel):
    id: str
    rootWord: str
    usedWords: List[str] = []
    score: int = 0

class Submission(BaseModel):
    word: str = ''

class SubmitResult(BaseModel):
    # outcome is None for a blank submission
    outcome: Optional[ValidationOutcome] = None
    title: Optional[str] = None
    message: Optional[str] = None
    state: SessionState

class WordCheck(BaseModel):
    word: str
    valid: bool

class ClientMessage(BaseModel):
    type: Literal['submit', 'new-word']
    word: str = ''
