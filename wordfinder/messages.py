from __future__ import annotations
from typing import Tuple

from .schemas import RejectionReason

_ALERTS = {
    RejectionReason.TOO_SHORT: ("Word is too short", "Make a longer word!"),
    RejectionReason.MATCHES_ROOT: ("Word matches the original", "Make a word from letters of the original!"),
    RejectionReason.ALREADY_USED: ("Word used already", "Be more original!"),
    RejectionReason.NOT_POSSIBLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_A_REAL_WORD: ("Word not recognized", "You can't just make them up, you know?"),
}

# (title, message) shown to the player for a rejection
def alert_for(reason: RejectionReason, root_word: str) -> Tuple[str, str]:
    title, message = _ALERTS[reason]
    return title, message.format(root=root_word)
