from __future__ import annotations


class WordFinderError(Exception):
    pass


# Candidate list was empty, so no root word can be chosen
class EmptyCandidateList(WordFinderError):
    pass


class WordListUnavailable(WordFinderError):
    pass


# Root word too short or not made of letters a-z
class InvalidRootWord(WordFinderError):
    pass


class SessionNotFound(WordFinderError):
    def __init__(self, session_id: str):
        super().__init__(f"No game session with id {session_id!r}")
        self.session_id = session_id
