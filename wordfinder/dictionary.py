from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Optional, Protocol, Set, Union

from wordfreq import zipf_frequency

from . import config

logger = logging.getLogger(__name__)

# Minimal English word set for tests and offline demos.
# The app uses WordfreqDictionary unless a word file is configured.

DEFAULT_WORDS = {
    # silkworm
    'silk','milk','milks','work','works','worm','worms','slow','slim','limo','limos','lows','owls',
    'rows','mows','soil','soils','roil','roils','oil','oils','kilo','kilos','sir','ski','skim','irk','irks',
    'low','sow','row','mow','owl','rim','rims','silo','wok','woks','risk','swim','swirl',
    # common words
    'hello','world','word','play','game','point','puzzle','letter','house','mouse','table','chair',
    'cat','dog','fish','bird','echo','rhythm','score','root','start','tart','star','rats','arts',
}

class DictionaryOracle(Protocol):
    def is_valid(self, word: str, language: str = 'en') -> bool: ...

class DictionaryService:
    def __init__(self, words: Optional[Iterable[str]] = None, language: str = config.LANGUAGE):
        # Store lowercase words
        self.language = language
        self._words: Set[str] = {w.strip().lower() for w in (words if words is not None else DEFAULT_WORDS) if w.strip()}

    @classmethod
    def from_file(cls, path: Union[str, Path], language: str = config.LANGUAGE) -> 'DictionaryService':
        with open(path, 'r', encoding='utf-8') as fid:
            service = cls(fid, language=language)
        logger.info("Loaded %d dictionary words from %s", len(service), path)
        return service

    def __len__(self) -> int:
        return len(self._words)

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str, language: str = 'en') -> bool:
        if not word:
            return False
        if language != self.language:
            logger.warning("No %r dictionary loaded (have %r)", language, self.language)
            return False
        return word.lower() in self._words

class WordfreqDictionary:
    # Any ASCII word wordfreq has seen often enough counts as real
    def __init__(self, language: str = config.LANGUAGE, min_zipf: float = config.MIN_ZIPF, wordlist: str = 'best'):
        self.language = language
        self.min_zipf = min_zipf
        self.wordlist = wordlist

    def __contains__(self, word: str) -> bool:
        return self.is_valid(word)

    def is_valid(self, word: str, language: str = 'en') -> bool:
        if not word or not (word.isascii() and word.isalpha()):
            return False
        if language != self.language:
            logger.warning("No %r dictionary loaded (have %r)", language, self.language)
            return False
        return zipf_frequency(word.lower(), language, wordlist=self.wordlist) >= self.min_zipf

def load_service(path: Optional[Path] = None) -> DictionaryOracle:
    path = path or config.DICTIONARY_PATH
    if path is None:
        return WordfreqDictionary()
    return DictionaryService.from_file(path)
