from __future__ import annotations
import os
from pathlib import Path
from typing import Optional

DATA_DIR = Path(__file__).resolve().parent / 'data'

# Used when the start word list cannot be loaded
DEFAULT_ROOT_WORD = 'silkworm'

# Submitted words must be longer than this
MIN_WORD_LENGTH = int(os.environ.get('WORDFINDER_MIN_WORD_LENGTH', '2'))

# Shortest root word the selector will hand out
MIN_ROOT_LENGTH = int(os.environ.get('WORDFINDER_MIN_ROOT_LENGTH', '4'))

START_WORDS_PATH = Path(os.environ.get('WORDFINDER_START_WORDS', DATA_DIR / 'start.txt'))

_dictionary_env = os.environ.get('WORDFINDER_DICTIONARY')
DICTIONARY_PATH: Optional[Path] = Path(_dictionary_env) if _dictionary_env else None

LOG_LEVEL = os.environ.get('WORDFINDER_LOG_LEVEL', 'INFO').upper()

LANGUAGE = 'en'

# Words rarer than this Zipf frequency are not treated as English words
MIN_ZIPF = float(os.environ.get('WORDFINDER_MIN_ZIPF', '1.0'))
