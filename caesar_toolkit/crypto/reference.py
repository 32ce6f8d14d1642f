from typing import FrozenSet, List, Optional, Tuple
from functools import lru_cache
import logging
import os

from caesar_toolkit.crypto.classical import ASCII_ALPHABET_LEN

logger = logging.getLogger(__name__)

DATASETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "datasets")
DICTIONARY_PATH = os.path.join(DATASETS_DIR, "popular_english_words.txt")
FREQUENCY_TABLE_PATH = os.path.join(DATASETS_DIR, "ascii_char_frequencies.txt")

class ReferenceDataError(ValueError):
    """Exception raised when a word list or frequency table cannot be parsed"""
    pass

def _read_lines(path: str) -> List[str]:
    try:
        with open(path, encoding='utf-8') as f:
            return f.readlines()
    except UnicodeDecodeError as e:
        raise ReferenceDataError(f"{path}: not valid UTF-8 ({e.reason})") from None

def load_dictionary(path: Optional[str] = None) -> FrozenSet[str]:
    """
    Load a newline separated word list.

    Lines are stripped and blank lines dropped. Only membership matters, so
    duplicate words collapse into one entry. The bundled list is read once
    per process; any other path is read on every call.
    """
    if path is None:
        return _bundled_dictionary()
    return _parse_dictionary(path)

@lru_cache(maxsize=None)
def _bundled_dictionary() -> FrozenSet[str]:
    return _parse_dictionary(DICTIONARY_PATH)

def _parse_dictionary(path: str) -> FrozenSet[str]:
    words = frozenset(line.strip() for line in _read_lines(path) if line.strip())
    logger.debug(f"Loaded {len(words)} dictionary words from {path}")
    return words

def load_frequency_table(path: Optional[str] = None) -> Tuple[float, ...]:
    """Load the reference ASCII character frequencies, one float per code point"""
    if path is None:
        return _bundled_frequency_table()
    return _parse_frequency_table(path)

@lru_cache(maxsize=None)
def _bundled_frequency_table() -> Tuple[float, ...]:
    return _parse_frequency_table(FREQUENCY_TABLE_PATH)

def _parse_frequency_table(path: str) -> Tuple[float, ...]:
    table = []
    for line_no, line in enumerate(_read_lines(path), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            table.append(float(line))
        except ValueError:
            raise ReferenceDataError(
                f"{path}:{line_no}: invalid frequency value {line!r}"
            ) from None

    if len(table) != ASCII_ALPHABET_LEN:
        raise ReferenceDataError(
            f"{path}: expected {ASCII_ALPHABET_LEN} frequencies, found {len(table)}"
        )

    logger.debug(f"Loaded frequency table from {path}")
    return tuple(table)
