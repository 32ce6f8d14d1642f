from typing import Counter as CounterType, Dict, FrozenSet, List, Optional, Sequence, Tuple, Union
from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
import logging
import re

from caesar_toolkit.crypto.classical import ASCII_ALPHABET_LEN, break_caesar
from caesar_toolkit.crypto.reference import load_dictionary, load_frequency_table
from caesar_toolkit.utils.textio import read_input

logger = logging.getLogger(__name__)

Score = Union[int, float]

# Unicode White_Space; the ASCII separators \x1c-\x1f are not word breaks
WHITESPACE_RUN = re.compile(r'[\t\n\x0b\x0c\r \x85\xa0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+')

class Attack(Enum):
    DICTIONARY = 'dictionary'
    FREQUENCY = 'frequency'

@dataclass(frozen=True)
class CrackConfig:
    """Options for a single cracking run"""
    ciphertext_file: Optional[str] = None
    attack: Attack = Attack.DICTIONARY
    dictionary_file: Optional[str] = None
    top: int = 0

@dataclass(frozen=True)
class CrackResult:
    """Outcome of an attack; shift is None when no candidate was found"""
    attack: Attack
    shift: Optional[int]
    scores: Dict[int, Score] = field(default_factory=dict)
    ciphertext: str = ''

def split_words(text: str) -> List[str]:
    """Split text on runs of whitespace, dropping empty tokens"""
    return [word for word in WHITESPACE_RUN.split(text) if word]

def dictionary_scores(ciphertext: str, dictionary: FrozenSet[str]) -> Dict[int, int]:
    """Count the dictionary words produced by every possible shift"""
    scores = {}
    for shift, plaintext in break_caesar(ciphertext):
        scores[shift] = sum(1 for word in split_words(plaintext) if word in dictionary)
    return scores

def dictionary_attack(ciphertext: str, dictionary: FrozenSet[str]) -> Optional[int]:
    """
    Find the shift that decrypts the most dictionary words.

    Returns None when no shift yields a single match. Among shifts sharing the
    highest count the lowest one wins.
    """
    return _best_dictionary_shift(dictionary_scores(ciphertext, dictionary))

def _best_dictionary_shift(scores: Dict[int, int]) -> Optional[int]:
    if all(count == 0 for count in scores.values()):
        return None
    best_count = max(scores.values())
    return min(shift for shift, count in scores.items() if count == best_count)

def char_histogram(text: str) -> CounterType[str]:
    """Count ASCII characters, ignoring everything outside the code space"""
    return Counter(c for c in text if ord(c) < ASCII_ALPHABET_LEN)

def frequency_distribution(char_counter: CounterType[str]) -> List[float]:
    """
    Turn a character histogram into relative frequencies indexed by code point.

    An empty histogram gives all zeros; otherwise the entries sum to 1.
    """
    if not char_counter:
        return [0.0] * ASCII_ALPHABET_LEN

    total = sum(char_counter.values())
    return [char_counter.get(chr(code), 0) / total for code in range(ASCII_ALPHABET_LEN)]

def manhattan_distance(reference: Sequence[float], distribution: Sequence[float]) -> float:
    """Total absolute deviation between two frequency distributions"""
    return sum(abs(r - d) for r, d in zip(reference, distribution))

def frequency_scores(ciphertext: str, table: Optional[Sequence[float]] = None) -> Dict[int, float]:
    """Distance from the reference table for every possible shift"""
    if table is None:
        table = load_frequency_table()

    scores = {}
    for shift, plaintext in break_caesar(ciphertext):
        distribution = frequency_distribution(char_histogram(plaintext))
        scores[shift] = manhattan_distance(table, distribution)
    return scores

def frequency_attack(ciphertext: str, table: Optional[Sequence[float]] = None) -> int:
    """
    Find the shift whose character distribution is closest to English.

    Always returns a shift. Ties keep the earliest shift, so input with no
    ASCII characters at all resolves to 0.
    """
    return _best_frequency_shift(frequency_scores(ciphertext, table))

def _best_frequency_shift(scores: Dict[int, float]) -> int:
    best_shift = 0
    min_dist = float('inf')
    for shift in range(ASCII_ALPHABET_LEN):
        if scores[shift] < min_dist:
            min_dist = scores[shift]
            best_shift = shift
    return best_shift

def crack(ciphertext: str, attack: Attack,
          dictionary: Optional[FrozenSet[str]] = None,
          table: Optional[Sequence[float]] = None) -> CrackResult:
    """Run the selected attack, falling back to the bundled reference data"""
    logger.debug(f"Running {attack.value} attack on {len(ciphertext)} characters")

    if attack is Attack.DICTIONARY:
        if dictionary is None:
            dictionary = load_dictionary()
        scores = dictionary_scores(ciphertext, dictionary)
        shift = _best_dictionary_shift(scores)
    else:
        scores = frequency_scores(ciphertext, table)
        shift = _best_frequency_shift(scores)

    if shift is None:
        logger.debug("No shift produced a dictionary match")
    else:
        logger.debug(f"Best shift {shift} with score {scores[shift]}")
    return CrackResult(attack=attack, shift=shift, scores=scores, ciphertext=ciphertext)

def rank_candidates(result: CrackResult, limit: int) -> List[Tuple[int, Score]]:
    """Return the best scoring shifts, best first"""
    if result.attack is Attack.DICTIONARY:
        ranked = sorted(result.scores.items(), key=lambda item: (-item[1], item[0]))
    else:
        ranked = sorted(result.scores.items(), key=lambda item: (item[1], item[0]))
    return ranked[:max(limit, 0)]

def format_report(result: CrackResult) -> str:
    if result.shift is None:
        return "unable to find candidate key"
    return f"candidate key: {result.shift}"

def run(config: CrackConfig) -> CrackResult:
    """
    Read the ciphertext named by the config and crack it.

    I/O errors from reading the ciphertext or the dictionary propagate.
    """
    ciphertext = read_input(config.ciphertext_file)
    dictionary = None
    if config.attack is Attack.DICTIONARY and config.dictionary_file:
        dictionary = load_dictionary(config.dictionary_file)
    return crack(ciphertext, config.attack, dictionary=dictionary)
