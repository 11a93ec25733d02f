"""Letter statistics and the text heuristics shared by the breakers."""
import math
import re
from typing import Sequence

from caesar_breaker.cipher import ALPHABET
from caesar_breaker.models import BreakerConfig

# English letters by descending usage frequency.
# http://pi.math.cornell.edu/~mec/2003-2004/cryptography/subs/frequencies.html
FREQ_LETTERS = "etaoinsrhdlucmfywgpbvkxqjz"

_LEADING_JUNK = re.compile(r"^[^a-zA-Z]+")
_TRAILING_JUNK = re.compile(r"[^a-zA-Z]+$")


def count(text: str) -> list[int]:
    """Count each a-z letter in the text, ignoring case."""
    counter = [0] * len(ALPHABET)
    for char in text:
        idx = ALPHABET.find(char.lower())
        if idx != -1:
            counter[idx] += 1
    return counter


def most_frequent(counter: Sequence[int]) -> int:
    """Index of the highest count. Ties go to the lowest index."""
    best = 0
    for i, n in enumerate(counter):
        if n > counter[best]:
            best = i
    return best


def calc_key(target: int, assumed: int) -> int:
    """
    Trial shift (1-26) that turns the ciphertext letter at index `target`
    back into the plaintext letter at index `assumed`.
    """
    size = len(ALPHABET)
    return size - (target - assumed) % size


def encryption_key(trial_shift: int) -> int:
    """
    Encryption key for the shift that decrypted the text.

    message: hey | key: 09 => qnh
    secret:  qnh | key: 17 => hey
    26 - 17 = 9
    """
    return len(ALPHABET) - trial_shift if trial_shift > 0 else trial_shift


def sanitize(word: str) -> str:
    """Trim leading and trailing characters that aren't a-z or A-Z."""
    word = _LEADING_JUNK.sub("", word)
    return _TRAILING_JUNK.sub("", word)


def count_safe_words(words: Sequence[str], safe_length: int = 4) -> int:
    """
    Count the words long enough to tell English apart from gibberish.

    Given "i ispurz g pax bank bat i lokk stange", the safe words are
    ispurz, bank, lokk and stange.
    """
    return sum(1 for w in words if len(w) >= safe_length)


def threshold_percent(safe_words: int, config: BreakerConfig) -> float:
    for limit, percent in config.threshold_breakpoints:
        if safe_words <= limit:
            return percent
    return config.threshold_fallback


def calc_threshold(text: str, config: BreakerConfig = BreakerConfig()) -> int:
    """
    Number of dictionary misses at which a candidate decryption is rejected.

    Texts with few safe words get a near-zero tolerance. Longer texts can
    afford more misses (proper nouns, gaps in the dictionary) in absolute
    terms, while the tolerated share goes down.
    """
    safe_words = count_safe_words(text.split(), config.safe_word_length)
    return math.floor(safe_words * threshold_percent(safe_words, config))
