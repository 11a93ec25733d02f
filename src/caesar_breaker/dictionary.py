from collections import defaultdict
from pathlib import Path
from typing import Iterable, Union

import structlog

from caesar_breaker.cipher import ALPHABET

log = structlog.get_logger()

# The longest English word has 45 letters; anything longer shares bucket 0.
MAX_WORD_LENGTH = 45
OVERFLOW_BUCKET = 0
CATCH_ALL_BUCKET = "*"


class DictionaryLoadError(RuntimeError):
    pass


def first_letter_bucket(word: str) -> str:
    first = word[0]
    return first if first in ALPHABET else CATCH_ALL_BUCKET


def length_bucket(word: str) -> int:
    return OVERFLOW_BUCKET if len(word) > MAX_WORD_LENGTH else len(word)


class Dictionary:
    """
    Word membership oracle.

    Words are kept in sets bucketed by first letter (or "*" for words that do
    not start with a-z) and by length, so most misses are rejected without
    touching a set at all.
    """

    def __init__(self) -> None:
        self.__buckets: dict[str, dict[int, set[str]]] = defaultdict(lambda: defaultdict(set))
        self.__size = 0

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "Dictionary":
        """Build a dictionary from a line-oriented word source, skipping blank lines."""
        dictionary = cls()
        for line in lines:
            dictionary.add(line)
        return dictionary

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Dictionary":
        """Load a word list file. Raises DictionaryLoadError if it can't be read."""
        try:
            with open(path, "r", encoding="utf-8") as f:
                dictionary = cls.from_lines(f)
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryLoadError(f"Could not load dictionary {path}: {e}") from e

        log.debug("dictionary loaded", path=str(path), words=len(dictionary))
        return dictionary

    def add(self, word: str) -> None:
        if not word or word.isspace():
            return

        word = word.strip().lower()
        group = self.__buckets[first_letter_bucket(word)][length_bucket(word)]
        if word not in group:
            group.add(word)
            self.__size += 1

    def lookup(self, word: str) -> bool:
        """Exact, case-insensitive membership. Blank input is never a member."""
        if not word or word.isspace():
            return False

        word = word.lower()
        alpha_group = self.__buckets.get(first_letter_bucket(word))
        if alpha_group is None:
            return False

        length_group = alpha_group.get(length_bucket(word))
        if length_group is None:
            return False

        return word in length_group

    def __contains__(self, word: str) -> bool:
        return self.lookup(word)

    def __len__(self) -> int:
        return self.__size
