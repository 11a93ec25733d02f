from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union

import structlog

from caesar_breaker.analysis import calc_threshold, sanitize
from caesar_breaker.dictionary import Dictionary
from caesar_breaker.models import BreakerConfig
from caesar_breaker.result import BreakResult, Strategy
from caesar_breaker.utils import read_secret

log = structlog.get_logger()


class Breaker(ABC):
    """
    Shared state and heuristics of the Caesar breakers.

    Subclasses set `key_slots` and implement `brute_force` and
    `frequency_analysis`. `decrypt` picks one of them based on the size of
    the secret and keeps the latest result on the instance.
    """

    key_slots: int = 1

    def __init__(self, dictionary: Dictionary, config: BreakerConfig = BreakerConfig()):
        self.dictionary = dictionary
        self.config = config
        self.result = BreakResult.not_found(self.key_slots)

    @classmethod
    def from_path(cls, path: Union[str, Path], config: BreakerConfig = BreakerConfig()):
        """Load the dictionary at `path` and build a breaker on it."""
        return cls(Dictionary.load(path), config)

    @property
    def decrypted(self) -> str:
        return self.result.plaintext

    def can_decrypt(self) -> bool:
        return self.result.found

    def decrypt(self, secret: str) -> BreakResult:
        """
        Decrypt a secret given as text or as a path to a file.

        A blank secret is ignored and the previous result is returned as is.
        """
        if not secret or secret.isspace():
            log.debug("blank secret ignored")
            return self.result

        self.result = BreakResult.not_found(self.key_slots)

        secret = read_secret(secret)
        threshold = calc_threshold(secret, self.config)
        strategy = self.select_strategy(secret)
        log.debug("strategy selected", strategy=str(strategy), threshold=threshold, breaker=type(self).__name__)

        if strategy is Strategy.BRUTE_FORCE:
            result = self.brute_force(secret, threshold)
        else:
            result = self.frequency_analysis(secret, threshold)

        if result.found:
            log.info("candidate accepted", keys=result.keys, strategy=str(strategy))
        else:
            log.info("no candidate accepted", strategy=str(strategy))

        self.result = result
        return result

    def select_strategy(self, text: str) -> Strategy:
        """Frequency analysis needs enough letters to be reliable; short texts are brute forced."""
        if len(text.split()) < self.config.word_limit:
            return Strategy.BRUTE_FORCE
        return Strategy.FREQUENCY_ANALYSIS

    def is_english(self, text: str, threshold: int) -> bool:
        """
        Check whether a candidate decryption reads as English.

        Words are checked longest first since short words (articles,
        prepositions) can't be told apart from gibberish. The text is rejected
        as soon as `threshold` words miss the dictionary, and accepted only if
        at least one word hits it.
        """
        words = sorted(text.split(), key=len, reverse=True)

        matched = False
        misses = 0
        for word in words:
            if self.dictionary.lookup(sanitize(word)):
                matched = True
                continue

            misses += 1
            if misses >= threshold:
                return False

        return matched

    @abstractmethod
    def brute_force(self, secret: str, threshold: int) -> BreakResult:
        ...


    @abstractmethod
    def frequency_analysis(self, secret: str, threshold: int) -> BreakResult:
        ...
