import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, Sequence

from caesar_breaker.analysis import FREQ_LETTERS, calc_key, count, encryption_key, most_frequent
from caesar_breaker.breaker import Breaker
from caesar_breaker.cipher import ALPHABET, CaesarCipher
from caesar_breaker.result import BreakResult, Strategy
from caesar_breaker.utils import join, split

# (even shift, odd shift, joined text)
Candidate = tuple[int, int, str]


class TwoKeyBreaker(Breaker):
    """Breaks the two-key Caesar cipher (key1 on even positions, key2 on odd)."""

    key_slots = 2

    @property
    def key(self) -> tuple[int, int]:
        return self.result.keys

    def frequency_analysis(self, secret: str, threshold: int) -> BreakResult:
        """
        Find the most frequent letter of each half and assume both stand for
        the same common English letter, most common first.

        Only the 26 lockstep combinations are tried, not all 26*26.
        """
        even, odd = split(secret)
        even_target = most_frequent(count(even))
        odd_target = most_frequent(count(odd))

        for letter in FREQ_LETTERS:
            assumed = ALPHABET.index(letter)

            shift1 = calc_key(even_target, assumed)
            even_decrypted = _shift_half(CaesarCipher(shift1), even)

            shift2 = calc_key(odd_target, assumed)
            odd_decrypted = _shift_half(CaesarCipher(shift2), odd)

            decrypted = join(even_decrypted, odd_decrypted)
            if self.is_english(decrypted, threshold):
                return self._found(shift1, shift2, decrypted, Strategy.FREQUENCY_ANALYSIS)

        return BreakResult.not_found(self.key_slots, Strategy.FREQUENCY_ANALYSIS)

    def brute_force(self, secret: str, threshold: int) -> BreakResult:
        """
        Decrypt each half with all 26 shifts, then test every even/odd
        pairing, even shift in the outer loop and odd shift in the inner one.
        The first English candidate in that order wins.
        """
        even, odd = split(secret)

        # 52 decryptions up front instead of two per combination.
        even_decrypted = []
        odd_decrypted = []
        for shift in range(len(ALPHABET)):
            caesar = CaesarCipher(shift)
            even_decrypted.append(_shift_half(caesar, even))
            odd_decrypted.append(_shift_half(caesar, odd))

        if self.config.workers > 1:
            candidate = self._search_parallel(even_decrypted, odd_decrypted, threshold)
        else:
            candidate = self._search(even_decrypted, odd_decrypted, threshold)

        if candidate is None:
            return BreakResult.not_found(self.key_slots, Strategy.BRUTE_FORCE)

        shift1, shift2, decrypted = candidate
        return self._found(shift1, shift2, decrypted, Strategy.BRUTE_FORCE)

    def _search(self, evens: Sequence[str], odds: Sequence[str], threshold: int) -> Optional[Candidate]:
        for i in range(len(evens)):
            candidate = self._search_row(i, evens[i], odds, threshold)
            if candidate is not None:
                return candidate
        return None

    def _search_row(
        self,
        i: int,
        even: str,
        odds: Sequence[str],
        threshold: int,
        stop: Optional["_LowestRow"] = None,
    ) -> Optional[Candidate]:
        for j, odd in enumerate(odds):
            # A lower row already found a winner; nothing here can beat it.
            if stop is not None and stop.beaten(i):
                return None

            decrypted = join(even, odd)
            if self.is_english(decrypted, threshold):
                if stop is not None:
                    stop.record(i)
                return i, j, decrypted
        return None

    def _search_parallel(self, evens: Sequence[str], odds: Sequence[str], threshold: int) -> Optional[Candidate]:
        """
        Same result as `_search`, with one task per even shift.

        Futures are read back in even-shift order, so the lowest even shift
        with a hit wins no matter which worker finished first.
        """
        lowest = _LowestRow()
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = [
                executor.submit(self._search_row, i, even, odds, threshold, lowest)
                for i, even in enumerate(evens)
            ]
            for future in futures:
                candidate = future.result()
                if candidate is not None:
                    executor.shutdown(wait=True, cancel_futures=True)
                    return candidate
        return None

    def _found(self, shift1: int, shift2: int, decrypted: str, strategy: Strategy) -> BreakResult:
        return BreakResult((encryption_key(shift1), encryption_key(shift2)), decrypted, strategy)


class _LowestRow:
    """Lowest even shift that produced a hit so far, shared between workers."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._row: Optional[int] = None

    def record(self, row: int) -> None:
        with self._lock:
            if self._row is None or row < self._row:
                self._row = row

    def beaten(self, row: int) -> bool:
        with self._lock:
            return self._row is not None and self._row < row


def _shift_half(caesar: CaesarCipher, half: str) -> str:
    # encrypt() blanks whitespace-only text; a half of spaces must survive the join.
    if not half or half.isspace():
        return half
    return caesar.encrypt(half)
