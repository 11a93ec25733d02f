from caesar_breaker.analysis import FREQ_LETTERS, calc_key, count, encryption_key, most_frequent
from caesar_breaker.breaker import Breaker
from caesar_breaker.cipher import ALPHABET, CaesarCipher
from caesar_breaker.result import BreakResult, Strategy


class OneKeyBreaker(Breaker):
    """Breaks the one-key Caesar cipher."""

    key_slots = 1

    @property
    def key(self) -> int:
        return self.result.keys[0]

    def frequency_analysis(self, secret: str, threshold: int) -> BreakResult:
        """
        Assume the most frequent letter of the secret stands for each of the
        common English letters in turn, most common first, and decrypt with
        the implied key until the text reads as English.
        """
        target = most_frequent(count(secret))

        for letter in FREQ_LETTERS:
            shift = calc_key(target, ALPHABET.index(letter))
            decrypted = CaesarCipher(shift).encrypt(secret)
            if self.is_english(decrypted, threshold):
                return BreakResult((encryption_key(shift),), decrypted, Strategy.FREQUENCY_ANALYSIS)

        return BreakResult.not_found(self.key_slots, Strategy.FREQUENCY_ANALYSIS)

    def brute_force(self, secret: str, threshold: int) -> BreakResult:
        """Try every shift in ascending order; the first English candidate wins."""
        for shift in range(len(ALPHABET)):
            decrypted = CaesarCipher(shift).encrypt(secret)
            if self.is_english(decrypted, threshold):
                return BreakResult((encryption_key(shift),), decrypted, Strategy.BRUTE_FORCE)

        return BreakResult.not_found(self.key_slots, Strategy.BRUTE_FORCE)
