import pytest

from caesar_breaker.analysis import calc_threshold
from caesar_breaker.cipher import CaesarCipher
from caesar_breaker.dictionary import Dictionary
from caesar_breaker.models import BreakerConfig
from caesar_breaker.result import BreakResult, Strategy
from caesar_breaker.two_key import TwoKeyBreaker


@pytest.fixture
def breaker(dictionary):
    return TwoKeyBreaker(dictionary)


@pytest.fixture
def parallel_breaker(dictionary):
    return TwoKeyBreaker(dictionary, BreakerConfig(workers=4))


class TestCanDecrypt:
    """Test the success check"""

    def test_can_decrypt(self, breaker):
        breaker.result = BreakResult((1, 2), "a")  # all good
        assert breaker.can_decrypt()

        breaker.result = BreakResult((1, 2), "  ")  # no message
        assert not breaker.can_decrypt()

        breaker.result = BreakResult((-1, 2), "a")  # key 1 < 0
        assert not breaker.can_decrypt()

        breaker.result = BreakResult((2, -1), "a")  # key 2 < 0
        assert not breaker.can_decrypt()

    def test_initial_state(self, breaker):
        assert breaker.key == (-1, -1)


class TestFrequencyAnalysis:
    """Test decryption of long secrets"""

    def test_decrypt(self, breaker, romeo):
        result = breaker.decrypt(CaesarCipher(7, 17).encrypt(romeo))
        assert result.strategy is Strategy.FREQUENCY_ANALYSIS
        assert breaker.decrypted == romeo
        assert breaker.key == (7, 17)

    def test_no_english(self, breaker):
        breaker.decrypt(CaesarCipher(7, 17).encrypt("x1y " * 51))
        assert breaker.decrypted == ""
        assert breaker.key == (-1, -1)


class TestBruteForce:
    """Test decryption of short secrets"""

    def test_decrypt(self, breaker):
        msg = "I me my mine myself."
        result = breaker.decrypt(CaesarCipher(17, 1).encrypt(msg))
        assert result.strategy is Strategy.BRUTE_FORCE
        assert breaker.decrypted == msg
        assert breaker.key == (17, 1)

    def test_no_english(self, breaker):
        breaker.decrypt(CaesarCipher(17, 1).encrypt("I me my mi1ne."))
        assert breaker.decrypted == ""
        assert breaker.key == (-1, -1)

    def test_long_passage(self, breaker, romeo):
        secret = CaesarCipher(7, 17).encrypt(romeo)
        result = breaker.brute_force(secret, calc_threshold(secret))
        assert result.keys == (7, 17)
        assert result.plaintext == romeo

    def test_recovered_keys_round_trip(self, breaker):
        msg = "I me my mine myself."
        secret = CaesarCipher(3, 22).encrypt(msg)
        result = breaker.decrypt(secret)
        assert CaesarCipher(*result.keys).encrypt(result.plaintext) == secret


class TestParallelBruteForce:
    """Test the threaded search returns what the sequential one does"""

    def test_decrypt(self, parallel_breaker):
        msg = "I me my mine myself."
        parallel_breaker.decrypt(CaesarCipher(17, 1).encrypt(msg))
        assert parallel_breaker.decrypted == msg
        assert parallel_breaker.key == (17, 1)

    def test_matches_sequential_on_decoy(self, breaker, parallel_breaker):
        secret = CaesarCipher(7).encrypt("I me my")
        assert parallel_breaker.decrypt(secret) == breaker.decrypt(secret)

    def test_no_english(self, parallel_breaker):
        parallel_breaker.decrypt(CaesarCipher(17, 1).encrypt("I me my mi1ne."))
        assert parallel_breaker.key == (-1, -1)


class TestEdgeCases:
    """Test blank input and whitespace-only halves"""

    def test_blank(self, breaker):
        breaker.decrypt(CaesarCipher(7, 17).encrypt("  "))
        assert breaker.decrypted == ""
        assert breaker.key == (-1, -1)

    def test_odd_length_secret(self, breaker):
        msg = "I me my mine myself"
        assert len(msg) % 2 == 1
        breaker.decrypt(CaesarCipher(4, 9).encrypt(msg))
        assert breaker.decrypted == msg
        assert breaker.key == (4, 9)

    def test_spaces_only_odd_half(self):
        # Single-letter words put every space on an odd position.
        breaker = TwoKeyBreaker(Dictionary.from_lines(["i", "a"]))
        msg = "I a I a I"
        secret = CaesarCipher(3, 5).encrypt(msg)
        assert secret == "L d L d L"

        result = breaker.decrypt(secret)
        assert result.strategy is Strategy.BRUTE_FORCE
        assert result.plaintext == msg
        assert result.keys[0] == 3
        assert CaesarCipher(*result.keys).encrypt(result.plaintext) == secret

    def test_spaces_only_odd_half_frequency_analysis(self):
        breaker = TwoKeyBreaker(Dictionary.from_lines(["i", "a"]))
        result = breaker.frequency_analysis(CaesarCipher(3, 5).encrypt("I a I a I"), 0)
        assert result.strategy is Strategy.FREQUENCY_ANALYSIS
        assert result.plaintext == "I a I a I"
        assert result.keys[0] == 3
