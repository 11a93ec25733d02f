from typing import Optional

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

MIN_KEY = 0
MAX_KEY = 26


class KeyOutOfBoundsError(ValueError):
    pass


def check_key(key: int) -> int:
    """Raise KeyOutOfBoundsError unless MIN_KEY <= key <= MAX_KEY."""
    if key < MIN_KEY or key > MAX_KEY:
        raise KeyOutOfBoundsError(
            f"Encryption key must be between {MIN_KEY} and {MAX_KEY} (both inclusive): {key}"
        )
    return key


def shift_alphabet(key: int) -> str:
    """Rotate the alphabet left by key positions."""
    return ALPHABET[key:] + ALPHABET[:key]


class CaesarCipher:
    """
    Caesar cipher with one key, or two keys alternating by character position.

    With two keys, characters at even indexes use key1 and characters at odd
    indexes use key2. The index counts every character, letters or not.
    """

    def __init__(self, key1: int, key2: Optional[int] = None):
        self.key1 = check_key(key1)
        self.key2 = check_key(key2) if key2 is not None else None
        self.__shifted1 = shift_alphabet(key1)
        self.__shifted2 = shift_alphabet(key2) if key2 is not None else self.__shifted1

    @property
    def two_keys(self) -> bool:
        return self.key2 is not None

    def encrypt(self, text: str) -> str:
        """Shift every ASCII letter forward, keep case, pass everything else through."""
        if not text or text.isspace():
            return ""

        encrypted = []
        for i, char in enumerate(text):
            idx = ALPHABET.find(char.lower())
            if idx == -1:
                encrypted.append(char)
                continue

            shifted = self.__shifted2 if i % 2 else self.__shifted1
            c = shifted[idx]
            encrypted.append(c.upper() if char.isupper() else c)

        return "".join(encrypted)

    def decrypt(self, text: str) -> str:
        """Encrypt with the complementary key(s)."""
        key2 = complement(self.key2) if self.key2 is not None else None
        return CaesarCipher(complement(self.key1), key2).encrypt(text)


def complement(key: int) -> int:
    return (MAX_KEY - key) % MAX_KEY
