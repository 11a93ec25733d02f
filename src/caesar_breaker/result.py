from dataclasses import dataclass
from enum import Enum
from typing import Optional

from caesar_breaker.models import BreakReport

UNKNOWN_KEY = -1


class Strategy(str, Enum):
    BRUTE_FORCE = "brute-force"
    FREQUENCY_ANALYSIS = "frequency-analysis"

    def __str__(self):
        return self.value


@dataclass(frozen=True, slots=True)
class BreakResult:
    """Outcome of one decrypt call. Unrecovered keys hold UNKNOWN_KEY."""

    keys: tuple[int, ...]
    plaintext: str = ""
    strategy: Optional[Strategy] = None

    @classmethod
    def not_found(cls, key_slots: int, strategy: Optional[Strategy] = None) -> "BreakResult":
        return cls(keys=(UNKNOWN_KEY,) * key_slots, plaintext="", strategy=strategy)

    @property
    def found(self) -> bool:
        return all(k > UNKNOWN_KEY for k in self.keys) and bool(self.plaintext.strip())

    def to_report(self) -> BreakReport:
        return BreakReport(
            found=self.found,
            keys=list(self.keys),
            strategy=str(self.strategy) if self.strategy else None,
            plaintext=self.plaintext,
        )
