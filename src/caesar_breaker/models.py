from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BreakerConfig(BaseModel):
    """Tuning constants shared by the one-key and two-key breakers."""

    model_config = ConfigDict(frozen=True)

    # Secrets with fewer whitespace-separated tokens than this are brute forced.
    word_limit: int = Field(default=50, ge=1)
    safe_word_length: int = Field(default=4, ge=1)
    # (max safe words, tolerated share of misses), checked in order.
    threshold_breakpoints: tuple[tuple[int, float], ...] = (
        (5, 0.9),
        (30, 0.5),
        (80, 0.4),
        (130, 0.3),
    )
    threshold_fallback: float = Field(default=0.2, ge=0, le=1)
    # Worker threads for the two-key brute force.
    workers: int = Field(default=1, ge=1)


class BreakReport(BaseModel):
    found: bool
    keys: list[int]
    strategy: Optional[str] = None
    plaintext: str
