"""Random draws for the reels."""

from __future__ import annotations

REEL_COUNT = 5
SYMBOL_MIN = 0
SYMBOL_MAX = 9
BLANK_ODDS = 36


def spin_reels(rng):
    """Draw one symbol in 0..9 for each of the five reels."""
    return [rng.randint(SYMBOL_MIN, SYMBOL_MAX) for _ in range(REEL_COUNT)]


def is_blank_spin(rng):
    """Return True for the one-in-36 spin that pays nothing at all."""
    return rng.randint(1, BLANK_ODDS) == 1