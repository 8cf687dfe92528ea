"""Detection of paying combinations on the five reels."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import IntEnum

from slotsim.rng import REEL_COUNT, SYMBOL_MAX, SYMBOL_MIN


class PayoutPattern(IntEnum):
    """Paying combinations; the value is the payout multiplier in cents per euro."""

    EMPTY = 0
    TWO_OF_A_KIND = 20
    THREE_OF_A_KIND = 50
    STRAIGHT_OF_THREE = 1000
    FIVE_OF_A_KIND = 5000
    STRAIGHT_OF_FIVE = 5000


@dataclass(frozen=True)
class PatternOrder:
    """A matched pattern together with the symbols that form it."""

    pattern: PayoutPattern = PayoutPattern.EMPTY
    order: tuple = field(default=(0,) * REEL_COUNT)


_NOTHING = PatternOrder()


def _validated(values):
    values = tuple(values)
    if len(values) != REEL_COUNT:
        raise ValueError(f"expected {REEL_COUNT} reel values, got {len(values)}")
    for v in values:
        if not SYMBOL_MIN <= v <= SYMBOL_MAX:
            raise ValueError(f"reel value {v} outside {SYMBOL_MIN}..{SYMBOL_MAX}")
    return values


def _of_a_kind(values, count, pattern):
    values = _validated(values)
    if 0 in values:
        return _NOTHING
    counts = Counter(values)
    for symbol in range(SYMBOL_MAX + 1):
        if counts[symbol] == count:
            return PatternOrder(pattern, (symbol,) + (0,) * (REEL_COUNT - 1))
    return _NOTHING


def _has_single_run(counts, length):
    return any(
        all(counts[start + k] == 1 for k in range(length))
        for start in range(SYMBOL_MAX + 2 - length)
    )


def _ascending_at(values, start, length):
    first = values[start]
    return all(values[start + k] == first + k for k in range(1, length))


def two_of_a_kind(values):
    """Match the lowest symbol appearing exactly twice."""
    return _of_a_kind(values, 2, PayoutPattern.TWO_OF_A_KIND)


def three_of_a_kind(values):
    """Match the lowest symbol appearing exactly three times."""
    return _of_a_kind(values, 3, PayoutPattern.THREE_OF_A_KIND)


def five_of_a_kind(values):
    """Match a symbol appearing on all five reels."""
    return _of_a_kind(values, 5, PayoutPattern.FIVE_OF_A_KIND)


def straight_of_three(values):
    """Match three consecutive ascending symbols on adjacent reels."""
    values = _validated(values)
    if 0 in values:
        return _NOTHING
    if not _has_single_run(Counter(values), 3):
        return _NOTHING
    if any(_ascending_at(values, start, 3) for start in range(REEL_COUNT - 2)):
        return PatternOrder(PayoutPattern.STRAIGHT_OF_THREE, values)
    return _NOTHING


def straight_of_five(values):
    """Match five ascending consecutive symbols from the first reel on."""
    values = _validated(values)
    if 0 in values:
        return _NOTHING
    if _ascending_at(values, 0, REEL_COUNT):
        return PatternOrder(PayoutPattern.STRAIGHT_OF_FIVE, values)
    return _NOTHING


_CHECKS = (five_of_a_kind, three_of_a_kind, two_of_a_kind, straight_of_five, straight_of_three)


def seek_combinations(values):
    """Return the pattern found by each check, in fixed check order."""
    values = _validated(values)
    return [check(values).pattern for check in _CHECKS]