"""Prize wheels used by the minigames."""

from __future__ import annotations

from enum import Enum

from slotsim.account import EUR


class WheelType(Enum):
    """The three kinds of wheel."""

    WHEEL = 0
    LUCKY_WHEEL = 1
    MEGA_WHEEL = 2


def _segments(*spec):
    return tuple(value for count, value in spec for _ in range(count))


SEGMENTS = {
    WheelType.WHEEL: _segments((5, 1), (5, 3), (3, 5), (2, 10), (2, 20), (1, 0)),
    WheelType.LUCKY_WHEEL: _segments((5, 1), (5, 5), (3, 10), (1, 20), (1, 50), (1, 100)),
    WheelType.MEGA_WHEEL: _segments((10, 10), (10, 20), (3, 50), (2, 100), (2, 250)),
}
"""Segment values of each wheel, in euros per euro bet."""

SPINS = {WheelType.WHEEL: 1, WheelType.LUCKY_WHEEL: 1, WheelType.MEGA_WHEEL: 3}


class Wheel:
    """A wheel spun on creation; ``multiplier`` holds the result in cents."""

    def __init__(self, wheel_type, rng):
        self.wheel_type = WheelType(wheel_type)
        segments = SEGMENTS[self.wheel_type]
        self.multiplier = sum(
            segments[rng.randrange(len(segments))] * EUR
            for _ in range(SPINS[self.wheel_type])
        )


def spin_wheel(wheel_type, rng):
    """Spin a wheel of the given type and return its multiplier."""
    return Wheel(wheel_type, rng).multiplier