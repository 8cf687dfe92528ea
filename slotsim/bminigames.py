"""The rare big minigame ending in the mega wheel."""

from __future__ import annotations

import sys

from slotsim.wheel import WheelType, spin_wheel

_ROUNDS = 3
_WIDTH = 3


class BigMinigames:
    """Three rounds of matching random triples; a full match spins the mega wheel."""

    def __init__(self, rng, out=None):
        self._rng = rng
        self._out = out

    def _triple(self):
        return [self._rng.randint(0, 2) for _ in range(_WIDTH)]

    def play(self):
        """Return the mega wheel multiplier if every round matches, else 0."""
        for _ in range(_ROUNDS):
            first = self._triple()
            second = self._triple()
            if first != second:
                return 0
        return self.mega_wheel()

    def mega_wheel(self):
        """Spin the mega wheel and report its multiplier."""
        multiplier = spin_wheel(WheelType.MEGA_WHEEL, self._rng)
        print(f"MEGA WHEEL: {multiplier}", file=self._out if self._out is not None else sys.stdout)
        return multiplier