"""Small minigames that trigger every thirtieth spin."""

from __future__ import annotations

import sys

from slotsim.account import EUR
from slotsim.wheel import WheelType, spin_wheel

COUNTER_START = 30
_GAME_COUNT = 4


class SmallMinigames:
    """Countdown-driven picker of one of four small bonus games."""

    def __init__(self, rng, out=None):
        self._rng = rng
        self._out = out
        self.counter = COUNTER_START

    def _print(self, *args):
        print(*args, file=self._out if self._out is not None else sys.stdout)

    def play(self):
        """Count down; when the counter hits zero, play a game and return its multiplier."""
        self.counter -= 1
        if self.counter == 0:
            self.reset_counter()
            return self.choose()
        return 0

    def reset_counter(self):
        """Restart the countdown."""
        self.counter = COUNTER_START

    def _weights(self):
        raw = [self._rng.randint(1, 100) for _ in range(_GAME_COUNT)]
        total = sum(raw)
        weights = [v * 100 // total for v in raw]
        weights[-1] += 100 - sum(weights)
        return sorted(weights)

    def _random_outcome(self, weights):
        draw = self._rng.randint(1, 100)
        accumulated = 0
        for index, weight in enumerate(weights):
            accumulated += weight
            if draw <= accumulated:
                return index
        return -1

    def choose(self):
        """Pick one of the four games by random weights and play it."""
        games = (self.lucky_wheel, self.normal_wheel, self.dices, self.coinflip)
        outcome = self._random_outcome(self._weights())
        if 0 <= outcome < len(games):
            return games[outcome]()
        return -1

    def coinflip(self):
        """Flip a coin for a 2x or 10x multiplier."""
        self._print("PLAYING COINFLIP...")
        multiplier = 200 if self._rng.randint(0, 1) == 0 else 1000
        self._print(f"MULTIPLIER: {multiplier}")
        return multiplier

    def dices(self):
        """Roll two dice; their sum is the multiplier in euros."""
        self._print("PLAYING DICES...")
        first = self._rng.randint(1, 6)
        second = self._rng.randint(1, 6)
        multiplier = first * EUR + second * EUR
        self._print(f"MULTIPLIER: {multiplier}")
        return multiplier

    def normal_wheel(self):
        """Spin the normal wheel."""
        multiplier = spin_wheel(WheelType.WHEEL, self._rng)
        self._print(f"WHEEL: {multiplier}")
        return multiplier

    def lucky_wheel(self):
        """Spin the lucky wheel."""
        multiplier = spin_wheel(WheelType.LUCKY_WHEEL, self._rng)
        self._print(f"LUCKY WHEEL: {multiplier}")
        return multiplier