"""Player account holding a balance and a bet, both in cents."""

from __future__ import annotations

from dataclasses import dataclass

EUR = 100
"""Number of cents in one euro; every amount in the game is kept in cents."""


@dataclass
class Account:
    """A player's balance and bet, in cents."""

    balance: int
    bet: int

    @classmethod
    def from_euros(cls, balance, bet):
        """Create an account from whole-euro amounts."""
        return cls(balance=balance * EUR, bet=bet * EUR)