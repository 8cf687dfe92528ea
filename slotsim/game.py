"""The slot machine session loop and its command."""

from __future__ import annotations

import argparse
import random
import sys
from dataclasses import dataclass

from slotsim.account import EUR, Account
from slotsim.bminigames import BigMinigames
from slotsim.combinations import seek_combinations
from slotsim.rng import is_blank_spin, spin_reels
from slotsim.sminigames import SmallMinigames

MIN_BALANCE = 5 * EUR


@dataclass
class SessionStats:
    """Counts gathered over one session."""

    spins: int = 0
    small: int = 0
    big: int = 0
    empty: int = 0

    def __str__(self):
        return f"SPINS: {self.spins} S: {self.small}B: {self.big}E: {self.empty}"


def run_session(account, rng, out=None):
    """Spin until the balance is no more than five euros; return the statistics."""
    out = out if out is not None else sys.stdout
    small_games = SmallMinigames(rng, out)
    big_games = BigMinigames(rng, out)
    stats = SessionStats()

    while account.balance > MIN_BALANCE:
        stats.spins += 1
        bet = account.bet
        balance = account.balance - bet

        if is_blank_spin(rng):
            stats.empty += 1
        elif (big := big_games.play()) > 0:
            balance += bet * big // EUR
            stats.big += 1
        elif (small := small_games.play()) > 0:
            balance += bet * small // EUR
            stats.small += 1
        else:
            values = spin_reels(rng)
            patterns = seek_combinations(values)
            for value, pattern in zip(values, patterns):
                print(f"{value} {int(pattern)}", file=out)
            multiplier = max([0, *patterns])
            balance += bet * multiplier // EUR

        account.balance = balance
        print(f"BALANCE: {account.balance}", file=out)

    return stats


def main(argv=None):
    """Play a session with 500 euros at 5 euros a spin."""
    parser = argparse.ArgumentParser(prog="slotsim", description="Simulate a slot machine session.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    args = parser.parse_args(argv)

    stats = run_session(Account.from_euros(500, 5), random.Random(args.seed), sys.stdout)
    sys.stdout.write(str(stats))
    return 0


if __name__ == "__main__":
    sys.exit(main())