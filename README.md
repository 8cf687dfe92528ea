# slotsim

slotsim is a small console slot machine simulator. A session starts with a
balance of 500 EUR and a fixed bet of 5 EUR. It keeps spinning while the
balance is above 5 EUR. Each spin takes the bet and then works through these
checks in order, stopping at the first one that applies:

1. **Blank spin**: one spin in 36 pays nothing.
2. **Big minigame**: three rounds of random triples, each drawn from 0–2. If
   every pair of triples matches, the mega wheel is spun three times and the
   three results are added together.
3. **Small minigame**: a countdown starts at 30 and goes down by one each time
   this step is reached. When it hits zero it restarts and one of four games is
   picked with random weights. The games are a lucky wheel, a normal wheel, two
   dice, and a coin flip that pays 2x or 10x.
4. **Reels**: five reels each show a digit from 0 to 9. Five pattern checks run
   in this order: five of a kind, three of a kind, two of a kind, straight of
   five, straight of three. The spin pays the highest multiplier found. A zero
   on any reel cancels every pattern.

All amounts are kept in cents, so 100 units make 1 EUR. Multipliers use the
same scale: a multiplier of 100 returns the bet once.

## Installation

```
pip install .
```

## Running a session

```
slotsim
slotsim --seed 42
```

After each spin the command prints the balance. A reel spin also prints five
lines. Each line holds one reel value next to the multiplier of one pattern
check. The minigames print their own results. The session ends with a summary
of the spins played and the number of small minigames, big minigames and blank
spins. Pass `--seed` to replay the same session.

## Using it from Python

```python
import random
import sys

from slotsim.account import Account
from slotsim.game import run_session

account = Account.from_euros(500, 5)
stats = run_session(account, random.Random(42), sys.stdout)
print(stats.spins, stats.small, stats.big, stats.empty)
```

`run_session` takes any `random.Random` instance and a text stream for its
output. It changes `account.balance` as it plays and returns a `SessionStats`.

The other parts can be used on their own:

- `slotsim.account.Account`: a balance and a bet in cents. `Account.from_euros`
  builds one from whole euros.
- `slotsim.rng.spin_reels(rng)` draws five reel values.
  `slotsim.rng.is_blank_spin(rng)` returns `True` one time in 36.
- `slotsim.combinations.seek_combinations(values)` returns one `PayoutPattern`
  per check, in check order. The single checks are also available:
  `five_of_a_kind`, `three_of_a_kind`, `two_of_a_kind`, `straight_of_five` and
  `straight_of_three`. Each returns a `PatternOrder`. Input that is not five
  values in 0–9 raises `ValueError`.
- `slotsim.wheel.spin_wheel(wheel_type, rng)` spins a `WheelType.WHEEL`,
  `WheelType.LUCKY_WHEEL` or `WheelType.MEGA_WHEEL` and returns the multiplier.
- `slotsim.sminigames.SmallMinigames` and `slotsim.bminigames.BigMinigames`
  hold the minigames. Call `play()` on either one.

## What it does not do

The simulator plays unattended. You do not choose bets during a session, the
starting balance and bet of the command are fixed, and no account or result is
saved between runs.

## Running the tests

```
pip install ".[test]"
pytest
```