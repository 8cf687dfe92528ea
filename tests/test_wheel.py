import random

import pytest

from slotsim.account import EUR
from slotsim.wheel import SEGMENTS, Wheel, WheelType, spin_wheel


class _Indices:
    def __init__(self, indices):
        self.indices = list(indices)
        self.sizes = []

    def randrange(self, n):
        self.sizes.append(n)
        return self.indices.pop(0)


def test_normal_wheel_result_is_a_segment():
    for seed in range(100):
        m = spin_wheel(WheelType.WHEEL, random.Random(seed))
        assert m in {v * EUR for v in SEGMENTS[WheelType.WHEEL]}


def test_lucky_wheel_result_is_a_segment():
    for seed in range(100):
        m = Wheel(WheelType.LUCKY_WHEEL, random.Random(seed)).multiplier
        assert m in {v * EUR for v in SEGMENTS[WheelType.LUCKY_WHEEL]}


def test_normal_wheel_has_a_zero_segment():
    segs = SEGMENTS[WheelType.WHEEL]
    rng = _Indices([len(segs) - 1])
    assert spin_wheel(WheelType.WHEEL, rng) == 0
    assert rng.sizes == [len(segs)]


def test_mega_wheel_spins_three_times():
    segs = SEGMENTS[WheelType.MEGA_WHEEL]
    rng = _Indices([0, len(segs) - 1, 12])
    m = spin_wheel(WheelType.MEGA_WHEEL, rng)
    assert m == (segs[0] + segs[-1] + segs[12]) * EUR
    assert len(rng.sizes) == 3


def test_wheel_accepts_integer_type():
    w = Wheel(1, _Indices([0]))
    assert w.wheel_type is WheelType.LUCKY_WHEEL
    assert w.multiplier == SEGMENTS[WheelType.LUCKY_WHEEL][0] * EUR


def test_unknown_wheel_type_raises():
    with pytest.raises(ValueError):
        Wheel(7, random.Random(0))