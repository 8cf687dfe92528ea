import pytest

from slotsim.combinations import (
    PatternOrder,
    PayoutPattern,
    five_of_a_kind,
    seek_combinations,
    straight_of_five,
    straight_of_three,
    three_of_a_kind,
    two_of_a_kind,
)

E = PayoutPattern.EMPTY


@pytest.mark.parametrize(
    "values, best",
    [
        ([1, 1, 2, 3, 5], 20),
        ([3, 3, 3, 1, 2], 50),
        ([1, 2, 3, 9, 9], 1000),
        ([7, 7, 7, 7, 7], 5000),
        ([1, 2, 3, 4, 5], 5000),
        ([1, 3, 5, 7, 9], 0),
    ],
)
def test_best_payout_values_fixed_by_source(values, best):
    assert max(seek_combinations(values)) == best


def test_two_of_a_kind():
    assert seek_combinations([1, 1, 2, 3, 5]) == [E, E, PayoutPattern.TWO_OF_A_KIND, E, E]


def test_zero_cancels_everything():
    assert seek_combinations([0, 1, 1, 1, 1]) == [E] * 5
    assert seek_combinations([0, 1, 2, 3, 4]) == [E] * 5


def test_five_of_a_kind():
    assert seek_combinations([7, 7, 7, 7, 7]) == [PayoutPattern.FIVE_OF_A_KIND, E, E, E, E]


def test_straight_of_five_also_counts_as_three():
    assert seek_combinations([1, 2, 3, 4, 5]) == [
        E, E, E, PayoutPattern.STRAIGHT_OF_FIVE, PayoutPattern.STRAIGHT_OF_THREE,
    ]


def test_full_house():
    assert seek_combinations([3, 3, 3, 1, 1]) == [
        E, PayoutPattern.THREE_OF_A_KIND, PayoutPattern.TWO_OF_A_KIND, E, E,
    ]


def test_descending_run_pays_nothing():
    assert seek_combinations([5, 4, 3, 2, 1]) == [E] * 5


def test_straight_of_three_with_pair():
    assert seek_combinations([1, 2, 3, 9, 9]) == [
        E, E, PayoutPattern.TWO_OF_A_KIND, E, PayoutPattern.STRAIGHT_OF_THREE,
    ]


def test_two_of_a_kind_reports_symbol():
    result = two_of_a_kind([3, 3, 3, 1, 1])
    assert result == PatternOrder(PayoutPattern.TWO_OF_A_KIND, (1, 0, 0, 0, 0))


def test_three_and_five_report_symbol():
    assert three_of_a_kind([4, 4, 4, 2, 6]).order == (4, 0, 0, 0, 0)
    assert five_of_a_kind([9, 9, 9, 9, 9]).order == (9, 0, 0, 0, 0)


def test_straights_report_all_values():
    assert straight_of_three([1, 2, 3, 9, 9]).order == (1, 2, 3, 9, 9)
    assert straight_of_five([2, 3, 4, 5, 6]).order == (2, 3, 4, 5, 6)


def test_empty_pattern_order_default():
    assert two_of_a_kind([1, 2, 4, 6, 8]) == PatternOrder()


@pytest.mark.parametrize("values", [[1, 2, 3, 4], [1, 2, 3, 4, 5, 6], [1, 2, 3, 4, 10], [-1, 1, 1, 1, 1]])
def test_invalid_values_raise(values):
    with pytest.raises(ValueError):
        seek_combinations(values)