import pytest

from library.loghorizon import Randomizer


def test_seeded_rolls_are_repeatable():
    assert Randomizer(42).roll_barabara(10, 6) == Randomizer(42).roll_barabara(10, 6)


def test_rolls_are_in_range_and_recorded():
    randomizer = Randomizer(1)
    dice = randomizer.roll_barabara(20, 6)
    assert len(dice) == 20
    assert all(1 <= d <= 6 for d in dice)
    assert randomizer.details == [(d, 6) for d in dice]
    randomizer.clear()
    assert randomizer.details == []


def test_d66_keeps_roll_order():
    randomizer = Randomizer(7)
    value = randomizer.roll_d66()
    (tens, _), (ones, _) = randomizer.details
    assert value == tens * 10 + ones


def test_invalid_dice():
    randomizer = Randomizer()
    with pytest.raises(ValueError):
        randomizer.roll_once(0)
    with pytest.raises(ValueError):
        randomizer.roll_barabara(-1, 6)
    assert randomizer.roll_barabara(0, 6) == []
