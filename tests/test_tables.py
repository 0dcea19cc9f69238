import pytest

from library.loghorizon import ConsumptionTable, D66Table, TreasureTable
from library.loghorizon.cash import CASH_TREASURE_TABLE
from library.loghorizon.tables import BASE_POLICY, EXPANSION_POLICY, HEROINE_POLICY

from .helpers import SequenceRandomizer


@pytest.mark.parametrize("cr, band", [(0, 0), (1, 0), (5, 0), (6, 1), (10, 1), (11, 2), (25, 4), (100, 4)])
def test_consumption_band_index(cr, band):
    table = ConsumptionTable("test", [[str(i)] * 8 for i in range(5)])
    assert table.band_index(cr) == band


def test_consumption_fixed_value_does_not_roll():
    table = ConsumptionTable("表", [list("01234567")])
    assert table.roll(1, 2, SequenceRandomizer([]), fixed=3) == "表(5[3])：5"
    assert table.roll(1, -9, SequenceRandomizer([]), fixed=3) == "表(-6[3])：0"
    assert table.roll(1, 9, SequenceRandomizer([]), fixed=3) == "表(12[3])：7"


def test_cash_table_bounds():
    assert CASH_TREASURE_TABLE[7] == "35G"
    assert CASH_TREASURE_TABLE[162] == "1600G"
    assert set(CASH_TREASURE_TABLE) == set(range(7, 163))


@pytest.mark.parametrize(
    "index, expected",
    [
        (6, "6以下の出目は未定義です"),
        (-3, "6以下の出目は未定義です"),
        (7, "35G"),
        (162, "1600G"),
        (163, "1430G&200G"),
        (172, "1600G&200G"),
        (173, "1430G&400G"),
        (183, "1430G&600G"),
        (187, "1500G&600G"),
        (188, "187以降の出目は未定義です"),
    ],
)
def test_expansion_policy(index, expected):
    assert EXPANSION_POLICY.pick(CASH_TREASURE_TABLE, index) == expected


def test_heroine_and_base_policy():
    items = {i: f"item{i}" for i in range(7, 63)}
    assert HEROINE_POLICY.pick(items, 53) == "item53"
    assert HEROINE_POLICY.pick(items, 54) == "53以降の出目は未定義です"
    assert BASE_POLICY.pick(items, 62) == "item62"
    assert BASE_POLICY.pick(items, 63) == "item53&80G"
    assert BASE_POLICY.pick(items, 82) == "item62&160G"
    assert BASE_POLICY.pick(items, 83) == "item53&260G"
    assert BASE_POLICY.pick(items, 88) == "87以降の出目は未定義です"


def test_treasure_roll():
    table = TreasureTable("金銭", CASH_TREASURE_TABLE)
    assert table.roll(0, 0, SequenceRandomizer([])) is None
    assert table.roll(0, 27, SequenceRandomizer([])) == "金銭(27)：85G"
    assert table.roll(0, 27, SequenceRandomizer([]), fixed=7) == "金銭(27[7])：85G"
    assert table.roll(1, 0, SequenceRandomizer([3, 4])) == "金銭(12[3,4])：45G"
    assert table.roll(3, -1, SequenceRandomizer([]), fixed=7) == "金銭(21[7])：65G"


def test_d66_table():
    table = D66Table("D66", [str(i) for i in range(36)])
    assert table.lookup(11) == "0"
    assert table.lookup(16) == "5"
    assert table.lookup(21) == "6"
    assert table.lookup(66) == "35"
    assert table.roll(SequenceRandomizer([2, 1])) == "D66(21) ＞ 6"
