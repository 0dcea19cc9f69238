from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping, Optional, Sequence

from .i18n import I18n
from .randomizer import Randomizer

LOWEST_INDEX = 7


@dataclass(frozen=True)
class D66Table:
    """两颗 d6 拼接为两位数 (11~66) 后查表"""

    name: str
    items: Sequence[str]

    @classmethod
    def from_i18n(cls, key: str, i18n: I18n) -> "D66Table":
        table = i18n.translate(key)
        return cls(table["name"], tuple(table["items"]))

    def lookup(self, value: int) -> str:
        tens, ones = divmod(value, 10)
        return self.items[(tens - 1) * 6 + (ones - 1)]

    def roll(self, randomizer: Randomizer) -> str:
        value = randomizer.roll_d66()
        return f"{self.name}({value}) ＞ {self.lookup(value)}"


@dataclass(frozen=True)
class ConsumptionTable:
    """消耗表, 每 5 CR 为一档, 每档 8 项 (0~7)"""

    name: str
    bands: Sequence[Sequence[str]]

    def band_index(self, cr: int) -> int:
        return min(max((cr - 1) // 5, 0), len(self.bands) - 1)

    def roll(self, cr: int, modifier: int, randomizer: Randomizer, fixed: Optional[int] = None) -> str:
        items = self.bands[self.band_index(cr)]
        dice = randomizer.roll_once(6) if fixed is None else fixed
        total = dice + modifier
        chosen = items[min(max(total, 0), 7)]
        return f"{self.name}({total}[{dice}])：{chosen}"


@dataclass(frozen=True)
class Band:
    upper: int
    """该档的最大出目"""

    offset: int
    """查表时从出目中减去的值"""

    bonus: str
    """附加在结果后的奖励"""


@dataclass(frozen=True)
class BandPolicy:
    """财宝表的出目分档规则"""

    plain_max: int
    bands: tuple[Band, ...] = field(default_factory=tuple)

    @property
    def upper(self) -> int:
        return self.bands[-1].upper if self.bands else self.plain_max

    def pick(self, items: Mapping[int, str], index: int) -> str:
        if index < LOWEST_INDEX:
            return f"{LOWEST_INDEX - 1}以下の出目は未定義です"
        if index <= self.plain_max:
            return self._get(items, index)
        for band in self.bands:
            if index <= band.upper:
                return f"{self._get(items, index - band.offset)}&{band.bonus}"
        return f"{self.upper}以降の出目は未定義です"

    @staticmethod
    def _get(items: Mapping[int, str], index: int) -> str:
        return items.get(index, f"{index}の出目は未定義です")


EXPANSION_POLICY = BandPolicy(
    162,
    (
        Band(172, 10, "200G"),
        Band(182, 20, "400G"),
        Band(187, 30, "600G"),
    ),
)
BASE_POLICY = BandPolicy(
    62,
    (
        Band(72, 10, "80G"),
        Band(82, 20, "160G"),
        Band(87, 30, "260G"),
    ),
)
HEROINE_POLICY = BandPolicy(53)


@dataclass(frozen=True)
class TreasureTable:
    name: str
    items: Mapping[int, str]
    policy: BandPolicy = EXPANSION_POLICY

    def roll(self, cr: int, modifier: int, randomizer: Randomizer, fixed: Optional[int] = None) -> Optional[str]:
        """
        cr 与 modifier 均为 0 时返回 None;
        只给出 modifier 时不掷骰, 直接以修正值为出目查表, 固定骰值仍会显示;
        fixed 为奖品用的固定骰值, 代替 2d6
        """
        if cr == 0 and modifier == 0:
            return None
        if cr == 0:
            index = modifier
            dice_list = [fixed] if fixed is not None else []
        else:
            dice_list = [fixed] if fixed is not None else randomizer.roll_barabara(2, 6)
            index = sum(dice_list) + 5 * cr + modifier
        chosen = self.policy.pick(self.items, index)
        dice_str = f"[{','.join(map(str, dice_list))}]" if dice_list else ""
        return f"{self.name}({index}{dice_str})：{chosen}"
