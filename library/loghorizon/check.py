from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from .arithmetic import parse
from .catalog import Labels, TableCatalog
from .exceptions import ExpressionError
from .randomizer import Randomizer

CHECK_PATTERN = re.compile(
    r"^(?P<count>\d+)LH"
    r"(?P<modifier>[+\-][\d+\-*/()]*)?"
    r"(?:(?P<cmp>>=)(?P<target>[\d+\-*/()]+))?$"
)


def format_modifier(value: int) -> str:
    if value == 0:
        return ""
    return f"+{value}" if value > 0 else str(value)


@dataclass(frozen=True)
class CheckCommand:
    dice_count: int
    modifier: int = 0
    cmp_op: Optional[str] = None
    target: Optional[int] = None

    def __str__(self):
        res = f"{self.dice_count}LH{format_modifier(self.modifier)}"
        if self.cmp_op:
            res += f"{self.cmp_op}{self.target}"
        return res


def parse_check(command: str) -> Optional[CheckCommand]:
    """解析 xLH±y>=z, 不符合语法时返回 None"""
    if not (mat := CHECK_PATTERN.match(command)):
        return None
    dice_count = int(mat["count"])
    if dice_count == 0:
        return None
    cmp_op = mat["cmp"]
    try:
        modifier = parse(mat["modifier"]) if mat["modifier"] else 0
        target = parse(mat["target"]) if cmp_op else None
    except ExpressionError:
        return None
    return CheckCommand(dice_count, modifier, cmp_op, target)


def judge(parsed: CheckCommand, dice_list: list[int], total: int, labels: Labels) -> Optional[str]:
    """按 大成功 > 大失败 > 无目标值 > 比较 的顺序判定"""
    if dice_list.count(6) >= 2:
        return labels.critical
    if dice_list.count(1) >= parsed.dice_count:
        return labels.fumble
    if parsed.cmp_op is None:
        return None
    if total >= parsed.target:
        return labels.success
    return labels.failure


def roll_check(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """判定 xLH±y>=z"""
    parsed = parse_check(command)
    if not parsed:
        return None
    dice_list = randomizer.roll_barabara(parsed.dice_count, 6)
    dice_total = sum(dice_list)
    total = dice_total + parsed.modifier
    sequence = [
        f"({parsed})",
        f"{dice_total}[{','.join(map(str, dice_list))}]{format_modifier(parsed.modifier)}",
        str(total),
        judge(parsed, dice_list, total, catalog.labels),
    ]
    return " ＞ ".join(s for s in sequence if s is not None)
