from __future__ import annotations

import re
from typing import Optional

from .arithmetic import evaluate
from .catalog import TableCatalog
from .randomizer import Randomizer

CONSUMPTION_PATTERN = re.compile(r"^(P|E|G|C|ES|CS)CT(\d+)?([+\-\d]+)?(?:\$(\d+))?$")
TREASURE_PATTERN = re.compile(r"^(C|M|I|O|H|G)TRS(\d+)?([+\-\d]+)?(\$)?$")
INVENTION_PATTERN = re.compile(r"^IAT([ABMDLT]*)$")
INSTRUMENT_PATTERN = re.compile(r"^MII(\d?)$")
EXPLORATION_PATTERN = re.compile(r"^ESTL(\d+)?([+\-\d]+)?(?:\$(\d+))?$")

# 奖品用的固定骰值
PRIZE_DICE = 7
EXPLORATION_RANGE = (7, 162)
INVENTION_ALIASES = {"A": "A", "M": "A", "B": "B", "D": "B", "L": "L", "T": "T"}


def roll_consumption_table(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """消耗表 tCTx±y$z"""
    if not (mat := CONSUMPTION_PATTERN.match(command)):
        return None
    table = catalog.consumption[mat[1]]
    cr = int(mat[2] or 0)
    modifier = evaluate(mat[3])
    fixed = int(mat[4]) if mat[4] else None
    return table.roll(cr, modifier, randomizer, fixed)


def roll_treasure_table(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """财宝表 tTRSx±y$"""
    if not (mat := TREASURE_PATTERN.match(command)):
        return None
    table = catalog.treasure[mat[1]]
    cr = int(mat[2] or 0)
    modifier = evaluate(mat[3])
    if cr == 0 and modifier == 0:
        return f"{command} ＞ CRを指定してください"
    fixed = PRIZE_DICE if mat[4] else None
    return table.roll(cr, modifier, randomizer, fixed)


def roll_invention_attribute(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """新发明随机决定表 IATt"""
    if not (mat := INVENTION_PATTERN.match(command)):
        return None
    indicate = mat[1] or "MDLT"
    is_single = len(indicate) == 1
    numbers = []
    result = []
    for char in indicate:
        dice = randomizer.roll_once(6)
        numbers.append(str(dice))
        table = catalog.invention_tables[INVENTION_ALIASES[char]]
        chosen = table.items[dice - 1]
        if is_single:
            chosen = f"{table.name}：{chosen}"
        result.append(chosen)
    return f"{catalog.invention}([{','.join(numbers)}])：{' '.join(result)}"


def _roll_multi(name: str, tables, randomizer: Randomizer, sep: str) -> str:
    numbers = []
    result = []
    for items in tables:
        dice = randomizer.roll_once(6)
        numbers.append(str(dice))
        result.append(items[dice - 1])
    return f"{name}([{','.join(numbers)}])：{sep.join(result)}"


def roll_trouble_in_akiba(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """秋叶原街头遭遇的麻烦 TIAS"""
    if command != "TIAS":
        return None
    return _roll_multi(catalog.trouble.name, catalog.trouble.tables, randomizer, " ")


def roll_abandoned_child(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """弃儿随机决定表 ABDC"""
    if command != "ABDC":
        return None
    return _roll_multi(catalog.abandoned_child.name, catalog.abandoned_child.tables, randomizer, "　")


def roll_musical_instrument(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """乐器种类表 MIIx"""
    if not (mat := INSTRUMENT_PATTERN.match(command)):
        return None
    is_roll = not mat[1]
    kind = randomizer.roll_once(6) if is_roll else int(mat[1])
    if kind < 1 or kind > 6:
        return None
    table = catalog.instrument
    dice = randomizer.roll_once(6)
    result = table.items[kind - 1][dice - 1]
    return f"{table.name}{f'({kind})' if is_roll else ''}：{table.type_list[kind - 1]}({dice})：{result}"


def roll_eastal_exploration(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """伊斯塔尔探索表 ESTLx±y$z"""
    if not (mat := EXPLORATION_PATTERN.match(command)):
        return None
    if mat[1] is None and mat[2] is None and mat[3] is None:
        return None
    cr = int(mat[1] or 0)
    modifier = evaluate(mat[2])
    if mat[3]:
        dice_list = [int(mat[3])]
    elif cr == 0:
        dice_list = []
    else:
        dice_list = randomizer.roll_barabara(2, 6)
    low, high = EXPLORATION_RANGE
    total = min(max(sum(dice_list) + cr * 5 + modifier, low), high)
    dice_str = f"[{','.join(map(str, dice_list))}]" if dice_list else ""
    chosen = catalog.exploration.items[total].rstrip("\n")
    return f"{catalog.exploration.name}({total}{dice_str})\n{chosen}"


def roll_prefix_table(command: str, catalog: TableCatalog, randomizer: Randomizer) -> Optional[str]:
    """PTAG / KOYU / MGR1~3 / HLOC / PCNM"""
    if table := catalog.d66_tables.get(command):
        return table.roll(randomizer)
    return None
