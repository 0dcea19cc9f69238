from __future__ import annotations

import re
from functools import lru_cache
from pathlib import Path
from typing import Callable, ClassVar, Optional, Union

from loguru import logger

from .catalog import D66_TABLE_NAMES, TableCatalog
from .check import roll_check
from .commands import (
    roll_abandoned_child,
    roll_consumption_table,
    roll_eastal_exploration,
    roll_invention_attribute,
    roll_musical_instrument,
    roll_prefix_table,
    roll_treasure_table,
    roll_trouble_in_akiba,
)
from .i18n import DEFAULT_LOCALE, I18n
from .randomizer import Randomizer

Handler = Callable[[str, TableCatalog, Randomizer], Optional[str]]

D66_PATTERN = re.compile(r"^D66([ANS])?$")


class GameSystem:
    """
    游戏系统基类

    eval 只处理以 PREFIXES 中任一前缀开头的命令, 其余一律返回 None,
    交由外部报告未知命令
    """

    ID: ClassVar[str] = "DiceBot"
    NAME: ClassVar[str] = "DiceBot"
    SORT_KEY: ClassVar[str] = "*たいすほつと"
    HELP_MESSAGE: ClassVar[str] = ""
    PREFIXES: ClassVar[tuple[str, ...]] = ()

    handlers: ClassVar[tuple[Handler, ...]] = ()
    """按优先级排列, 第一个返回非 None 的结果即为最终结果"""

    enabled_d66: ClassVar[bool] = False

    def __init__(self, catalog: TableCatalog, randomizer: Optional[Randomizer] = None):
        self.catalog = catalog
        self.randomizer = randomizer or Randomizer()

    @classmethod
    def prefixes(cls) -> tuple[str, ...]:
        return cls.PREFIXES + (("D66",) if cls.enabled_d66 else ())

    @classmethod
    def command_pattern(cls) -> re.Pattern:
        return _compile_prefixes(cls.prefixes())

    def eval(self, text: str, randomizer: Optional[Randomizer] = None) -> Optional[str]:
        if not text or not text.strip():
            return None
        command = text.split()[0].upper()
        if not self.command_pattern().match(command):
            logger.debug(f"{self.ID} 不处理命令: {command}")
            return None
        randomizer = randomizer or self.randomizer
        randomizer.clear()
        result = self.eval_game_system_specific_command(command, randomizer)
        if result is None:
            result = self.eval_common_command(command, randomizer)
        if result is None:
            logger.debug(f"{self.ID} 无法解析命令: {command}")
        return result

    def eval_game_system_specific_command(self, command: str, randomizer: Randomizer) -> Optional[str]:
        for handler in self.handlers:
            if (result := handler(command, self.catalog, randomizer)) is not None:
                logger.debug(f"{command} -> {handler.__name__}")
                return result
        return None

    def eval_common_command(self, command: str, randomizer: Randomizer) -> Optional[str]:
        if not self.enabled_d66 or not (mat := D66_PATTERN.match(command)):
            return None
        tens, ones = randomizer.roll_barabara(2, 6)
        if mat[1] in ("A", "S"):
            tens, ones = sorted((tens, ones))
        return f"({command}) ＞ {tens * 10 + ones}"


@lru_cache(maxsize=None)
def _compile_prefixes(prefixes: tuple[str, ...]) -> re.Pattern:
    return re.compile(rf"^(?:{'|'.join(prefixes)})", re.IGNORECASE)


class LogHorizon(GameSystem):
    ID = "LogHorizon"
    NAME = "ログ・ホライズンTRPG"
    SORT_KEY = "ろくほらいすんTRPG"
    HELP_MESSAGE = """\
・判定(xLH±y>=z)
　xD6の判定。クリティカル、ファンブルの自動判定を行います。
　x：xに振るダイス数を入力。
　±y：yに修正値を入力。±の計算に対応。省略可能。
　>=z：zに目標値を入力。±の計算に対応。省略可能。
　例） 3LH　2LH>=8　3LH+1>=10
・消耗表(tCTx±y$z)
　PCT 体力／ECT 気力／GCT 物品／CCT 金銭
　x:CRを指定。
　±y:修正値。＋と－の計算に対応。省略可能。
　$z：＄を付けるとダイス目を z 固定。表の特定の値参照用に。省略可能。
　例） PCT1　ECT2+1　GCT3-1　CCT3$5
・財宝表(tTRSx±y$)
　CTRS 金銭／MTRS 魔法素材／ITRS 換金アイテム／OTRS そのほか／※HTRS ヒロイン／GTRS ゴブリン財宝表
　x：CRを指定。省略時はダイス値 0 固定で修正値の表参照。《ゴールドフィンガー》使用時など。
　±y：修正値。＋と－の計算に対応。省略可能。
　$：＄を付けると財宝表のダイス目を7固定（1回分のプライズ用）。省略可能。
　例） CTRS1　MTRS2+1　ITRS3-1　ITRS+27　CTRS3$
・パーソナリティタグ表(PTAG)
・交友表(KOYU)
・イースタル探索表(ESTLx±y$z)
　x：CRを指定。省略時はダイス値 0 固定で修正値の表参照。
　±y：修正値。＋と－の計算に対応。省略可能。
　$z：＄を付けるとダイス目を z 固定。特定CRの表参照用に。省略可能。
　例） ESTL1　ESTL+15　ESTL2+1$5　ESTL2-1$5
・プレフィックスドマジックアイテム効果表(MGRx) xはMGを指定。
・楽器種別表(MIIx) xは楽器の種類(1～6を指定)、省略可能
　1 打楽器１／2 鍵盤楽器／3 弦楽器１／4 弦楽器２／5 管楽器１／6 管楽器２
・特殊消耗表(tSCTx±y$z)　消耗表と同様、ただしCRは省略可能。
　ESCT ロデ研は爆発だ！／CSCT アルヴの呪いじゃ！
・攻撃命中箇所ランダム決定表(HLOC)
・PC名ランダム決定表(PCNM)
・ロデ研の新発明ランダム決定表(IATt)
　IATA 特徴A(メリット)／IATB 特徴B(デメリット)／IATL 見た目／IATT 種類
　tを省略すると全て表示。tにA/B/L/Tを任意の順で連結可能
　例）IAT　IATALT　IATABBLT　IATABL
・アキバの街で遭遇するトラブルランダム決定表(TIAS)
・廃棄児ランダム決定表(ABDC)
・D66ダイスあり
"""
    PREFIXES = (
        r"\d+LH",
        "PC",
        "EC",
        "GC",
        "CC",
        "CTR",
        "MTR",
        "ITR",
        "OTR",
        "HTR",
        "GTR",
        "IAT",
        "TIAS",
        "ABDC",
        "MII",
        "ESCT",
        "CSCT",
        "ESTL",
    ) + D66_TABLE_NAMES

    handlers = (
        roll_check,
        roll_consumption_table,
        roll_treasure_table,
        roll_invention_attribute,
        roll_trouble_in_akiba,
        roll_abandoned_child,
        roll_musical_instrument,
        roll_eastal_exploration,
        roll_prefix_table,
    )

    enabled_d66 = True

    @classmethod
    def from_locale(
        cls,
        locale: str = DEFAULT_LOCALE,
        directory: Optional[Union[str, Path]] = None,
        seed: Optional[int] = None,
    ) -> "LogHorizon":
        return cls(TableCatalog.load(I18n(locale, directory)), Randomizer(seed))
