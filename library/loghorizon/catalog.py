from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Sequence

from loguru import logger

from .cash import CASH_TREASURE_TABLE
from .i18n import I18n
from .tables import (
    BASE_POLICY,
    EXPANSION_POLICY,
    HEROINE_POLICY,
    ConsumptionTable,
    D66Table,
    TreasureTable,
)

CONSUMPTION_TYPES = ("P", "E", "G", "C", "ES", "CS")
TREASURE_TYPES = ("C", "M", "I", "O", "H", "G")
D66_TABLE_NAMES = ("PTAG", "KOYU", "MGR1", "MGR2", "MGR3", "HLOC", "PCNM")


@dataclass(frozen=True)
class ItemTable:
    name: str
    items: Sequence[str]


@dataclass(frozen=True)
class MultiTable:
    """每个子表各掷一次 d6"""

    name: str
    tables: Sequence[Sequence[str]]


@dataclass(frozen=True)
class InstrumentTable:
    name: str
    type_list: Sequence[str]
    items: Sequence[Sequence[str]]


@dataclass(frozen=True)
class ExplorationTable:
    name: str
    items: Mapping[int, str]


@dataclass(frozen=True)
class Labels:
    success: str
    failure: str
    critical: str
    fumble: str


@dataclass(frozen=True)
class TableCatalog:
    """启动时由语言文件一次性构建, 之后只读"""

    locale: str
    labels: Labels
    consumption: Mapping[str, ConsumptionTable]
    treasure: Mapping[str, TreasureTable]
    invention: str
    invention_tables: Mapping[str, ItemTable]
    trouble: MultiTable
    abandoned_child: MultiTable
    instrument: InstrumentTable
    exploration: ExplorationTable
    d66_tables: Mapping[str, D66Table]

    @classmethod
    def load(cls, i18n: I18n) -> "TableCatalog":
        t = i18n.translate
        labels = Labels(
            success=t("success"),
            failure=t("failure"),
            critical=t("LogHorizon.LH.critical"),
            fumble=t("LogHorizon.LH.fumble"),
        )
        consumption = {}
        for kind in CONSUMPTION_TYPES:
            table = t(f"LogHorizon.CT.{kind}CT")
            consumption[kind] = ConsumptionTable(table["name"], tuple(tuple(band) for band in table["items"]))

        treasure = {
            "C": TreasureTable(t("LogHorizon.TRS.CTRS.name"), CASH_TREASURE_TABLE),
            "M": TreasureTable(
                t("LogHorizon.TRS.MTRS.name"), i18n.translate_with_hash_merge("LogHorizon.TRS.MTRS.items")
            ),
            "I": TreasureTable(
                t("LogHorizon.TRS.ITRS.name"), i18n.translate_with_hash_merge("LogHorizon.TRS.ITRS.items")
            ),
            "O": TreasureTable(t("LogHorizon.TRS.OTRS.name"), t("LogHorizon.TRS.OTRS.items")),
            "H": TreasureTable(t("LogHorizon.TRS.HTRS.name"), t("LogHorizon.TRS.HTRS.items"), HEROINE_POLICY),
            "G": TreasureTable(t("LogHorizon.TRS.GTRS.name"), t("LogHorizon.TRS.GTRS.items"), BASE_POLICY),
        }
        invention_tables = {}
        for kind in ("A", "B", "L", "T"):
            table = t(f"LogHorizon.IAT.{kind}")
            invention_tables[kind] = ItemTable(table["name"], tuple(table["items"]))

        instrument = t("LogHorizon.MII")
        catalog = cls(
            locale=i18n.locale,
            labels=labels,
            consumption=consumption,
            treasure=treasure,
            invention=t("LogHorizon.IAT.name"),
            invention_tables=invention_tables,
            trouble=MultiTable(t("LogHorizon.TIAS.name"), tuple(map(tuple, t("LogHorizon.TIAS.tables")))),
            abandoned_child=MultiTable(t("LogHorizon.ABDC.name"), tuple(map(tuple, t("LogHorizon.ABDC.tables")))),
            instrument=InstrumentTable(
                instrument["name"],
                tuple(instrument["type_list"]),
                tuple(map(tuple, instrument["items"])),
            ),
            exploration=ExplorationTable(t("LogHorizon.ESTL.name"), t("LogHorizon.ESTL.items")),
            d66_tables={name: D66Table.from_i18n(f"LogHorizon.table.{name}", i18n) for name in D66_TABLE_NAMES},
        )
        logger.debug(f"已载入 {i18n.locale} 的 LogHorizon 表数据")
        return catalog
