"""
ログ・ホライズンTRPG 的掷骰命令与随机表
"""
from .arithmetic import evaluate as evaluate
from .catalog import TableCatalog as TableCatalog
from .check import CheckCommand as CheckCommand
from .check import parse_check as parse_check
from .exceptions import ExpressionError as ExpressionError
from .exceptions import LogHorizonError as LogHorizonError
from .exceptions import TranslationMissing as TranslationMissing
from .i18n import I18n as I18n
from .randomizer import Randomizer as Randomizer
from .system import GameSystem as GameSystem
from .system import LogHorizon as LogHorizon
from .tables import BandPolicy as BandPolicy
from .tables import ConsumptionTable as ConsumptionTable
from .tables import D66Table as D66Table
from .tables import TreasureTable as TreasureTable
