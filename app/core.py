from __future__ import annotations

from typing import Optional

from loguru import logger

from library.loghorizon import GameSystem, LogHorizon

from .config import DiceConfig

HELP_COMMANDS = {"HELP", "ヘルプ"}


class DiceService:
    """把输入文本交给游戏系统; 表数据只在创建时载入一次"""

    config: DiceConfig
    system: GameSystem

    def __init__(self, config: DiceConfig, system: Optional[GameSystem] = None):
        self.config = config
        self.system = system or LogHorizon.from_locale(config.locale, config.locale_dir, config.seed)
        logger.success(f"{self.system.NAME} 的表数据加载完毕")

    def handle(self, text: str) -> Optional[str]:
        command = self.config.command.strip(text)
        if not command:
            return None
        if command.upper() in HELP_COMMANDS:
            return self.system.HELP_MESSAGE.rstrip("\n")
        result = self.system.eval(command)
        if result is None:
            logger.info(f"未知命令: {command}")
        return result
