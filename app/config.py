import sys
from pathlib import Path
from typing import Optional, Union

import yaml
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field


class BaseConfig(BaseModel):
    model_config = ConfigDict(extra="ignore")


class CommandConfig(BaseConfig):
    prefix: list[str] = Field(default_factory=lambda: [".", "。"])
    """命令前缀, 输入以其中之一开头时会先去除前缀再交给游戏系统"""

    def strip(self, text: str) -> str:
        text = text.strip()
        for p in sorted(self.prefix, key=len, reverse=True):
            if p and text.startswith(p):
                return text[len(p):].lstrip()
        return text


class DiceConfig(BaseConfig):
    log_level: str = Field(default="INFO")
    """日志等级"""

    log_dir: str = Field(default="logs")
    """日志存放的文件夹, 默认为 logs"""

    locale: str = Field(default="ja_jp")
    """表数据使用的语言"""

    locale_dir: Optional[str] = Field(default=None)
    """语言文件所在文件夹, 不指定则使用内置的表数据"""

    seed: Optional[int] = Field(default=None)
    """掷骰器的随机种子, 仅用于调试"""

    command: CommandConfig = Field(default_factory=CommandConfig)
    """命令相关配置"""

    root: str = Field(default="config")
    """根目录"""


def load_config(root_dir: Union[str, Path] = "config") -> DiceConfig:
    if (path := Path.cwd().joinpath(root_dir)).exists() and path.is_dir():
        config_path = path / "config.yml"
        if config_path.exists() and config_path.is_file():
            with open(config_path, encoding="utf-8") as f:
                main_config = DiceConfig.model_validate(yaml.safe_load(f) or {})
            main_config.root = str(root_dir)
            return main_config

    logger.critical("没有有效的配置文件！")
    sys.exit()
