from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from loguru import logger

from .exceptions import TranslationMissing

DEFAULT_LOCALE = "ja_jp"
LOCALE_DIR = Path(__file__).parent / "locales"


@lru_cache(maxsize=None)
def _load_locale(directory: Path, locale: str) -> dict:
    path = directory / f"{locale}.yml"
    if not path.exists():
        logger.warning(f"找不到语言文件: {path}")
        return {}
    with path.open("r", encoding="utf-8") as f_obj:
        return yaml.safe_load(f_obj) or {}


class I18n:
    """按点分路径读取语言文件中的表数据, 缺失时回退到默认语言"""

    def __init__(self, locale: str = DEFAULT_LOCALE, directory: Optional[Union[str, Path]] = None):
        self.locale = locale
        self.directory = Path(directory) if directory else LOCALE_DIR

    def _lookup(self, locale: str, key: str) -> Any:
        node: Any = _load_locale(self.directory, locale)
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                raise TranslationMissing(key, locale)
            node = node[part]
        return node

    def translate(self, key: str) -> Any:
        try:
            return self._lookup(self.locale, key)
        except TranslationMissing:
            if self.locale == DEFAULT_LOCALE:
                raise
            logger.warning(f"{self.locale} 缺少 {key}, 使用 {DEFAULT_LOCALE}")
            return I18n(DEFAULT_LOCALE, self.directory)._lookup(DEFAULT_LOCALE, key)

    def translate_with_hash_merge(self, key: str) -> dict:
        """值为多个映射组成的列表时, 合并为一个映射"""
        value = self.translate(key)
        if isinstance(value, dict):
            return value
        merged = {}
        for part in value:
            merged.update(part)
        return merged

    @staticmethod
    def clear_cache():
        _load_locale.cache_clear()
