import logging
import sys
from pathlib import Path
from types import TracebackType
from typing import Optional

from loguru import logger

info_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.S}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan> - <level>{message}</level>"
)
debug_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSSS}</green> | <level>{level: <9}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level> "
)


class LoguruHandler(logging.Handler):
    def emit(self, record):
        # Get corresponding Loguru level if it exists.
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


loguru_handler = LoguruHandler()


def loguru_exc_callback(cls: type, val: BaseException, tb: Optional[TracebackType], *_, **__):
    """loguru 异常回调

    Args:
        cls (Type[Exception]): 异常类
        val (Exception): 异常的实际值
        tb (TracebackType): 回溯消息
    """
    if not issubclass(cls, KeyboardInterrupt):
        logger.opt(exception=(cls, val, tb)).error("Exception:")


def setup_logger(level="INFO", log_dir="logs"):
    logging.basicConfig(handlers=[loguru_handler], level=level.upper(), force=True)
    for name in logging.root.manager.loggerDict:
        _logger = logging.getLogger(name)
        for handler in _logger.handlers:
            if isinstance(handler, logging.StreamHandler):
                _logger.removeHandler(handler)
    sys.excepthook = loguru_exc_callback
    log_format = debug_format if level.upper() == "DEBUG" else info_format
    logger.remove()
    logger.add(
        Path(log_dir) / "latest.log",
        format=log_format,
        level=level.upper(),
        enqueue=False,
        rotation="00:00",
        compression="zip",
        encoding="utf-8",
        backtrace=True,
        diagnose=True,
        colorize=False,
    )
    logger.add(sys.stderr, level=level.upper(), format=log_format, backtrace=True, diagnose=True, colorize=True)
