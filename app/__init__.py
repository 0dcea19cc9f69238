from .config import CommandConfig, DiceConfig, load_config
from .core import DiceService
from .logger import setup_logger
