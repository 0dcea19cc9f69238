import sys

from arclet.alconna import Alconna, Args, CommandMeta, MultiVar, Option, OptionResult
from loguru import logger

from app.config import load_config
from app.core import DiceService
from app.logger import setup_logger

cli = Alconna(
    Args["commands", MultiVar(str, "*")],
    Option(
        "--root-dir|-D",
        Args["dir", str],
        dest="root",
        help_text="配置文件根目录",
        default=OptionResult(args={"dir": "config"}),
    ),
    Option("--locale|-L", Args["name", str], help_text="表数据使用的语言, 覆盖配置文件"),
    meta=CommandMeta("ログ・ホライズンTRPG 掷骰的命令行工具", example="python main.py 3LH>=8 CTRS2", hide=True),
)
arp = cli()
if not arp.matched:
    exit()

config = load_config(root_dir=arp.query[str]("root.dir"))
if locale := arp.query[str]("locale.name"):
    config.locale = locale
setup_logger(config.log_level, config.log_dir)

service = DiceService(config)
commands = arp.main_args.get("commands", ())
try:
    for text in commands or sys.stdin:
        if result := service.handle(text):
            print(result)
except KeyboardInterrupt:
    logger.info("已退出")
