import logging
import os
from logging.handlers import RotatingFileHandler
from typing import List

from rich.console import Console
from rich.logging import RichHandler

# 格式模板
LOG_FORMAT = "[%(levelname)s] | %(filename)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# 获取命名 logger
main_logger = logging.getLogger("main")
loader_logger = logging.getLogger("loader")


def setup_logging(level: str = "INFO") -> None:
    """Configure rich console output plus a rotating log file."""
    from gmaps_static.config import settings

    console = Console(stderr=True)
    handlers: List[logging.Handler] = [
        RichHandler(
            show_time=True,
            show_level=True,
            show_path=False,  # 关闭 file:// 路径
            console=console,
        )
    ]

    if settings.LOG_TO_FILE:
        os.makedirs(settings.LOG_DIR, exist_ok=True)
        handlers.append(
            RotatingFileHandler(
                os.path.join(settings.LOG_DIR, settings.LOG_FILE),
                maxBytes=5 * 1024 * 1024,  # 每个文件最大 5MB
                backupCount=5,
                encoding="utf-8",
            )
        )

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        handlers=handlers,
        force=True,
    )
