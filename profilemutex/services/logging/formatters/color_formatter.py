# profilemutex/services/logging/formatters/color_formatter.py

import logging
from typing import Dict, Optional

from colorama import Fore

from profilemutex.utils.color_support import color_support


class ColorFormatter(logging.Formatter):
    """
    Formatter that colours the level name and message by severity.

    The record is restored after formatting so that other handlers (the
    plain file handler in particular) never see escape sequences.
    """

    DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
    DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

    LEVEL_COLORS: Dict[int, str] = {
        logging.DEBUG: Fore.CYAN,
        logging.INFO: Fore.GREEN,
        logging.WARNING: Fore.YELLOW,
        logging.ERROR: Fore.RED,
        logging.CRITICAL: Fore.MAGENTA,
    }

    def __init__(self, fmt: Optional[str] = None, datefmt: Optional[str] = None) -> None:
        super().__init__(fmt or self.DEFAULT_FORMAT, datefmt or self.DEFAULT_DATEFMT)

    def format(self, record: logging.LogRecord) -> str:
        orig_msg = record.msg
        orig_levelname = record.levelname
        try:
            color = self.LEVEL_COLORS.get(record.levelno)
            if color and color_support.supports_color():
                record.levelname = color_support.colored(
                    record.levelname, color, bright=record.levelno >= logging.WARNING
                )
                if isinstance(record.msg, str):
                    record.msg = color_support.colored(record.msg, color)
            return super().format(record)
        finally:
            record.msg = orig_msg
            record.levelname = orig_levelname
