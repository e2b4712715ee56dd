from utils.pattern import Singleton
import logging
from datetime import datetime
import os

LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARN,
    "error": logging.ERROR,
    "fatal": logging.FATAL,
}

class ScreenFormatter(logging.Formatter):
    GREY = "\x1b[38;20m"
    BLUE = "\x1b[34;20m"
    YELLOW = "\x1b[33;20m"
    GREEN = "\x1b[32;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"

    TEMPLATE = f"{GREEN}%(asctime)s{RESET} - ""{0}%(levelname)s"\
        f"{RESET} [%(module)s:%(lineno)d - %(funcName)s()] -> "\
        "{0}%(message)s"f"{RESET}"

    COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: BLUE,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, self.GREY)
        return logging.Formatter(self.TEMPLATE.format(color)).format(record)

class FileFormatter(logging.Formatter):
    FORMAT = "[%(asctime)s (%(module)s:%(lineno)d - %(funcName)s())] %(levelname)s -> %(message)s"

    def __init__(self) -> None:
        super().__init__(self.FORMAT)

class Logger(logging.Logger, metaclass=Singleton):
    """
    Process-wide logger, configured by whoever creates it first
    (normally main.py, from config.yaml).
    """

    def __init__(self, level: str = 'info', to_screen: bool = True,
                 to_file: bool = False, log_dir: str = 'Logs') -> None:
        """
        level: debug, info, warn, error, fatal
        log_dir: directory for the daily log files, default is 'Logs'
        """
        super().__init__("widgets")
        if level not in LEVELS:
            raise ValueError(f"Unknown log level {level!r}, expected one of: {', '.join(LEVELS)}")
        lvl_val = LEVELS[level]
        self.setLevel(lvl_val)

        if to_screen:
            h = logging.StreamHandler()
            h.setLevel(lvl_val)
            h.setFormatter(ScreenFormatter())
            self.addHandler(h)

        if to_file:
            os.makedirs(log_dir, exist_ok=True)
            log_filename = os.path.join(log_dir, f"log_{datetime.now().strftime('%Y-%m-%d')}.log")

            h = logging.FileHandler(log_filename, encoding="utf-8")
            h.setLevel(lvl_val)
            h.setFormatter(FileFormatter())
            self.addHandler(h)
