"""Logging setup for applications embedding translatable models."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

# Loggers this package writes to, and the drivers underneath it
LOG_LEVELS = {
    "translatable": logging.INFO,
    "sqlalchemy.engine": logging.WARNING,
    "aiosqlite": logging.WARNING,
}

CONSOLE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s - %(message)s"
FILE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s (%(filename)s:%(lineno)d) - %(message)s"


class ColoredFormatter(logging.Formatter):
    """Console formatter that tints the level name."""

    COLORS = {
        logging.DEBUG: "\033[36m",
        logging.INFO: "\033[32m",
        logging.WARNING: "\033[33m",
        logging.ERROR: "\033[31m",
        logging.CRITICAL: "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno)
        if color is None:
            return super().format(record)
        # Tint a copy so other handlers see the plain record
        tinted = logging.makeLogRecord(record.__dict__)
        tinted.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(tinted)


def setup_logging(debug: bool = False, log_path: Optional[Path] = None) -> None:
    """Route logs to stdout and, when ``log_path`` is given, a rotating file."""
    level = logging.DEBUG if debug else logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(ColoredFormatter(CONSOLE_FORMAT, datefmt="%H:%M:%S"))
    root.addHandler(console)

    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root.addHandler(file_handler)

    for name, default in LOG_LEVELS.items():
        logging.getLogger(name).setLevel(logging.DEBUG if debug and name == "translatable" else default)

    logging.getLogger(__name__).debug("Logging configured (debug=%s, file=%s)", debug, log_path)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
