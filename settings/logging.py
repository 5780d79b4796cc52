"""Logging configuration - loguru sinks plus stdlib forwarding."""

import logging
import sys

from loguru import logger

from settings import LOG_DIR, LOG_LEVEL, LOG_RETENTION

CONSOLE_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <7}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {name}:{function}:{line} | {message}"

# Chatty stdlib loggers of the HTTP stack
FORWARDED_LOGGERS = ("httpx", "httpcore")


class _ToLoguru(logging.Handler):
    """Forwards stdlib records (httpx, httpcore) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        logger.opt(depth=6, exception=record.exc_info).log(level, record.getMessage())


def setup_logging(level: str = LOG_LEVEL, to_file: bool = True):
    """Console sink, optional daily file sink in LOG_DIR, stdlib HTTP logs forwarded."""
    logger.remove()
    logger.add(sys.stderr, format=CONSOLE_FORMAT, level=level, colorize=True)

    if to_file:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        logger.add(
            LOG_DIR / "caprop_{time:YYYY-MM-DD}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="00:00",
            retention=LOG_RETENTION,
            compression="gz",
        )
        logger.info("Logging to {}", LOG_DIR)

    for name in FORWARDED_LOGGERS:
        std = logging.getLogger(name)
        std.handlers = [_ToLoguru()]
        std.setLevel(logging.WARNING)
        std.propagate = False

    return logger
