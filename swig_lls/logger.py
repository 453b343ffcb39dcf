"""
Run log for swig-lls.

Each run writes swig_lls.log in the current working directory. A log left by
an earlier run is renamed with its timestamp first. If the directory cannot
be written, log records are discarded and the run carries on.
"""

import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional


class LogLevel(Enum):
    DEBUG = "DEBUG"
    RELEASE = "RELEASE"


# RELEASE keeps warnings only
CURRENT_LOG_LEVEL = LogLevel.DEBUG

LOG_NAME = "swig_lls"
LOG_FILENAME = "swig_lls.log"
LOG_FORMAT = '[%(asctime)s] [%(levelname)-8s] [%(module)s:%(funcName)s:%(lineno)d] %(message)s'

_logger: Optional[logging.Logger] = None


def log_path() -> Path:
    return Path.cwd() / LOG_FILENAME


def _open_handler(path: Path) -> logging.Handler:
    if path.exists():
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        try:
            path.rename(path.with_name(f"{path.stem}_{stamp}{path.suffix}"))
        except OSError:
            pass  # opened with mode 'w' below, so the old log is overwritten instead

    try:
        handler = logging.FileHandler(path, mode='w', encoding='utf-8')
    except OSError:
        return logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt='%Y-%m-%d %H:%M:%S'))
    return handler


def get_logger() -> logging.Logger:
    """The swig_lls logger, opening its file on first use."""
    global _logger
    if _logger is not None:
        return _logger

    path = log_path()
    handler = _open_handler(path)
    handler.setLevel(logging.DEBUG if CURRENT_LOG_LEVEL == LogLevel.DEBUG else logging.WARNING)

    _logger = logging.getLogger(LOG_NAME)
    _logger.setLevel(logging.DEBUG)
    _logger.handlers.clear()
    _logger.addHandler(handler)
    _logger.info(f"swig-lls log started ({CURRENT_LOG_LEVEL.value}) at {path}")
    return _logger


def debug(msg: str, *args, **kwargs):
    get_logger().debug(msg, *args, **kwargs)


def info(msg: str, *args, **kwargs):
    get_logger().info(msg, *args, **kwargs)


def warning(msg: str, *args, **kwargs):
    get_logger().warning(msg, *args, **kwargs)
