"""
bladeinspector/logging_utils.py
-------------------------------
Console + file logging for the command-line entry points.
"""

import logging
from datetime import datetime

from .config import LOG_DIR, get_log_level


def setup_logging(command: str, verbose: bool = False, prefix: str = "bladeinspector") -> logging.Logger:
    """Configure logging to console and file."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H%M%S")
    log_file = LOG_DIR / f"{prefix}_{command}_{timestamp}.log"

    log_level = get_log_level(verbose)
    root_logger = logging.getLogger()
    root_logger.setLevel(min(log_level, logging.DEBUG))
    root_logger.handlers = []

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S"
    ))
    root_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    ))
    root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.debug(f"Logging to {log_file}")
    return logger
