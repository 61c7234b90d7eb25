"""
bladeinspector/config.py
------------------------
Shared configuration for all bladeinspector modules.

Loads settings from environment variables with sensible defaults.
"""
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# Load .env file if it exists
from dotenv import load_dotenv
load_dotenv()

# Project root (parent of this file's directory)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Working data (migration reports, calibrated annotation exports)
DATA_DIR = Path(os.getenv("BLADEINSPECTOR_DATA_DIR", PROJECT_ROOT / "data"))

# Log directory
LOG_DIR = Path(os.getenv("BLADEINSPECTOR_LOG_DIR", PROJECT_ROOT / "logs"))

# Console log level for the CLIs ("DEBUG", "INFO", ...)
LOG_LEVEL = os.getenv("BLADEINSPECTOR_LOG_LEVEL", "INFO").upper()


def get_log_level(verbose: bool = False) -> int:
    """
    Resolve the console log level.

    --verbose always wins; otherwise BLADEINSPECTOR_LOG_LEVEL is used,
    falling back to INFO when it names no known level.
    """
    if verbose:
        return logging.DEBUG

    level = logging.getLevelName(LOG_LEVEL)
    if isinstance(level, int):
        return level

    logger.debug(f"Unknown BLADEINSPECTOR_LOG_LEVEL {LOG_LEVEL!r}, using INFO")
    return logging.INFO
