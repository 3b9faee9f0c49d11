from __future__ import annotations

"""
Logging Settings.

The CLI chooses the level, whether to echo to the terminal and an optional
log file. Formats and rotation limits are fixed for this tool.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

_LEVEL_MAP: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Progress lines go to stderr bare; the file keeps the origin of each line
CONSOLE_FORMAT = "%(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 2


@dataclass(frozen=True)
class LoggingConfig:
    """
    Options for configure_logging().

    Attributes:
        level: Name of the minimum level ('DEBUG', 'INFO', ...).
        console: Echo records to stderr.
        log_file: Also append records to this rotating file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None
