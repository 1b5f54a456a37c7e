from __future__ import annotations

"""
Logging Configuration Models.

The CLI chooses the level, the console stream and an optional log file.
Record layouts are fixed for the whole package.
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

# Record layouts
CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
FILE_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    Options for one `configure_logging` call.

    Attributes:
        level: Minimum severity name ('DEBUG' under --debug).
        console: Send records to stderr.
        log_file: Rotating log file requested with --log-file.
        max_bytes: Size at which the log file rotates.
        backup_count: Rotated files kept next to the log file.
    """
    level: str = "INFO"
    console: bool = True
    log_file: Optional[str] = None

    max_bytes: int = 1024 * 1024
    backup_count: int = 2
