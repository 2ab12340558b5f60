"""
Logging setup for the API server and maintenance scripts.

Everything logs to stdout; the API also writes a rotating file under logs/.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# HTTP and SQL chatter stays at WARNING unless a caller asks otherwise
QUIET_LOGGERS = ('urllib3', 'sqlalchemy.engine', 'uvicorn.access')


def setup_logging(
    log_file: Optional[str] = None,
    level: str = "INFO",
    log_dir: str = "logs",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    quiet_loggers: Iterable[str] = QUIET_LOGGERS
) -> None:
    """
    Configure the root logger.

    Args:
        log_file: File name under ``log_dir`` (None logs to console only)
        level: Logging level name ('DEBUG', 'INFO', 'WARNING', 'ERROR')
        log_dir: Directory for log files
        max_bytes: Size at which the file log rotates
        backup_count: Rotated files to keep
        quiet_loggers: Logger names capped at WARNING
    """
    numeric_level = getattr(logging, level.upper())
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_path / log_file,
            maxBytes=max_bytes,
            backupCount=backup_count
        ))

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)
    root_logger.handlers.clear()
    for handler in handlers:
        handler.setLevel(numeric_level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in quiet_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_file:
        root_logger.info(f"Logging to file: {Path(log_dir) / log_file}")


def configure_script_logging(debug: bool = False):
    """Console-only logging for scripts under scripts/."""
    setup_logging(level="DEBUG" if debug else "INFO")
