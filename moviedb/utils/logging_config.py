"""
Logging configuration for the movies service.

The API logs to stdout and to a rotating file under logs/; maintenance
scripts log to stdout only.
"""

import logging
import sys
from pathlib import Path
from logging.handlers import RotatingFileHandler
from typing import List, Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'

# Loggers that are too chatty at INFO for a request log
QUIET_LOGGERS = ('httpx', 'multipart', 'uvicorn.access')


def _handlers(log_file: Optional[Path]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(log_file, maxBytes=10 * 1024 * 1024, backupCount=5))
    return handlers


def _configure(level: str, log_file: Optional[Path] = None) -> None:
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level.upper())

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _handlers(log_file):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    if log_file is not None:
        root_logger.info("Logging to file: %s", log_file)


def configure_api_logging(level: str = "INFO", debug: bool = False, log_dir: str = "logs"):
    """
    Configure logging for the API server.

    Args:
        level: Logging level used unless debug is set
        debug: Enable debug logging (default: False)
        log_dir: Directory for api.log (default: 'logs')
    """
    _configure("DEBUG" if debug else level, Path(log_dir) / "api.log")


def configure_script_logging(debug: bool = False):
    """Configure console-only logging for maintenance scripts."""
    _configure("DEBUG" if debug else "INFO")
