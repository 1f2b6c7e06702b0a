"""
Logging setup for the transform scripts.

Library modules under ``src.fft_core`` log through ``logging.getLogger(__name__)``
and only at DEBUG level; scripts attach handlers to the ``src`` logger so those
records end up in the run's log file.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    name: str = 'src',
    log_file: Optional[str] = None,
    level: int = logging.INFO
) -> logging.Logger:
    """
    Configure the package logger for a script run.

    Warnings go to stdout (results are printed with rich); with ``log_file``
    every record at ``level`` or above is appended to that file too. Calling
    it again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers = [logging.StreamHandler(sys.stdout)]
    handlers[0].setLevel(logging.WARNING)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def log_config(logger: logging.Logger, config: Dict, title: str = "CONFIGURATION"):
    """Log a (nested) configuration dictionary, one key per line."""
    logger.info("=" * 60)
    logger.info(title)
    logger.info("=" * 60)
    _log_dict(logger, config, indent=2)
    logger.info("=" * 60)


def _log_dict(logger: logging.Logger, d: Dict, indent: int = 0):
    prefix = " " * indent
    for key, value in d.items():
        if isinstance(value, dict):
            logger.info(f"{prefix}{key}:")
            _log_dict(logger, value, indent + 2)
        elif isinstance(value, float):
            logger.info(f"{prefix}{key}: {value:.4f}")
        else:
            logger.info(f"{prefix}{key}: {value}")
