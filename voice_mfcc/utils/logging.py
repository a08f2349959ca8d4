"""
Logging setup for extraction runs.

Library modules log through ``logging.getLogger(__name__)``, so configuring
the ``voice_mfcc`` logger here captures the resampling, framing and
filterbank messages of a run alongside the script's own.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

LOG_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logging(
    log_file: Optional[str] = None,
    verbose: bool = False,
    name: str = 'voice_mfcc'
) -> logging.Logger:
    """
    Configure the package logger for one extraction run.

    Args:
        log_file: Append a full INFO (DEBUG if verbose) log here, if given
        verbose: Echo DEBUG and up to stdout instead of WARNING and up
        name: Logger to configure

    Returns:
        The configured logger
    """
    level = logging.DEBUG if verbose else logging.INFO
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    # rich owns the console; only problems (or everything, when verbose) go to stdout
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file is not None:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger


def log_config(logger: logging.Logger, config: Dict, title: str = "CONFIGURATION"):
    """Log a flat or nested configuration dictionary."""
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
        else:
            logger.info(f"{prefix}{key}: {value}")
