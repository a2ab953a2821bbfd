"""
Logging Configuration
Sets up the package logger for applications embedding rotorlab.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, Union

from .config import load_settings


def setup_logging(level: Union[int, str, None] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the 'rotorlab' logger.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO"). Defaults to the
            ROTORLAB_LOG_LEVEL setting.
        log_file: Optional path to also write logs to. Defaults to the
            ROTORLAB_LOG_FILE setting.
    """
    settings = load_settings()
    if level is None:
        level = settings.log_level
    if log_file is None:
        log_file = settings.log_file

    logger = logging.getLogger("rotorlab")
    logger.setLevel(level)

    # Avoid duplicate handlers when called more than once
    if logger.hasHandlers():
        logger.handlers.clear()

    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("Logging initialized.")
    return logger
