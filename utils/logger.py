"""
Logging setup shared by the API, the service layer and the scripts.

Every module asks for a named logger with ``setup_logger(__name__)``-style
names ("catalog.routes", "catalog.services", ...). Console output is always
on; rotating files are written only when ``LOG_DIR`` is configured.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

import config

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(name: str = "catalog", log_level: Optional[str] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Sets up a logger with a console handler and, when ``LOG_DIR`` is set,
    rotating file handlers.

    Args:
        name (str): The name of the logger.
        log_level (str): Level name; defaults to ``LOG_LEVEL`` from config.
        log_file (str): Optional log filename (without path). Defaults to "{name}.log".

    Returns:
        logging.Logger: The configured logger instance.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level or config.LOG_LEVEL)

    # Avoid duplicate handlers when a module is imported twice
    if logger.handlers:
        return logger

    formatter = logging.Formatter(FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if config.LOG_DIR:
        os.makedirs(config.LOG_DIR, exist_ok=True)
        log_file = log_file or f"{name}.log"
        app_log_file = os.path.join(config.LOG_DIR, log_file)
        error_log_file = os.path.join(config.LOG_DIR, f"{os.path.splitext(log_file)[0]}_error.log")

        file_handler = RotatingFileHandler(
            app_log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        error_file_handler = RotatingFileHandler(
            error_log_file, maxBytes=10 * 1024 * 1024, backupCount=5, encoding="utf-8"
        )
        error_file_handler.setFormatter(formatter)
        error_file_handler.setLevel(logging.ERROR)
        logger.addHandler(error_file_handler)

    # Records stop here instead of also reaching the root logger
    logger.propagate = False
    return logger
