#!/usr/bin/env python3

"""
party_logging.py - Logging setup for the gen3party command line.

The library modules only create named loggers under "gen3party"; handlers
are attached here, once, by the entry point.
"""

import logging
import os
import sys
from datetime import datetime

from . import config

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Marks handlers installed by setup_logging so a second call can replace them
_HANDLER_TAG = "_gen3party_handler"


def _tag(handler):
    setattr(handler, _HANDLER_TAG, True)
    return handler


def setup_logging(log_dir=None, verbose=False, version=None):
    """
    Set up logging to a file and the console.

    Creates gen3party.log in log_dir, overwriting the previous session.
    The console only shows warnings unless verbose is set.
    Idempotent: safe to call multiple times.

    Returns:
        str: Path of the log file, or "" if it could not be created
    """
    log_dir = log_dir or config.LOG_DIR
    log_file = os.path.join(log_dir, config.LOG_FILE_NAME)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)

    logger = logging.getLogger("gen3party")
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            logger.removeHandler(handler)
            handler.close()

    console = _tag(logging.StreamHandler(sys.stderr))
    console.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console.setFormatter(formatter)
    logger.addHandler(console)

    # File handler - overwrites each session (no rotation)
    try:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = _tag(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    except OSError as e:
        logger.warning(f"Could not create log file: {e}")
        log_file = ""
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info("=" * 60)
    if version:
        logger.info(f"gen3party {version}")
    logger.info(f"Starting - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    logger.info(f"Log file: {log_file}")
    logger.info(f"Python: {sys.version}")
    logger.info(f"Platform: {sys.platform}")
    logger.info("=" * 60)

    return log_file
