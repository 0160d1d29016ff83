"""Logging setup for experiments and applications using max_tree."""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None,
                  search_level: Optional[int] = None):
    """Setup logging configuration.

    Args:
        level: Logging level
        log_file: Optional log file path
        search_level: Separate level for the max_tree loggers
            (e.g. logging.DEBUG to trace every expansion)
    """
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=handlers
    )
    if search_level is not None:
        logging.getLogger("max_tree").setLevel(search_level)
