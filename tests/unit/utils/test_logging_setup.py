"""Test logging setup."""

import logging
from max_tree.utils.logging import setup_logging


def test_search_level_applies_to_package_loggers():
    package_logger = logging.getLogger("max_tree")
    try:
        setup_logging(search_level=logging.DEBUG)
        assert package_logger.level == logging.DEBUG
        assert logging.getLogger("max_tree.search.full").getEffectiveLevel() == logging.DEBUG
    finally:
        package_logger.setLevel(logging.NOTSET)


def test_package_logger_untouched_by_default():
    setup_logging()
    assert logging.getLogger("max_tree").level == logging.NOTSET
