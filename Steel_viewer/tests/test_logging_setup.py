import logging

from steel_viewer import config
from steel_viewer.logging_setup import configure_logging


def test_explicit_level_applies_to_package_logger():
    configure_logging("DEBUG")
    assert logging.getLogger("steel_viewer").level == logging.DEBUG


def test_default_level_comes_from_config():
    configure_logging()
    assert logging.getLogger("steel_viewer").level == logging.getLevelName(config.LOG_LEVEL)
