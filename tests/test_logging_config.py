"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from metrics_lite.logging_config import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _restore_package_logger():
    logger = logging.getLogger("metrics_lite")
    handlers, level = list(logger.handlers), logger.level
    yield
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(level)


class TestSetupLogging:
    @pytest.mark.parametrize(
        "verbose,quiet,level",
        [
            (False, False, logging.WARNING),
            (True, False, logging.DEBUG),
            (False, True, logging.ERROR),
            (True, True, logging.ERROR),
        ],
    )
    def test_levels(self, verbose, quiet, level):
        logger = setup_logging(verbose=verbose, quiet=quiet)
        assert logger.name == "metrics_lite"
        assert logger.level == level

    def test_repeated_calls_replace_handlers(self):
        setup_logging()
        logger = setup_logging(verbose=True)
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)

    def test_log_file(self, tmp_path):
        log_path = tmp_path / "metrics.log"
        setup_logging(verbose=True, log_file=log_path)
        get_logger("loader").debug("Loaded 3 file records")
        text = log_path.read_text()
        assert "metrics_lite.loader - DEBUG - Loaded 3 file records" in text


class TestGetLogger:
    def test_prefixes_module_name(self):
        assert get_logger("analysis").name == "metrics_lite.analysis"

    def test_keeps_package_name(self):
        assert get_logger("metrics_lite.config").name == "metrics_lite.config"

    def test_default_is_package_logger(self):
        assert get_logger().name == "metrics_lite"
