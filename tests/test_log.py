"""Tests for package logging setup."""

import io
import logging

import pytest

from sparse_polynomial import Polynomial
from sparse_polynomial.log import PACKAGE_LOGGER, setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging()."""

    def test_scoped_to_package_logger(self, package_logger):
        root_handlers = list(logging.getLogger().handlers)
        logger = setup_logging("DEBUG", stream=io.StringIO())
        assert logger is package_logger
        assert logger.level == logging.DEBUG
        assert logging.getLogger().handlers == root_handlers

    def test_debug_records_reach_stream(self, package_logger):
        stream = io.StringIO()
        setup_logging("DEBUG", format_string="%(name)s: %(message)s", stream=stream)
        Polynomial((1, 1)) * Polynomial((1, 1))
        assert "sparse_polynomial.arithmetic: multiply: 1 * 1 terms -> 1 terms" in stream.getvalue()

    def test_level_filters(self, package_logger):
        stream = io.StringIO()
        setup_logging("WARNING", stream=stream)
        Polynomial((1, 1)) + Polynomial((1, 1))
        assert stream.getvalue() == ""

    def test_repeated_setup_does_not_stack(self, package_logger):
        before = len(package_logger.handlers)
        setup_logging(stream=io.StringIO())
        setup_logging(stream=io.StringIO())
        assert len(package_logger.handlers) == before + 1
