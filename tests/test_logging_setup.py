"""Testes da configuração de logging."""

import logging

import pytest

from flight_matcher.infrastructure.logging_setup import LOG_FORMAT, configure_logging


@pytest.fixture
def restore_package_logger():
    logger = logging.getLogger("flight_matcher")
    saved_handlers, saved_level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)


class TestConfigureLogging:
    """Testes de configure_logging."""

    def test_sets_level_and_single_handler(self, restore_package_logger) -> None:
        logger = configure_logging("debug")

        assert logger is restore_package_logger
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        assert logger.handlers[0].formatter._fmt == LOG_FORMAT

    def test_idempotent(self, restore_package_logger) -> None:
        configure_logging("INFO")
        logger = configure_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
