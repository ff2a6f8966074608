import io
import logging

import pytest

from reverse_geocoder import logging_config


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_setup_logging_installs_one_handler(root_logger):
    stream = io.StringIO()
    first = logging_config.setup_logging("debug", stream=stream)
    second = logging_config.setup_logging("ERROR")

    assert first is second
    assert root_logger.level == logging.DEBUG
    assert root_logger.handlers.count(first) == 1


def test_existing_handlers_are_kept(root_logger):
    existing = logging.NullHandler()
    root_logger.addHandler(existing)

    logging_config.setup_logging("INFO", stream=io.StringIO())

    assert existing in root_logger.handlers


def test_records_use_the_configured_format(root_logger):
    stream = io.StringIO()
    logging_config.setup_logging("INFO", stream=stream)

    logging_config.get_logger("reverse_geocoder.loader").info("Loaded 3 addresses")

    assert " - reverse_geocoder.loader - INFO - Loaded 3 addresses" in stream.getvalue()


def test_unknown_level_falls_back_to_info(root_logger):
    logging_config.setup_logging("chatty", stream=io.StringIO())
    assert root_logger.level == logging.INFO


def test_get_logger_returns_named_logger():
    assert logging_config.get_logger("reverse_geocoder.engine").name == "reverse_geocoder.engine"
