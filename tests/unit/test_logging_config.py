import logging

import pytest

from contacts_api.app.core.logging_config import SERVER_LOGGERS, setup_logging


@pytest.fixture
def restore_levels():
    names = ("",) + SERVER_LOGGERS
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_level_applies_to_root_and_server_loggers(restore_levels):
    assert setup_logging("warning") == logging.WARNING
    assert logging.getLogger().level == logging.WARNING
    for name in SERVER_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING


def test_unknown_level_falls_back_to_info(restore_levels):
    assert setup_logging("chatty") == logging.INFO


def test_repeated_setup_does_not_duplicate_handlers(restore_levels):
    setup_logging("INFO")
    count = len(logging.getLogger().handlers)
    setup_logging("DEBUG")
    assert len(logging.getLogger().handlers) == count
