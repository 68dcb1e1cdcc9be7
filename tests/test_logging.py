import logging

import satelit.config.logging as logging_module
from satelit.config.logging import LOG_FORMAT, configure_logging


def test_configure_logging_uses_settings_level(monkeypatch):
    monkeypatch.setenv("SATELIT_LOG_LEVEL", "debug")

    logger = configure_logging()

    assert logger.name == "satelit"
    assert logger.level == logging.DEBUG


def test_configure_logging_does_not_stack_handlers():
    configure_logging("warning")
    first = logging_module._handler
    logger = configure_logging("error")

    ours = [
        h
        for h in logger.handlers
        if h.formatter is not None and h.formatter._fmt == LOG_FORMAT
    ]
    assert ours == [logging_module._handler]
    assert first not in logger.handlers
    assert logger.level == logging.ERROR


def test_configure_logging_leaves_other_handlers_alone():
    logger = logging.getLogger("satelit")
    foreign = logging.NullHandler()
    logger.addHandler(foreign)
    try:
        configure_logging("info")
        configure_logging("info")
        assert foreign in logger.handlers
    finally:
        logger.removeHandler(foreign)
