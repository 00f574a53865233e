import logging

from mockbanker.utils.logging import ROOT_LOGGER_NAME, configure_logging, get_logger


def test_get_logger_namespacing() -> None:
    assert get_logger("mockbanker.api").name == "mockbanker.api"
    assert get_logger("custom").name == "mockbanker.custom"


def test_configure_logging_idempotent() -> None:
    logger = configure_logging("DEBUG")
    handlers = [h for h in logger.handlers if getattr(h, "_mockbanker", False)]
    configure_logging("WARNING")
    again = [h for h in logger.handlers if getattr(h, "_mockbanker", False)]
    assert len(handlers) == len(again) == 1
    assert logging.getLogger(ROOT_LOGGER_NAME).level == logging.WARNING
