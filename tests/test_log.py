import logging

from src.utils.log import get_logger


def test_get_logger_single_handler_and_level():
    log = get_logger("sha1text-test", level="DEBUG")
    assert log.level == logging.DEBUG
    assert not log.propagate
    again = get_logger("sha1text-test", level="error")
    assert again is log
    assert len(log.handlers) == 1
    assert log.level == logging.ERROR


def test_get_logger_unknown_level_means_warning():
    log = get_logger("sha1text-test-unknown", level="chatty")
    assert log.level == logging.WARNING
