import logging
import uuid
from keyset.logger.logger import logger, setup_logger


def stdout_handlers(log):
    # Test runners may attach their own capture handlers, only count ours
    return [h for h in log.handlers if type(h) is logging.StreamHandler]


def test_default_logger():
    assert logger.name == "keyset"
    assert logger.propagate is False
    assert len(stdout_handlers(logger)) == 1


def test_setup_logger_configures_once():
    name = f"keyset-test-{uuid.uuid4().hex}"

    first = setup_logger(name=name, level="debug")
    second = setup_logger(name=name, level="error")

    assert first is second
    assert len(stdout_handlers(first)) == 1
    # Second call does not reconfigure
    assert first.level == logging.DEBUG


def test_setup_logger_ignores_foreign_handlers():
    name = f"keyset-test-{uuid.uuid4().hex}"
    log = logging.getLogger(name)
    log.addHandler(logging.NullHandler())

    setup_logger(name=name, level="INFO")

    assert len(stdout_handlers(log)) == 1
    assert log.propagate is False


def test_setup_logger_custom_format():
    name = f"keyset-test-{uuid.uuid4().hex}"
    log = setup_logger(name=name, level="INFO", format_string="%(message)s")

    assert stdout_handlers(log)[0].formatter._fmt == "%(message)s"
