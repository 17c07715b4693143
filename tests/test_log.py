import importlib
import logging
import warnings

from rich.logging import RichHandler

import quickopen.log
from quickopen.log import get_logger, setup_logging


def test_setup_logging_installs_rich_handler_on_package_logger() -> None:
    package_logger = logging.getLogger("quickopen")
    try:
        setup_logging("debug")

        assert package_logger.level == logging.DEBUG
        assert package_logger.propagate is False
        assert len(package_logger.handlers) == 1
        assert isinstance(package_logger.handlers[0], RichHandler)

        setup_logging("not-a-level")
        assert package_logger.level == logging.WARNING
    finally:
        package_logger.handlers.clear()
        package_logger.setLevel(logging.NOTSET)
        package_logger.propagate = True


def test_get_logger_renders_key_values_through_stdlib(caplog) -> None:
    logger = get_logger("tests.quickopen_log")

    with caplog.at_level(logging.DEBUG, logger="tests.quickopen_log"):
        logger.debug("Query parsed", tokens=["gd"], case_sensitive=False)

    assert len(caplog.records) == 1
    message = caplog.records[0].getMessage()
    assert message.startswith("Query parsed")
    assert "tokens=['gd']" in message
    assert "case_sensitive=False" in message


def test_get_logger_respects_stdlib_level(caplog) -> None:
    logger = get_logger("tests.quickopen_log_quiet")

    with caplog.at_level(logging.INFO, logger="tests.quickopen_log_quiet"):
        logger.debug("hidden")
        logger.info("shown")

    assert [record.getMessage().strip() for record in caplog.records] == ["shown"]


def test_processors_build_without_deprecation_warnings() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        importlib.reload(quickopen.log)
