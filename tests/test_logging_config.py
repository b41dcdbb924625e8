import logging
import warnings

import pytest

from meshingest.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("meshingest")
    warnings_logger = logging.getLogger("py.warnings")
    saved_level, saved_handlers = logger.level, list(logger.handlers)
    saved_warning_handlers = list(warnings_logger.handlers)
    yield logger
    for handler in logger.handlers:
        handler.close()
    logger.handlers[:] = saved_handlers
    logger.setLevel(saved_level)
    warnings_logger.handlers[:] = saved_warning_handlers
    logging.captureWarnings(False)


def test_repeated_setup_does_not_duplicate_handlers(package_logger):
    setup_logging(logging.DEBUG)
    setup_logging(logging.DEBUG)

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.DEBUG


def test_level_accepts_names(package_logger):
    assert setup_logging("debug") is package_logger
    assert package_logger.level == logging.DEBUG


def test_unknown_level_name_rejected(package_logger):
    with pytest.raises(ValueError):
        setup_logging("chatty")


def test_log_file_receives_records(package_logger, tmp_path):
    log_file = tmp_path / "ingest.log"
    setup_logging(logging.INFO, log_file=str(log_file))

    logging.getLogger("meshingest.readers.obj").info("parsed something")
    for handler in package_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized at INFO." in text
    assert "meshingest.readers.obj - INFO - parsed something" in text


def test_captured_warnings_reach_log_file(package_logger, tmp_path):
    log_file = tmp_path / "ingest.log"
    setup_logging(logging.INFO, log_file=str(log_file), capture_warnings=True)

    with warnings.catch_warnings():
        warnings.simplefilter("always")
        warnings.warn("invalid value encountered in subtract", RuntimeWarning)
    for handler in package_logger.handlers:
        handler.flush()

    assert "invalid value encountered in subtract" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_detaches_warning_handlers(package_logger):
    setup_logging(capture_warnings=True)
    attached = list(package_logger.handlers)
    setup_logging()

    warnings_handlers = logging.getLogger("py.warnings").handlers
    assert not any(handler in warnings_handlers for handler in attached)


def test_setup_logging_exported_from_package_root():
    import meshingest

    assert meshingest.setup_logging is setup_logging
