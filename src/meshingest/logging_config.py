"""
Logging Configuration
Sets up the package logger for mesh ingestion.

Lenient parsing turns bad numeric tokens into NaN, and numpy reports the
resulting arithmetic as RuntimeWarnings rather than log records. With
capture_warnings=True those warnings are written to the same handlers as the
parser messages.
"""
import logging
import sys
from typing import Optional, Union

PACKAGE_LOGGER = "meshingest"
WARNINGS_LOGGER = "py.warnings"


def _resolve_level(level: Union[int, str]) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level!r}")
    return resolved


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[str] = None,
    capture_warnings: bool = False,
) -> logging.Logger:
    """
    Configures the logger for the 'meshingest' namespace.

    Library modules only create child loggers (logging.getLogger(__name__)),
    so nothing is printed until the host application calls this function.

    Args:
        level: Logging level, as a number (logging.DEBUG) or a name ("debug").
        log_file: Optional path to save logs to a file.
        capture_warnings: Also route warnings.warn() output (e.g. numpy
            RuntimeWarnings from NaN coordinates) through the same handlers.

    Returns:
        The configured package logger.
    """
    level = _resolve_level(level)
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # Avoid duplicate records when called more than once
    previous = list(logger.handlers)
    logger.handlers.clear()

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    warnings_logger = logging.getLogger(WARNINGS_LOGGER)
    for handler in previous:
        warnings_logger.removeHandler(handler)
    logging.captureWarnings(capture_warnings)
    if capture_warnings:
        for handler in handlers:
            warnings_logger.addHandler(handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
