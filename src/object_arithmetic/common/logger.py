"""Shared logger for the object_arithmetic package."""
import logging

LOGGER_NAME = "object_arithmetic"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# No handler is attached on import; applications call setup_logging()
logger: logging.Logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    """
    Configure the package logger with a single stderr handler.

    Log lines go to stderr so they never mix with data printed on stdout.
    Calling it again replaces the existing handler, so repeated setup never duplicates log lines.

    :param int level: Logging level (e.g. logging.DEBUG, logging.INFO)

    :return: The configured package logger
    :rtype: logging.Logger
    """
    logger.setLevel(level)

    if logger.hasHandlers():
        logger.handlers.clear()

    # StreamHandler defaults to sys.stderr
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    logger.addHandler(handler)

    return logger
