import logging
import sys
from typing import Optional

LOGGER_NAME = "xmlres"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logger(logfile: Optional[str] = None, *, verbose: bool = False) -> logging.Logger:
    """Configure the package logger for console and optional file output.

    Parameters
    ----------
    logfile:
        Destination file for log messages, console only when ``None``.
    verbose:
        Log INFO and above instead of WARNING and above.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT)

    # stdout carries JSON results, logs go to stderr
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    logger.addHandler(console)

    if logfile:
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
