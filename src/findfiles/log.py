from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%dT%H:%M:%S"
_HANDLER_NAME = "findfiles-console"


def level_for_verbosity(verbosity: int) -> int:
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int) -> None:
    """
    Attach a stderr handler to the package logger at the level the -v count asks for.

    Safe to call more than once; the previous handler is replaced.
    """
    level = level_for_verbosity(verbosity)
    pkg_logger = logging.getLogger("findfiles")
    pkg_logger.setLevel(level)
    for handler in list(pkg_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            pkg_logger.removeHandler(handler)
            handler.close()

    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    pkg_logger.addHandler(handler)

    # urllib3 logs every connection at DEBUG
    logging.getLogger("urllib3").setLevel(logging.DEBUG if verbosity >= 2 else logging.WARNING)
