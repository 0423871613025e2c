# Logging helpers shared by the core and the command line.
from __future__ import annotations

import logging
import sys

_ROOT = "colkit"
_FORMAT = "%(levelname)s: %(message)s"
_DEBUG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def configure(quiet: bool = False, debug: bool = False, log_file: str | None = None) -> logging.Logger:
    """Attach a stderr handler (and optionally a file handler) to the colkit logger.

    Calling it again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(_ROOT)
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()

    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logger.setLevel(level)

    fmt = logging.Formatter(_DEBUG_FORMAT if debug else _FORMAT)
    stream = logging.StreamHandler(sys.stderr)
    stream.setFormatter(fmt)
    logger.addHandler(stream)

    if log_file:
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(logging.Formatter("%(asctime)s " + _DEBUG_FORMAT))
        logger.addHandler(fh)

    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    if not name:
        return logging.getLogger(_ROOT)
    if name == _ROOT or name.startswith(_ROOT + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT}.{name}")
