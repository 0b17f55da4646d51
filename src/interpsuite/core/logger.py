"""
Thin wrapper around Python's ``logging`` module with two extra verbosity
levels below DEBUG for inner-loop tracing.

Usage
-----
>>> from interpsuite.core.logger import get_logger
>>> log = get_logger(__name__)
>>> log.debug("built interpolator")     # construction
>>> log.debug3("search -> 4")           # per-query detail
"""

import logging
import sys

from . import config

# ── Custom levels (below DEBUG=10) ──────────────────────────────────────
DEBUG2 = 9
DEBUG3 = 8

logging.addLevelName(DEBUG2, "DEBUG2")
logging.addLevelName(DEBUG3, "DEBUG3")

ROOT_NAME = "interpsuite"


class _InterpLogger(logging.Logger):
    """Logger subclass that adds ``debug2`` and ``debug3`` convenience methods."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)

    def debug3(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG3):
            self._log(DEBUG3, msg, args, **kwargs)


logging.setLoggerClass(_InterpLogger)

# ── Integer verbosity (0 = errors only ... 6 = everything) ──────────────
VERBOSITY_MAP = {
    0: logging.ERROR,
    1: logging.WARNING,
    2: logging.INFO,
    3: logging.DEBUG,
    4: logging.DEBUG,
    5: DEBUG2,
    6: DEBUG3,
}


def get_logger(name: str | None = None) -> _InterpLogger:
    """Return a logger under the ``interpsuite`` hierarchy.

    If *name* is a fully qualified module name (e.g.
    ``interpsuite.libinterp.spline``), the logger inherits from the
    ``interpsuite`` root logger so a single ``set_level()`` call
    controls everything.
    """
    return logging.getLogger(name or ROOT_NAME)


def set_level(level: int | str = logging.INFO) -> None:
    """Set the log level for *all* interpsuite loggers at once.

    Accepts Python level ints/names **or** verbosity integers (0-6).
    """
    if isinstance(level, int) and level in VERBOSITY_MAP:
        level = VERBOSITY_MAP[level]
    root = logging.getLogger(ROOT_NAME)
    root.setLevel(level)


def setup(level: int | str | None = None, stream=None) -> None:
    """One-time setup: attach a stderr handler with the interpsuite format.

    Without *level* the value of ``config.LOG_LEVEL`` is used.  Extra calls
    are no-ops.
    """
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-7s: %(message)s"))
    root.addHandler(handler)
    set_level(config.LOG_LEVEL if level is None else level)
