"""Core utilities for interpsuite: search and solver kernels, errors, logging."""

# Import modules themselves (allows: from interpsuite.core import search)
from . import config
from . import errors
from . import logger
from . import search
from . import tridiagonal

__all__ = [
    "config",
    "errors",
    "logger",
    "search",
    "tridiagonal",
]
