"""
Run-time settings for interpsuite.

Values are read from the environment once, at import, and may be changed
afterwards with the setter functions below.

    INTERPSUITE_CHECK_FINITE   reject NaN queries (default: on)
    INTERPSUITE_LOG_LEVEL      level used by ``logger.setup()`` (default: WARNING)
"""

import os
from typing import Union

_FALSE_VALUES = ("0", "false", "no", "off")


def _env_flag(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() not in _FALSE_VALUES


def _env_level(name: str, default: str) -> Union[int, str]:
    value = os.environ.get(name, default).strip()
    if value.isdigit():
        return int(value)
    return value.upper()


CHECK_FINITE: bool = _env_flag("INTERPSUITE_CHECK_FINITE", True)
LOG_LEVEL: Union[int, str] = _env_level("INTERPSUITE_LOG_LEVEL", "WARNING")


def set_check_finite(flag: bool) -> None:
    """Enable or disable the NaN check performed before every search."""
    global CHECK_FINITE
    CHECK_FINITE = bool(flag)


def set_log_level(level: Union[int, str]) -> None:
    """Set the default level picked up by ``logger.setup()``."""
    global LOG_LEVEL
    LOG_LEVEL = level.upper() if isinstance(level, str) else level
