"""libinterp sub-package: the interpolator classes."""

# Import modules themselves (allows: from interpsuite.libinterp import spline)
from . import base
from . import constant
from . import factory
from . import linear
from . import spline

from .base import InterpolatorBase, Kind
from .constant import InterpolatorConstant
from .factory import interpolator
from .linear import InterpolatorLinear
from .spline import InterpolatorSpline

__all__ = [
    "base",
    "constant",
    "factory",
    "linear",
    "spline",
    "InterpolatorBase",
    "InterpolatorConstant",
    "InterpolatorLinear",
    "InterpolatorSpline",
    "Kind",
    "interpolator",
]
