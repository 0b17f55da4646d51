"""
interpsuite: 1D interpolation of sampled series.

Piecewise-constant, piecewise-linear and natural cubic spline
interpolators over a strictly increasing sample domain, sharing a hinted
galloping search that makes successive nearby queries cheap.
"""

# Import main sub-packages
from . import core
from . import libinterp

from .core.errors import (
    InterpolationError,
    OutOfRangeError,
    ShapeError,
    SingularSystemError,
)
from .libinterp import (
    InterpolatorConstant,
    InterpolatorLinear,
    InterpolatorSpline,
    Kind,
    interpolator,
)

__all__ = [
    "core",
    "libinterp",
    "InterpolationError",
    "OutOfRangeError",
    "ShapeError",
    "SingularSystemError",
    "InterpolatorConstant",
    "InterpolatorLinear",
    "InterpolatorSpline",
    "Kind",
    "interpolator",
]
