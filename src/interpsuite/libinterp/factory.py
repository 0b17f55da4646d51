"""Build an interpolator from its kind name."""

from .base import InterpolatorBase, Kind
from .constant import InterpolatorConstant
from .linear import InterpolatorLinear
from .spline import InterpolatorSpline

_CLASSES = {
    Kind.CONSTANT: InterpolatorConstant,
    Kind.LINEAR: InterpolatorLinear,
    Kind.SPLINE: InterpolatorSpline,
}


def interpolator(kind, x, y) -> InterpolatorBase:
    """
    Construct an interpolator of the given kind.

    Parameters
    ----------
    kind : Kind or str
        ``"constant"``, ``"linear"`` or ``"spline"``.
    x, y : array_like
        Passed to the interpolator constructor.

    Raises
    ------
    ValueError
        If *kind* is not one of the known kinds.
    """
    return _CLASSES[Kind(kind)](x, y)
