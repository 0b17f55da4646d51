"""
Exception hierarchy shared by every interpolator.

All library errors derive from :class:`InterpolationError`.  The concrete
classes also subclass the closest built-in exception so callers that
already catch ``ValueError`` / ``ArithmeticError`` keep working.
"""


class InterpolationError(Exception):
    """Base class for interpsuite errors."""


class ShapeError(InterpolationError, ValueError):
    """Input arrays have incompatible or insufficient shapes."""


class OutOfRangeError(InterpolationError, ValueError):
    """Query lies outside the domain an interpolator may evaluate."""

    def __init__(self, target, lower=None, upper=None):
        self.target = target
        self.lower = lower
        self.upper = upper
        if lower is None or upper is None:
            msg = f"Interpolation failed as {target!r} is out of range"
        else:
            msg = (f"Interpolation failed as {target!r} is out of range "
                   f"[{lower!r}, {upper!r}]")
        super().__init__(msg)


class SingularSystemError(InterpolationError, ArithmeticError):
    """Tridiagonal solve met an exactly zero pivot."""

    def __init__(self, row: int):
        self.row = row
        super().__init__(
            f"solve failed due to singular matrix (zero pivot at row {row})")
