"""Piecewise-constant interpolation."""

from .base import InterpolatorBase, Kind


class InterpolatorConstant(InterpolatorBase):
    """
    Piecewise-constant interpolation, with open right interval.

    The value at ``x[i]`` holds on ``[x[i], x[i+1])``; at or after the last
    sample the last value is carried forward.  Queries below ``x[0]`` raise
    :class:`~interpsuite.core.errors.OutOfRangeError`.
    """

    kind = Kind.CONSTANT
    min_points = 1

    def _locate(self, x):
        i = min(self.search(x, True), self.nX - 1)
        # Ties go to the sample after the step (right-continuous), like
        # f=0 in R's approx(method="constant").
        if i != self.nX - 1 and self._x[i + 1] == x:
            i += 1
        return i

    def _blend(self, i, x, rows):
        return self._y[rows, i]
