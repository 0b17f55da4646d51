"""Piecewise-linear interpolation."""

from .base import InterpolatorBase, Kind


class InterpolatorLinear(InterpolatorBase):
    """
    Piecewise-linear interpolation on ``[x[0], x[nX-1]]``.

    Duplicate sample positions are not guarded against and give
    non-finite results.
    """

    kind = Kind.LINEAR
    min_points = 2

    def _locate(self, x):
        return self.search(x, False)

    def _blend(self, i, x, rows):
        x0 = self._x[i]
        x1 = self._x[i + 1]
        scal = (x - x0) / (x1 - x0)
        y0 = self._y[rows, i]
        y1 = self._y[rows, i + 1]
        return y0 + (y1 - y0) * scal
