"""
Natural cubic spline interpolation.

The spline is stored in Hermite form: alongside the samples ``(x, y)`` we
keep one slope ``k`` per sample and series.  The slopes follow from
requiring a continuous second derivative at every interior sample and a
zero second derivative at both ends (the "natural" boundary), which gives
the tridiagonal system

    k[i-1]/h[i-1] + 2 (1/h[i-1] + 1/h[i]) k[i] + k[i+1]/h[i]
        = 3 (dy[i-1]/h[i-1]**2 + dy[i]/h[i]**2)

with ``h[i] = x[i+1] - x[i]`` and ``dy[i] = y[i+1] - y[i]``; the end rows
keep only their single adjacent interval.  The matrix is shared by every
series and is strictly diagonally dominant.
"""

import numpy as np

from interpsuite.core.errors import SingularSystemError
from interpsuite.core.logger import get_logger
from interpsuite.core.tridiagonal import solve_tridiagonal

from .base import InterpolatorBase, Kind, _readonly

log = get_logger(__name__)


def spline_calc_a(x):
    """
    Tridiagonal coefficient matrix of the natural spline slope system.

    Parameters
    ----------
    x : ndarray
        Sample positions, strictly increasing, at least 2 points.

    Returns
    -------
    a, b, c : ndarray
        Sub-diagonal, diagonal and super-diagonal, each of length
        ``len(x)``.  ``a[0]`` and ``c[-1]`` are zero and ignored by the
        solver.
    """
    n = x.shape[0]
    h = np.diff(x)
    a = np.empty(n)
    b = np.empty(n)
    c = np.empty(n)

    a[0] = 0.0
    b[0] = 2 / h[0]
    c[0] = 1 / h[0]
    a[1:-1] = 1 / h[:-1]
    b[1:-1] = 2 * (1 / h[:-1] + 1 / h[1:])
    c[1:-1] = 1 / h[1:]
    a[-1] = 1 / h[-1]
    b[-1] = 2 / h[-1]
    c[-1] = 0.0

    return a, b, c


def spline_calc_b(x, y):
    """
    Right-hand sides of the slope system, one row per series.

    Parameters
    ----------
    x : ndarray
        Sample positions, shape ``(n,)``.
    y : ndarray
        Series values, shape ``(nY, n)``.

    Returns
    -------
    ndarray
        Shape ``(nY, n)``.
    """
    h = np.diff(x)
    dy = np.diff(y, axis=1)
    B = np.empty_like(y, dtype=np.float64)
    B[:, 0] = 3 * dy[:, 0] / (h[0] * h[0])
    B[:, 1:-1] = 3 * (dy[:, :-1] / (h[:-1] * h[:-1]) +
                      dy[:, 1:] / (h[1:] * h[1:]))
    B[:, -1] = 3 * dy[:, -1] / (h[-1] * h[-1])
    return B


def spline_calc_k(A, B):
    """Solve for the slopes of every series; *B* is overwritten and returned."""
    a, b, c = A
    for row in B:
        solve_tridiagonal(a, b, c, row)
    return B


class InterpolatorSpline(InterpolatorBase):
    """
    Natural cubic spline interpolation on ``[x[0], x[nX-1]]``.

    The interpolant passes through every sample, is twice continuously
    differentiable and has zero curvature at both ends.  With only two
    samples it reduces to a straight line.

    Raises
    ------
    SingularSystemError
        If the slope system cannot be solved, which indicates degenerate
        sample positions.
    """

    kind = Kind.SPLINE
    min_points = 2

    def __init__(self, x, y):
        super().__init__(x, y)
        A = spline_calc_a(self._x)
        B = spline_calc_b(self._x, self._y)
        try:
            self._k = spline_calc_k(A, B)  # solved in place, k is B
        except SingularSystemError as err:
            log.debug("spline setup failed: %s", err)
            raise
        log.debug2("spline slopes solved for %d series over %d points",
                   self.nY, self.nX)

    @property
    def k(self) -> np.ndarray:
        """Slope at each sample, shape ``(nY, nX)``."""
        return _readonly(self._k)

    def _locate(self, x):
        return self.search(x, False)

    def _blend(self, i, x, rows):
        xs = self._x
        h = xs[i + 1] - xs[i]
        t = (x - xs[i]) / h
        y0 = self._y[rows, i]
        y1 = self._y[rows, i + 1]
        a = self._k[rows, i] * h - (y1 - y0)
        b = -self._k[rows, i + 1] * h + (y1 - y0)
        return (1 - t) * y0 + t * y1 + t * (1 - t) * (a * (1 - t) + b * t)
