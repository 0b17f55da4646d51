"""
Thomas-algorithm solver for tridiagonal linear systems.

No pivoting is performed, so the solver is only safe for systems that are
diagonally dominant (the natural cubic spline system is).  Exactly zero
pivots are reported as :class:`SingularSystemError`.
"""

import numpy as np
from numba import njit

from .errors import ShapeError, SingularSystemError
from .logger import get_logger

log = get_logger(__name__)


@njit(cache=True)
def _thomas(a, b, c, x):
    """
    Solve in place; *b* and *x* are overwritten.

    Returns the row of the first zero pivot, or -1 on success.
    """
    n = x.shape[0]

    # Eliminate:
    for i in range(1, n):
        if b[i - 1] == 0.0:
            return i - 1
        fac = a[i] / b[i - 1]
        b[i] -= fac * c[i - 1]
        x[i] -= fac * x[i - 1]

    # Back-substitute:
    if b[n - 1] == 0.0:
        return n - 1
    x[n - 1] /= b[n - 1]
    for i in range(n - 2, -1, -1):
        x[i] = (x[i] - c[i] * x[i + 1]) / b[i]
    return -1


def solve_tridiagonal(a, b, c, x):
    """
    Solve ``A @ result = x`` for a tridiagonal matrix ``A``.

    Parameters
    ----------
    a : array_like
        Sub-diagonal, length n (``a[0]`` is ignored).
    b : array_like
        Main diagonal, length n.  Not modified.
    c : array_like
        Super-diagonal, length n (``c[n-1]`` is ignored).
    x : ndarray or array_like
        Right-hand side, length n.  A writeable, C-contiguous float64
        array is overwritten with the solution; anything else is copied
        first.

    Returns
    -------
    ndarray
        The solution (the same object as *x* when solved in place).

    Raises
    ------
    ShapeError
        If the four vectors are not 1D of one common, non-zero length.
    SingularSystemError
        If a pivot is exactly zero after elimination.
    """
    a = np.ascontiguousarray(a, dtype=np.float64)
    c = np.ascontiguousarray(c, dtype=np.float64)
    work = np.array(b, dtype=np.float64)
    if (isinstance(x, np.ndarray) and x.dtype == np.float64
            and x.flags.c_contiguous and x.flags.writeable):
        rhs = x
    else:
        rhs = np.array(x, dtype=np.float64)

    n = rhs.shape[0] if rhs.ndim == 1 else -1
    if n <= 0 or any(v.ndim != 1 or v.shape[0] != n for v in (a, work, c)):
        raise ShapeError(
            "tridiagonal solve needs 1D 'a', 'b', 'c' and 'x' of equal, "
            "non-zero length")

    row = _thomas(a, work, c, rhs)
    if row >= 0:
        log.debug("tridiagonal solve hit zero pivot at row %d of %d", row, n)
        raise SingularSystemError(int(row))
    return rhs
