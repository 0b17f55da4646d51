"""
Galloping interval search over a sorted sample array.

The search starts from a hint (usually the interval found by the previous
query), probes outward with doubling steps until the target is bracketed,
then bisects the bracket.  Queries that advance slowly through the domain
(time stepping, sweeps) are answered in a handful of comparisons; random
queries cost ``O(log n)``.

The hint never changes the answer, only the work needed to find it.
"""

import numpy as np
from numba import njit

from .errors import ShapeError


@njit(cache=True)
def _interval_search(target, x, prev):
    """
    Locate *target* in the sorted float64 array *x*, starting at *prev*.

    Returns ``i0`` with ``x[i0] <= target < x[i0+1]``, ``-1`` below the
    domain and ``len(x)`` at or above its last sample.  *prev* must lie
    in ``[0, len(x) - 1]``.
    """
    n = x.shape[0]
    i0 = prev
    i1 = prev
    inc = 1

    if x[i0] <= target:  # advance up until we pass the target
        if i0 >= n - 1:  # guess is already at the top
            return n
        i1 = i0 + inc
        while x[i1] <= target:
            i0 = i1
            inc *= 2
            i1 += inc
            if i1 >= n:  # off the end of the buffer
                i1 = n - 1
                if x[i1] <= target:
                    return n
                break
    else:  # advance down
        if i0 == 0:  # guess is already at the bottom
            return -1
        i0 = i0 - inc
        while x[i0] > target:
            i1 = i0
            inc *= 2
            if i0 < inc:
                i0 = 0
                if x[i0] > target:
                    return -1
                break
            i0 -= inc

    # x[i0] <= target < x[i1]
    while i1 - i0 > 1:
        i2 = (i1 + i0) // 2
        if x[i2] <= target:
            i0 = i2
        else:
            i1 = i2

    return i0


def interval_search(target, x, prev=0):
    """
    Find the interval of the sorted sequence *x* that contains *target*.

    Parameters
    ----------
    target : float
        Value to locate.
    x : array_like
        Strictly increasing 1D sequence of sample positions.
    prev : int, optional
        Starting guess in ``[0, len(x) - 1]``, typically the index returned
        by the previous call.  Default 0.

    Returns
    -------
    int
        ``i`` such that ``x[i] <= target < x[i+1]``; ``-1`` if
        ``target < x[0]``; ``len(x)`` if ``target >= x[-1]``.

    Raises
    ------
    ShapeError
        If *x* is empty or not one-dimensional.
    IndexError
        If *prev* is outside ``[0, len(x) - 1]``.

    Notes
    -----
    Monotonicity of *x* is not checked; the result for unsorted input is
    unspecified.
    """
    xx = np.ascontiguousarray(x, dtype=np.float64)
    if xx.ndim != 1 or xx.shape[0] == 0:
        raise ShapeError("'x' must be a non-empty 1D sequence")
    n = xx.shape[0]
    prev = int(prev)
    if prev < 0 or prev >= n:
        raise IndexError(f"search hint {prev} outside [0, {n - 1}]")
    return int(_interval_search(float(target), xx, prev))
