"""
Common state and search contract for the 1D interpolators.

An interpolator owns private copies of the sample positions ``x``, the
value series ``y`` (shape ``(nY, nX)``) and a search hint.  The hint is the
lower index of the last interval found; each evaluation starts its search
there, so nearby successive queries are cheap.  Because ``search`` reads
and writes the hint, a single instance must not be evaluated from several
threads at once.
"""

import math
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np

from interpsuite.core import config
from interpsuite.core.errors import OutOfRangeError, ShapeError
from interpsuite.core.logger import get_logger
from interpsuite.core.search import _interval_search

log = get_logger(__name__)


class Kind(str, Enum):
    """The interpolation kinds; the set is closed."""

    CONSTANT = "constant"
    LINEAR = "linear"
    SPLINE = "spline"


def _as_series(y, nX: int) -> np.ndarray:
    """Copy *y* into a float64 array of shape ``(nY, nX)``."""
    if isinstance(y, np.ndarray):
        arr = np.array(y, dtype=np.float64)
        if arr.ndim == 1:
            arr = arr.reshape(1, -1)
        elif arr.ndim != 2:
            raise ShapeError(f"'y' must be 1D or 2D, got {arr.ndim}D")
    else:
        y = list(y)
        if len(y) > 0 and np.ndim(y[0]) == 0:  # a single series
            y = [y]
        rows = []
        for j, series in enumerate(y):
            row = np.array(series, dtype=np.float64)
            if row.ndim != 1 or row.shape[0] != nX:
                raise ShapeError(
                    f"Invalid length for 'y[{j}]', expected {nX}")
            rows.append(row)
        arr = np.array(rows, dtype=np.float64).reshape(len(rows), nX)

    if arr.shape[0] == 0:
        raise ShapeError("'y' must hold at least one series")
    if arr.shape[1] != nX:
        raise ShapeError(f"Invalid length for 'y', expected {nX}")
    return np.ascontiguousarray(arr)


def _readonly(arr: np.ndarray) -> np.ndarray:
    view = arr.view()
    view.flags.writeable = False
    return view


class InterpolatorBase(ABC):
    """
    Base class for interpolators.

    Parameters
    ----------
    x : array_like
        Strictly increasing sample positions (often time), the domain of
        interpolation.
    y : array_like
        One series of the same length as *x*, or a sequence / 2D array of
        such series.

    Raises
    ------
    ShapeError
        If a series does not match *x* in length or *x* has fewer points
        than the interpolation kind needs.
    """

    kind: Kind
    #: Minimum number of samples this kind can work with.
    min_points = 1

    def __init__(self, x, y):
        try:
            xx = np.array(x, dtype=np.float64)
            if xx.ndim != 1:
                raise ShapeError(f"'x' must be 1D, got {xx.ndim}D")
            if xx.shape[0] < self.min_points:
                raise ShapeError(
                    f"{self.kind.value} interpolation needs at least "
                    f"{self.min_points} points, got {xx.shape[0]}")
            yy = _as_series(y, xx.shape[0])
        except ShapeError as err:
            log.debug("%s interpolator rejected input: %s", self.kind.value, err)
            raise

        self._x = xx
        self._y = yy
        self._i = 0
        #: Number of 'x' points in the system
        self.nX = xx.shape[0]
        #: Number of series per 'x'
        self.nY = yy.shape[0]
        log.debug("Built %s interpolator: nX=%d nY=%d",
                  self.kind.value, self.nX, self.nY)

    def __repr__(self):
        return (f"{type(self).__name__}(nX={self.nX}, nY={self.nY}, "
                f"domain=[{self.lower!r}, {self.upper!r}])")

    # ── read-only views ────────────────────────────────────────────────
    @property
    def x(self) -> np.ndarray:
        return _readonly(self._x)

    @property
    def y(self) -> np.ndarray:
        return _readonly(self._y)

    @property
    def lower(self) -> float:
        """First sample position."""
        return float(self._x[0])

    @property
    def upper(self) -> float:
        """Last sample position."""
        return float(self._x[-1])

    @property
    def hint(self) -> int:
        """Lower index of the interval found by the last successful search."""
        return self._i

    @hint.setter
    def hint(self, value: int) -> None:
        value = int(value)
        if value < 0 or value >= self.nX:
            raise IndexError(f"search hint {value} outside [0, {self.nX - 1}]")
        self._i = value

    # ── search contract ────────────────────────────────────────────────
    def search(self, target: float, allow_right: bool) -> int:
        """
        Locate the interval holding *target*, updating the hint.

        Returns ``i`` with ``x[i] <= target < x[i+1]``.  At or beyond the
        last sample the result is ``nX`` when *allow_right* is true; when it
        is false a target exactly on ``x[nX-1]`` resolves to the final
        interval ``nX-2`` and anything larger is out of range.

        Raises
        ------
        OutOfRangeError
            Below ``x[0]``, beyond the right edge when not permitted, or a
            NaN target while ``config.CHECK_FINITE`` is on.  The hint is
            left unchanged.
        """
        target = float(target)
        n = self.nX
        if config.CHECK_FINITE and math.isnan(target):
            raise OutOfRangeError(target, self.lower, self.upper)

        i = _interval_search(target, self._x, self._i)
        if i < 0:  # off the lhs, never permitted
            raise OutOfRangeError(target, self.lower, self.upper)
        if i == n:
            if allow_right:
                self._i = n - 1
                log.debug3("search(%r) -> %d (right edge)", target, n)
                return n
            if target != self._x[n - 1]:
                raise OutOfRangeError(target, self.lower, self.upper)
            i = n - 2  # closed right end of the last interval
        self._i = int(i)
        log.debug3("search(%r) -> %d", target, self._i)
        return self._i

    def _check_series(self, series) -> int:
        series = int(series)
        if series < 0 or series >= self.nY:
            raise IndexError(f"series {series} outside [0, {self.nY - 1}]")
        return series

    # ── evaluation ─────────────────────────────────────────────────────
    @abstractmethod
    def _locate(self, x: float) -> int:
        """Index of the sample / interval used to evaluate at *x*."""

    @abstractmethod
    def _blend(self, i: int, x: float, rows):
        """Evaluate at *x* in interval *i* for ``rows`` (an index or slice)."""

    def eval(self, x: float, series: int = 0) -> float:
        """Evaluate the interpolation function of one series at *x*."""
        series = self._check_series(series)
        x = float(x)
        return float(self._blend(self._locate(x), x, series))

    def eval_all(self, x: float) -> np.ndarray:
        """Evaluate the interpolation function of every series at *x*."""
        x = float(x)
        return np.array(self._blend(self._locate(x), x, slice(None)),
                        dtype=np.float64)

    __call__ = eval
