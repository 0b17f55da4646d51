"""
Tests for the shared interpolator state: input shapes, copying, the
search hint and the search contract at the domain edges.
"""
import numpy as np
import pytest

from interpsuite.core import config
from interpsuite.core.errors import OutOfRangeError, ShapeError
from interpsuite.libinterp.constant import InterpolatorConstant
from interpsuite.libinterp.linear import InterpolatorLinear
from interpsuite.libinterp.spline import InterpolatorSpline

KINDS = [InterpolatorConstant, InterpolatorLinear, InterpolatorSpline]


@pytest.fixture
def check_finite():
    saved = config.CHECK_FINITE
    yield
    config.set_check_finite(saved)


class TestShapes:
    @pytest.mark.parametrize("cls", KINDS)
    def test_single_series_forms(self, cls, xy):
        x, y = xy
        for form in (y, [y], np.array(y), np.array([y])):
            obj = cls(x, form)
            assert obj.nX == len(x)
            assert obj.nY == 1
            assert obj.y.shape == (1, len(x))

    @pytest.mark.parametrize("cls", KINDS)
    def test_series_length_mismatch(self, cls, two_series):
        x, y = two_series
        with pytest.raises(ShapeError, match="Invalid length for 'y"):
            cls(x, [y[0], y[1][:-1]])
        with pytest.raises(ShapeError):
            cls(x[:-1], y)
        with pytest.raises(ShapeError):
            cls(x, np.array(y)[:, :-1])

    @pytest.mark.parametrize("cls", KINDS)
    def test_empty_series_collection(self, cls, xy):
        x, _ = xy
        with pytest.raises(ShapeError):
            cls(x, [])
        with pytest.raises(ShapeError):
            cls(x, np.empty((0, len(x))))

    @pytest.mark.parametrize("cls", KINDS)
    def test_bad_dimensions(self, cls, xy):
        x, y = xy
        with pytest.raises(ShapeError):
            cls([x], y)
        with pytest.raises(ShapeError):
            cls(x, np.zeros((1, 1, len(x))))

    def test_shape_error_is_value_error(self):
        with pytest.raises(ValueError):
            InterpolatorSpline([0.0], [1.0])


class TestCopies:
    @pytest.mark.parametrize("cls", KINDS)
    def test_caller_buffers_are_copied(self, cls):
        x = np.array([0.0, 1.0, 2.0, 3.0])
        y = np.array([[1.0, 2.0, 4.0, 8.0]])
        obj = cls(x, y)
        before = obj.eval_all(1.5)
        x[:] = [10.0, 11.0, 12.0, 13.0]
        y[:] = 0.0
        np.testing.assert_array_equal(obj.eval_all(1.5), before)

    def test_views_are_read_only(self, xy):
        x, y = xy
        obj = InterpolatorLinear(x, y)
        with pytest.raises(ValueError):
            obj.x[0] = -1.0
        with pytest.raises(ValueError):
            obj.y[0, 0] = -1.0


class TestHint:
    def test_starts_at_zero(self, xy):
        obj = InterpolatorLinear(*xy)
        assert obj.hint == 0

    def test_tracks_last_interval(self, xy):
        obj = InterpolatorLinear(*xy)
        obj.eval(4.2)
        assert obj.hint == 4
        obj.eval(1.1)
        assert obj.hint == 1

    def test_setter_validates(self, xy):
        obj = InterpolatorLinear(*xy)
        with pytest.raises(IndexError):
            obj.hint = -1
        with pytest.raises(IndexError):
            obj.hint = len(xy[0])

    @pytest.mark.parametrize("cls", KINDS)
    def test_warm_and_cold_agree(self, cls, uneven):
        x, y = uneven
        warm = cls(x, y)
        q = np.linspace(x[0], x[-1], 250)
        for v in q:
            cold = cls(x, y)
            np.testing.assert_array_equal(warm.eval_all(v), cold.eval_all(v))
        for v in q[::-1]:
            cold = cls(x, y)
            np.testing.assert_array_equal(warm.eval_all(v), cold.eval_all(v))


class TestSearch:
    def test_allow_right(self, xy):
        obj = InterpolatorConstant(*xy)
        assert obj.search(6.0, True) == 7
        assert obj.search(60.0, True) == 7
        assert obj.hint == 6

    def test_closed_right_end(self, xy):
        obj = InterpolatorLinear(*xy)
        assert obj.search(6.0, False) == 5
        with pytest.raises(OutOfRangeError):
            obj.search(6.5, False)

    def test_left_never_allowed(self, xy):
        obj = InterpolatorConstant(*xy)
        with pytest.raises(OutOfRangeError) as info:
            obj.search(-0.5, True)
        assert info.value.target == -0.5
        assert info.value.lower == 0.0
        assert info.value.upper == 6.0

    @pytest.mark.parametrize("cls", KINDS)
    def test_nan_rejected(self, cls, xy, check_finite):
        config.set_check_finite(True)
        obj = cls(*xy)
        obj.hint = 3
        with pytest.raises(OutOfRangeError, match="nan"):
            obj.eval(float("nan"))
        assert obj.hint == 3

    def test_nan_unchecked(self, xy, check_finite):
        config.set_check_finite(False)
        obj = InterpolatorLinear(*xy)
        obj.hint = 3
        assert np.isnan(obj.eval(float("nan")))


class TestSeriesIndex:
    @pytest.mark.parametrize("cls", KINDS)
    def test_out_of_range_series(self, cls, two_series):
        obj = cls(*two_series)
        with pytest.raises(IndexError):
            obj.eval(1.0, 2)
        with pytest.raises(IndexError):
            obj.eval(1.0, -1)

    def test_repr(self, two_series):
        obj = InterpolatorLinear(*two_series)
        assert repr(obj) == "InterpolatorLinear(nX=5, nY=2, domain=[0.0, 4.0])"
