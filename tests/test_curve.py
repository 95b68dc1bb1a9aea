import os
import sys

import numpy as np
import pytest

# Allow running tests without installing the package.
BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if BASE_DIR not in sys.path:
    sys.path.insert(0, BASE_DIR)

from bond_mc_pricer import (
    ConfigurationError,
    DegenerateCurvePoints,
    EmptyCurve,
    MismatchedCurveArrays,
    YieldCurve,
)


def test_flat_curve_returns_its_rate_everywhere():
    curve = YieldCurve([1, 2, 5, 10], [0.04, 0.04, 0.04, 0.04])
    for t in [0.0, 0.25, 1.0, 1.5, 3.7, 10.0, 50.0]:
        assert curve.interpolate(t) == 0.04


def test_flat_extrapolation_outside_pillars():
    curve = YieldCurve([1, 2], [0.01, 0.02])
    assert curve.interpolate(0.5) == 0.01
    assert curve.interpolate(5) == 0.02


def test_pillars_are_returned_exactly():
    curve = YieldCurve([1, 2, 3], [0.01, 0.02, 0.025])
    assert curve.interpolate(1) == 0.01
    assert curve.interpolate(2) == pytest.approx(0.02, abs=1e-15)
    assert curve.interpolate(3) == pytest.approx(0.025, abs=1e-15)


def test_linear_midpoint():
    curve = YieldCurve([1, 2], [0.01, 0.02])
    assert curve.interpolate(1.5) == pytest.approx(0.015, abs=1e-15)


def test_interpolation_on_demo_curve():
    curve = YieldCurve([1, 2, 3, 5, 10, 30], [0.01, 0.015, 0.02, 0.025, 0.03, 0.035])
    # between 3Y (2%) and 5Y (2.5%)
    assert curve.interpolate(4) == pytest.approx(0.0225, abs=1e-15)
    # between 10Y (3%) and 30Y (3.5%)
    assert curve.interpolate(20) == pytest.approx(0.0325, abs=1e-15)


def test_interpolate_many_matches_scalar():
    curve = YieldCurve([1, 2, 3, 5, 10, 30], [0.01, 0.015, 0.02, 0.025, 0.03, 0.035])
    times = [0.1, 1.0, 1.25, 2.5, 4.0, 7.0, 30.0, 40.0]
    vec = curve.interpolate_many(times)
    assert isinstance(vec, np.ndarray)
    assert list(vec) == [curve.interpolate(t) for t in times]


def test_single_point_curve_is_flat():
    curve = YieldCurve([5], [0.03])
    assert curve.interpolate(0.1) == 0.03
    assert curve.interpolate(5) == 0.03
    assert curve.interpolate(12) == 0.03


def test_mismatched_arrays_rejected():
    with pytest.raises(MismatchedCurveArrays):
        YieldCurve([1, 2, 3], [0.01, 0.02])


def test_duplicate_or_decreasing_maturities_rejected():
    with pytest.raises(DegenerateCurvePoints):
        YieldCurve([1, 1, 2], [0.01, 0.01, 0.02])
    with pytest.raises(DegenerateCurvePoints):
        YieldCurve([2, 1], [0.02, 0.01])


def test_empty_curve_rejected():
    with pytest.raises(EmptyCurve):
        YieldCurve([], [])


def test_errors_are_configuration_errors():
    with pytest.raises(ConfigurationError):
        YieldCurve([1, 2, 3], [0.01, 0.02])
    with pytest.raises(ValueError):
        YieldCurve([1, 1], [0.01, 0.02])


def test_curve_is_immutable():
    curve = YieldCurve([1, 2], [0.01, 0.02])
    with pytest.raises(AttributeError):
        curve.rates = (0.05, 0.05)


def test_shifted_returns_new_curve():
    curve = YieldCurve([1, 2], [0.01, 0.02])
    up = curve.shifted(0.0010)
    assert up is not curve
    assert up.interpolate(1.5) == pytest.approx(0.016)
    assert curve.interpolate(1.5) == pytest.approx(0.015)


def test_from_points():
    curve = YieldCurve.from_points([(1, 0.01), (2, 0.02)])
    assert curve.points() == [(1.0, 0.01), (2.0, 0.02)]
    assert len(curve) == 2
