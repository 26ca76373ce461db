import pytest

from fsminspect.domain.tolerance import (
    hole_allowance,
    hole_size_ok,
    offset_ok,
    offset_tolerance,
    size_ok,
    slot_size_ok,
)
from fsminspect.domain.types import ActualMeasurement, Hole, Slot, UNKNOWN
from fsminspect.shared.config import TolerancePolicy


@pytest.mark.parametrize("spec,actual,expected", [
    (10.7, 11.1, True),
    (10.7, 11.11, False),
    (11.7, 12.2, True),
    (11.7, 12.21, False),
    (10.0, 10.0, True),
    (10.0, 9.99, False),
    (11.2, 11.7, True),
])
def test_hole_band(spec, actual, expected):
    assert hole_size_ok(spec, actual) is expected


def test_hole_between_bands_uses_wide_allowance():
    assert hole_allowance(11.0) == pytest.approx(0.5)
    assert hole_allowance(10.7) == pytest.approx(0.4)


@pytest.mark.parametrize("spec,actual", [(None, 10.0), (10.0, None), (float("nan"), 10.0), (10.0, float("inf"))])
def test_hole_missing_value_is_unknown(spec, actual):
    assert hole_size_ok(spec, actual) is None


def test_slot_conjunction():
    assert slot_size_ok(Slot(9, 12), 9.5, 12.6) is False
    assert slot_size_ok(Slot(9, 12), 9.5, 12.5) is True
    assert slot_size_ok(Slot(9, 12), 9.6, 12.2) is False


def test_slot_missing_side_is_unknown_even_if_other_fails():
    assert slot_size_ok(Slot(9, 12), 9.2, None) is None
    assert slot_size_ok(Slot(9, 12), None, 13.0) is None


def test_size_ok_dispatch():
    assert size_ok(Hole(10), ActualMeasurement(diameter=10.3)) is True
    # a slot ignores the diameter entry
    assert size_ok(Slot(9, 12), ActualMeasurement(diameter=9.2)) is None
    assert size_ok(UNKNOWN, ActualMeasurement(diameter=10.0)) is None


@pytest.mark.parametrize("x,expected", [(150, 1.5), (200, 1.5), (1000, 1.0), (1800, 1.5), (1850, 1.5), (1799, 1.0)])
def test_offset_tolerance_edge_widening(x, expected):
    assert offset_tolerance(x, 2000) == pytest.approx(expected)


def test_offset_tolerance_without_inputs():
    assert offset_tolerance(None, 2000) == pytest.approx(1.0)
    assert offset_tolerance(1000, None) == pytest.approx(1.0)
    assert offset_tolerance(1900, float("nan")) == pytest.approx(1.0)
    # near either end, but the part length is unknown
    assert offset_tolerance(100, None) == pytest.approx(1.0)
    assert offset_tolerance(100, "abc") == pytest.approx(1.0)
    assert offset_tolerance("n/a", 2000) == pytest.approx(1.0)


def test_offset_tolerance_coerces_numeric_strings():
    assert offset_tolerance("150", "2000") == pytest.approx(1.5)
    assert offset_tolerance("1000", "2000,0") == pytest.approx(1.0)


def test_offset_tolerance_follows_policy():
    policy = TolerancePolicy(edge_tolerance_mm=2.0, edge_zone_mm=300)
    assert offset_tolerance(250, 2000, policy) == pytest.approx(2.0)
    assert offset_tolerance(1000, 2000, policy) == pytest.approx(1.0)


def test_offset_ok():
    assert offset_ok(1.0, 1.0) is True
    assert offset_ok(-1.2, 1.0) is False
    assert offset_ok(None, 1.0) is None
