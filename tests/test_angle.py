"""Tests for the Angle type, sexagesimal conversions and wrapping."""

from __future__ import annotations

import math

import pytest

from astro_algos.angle import (
    Angle,
    DegreesMinutesSeconds,
    HoursMinutesSeconds,
)


def _deg(value: float) -> Angle:
    return Angle.from_degrees(value)


@pytest.mark.parametrize('degrees', [0.0, 1.5, -45.25, 180.0, 359.999, 1234.5])
def test_degrees_round_trip(degrees: float) -> None:
    """Degrees survive conversion to radians and back."""
    assert _deg(degrees).as_degrees() == pytest.approx(degrees, abs=1e-12)


def test_from_radians_keeps_value() -> None:
    """from_radians stores the value as given."""
    assert Angle.from_radians(1.25).radians == 1.25


def test_from_dms_meeus_value() -> None:
    """34 55 25.5436353 composes to the expected decimal degrees."""
    angle = Angle.from_dms(34, 55, 25.5436353)
    assert angle.as_degrees() == pytest.approx(34.92376212091666667, abs=1e-12)


def test_from_hms_meeus_value() -> None:
    """14h55m25.5436353s is 223.856... degrees."""
    angle = Angle.from_hms(14, 55, 25.5436353)
    assert angle.as_degrees() == pytest.approx(223.85643181375, abs=1e-10)


def test_from_dms_reduces_modulo_full_circle() -> None:
    """Composed values of a full turn or more are reduced modulo 360."""
    assert Angle.from_dms(370, 30, 0).as_degrees() == pytest.approx(10.5)
    assert Angle.from_dms(360, 0, 0).as_degrees() == 0.0


def test_from_dms_negative_keeps_dividend_sign() -> None:
    """The remainder of a negative composition stays negative."""
    assert Angle.from_dms(-370, 0, 0).as_degrees() == pytest.approx(-10.0)


def test_from_hms_reduces_modulo_full_circle() -> None:
    """25 hours is 375 degrees, reduced to 15."""
    assert Angle.from_hms(25, 0, 0).as_degrees() == pytest.approx(15.0)


def test_as_dms_decomposes_positive_angle() -> None:
    """DMS decomposition gives whole degrees, minutes and seconds."""
    dms = Angle.from_dms(34, 55, 25.5436353).as_dms()
    assert dms.degrees == 34
    assert dms.minutes == 55
    assert dms.seconds == pytest.approx(25.5436353, abs=1e-6)


def test_as_dms_negative_sign_on_degrees_only() -> None:
    """A negative angle carries its sign on the degrees; minutes and seconds are magnitudes."""
    dms = _deg(-12.75).as_dms()
    assert isinstance(dms, DegreesMinutesSeconds)
    assert dms.degrees == -12
    assert dms.minutes * 60.0 + dms.seconds == pytest.approx(2700.0, abs=1e-8)


def test_as_hms_decomposes_angle() -> None:
    """223.856... degrees decomposes to 14h55m25.54s."""
    hms = Angle.from_hms(14, 55, 25.5436353).as_hms()
    assert (hms.hours, hms.minutes) == (14, 55)
    assert hms.seconds == pytest.approx(25.5436353, abs=1e-6)


def test_as_hms_of_quarter_circle() -> None:
    """Ninety degrees is six hours."""
    hms = _deg(90.25).as_hms()
    assert isinstance(hms, HoursMinutesSeconds)
    assert hms.hours == 6
    assert hms.minutes * 60.0 + hms.seconds == pytest.approx(60.0, abs=1e-8)


@pytest.mark.parametrize(
    ('d', 'm', 's'),
    [(0, 0, 0.0), (12, 30, 15.25), (123, 0, 59.5), (359, 59, 59.0)],
)
def test_dms_round_trip_non_negative(d: int, m: int, s: float) -> None:
    """Non-negative DMS components survive composition and decomposition."""
    dms = Angle.from_dms(d, m, s).as_dms()
    assert (dms.degrees, dms.minutes) == (d, m)
    assert dms.seconds == pytest.approx(s, abs=1e-7)


def test_trig_forwarding() -> None:
    """sin, cos and tan forward to the radian value."""
    angle = _deg(30.0)
    assert angle.sin() == pytest.approx(0.5)
    assert angle.cos() == pytest.approx(math.sqrt(3.0) / 2.0)
    assert angle.tan() == pytest.approx(1.0 / math.sqrt(3.0))


def test_inverse_trig_constructors() -> None:
    """asin, acos and atan return Angles in radians."""
    assert Angle.asin(0.5).as_degrees() == pytest.approx(30.0)
    assert Angle.acos(0.5).as_degrees() == pytest.approx(60.0)
    assert Angle.atan(1.0).as_degrees() == pytest.approx(45.0)


@pytest.mark.parametrize('value', [1.5, -1.0000001, math.inf])
def test_asin_acos_outside_domain_are_nan(value: float) -> None:
    """Arguments outside [-1, 1] give a NaN Angle instead of raising."""
    assert math.isnan(Angle.asin(value).radians)
    assert math.isnan(Angle.acos(value).radians)


@pytest.mark.parametrize(
    ('y', 'x', 'expected_degrees'),
    [
        (1.0, 1.0, 45.0),
        (1.0, -1.0, 135.0),
        (-1.0, -1.0, -135.0),
        (-1.0, 1.0, -45.0),
        (0.0, -1.0, 180.0),
        (1.0, 0.0, 90.0),
    ],
)
def test_atan2_quadrants(y: float, x: float, expected_degrees: float) -> None:
    """atan2 resolves the quadrant from the signs of both arguments."""
    assert Angle.atan2(y, x).as_degrees() == pytest.approx(expected_degrees)


def test_add_and_subtract_angles() -> None:
    """Angles add and subtract with other Angles."""
    assert (_deg(10.0) + _deg(20.0)).as_degrees() == pytest.approx(30.0)
    assert (_deg(10.0) - _deg(20.0)).as_degrees() == pytest.approx(-10.0)
    assert (-_deg(10.0)).as_degrees() == pytest.approx(-10.0)


def test_mixing_angle_and_number_raises() -> None:
    """Arithmetic with a bare number is a TypeError."""
    with pytest.raises(TypeError):
        _deg(10.0) + 1.0  # type: ignore[operator]
    with pytest.raises(TypeError):
        1.0 - _deg(10.0)  # type: ignore[operator]


def test_angles_are_ordered_and_comparable() -> None:
    """Angles compare by their radian value."""
    assert _deg(10.0) < _deg(20.0)
    assert Angle.from_radians(1.0) == Angle.from_radians(1.0)


@pytest.mark.parametrize(
    ('value', 'low', 'high', 'expected'),
    [
        (370.0, 0.0, 360.0, 10.0),
        (-10.0, 0.0, 360.0, 350.0),
        (725.0, 0.0, 360.0, 5.0),
        (-725.0, 0.0, 360.0, 355.0),
        (100.0, -90.0, 90.0, -80.0),
        (-100.0, -90.0, 90.0, 80.0),
    ],
)
def test_wrap_shifts_into_range(value: float, low: float, high: float, expected: float) -> None:
    """Out-of-range values move by whole spans into the interval."""
    wrapped = _deg(value).wrap(_deg(low), _deg(high))
    assert wrapped.as_degrees() == pytest.approx(expected, abs=1e-9)


@pytest.mark.parametrize('value', [0.0, 360.0, 123.4])
def test_wrap_leaves_in_range_values_unchanged(value: float) -> None:
    """Values inside the closed interval, bounds included, are returned as is."""
    angle = _deg(value)
    assert angle.wrap(_deg(0.0), _deg(360.0)) == angle


def test_wrap_result_is_in_range_and_whole_spans_away() -> None:
    """Wrapping a large angle stays within bounds and differs by whole turns."""
    low, high = _deg(0.0), _deg(360.0)
    for radians in (1e3, -1e3, 12345.678, -0.001):
        angle = Angle.from_radians(radians)
        wrapped = angle.wrap(low, high)
        assert low <= wrapped <= high
        turns = (angle.radians - wrapped.radians) / (2.0 * math.pi)
        assert turns == pytest.approx(round(turns), abs=1e-9)


def test_wrap_nan_passes_through() -> None:
    """NaN angles are returned unchanged."""
    wrapped = Angle(math.nan).wrap(_deg(0.0), _deg(360.0))
    assert math.isnan(wrapped.radians)


@pytest.mark.parametrize(('low', 'high'), [(0.0, 0.0), (10.0, 5.0)])
def test_wrap_rejects_empty_range(low: float, high: float) -> None:
    """high <= low is a ValueError."""
    with pytest.raises(ValueError, match='invalid wrap range'):
        _deg(1.0).wrap(_deg(low), _deg(high))


def test_angle_is_built_from_numbers_only() -> None:
    """Angles come from numeric components; there is no text constructor."""
    assert not hasattr(Angle, 'parse_dms')
    assert not hasattr(Angle, 'parse_hms')
