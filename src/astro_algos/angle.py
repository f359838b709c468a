"""Angles stored in radians, with degree, DMS and HMS conversions and range wrapping."""

from __future__ import annotations

import math
from dataclasses import dataclass

from astro_algos.constants import (
    DEGREES_PER_CIRCLE,
    DEGREES_PER_HOUR,
    MINUTES_PER_DEGREE,
    SECONDS_PER_DEGREE,
)


@dataclass(frozen=True)
class DegreesMinutesSeconds:
    """Angle as signed whole degrees plus minutes and seconds of arc (magnitudes)."""

    degrees: int
    minutes: int
    seconds: float


@dataclass(frozen=True)
class HoursMinutesSeconds:
    """Angle as signed whole hours plus minutes and seconds of time (magnitudes)."""

    hours: int
    minutes: int
    seconds: float


def _split_sexagesimal(value: float) -> tuple[int, int, float]:
    """Split a value into truncated integer part, minutes and seconds of its fraction."""
    whole = math.trunc(value)
    fraction = abs(value - whole) * 60.0
    minutes = math.trunc(fraction)
    seconds = (fraction - minutes) * 60.0
    return whole, minutes, seconds



@dataclass(frozen=True, order=True)
class Angle:
    """A plane angle. The value is always held in radians.

    Angles only add to and subtract from other Angles; mixing with a bare
    number raises TypeError. Instances are immutable, so every operation,
    wrap() included, returns a new Angle.
    """

    radians: float

    @classmethod
    def from_degrees(cls, degrees: float) -> Angle:
        return cls(math.radians(degrees))

    @classmethod
    def from_radians(cls, radians: float) -> Angle:
        return cls(float(radians))

    @classmethod
    def from_dms(cls, degrees: float, minutes: float, seconds: float) -> Angle:
        """Build an Angle from degrees, minutes and seconds of arc.

        The components are composed as ``d + m/60 + s/3600`` and reduced modulo
        360 (the remainder keeps the sign of the composed value). Components are
        not range checked.
        """
        deg = degrees + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE
        return cls.from_degrees(math.fmod(deg, DEGREES_PER_CIRCLE))

    @classmethod
    def from_hms(cls, hours: float, minutes: float, seconds: float) -> Angle:
        """Build an Angle from hours, minutes and seconds of time (1 h = 15 degrees)."""
        deg = (hours + minutes / MINUTES_PER_DEGREE + seconds / SECONDS_PER_DEGREE) * DEGREES_PER_HOUR
        return cls.from_degrees(math.fmod(deg, DEGREES_PER_CIRCLE))

    def as_degrees(self) -> float:
        return math.degrees(self.radians)

    def as_dms(self) -> DegreesMinutesSeconds:
        """Decompose into signed whole degrees, arcminutes and arcseconds."""
        return DegreesMinutesSeconds(*_split_sexagesimal(self.as_degrees()))

    def as_hms(self) -> HoursMinutesSeconds:
        """Decompose into signed whole hours, minutes and seconds of time."""
        return HoursMinutesSeconds(*_split_sexagesimal(self.as_degrees() / DEGREES_PER_HOUR))

    def sin(self) -> float:
        return math.sin(self.radians)

    def cos(self) -> float:
        return math.cos(self.radians)

    def tan(self) -> float:
        return math.tan(self.radians)

    @staticmethod
    def asin(value: float) -> Angle:
        """Arcsine as an Angle; NaN when value lies outside [-1, 1]."""
        if -1.0 <= value <= 1.0:
            return Angle(math.asin(value))
        return Angle(math.nan)

    @staticmethod
    def acos(value: float) -> Angle:
        """Arccosine as an Angle; NaN when value lies outside [-1, 1]."""
        if -1.0 <= value <= 1.0:
            return Angle(math.acos(value))
        return Angle(math.nan)

    @staticmethod
    def atan(value: float) -> Angle:
        return Angle(math.atan(value))

    @staticmethod
    def atan2(y: float, x: float) -> Angle:
        return Angle(math.atan2(y, x))

    def wrap(self, low: Angle, high: Angle) -> Angle:
        """Shift the angle by whole turns of ``high - low`` into ``[low, high]``.

        Values already inside the closed interval are returned unchanged. NaN
        and infinite values are returned unchanged.

        Parameters:
            low: Lower bound of the range.
            high: Upper bound of the range; must exceed low.

        Returns:
            Angle within [low, high] differing from self by a multiple of the span.

        Raises:
            ValueError: If high <= low.
        """
        if not high > low:
            raise ValueError(f'invalid wrap range: high {high.radians!r} <= low {low.radians!r}')
        value = self.radians
        if not math.isfinite(value):
            return self
        span = high.radians - low.radians
        if value > high.radians:
            value -= math.ceil((value - high.radians) / span) * span
        elif value < low.radians:
            value += math.ceil((low.radians - value) / span) * span
        # Rounding in the multiple can leave the value one ulp outside.
        while value > high.radians:
            value -= span
        while value < low.radians:
            value += span
        return Angle(value)

    def __add__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: Angle) -> Angle:
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __neg__(self) -> Angle:
        return Angle(-self.radians)
