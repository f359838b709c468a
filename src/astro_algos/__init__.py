"""Astronomical algorithms after Meeus: angles, calendars, coordinates and planets.

The package provides:
- Angle: plane angles with degree, DMS and HMS conversions and range wrapping
- JD and Date: Julian Day numbers, calendar conversion, weekday, Easter and Passover
- Equatorial and Ecliptic coordinates, related by the obliquity of an equinox
- Planet positions from the VSOP87 series (coefficients from PyMeeus or IMCCE files)
"""

from astro_algos.angle import Angle, DegreesMinutesSeconds, HoursMinutesSeconds
from astro_algos.coords import Ecliptic, Equatorial, Equinox, HeliocentricSpherical
from astro_algos.dates import (
    Calendar,
    Date,
    DayOfWeek,
    Month,
    find_easter_by_calendar,
    find_easter_by_year,
    find_gregorian_easter,
    find_gregorian_passover,
    find_julian_easter,
)
from astro_algos.planets import Planet
from astro_algos.time_utils import JD

__all__ = [
    'JD',
    'Angle',
    'Calendar',
    'Date',
    'DayOfWeek',
    'DegreesMinutesSeconds',
    'Ecliptic',
    'Equatorial',
    'Equinox',
    'HeliocentricSpherical',
    'HoursMinutesSeconds',
    'Month',
    'Planet',
    'find_easter_by_calendar',
    'find_easter_by_year',
    'find_gregorian_easter',
    'find_gregorian_passover',
    'find_julian_easter',
]
