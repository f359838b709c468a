"""Fixed constants: epochs, calendar thresholds, sexagesimal factors, obliquities.

From Meeus, Astronomical Algorithms (2nd ed.) chapters 7, 13, 22 and 32.
"""

# Time: Julian Day epochs and day-count units
J2000_JD = 2451545.0  # 2000 January 1.5 TD
B1950_JD = 2433282.4235
DAYS_PER_JULIAN_CENTURY = 36525.0
DAYS_PER_JULIAN_MILLENNIUM = 365250.0
DAYS_PER_WEEK = 7

# Calendar: Gregorian reform (1582 October 15)
GREGORIAN_START_DAY_NUMBER = 2299161  # Z threshold of the inverse conversion
GREGORIAN_TAG_JD = 2299068.5  # at or after this JD, from_jd tags dates Gregorian
FIRST_GREGORIAN_EASTER_YEAR = 1583

# Angle: degrees per circle and sexagesimal (DMS/HMS)
DEGREES_PER_CIRCLE = 360.0
QUARTER_CIRCLE_DEGREES = 90.0
MINUTES_PER_DEGREE = 60.0
SECONDS_PER_DEGREE = 3600.0
DEGREES_PER_HOUR = 15.0  # right ascension: 360° / 24 h
ARCSEC_PER_DEGREE = 3600.0

# Mean obliquity of the ecliptic at the standard equinoxes (degrees, minutes, seconds)
OBLIQUITY_J2000_DMS = (23, 26, 21.448)
OBLIQUITY_B1950_DMS = (23, 26, 44.84)

# VSOP87: PyMeeus stores amplitudes in units of 1e-8 (radians or AU)
PYMEEUS_AMPLITUDE_SCALE = 1.0e-8
MAX_TAU_POWER = 5  # series exist for tau**0 .. tau**5
