"""Calendar dates: Julian Day conversion, weekday, day of year, Easter and Passover.

Algorithms from Meeus, Astronomical Algorithms, chapters 7 (Julian Day), 8
(date of Easter) and 9 (Jewish calendar). A Date carries the calendar it is
written in; either calendar may be used for any instant, so "what was this
Julian Day in the Julian calendar" is a valid question.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum, IntEnum

from astro_algos.constants import (
    DAYS_PER_WEEK,
    FIRST_GREGORIAN_EASTER_YEAR,
    GREGORIAN_START_DAY_NUMBER,
    GREGORIAN_TAG_JD,
)
from astro_algos.time_utils import JD


class Calendar(Enum):
    JULIAN = 'Julian'
    GREGORIAN = 'Gregorian'


class Month(IntEnum):
    """Calendar month; Month(n) raises ValueError unless 1 <= n <= 12."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12


class DayOfWeek(IntEnum):
    """Day of the week; DayOfWeek(n) raises ValueError unless 0 <= n <= 6."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


def _dnint(x: float) -> float:
    """Round half away from zero (not banker's rounding)."""
    if x >= 0.0:
        return float(math.floor(x + 0.5))
    return -float(math.floor(-x + 0.5))


@dataclass(frozen=True)
class Date:
    """A calendar date with the time of day as a fraction of a day.

    Attributes:
        calendar: Calendar the date is written in.
        year: Astronomical year number (year 0 = 1 BC).
        month: Month; an int is converted to Month.
        day: Day of the month, 1..31.
        fraction: Time of day as a fraction of a day, in [0, 1).

    Raises:
        ValueError: If month, day or fraction is out of range.
    """

    calendar: Calendar
    year: int
    month: Month
    day: int
    fraction: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, 'month', Month(self.month))
        if not 1 <= self.day <= 31:
            raise ValueError(f'Invalid day of month: {self.day!r}')
        if not 0.0 <= self.fraction < 1.0:
            raise ValueError(f'Invalid day fraction: {self.fraction!r}')

    def to_jd(self) -> JD:
        """Convert to a Julian Day (Meeus 7.1).

        Returns:
            JD of the instant.

        Raises:
            ValueError: If the date lies before JD 0 (-4712 January 1.5).
        """
        if self.month <= Month.FEBRUARY:
            y, m = self.year - 1, int(self.month) + 12
        else:
            y, m = self.year, int(self.month)
        a = math.floor(y / 100.0)
        if self.calendar is Calendar.GREGORIAN:
            b = 2 - a + math.floor(a / 4.0)
        else:
            b = 0
        return JD(
            math.floor(365.25 * (y + 4716))
            + math.floor(30.6001 * (m + 1))
            + self.day
            + self.fraction
            + b
            - 1524.5
        )

    @classmethod
    def from_jd(cls, jd: JD) -> Date:
        """Convert a Julian Day to a calendar date (Meeus chapter 7).

        Day numbers before the Gregorian reform are decoded in the Julian
        calendar. The calendar tag of the result is Gregorian for JD >= 2299068.5
        and Julian otherwise, whatever calendar produced the JD.

        Parameters:
            jd: Julian Day.

        Returns:
            Date including the time of day as a fraction.
        """
        z = math.floor(jd.value + 0.5)
        f = (jd.value + 0.5) - z
        if z < GREGORIAN_START_DAY_NUMBER:
            a = z
        else:
            alpha = math.floor((z - 1867216.25) / 36524.25)
            a = z + 1 + alpha - math.floor(alpha / 4.0)
        b = a + 1524
        c = math.floor((b - 122.1) / 365.25)
        d = math.floor(365.25 * c)
        e = math.floor((b - d) / 30.6001)

        day_fraction = b - d - math.floor(30.6001 * e) + f
        day = math.trunc(day_fraction)
        month = e - 1 if e < 14 else e - 13
        year = c - 4716 if month > 2 else c - 4715
        return cls(
            calendar=Calendar.GREGORIAN if jd.value >= GREGORIAN_TAG_JD else Calendar.JULIAN,
            year=year,
            month=Month(month),
            day=day,
            fraction=day_fraction - day,
        )

    def get_day_of_week(self) -> DayOfWeek:
        """Day of the week; the time of day does not matter."""
        jd = _dnint(self.to_jd().value) - 0.5  # nearest day at 0h
        return DayOfWeek(int(_dnint((jd + 1.5) % DAYS_PER_WEEK)))

    def get_day_of_year(self) -> int:
        """Ordinal day within the year (Meeus 7, p. 65)."""
        if self.calendar is Calendar.JULIAN:
            leap_year = self.year % 4 == 0
        else:
            leap_year = self.year % 4 == 0 and self.year % 400 != 0
        k = 1 if leap_year else 2
        m = int(self.month)
        return (275 * m) // 9 - k * ((m + 9) // 12) + self.day - 30


def find_easter_by_year(year: int) -> Date:
    """Date of Easter Sunday for a year.

    Uses the Gregorian rule from 1583, the first full year of the Gregorian
    calendar, and the Julian rule before that. The returned date has the
    fractional day set to 0.0.
    """
    if year >= FIRST_GREGORIAN_EASTER_YEAR:
        return find_gregorian_easter(year)
    return find_julian_easter(year)


def find_easter_by_calendar(year: int, calendar: Calendar) -> Date:
    if calendar is Calendar.JULIAN:
        return find_julian_easter(year)
    return find_gregorian_easter(year)


def find_gregorian_easter(year: int) -> Date:
    """Date of Easter in the Gregorian calendar (Meeus chapter 8)."""
    # Python floor // and % throughout; truncating division would differ for negative years.
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    ell = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * ell) // 451
    n = (h + ell - 7 * m + 114) // 31
    p = (h + ell - 7 * m + 114) % 31
    return Date(Calendar.GREGORIAN, year, Month(n), p + 1)


def find_julian_easter(year: int) -> Date:
    """Date of Easter in the Julian calendar (Meeus chapter 8)."""
    # Floor // and %, so the 532-year cycle holds for negative years too.
    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    f = (d + e + 114) // 31
    g = (d + e + 114) % 31
    return Date(Calendar.JULIAN, year, Month(f), g + 1)


def find_gregorian_passover(year: int) -> Date:
    """Date of Pesach (15 Nisan) in a Gregorian year, by Gauss' method (Meeus chapter 9).

    Parameters:
        year: Gregorian year.

    Returns:
        Gregorian date in March or April with the fractional day set to 0.0.
    """
    # Floor division for c and s and the % residues; only q is truncated toward zero.
    c = year // 100
    s = (3 * c - 5) // 4
    a = (12 * year + 12) % 19
    b = year % 4
    q = -1.904412361576 + 1.554241796621 * a + 0.25 * b - 0.003177794022 * year + s
    q_int = math.trunc(q)
    r = q - q_int
    j = (q_int + 3 * year + 5 * b + 2 - s) % 7

    if j in (2, 4, 6):
        d = q_int + 23
    elif j == 1 and a > 6 and r > 0.632870370:
        d = q_int + 24
    elif j == 0 and a > 11 and r >= 0.897723765:
        d = q_int + 23
    else:
        d = q_int + 22

    if d > 31:
        return Date(Calendar.GREGORIAN, year, Month.APRIL, d - 31)
    return Date(Calendar.GREGORIAN, year, Month.MARCH, d)
