"""Julian Day value type.

A Julian Day is the number of days, as a real number, since noon of
January 1 in the year -4712 (proleptic Julian calendar). It is the time
argument of every other calculation in this package.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from astro_algos.constants import DAYS_PER_JULIAN_CENTURY, DAYS_PER_JULIAN_MILLENNIUM, J2000_JD

if TYPE_CHECKING:
    from astro_algos.dates import Date


@dataclass(frozen=True, order=True)
class JD:
    """A Julian Day. Must be finite and non-negative.

    Raises:
        ValueError: On construction from a negative, NaN or infinite value.
    """

    value: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.value) and self.value >= 0.0):
            raise ValueError(f'Invalid JD value: {self.value!r}')
        object.__setattr__(self, 'value', float(self.value))

    def __float__(self) -> float:
        return self.value

    def millennia_since_j2000(self) -> float:
        """Julian millennia from J2000.0 (the VSOP87 time argument tau)."""
        return (self.value - J2000_JD) / DAYS_PER_JULIAN_MILLENNIUM

    def centuries_since_j2000(self) -> float:
        """Julian centuries from J2000.0."""
        return (self.value - J2000_JD) / DAYS_PER_JULIAN_CENTURY

    @classmethod
    def from_date(cls, date: Date) -> JD:
        return date.to_jd()

    def to_date(self) -> Date:
        from astro_algos.dates import Date

        return Date.from_jd(self)
