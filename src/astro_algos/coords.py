"""Coordinate types and transformations between equatorial and ecliptic frames.

Equatorial and ecliptic coordinates are tied to an equinox; the equinox fixes
the obliquity used when rotating between the two frames (Meeus chapter 13).
Coordinates referred to different equinoxes are related by precession
(Meeus chapter 21).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from astro_algos.angle import Angle
from astro_algos.constants import (
    ARCSEC_PER_DEGREE,
    B1950_JD,
    DAYS_PER_JULIAN_CENTURY,
    DEGREES_PER_CIRCLE,
    J2000_JD,
    OBLIQUITY_B1950_DMS,
    OBLIQUITY_J2000_DMS,
)
from astro_algos.time_utils import JD


class Equinox(Enum):
    """Standard equinox with its epoch (JD) and mean obliquity of the ecliptic."""

    J2000 = (J2000_JD, OBLIQUITY_J2000_DMS)
    B1950 = (B1950_JD, OBLIQUITY_B1950_DMS)

    def __init__(self, jd: float, obliquity_dms: tuple[int, int, float]) -> None:
        self.jd = JD(jd)
        self.obliquity = Angle.from_dms(*obliquity_dms)


@dataclass(frozen=True)
class HeliocentricSpherical:
    """Sun-centred position on the mean ecliptic and equinox of J2000.0.

    The radius is in astronomical units (149597870700 m).
    """

    longitude: Angle
    latitude: Angle
    radius: float


@dataclass(frozen=True)
class Equatorial:
    """Right ascension and declination referred to an equinox."""

    right_ascension: Angle
    declination: Angle
    equinox: Equinox = Equinox.J2000

    def to_ecliptic(self) -> Ecliptic:
        """Rotate into ecliptic coordinates of the same equinox (Meeus 13.1, 13.2)."""
        eps = self.equinox.obliquity
        alpha = self.right_ascension
        delta = self.declination
        longitude = Angle.atan2(alpha.sin() * eps.cos() + delta.tan() * eps.sin(), alpha.cos())
        latitude = Angle.asin(delta.sin() * eps.cos() - delta.cos() * eps.sin() * alpha.sin())
        return Ecliptic(longitude, latitude, self.equinox)


@dataclass(frozen=True)
class Ecliptic:
    """Ecliptic longitude and latitude referred to an equinox."""

    longitude: Angle
    latitude: Angle
    equinox: Equinox = Equinox.J2000

    def to_equatorial(self) -> Equatorial:
        """Rotate into equatorial coordinates of the same equinox (Meeus 13.3, 13.4)."""
        eps = self.equinox.obliquity
        lam = self.longitude
        beta = self.latitude
        right_ascension = Angle.atan2(lam.sin() * eps.cos() - beta.tan() * eps.sin(), lam.cos())
        declination = Angle.asin(beta.sin() * eps.cos() + beta.cos() * eps.sin() * lam.sin())
        return Equatorial(right_ascension, declination, self.equinox)


def _arcsec(value: float) -> Angle:
    return Angle.from_degrees(value / ARCSEC_PER_DEGREE)


def precess_ecliptic(
    longitude: Angle,
    latitude: Angle,
    jd_from: JD,
    jd_to: JD,
) -> tuple[Angle, Angle]:
    """Precess ecliptic coordinates from one mean equinox to another (Meeus 21.5, 21.7).

    Parameters:
        longitude: Ecliptic longitude referred to the equinox of jd_from.
        latitude: Ecliptic latitude referred to the equinox of jd_from.
        jd_from: Epoch of the starting equinox.
        jd_to: Epoch of the final equinox.

    Returns:
        (longitude, latitude) referred to the equinox of jd_to; longitude in
        [0, 360] degrees.
    """
    big_t = jd_from.centuries_since_j2000()
    t = (jd_to.value - jd_from.value) / DAYS_PER_JULIAN_CENTURY

    eta = _arcsec(
        (47.0029 - 0.06603 * big_t + 0.000598 * big_t**2) * t
        + (-0.03302 + 0.000598 * big_t) * t**2
        + 0.000060 * t**3
    )
    big_pi = Angle.from_degrees(174.876384) + _arcsec(
        3289.4789 * big_t + 0.60622 * big_t**2 - (869.8089 + 0.50491 * big_t) * t + 0.03536 * t**2
    )
    p = _arcsec(
        (5029.0966 + 2.22226 * big_t - 0.000042 * big_t**2) * t
        + (1.11113 - 0.000042 * big_t) * t**2
        - 0.000006 * t**3
    )

    node = big_pi - longitude
    a = eta.cos() * latitude.cos() * node.sin() - eta.sin() * latitude.sin()
    b = latitude.cos() * node.cos()
    c = eta.cos() * latitude.sin() + eta.sin() * latitude.cos() * node.sin()

    precessed = p + big_pi - Angle.atan2(a, b)
    return (
        precessed.wrap(Angle.from_degrees(0.0), Angle.from_degrees(DEGREES_PER_CIRCLE)),
        Angle.asin(c),
    )
