"""Heliocentric positions of the eight planets from the VSOP87 theory (Meeus chapter 32).

Positions are referred to the mean ecliptic and equinox of J2000.0. The
series stay accurate for a couple of millennia around 2000 for Jupiter and
Saturn, 4000 years for the inner planets and 6000 years for Uranus and
Neptune (see PlanetConfig.accuracy_span_years). Beyond that the truncation
error grows; it is not detected or reported.
"""

from __future__ import annotations

import functools
import logging
from enum import Enum

from astro_algos.angle import Angle
from astro_algos.config import get_vsop87_path
from astro_algos.constants import (
    DEGREES_PER_CIRCLE,
    J2000_JD,
    QUARTER_CIRCLE_DEGREES,
)
from astro_algos.coords import HeliocentricSpherical, precess_ecliptic
from astro_algos.planets.base import Frame, PlanetConfig, PlanetTables, TermSeries, sum_terms
from astro_algos.planets.earth import EARTH_CONFIG
from astro_algos.planets.jupiter import JUPITER_CONFIG
from astro_algos.planets.mars import MARS_CONFIG
from astro_algos.planets.mercury import MERCURY_CONFIG
from astro_algos.planets.neptune import NEPTUNE_CONFIG
from astro_algos.planets.saturn import SATURN_CONFIG
from astro_algos.planets.uranus import URANUS_CONFIG
from astro_algos.planets.venus import VENUS_CONFIG
from astro_algos.planets.vsop87 import find_vsop87_file, pymeeus_tables, read_vsop87_file
from astro_algos.time_utils import JD

__all__ = [
    'Frame',
    'Planet',
    'PlanetConfig',
    'PlanetTables',
    'TermSeries',
    'load_tables',
    'position',
    'sum_terms',
]

logger = logging.getLogger(__name__)

_LONGITUDE_LOW = Angle.from_degrees(0.0)
_LONGITUDE_HIGH = Angle.from_degrees(DEGREES_PER_CIRCLE)
_LATITUDE_LOW = Angle.from_degrees(-QUARTER_CIRCLE_DEGREES)
_LATITUDE_HIGH = Angle.from_degrees(QUARTER_CIRCLE_DEGREES)
_J2000 = JD(J2000_JD)


class Planet(Enum):
    """The planets of the solar system."""

    MERCURY = MERCURY_CONFIG
    VENUS = VENUS_CONFIG
    EARTH = EARTH_CONFIG
    MARS = MARS_CONFIG
    JUPITER = JUPITER_CONFIG
    SATURN = SATURN_CONFIG
    URANUS = URANUS_CONFIG
    NEPTUNE = NEPTUNE_CONFIG

    @property
    def config(self) -> PlanetConfig:
        return self.value

    def get_location(self, jd: JD) -> HeliocentricSpherical:
        """Heliocentric position of the planet at a moment, for the J2000.0 equinox."""
        return position(self, jd)


@functools.lru_cache(maxsize=None)
def load_tables(planet: Planet) -> PlanetTables:
    """Return the coefficient tables of a planet, loading them on first use.

    Tables come from the IMCCE files under VSOP87_PATH when that is set, else
    from PyMeeus. The result is cached for the life of the process; call
    ``load_tables.cache_clear()`` after changing VSOP87_PATH.

    Raises:
        FileNotFoundError: If VSOP87_PATH is set but holds no file for the planet.
        ValueError: If a data file is malformed.
    """
    cfg = planet.config
    directory = get_vsop87_path()
    if directory is None:
        return pymeeus_tables(cfg)
    logger.debug('Using VSOP87 files under %s for %s', directory, cfg.name)
    return read_vsop87_file(find_vsop87_file(directory, cfg))


def position(planet: Planet, jd: JD) -> HeliocentricSpherical:
    """Compute the heliocentric spherical position of a planet.

    Parameters:
        planet: Planet to locate.
        jd: Moment (dynamical time) as a Julian Day.

    Returns:
        Longitude in [0, 360] degrees and latitude in [-90, 90] degrees, both
        referred to the mean ecliptic and equinox of J2000.0, and the radius
        vector in AU.
    """
    tables = load_tables(planet)
    tau = jd.millennia_since_j2000()
    longitude = Angle.from_radians(sum_terms(tables.longitude, tau))
    latitude = Angle.from_radians(sum_terms(tables.latitude, tau))
    radius = sum_terms(tables.radius, tau)
    if tables.frame is Frame.EQUINOX_OF_DATE:
        longitude, latitude = precess_ecliptic(longitude, latitude, jd, _J2000)
    return HeliocentricSpherical(
        longitude=longitude.wrap(_LONGITUDE_LOW, _LONGITUDE_HIGH),
        latitude=latitude.wrap(_LATITUDE_LOW, _LATITUDE_HIGH),
        radius=radius,
    )
