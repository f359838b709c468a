"""Mercury VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

MERCURY_CONFIG = PlanetConfig(
    name='Mercury',
    vsop87_extension='mer',
    pymeeus_module='pymeeus.Mercury',
    accuracy_span_years=4000.0,
)
