"""Venus VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

VENUS_CONFIG = PlanetConfig(
    name='Venus',
    vsop87_extension='ven',
    pymeeus_module='pymeeus.Venus',
    accuracy_span_years=4000.0,
)
