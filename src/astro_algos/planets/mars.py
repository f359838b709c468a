"""Mars VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

MARS_CONFIG = PlanetConfig(
    name='Mars',
    vsop87_extension='mar',
    pymeeus_module='pymeeus.Mars',
    accuracy_span_years=4000.0,
)
