"""Jupiter VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

JUPITER_CONFIG = PlanetConfig(
    name='Jupiter',
    vsop87_extension='jup',
    pymeeus_module='pymeeus.Jupiter',
    accuracy_span_years=2000.0,
)
