"""Earth VSOP87 table configuration (Meeus chapter 32, appendix III)."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

EARTH_CONFIG = PlanetConfig(
    name='Earth',
    vsop87_extension='ear',
    pymeeus_module='pymeeus.Earth',
    accuracy_span_years=4000.0,
)
