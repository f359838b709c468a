"""Saturn VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

SATURN_CONFIG = PlanetConfig(
    name='Saturn',
    vsop87_extension='sat',
    pymeeus_module='pymeeus.Saturn',
    accuracy_span_years=2000.0,
)
