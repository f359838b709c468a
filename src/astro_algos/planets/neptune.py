"""Neptune VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

NEPTUNE_CONFIG = PlanetConfig(
    name='Neptune',
    vsop87_extension='nep',
    pymeeus_module='pymeeus.Neptune',
    accuracy_span_years=6000.0,
)
