"""Uranus VSOP87 table configuration."""

from __future__ import annotations

from astro_algos.planets.base import PlanetConfig

URANUS_CONFIG = PlanetConfig(
    name='Uranus',
    vsop87_extension='ura',
    pymeeus_module='pymeeus.Uranus',
    accuracy_span_years=6000.0,
)
