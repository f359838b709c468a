"""VSOP87 coefficient table sources: IMCCE data files and PyMeeus' bundled tables.

The IMCCE files (e.g. VSOP87B.ear) hold one header line per series followed by
fixed-format term lines (FORTRAN 1X,4I1,I5,12I3,F15.11,2F18.11,F14.11,F20.11):
column 2 is the version, 3 the body, 4 the variable (1=L, 2=B, 3=R) and 5 the
power of tau; the last three fields are the amplitude A, phase B and frequency C.
"""

from __future__ import annotations

import importlib
import logging
from pathlib import Path

from astro_algos.constants import MAX_TAU_POWER, PYMEEUS_AMPLITUDE_SCALE
from astro_algos.planets.base import Frame, PlanetConfig, PlanetTables, TermSeries

logger = logging.getLogger(__name__)

# Version digit (file column 2) -> frame; only heliocentric spherical variants qualify.
_VERSION_FRAMES: dict[int, Frame] = {
    2: Frame.J2000,  # VSOP87B
    4: Frame.EQUINOX_OF_DATE,  # VSOP87D
}
_VERSION_LETTERS = ('B', 'D')


def read_vsop87_file(filepath: str | Path) -> PlanetTables:
    """Read an IMCCE VSOP87B or VSOP87D file for one planet.

    Parameters:
        filepath: Path to the data file.

    Returns:
        PlanetTables with the L, B and R series and the file's frame.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not a heliocentric spherical VSOP87 file or a
            term line is malformed.
    """
    path = Path(filepath)
    series: dict[int, list[list[list[float]]]] = {1: [], 2: [], 3: []}
    frame: Frame | None = None
    with path.open() as f:
        for line_no, line in enumerate(f, start=1):
            if not line.strip() or 'VSOP87' in line:
                continue
            try:
                version = int(line[1])
                variable = int(line[3])
                power = int(line[4])
                amplitude, phase, frequency = (float(v) for v in line.split()[-3:])
            except (IndexError, ValueError) as e:
                raise ValueError(f'{path} line {line_no}: malformed VSOP87 term: {line!r}') from e
            if version not in _VERSION_FRAMES:
                raise ValueError(
                    f'{path} line {line_no}: VSOP87 version {version} is not heliocentric spherical'
                )
            if frame is None:
                frame = _VERSION_FRAMES[version]
            elif frame is not _VERSION_FRAMES[version]:
                raise ValueError(f'{path} line {line_no}: mixed VSOP87 versions')
            if variable not in series or power > MAX_TAU_POWER:
                raise ValueError(
                    f'{path} line {line_no}: bad variable {variable} or power {power}'
                )
            term_sets = series[variable]
            while len(term_sets) <= power:
                term_sets.append([])
            term_sets[power].append([amplitude, phase, frequency])
    if frame is None:
        raise ValueError(f'{path}: no VSOP87 terms found')
    tables = PlanetTables(
        longitude=TermSeries.from_triples(series[1]),
        latitude=TermSeries.from_triples(series[2]),
        radius=TermSeries.from_triples(series[3]),
        frame=frame,
    )
    logger.debug(
        'Read %s: %d L, %d B, %d R terms (%s)',
        path,
        len(tables.longitude),
        len(tables.latitude),
        len(tables.radius),
        frame.value,
    )
    return tables


def find_vsop87_file(directory: str | Path, config: PlanetConfig) -> Path:
    """Return the VSOP87B (preferred) or VSOP87D file for a planet in a directory.

    Raises:
        FileNotFoundError: If neither file exists.
    """
    base = Path(directory)
    candidates = [base / f'VSOP87{v}.{config.vsop87_extension}' for v in _VERSION_LETTERS]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    raise FileNotFoundError(
        f'No VSOP87 file for {config.name} under {base} '
        f'(looked for {", ".join(c.name for c in candidates)})'
    )


def pymeeus_tables(config: PlanetConfig) -> PlanetTables:
    """Build a planet's tables from the VSOP87 data shipped with PyMeeus.

    PyMeeus carries the complete equinox-of-date (VSOP87D) series for every
    planet. Its ``VSOP87_L_J2000``/``VSOP87_B_J2000`` Earth tables are the
    abridged ones from Meeus' appendix and are not used. The radius series is
    the same in both variants.

    Parameters:
        config: Planet configuration naming the PyMeeus module.

    Returns:
        PlanetTables with amplitudes converted to radians / AU.
    """
    module = importlib.import_module(config.pymeeus_module)
    tables = PlanetTables(
        longitude=TermSeries.from_triples(module.VSOP87_L, PYMEEUS_AMPLITUDE_SCALE),
        latitude=TermSeries.from_triples(module.VSOP87_B, PYMEEUS_AMPLITUDE_SCALE),
        radius=TermSeries.from_triples(module.VSOP87_R, PYMEEUS_AMPLITUDE_SCALE),
        frame=Frame.EQUINOX_OF_DATE,
    )
    logger.debug(
        'Loaded %s tables from %s: %d L, %d B, %d R terms (%s)',
        config.name,
        config.pymeeus_module,
        len(tables.longitude),
        len(tables.latitude),
        len(tables.radius),
        tables.frame.value,
    )
    return tables
