"""VSOP87 coefficient tables, per-planet configuration, and the series summation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

from astro_algos.constants import MAX_TAU_POWER


class Frame(Enum):
    """Reference frame a set of longitude/latitude series is expressed in."""

    J2000 = 'mean ecliptic and equinox J2000.0'
    EQUINOX_OF_DATE = 'mean ecliptic and equinox of date'


@dataclass(frozen=True, eq=False)
class TermSeries:
    """Periodic series of one quantity (L, B or R).

    ``terms[k]`` is the term set multiplied by tau**k: a read-only (n, 3) array
    of (amplitude, phase, frequency) rows. Any term set may be empty.
    """

    terms: tuple[np.ndarray, ...]

    @classmethod
    def from_triples(
        cls,
        term_sets: Sequence[Sequence[Sequence[float]]],
        amplitude_scale: float = 1.0,
    ) -> TermSeries:
        """Build a series from nested (amplitude, phase, frequency) triples.

        Parameters:
            term_sets: One sequence of triples per power of tau, lowest first.
            amplitude_scale: Factor applied to every amplitude (e.g. 1e-8 when
                the source stores amplitudes in units of 1e-8).

        Returns:
            TermSeries with at most six term sets.

        Raises:
            ValueError: If there are more than six term sets or a term is not a triple.
        """
        if len(term_sets) > MAX_TAU_POWER + 1:
            raise ValueError(
                f'expected at most {MAX_TAU_POWER + 1} term sets, got {len(term_sets)}'
            )
        arrays = []
        for power, term_set in enumerate(term_sets):
            arr = np.array(term_set, dtype=np.float64)
            if arr.size == 0:
                arr = np.zeros((0, 3), dtype=np.float64)
            elif arr.ndim != 2 or arr.shape[1] != 3:
                raise ValueError(f'term set for tau**{power} is not a list of triples')
            arr[:, 0] *= amplitude_scale
            arr.setflags(write=False)
            arrays.append(arr)
        return cls(tuple(arrays))

    def __len__(self) -> int:
        """Total number of terms over all powers of tau."""
        return sum(len(t) for t in self.terms)


@dataclass(frozen=True, eq=False)
class PlanetTables:
    """The three VSOP87 series of one planet and the frame of L and B."""

    longitude: TermSeries
    latitude: TermSeries
    radius: TermSeries
    frame: Frame = Frame.J2000


@dataclass(frozen=True)
class PlanetConfig:
    """Planet identity and where its coefficient tables come from.

    accuracy_span_years is the half-width, in years around 2000, of the interval
    over which the published VSOP87 accuracy holds. Positions outside it are
    still computed, with growing truncation error.
    """

    name: str
    vsop87_extension: str
    pymeeus_module: str
    accuracy_span_years: float


def sum_terms(series: TermSeries, tau: float) -> float:
    """Evaluate a series: sum over k of tau**k * sum(A * cos(B + C * tau)).

    Parameters:
        series: Term sets for tau**0 .. tau**5.
        tau: Julian millennia from J2000.0.

    Returns:
        Value of the quantity (radians for L and B, AU for R).
    """
    total = 0.0
    for power, terms in enumerate(series.terms):
        if len(terms) == 0:
            continue
        periodic = terms[:, 0] * np.cos(terms[:, 1] + terms[:, 2] * tau)
        total += float(periodic.sum()) * tau**power
    return total
