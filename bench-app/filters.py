"""
Analog Bench - Sallen-Key Filter Design

A Butterworth or Chebyshev filter of 2, 4 or 6 poles is built from N/2
cascaded Sallen-Key stages (pole pairs).  Each stage uses equal resistors
R1 = R2 = R and equal capacitors C1 = C2 = C; its gain is set by the
feedback divider RA / RB and taken from a fixed table.

Stage cutoff:
    fc = 1 / (2π · (R · kL) · (C · kH))

where kL and kH are the table's low-pass and high-pass frequency factors
for that pole pair (1.0 for every Butterworth stage).  R is scaled by kL and
C by kH whatever the pass type.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple

import bench_constants
from errors import InvalidPoleCount, InvalidPolePair
from formulas import cutoff_frequency, sallen_key_component_value

log = logging.getLogger(__name__)


class Topology(Enum):
    BUTTERWORTH = "Butterworth"
    CHEBYSHEV_05DB = "0.5 dB Chebyshev"
    CHEBYSHEV_2DB = "2 dB Chebyshev"


class PassType(Enum):
    LOW = "low"
    HIGH = "high"


class PoleFactor(NamedTuple):
    gain: float
    low_factor: float
    high_factor: float


_TABLES = {
    Topology.BUTTERWORTH: bench_constants.BUTTERWORTH_TABLE,
    Topology.CHEBYSHEV_05DB: bench_constants.CHEBYSHEV_05DB_TABLE,
    Topology.CHEBYSHEV_2DB: bench_constants.CHEBYSHEV_2DB_TABLE,
}

POLE_COUNTS = (2, 4, 6)


@dataclass(frozen=True)
class FilterSpec:
    topology: Topology
    pole_count: int
    pass_type: PassType
    pole_factors: tuple[PoleFactor, ...]

    @property
    def pole_pairs(self) -> int:
        return len(self.pole_factors)

    def factor(self, pole_pair: int) -> PoleFactor:
        """Table row for the 1-based *pole_pair*."""
        if not 1 <= pole_pair <= self.pole_pairs:
            raise InvalidPolePair(
                f"Pole pair {pole_pair} out of range 1..{self.pole_pairs}"
            )
        return self.pole_factors[pole_pair - 1]


@dataclass(frozen=True)
class SallenKeyStage:
    """Computed component values for one pole pair."""

    pole_pair: int
    gain: float
    r: float
    c: float
    ra: float
    rb: float
    cutoff: float
    components: tuple[tuple[str, tuple[str, float]], ...]

    def __str__(self) -> str:
        return (
            f"Pole pair {self.pole_pair}: gain {self.gain:g}, "
            f"RA {self.ra:g} ohms, RB {self.rb:g} ohms, fc {self.cutoff:.4g} Hz"
        )


def filter_spec(topology: Topology, pole_count: int, pass_type: PassType) -> FilterSpec:
    """Build the read-only FilterSpec for a tabulated (topology, poles) pair.

    Raises:
        InvalidPoleCount: *pole_count* is not 2, 4 or 6.
    """
    rows = _TABLES[topology].get(pole_count)
    if rows is None:
        raise InvalidPoleCount(
            f"Only 2, 4, or 6 poles are allowed, got {pole_count!r}"
        )
    return FilterSpec(topology, pole_count, pass_type, tuple(PoleFactor(*row) for row in rows))


def component_roles(pass_type: PassType, r: float, c: float) -> tuple:
    """Pair the Sallen-Key impedances Z1..Z4 with (part name, value), in order.

    Pass the result to ``dict()`` for lookup by impedance name.
    """
    if pass_type is PassType.HIGH:
        return (("Z1", ("C1", c)), ("Z2", ("C2", c)), ("Z3", ("R1", r)), ("Z4", ("R2", r)))
    return (("Z1", ("R1", r)), ("Z2", ("R2", r)), ("Z3", ("C1", c)), ("Z4", ("C2", c)))


def design_stage(spec: FilterSpec, pole_pair: int, r: float, c: float, rb: float) -> SallenKeyStage:
    """Compute RA, the stage cutoff and the Z1..Z4 roles for one pole pair.

    Raises:
        InvalidPolePair:  *pole_pair* is outside 1..spec.pole_pairs.
        InvalidGain:      the tabulated gain is not above 1.
        DivisionByZero / NonPositiveInput: r, c or rb are not positive.
    """
    row = spec.factor(pole_pair)
    ra = sallen_key_component_value(row.gain, rb)
    fc = cutoff_frequency(r * row.low_factor, c * row.high_factor)
    log.debug("%s %d-pole pair %d: gain=%g ra=%g fc=%g",
              spec.topology.value, spec.pole_count, pole_pair, row.gain, ra, fc)
    return SallenKeyStage(
        pole_pair=pole_pair,
        gain=row.gain,
        r=r,
        c=c,
        ra=ra,
        rb=rb,
        cutoff=fc,
        components=component_roles(spec.pass_type, r, c),
    )
