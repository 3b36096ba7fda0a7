"""
Analog Bench - Standard (NPV) Resistor Resolution

Finds the nearest preferred value in the fixed standard series and, when no
single part matches, lists two-resistor series / parallel pairs that come
closer to the target than the best single part.

Exports:
    nearest               – nearest standard value by absolute distance
    resolve               – nearest value plus its distance to the target
    suggest_combinations  – two-part pairs strictly better than a tolerance
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Sequence

from bench_constants import STANDARD_SERIES
from errors import NonPositiveInput

log = logging.getLogger(__name__)


class Resolution(NamedTuple):
    value: float
    difference: float


class CombinationKind(Enum):
    SERIES = "series"
    PARALLEL = "parallel"


@dataclass(frozen=True)
class Combination:
    """Two standard resistors joined in series or in parallel."""

    kind: CombinationKind
    r1: float
    r2: float

    @property
    def value(self) -> float:
        if self.kind is CombinationKind.SERIES:
            return self.r1 + self.r2
        return 1 / (1 / self.r1 + 1 / self.r2)

    def __str__(self) -> str:
        joiner = "+" if self.kind is CombinationKind.SERIES else "||"
        return f"{self.kind.value.capitalize()}: {self.r1:g} ohms {joiner} {self.r2:g} ohms"


def _check_target(target: float) -> None:
    if not math.isfinite(target) or target <= 0:
        raise NonPositiveInput(f"Target resistance must be greater than zero, got {target!r}")


def resolve(target: float, series: Sequence[float] = STANDARD_SERIES) -> Resolution:
    """Return the nearest member of *series* and its absolute distance.

    Linear scan in series order; on a tie the value seen first (the lower one
    for an ascending series) is kept.  Targets outside the series range snap
    to the nearest end.
    """
    _check_target(target)

    best_value = series[0]
    best_diff = abs(target - best_value)

    for candidate in series[1:]:
        diff = abs(target - candidate)
        if diff < best_diff:
            best_value = candidate
            best_diff = diff

    log.debug("Resolved %g ohms to %g ohms (diff %g)", target, best_value, best_diff)
    return Resolution(best_value, best_diff)


def nearest(target: float, series: Sequence[float] = STANDARD_SERIES) -> float:
    """Return the standard value closest to *target* (see :func:`resolve`)."""
    return resolve(target, series).value


def suggest_combinations(
    target: float,
    series: Sequence[float] = STANDARD_SERIES,
    tolerance: float | None = None,
) -> list[Combination]:
    """List every ordered pair from *series* whose series or parallel value is
    strictly closer to *target* than *tolerance*.

    *tolerance* defaults to the distance of the best single standard value, so
    only pairs that beat a single part are reported.  For each (r1, r2) the
    series test runs before the parallel test; pairs are visited in series
    order for both r1 and r2.
    """
    _check_target(target)
    if tolerance is None:
        tolerance = resolve(target, series).difference

    found: list[Combination] = []
    for r1 in series:
        for r2 in series:
            if abs((r1 + r2) - target) < tolerance:
                found.append(Combination(CombinationKind.SERIES, r1, r2))
            if abs(1 / (1 / r1 + 1 / r2) - target) < tolerance:
                found.append(Combination(CombinationKind.PARALLEL, r1, r2))

    log.debug("%d combinations beat tolerance %g for %g ohms", len(found), tolerance, target)
    return found
