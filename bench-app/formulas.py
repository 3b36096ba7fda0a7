"""
Analog Bench - Component Formulas

Plain functions for the op-amp, RC filter, resistor network and Sallen-Key
calculations.  Inputs are SI values (ohms, farads, hertz, volts).
"""

from __future__ import annotations

import math
from typing import Iterable

from errors import DivisionByZero, InvalidGain, NonPositiveInput


def _require_positive(name: str, value: float) -> None:
    if value == 0:
        raise DivisionByZero(f"{name} cannot be zero")
    if value < 0:
        raise NonPositiveInput(f"{name} must be positive, got {value:g}")


# ---------------------------------------------------------------------------
# RC filters
# ---------------------------------------------------------------------------

def cutoff_frequency(r: float, c: float, factor: float = 1.0) -> float:
    """Return ``1 / (2π·r·c·factor)`` in hertz.

    Raises:
        DivisionByZero:   r, c or factor is zero.
        NonPositiveInput: r, c or factor is negative.
    """
    _require_positive("Resistance", r)
    _require_positive("Capacitance", c)
    _require_positive("Frequency factor", factor)
    return 1 / (r * c * 2 * math.pi * factor)


def required_resistance(c: float, frequency: float) -> float:
    """Resistance giving cutoff *frequency* with capacitor *c*."""
    _require_positive("Capacitance", c)
    _require_positive("Frequency", frequency)
    return 1 / (2 * math.pi * c * frequency)


def required_capacitance(r: float, frequency: float) -> float:
    """Capacitance giving cutoff *frequency* with resistor *r*."""
    _require_positive("Resistance", r)
    _require_positive("Frequency", frequency)
    return 1 / (2 * math.pi * r * frequency)


# ---------------------------------------------------------------------------
# Op-amps
# ---------------------------------------------------------------------------

def inverting_gain(r_feedback: float, r_input: float) -> float:
    """Closed-loop gain ``-Rf / Rin`` of an inverting amplifier."""
    if r_input == 0:
        raise DivisionByZero("Input resistor cannot be zero")
    return -r_feedback / r_input


def non_inverting_gain(r_feedback: float, r_ground: float) -> float:
    """Closed-loop gain ``1 + Rf / Rg`` of a non-inverting amplifier."""
    if r_ground == 0:
        raise DivisionByZero("Ground resistor cannot be zero")
    return 1 + r_feedback / r_ground


def output_voltage(gain: float, v_in: float) -> float:
    return gain * v_in


# ---------------------------------------------------------------------------
# Resistor networks
# ---------------------------------------------------------------------------

def series_resistance(values: Iterable[float]) -> float:
    return float(sum(values))


def parallel_resistance(values: Iterable[float]) -> float:
    """Reciprocal of the summed reciprocals.

    Raises:
        DivisionByZero: a value is zero, or *values* is empty.
    """
    total_inverse = 0.0
    for r in values:
        if r == 0:
            raise DivisionByZero("Resistor value cannot be zero in a parallel combination")
        total_inverse += 1 / r
    if total_inverse == 0:
        raise DivisionByZero("A parallel combination needs at least one resistor")
    return 1 / total_inverse


def combine_networks(first: float, second: float, in_series: bool) -> float:
    """Join two sub-network totals in series or in parallel."""
    if in_series:
        return series_resistance((first, second))
    return parallel_resistance((first, second))


# ---------------------------------------------------------------------------
# Sallen-Key
# ---------------------------------------------------------------------------

def sallen_key_component_value(gain: float, rb: float) -> float:
    """Return RA for a stage of *gain* with ground-leg resistor *rb*.

    ``RA = RB · (gain - 1)``.

    Raises:
        InvalidGain:      gain <= 1.0.
        NonPositiveInput: rb <= 0.
    """
    if gain <= 1.0:
        raise InvalidGain(f"Invalid gain value ({gain:g}). Must be greater than 1.")
    if rb <= 0:
        raise NonPositiveInput(f"RB must be positive, got {rb:g}")
    return rb * (gain - 1)
