"""
Analog Bench - Unit Normalisation and Display Scaling

Turns a typed magnitude plus a one-letter unit suffix into a canonical SI
value (ohms, farads, hertz, volts), and picks an SI prefix when showing a raw
SI value back to the user.

Exports:
    Dimension          – what a value measures
    Measurement        – magnitude in SI base units, tagged with its dimension
    normalize          – (magnitude, suffix, dimension) → Measurement
    scale_for_display  – SI value → (scaled value, unit label)
    format_value       – SI value → compact string, e.g. '4.7 kΩ'
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum

from errors import InvalidUnit, NonPositiveInput

log = logging.getLogger(__name__)


class Dimension(Enum):
    RESISTANCE = "resistance"
    CAPACITANCE = "capacitance"
    FREQUENCY = "frequency"
    VOLTAGE = "voltage"


# ---------------------------------------------------------------------------
# Suffix tables (keys are lower case; lookup is case-insensitive)
# ---------------------------------------------------------------------------

RESISTANCE_UNITS: dict[str, float] = {
    "o": 1.0,    # ohms
    "k": 1e3,    # kilo-ohms
    "m": 1e6,    # mega-ohms
}

CAPACITANCE_UNITS: dict[str, float] = {
    "u": 1e-6,
    "µ": 1e-6,
    "n": 1e-9,
    "p": 1e-12,
}

FREQUENCY_UNITS: dict[str, float] = {
    "h": 1.0,
    "k": 1e3,
    "m": 1e6,
}

VOLTAGE_UNITS: dict[str, float] = {
    "v": 1.0,
}

SUFFIX_TABLES: dict[Dimension, dict[str, float]] = {
    Dimension.RESISTANCE: RESISTANCE_UNITS,
    Dimension.CAPACITANCE: CAPACITANCE_UNITS,
    Dimension.FREQUENCY: FREQUENCY_UNITS,
    Dimension.VOLTAGE: VOLTAGE_UNITS,
}

UNIT_SYMBOLS: dict[Dimension, str] = {
    Dimension.RESISTANCE: "Ω",
    Dimension.CAPACITANCE: "F",
    Dimension.FREQUENCY: "Hz",
    Dimension.VOLTAGE: "V",
}

# Display prefixes per dimension, largest threshold first.
_PREFIXES: dict[Dimension, tuple[tuple[float, str], ...]] = {
    Dimension.RESISTANCE: ((1e6, "M"), (1e3, "k"), (1.0, "")),
    Dimension.CAPACITANCE: ((1e-6, "µ"), (1e-9, "n"), (1e-12, "p")),
    Dimension.FREQUENCY: ((1e6, "M"), (1e3, "k"), (1.0, "")),
    Dimension.VOLTAGE: ((1e6, "M"), (1e3, "k"), (1.0, ""), (1e-3, "m"), (1e-6, "µ")),
}


@dataclass(frozen=True)
class Measurement:
    """A magnitude in SI base units (Ω, F, Hz, V)."""

    magnitude: float
    dimension: Dimension

    def __str__(self) -> str:
        return format_value(self.magnitude, self.dimension)


def normalize(raw_magnitude: float, suffix: str, dimension: Dimension) -> Measurement:
    """Scale *raw_magnitude* by the factor for *suffix* in *dimension*.

    Raises:
        InvalidUnit:      *suffix* is not in the dimension's suffix table.
        NonPositiveInput: the magnitude is not finite, or is <= 0 for a
                          resistance, capacitance or frequency.
    """
    table = SUFFIX_TABLES[dimension]
    key = suffix.strip().lower()
    if key not in table:
        accepted = ", ".join(sorted(table))
        log.debug("Rejected %s suffix %r", dimension.value, suffix)
        raise InvalidUnit(
            f"Invalid unit {suffix!r} for {dimension.value}. Use one of: {accepted}"
        )

    if not math.isfinite(raw_magnitude):
        raise NonPositiveInput(f"{dimension.value.capitalize()} must be a finite number")
    if dimension is not Dimension.VOLTAGE and raw_magnitude <= 0:
        raise NonPositiveInput(
            f"{dimension.value.capitalize()} must be a positive number, got {raw_magnitude:g}"
        )

    return Measurement(raw_magnitude * table[key], dimension)


def scale_for_display(value: float, dimension: Dimension) -> tuple[float, str]:
    """Return ``(scaled_value, unit_label)`` for presenting an SI *value*.

    The largest prefix whose threshold is <= |value| wins (thresholds are
    inclusive, so 1000 Ω is shown as 1 kΩ).  Anything below the smallest
    threshold uses the smallest prefix; zero uses the first unscaled prefix.
    The sign of *value* is kept.
    """
    prefixes = _PREFIXES[dimension]
    symbol = UNIT_SYMBOLS[dimension]
    magnitude = abs(value)

    if magnitude == 0:
        prefix = next((p for t, p in prefixes if t == 1.0), prefixes[-1][1])
        return 0.0, prefix + symbol

    for threshold, prefix in prefixes:
        if magnitude >= threshold:
            return value / threshold, prefix + symbol

    threshold, prefix = prefixes[-1]
    return value / threshold, prefix + symbol


def format_value(value: float, dimension: Dimension, digits: int = 4) -> str:
    """Format *value* with an SI prefix, e.g. ``'4.7 kΩ'`` or ``'-5 V'``."""
    scaled, label = scale_for_display(value, dimension)
    return f"{scaled:.{digits}g} {label}"
