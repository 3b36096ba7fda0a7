"""
Analog Bench - Resistor Color Code Codec

Converts between a resistance in ohms and the 3-band color code
(digit, digit, multiplier) printed on through-hole resistors.

Exports:
    ColorBand             – the 12 band colors
    decode                – 3 bands → resistance in ohms
    encode                – resistance → 3 bands
    standard_color_code   – resistance → (nearest standard value, its 3 bands)
    bands_to_description  – bands → 'Yellow-Violet-Red (4.7 kΩ)'
"""

from __future__ import annotations

import logging
import math
from enum import Enum

from bench_constants import COLOR_ALIASES, COLOR_BANDS, MULTIPLIER_EXPONENTS
from errors import InvalidColorBand, NonPositiveInput, UnrepresentableValue
from standard_values import nearest
from units import Dimension, format_value

log = logging.getLogger(__name__)

MIN_EXPONENT = -2   # silver
MAX_EXPONENT = 9    # white


class ColorBand(str, Enum):
    BLACK = "black"
    BROWN = "brown"
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    VIOLET = "violet"
    GRAY = "gray"
    WHITE = "white"
    GOLD = "gold"
    SILVER = "silver"

    @classmethod
    def parse(cls, name: ColorBand | str) -> ColorBand:
        """Look up a band by name, ignoring case and surrounding whitespace."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower()
        key = COLOR_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise InvalidColorBand(f"Unknown color band {name!r}") from None

    @property
    def digit(self) -> int | None:
        """Significant-digit value, or None for gold / silver."""
        return COLOR_BANDS[self.value][0]

    @property
    def exponent(self) -> int:
        """Power of ten applied when this color is the multiplier band."""
        return MULTIPLIER_EXPONENTS[self.value]

    @property
    def rgb(self) -> tuple[int, int, int]:
        return COLOR_BANDS[self.value][1]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_DIGIT_TO_BAND = {band.digit: band for band in ColorBand if band.digit is not None}
_EXPONENT_TO_BAND = {band.exponent: band for band in ColorBand}


def _digit_band(name: ColorBand | str) -> ColorBand:
    band = ColorBand.parse(name)
    if band.digit is None:
        raise InvalidColorBand(f"{band.label} is a multiplier-only color, not a digit band")
    return band


def decode(band1: ColorBand | str, band2: ColorBand | str,
           multiplier: ColorBand | str) -> float:
    """Return the resistance in ohms for a 3-band color code.

    *band1* and *band2* must be digit colors (black..white); *multiplier* may
    be any of the 12 colors (gold = x0.1, silver = x0.01).

    Raises:
        InvalidColorBand: unknown name, or gold / silver in a digit position.
    """
    first = _digit_band(band1)
    second = _digit_band(band2)
    mult = ColorBand.parse(multiplier)

    significant = first.digit * 10 + second.digit
    if mult.exponent >= 0:
        return float(significant * 10 ** mult.exponent)
    return significant / 10 ** -mult.exponent


def encode(resistance: float) -> tuple[ColorBand, ColorBand, ColorBand]:
    """Return the (digit, digit, multiplier) bands for *resistance*.

    Only the first two significant digits are kept, truncated not rounded;
    snap to a standard value first (see :func:`standard_color_code`) when a
    code for a real part is wanted.

    Raises:
        NonPositiveInput:     *resistance* <= 0.
        UnrepresentableValue: the multiplier would fall outside silver..white,
                              i.e. below 0.1 Ω or at/above 100 GΩ.
    """
    if not math.isfinite(resistance) or resistance <= 0:
        raise NonPositiveInput(f"Resistance must be greater than zero, got {resistance!r}")

    magnitude = math.floor(math.log10(resistance))
    normalized = resistance / 10 ** magnitude
    # log10 of an exact power of ten can land one decade off.
    if normalized >= 10.0:
        normalized /= 10
        magnitude += 1
    elif normalized < 1.0:
        normalized *= 10
        magnitude -= 1

    # Round away float noise (8.2 -> 81.999...) before truncating to 2 digits.
    two_digits = math.floor(round(normalized * 10, 9))
    if two_digits >= 100:
        two_digits //= 10
        magnitude += 1

    exponent = magnitude - 1
    if not MIN_EXPONENT <= exponent <= MAX_EXPONENT:
        raise UnrepresentableValue(
            f"No multiplier color for {resistance:g} ohms (exponent {exponent})"
        )

    bands = (
        _DIGIT_TO_BAND[two_digits // 10],
        _DIGIT_TO_BAND[two_digits % 10],
        _EXPONENT_TO_BAND[exponent],
    )
    log.debug("Encoded %g ohms as %s", resistance, "-".join(b.value for b in bands))
    return bands


def standard_color_code(resistance: float) -> tuple[float, tuple[ColorBand, ColorBand, ColorBand]]:
    """Snap *resistance* to the nearest standard value and encode that value."""
    npv = nearest(resistance)
    return npv, encode(npv)


def bands_to_description(bands) -> str:
    """Return e.g. ``'Yellow-Violet-Red (4.7 kΩ)'`` for a 3-band code."""
    bands = [ColorBand.parse(b) for b in bands]
    name_str = "-".join(b.label for b in bands)
    ohms = decode(*bands)
    return f"{name_str} ({format_value(ohms, Dimension.RESISTANCE)})"


# ---------------------------------------------------------------------------
# Self-test (run with: python color_code.py)
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cases = [
        (4700,    "Yellow-Violet-Red"),
        (330,     "Orange-Orange-Brown"),
        (1000,    "Brown-Black-Red"),
        (820,     "Gray-Red-Brown"),
        (8200000, "Gray-Red-Green"),
        (4.7,     "Yellow-Violet-Gold"),
    ]

    all_pass = True
    for ohms, expected in cases:
        got = "-".join(b.label for b in encode(ohms))
        status = "PASS" if got == expected else "FAIL"
        all_pass = all_pass and status == "PASS"
        print(f"{status}  {ohms:>10,}Ω  got={got!r:<28}  expected={expected!r}")

    print()
    print("All tests passed." if all_pass else "SOME TESTS FAILED.")
