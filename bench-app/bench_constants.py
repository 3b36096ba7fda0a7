"""
Analog Bench - Shared Constants

Fixed lookup tables used by the resolver, the colour-code codec and the
Sallen-Key filter designer.  Everything here is built once at import time and
never mutated afterwards.
"""

# E12 series standard resistor values (1-decade, multiply by power of 10)
E12_VALUES = (
    1.0, 1.2, 1.5, 1.8, 2.2, 2.7,
    3.3, 3.9, 4.7, 5.6, 6.8, 8.2,
)


def _build_standard_series(base, decades=7, cap=10_000_000.0):
    values = []
    for exp in range(decades):          # 10^0 = 1 Ω .. 10^6 = 1 MΩ
        for mantissa in base:
            # Integer tenths keep 8.2 MΩ etc. free of float noise.
            tenths = round(mantissa * 10)
            if exp == 0:
                values.append(tenths / 10)
            else:
                values.append(float(tenths * 10 ** (exp - 1)))
    values.append(cap)                  # explicit 10 MΩ cap
    return tuple(values)


# 85 values: 1 Ω .. 8.2 MΩ in E12 steps, then 10 MΩ.
STANDARD_SERIES = _build_standard_series(E12_VALUES)

# 3-band resistor color code: color name -> (digit value, RGB tuple)
COLOR_BANDS = {
    "black":  (0, (0,   0,   0  )),
    "brown":  (1, (139, 69,  19 )),
    "red":    (2, (220, 20,  20 )),
    "orange": (3, (255, 140, 0  )),
    "yellow": (4, (255, 220, 0  )),
    "green":  (5, (0,   160, 0  )),
    "blue":   (6, (0,   80,  200)),
    "violet": (7, (148, 0,   211)),
    "gray":   (8, (160, 160, 160)),
    "white":  (9, (255, 255, 255)),
    # Multiplier-only colors
    "gold":   (None, (212, 175, 55 )),  # x0.1
    "silver": (None, (192, 192, 192)),  # x0.01
}

# Multiplier band: color name -> power-of-ten exponent
MULTIPLIER_EXPONENTS = {
    name: digit for name, (digit, _rgb) in COLOR_BANDS.items() if digit is not None
}
MULTIPLIER_EXPONENTS["gold"] = -1
MULTIPLIER_EXPONENTS["silver"] = -2

COLOR_ALIASES = {"grey": "gray"}

# Sallen-Key characteristics per pole pair: (gain, low-pass factor, high-pass factor)
BUTTERWORTH_TABLE = {
    2: ((1.586, 1.0, 1.0),),
    4: ((1.152, 1.0, 1.0), (2.325, 1.0, 1.0)),
    6: ((1.068, 1.0, 1.0), (1.586, 1.0, 1.0), (2.483, 1.0, 1.0)),
}

CHEBYSHEV_05DB_TABLE = {
    2: ((1.842, 1.231, 0.812),),
    4: ((1.582, 0.597, 1.675), (2.660, 1.031, 0.970)),
    6: ((1.537, 0.396, 2.525), (2.448, 0.768, 1.302), (2.846, 1.011, 0.989)),
}

CHEBYSHEV_2DB_TABLE = {
    2: ((2.114, 0.907, 1.103),),
    4: ((1.924, 0.471, 2.123), (2.782, 0.964, 1.037)),
    6: ((1.891, 0.316, 3.165), (2.648, 0.730, 1.370), (2.904, 0.983, 1.017)),
}
