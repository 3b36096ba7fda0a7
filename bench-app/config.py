"""
Analog Bench - Console App Configuration
"""

import logging

# Logging (stderr, so log lines never mix with prompts on stdout)
LOG_LEVEL  = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Console behaviour
CLEAR_SCREEN   = True        # ANSI clear between menus; --no-clear turns it off
SHOW_SWATCHES  = False       # 24-bit ANSI color swatch next to band names
DISPLAY_DIGITS = 4           # significant digits in printed results

# Unit prompts shown before each magnitude
RESISTANCE_PROMPT  = "Enter unit for R (k for kilo-ohms, M for mega-ohms, O for ohms): "
CAPACITANCE_PROMPT = "Enter unit for C (u for microfarads, n for nanofarads, p for picofarads): "
FREQUENCY_PROMPT   = "Enter unit for the frequency (k for kHz, M for MHz, H for Hz): "
