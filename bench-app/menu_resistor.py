"""
Analog Bench - Resistor Calculator Menu

  1. Resistance from a 3-band color code
  2. Series / parallel network, then the two totals combined
  3. Nearest standard (NPV) value, with two-resistor suggestions
  4. NPV value and color code for a resistor
"""

from __future__ import annotations

from color_code import decode, standard_color_code
from errors import CalcError
from formulas import combine_networks, parallel_resistance, series_resistance
from standard_values import resolve, suggest_combinations
from units import Dimension, format_value


def band_names(bands, swatches: bool = False) -> str:
    """Return ``'[brown, black, red]'``, optionally with ANSI color swatches."""
    parts = []
    for band in bands:
        if swatches:
            r, g, b = band.rgb
            parts.append(f"\033[48;2;{r};{g};{b}m  \033[0m {band.value}")
        else:
            parts.append(band.value)
    return "[" + ", ".join(parts) + "]"


def report_color_code(console, resistance: float) -> None:
    """Print the nearest NPV value and its color code for *resistance*."""
    try:
        npv, bands = standard_color_code(resistance)
    except CalcError as exc:
        console.write(f"Error: Unable to calculate color code for this resistor ({exc}).")
        return
    console.write(f"Nearest NPV resistor: {npv:g} ohms")
    console.write(f"Color Code: {band_names(bands, console.swatches)}")


class ResistorMenu:
    title = "Resistor Calculator"

    def run(self, console) -> None:
        actions = {
            "1": self.color_code_to_resistance,
            "2": self.combine_resistors,
            "3": self.find_nearest_npv,
            "4": self.npv_and_color_code,
        }
        while True:
            console.clear()
            console.write("\n--- Resistor Calculator ---")
            console.write("1. Calculate resistance from color codes")
            console.write("2. Solve Resistor Network")
            console.write("3. Find nearest NPV resistor")
            console.write("4. Get NPV value and color code for a resistor")
            console.write("5. Back to main menu")
            choice = console.ask_choice("Select an option: ", ["1", "2", "3", "4", "5"])
            if choice == "5":
                return
            console.clear()
            try:
                actions[choice](console)
            except CalcError as exc:
                console.error(exc)
            console.pause()

    def color_code_to_resistance(self, console) -> float:
        band1 = console.ask_color_band("Enter first color band: ")
        band2 = console.ask_color_band("Enter second color band: ")
        mult = console.ask_color_band("Enter multiplier band: ", digit=False)
        ohms = decode(band1, band2, mult)
        console.write(f"Resistance: {ohms:g} ohms ({format_value(ohms, Dimension.RESISTANCE)})")
        return ohms

    def combine_resistors(self, console) -> float:
        num_series = console.ask_int("Enter the number of resistors in series: ", minimum=1)
        series_values = [
            console.ask_float(f"Enter value of series resistor {i} (in ohms): ", positive=True)
            for i in range(1, num_series + 1)
        ]
        total_series = series_resistance(series_values)
        console.write(f"Total resistance of resistors in series: {total_series:g} ohms")

        num_parallel = console.ask_int("Enter the number of resistors in parallel: ", minimum=1)
        parallel_values = [
            console.ask_float(f"Enter value of parallel resistor {i} (in ohms): ", positive=True)
            for i in range(1, num_parallel + 1)
        ]
        total_parallel = parallel_resistance(parallel_values)
        console.write(f"Total resistance of resistors in parallel: {total_parallel:g} ohms")

        mode = console.ask_choice(
            "Enter 1 to combine the series and parallel resistances in series, "
            "or 2 to combine them in parallel: ",
            ["1", "2"],
        )
        in_series = mode == "1"
        combined = combine_networks(total_series, total_parallel, in_series)
        kind = "series" if in_series else "parallel"
        console.write(f"Total combined resistance ({kind}): {combined:g} ohms")
        return combined

    def find_nearest_npv(self, console) -> float:
        target = console.ask_float("Enter target resistance (in ohms): ", positive=True)
        npv, difference = resolve(target)
        console.write(f"Nearest NPV resistor: {npv:g} ohms")
        if difference > 0:
            console.write("Suggested combinations:")
            suggestions = suggest_combinations(target, tolerance=difference)
            for combo in suggestions:
                console.write(str(combo))
            if not suggestions:
                console.write("  (none closer than the single NPV resistor)")
        return npv

    def npv_and_color_code(self, console) -> None:
        resistance = console.ask_float("Enter resistor value (in ohms): ", positive=True)
        report_color_code(console, resistance)
