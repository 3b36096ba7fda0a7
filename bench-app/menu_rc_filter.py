"""
Analog Bench - First-Order RC Filter Menu

Low-pass and high-pass RC filters share one formula, fc = 1 / (2πRC); the
menu solves it for R, C or fc.
"""

from __future__ import annotations

from formulas import cutoff_frequency, required_capacitance, required_resistance
from units import Dimension, format_value

LOW_PASS_DIAGRAM = """\
          +----- R ---------------o V_out
          ^                |      ^
    V_in  |                C      |
          |                |      |
          +-----------------------o"""

HIGH_PASS_DIAGRAM = """\
          +----- C ---------------o V_out
          ^                |      ^
    V_in  |                R      |
          |                |      |
          +-----------------------o"""


class RCFilterMenu:
    title = "RC Filter Calculator"

    def run(self, console) -> None:
        while True:
            console.clear()
            console.write("\n--- Filter Calculator ---")
            console.write("Are you building a High pass filter or a Low pass filter?")
            console.write("1. Low Pass Filter")
            console.write("2. High Pass Filter")
            console.write("3. Exit to Main Menu")
            choice = console.ask_choice("Select an option: ", ["1", "2", "3"])
            if choice == "3":
                return
            if choice == "1":
                self.filter_menu(console, "low", LOW_PASS_DIAGRAM)
            else:
                self.filter_menu(console, "high", HIGH_PASS_DIAGRAM)

    def filter_menu(self, console, kind: str, diagram: str) -> None:
        actions = {
            "1": self.solve_resistance,
            "2": self.solve_capacitance,
            "3": self.solve_cutoff,
        }
        while True:
            console.clear()
            console.write(f"Selected {kind} pass filter:")
            console.write(diagram)
            console.write("1. Calculate resistance")
            console.write("2. Calculate capacitance")
            console.write("3. Calculate cutoff frequency")
            console.write("4. Back to Filter Menu")
            choice = console.ask_choice("Select an option: ", ["1", "2", "3", "4"])
            if choice == "4":
                return
            actions[choice](console)
            console.pause()

    def solve_resistance(self, console) -> float:
        console.write("--- Resistor Calculator ---")
        c = console.ask_measurement(Dimension.CAPACITANCE, "Enter the capacitor value: ")
        f = console.ask_measurement(Dimension.FREQUENCY, "Enter the frequency value: ")
        r = required_resistance(c.magnitude, f.magnitude)
        console.write(f"Required resistance = {format_value(r, Dimension.RESISTANCE)}")
        return r

    def solve_capacitance(self, console) -> float:
        console.write("--- Capacitor Calculator ---")
        r = console.ask_measurement(Dimension.RESISTANCE, "Enter the resistor value: ")
        f = console.ask_measurement(Dimension.FREQUENCY, "Enter the frequency value: ")
        c = required_capacitance(r.magnitude, f.magnitude)
        console.write(f"Required capacitance = {format_value(c, Dimension.CAPACITANCE)}")
        return c

    def solve_cutoff(self, console) -> float:
        console.write("--- Cutoff Frequency Calculator ---")
        c = console.ask_measurement(Dimension.CAPACITANCE, "Enter the capacitor value: ")
        r = console.ask_measurement(Dimension.RESISTANCE, "Enter the resistor value: ")
        fc = cutoff_frequency(r.magnitude, c.magnitude)
        console.write(f"Cutoff frequency = {format_value(fc, Dimension.FREQUENCY)}")
        return fc
