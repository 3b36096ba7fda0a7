"""
Analog Bench - Sallen-Key Filter Menu

Walks through each pole pair of a 2/4/6-pole Butterworth or Chebyshev
filter: reads R, C and RB, prints the circuit, then RA, the stage cutoff,
the Z1..Z4 assignment and NPV color codes for RA, RB and R.
"""

from __future__ import annotations

from filters import POLE_COUNTS, PassType, Topology, design_stage, filter_spec
from menu_resistor import report_color_code
from units import Dimension, format_value

SALLEN_KEY_DIAGRAM = r"""
                              |-----|
                *-------------| Z3  |---------------------------*
                |             |-----|                           |
                |                               |\              |
     |----|     |     |----|                    |+ \            |
Vin--| Z1 |-----*-----| Z2 |------*-------------|    >----------*-----Vout
     |----|           |----|      |          *--|- /            |
                                  |          |  |/            |----|
                                |----|       |                | RA |
                                | Z4 |       |                |----|
                                |----|       *------------------*
                                  |                             |
                                  |                           |----|
                                  |                           | RB |
                                  |                           |----|
                                -----                           |
                                 ---                          -----
                                                               ---
"""

_TOPOLOGY_CHOICES = {
    "1": Topology.BUTTERWORTH,
    "2": Topology.CHEBYSHEV_05DB,
    "3": Topology.CHEBYSHEV_2DB,
}


class SallenKeyMenu:
    title = "Sallen-Key Filter Configuration"

    def run(self, console) -> None:
        while True:
            console.clear()
            console.write("\n>> Sallen-Key Filter Configuration")
            console.write("\n-- Select Filter Type: --")
            console.write("1. Butterworth")
            console.write("2. 0.5 dB Chebyshev")
            console.write("3. 2 dB Chebyshev")
            console.write("4. Back to main menu")
            choice = console.ask_choice("Select choice: ", ["1", "2", "3", "4"])
            if choice == "4":
                return

            poles = console.ask_choice(
                "\nEnter the number of poles (2, 4, or 6): ", [str(n) for n in POLE_COUNTS])
            pass_name = console.ask_choice(
                "\nEnter whether the filter is 'high' or 'low' pass: ", ["high", "low"])

            spec = filter_spec(_TOPOLOGY_CHOICES[choice], int(poles), PassType(pass_name))
            self.design(console, spec)

            if not console.ask_yes_no(
                "\nWould you like to perform another calculation in this menu? (y/n): "
            ):
                return

    def design(self, console, spec) -> list:
        stages = []
        for pole_pair in range(1, spec.pole_pairs + 1):
            console.write(f"\n--- Configuration for Pole Pair {pole_pair} ---")
            console.write("\nEnter values for Resistors and Capacitors:")
            r = console.ask_measurement(Dimension.RESISTANCE, "Enter the resistance of R = R1 = R2: ")
            c = console.ask_measurement(Dimension.CAPACITANCE, "Enter the capacitance C = C1 = C2: ")
            rb = console.ask_measurement(Dimension.RESISTANCE, "Enter the resistance of RB: ")

            console.write(f"\nGenerating a Sallen-Key {spec.pass_type.value} pass filter diagram...")
            console.write(SALLEN_KEY_DIAGRAM)

            stage = design_stage(spec, pole_pair, r.magnitude, c.magnitude, rb.magnitude)
            self.report(console, spec, stage)
            stages.append(stage)
        return stages

    def report(self, console, spec, stage) -> None:
        console.write(
            f"\n{spec.topology.value}, {spec.pole_count} poles, pole pair {stage.pole_pair}")
        console.write(f"The filter gain for Pole Pair {stage.pole_pair} is {stage.gain:g}")

        console.write(f"\nResistor RA: {stage.ra:g} ohms")
        report_color_code(console, stage.ra)
        console.write(f"\nResistor RB: {stage.rb:g} ohms")
        report_color_code(console, stage.rb)

        console.write(f"\nThe cutoff frequency is {format_value(stage.cutoff, Dimension.FREQUENCY)}")

        console.write("")
        for z, (part, value) in stage.components:
            dimension = Dimension.RESISTANCE if part.startswith("R") else Dimension.CAPACITANCE
            console.write(f"  {z} = {part} = {format_value(value, dimension)}")

        console.write("\nResistor R1 & R2:")
        report_color_code(console, stage.r)
        console.write("\n----------------------------")
