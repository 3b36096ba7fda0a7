"""
Analog Bench - Op-Amp Menu

Inverting and non-inverting amplifier gain and output voltage.
"""

from __future__ import annotations

from formulas import inverting_gain, non_inverting_gain, output_voltage
from units import Dimension, format_value

INVERTING_DIAGRAM = r"""
             *----| FR |----*
             |              |
             |     |\       |
Vin--| IR |--*-----|-\      |
                   |  \_____*____Vout
                   |  /
             *-----|+/
             |     |/
           -----
            ---
"""

NON_INVERTING_DIAGRAM = r"""
                   |\
Vin----------------|+\
                   |  \_____*____Vout
                   |  /     |
             *-----|-/    |----|
             |     |/     | FR |
             |            |----|
             *--------------*
                            |
                          |----|
                          | GR |
                          |----|
                            |
                          -----
                           ---
"""


class OpAmpMenu:
    title = "Op-Amp Calculator"

    def run(self, console) -> None:
        while True:
            console.clear()
            console.write("\n>> The Op-Amp")
            console.write("\nOp-Amp Configuration:")
            console.write("1. Inverting Op-Amp")
            console.write("2. Non-Inverting Op-Amp")
            console.write("3. Back to main menu")
            choice = console.ask_choice("Select choice: ", ["1", "2", "3"])
            if choice == "3":
                return
            if choice == "1":
                self.inverting(console)
            else:
                self.non_inverting(console)
            if not console.ask_yes_no(
                "\nWould you like to perform another calculation in this menu? (y/n): "
            ):
                return

    def inverting(self, console) -> tuple[float, float]:
        console.write("\n>> Inverting Op-Amp Configuration")
        console.write(INVERTING_DIAGRAM)
        v_in = console.ask_measurement(
            Dimension.VOLTAGE, "Enter the inverting input voltage (volts): ")
        r_feedback = console.ask_measurement(
            Dimension.RESISTANCE, "Enter the feedback resistor value: ")
        r_input = console.ask_measurement(
            Dimension.RESISTANCE, "Enter the input resistor value: ")

        gain = inverting_gain(r_feedback.magnitude, r_input.magnitude)
        v_out = output_voltage(gain, v_in.magnitude)
        self._report(console, "inverting", gain, v_out)
        return gain, v_out

    def non_inverting(self, console) -> tuple[float, float]:
        console.write("\n>> Non-Inverting Op-Amp Configuration")
        console.write(NON_INVERTING_DIAGRAM)
        v_in = console.ask_measurement(
            Dimension.VOLTAGE, "Enter the non-inverting input voltage (volts): ")
        r_feedback = console.ask_measurement(
            Dimension.RESISTANCE, "Enter the feedback resistor value: ")
        r_ground = console.ask_measurement(
            Dimension.RESISTANCE, "Enter the ground resistor value: ")

        gain = non_inverting_gain(r_feedback.magnitude, r_ground.magnitude)
        v_out = output_voltage(gain, v_in.magnitude)
        self._report(console, "non-inverting", gain, v_out)
        return gain, v_out

    @staticmethod
    def _report(console, kind: str, gain: float, v_out: float) -> None:
        console.write(f"\nThe gain of the {kind} op-amp is: {gain:g}")
        console.write(f"The output voltage is: {format_value(v_out, Dimension.VOLTAGE)}")
