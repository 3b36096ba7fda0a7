"""
Analog Bench - Console Shell

Prompting, input re-try loops and menu navigation for the text UI.  The core
modules never loop or print; everything interactive lives here.

Console is constructed with injectable I/O so tests can script a session:

    answers = iter(["1", "4.7", "k"])
    console = Console(input_fn=lambda _prompt: next(answers),
                      output=io.StringIO(), clear_screen=False)

MenuShell keeps a registry of named menus (same contract as a screen
manager: register, switch, dispatch to the active one).  A menu is any object
with a ``title`` attribute and a ``run(console)`` method.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import Callable, Sequence

import config
from color_code import ColorBand
from errors import CalcError, InvalidColorBand, InvalidUnit
from units import Dimension, Measurement, normalize

log = logging.getLogger(__name__)

_CLEAR = "\033[2J\033[H"

_UNIT_PROMPTS = {
    Dimension.RESISTANCE: config.RESISTANCE_PROMPT,
    Dimension.CAPACITANCE: config.CAPACITANCE_PROMPT,
    Dimension.FREQUENCY: config.FREQUENCY_PROMPT,
}


class Console:
    """Line-oriented prompts with re-try on malformed input.

    Args:
        input_fn:     Callable taking a prompt and returning one line
                      (``input`` by default).  EOFError propagates.
        output:       Text stream for prompts and results.
        clear_screen: Emit an ANSI clear sequence in :meth:`clear`.
        swatches:     Show ANSI colour swatches next to colour band names.
    """

    def __init__(
        self,
        input_fn: Callable[[str], str] | None = None,
        output=None,
        clear_screen: bool = config.CLEAR_SCREEN,
        swatches: bool = config.SHOW_SWATCHES,
    ) -> None:
        self._input = input_fn if input_fn is not None else input
        self._output = output if output is not None else sys.stdout
        self.clear_screen = clear_screen
        self.swatches = swatches

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def write(self, text: str = "") -> None:
        self._output.write(text + "\n")

    def error(self, exc_or_msg) -> None:
        self.write(f"Error: {exc_or_msg}")

    def clear(self) -> None:
        if self.clear_screen:
            self._output.write(_CLEAR)

    def pause(self) -> None:
        self.ask("\nPress Enter to continue...")

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def ask(self, prompt: str) -> str:
        # Prompt goes through the output stream so scripted sessions see it.
        self._output.write(prompt)
        self._output.flush()
        line = self._input("")
        return line.strip()

    def ask_float(self, prompt: str, positive: bool = False) -> float:
        """Prompt until the answer parses as a float (and is > 0 if *positive*)."""
        while True:
            answer = self.ask(prompt)
            try:
                value = float(answer)
            except ValueError:
                value = math.nan
            if not math.isfinite(value):
                log.info("Rejected non-numeric input %r", answer)
                self.write("Invalid input. Please enter a numeric value.")
                continue
            if positive and not value > 0:
                log.info("Rejected non-positive input %r", answer)
                self.write("Error: Value must be a positive number.")
                continue
            return value

    def ask_int(self, prompt: str, minimum: int = 0) -> int:
        while True:
            answer = self.ask(prompt)
            try:
                value = int(answer)
            except ValueError:
                self.write("Invalid input. Enter an integer!")
                continue
            if value < minimum:
                self.write(f"Please enter a number of at least {minimum}.")
                continue
            return value

    def ask_choice(self, prompt: str, choices: Sequence[str]) -> str:
        """Prompt until the answer is one of *choices* (case-insensitive)."""
        allowed = {c.lower(): c for c in choices}
        while True:
            answer = self.ask(prompt).lower()
            if answer in allowed:
                return allowed[answer]
            self.write(f"Invalid option. Please enter one of: {', '.join(choices)}")

    def ask_yes_no(self, prompt: str) -> bool:
        return self.ask_choice(prompt, ("y", "n")) == "y"

    def ask_measurement(self, dimension: Dimension, label: str) -> Measurement:
        """Read a unit suffix and a magnitude, re-prompting until they normalise.

        Voltages are read in volts without a unit prompt.
        """
        if dimension is Dimension.VOLTAGE:
            return normalize(self.ask_float(label), "v", dimension)

        unit = self.ask(_UNIT_PROMPTS[dimension])
        raw = self.ask_float(label, positive=True)
        while True:
            try:
                return normalize(raw, unit, dimension)
            except InvalidUnit as exc:
                log.info("Re-prompting after invalid unit %r", unit)
                self.write(str(exc))
                unit = self.ask("Enter a valid unit: ")

    def ask_color_band(self, prompt: str, digit: bool = True) -> ColorBand:
        while True:
            try:
                band = ColorBand.parse(self.ask(prompt))
            except InvalidColorBand as exc:
                self.write(f"{exc}. Please try again.")
                continue
            if digit and band.digit is None:
                self.write(f"{band.label} can only be used as a multiplier band.")
                continue
            return band


class MenuShell:
    """Registry of named menus plus the main-menu loop.

    Menus are listed in registration order, numbered from 1; the entry after
    the last menu exits.
    """

    def __init__(self, console: Console, title: str = "Analog Bench") -> None:
        self.console = console
        self.title = title
        self._menus: dict[str, object] = {}
        self._active: str | None = None

    def register_menu(self, name: str, menu) -> None:
        self._menus[name] = menu

    @property
    def current_menu(self) -> str | None:
        return self._active

    def switch_to(self, name: str) -> None:
        """Run the named menu until it returns.

        Raises:
            KeyError: If *name* has not been registered.
        """
        if name not in self._menus:
            raise KeyError(f"Unknown menu: {name!r}")
        self._active = name
        menu = self._menus[name]
        try:
            menu.run(self.console)
        except CalcError as exc:
            log.warning("%s: %s", name, exc)
            self.console.error(exc)
            self.console.pause()
        finally:
            self._active = None

    def run(self) -> None:
        """Show the main menu until the user picks Exit."""
        names = list(self._menus)
        exit_choice = str(len(names) + 1)
        choices = [str(i) for i in range(1, len(names) + 2)]

        while True:
            self.console.clear()
            self.console.write(f"\n=== {self.title} ===")
            for i, name in enumerate(names, start=1):
                self.console.write(f"{i}. {self._menus[name].title}")
            self.console.write(f"{exit_choice}. Exit")
            choice = self.console.ask_choice("Select an option: ", choices)
            if choice == exit_choice:
                self.console.write("Goodbye.")
                return
            self.switch_to(names[int(choice) - 1])
