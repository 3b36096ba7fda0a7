"""
Analog Bench - Console Entry Point

Builds the console, registers the four calculator menus and runs the main
menu loop.

Menu flow
---------
  Main menu → one calculator menu → action → result printed → back.

  Each action reads raw text through Console (which re-prompts on malformed
  input), normalises it with units.normalize(), calls the pure core modules
  and prints the result.  Errors raised by the core (CalcError) are shown and
  the user is returned to the menu; they never end the session.

End of input (Ctrl-D) or Ctrl-C leaves the program cleanly.
"""

from __future__ import annotations

import argparse
import logging
import sys

import config
from console import Console, MenuShell
from menu_opamp import OpAmpMenu
from menu_rc_filter import RCFilterMenu
from menu_resistor import ResistorMenu
from menu_sallen_key import SallenKeyMenu

log = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Interactive calculator for resistors, op-amps and RC / Sallen-Key filters"
    )
    parser.add_argument("--debug", action="store_true", help="Log core calculations to stderr")
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between menus")
    parser.add_argument("--color", action="store_true", help="Show ANSI color swatches next to band names")
    return parser.parse_args(argv)


def build_shell(console: Console) -> MenuShell:
    shell = MenuShell(console)
    shell.register_menu("resistor",   ResistorMenu())
    shell.register_menu("op_amp",     OpAmpMenu())
    shell.register_menu("rc_filter",  RCFilterMenu())
    shell.register_menu("sallen_key", SallenKeyMenu())
    return shell


def main(argv=None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else config.LOG_LEVEL,
        format=config.LOG_FORMAT,
        stream=sys.stderr,
    )

    console = Console(
        clear_screen=config.CLEAR_SCREEN and not args.no_clear,
        swatches=config.SHOW_SWATCHES or args.color,
    )
    shell = build_shell(console)
    log.info("Analog Bench started")

    try:
        shell.run()
    except (EOFError, KeyboardInterrupt):
        console.write("")
        log.info("Input closed, exiting")
    return 0


if __name__ == "__main__":
    sys.exit(main())
