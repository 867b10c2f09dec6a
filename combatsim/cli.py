"""Command-line entry point of the combat simulator."""

from __future__ import annotations

import argparse
import sys
import time
from typing import Sequence

from combatsim.creator import Creator
from combatsim.entity import are_matching_entities
from combatsim.logger import (
    TextColor,
    TextStyle,
    ansi_string,
    clear_console,
    print_combatant_stats,
)
from combatsim.loop import run_battle


def _emit(text: str) -> None:
    print(text, end="", flush=True)


def main(argv: Sequence[str] | None = None) -> int:
    """Create two distinct combatants interactively and let them fight."""
    parser = argparse.ArgumentParser(
        prog="combatsim", description="Interactive turn-based combat simulator."
    )
    parser.parse_args(argv)

    try:
        _emit(
            "Welcome to the "
            + ansi_string("Combat Simulator", TextStyle.BOLD, TextColor.YELLOW)
            + "!\nPress '"
            + ansi_string("ENTER", TextStyle.BOLD, TextColor.CYAN)
            + "' to create your combatants ..."
        )
        sys.stdin.readline()

        creator = Creator()
        while True:
            combatant_a = creator.create_new_combatant()
            combatant_b = creator.create_new_combatant()
            if not are_matching_entities(combatant_a, combatant_b):
                break

            print_combatant_stats(combatant_a, True, True)
            print_combatant_stats(combatant_b, True, True)
            sys.stdin.readline()

            for remaining in range(3, 0, -1):
                creator.reset_register()
                clear_console()
                _emit(
                    ansi_string(
                        f"You created two matching combatants. Try again in {remaining} ...",
                        TextStyle.BLINK,
                        TextColor.RED,
                    )
                )
                time.sleep(1)

        run_battle(combatant_a, combatant_b)
    except EOFError:
        return 1
    except KeyboardInterrupt:
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())