"""Interactive creation and registry of combatants."""

from __future__ import annotations

import sys
from typing import TextIO

from combatsim.combatant import Combatant
from combatsim.logger import TextColor, TextStyle, ansi_string, clear_console, print_stats
from combatsim.prompt import ask_bool, ask_text, ask_ushort


def _emit(text: str, out: TextIO | None) -> None:
    print(text, end="", file=sys.stdout if out is None else out, flush=True)


def _stat_prompt(label: str) -> str:
    return (
        "Please enter the combatant's "
        + ansi_string(label, TextStyle.BOLD, TextColor.CYAN)
        + ":"
    )


class Creator:
    """Builds combatants from user answers and keeps every one it built."""

    def __init__(self) -> None:
        self._combatants: list[Combatant] = []

    @property
    def combatants(self) -> tuple[Combatant, ...]:
        return tuple(self._combatants)

    def __len__(self) -> int:
        return len(self._combatants)

    def register(self, combatant: Combatant | None) -> None:
        """Add a combatant to the registry; None is ignored."""
        if combatant is not None:
            self._combatants.append(combatant)

    def reset_register(self) -> None:
        """Forget every registered combatant."""
        self._combatants.clear()

    def create_new_combatant(
        self, stream: TextIO | None = None, out: TextIO | None = None
    ) -> Combatant:
        """Ask for a name and stats until the user accepts, then register the result."""
        source = sys.stdin if stream is None else stream
        interactive = out is None

        def clear() -> None:
            if interactive:
                clear_console()

        while True:
            clear()
            _emit(
                "This is the "
                + ansi_string("Combatant Creator", TextStyle.BOLD, TextColor.YELLOW)
                + "! Please press '"
                + ansi_string("ENTER", TextStyle.BOLD, TextColor.CYAN)
                + "' to create a new combatant ...\n",
                out,
            )
            source.readline()
            clear()

            name = ask_text(
                "Please enter the new combatant's "
                + ansi_string("Name", TextStyle.BOLD, TextColor.CYAN)
                + ":",
                source,
                out,
            )
            clear()
            health = ask_ushort(_stat_prompt("Health"), source, out)
            clear()
            defense = ask_ushort(_stat_prompt("Defense"), source, out)
            clear()
            damage = ask_ushort(_stat_prompt("Damage"), source, out)
            clear()
            speed = ask_ushort(_stat_prompt("Speed"), source, out)
            clear()

            print_stats(name, health, defense, damage, speed, False, False, out)

            accepted = ask_bool(
                "\nAre you sure you want to create "
                + ansi_string(name, TextStyle.BLINK, TextColor.GREEN)
                + " as a new combatant? "
                + ansi_string("(yes / no) \n", TextStyle.BLINK, TextColor.YELLOW),
                source,
                out,
            )
            if accepted:
                combatant = Combatant(name, health, defense, damage, speed)
                self.register(combatant)
                return combatant
            clear()