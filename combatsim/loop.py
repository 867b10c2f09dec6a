"""Turn-based battle between two combatants."""

from __future__ import annotations

import sys
import time
from typing import TextIO

from combatsim.combatant import Combatant
from combatsim.entity import are_matching_entities
from combatsim.logger import (
    TextColor,
    TextStyle,
    ansi_string,
    clear_console,
    log_combat_action,
    log_combat_round_info,
    print_combatant_stats,
)
from combatsim.stats import USHORT_MAX

ROUND_DELAY = 2.5


def _emit(text: str, out: TextIO | None) -> None:
    print(text, end="", file=sys.stdout if out is None else out, flush=True)


def first_attacker(combatant_a: Combatant, combatant_b: Combatant) -> Combatant:
    """The strictly faster combatant opens; on a tie the second one does."""
    return combatant_a if combatant_a.speed > combatant_b.speed else combatant_b


def run_battle(
    combatant_a: Combatant,
    combatant_b: Combatant,
    stream: TextIO | None = None,
    out: TextIO | None = None,
    delay: float = ROUND_DELAY,
) -> Combatant:
    """Alternate attacks until one side falls, announce and return the winner.

    Two combatants that both deal no damage fight forever.
    """
    source = sys.stdin if stream is None else stream
    interactive = out is None
    turn = first_attacker(combatant_a, combatant_b)
    rounds = 0

    while combatant_a.is_alive and combatant_b.is_alive:
        rounds = (rounds + 1) & USHORT_MAX
        log_combat_round_info(combatant_a, combatant_b, rounds, interactive, out)
        _emit("\n", out)

        if are_matching_entities(combatant_a, turn):
            combatant_a.attack(combatant_b)
            log_combat_action(turn, combatant_b, False, out)
            turn = combatant_b
        elif are_matching_entities(combatant_b, turn):
            combatant_b.attack(combatant_a)
            log_combat_action(turn, combatant_a, False, out)
            turn = combatant_a

        _emit("\n\n", out)
        print_combatant_stats(combatant_a, True, True, out)
        _emit("\n", out)
        print_combatant_stats(combatant_b, True, True, out)
        _emit("\n", out)
        time.sleep(delay)

    winner = combatant_a if combatant_a.is_alive else combatant_b
    if interactive:
        clear_console()
    _emit(
        "And the Winner is "
        + ansi_string(winner.name, TextStyle.BLINK, TextColor.YELLOW)
        + "! \n\nPress '"
        + ansi_string("ENTER", TextStyle.BLINK, TextColor.CYAN)
        + "' to close the application ...",
        out,
    )
    source.readline()
    return winner