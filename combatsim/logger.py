"""ANSI formatting and console output for the simulator."""

from __future__ import annotations

import subprocess
import sys
from enum import Enum
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from combatsim.combatant import Combatant


class TextStyle(str, Enum):
    RESET = "0"
    BOLD = "1"
    UNDERLINE = "4"
    BLINK = "5"
    INVERSE = "6"


class TextColor(str, Enum):
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"


class TextBackground(str, Enum):
    BLACK = "40"
    RED = "41"
    GREEN = "42"
    YELLOW = "43"
    BLUE = "44"
    MAGENTA = "45"
    CYAN = "46"
    WHITE = "47"
    NONE = ""


def _code(value: str | Enum) -> str:
    return value.value if isinstance(value, Enum) else value


def ansi_string(
    text: str,
    style: str | TextStyle = "",
    color: str | TextColor = "",
    background: str | TextBackground = "",
) -> str:
    """Wrap text in an ANSI escape sequence; empty text yields an empty string."""
    if not text:
        return ""
    codes = [c for c in map(_code, (style, color, background)) if c]
    return f"\033[{';'.join(codes)}m{text}\033[0m"


def clear_console() -> None:
    """Clear the terminal window."""
    try:
        if sys.platform.startswith("win"):
            subprocess.run("cls", shell=True, check=False)
        else:
            subprocess.run(["clear"], check=False)
    except OSError:
        pass


def _write(text: str, out: TextIO | None) -> None:
    print(text, end="", file=sys.stdout if out is None else out, flush=True)


_STAT_COLORS = (
    ("Health", TextColor.GREEN),
    ("Defense", TextColor.CYAN),
    ("Damage", TextColor.RED),
    ("Speed", TextColor.YELLOW),
)


def format_stats(
    name: str,
    health: int,
    defense: int,
    damage: int,
    speed: int,
    display_name: bool,
    inline: bool,
) -> str:
    """Render stats either on one line or one stat per line."""
    values = (health, defense, damage, speed)
    parts: list[str] = []
    if inline:
        if display_name:
            parts.append(ansi_string(name, TextStyle.BLINK, TextColor.WHITE) + " -> ")
        for value, (_, color) in zip(values, _STAT_COLORS):
            parts.append(ansi_string(str(value), TextStyle.UNDERLINE, color) + " | ")
    else:
        if display_name:
            parts.append(ansi_string(name, TextStyle.BLINK, TextColor.WHITE) + ":\n")
        bullet = ansi_string(" > ", TextStyle.BLINK)
        for value, (label, color) in zip(values, _STAT_COLORS):
            parts.append(
                f"{bullet}{label} -> "
                f"{ansi_string(str(value), TextStyle.UNDERLINE, color)}\n"
            )
    return "".join(parts)


def print_stats(
    name: str,
    health: int,
    defense: int,
    damage: int,
    speed: int,
    display_name: bool,
    inline: bool,
    out: TextIO | None = None,
) -> None:
    """Write formatted stats to out (standard output by default)."""
    _write(format_stats(name, health, defense, damage, speed, display_name, inline), out)


def print_combatant_stats(
    combatant: Combatant,
    display_name: bool,
    inline: bool,
    out: TextIO | None = None,
) -> None:
    """Write a combatant's current stats."""
    print_stats(
        combatant.name,
        combatant.health,
        combatant.defense,
        combatant.damage,
        combatant.speed,
        display_name,
        inline,
        out,
    )


def log_combat_round_info(
    combatant_a: Combatant,
    combatant_b: Combatant,
    round_number: int,
    clear: bool = True,
    out: TextIO | None = None,
) -> None:
    """Write the round header, clearing the console first if asked."""
    if clear:
        clear_console()
    _write(
        ansi_string(combatant_a.name, TextStyle.BOLD, TextColor.GREEN)
        + ansi_string(" VS. ", TextStyle.BOLD, TextColor.RED)
        + ansi_string(combatant_b.name, TextStyle.BOLD, TextColor.GREEN)
        + " | "
        + ansi_string(f"Round: {round_number}", TextStyle.BOLD, TextColor.YELLOW)
        + "\n",
        out,
    )


def log_combat_action(
    aggressor: Combatant,
    target: Combatant,
    clear: bool = True,
    out: TextIO | None = None,
) -> None:
    """Write a line describing an attack."""
    if clear:
        clear_console()
    _write(
        "New Combat Action -> "
        + ansi_string(aggressor.name, TextStyle.UNDERLINE, TextColor.GREEN)
        + " attacked "
        + ansi_string(target.name, TextStyle.UNDERLINE, TextColor.GREEN)
        + " ("
        + ansi_string(str(aggressor.damage), TextStyle.BOLD, TextColor.RED)
        + " Damage!) \n",
        out,
    )