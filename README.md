# combatsim

A small turn-based combat simulator for the terminal. You create two combatants and give each one a name, health, defense, damage and speed. They then fight round by round until one of them falls.

## Installation

```
pip install .
```

## Playing

```
combatsim
```

1. Press ENTER to start the combatant creator.
2. Enter the following for each combatant:
   - a name, which must not be empty;
   - health, defense, damage and speed. Each is a whole number from 0 to 65535. A negative number counts as its absolute value, and anything else is asked for again.
3. Confirm each combatant with `yes`, `y`, `true` or `1`. Answer `no`, `n`, `false` or `0` to enter that combatant again.

Two combatants with the same name count as matching. If you create a matching pair, both are discarded and creation starts over.

The command returns 0 after a battle. It returns 1 if input ends early and 130 if interrupted with Ctrl-C.

## Combat rules

- The combatant with the higher speed attacks first. On a tie, the second combatant goes first.
- The two combatants take turns attacking, with a 2.5 second pause between rounds.
- A hit uses up the target's defense first. Only the damage left over reduces health, and health never drops below zero.
- A combatant with zero damage does nothing on its turn. If both deal zero damage, the battle never ends.
- The battle ends when one combatant's health reaches zero, and the survivor is named the winner.

## Using it as a library

```python
import io

from combatsim.combatant import Combatant
from combatsim.loop import first_attacker, run_battle

a = Combatant("Knight", 100, 20, 15, 5)   # name, health, defense, damage, speed
b = Combatant("Rogue", 70, 5, 20, 9)

print(first_attacker(a, b).name)  # Rogue
a.attack(b)
print(b.health, b.defense)        # 60 0

out = io.StringIO()
winner = run_battle(a, b, stream=io.StringIO("\n"), out=out, delay=0)
print(winner.name)
```

The modules:

- `combatsim.stats`: `Stats`, which checks that each value is an integer from 0 to 65535.
- `combatsim.entity`: `Entity` and `are_matching_entities`.
- `combatsim.combatant`: `Combatant`, which has `attack`, `on_damage` and `is_alive`.
- `combatsim.logger`: `ansi_string` and the `TextStyle`, `TextColor` and `TextBackground` codes. It also has `format_stats`, `print_stats`, `print_combatant_stats`, `log_combat_round_info`, `log_combat_action` and `clear_console`.
- `combatsim.prompt`: `parse_ushort`, `parse_bool`, `ask_text`, `ask_ushort` and `ask_bool`. The `ask_*` functions repeat the question until the answer is valid.
- `combatsim.creator`: `Creator`, which asks for a combatant with `create_new_combatant` and keeps every combatant it made. `reset_register` empties that list.
- `combatsim.loop`: `first_attacker` and `run_battle`.

The interactive functions take an optional `stream` to read from and an optional `out` to write to. When `out` is given, the console is not cleared.

## What it does not do

The program has no saved games, no configuration and no command-line options beyond `--help`. The combatants exist only for a single run.

## Running the tests

```
pip install ".[test]"
pytest
```