import io

import pytest

from combatsim.combatant import Combatant
from combatsim.creator import Creator
from combatsim.logger import format_stats


def _answers(name, health, defense, damage, speed, accept="yes"):
    return ["", name, str(health), str(defense), str(damage), str(speed), accept]


def _stream(*groups):
    lines = [line for group in groups for line in group]
    return io.StringIO("\n".join(lines) + "\n")


def test_create_new_combatant_uses_answers_and_registers():
    creator = Creator()
    out = io.StringIO()
    combatant = creator.create_new_combatant(_stream(_answers("Alice", 10, 2, 3, 4)), out)
    assert combatant.name == "Alice"
    assert (combatant.health, combatant.defense, combatant.damage, combatant.speed) == (10, 2, 3, 4)
    assert creator.combatants == (combatant,)
    assert format_stats("Alice", 10, 2, 3, 4, False, False) in out.getvalue()


def test_declined_combatant_is_discarded():
    creator = Creator()
    stream = _stream(_answers("Alice", 10, 2, 3, 4, "no"), _answers("Bob", 5, 1, 1, 1, "y"))
    combatant = creator.create_new_combatant(stream, io.StringIO())
    assert combatant.name == "Bob"
    assert len(creator) == 1


def test_negative_input_counts_by_magnitude():
    creator = Creator()
    combatant = creator.create_new_combatant(
        _stream(_answers("Carl", -20, 0, 1, 1)), io.StringIO()
    )
    assert combatant.health == 20


def test_invalid_answers_are_asked_again():
    creator = Creator()
    lines = ["", "", "Dana", "lots", "8", "1", "2", "3", "perhaps", "true"]
    combatant = creator.create_new_combatant(_stream(lines), io.StringIO())
    assert (combatant.name, combatant.health, combatant.speed) == ("Dana", 8, 3)


def test_end_of_input_raises():
    creator = Creator()
    with pytest.raises(EOFError):
        creator.create_new_combatant(io.StringIO("\nEve\n"), io.StringIO())
    assert len(creator) == 0


def test_register_and_reset():
    creator = Creator()
    first = Combatant("A", 1, 1, 1, 1)
    second = Combatant("B", 1, 1, 1, 1)
    creator.register(first)
    creator.register(None)
    creator.register(second)
    assert creator.combatants == (first, second)
    creator.reset_register()
    assert creator.combatants == ()
    assert len(creator) == 0