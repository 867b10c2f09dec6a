import pytest

from combatsim.combatant import Combatant
from combatsim.entity import are_matching_entities


def make(name="Hero", health=10, defense=5, damage=3, speed=7):
    return Combatant(name, health, defense, damage, speed)


def test_constructor_argument_order():
    hero = make(health=10, defense=5, damage=3, speed=7)
    assert hero.health == 10
    assert hero.defense == 5
    assert hero.damage == 3
    assert hero.speed == 7


def test_alive_depends_on_health():
    assert make(health=1).is_alive is True
    assert make(health=0).is_alive is False


def test_defense_absorbs_first():
    hero = make(health=10, defense=5)
    hero.on_damage(3)
    assert hero.health == 10
    assert hero.defense == 5 - 3


def test_total_pool_drops_by_amount():
    hero = make(health=10, defense=5)
    before = hero.health + hero.defense
    hero.on_damage(8)
    assert hero.defense == 0
    assert hero.health + hero.defense == before - 8


def test_health_never_below_zero():
    hero = make(health=10, defense=5)
    hero.on_damage(1000)
    assert hero.health == 0
    assert hero.defense == 0
    assert hero.is_alive is False


def test_zero_damage_changes_nothing():
    hero = make(health=10, defense=5)
    hero.on_damage(0)
    assert (hero.health, hero.defense) == (10, 5)


def test_negative_damage_rejected():
    with pytest.raises(ValueError):
        make().on_damage(-1)


def test_attack_applies_attacker_damage():
    attacker = make("A", damage=4)
    target = make("B", health=10, defense=0)
    attacker.attack(target)
    assert target.health == 10 - attacker.damage
    assert attacker.health == 10


def test_attack_without_damage_does_nothing():
    attacker = make("A", damage=0)
    target = make("B", health=10, defense=5)
    attacker.attack(target)
    assert (target.health, target.defense) == (10, 5)


def test_repeated_attacks_eventually_kill():
    attacker = make("A", damage=3)
    target = make("B", health=10, defense=5)
    for _ in range(100):
        if not target.is_alive:
            break
        attacker.attack(target)
    assert target.is_alive is False


def test_combatants_with_same_name_match():
    assert are_matching_entities(make("Twin"), make("Twin")) is True
    assert are_matching_entities(make("One"), make("Two")) is False