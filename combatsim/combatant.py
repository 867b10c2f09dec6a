"""Fighting entity with attack and damage handling."""

from __future__ import annotations

from combatsim.entity import Entity
from combatsim.stats import Stats


class Combatant(Entity):
    """An entity that can attack and take damage."""

    def __init__(
        self, name: str, health: int, defense: int, damage: int, speed: int
    ) -> None:
        super().__init__(name, Stats(health, damage, defense, speed))

    @property
    def is_alive(self) -> bool:
        return self._stats.health > 0

    def attack(self, target: Combatant) -> None:
        """Deal this combatant's damage to the target; nothing happens at zero damage."""
        if self._stats.damage > 0:
            target.on_damage(self._stats.damage)

    def on_damage(self, amount: int) -> None:
        """Absorb damage with defense first, then lose health, never below zero."""
        if amount < 0:
            raise ValueError(f"damage amount must not be negative, got {amount}")
        if amount == 0:
            return
        absorbed = min(self._stats.defense, amount)
        self._stats.defense -= absorbed
        remaining = amount - absorbed
        if remaining > 0:
            self._stats.health -= min(self._stats.health, remaining)