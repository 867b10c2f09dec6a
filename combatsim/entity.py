"""Base entity taking part in a fight."""

from __future__ import annotations

from combatsim.stats import Stats


class Entity:
    """A named participant owning a set of stats."""

    def __init__(self, name: str, stats: Stats) -> None:
        if stats is None:
            raise ValueError("Invalid stats structure assigned to entity.")
        self._name = name
        self._stats = stats

    @property
    def name(self) -> str:
        return self._name

    @property
    def health(self) -> int:
        return self._stats.health

    @property
    def damage(self) -> int:
        return self._stats.damage

    @property
    def defense(self) -> int:
        return self._stats.defense

    @property
    def speed(self) -> int:
        return self._stats.speed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, stats={self._stats!r})"


def are_matching_entities(a: Entity, b: Entity) -> bool:
    """Two entities match when they share a name or the very same stats."""
    return a.name == b.name or a._stats is b._stats