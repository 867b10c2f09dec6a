"""Combat attributes shared by every entity."""

from __future__ import annotations

from dataclasses import dataclass, fields

USHORT_MAX = 0xFFFF


@dataclass(eq=False)
class Stats:
    """Health, damage, defense and speed of an entity, each in 0..65535."""

    health: int = 0
    damage: int = 0
    defense: int = 0
    speed: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"{field.name} must be an integer, got {value!r}")
            if not 0 <= value <= USHORT_MAX:
                raise ValueError(
                    f"{field.name} must be between 0 and {USHORT_MAX}, got {value}"
                )