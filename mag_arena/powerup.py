"""Collectable power-ups that appear in sets of three."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass

from mag_arena.geometry import Vec2

POWERUP_RADIUS = 15.0
POWERUP_LIFETIME = 10.0


class PowerupType(enum.Enum):
    DAMAGE = enum.auto()
    HEAL = enum.auto()
    SHIELD = enum.auto()


@dataclass
class Powerup:
    position: Vec2
    kind: PowerupType
    radius: float = POWERUP_RADIUS
    active: bool = True
    life_time: float = POWERUP_LIFETIME


class PowerupField:
    """Power-ups on the field, newest first."""

    def __init__(self) -> None:
        self._powerups: list[Powerup] = []

    def add(self, position: Vec2, kind: PowerupType) -> Powerup:
        powerup = Powerup(position=position, kind=kind)
        self._powerups.insert(0, powerup)
        return powerup

    def update(self, delta_time: float) -> None:
        """Age every power-up and drop the expired or collected ones."""
        for powerup in self._powerups:
            powerup.life_time -= delta_time
        self._powerups = [
            p for p in self._powerups if p.life_time > 0.0 and p.active
        ]

    def clear(self) -> None:
        self._powerups.clear()

    def collect(self, position: Vec2, radius: float) -> PowerupType | None:
        """Collect what a circle touches; taking one makes all others vanish.

        When several are touched, the last one in field order wins.
        """
        collected: PowerupType | None = None
        for powerup in self._powerups:
            if powerup.active and (
                powerup.position.distance_to(position) < powerup.radius + radius
            ):
                collected = powerup.kind
                powerup.active = False
        if collected is not None:
            for powerup in self._powerups:
                powerup.active = False
        return collected

    def __iter__(self) -> Iterator[Powerup]:
        return iter(list(self._powerups))

    def __len__(self) -> int:
        return len(self._powerups)