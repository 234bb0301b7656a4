"""Enemies that chase the player, and the shooters that keep their distance."""

from __future__ import annotations

import enum
import math
import random
from collections.abc import Iterator
from dataclasses import dataclass

from mag_arena.bullet import BulletList
from mag_arena.geometry import Vec2, random_value

DEATH_ANIMATION_DURATION = 0.8

SHOOTER_RETREAT_DISTANCE = 200.0
SHOOTER_APPROACH_DISTANCE = 450.0
SHOOTER_FIRE_RANGE = 500.0
SHOOTER_FIRE_INTERVAL = 1.0


class EnemyType(enum.Enum):
    NORMAL = enum.auto()
    SPEEDER = enum.auto()
    TANK = enum.auto()
    EXPLODER = enum.auto()
    SHOOTER = enum.auto()


# Colour, starting health and speed factor for each kind of enemy.
_TRAITS: dict[EnemyType, tuple[str, int, float]] = {
    EnemyType.NORMAL: ("white", 2, 1.0),
    EnemyType.SPEEDER: ("skyblue", 1, 1.5),
    EnemyType.TANK: ("gray", 3, 1.0),
    EnemyType.EXPLODER: ("red", 2, 1.0),
    EnemyType.SHOOTER: ("yellow", 1, 1.0),
}


@dataclass(eq=False)
class Enemy:
    position: Vec2
    radius: float
    speed: float
    kind: EnemyType
    color: str = "white"
    health: int = 1
    velocity: Vec2 = Vec2()
    active: bool = True
    shoot_timer: float = 0.0
    dodge_count: int = 0
    is_dying: bool = False
    death_timer: float = 0.0


def _chase(enemy: Enemy, player_position: Vec2, delta_time: float) -> None:
    to_player = player_position - enemy.position
    if to_player.length_sqr() > 0:
        enemy.velocity = to_player.normalize() * enemy.speed
    else:
        enemy.velocity = Vec2(0.0, 0.0)
    enemy.position = enemy.position + enemy.velocity * delta_time


def _shoot_and_strafe(
    enemy: Enemy,
    player_position: Vec2,
    delta_time: float,
    enemy_bullets: BulletList,
    now: float,
    rng: random.Random,
) -> None:
    to_player = player_position - enemy.position
    distance = to_player.length()
    heading = to_player.normalize()
    enemy.shoot_timer += delta_time

    if distance < SHOOTER_RETREAT_DISTANCE:
        enemy.velocity = heading * (-enemy.speed * 1.2)
    elif distance > SHOOTER_APPROACH_DISTANCE:
        enemy.velocity = heading * (enemy.speed * 0.8)
    else:
        side = Vec2(-to_player.y, to_player.x).normalize()
        oscillation = math.sin(now * 2.0)
        side = side * (oscillation * enemy.speed * 0.7)
        back = heading * (-enemy.speed * 0.3)
        enemy.velocity = side + back

    if enemy.shoot_timer >= SHOOTER_FIRE_INTERVAL and distance < SHOOTER_FIRE_RANGE:
        enemy.shoot_timer = 0.0
        if to_player.length_sqr() > 0:
            variation = random_value(rng, -5, 5) * 0.01
            angle = math.atan2(to_player.y, to_player.x) + variation
            enemy_bullets.add(enemy.position, Vec2(math.cos(angle), math.sin(angle)))

    enemy.position = enemy.position + enemy.velocity * delta_time


class EnemyList:
    """Enemies on the field, newest first."""

    def __init__(self) -> None:
        self._enemies: list[Enemy] = []

    def add(self, position: Vec2, radius: float, speed: float, kind: EnemyType) -> Enemy:
        """Create an enemy whose colour, health and speed depend on its kind."""
        color, health, speed_factor = _TRAITS[kind]
        enemy = Enemy(
            position=position,
            radius=radius,
            speed=speed * speed_factor,
            kind=kind,
            color=color,
            health=health,
        )
        self._enemies.insert(0, enemy)
        return enemy

    def update(
        self,
        player_position: Vec2,
        delta_time: float,
        screen_width: float,
        screen_height: float,
        enemy_bullets: BulletList,
        now: float,
        rng: random.Random,
    ) -> None:
        """Move living enemies, keep them on screen and retire finished deaths."""
        finished: list[Enemy] = []
        for enemy in list(self._enemies):
            if enemy.active:
                if enemy.kind is EnemyType.SHOOTER:
                    _shoot_and_strafe(
                        enemy, player_position, delta_time, enemy_bullets, now, rng
                    )
                else:
                    _chase(enemy, player_position, delta_time)
                enemy.position = Vec2(
                    min(max(enemy.position.x, 0.0), float(screen_width)),
                    min(max(enemy.position.y, 0.0), float(screen_height)),
                )
            elif enemy.is_dying:
                enemy.death_timer += delta_time
                if enemy.death_timer >= DEATH_ANIMATION_DURATION:
                    finished.append(enemy)
        if finished:
            self._enemies = [
                e for e in self._enemies if not any(e is f for f in finished)
            ]

    def remove(self, enemy: Enemy) -> bool:
        """Take an enemy off the field; returns False when it was not there."""
        for index, candidate in enumerate(self._enemies):
            if candidate is enemy:
                del self._enemies[index]
                return True
        return False

    def clear(self) -> None:
        self._enemies.clear()

    def __iter__(self) -> Iterator[Enemy]:
        return iter(list(self._enemies))

    def __len__(self) -> int:
        return len(self._enemies)