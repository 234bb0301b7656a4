"""Choosing, sizing and placing new enemies as the score rises."""

from __future__ import annotations

import math
import random

from mag_arena.enemy import Enemy, EnemyList, EnemyType
from mag_arena.geometry import (
    ENEMY_RADIUS_MAX,
    ENEMY_RADIUS_MIN,
    ENEMY_SPEED_MAX,
    ENEMY_SPEED_MIN,
    MAX_ENEMIES,
    Vec2,
    random_value,
)
from mag_arena.playarea import CENTER, PlayArea, base_radius

INITIAL_SPAWN_INTERVAL = 1.5
MIN_SPAWN_INTERVAL = 0.2
DIFFICULTY_PERIOD = 10.0
DIFFICULTY_FACTOR = 0.90
EDGE_OFFSET = 10.0
RING_OFFSET = 20.0
MAX_ENEMY_SPEED = ENEMY_SPEED_MAX * 2

# (upper roll, kind) tables for each score band; the last entry takes the rest.
_BANDS: list[tuple[float, list[tuple[int, EnemyType]]]] = [
    (1000, [(100, EnemyType.NORMAL)]),
    (
        2000,
        [
            (50, EnemyType.NORMAL),
            (60, EnemyType.SHOOTER),
            (85, EnemyType.TANK),
            (100, EnemyType.EXPLODER),
        ],
    ),
    (
        3000,
        [
            (35, EnemyType.NORMAL),
            (45, EnemyType.SHOOTER),
            (75, EnemyType.TANK),
            (90, EnemyType.EXPLODER),
            (100, EnemyType.SPEEDER),
        ],
    ),
    (
        math.inf,
        [
            (20, EnemyType.NORMAL),
            (25, EnemyType.SHOOTER),
            (55, EnemyType.TANK),
            (85, EnemyType.EXPLODER),
            (100, EnemyType.SPEEDER),
        ],
    ),
]


def choose_enemy_type(score: float, roll: int) -> EnemyType:
    """Kind of enemy for a roll from 1 to 100 at the given score."""
    table = next(table for limit, table in _BANDS if score < limit)
    for upper, kind in table:
        if roll <= upper:
            return kind
    return table[-1][1]


def enemy_stats(kind: EnemyType, score: float, rng: random.Random) -> tuple[float, float]:
    """Radius and speed for a new enemy, with speed capped at twice the maximum."""
    if kind is EnemyType.SPEEDER:
        radius = ENEMY_RADIUS_MIN
        speed = ENEMY_SPEED_MAX + score / 1000.0
    elif kind is EnemyType.TANK:
        radius = ENEMY_RADIUS_MAX
        speed = ENEMY_SPEED_MIN + score / 2000.0
    elif kind is EnemyType.EXPLODER:
        radius = ENEMY_RADIUS_MIN + 5.0
        speed = ENEMY_SPEED_MIN + ENEMY_SPEED_MAX / 2.0 + score / 1500.0
    elif kind is EnemyType.SHOOTER:
        radius = ENEMY_RADIUS_MIN + 3.0
        speed = ENEMY_SPEED_MIN + ENEMY_SPEED_MAX / 3.0 + score / 1800.0
    else:
        radius = float(random_value(rng, int(ENEMY_RADIUS_MIN), int(ENEMY_RADIUS_MAX)))
        speed = random_value(rng, int(ENEMY_SPEED_MIN), int(ENEMY_SPEED_MAX)) + score / 1000.0
    return radius, min(speed, MAX_ENEMY_SPEED)


def edge_spawn_position(
    side: int, radius: float, play_area: PlayArea, rng: random.Random
) -> Vec2:
    """Point just outside one side of the arena box: 0 top, 1 bottom, 2 left, 3 right."""
    if side in (0, 1):
        x = float(random_value(rng, int(play_area.left), int(play_area.right)))
        if side == 0:
            return Vec2(x, play_area.top - radius - EDGE_OFFSET)
        return Vec2(x, play_area.bottom + radius + EDGE_OFFSET)
    if side in (2, 3):
        y = float(random_value(rng, int(play_area.top), int(play_area.bottom)))
        if side == 2:
            return Vec2(play_area.left - radius - EDGE_OFFSET, y)
        return Vec2(play_area.right + radius + EDGE_OFFSET, y)
    raise ValueError(f"spawn side must be 0 to 3, not {side}")


class EnemySpawner:
    """Spawns enemies on a timer that speeds up as time passes."""

    def __init__(self) -> None:
        self.spawn_timer = 0.0
        self.spawn_interval = INITIAL_SPAWN_INTERVAL
        self.difficulty_timer = 0.0

    def reset(self) -> None:
        self.spawn_timer = 0.0
        self.spawn_interval = INITIAL_SPAWN_INTERVAL
        self.difficulty_timer = 0.0

    def tick(
        self,
        delta_time: float,
        score: float,
        enemies: EnemyList,
        boss_active: bool,
        play_area: PlayArea,
        rng: random.Random,
    ) -> Enemy | None:
        """Spawn one enemy at the arena edge once the interval has passed."""
        if boss_active:
            return None
        self.spawn_timer += delta_time
        if self.spawn_timer < self.spawn_interval:
            return None
        self.spawn_timer = 0.0
        side = random_value(rng, 0, 3)
        kind = choose_enemy_type(score, random_value(rng, 1, 100))
        radius, speed = enemy_stats(kind, score, rng)
        position = edge_spawn_position(side, radius, play_area, rng)
        return enemies.add(position, radius, speed, kind)

    def update_difficulty(self, delta_time: float) -> None:
        """Every ten seconds shorten the spawn interval, down to its floor."""
        self.difficulty_timer += delta_time
        if self.difficulty_timer > DIFFICULTY_PERIOD:
            self.spawn_interval = max(
                MIN_SPAWN_INTERVAL, self.spawn_interval * DIFFICULTY_FACTOR
            )
            self.difficulty_timer = 0.0

    def fill(
        self,
        score: float,
        enemies: EnemyList,
        boss_active: bool,
        rng: random.Random,
    ) -> list[Enemy]:
        """Top the field up to the enemy limit on a ring around the arena."""
        if boss_active:
            return []
        added: list[Enemy] = []
        for _ in range(MAX_ENEMIES - len(enemies)):
            kind = choose_enemy_type(score, random_value(rng, 1, 100))
            radius, speed = enemy_stats(kind, score, rng)
            angle = math.radians(random_value(rng, 0, 360))
            distance = base_radius() + radius + RING_OFFSET
            position = CENTER + Vec2(math.cos(angle) * distance, math.sin(angle) * distance)
            added.append(enemies.add(position, radius, speed, kind))
        return added