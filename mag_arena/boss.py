"""The four-layered boss that appears after enough kills."""

from __future__ import annotations

import math
import random
from dataclasses import dataclass, field

from mag_arena.bullet import BulletList
from mag_arena.geometry import Vec2, check_collision_circles, random_value
from mag_arena.playarea import CENTER, PlayArea

BOSS_BASE_RADIUS = 60.0
BOSS_BASE_SPEED = 80.0

LAYER_HEALTH = {4: 50.0, 3: 100.0, 2: 150.0, 1: 250.0}
ATTACK_INTERVAL = {4: 3.0, 3: 2.0, 2: 1.0, 1: 0.5}

BOSS_DASH_COOLDOWN = 3.0
BOSS_DASH_DURATION = 0.3
BOSS_DASH_SPEED = 800.0

TRANSITION_TIME = 1.0
EDGE_GAP = 5.0


def _ring(count: int) -> list[Vec2]:
    step = 2.0 * math.pi / count
    return [Vec2(math.cos(i * step), math.sin(i * step)) for i in range(count)]


def _fan(base_angle: float, spread: float, half_width: int) -> list[Vec2]:
    return [
        Vec2(math.cos(base_angle + i * spread), math.sin(base_angle + i * spread))
        for i in range(-half_width, half_width + 1)
    ]


@dataclass
class Boss:
    """A boss that sheds a layer each time its health runs out."""

    position: Vec2
    velocity: Vec2 = Vec2()
    radius: float = BOSS_BASE_RADIUS
    current_layer: int = 4
    layer_health: float = LAYER_HEALTH[4]
    max_layer_health: float = LAYER_HEALTH[4]
    attack_timer: float = 0.0
    active: bool = True
    is_transitioning: bool = False
    transition_timer: float = 0.0
    is_dashing: bool = False
    dash_direction: Vec2 = Vec2()
    dash_timer: float = 0.0
    dash_cooldown: float = 0.0
    target_position: Vec2 | None = field(default=None)

    def __post_init__(self) -> None:
        if self.target_position is None:
            self.target_position = self.position

    def update(
        self,
        player_position: Vec2,
        delta_time: float,
        enemy_bullets: BulletList,
        play_area: PlayArea,
        rng: random.Random,
    ) -> None:
        """Advance one frame: move, attack and stay inside the arena."""
        if not self.active:
            return
        self.attack_timer += delta_time

        if self.is_transitioning:
            self._advance_transition(delta_time, enemy_bullets)
            return

        if self.dash_cooldown > 0:
            self.dash_cooldown -= delta_time

        direction = (player_position - self.position).normalize()
        behaviour = {
            4: self._layer_four,
            3: self._layer_three,
            2: self._layer_two,
            1: self._layer_one,
        }.get(self.current_layer)
        if behaviour is not None:
            behaviour(direction, player_position, delta_time, enemy_bullets, rng)

        limit = play_area.radius - self.radius
        offset = self.position - CENTER
        if offset.length() > limit:
            self.position = CENTER + offset.normalize() * (limit - EDGE_GAP)

    def _advance_transition(self, delta_time: float, enemy_bullets: BulletList) -> None:
        self.transition_timer += delta_time
        if self.transition_timer < TRANSITION_TIME:
            return
        self.is_transitioning = False
        self.transition_timer = 0.0
        self.launch_ricochet_bullets(enemy_bullets)
        health = LAYER_HEALTH.get(self.current_layer)
        if health is not None and self.current_layer != 4:
            self.layer_health = health
            self.max_layer_health = health
            if self.current_layer == 1:
                self.dash_cooldown = BOSS_DASH_COOLDOWN

    def _attack_due(self) -> bool:
        if self.attack_timer >= ATTACK_INTERVAL[self.current_layer]:
            self.attack_timer = 0.0
            return True
        return False

    def _fire(self, enemy_bullets: BulletList, directions: list[Vec2]) -> None:
        for bullet_dir in directions:
            enemy_bullets.add(self.position, bullet_dir)

    def _layer_four(self, direction, player_position, delta_time, enemy_bullets, rng):
        self.position = self.position + direction * (BOSS_BASE_SPEED * 0.5 * delta_time)
        if self._attack_due():
            enemy_bullets.add(self.position, direction)

    def _layer_three(self, direction, player_position, delta_time, enemy_bullets, rng):
        jitter_x = random_value(rng, -50, 50) / 100.0
        jitter_y = random_value(rng, -50, 50) / 100.0
        direction = Vec2(direction.x + jitter_x, direction.y + jitter_y).normalize()
        self.position = self.position + direction * (BOSS_BASE_SPEED * 0.7 * delta_time)
        if self._attack_due():
            self._fire(enemy_bullets, _ring(8))

    def _layer_two(self, direction, player_position, delta_time, enemy_bullets, rng):
        self.position = self.position + direction * (BOSS_BASE_SPEED * 0.9 * delta_time)
        if not self._attack_due():
            return
        base_angle = math.atan2(direction.y, direction.x)
        self._fire(enemy_bullets, _fan(base_angle, math.pi / 4.0, 1))
        if (
            self.layer_health < self.max_layer_health / 2.0
            and random_value(rng, 0, 100) < 20
        ):
            jump = player_position.distance_to(self.position) * 0.7
            self.position = self.position + direction * jump
            self._fire(enemy_bullets, _ring(12))

    def _layer_one(self, direction, player_position, delta_time, enemy_bullets, rng):
        if self.is_dashing:
            self.position = self.position + self.dash_direction * (
                BOSS_DASH_SPEED * delta_time
            )
            self.dash_timer -= delta_time
            if self.dash_timer <= 0:
                self.is_dashing = False
                self.dash_cooldown = BOSS_DASH_COOLDOWN
                self._fire(enemy_bullets, _ring(16))
            return

        if random_value(rng, 0, 100) < 2:
            angle = math.radians(random_value(rng, 0, 360))
            distance = float(random_value(rng, 100, 300))
            self.target_position = player_position + Vec2(
                math.cos(angle) * distance, math.sin(angle) * distance
            )

        to_target = self.target_position - self.position
        if to_target.length() > 5.0:
            self.position = self.position + to_target.normalize() * (
                BOSS_BASE_SPEED * 1.2 * delta_time
            )

        if self._attack_due():
            base_angle = math.atan2(direction.y, direction.x)
            self._fire(enemy_bullets, _fan(base_angle, math.pi / 12.0, 2))

        distance_to_player = self.position.distance_to(player_position)
        if self.dash_cooldown <= 0 and 200 < distance_to_player < 500:
            self.is_dashing = True
            self.dash_timer = BOSS_DASH_DURATION
            self.dash_direction = direction

    def hit(self, bullet_position: Vec2, bullet_radius: float, damage: int) -> bool:
        """Apply a bullet; returns whether it struck. Emptied layers fall away."""
        if not self.active or self.is_transitioning:
            return False
        if not check_collision_circles(
            self.position, self.radius, bullet_position, bullet_radius
        ):
            return False
        self.layer_health -= damage
        if self.layer_health <= 0:
            self.current_layer -= 1
            if self.current_layer > 0:
                self.is_transitioning = True
                self.transition_timer = 0.0
            else:
                self.active = False
        return True

    def launch_ricochet_bullets(self, enemy_bullets: BulletList) -> None:
        """Burst of bouncing bullets: twelve in the last layer, eight otherwise."""
        count = 12 if self.current_layer == 1 else 8
        for bullet_dir in _ring(count):
            enemy_bullets.add_ricochet(self.position, bullet_dir)