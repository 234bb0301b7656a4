"""Projectiles fired by the player, enemies and the boss."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from mag_arena.geometry import BULLET_RADIUS, BULLET_SPEED, Vec2
from mag_arena.playarea import CENTER, PlayArea

RICOCHET_SPEED_FACTOR = 1.5
RICOCHET_RADIUS_FACTOR = 1.2
RICOCHET_EDGE_GAP = 2.0


@dataclass
class Bullet:
    position: Vec2
    velocity: Vec2
    radius: float = BULLET_RADIUS
    active: bool = True
    damage: int = 1
    can_ricochet: bool = False
    ricochets_left: int = 0


def _aimed_velocity(direction: Vec2, speed: float) -> Vec2:
    if direction.length_sqr() > 0:
        return direction.normalize() * speed
    return Vec2(0.0, -speed)


class BulletList:
    """Bullets in flight, newest first."""

    def __init__(self) -> None:
        self._bullets: list[Bullet] = []

    def _push(self, bullet: Bullet) -> Bullet:
        self._bullets.insert(0, bullet)
        return bullet

    def add(self, position: Vec2, direction: Vec2) -> Bullet:
        """Fire a standard bullet; a zero direction fires straight up."""
        return self._push(
            Bullet(position=position, velocity=_aimed_velocity(direction, BULLET_SPEED))
        )

    def add_with_props(
        self, position: Vec2, direction: Vec2, radius: float, damage: int
    ) -> Bullet:
        """Fire a bullet of the given size and damage; direction is not normalised."""
        return self._push(
            Bullet(
                position=position,
                velocity=direction * BULLET_SPEED,
                radius=radius,
                damage=damage,
            )
        )

    def add_ricochet(self, position: Vec2, direction: Vec2) -> Bullet:
        """Fire a faster, larger bullet that bounces once off the arena wall."""
        return self._push(
            Bullet(
                position=position,
                velocity=_aimed_velocity(direction, BULLET_SPEED * RICOCHET_SPEED_FACTOR),
                radius=BULLET_RADIUS * RICOCHET_RADIUS_FACTOR,
                can_ricochet=True,
                ricochets_left=1,
            )
        )

    def update(
        self,
        delta_time: float,
        screen_width: float,
        screen_height: float,
        play_area: PlayArea,
    ) -> None:
        """Move bullets, bounce ricochets, and drop inactive or off-screen ones."""
        for bullet in self._bullets:
            if not bullet.active:
                continue
            bullet.position = bullet.position + bullet.velocity * delta_time
            if bullet.can_ricochet and bullet.ricochets_left > 0:
                self._bounce(bullet, play_area)
            pos, r = bullet.position, bullet.radius
            if (
                pos.x + r < 0
                or pos.x - r > screen_width
                or pos.y + r < 0
                or pos.y - r > screen_height
            ):
                bullet.active = False
        self._bullets = [bullet for bullet in self._bullets if bullet.active]

    @staticmethod
    def _bounce(bullet: Bullet, play_area: PlayArea) -> None:
        if bullet.position.distance_to(CENTER) < play_area.radius - bullet.radius:
            return
        normal = (CENTER - bullet.position).normalize()
        dot = bullet.velocity.dot(normal)
        bullet.velocity = bullet.velocity - normal * (2 * dot)
        bullet.ricochets_left -= 1
        bullet.position = CENTER + (bullet.position - CENTER).normalize() * (
            play_area.radius - bullet.radius - RICOCHET_EDGE_GAP
        )

    def clear(self) -> None:
        self._bullets.clear()

    def __iter__(self) -> Iterator[Bullet]:
        return iter(list(self._bullets))

    def __len__(self) -> int:
        return len(self._bullets)