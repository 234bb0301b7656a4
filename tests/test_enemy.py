import math
import random

import pytest

from mag_arena.bullet import BulletList
from mag_arena.enemy import DEATH_ANIMATION_DURATION, EnemyList, EnemyType
from mag_arena.geometry import Vec2


@pytest.fixture
def rng():
    return random.Random(1234)


def _update(enemies, player, dt, bullets, rng, now=0.0):
    enemies.update(player, dt, 1700, 1000, bullets, now, rng)


@pytest.mark.parametrize(
    "kind, color, health, speed",
    [
        (EnemyType.NORMAL, "white", 2, 100.0),
        (EnemyType.SPEEDER, "skyblue", 1, 150.0),
        (EnemyType.TANK, "gray", 3, 100.0),
        (EnemyType.EXPLODER, "red", 2, 100.0),
        (EnemyType.SHOOTER, "yellow", 1, 100.0),
    ],
)
def test_add_sets_traits_by_kind(kind, color, health, speed):
    enemies = EnemyList()
    enemy = enemies.add(Vec2(10, 10), 12.0, 100.0, kind)
    assert enemy.color == color
    assert enemy.health == health
    assert enemy.speed == pytest.approx(speed)
    assert enemy.active and not enemy.is_dying


def test_newest_enemy_comes_first():
    enemies = EnemyList()
    first = enemies.add(Vec2(1, 1), 10.0, 100.0, EnemyType.NORMAL)
    second = enemies.add(Vec2(2, 2), 10.0, 100.0, EnemyType.TANK)
    assert [e for e in enemies] == [second, first]
    assert len(enemies) == 2


def test_normal_enemy_chases_player(rng):
    enemies = EnemyList()
    enemy = enemies.add(Vec2(100, 100), 10.0, 120.0, EnemyType.NORMAL)
    player = Vec2(600, 400)
    before = enemy.position.distance_to(player)
    _update(enemies, player, 0.1, BulletList(), rng)
    assert enemy.velocity.length() == pytest.approx(120.0)
    assert before - enemy.position.distance_to(player) == pytest.approx(12.0)


def test_enemy_on_player_stays_still(rng):
    enemies = EnemyList()
    enemy = enemies.add(Vec2(300, 300), 10.0, 120.0, EnemyType.TANK)
    _update(enemies, Vec2(300, 300), 0.1, BulletList(), rng)
    assert enemy.velocity == Vec2(0.0, 0.0)
    assert enemy.position == Vec2(300, 300)


def test_enemy_is_kept_on_screen(rng):
    enemies = EnemyList()
    low = enemies.add(Vec2(1, 1), 10.0, 200.0, EnemyType.NORMAL)
    _update(enemies, Vec2(-500, -500), 0.5, BulletList(), rng)
    assert low.position == Vec2(0.0, 0.0)

    high = enemies.add(Vec2(1699, 999), 10.0, 200.0, EnemyType.NORMAL)
    _update(enemies, Vec2(5000, 5000), 0.5, BulletList(), rng)
    assert high.position == Vec2(1700.0, 1000.0)


def test_shooter_fires_toward_player_when_ready(rng):
    enemies = EnemyList()
    shooter = enemies.add(Vec2(500, 500), 13.0, 100.0, EnemyType.SHOOTER)
    shooter.shoot_timer = 0.99
    bullets = BulletList()
    player = Vec2(800, 500)
    _update(enemies, player, 0.02, bullets, rng)
    assert len(bullets) == 1
    assert shooter.shoot_timer == 0.0
    bullet = next(iter(bullets))
    assert bullet.position == Vec2(500, 500)
    angle = math.atan2(bullet.velocity.y, bullet.velocity.x)
    assert abs(angle) <= 0.05 + 1e-9


def test_shooter_holds_fire_out_of_range(rng):
    enemies = EnemyList()
    shooter = enemies.add(Vec2(100, 500), 13.0, 100.0, EnemyType.SHOOTER)
    shooter.shoot_timer = 0.99
    bullets = BulletList()
    _update(enemies, Vec2(700, 500), 0.02, bullets, rng)
    assert len(bullets) == 0
    assert shooter.shoot_timer >= 1.0


def test_shooter_retreats_when_close(rng):
    enemies = EnemyList()
    shooter = enemies.add(Vec2(500, 500), 13.0, 100.0, EnemyType.SHOOTER)
    player = Vec2(600, 500)
    _update(enemies, player, 0.1, BulletList(), rng)
    assert shooter.velocity.length() == pytest.approx(120.0)
    assert shooter.position.distance_to(player) > 100.0


def test_shooter_approaches_when_far(rng):
    enemies = EnemyList()
    shooter = enemies.add(Vec2(500, 500), 13.0, 100.0, EnemyType.SHOOTER)
    player = Vec2(980, 500)
    _update(enemies, player, 0.1, BulletList(), rng)
    assert shooter.velocity.length() == pytest.approx(80.0)
    assert shooter.position.distance_to(player) < 480.0


def test_shooter_backs_off_in_mid_range_without_oscillation(rng):
    enemies = EnemyList()
    shooter = enemies.add(Vec2(500, 500), 13.0, 100.0, EnemyType.SHOOTER)
    _update(enemies, Vec2(800, 500), 0.1, BulletList(), rng, now=0.0)
    assert shooter.velocity.x == pytest.approx(-30.0)
    assert shooter.velocity.y == pytest.approx(0.0, abs=1e-9)


def test_dying_enemy_is_removed_after_animation(rng):
    enemies = EnemyList()
    enemy = enemies.add(Vec2(50, 50), 10.0, 100.0, EnemyType.EXPLODER)
    enemy.active = False
    enemy.is_dying = True
    _update(enemies, Vec2(0, 0), DEATH_ANIMATION_DURATION / 2, BulletList(), rng)
    assert len(enemies) == 1
    assert enemy.position == Vec2(50, 50)
    _update(enemies, Vec2(0, 0), DEATH_ANIMATION_DURATION, BulletList(), rng)
    assert len(enemies) == 0


def test_inactive_enemy_that_is_not_dying_stays(rng):
    enemies = EnemyList()
    enemy = enemies.add(Vec2(50, 50), 10.0, 100.0, EnemyType.NORMAL)
    enemy.active = False
    _update(enemies, Vec2(500, 500), 5.0, BulletList(), rng)
    assert list(enemies) == [enemy]
    assert enemy.position == Vec2(50, 50)


def test_remove_and_clear():
    enemies = EnemyList()
    a = enemies.add(Vec2(1, 1), 10.0, 100.0, EnemyType.NORMAL)
    b = enemies.add(Vec2(2, 2), 10.0, 100.0, EnemyType.NORMAL)
    assert enemies.remove(a) is True
    assert enemies.remove(a) is False
    assert list(enemies) == [b]
    enemies.clear()
    assert len(enemies) == 0