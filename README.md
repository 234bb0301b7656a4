# mag_arena

Building blocks for a top-down arena shooter, free of any window or
graphics library. The player moves inside a circular play area that
starts breathing (shrinking and growing every ten seconds) once the
score reaches 1000. Enemies chase or shoot at the player, a four-layer
boss fires bullet patterns, and power-ups appear in sets of three.

Everything here is plain simulation. You pass in elapsed time, the
state of the controls and a `random.Random`, and the objects move
forward. Drawing and sound output are left to whatever front end you
put on top.

## Modules

- `mag_arena.geometry`: the immutable `Vec2` (`length`, `length_sqr`,
  `normalize`, `distance_to`, `dot`, plus `+`, `-` and scaling),
  `check_collision_circles`, `lerp`, and `random_value`, which draws an
  integer from a closed range. It also holds the screen size and the
  speed and radius limits.
- `mag_arena.playarea`: `PlayArea`, the circular arena. `update(delta_time,
  score)` eases the radius toward its target at 120 units per second.
  From a score of 1000 on it switches the target between 0.7 and 1.2
  times `base_radius()` every ten seconds. `contains` and `clamp` test
  points against the arena and keep circles inside it.
- `mag_arena.bullet`: `Bullet` and `BulletList`. `add` fires a normal
  shot, `add_with_props` fires one of a given size and damage, and
  `add_ricochet` fires a faster, larger shot that bounces once off the
  arena wall. `update` moves the bullets and drops the ones that are
  inactive or off screen.
- `mag_arena.powerup`: `PowerupType` (`DAMAGE`, `HEAL`, `SHIELD`),
  `Powerup` and `PowerupField`. Power-ups last ten seconds.
  `collect(position, radius)` returns the kind picked up, or `None`.
  Picking one up deactivates all the others.
- `mag_arena.enemy`: `EnemyType` (`NORMAL`, `SPEEDER`, `TANK`,
  `EXPLODER`, `SHOOTER`), `Enemy` and `EnemyList`. Each kind gets its
  own colour, health and speed. Shooters back off, close in or strafe
  depending on distance, and fire about once a second when in range.
  Enemies that are dying are removed after a 0.8 s death animation.
- `mag_arena.boss`: `Boss`, with layers 4 to 1 holding 50, 100, 150
  and 250 health. Each layer has its own movement and attack pattern.
  `hit` applies a bullet and peels off emptied layers. A ricochet burst
  follows each layer change, and the last layer dashes at the player.
- `mag_arena.player`: `Controls`, a per-frame snapshot of held keys,
  pressed keys, mouse and typed text, and `Player`. `Player` handles
  movement, a space-bar dash with a five-second cooldown, the blinking
  invincibility period started by `start_invincibility`, and the
  shield timer. The player starts with three lives.
- `mag_arena.spawning`: `choose_enemy_type` and `enemy_stats` pick the
  kind, radius and speed of an enemy from the score and a roll.
  `edge_spawn_position` places an enemy just outside the arena box.
  `EnemySpawner.tick` spawns on an interval that starts at 1.5 s and
  shrinks by 10% every ten seconds, down to 0.2 s.
  `EnemySpawner.fill` tops the field up to fifteen enemies.
- `mag_arena.narrative`:
  - `PhraseKind` and `Narrator`, which hands out character lines.
    `Narrator.load_cache` reads extra lines of the form `kind:phrase`
    from a cache file. `Narrator.phrase` cycles through the lines for a
    kind. While a kind has fewer than three lines, it starts a helper
    script in the background that appends more to the cache file.
    `start_preload` starts a preload helper. Both helpers can be
    replaced by passing a `launcher` callable.
  - `ScreenTexts`, which holds up to ten timed on-screen messages.
- `mag_arena.audio`: `Sound` and `GameAudio`. Sounds without sample
  data are skipped, and playback goes to a `backend` callable you
  provide.

## A short example

```python
import random

from mag_arena.bullet import BulletList
from mag_arena.geometry import Vec2, check_collision_circles
from mag_arena.playarea import PlayArea

a = Vec2(0.0, 0.0)
b = Vec2(3.0, 4.0)
print(a.distance_to(b))                          # 5.0
print(check_collision_circles(a, 2.0, b, 3.0))   # True

area = PlayArea()
bullets = BulletList()
bullets.add(area.center, Vec2(1.0, 0.0))
bullets.update(1 / 60, 1700, 1000, area)
print(len(bullets))                              # 1
```

## What the package does not do

The package has no game loop and no state machine for menus, pausing
or game over. It does not check bullets against enemies or against the
player, and it does not count score, lives lost or kills. It keeps no
high-score table. It has no command to run and does no drawing.
A front end has to combine the pieces above into a playable game.