"""The player's ship: movement, dashing, invincibility and shield."""

from __future__ import annotations

from dataclasses import dataclass, field

from mag_arena.geometry import (
    PLAYER_RADIUS,
    PLAYER_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    Vec2,
)
from mag_arena.playarea import PlayArea

INVINCIBILITY_TIME = 3.0
BLINK_FREQUENCY = 0.1
DASH_DURATION = 0.25
DASH_COOLDOWN = 5.0
DASH_SPEED = 800.0
STARTING_LIVES = 3
MIN_DASH_INPUT = 0.1


@dataclass(frozen=True)
class Controls:
    """What the player is doing on one frame.

    ``pressed_keys`` holds keys pressed this frame by lower-case name
    ("space", "enter", "backspace", "p", ...); the direction flags are
    keys held down.
    """

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    mouse_position: Vec2 = Vec2()
    shoot: bool = False
    mouse_clicked: bool = False
    pressed_keys: frozenset[str] = frozenset()
    typed: str = ""

    @property
    def wants_dash(self) -> bool:
        return "space" in self.pressed_keys

    @property
    def movement(self) -> Vec2:
        """Raw direction from the held keys; down wins over up, right over left."""
        x = 0.0
        y = 0.0
        if self.up:
            y = -1.0
        if self.down:
            y = 1.0
        if self.left:
            x = -1.0
        if self.right:
            x = 1.0
        return Vec2(x, y)


@dataclass
class Player:
    position: Vec2 = field(
        default_factory=lambda: Vec2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)
    )
    radius: float = PLAYER_RADIUS
    color: str = "white"
    lives: int = STARTING_LIVES
    is_invincible: bool = False
    invincible_timer: float = 0.0
    blink_timer: float = 0.0
    visible: bool = True
    has_shield: bool = False
    shield_timer: float = 0.0
    is_dashing: bool = False
    dash_timer: float = 0.0
    dash_cooldown: float = 0.0
    dash_direction: Vec2 = Vec2()

    def update(self, delta_time: float, controls: Controls, play_area: PlayArea) -> None:
        """Advance one frame of movement and timers."""
        if self.dash_cooldown > 0.0:
            self.dash_cooldown = max(0.0, self.dash_cooldown - delta_time)

        if controls.wants_dash and self.dash_cooldown <= 0.0 and not self.is_dashing:
            self._try_start_dash(controls)

        if self.is_dashing:
            self.dash_timer -= delta_time
            target = self.position + self.dash_direction * (DASH_SPEED * delta_time)
            self.position = play_area.clamp(target, self.radius)
            if self.dash_timer <= 0.0:
                self.is_dashing = False
                self.dash_cooldown = DASH_COOLDOWN
        else:
            movement = controls.movement
            if movement.x != 0.0 or movement.y != 0.0:
                step = movement.normalize() * (PLAYER_SPEED * delta_time)
                self.position = play_area.clamp(self.position + step, self.radius)

        if self.is_invincible:
            self.invincible_timer -= delta_time
            self.blink_timer -= delta_time
            if self.blink_timer <= 0.0:
                self.visible = not self.visible
                self.blink_timer = BLINK_FREQUENCY
            if self.invincible_timer <= 0.0:
                self.is_invincible = False
                self.visible = True

        if self.has_shield:
            self.shield_timer -= delta_time
            if self.shield_timer <= 0.0:
                self.has_shield = False

    def _try_start_dash(self, controls: Controls) -> None:
        direction = controls.movement
        if direction.x == 0.0 and direction.y == 0.0:
            direction = controls.mouse_position - self.position
        if direction.length() > MIN_DASH_INPUT:
            self.is_dashing = True
            self.dash_timer = DASH_DURATION
            self.dash_direction = direction.normalize()

    def start_invincibility(self) -> None:
        """Begin the blinking grace period after taking a hit."""
        self.is_invincible = True
        self.invincible_timer = INVINCIBILITY_TIME
        self.blink_timer = BLINK_FREQUENCY