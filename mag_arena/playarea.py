"""The circular arena whose radius grows and shrinks as the score rises."""

from __future__ import annotations

from dataclasses import dataclass, field

from mag_arena.geometry import SCREEN_HEIGHT, SCREEN_WIDTH, Vec2

PLAY_AREA_MARGIN = 50.0
CENTER = Vec2(SCREEN_WIDTH / 2.0, SCREEN_HEIGHT / 2.0)

HUD_HEIGHT = 60.0
HUD_EXTRA_MARGIN = 10.0

DYNAMIC_AREA_SCORE = 1000
AREA_CHANGE_PERIOD = 10.0
AREA_STEP_PER_SECOND = 120.0
MIN_RADIUS_FACTOR = 0.7
MAX_RADIUS_FACTOR = 1.2


def base_radius() -> float:
    """Radius of the arena before it starts to pulse."""
    return min(SCREEN_WIDTH, SCREEN_HEIGHT) / 2.0 - PLAY_AREA_MARGIN


@dataclass
class PlayArea:
    """Current and target radius of the arena with its bounding box."""

    radius: float = field(default_factory=base_radius)
    target_radius: float = field(default_factory=base_radius)
    change_timer: float = 0.0
    transition_speed: float = 1.0
    shrinking: bool = False
    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0

    def __post_init__(self) -> None:
        self.update_bounds(SCREEN_WIDTH, SCREEN_HEIGHT)

    @property
    def center(self) -> Vec2:
        return CENTER

    def update(self, delta_time: float, score: float) -> None:
        """Move the radius toward its target and switch target every period."""
        dynamic = score >= DYNAMIC_AREA_SCORE
        if dynamic:
            self.change_timer += delta_time

        if self.radius != self.target_radius:
            direction = 1.0 if self.target_radius > self.radius else -1.0
            step = delta_time * self.transition_speed * AREA_STEP_PER_SECOND
            self.radius += direction * step
            if (direction > 0 and self.radius >= self.target_radius) or (
                direction < 0 and self.radius <= self.target_radius
            ):
                self.radius = self.target_radius

        if dynamic and self.change_timer >= AREA_CHANGE_PERIOD:
            self.change_timer = 0.0
            self.shrinking = not self.shrinking
            base = base_radius()
            factor = MIN_RADIUS_FACTOR if self.shrinking else MAX_RADIUS_FACTOR
            self.target_radius = base * factor

        self.update_bounds(SCREEN_WIDTH, SCREEN_HEIGHT)

    def update_bounds(self, screen_width: float, screen_height: float) -> None:
        """Recompute the box around the arena, keeping its top below the HUD."""
        half_width = screen_width / 2.0
        half_height = screen_height / 2.0
        self.left = half_width - self.radius
        self.right = half_width + self.radius
        self.top = max(HUD_HEIGHT + HUD_EXTRA_MARGIN, half_height - self.radius)
        self.bottom = half_height + self.radius

    def contains(self, point: Vec2) -> bool:
        return point.distance_to(CENTER) <= self.radius

    def clamp(self, position: Vec2, margin: float) -> Vec2:
        """Keep a circle of radius ``margin`` inside the arena."""
        limit = self.radius - margin
        if position.distance_to(CENTER) <= limit:
            return position
        return CENTER + (position - CENTER).normalize() * limit