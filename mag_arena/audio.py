"""Sound effects and background music for the game.

Sounds without sample data are skipped, so the game runs silently
when nothing has been loaded.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass, field


class AudioAction(enum.Enum):
    PLAY = "play"
    STREAM = "stream"
    RESTART = "restart"


@dataclass(frozen=True)
class Sound:
    """A sound effect or music track; ``frame_count`` of zero means no data."""

    name: str = ""
    frame_count: int = 0

    @property
    def loaded(self) -> bool:
        return self.frame_count > 0


Backend = Callable[[AudioAction, Sound], None]


def _silent(action: AudioAction, sound: Sound) -> None:
    """Backend used when no output is attached."""


@dataclass
class GameAudio:
    """The game's sounds and an output that plays them while the device is open."""

    shoot: Sound = field(default_factory=lambda: Sound("shoot"))
    enemy_explode: Sound = field(default_factory=lambda: Sound("enemy_explode"))
    player_explode: Sound = field(default_factory=lambda: Sound("player_explode"))
    background_music: Sound = field(default_factory=lambda: Sound("background_music"))
    backend: Backend = _silent
    device_ready: bool = True

    def play(self, sound: Sound) -> bool:
        """Play an effect; returns whether it was sent to the output."""
        if not (self.device_ready and sound.loaded):
            return False
        self.backend(AudioAction.PLAY, sound)
        return True

    def update_music(self) -> bool:
        """Feed the music stream; returns whether there was music to feed."""
        if not (self.device_ready and self.background_music.loaded):
            return False
        self.backend(AudioAction.STREAM, self.background_music)
        return True

    def restart_music(self) -> bool:
        """Stop the music and play it again from the start."""
        if not (self.device_ready and self.background_music.loaded):
            return False
        self.backend(AudioAction.RESTART, self.background_music)
        return True

    def close(self) -> None:
        """Close the device; nothing plays afterwards."""
        self.device_ready = False