"""Character lines shown during play and the floating texts that carry them."""

from __future__ import annotations

import enum
import subprocess
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mag_arena.geometry import Vec2

MAX_SCREEN_TEXTS = 10
MAX_CACHED_PHRASES = 5
MAX_PHRASE_LENGTH = 100
MAX_TYPE_LENGTH = 20
MAX_TEXT_LENGTH = 100
REQUEST_THRESHOLD = 3

DEFAULT_CACHE_PATH = "phrases_cache.txt"
DEFAULT_SCRIPT_PATH = "./run_gemini.sh"
DEFAULT_PRELOAD_PATH = "./preload_phrases.sh"


class PhraseKind(enum.Enum):
    BOSS = "boss"
    INTRO = "intro"
    KILL_MILESTONE = "kill_milestone"
    DAMAGE = "damage"
    BOSS_APPEAR = "boss_appear"
    BOSS_PHASE = "boss_phase"
    BOSS_DEFEAT = "boss_defeat"
    RANDOM_JOKE = "random_joke"
    GRONKARR_LAMENT = "gronkarr_lament"
    COSMIC_WISDOM = "cosmic_wisdom"


_KINDS: tuple[PhraseKind, ...] = tuple(PhraseKind)

DEFAULT_PHRASES: dict[PhraseKind, str] = {
    PhraseKind.BOSS: "HEXAKRON: Sua imperfeição me ofende.",
    PhraseKind.INTRO: "GRONKARR: Luz... geometria... meu poder... esvaído?",
    PhraseKind.KILL_MILESTONE: "COSMOS: Uau! Matou 10 hein... quer um presente otaro?",
    PhraseKind.DAMAGE: "GRONKARR: EITA LAPADA DO KRAI OBJETO GEOMETRICO!",
    PhraseKind.BOSS_APPEAR: "NARRADOR: Um objeto geometrico poderoso se aproxima!",
    PhraseKind.BOSS_PHASE: "HEXAKRON: Este não é nem meu verdadeiro poder!",
    PhraseKind.BOSS_DEFEAT: "HEXAKRON: Impossível... Como fui derrotado?!",
    PhraseKind.RANDOM_JOKE: (
        "COSMOS: Por que o círculo é o melhor DJ? Porque sabe fazer os melhores loops!"
    ),
    PhraseKind.GRONKARR_LAMENT: (
        "GRONKARR: Antes eu nadava livre... agora sou só um ponto no vazio."
    ),
    PhraseKind.COSMIC_WISDOM: "UNIVERSO: Na matemática do caos, até o erro tem seu padrão.",
}

Launcher = Callable[[Sequence[str], "Path | None"], None]


def type_index(name: str) -> int:
    """Slot of a phrase kind by name; unknown names fall back to the boss slot."""
    for index, kind in enumerate(_KINDS):
        if kind.value == name:
            return index
    return 0


def _launch_detached(command: Sequence[str], output: Path | None) -> None:
    """Start a helper in the background, appending its output to a file."""
    try:
        if output is None:
            subprocess.Popen(
                list(command),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        else:
            with open(output, "ab") as sink:
                subprocess.Popen(
                    list(command),
                    stdin=subprocess.DEVNULL,
                    stdout=sink,
                    stderr=subprocess.DEVNULL,
                    start_new_session=True,
                )
    except OSError:
        return


def _parse_cache_line(line: str) -> tuple[str, str] | None:
    line = line.split("\n", 1)[0]
    name, sep, phrase = line.partition(":")
    if not sep or not name or len(name) >= MAX_TYPE_LENGTH or not phrase:
        return None
    return name, phrase[: MAX_PHRASE_LENGTH - 1]


class Narrator:
    """Rotates through cached lines per kind and asks a helper for more."""

    def __init__(
        self,
        cache_path: str | Path = DEFAULT_CACHE_PATH,
        script_path: str = DEFAULT_SCRIPT_PATH,
        preload_path: str = DEFAULT_PRELOAD_PATH,
        launcher: Launcher | None = None,
    ) -> None:
        self.cache_path = Path(cache_path)
        self.script_path = script_path
        self.preload_path = preload_path
        self._launch = launcher or _launch_detached
        self._phrases: list[list[str]] = [[DEFAULT_PHRASES[k]] for k in _KINDS]
        self._current: list[int] = [0] * len(_KINDS)

    def load_cache(self) -> None:
        """Add lines of the form ``kind:phrase`` from the cache file, if any."""
        try:
            with open(self.cache_path, encoding="utf-8", errors="replace") as cache:
                lines = cache.readlines()
        except OSError:
            return
        for line in lines:
            parsed = _parse_cache_line(line)
            if parsed is None:
                continue
            name, phrase = parsed
            slot = self._phrases[type_index(name)]
            if len(slot) < MAX_CACHED_PHRASES:
                slot.append(phrase)

    def start_preload(self) -> None:
        """Start the helper that fills the cache ahead of play."""
        self._launch([self.preload_path], None)

    def phrase(self, kind: PhraseKind | str) -> str:
        """Next line for a kind, asking for more while the cache is short."""
        name = kind.value if isinstance(kind, PhraseKind) else kind
        index = type_index(name)
        slot = self._phrases[index]
        self._current[index] = (self._current[index] + 1) % len(slot)
        if len(slot) < REQUEST_THRESHOLD:
            self._launch([self.script_path, name], self.cache_path)
        return slot[self._current[index]]


@dataclass
class ScreenText:
    text: str
    position: Vec2
    font_size: float
    color: Any
    duration: float
    fade_out: bool = True
    timer: float = 0.0
    active: bool = True


class ScreenTexts:
    """At most ten floating texts, each shown for its own duration."""

    def __init__(self, capacity: int = MAX_SCREEN_TEXTS) -> None:
        self.capacity = capacity
        self._texts: list[ScreenText] = []

    def show(
        self,
        text: str,
        position: Vec2,
        font_size: float,
        color: Any,
        duration: float,
        fade_out: bool,
    ) -> ScreenText | None:
        """Queue a text; when every slot is taken the text is dropped."""
        if len(self._texts) >= self.capacity:
            return None
        entry = ScreenText(
            text=text[: MAX_TEXT_LENGTH - 1],
            position=position,
            font_size=font_size,
            color=color,
            duration=duration,
            fade_out=fade_out,
        )
        self._texts.append(entry)
        return entry

    def update(self, delta_time: float) -> None:
        for entry in self._texts:
            entry.timer += delta_time
            if entry.timer >= entry.duration:
                entry.active = False
        self._texts = [entry for entry in self._texts if entry.active]

    def __iter__(self) -> Iterator[ScreenText]:
        return iter(list(self._texts))

    def __len__(self) -> int:
        return len(self._texts)