"""Sound effect playback through pygame.mixer."""

import logging
from pathlib import Path
from typing import Iterable

import pygame

logger = logging.getLogger(__name__)

SOUND_EXTENSIONS = (".wav", ".ogg", ".mp3")


class SoundBank:
    """Loads named sound effects once and plays them on demand.

    Effects are looked up as ``<directory>/<name>.<ext>``. A missing file or a
    machine without an audio device leaves the effect silent; the game runs on.
    """

    def __init__(self, directory: Path, names: Iterable[str]) -> None:
        self.directory = Path(directory)
        self.sounds: dict[str, pygame.mixer.Sound] = {}
        try:
            pygame.mixer.init()
        except pygame.error as exc:
            logger.warning("Audio disabled, mixer unavailable: %s", exc)
            return
        for name in names:
            self._load(name)

    def _load(self, name: str) -> None:
        for ext in SOUND_EXTENSIONS:
            path = self.directory / f"{name}{ext}"
            if path.exists():
                self.sounds[name] = pygame.mixer.Sound(str(path))
                logger.debug("Loaded sound %s from %s", name, path)
                return
        logger.warning("No sound file for %s in %s", name, self.directory)

    def play(self, name: str) -> None:
        sound = self.sounds.get(name)
        if sound is not None:
            sound.play()
