"""Sound management system."""

from __future__ import annotations

import array
import math
from typing import Dict, Iterable, Optional

import pygame
import pygame.mixer as mixer

from .config import ENABLE_SOUND, SOUND_VOLUME
from .events import GameEvent

SAMPLE_RATE = 22050

# name -> (frequency in Hz, duration in seconds)
BEEPS = {
    GameEvent.TOWER_PLACED.sound_name: (400, 0.1),
    GameEvent.SHOT.sound_name: (600, 0.05),
    GameEvent.ENEMY_KILLED.sound_name: (200, 0.15),
    GameEvent.WAVE_START.sound_name: (800, 0.3),
    GameEvent.LIFE_LOST.sound_name: (150, 0.2),
    GameEvent.GAME_OVER.sound_name: (100, 0.5),
}


class SoundManager:
    """Plays short synthesized beeps for game events."""

    def __init__(self, enabled: bool = ENABLE_SOUND) -> None:
        """Initialize the sound manager.

        Args:
            enabled: Set to False to keep the mixer untouched
        """
        self.enabled = enabled
        self.sounds: Dict[str, Optional[mixer.Sound]] = {}

        if self.enabled:
            try:
                mixer.init(frequency=SAMPLE_RATE, size=-16, channels=2)
                self._load_sounds()
            except (pygame.error, NotImplementedError) as e:
                print(f"Sound initialization failed: {e}")
                self.enabled = False

    def _load_sounds(self) -> None:
        self.sounds = {name: self._generate_beep(frequency, duration) for name, (frequency, duration) in BEEPS.items()}

    def _generate_beep(self, frequency: float, duration: float) -> Optional[mixer.Sound]:
        """Generate a stereo sine wave."""
        try:
            frames = int(duration * SAMPLE_RATE)
            samples = array.array("h")
            for i in range(frames):
                value = int(32767 * 0.3 * math.sin(2.0 * math.pi * frequency * i / SAMPLE_RATE))
                samples.append(value)
                samples.append(value)

            sound = mixer.Sound(buffer=samples.tobytes())
            sound.set_volume(SOUND_VOLUME)
            return sound
        except pygame.error as e:
            print(f"Failed to generate beep sound: {e}")
            return None

    def play(self, sound_name: str) -> None:
        """Play a sound effect."""
        if not self.enabled or sound_name not in self.sounds:
            return

        sound = self.sounds[sound_name]
        if sound:
            try:
                sound.play()
            except pygame.error as e:
                print(f"Failed to play sound {sound_name}: {e}")

    def play_events(self, events: Iterable[GameEvent]) -> None:
        """Play one sound per distinct event of a frame."""
        for event in dict.fromkeys(events):
            self.play(event.sound_name)

    def stop_all(self) -> None:
        """Stop all playing sounds."""
        if self.enabled:
            try:
                mixer.stop()
            except pygame.error as e:
                print(f"Failed to stop sounds: {e}")
