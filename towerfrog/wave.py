"""Wave system for the tower defense game."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Optional

from .config import SPAWN_INTERVAL, WAVE_DELAY
from .enemy import Enemy
from .events import GameEvent

if TYPE_CHECKING:
    from .path import Path
    from .state import GameState


def enemies_for_wave(wave_number: int) -> int:
    """Number of enemies a wave spawns."""
    return 5 + 2 * wave_number + wave_number * wave_number // 4


class WavePhase(str, enum.Enum):
    SPAWNING = "spawning"
    WAITING_FOR_CLEAR = "waiting_for_clear"
    INTER_WAVE_DELAY = "inter_wave_delay"


class WaveDirector:
    """Manages enemy waves."""

    def __init__(self) -> None:
        """Initialize the wave director at wave 1."""
        self.current_wave = 1
        self.enemies_to_spawn = 0
        self.spawn_timer = 0.0
        self.delay_timer = 0.0
        self.phase = WavePhase.SPAWNING
        self.start_wave(1)

    def start_wave(self, wave_number: int) -> None:
        """Start a wave.

        Args:
            wave_number: The wave to start (1-indexed)
        """
        self.current_wave = wave_number
        self.enemies_to_spawn = enemies_for_wave(wave_number)
        self.spawn_timer = 0.0
        self.delay_timer = 0.0
        self.phase = WavePhase.SPAWNING

    def spawn_enemy(self, path: Path) -> Enemy:
        """Create an enemy for the current wave at the start of the path."""
        return Enemy.for_wave(path, self.current_wave)

    def update(self, dt: float, state: GameState) -> Optional[Enemy]:
        """Update the wave director.

        Args:
            dt: Delta time since last update
            state: The game state whose enemy store is watched

        Returns:
            Enemy: A new enemy to spawn, or None
        """
        if self.phase is WavePhase.SPAWNING:
            return self._update_spawning(dt, state.path)
        if self.phase is WavePhase.WAITING_FOR_CLEAR:
            if not any(enemy.alive for enemy in state.enemies):
                self.phase = WavePhase.INTER_WAVE_DELAY
                self.delay_timer = WAVE_DELAY
            return None
        self.delay_timer -= dt
        if self.delay_timer <= 0.0:
            self.start_wave(self.current_wave + 1)
            state.clear_dead_enemies()
            state.emit(GameEvent.WAVE_START)
            state.log(f"Wave {self.current_wave} started: {self.enemies_to_spawn} enemies")
        return None

    def _update_spawning(self, dt: float, path: Path) -> Optional[Enemy]:
        enemy = None
        self.spawn_timer -= dt
        if self.spawn_timer <= 0.0 and self.enemies_to_spawn > 0:
            enemy = self.spawn_enemy(path)
            self.enemies_to_spawn -= 1
            self.spawn_timer = SPAWN_INTERVAL
        if self.enemies_to_spawn == 0:
            self.phase = WavePhase.WAITING_FOR_CLEAR
        return enemy

    @property
    def wave_delay_remaining(self) -> float:
        """Seconds until the next wave, zero outside the inter-wave delay."""
        if self.phase is WavePhase.INTER_WAVE_DELAY:
            return max(0.0, self.delay_timer)
        return 0.0

    def __repr__(self) -> str:
        return f"WaveDirector(wave={self.current_wave}, phase={self.phase.value}, to_spawn={self.enemies_to_spawn})"


def update_waves(state: GameState, dt: float) -> None:
    enemy = state.director.update(dt, state)
    if enemy is not None:
        state.enemies.append(enemy)
        state.emit(GameEvent.ENEMY_SPAWN)
