from __future__ import annotations

import enum


class GameEvent(str, enum.Enum):
    """Things that happened during a simulation step."""

    WAVE_START = "wave_start"
    ENEMY_SPAWN = "enemy_spawn"
    TOWER_PLACED = "tower_place"
    SHOT = "shoot"
    ENEMY_KILLED = "enemy_death"
    LIFE_LOST = "life_lost"
    GAME_OVER = "game_over"
    RESET = "reset"

    @property
    def sound_name(self) -> str:
        return self.value
