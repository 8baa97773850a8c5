"""Session state and entity stores."""

from __future__ import annotations

from typing import Callable, List, Optional

from .config import INITIAL_LIVES, INITIAL_MONEY, KILL_REWARD_BASE, KILL_REWARD_PER_WAVE, MAX_LIVES
from .enemy import Enemy
from .events import GameEvent
from .path import Path, default_path
from .projectile import Projectile
from .tower import Tower
from .wave import WaveDirector

LogFn = Callable[[str], None]


def kill_reward(wave_number: int) -> int:
    return KILL_REWARD_BASE + KILL_REWARD_PER_WAVE * wave_number


class GameState:
    """Everything the simulation mutates, owned by the game loop."""

    def __init__(self, path: Optional[Path] = None, logger: Optional[LogFn] = None) -> None:
        self.path = path or default_path()
        self.logger = logger
        self.events: List[GameEvent] = []
        self._init_session()

    def _init_session(self) -> None:
        self.money = INITIAL_MONEY
        self.lives = INITIAL_LIVES
        self.game_over = False
        self.placement_mode = False
        self.enemies: List[Enemy] = []
        self.towers: List[Tower] = []
        self.projectiles: List[Projectile] = []
        self.director = WaveDirector()
        self.log(f"Wave {self.wave} started: {self.director.enemies_to_spawn} enemies")

    @property
    def wave(self) -> int:
        return self.director.current_wave

    def log(self, message: str) -> None:
        if self.logger:
            self.logger(message)

    def emit(self, event: GameEvent) -> None:
        self.events.append(event)

    def reset(self) -> None:
        """Start a fresh session on the same path."""
        self._init_session()
        self.emit(GameEvent.RESET)
        self.log("Session reset")

    def lose_life(self) -> None:
        if self.game_over:
            return
        self.lives = max(0, min(MAX_LIVES, self.lives - 1))
        self.emit(GameEvent.LIFE_LOST)
        self.log(f"Enemy reached the end, {self.lives} lives left")
        if self.lives <= 0:
            self.game_over = True
            self.placement_mode = False
            self.emit(GameEvent.GAME_OVER)
            self.log(f"Game over on wave {self.wave}")

    def award_kill(self) -> None:
        self.money += kill_reward(self.wave)
        self.emit(GameEvent.ENEMY_KILLED)

    def alive_enemies(self) -> List[Enemy]:
        return [enemy for enemy in self.enemies if enemy.alive]

    def clear_dead_enemies(self) -> None:
        self.enemies = self.alive_enemies()

    def __repr__(self) -> str:
        return (
            f"GameState(money={self.money}, lives={self.lives}, wave={self.wave}, "
            f"enemies={len(self.enemies)}, towers={len(self.towers)}, "
            f"projectiles={len(self.projectiles)}, game_over={self.game_over})"
        )
