"""Enemy system for the tower defense game."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    ENEMY_BASE_HEALTH,
    ENEMY_BASE_SPEED,
    ENEMY_HEALTH_PER_WAVE,
    ENEMY_SPEED_PER_WAVE,
    LATE_WAVE_HEALTH_BONUS,
    LATE_WAVE_SPEED_BONUS,
    LATE_WAVE_THRESHOLD,
)
from .geometry import Vec2, step_towards

if TYPE_CHECKING:
    from .path import Path
    from .state import GameState


def enemy_speed_for_wave(wave_number: int) -> float:
    """Movement speed (units per second) of enemies spawned in a wave."""
    speed = ENEMY_BASE_SPEED + wave_number * ENEMY_SPEED_PER_WAVE
    if wave_number > LATE_WAVE_THRESHOLD:
        speed += wave_number * LATE_WAVE_SPEED_BONUS
    return speed


def enemy_health_for_wave(wave_number: int) -> float:
    """Maximum health of enemies spawned in a wave."""
    health = ENEMY_BASE_HEALTH + wave_number * ENEMY_HEALTH_PER_WAVE
    if wave_number > LATE_WAVE_THRESHOLD:
        health += wave_number * LATE_WAVE_HEALTH_BONUS
    return health


class Enemy:
    """Represents an enemy unit walking the path."""

    def __init__(self, position: Vec2, speed: float, max_health: float) -> None:
        """Initialize an enemy.

        Args:
            position: Starting point, normally the first waypoint
            speed: Units travelled per second
            max_health: Starting and maximum health
        """
        self.position = position
        self.path_index = 0
        self.speed = speed
        self.max_health = max_health
        self.health = max_health
        self.alive = True

    @classmethod
    def for_wave(cls, path: Path, wave_number: int) -> "Enemy":
        """Create an enemy at the start of ``path`` with wave-scaled stats."""
        return cls(path.start, enemy_speed_for_wave(wave_number), enemy_health_for_wave(wave_number))

    def take_damage(self, damage: float) -> bool:
        """Apply damage to the enemy.

        Args:
            damage: Amount of damage to apply

        Returns:
            bool: True if this hit killed the enemy
        """
        if not self.alive:
            return False
        self.health -= damage
        if self.health <= 0:
            self.alive = False
            return True
        return False

    def health_ratio(self) -> float:
        """Remaining health as a fraction in [0, 1]."""
        return max(0.0, min(1.0, self.health / self.max_health))

    def advance(self, path: Path, dt: float) -> bool:
        """Move along the path for one tick.

        The enemy snaps onto a waypoint when the step would reach or pass it,
        and the rest of the step is dropped.

        Args:
            path: The path being followed
            dt: Delta time in seconds

        Returns:
            bool: True if the enemy was already standing on the final waypoint
        """
        if self.path_index >= path.last_index:
            return True
        target = path[self.path_index + 1]
        self.position, reached = step_towards(self.position, target, self.speed * dt)
        if reached:
            self.path_index += 1
        return False

    def __repr__(self) -> str:
        state = "alive" if self.alive else "dead"
        return (
            f"Enemy(health={self.health:g}/{self.max_health:g} at "
            f"({self.position[0]:.1f}, {self.position[1]:.1f}) segment={self.path_index} {state})"
        )


def update_enemies(state: GameState, dt: float) -> None:
    """Advance every alive enemy; enemies at the path end cost a life."""
    for enemy in state.enemies:
        if not enemy.alive:
            continue
        if enemy.advance(state.path, dt):
            enemy.alive = False
            state.lose_life()
            if state.game_over:
                return
