"""Projectile system for the tower defense game."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .config import PROJECTILE_DAMAGE, PROJECTILE_HIT_RADIUS, PROJECTILE_SPEED
from .geometry import Vec2, distance, step_towards

if TYPE_CHECKING:
    from .enemy import Enemy
    from .state import GameState


class Projectile:
    """A shot flying towards the point its target occupied when it was fired."""

    def __init__(self, origin: Vec2, target: Vec2, speed: float = PROJECTILE_SPEED) -> None:
        """Initialize a projectile.

        Args:
            origin: Position of the tower that fired it
            target: Captured target position; the shot does not home
            speed: Units travelled per second
        """
        self.position = origin
        self.target = target
        self.speed = speed
        self.active = True

    def update(self, dt: float) -> None:
        """Move towards the target point, deactivating on arrival."""
        if not self.active:
            return
        self.position, reached = step_towards(self.position, self.target, self.speed * dt)
        if reached:
            self.active = False

    def find_hit(self, enemies: Iterable[Enemy], radius: float = PROJECTILE_HIT_RADIUS) -> Optional[Enemy]:
        """Return the first alive enemy within ``radius`` of the projectile."""
        for enemy in enemies:
            if enemy.alive and distance(self.position, enemy.position) < radius:
                return enemy
        return None

    def __repr__(self) -> str:
        return (
            f"Projectile(at ({self.position[0]:.1f}, {self.position[1]:.1f}) "
            f"to ({self.target[0]:.1f}, {self.target[1]:.1f}) active={self.active})"
        )


def update_projectiles(state: GameState, dt: float) -> None:
    """Fly, collide and compact the projectile store."""
    for projectile in state.projectiles:
        if not projectile.active:
            continue
        projectile.update(dt)
        # A shot that just arrived still gets its collision test this tick.
        enemy = projectile.find_hit(state.enemies)
        if enemy is None:
            continue
        projectile.active = False
        if enemy.take_damage(PROJECTILE_DAMAGE):
            state.award_kill()

    state.projectiles = [p for p in state.projectiles if p.active]
