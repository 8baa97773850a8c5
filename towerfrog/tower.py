"""Tower system for the tower defense game."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from .config import CELL_HEIGHT, CELL_WIDTH, TOWER_FIRE_INTERVAL, TOWER_RANGE
from .events import GameEvent
from .geometry import Vec2, distance
from .projectile import Projectile

if TYPE_CHECKING:
    from .enemy import Enemy
    from .path import Path
    from .state import GameState


def progress_score(enemy: Enemy, path: Path) -> float:
    """How far an enemy has come along the path.

    Grows with the segment index and, within a segment, as the enemy closes
    in on the next waypoint.
    """
    next_index = min(enemy.path_index + 1, path.last_index)
    remaining = distance(enemy.position, path[next_index])
    return enemy.path_index + 1.0 - remaining / (CELL_WIDTH + CELL_HEIGHT)


class Tower:
    """Represents a tower in the game."""

    def __init__(self, position: Vec2, range_: float = TOWER_RANGE, fire_interval: float = TOWER_FIRE_INTERVAL) -> None:
        """Initialize a tower.

        Args:
            position: Centre of the grid cell the tower stands on
            range_: Targeting radius
            fire_interval: Seconds between shots
        """
        self.position = position
        self.range = range_
        self.fire_interval = fire_interval
        self.cooldown = 0.0

    def is_in_range(self, point: Vec2) -> bool:
        """Check if a point is strictly inside the tower range.

        Args:
            point: Map coordinates

        Returns:
            bool: True if within range
        """
        return distance(self.position, point) < self.range

    def find_target(self, enemies: Iterable[Enemy], path: Path) -> Optional[Enemy]:
        """Find the in-range enemy furthest along the path.

        Ties keep the first enemy found.

        Args:
            enemies: Enemy store to scan
            path: Path used to score progress

        Returns:
            Enemy: The best target, or None
        """
        best = None
        best_progress = 0.0
        for enemy in enemies:
            if not enemy.alive or not self.is_in_range(enemy.position):
                continue
            progress = progress_score(enemy, path)
            if best is None or progress > best_progress:
                best = enemy
                best_progress = progress
        return best

    def update(self, dt: float, enemies: Iterable[Enemy], path: Path) -> Optional[Projectile]:
        """Tick the cooldown and fire when ready.

        With no target in range the cooldown rests at zero, so an idle tower
        fires once when a target appears instead of catching up on shots.

        Returns:
            Projectile: The shot fired this tick, or None
        """
        self.cooldown -= dt
        if self.cooldown > 0.0:
            return None
        target = self.find_target(enemies, path)
        if target is None:
            self.cooldown = 0.0
            return None
        self.cooldown = self.fire_interval
        return Projectile(self.position, target.position)

    def __repr__(self) -> str:
        return f"Tower(at ({self.position[0]:.1f}, {self.position[1]:.1f}) cooldown={self.cooldown:.2f})"


def update_towers(state: GameState, dt: float) -> None:
    for tower in state.towers:
        projectile = tower.update(dt, state.enemies, state.path)
        if projectile is not None:
            state.projectiles.append(projectile)
            state.emit(GameEvent.SHOT)
