"""Tower placement validation."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from .config import OCCUPIED_RADIUS, TOWER_COST
from .events import GameEvent
from .geometry import Vec2, distance
from .path import cell_at, cell_center, in_bounds
from .tower import Tower

if TYPE_CHECKING:
    from .state import GameState


class PlacementResult(str, enum.Enum):
    OK = "ok"
    OUT_OF_BOUNDS = "out of bounds"
    ON_PATH = "on the path"
    OCCUPIED = "cell already has a tower"
    INSUFFICIENT_FUNDS = "not enough money"

    @property
    def allowed(self) -> bool:
        return self is PlacementResult.OK


def cell_has_tower(state: GameState, center: Vec2) -> bool:
    return any(distance(tower.position, center) < OCCUPIED_RADIUS for tower in state.towers)


def check_placement(state: GameState, point: Vec2) -> PlacementResult:
    """Validate placing a tower in the grid cell under ``point``.

    Checks bounds, the path, occupancy and funds, in that order.
    """
    column, row = cell_at(point)
    if not in_bounds(column, row):
        return PlacementResult.OUT_OF_BOUNDS
    center = cell_center(column, row)
    if state.path.point_is_on_path(center):
        return PlacementResult.ON_PATH
    if cell_has_tower(state, center):
        return PlacementResult.OCCUPIED
    if state.money < TOWER_COST:
        return PlacementResult.INSUFFICIENT_FUNDS
    return PlacementResult.OK


def place_tower(state: GameState, point: Vec2) -> bool:
    """Build a tower in the cell under ``point`` if the placement is valid.

    Returns:
        bool: True if a tower was built and paid for
    """
    result = check_placement(state, point)
    if not result.allowed:
        state.log(f"Cannot place tower at {cell_at(point)}: {result.value}")
        return False
    center = cell_center(*cell_at(point))
    state.towers.append(Tower(center))
    state.money -= TOWER_COST
    state.emit(GameEvent.TOWER_PLACED)
    state.log(f"Tower placed at {cell_at(point)}, {state.money} money left")
    return True
