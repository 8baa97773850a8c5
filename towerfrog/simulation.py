"""Per-frame simulation step and read-only views for rendering."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from .enemy import update_enemies
from .geometry import Vec2
from .placement import place_tower
from .projectile import update_projectiles
from .state import GameState
from .tower import update_towers
from .wave import update_waves


class CommandType(str, enum.Enum):
    TOGGLE_PLACEMENT = "toggle_placement"
    PLACE_TOWER = "place_tower"
    CANCEL_PLACEMENT = "cancel_placement"
    RESET = "reset"


@dataclass(frozen=True)
class Command:
    kind: CommandType
    point: Optional[Vec2] = None

    @classmethod
    def place(cls, point: Vec2) -> "Command":
        return cls(CommandType.PLACE_TOWER, point)


def step(state: GameState, dt: float, commands: Iterable[Command] = ()) -> GameState:
    """Advance the simulation by one frame.

    Systems run in a fixed order: waves, enemy motion, towers, projectiles,
    then player commands. Nothing but a reset changes the state once the
    game is over.
    """
    state.events.clear()
    if not state.game_over:
        _run_systems(state, dt)
    for command in commands:
        apply_command(state, command)
    return state


def _run_systems(state: GameState, dt: float) -> None:
    for system in (update_waves, update_enemies, update_towers, update_projectiles):
        system(state, dt)
        if state.game_over:
            return


def apply_command(state: GameState, command: Command) -> None:
    if command.kind is CommandType.RESET:
        state.reset()
        return
    if state.game_over:
        return
    if command.kind is CommandType.TOGGLE_PLACEMENT:
        state.placement_mode = not state.placement_mode
    elif command.kind is CommandType.CANCEL_PLACEMENT:
        state.placement_mode = False
    elif command.kind is CommandType.PLACE_TOWER:
        if not state.placement_mode or command.point is None:
            return
        place_tower(state, command.point)
        state.placement_mode = False


@dataclass(frozen=True)
class EnemyView:
    position: Vec2
    health_ratio: float
    alive: bool


@dataclass(frozen=True)
class TowerView:
    position: Vec2
    range: float


@dataclass(frozen=True)
class ProjectileView:
    position: Vec2
    active: bool


@dataclass(frozen=True)
class SessionView:
    money: int
    lives: int
    wave: int
    game_over: bool
    placement_mode: bool
    wave_delay: float


@dataclass(frozen=True)
class Snapshot:
    enemies: Tuple[EnemyView, ...]
    towers: Tuple[TowerView, ...]
    projectiles: Tuple[ProjectileView, ...]
    session: SessionView


def snapshot(state: GameState) -> Snapshot:
    return Snapshot(
        enemies=tuple(EnemyView(e.position, e.health_ratio(), e.alive) for e in state.enemies),
        towers=tuple(TowerView(t.position, t.range) for t in state.towers),
        projectiles=tuple(ProjectileView(p.position, p.active) for p in state.projectiles),
        session=SessionView(
            money=state.money,
            lives=state.lives,
            wave=state.wave,
            game_over=state.game_over,
            placement_mode=state.placement_mode,
            wave_delay=state.director.wave_delay_remaining,
        ),
    )
