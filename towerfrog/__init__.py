"""Frame-stepped tower defense simulation."""

from .simulation import Command, CommandType, snapshot, step
from .state import GameState

__all__ = ["Command", "CommandType", "GameState", "snapshot", "step"]
