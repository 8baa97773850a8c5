"""Path model and map grid helpers."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Optional, Tuple

from .config import CELL_HEIGHT, CELL_WIDTH, MAP_COLUMNS, MAP_ROWS, PATH_WAYPOINTS, PATH_WIDTH
from .geometry import Vec2, add, distance, dot, scale, subtract

Cell = Tuple[int, int]
Segment = Tuple[Vec2, Vec2]


class Path:
    """An ordered polyline of waypoints that enemies follow."""

    def __init__(self, waypoints: Iterable[Vec2], width: float = PATH_WIDTH) -> None:
        """Build a path.

        Args:
            waypoints: At least two points; consecutive points must differ.
            width: Full width of the path band used for placement checks.

        Raises:
            ValueError: If the waypoints do not describe a usable polyline.
        """
        points = [(float(x), float(y)) for x, y in waypoints]
        if len(points) < 2:
            raise ValueError("a path needs at least two waypoints")
        for index, (start, end) in enumerate(zip(points, points[1:])):
            if start == end:
                raise ValueError(f"waypoints {index} and {index + 1} coincide")
        self.waypoints: Tuple[Vec2, ...] = tuple(points)
        self.width = width

    def __len__(self) -> int:
        return len(self.waypoints)

    def __getitem__(self, index: int) -> Vec2:
        return self.waypoints[index]

    @property
    def start(self) -> Vec2:
        return self.waypoints[0]

    @property
    def last_index(self) -> int:
        return len(self.waypoints) - 1

    def segments(self) -> Iterator[Segment]:
        return zip(self.waypoints, self.waypoints[1:])

    def total_length(self) -> float:
        return sum(distance(a, b) for a, b in self.segments())

    def distance_to_path(self, point: Vec2) -> float:
        """Shortest distance from ``point`` to any segment of the path."""
        return min(distance(point, closest_point_on_segment(point, a, b)) for a, b in self.segments())

    def point_is_on_path(self, point: Vec2) -> bool:
        return self.distance_to_path(point) < self.width / 2.0

    def __repr__(self) -> str:
        return f"Path({len(self.waypoints)} waypoints, length={self.total_length():.1f})"


def closest_point_on_segment(point: Vec2, a: Vec2, b: Vec2) -> Vec2:
    ab = subtract(b, a)
    t = dot(subtract(point, a), ab) / dot(ab, ab)
    t = max(0.0, min(1.0, t))
    return add(a, scale(ab, t))


def default_path() -> Path:
    return Path(PATH_WAYPOINTS)


def cell_at(point: Vec2) -> Cell:
    """Grid cell (column, row) containing a map point."""
    return (math.floor(point[0] / CELL_WIDTH), math.floor(point[1] / CELL_HEIGHT))


def cell_center(column: int, row: int) -> Vec2:
    return (column * CELL_WIDTH + CELL_WIDTH / 2.0, row * CELL_HEIGHT + CELL_HEIGHT / 2.0)


def in_bounds(column: int, row: int) -> bool:
    return 0 <= column < MAP_COLUMNS and 0 <= row < MAP_ROWS


def snap_to_cell(point: Vec2) -> Optional[Vec2]:
    """Centre of the cell under ``point``, or None outside the map."""
    column, row = cell_at(point)
    if not in_bounds(column, row):
        return None
    return cell_center(column, row)
