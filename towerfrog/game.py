"""Turtle front end: draws snapshots and turns input into commands."""

from __future__ import annotations

import time
import turtle
from typing import List, Optional

from .config import (
    CELL_HEIGHT,
    CELL_WIDTH,
    COLOR_BACKGROUND,
    COLOR_ENEMY,
    COLOR_ENEMY_HIT,
    COLOR_GAME_OVER,
    COLOR_GRID,
    COLOR_HEALTH,
    COLOR_HEALTH_BACK,
    COLOR_PATH,
    COLOR_PREVIEW_BAD,
    COLOR_PREVIEW_OK,
    COLOR_PROJECTILE,
    COLOR_TOWER,
    COLOR_TOWER_RANGE,
    COLOR_UI_BG,
    COLOR_UI_TEXT,
    ENEMY_HIT_COLOR_RATIO,
    FPS,
    FRAME_DT,
    MAP_COLUMNS,
    MAP_ROWS,
    PATH_WIDTH,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TOWER_RANGE,
)
from .geometry import Vec2
from .path import cell_at, snap_to_cell
from .placement import check_placement
from .simulation import Command, CommandType, Snapshot, snapshot, step
from .sound import SoundManager
from .state import GameState, LogFn


def to_screen(point: Vec2) -> Vec2:
    """Map coordinates (origin top-left, y down) to turtle coordinates."""
    return (point[0] - SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2 - point[1])


def to_map(point: Vec2) -> Vec2:
    return (point[0] + SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2 - point[1])


class TowerDefenseGame:
    """Main game window."""

    def __init__(self, logger: Optional[LogFn] = None, sound: bool = True) -> None:
        """Initialize the game.

        Args:
            logger: Receives simulation log lines
            sound: Enable sound effects
        """
        self.screen = turtle.Screen()
        self.screen.setup(width=SCREEN_WIDTH + 20, height=SCREEN_HEIGHT + 20)
        self.screen.bgcolor(COLOR_BACKGROUND)
        self.screen.title("TowerFrog")
        self.screen.tracer(0)

        self.state = GameState(logger=logger)
        self.sound_manager = SoundManager(enabled=sound)
        self.pending: List[Command] = []
        self.hover: Optional[Vec2] = None

        self.setup_graphics()
        self.setup_input()
        self.draw_map()

    def setup_graphics(self) -> None:
        """Set up the drawing turtles."""
        self.map_drawer = self._make_drawer()
        self.object_drawer = self._make_drawer()
        self.ui_drawer = self._make_drawer()

    @staticmethod
    def _make_drawer() -> turtle.Turtle:
        drawer = turtle.Turtle()
        drawer.hideturtle()
        drawer.speed(0)
        drawer.penup()
        return drawer

    def setup_input(self) -> None:
        """Set up keyboard and mouse input."""
        self.screen.onkey(lambda: self.queue(Command(CommandType.TOGGLE_PLACEMENT)), "t")
        self.screen.onkey(lambda: self.queue(Command(CommandType.CANCEL_PLACEMENT)), "Escape")
        self.screen.onkey(lambda: self.queue(Command(CommandType.RESET)), "r")
        self.screen.listen()

        self.screen.onclick(self.on_click, btn=1)
        self.screen.onclick(lambda x, y: self.queue(Command(CommandType.CANCEL_PLACEMENT)), btn=3)
        canvas = self.screen.getcanvas()
        canvas.bind("<Motion>", self.on_motion)

    def queue(self, command: Command) -> None:
        self.pending.append(command)

    def on_click(self, x: float, y: float) -> None:
        """Queue a placement at the clicked point.

        Args:
            x: X coordinate of click
            y: Y coordinate of click
        """
        self.queue(Command.place(to_map((x, y))))

    def on_motion(self, event) -> None:
        canvas = self.screen.getcanvas()
        self.hover = to_map((canvas.canvasx(event.x), -canvas.canvasy(event.y)))

    def update(self, dt: float) -> None:
        """Step the simulation with the commands gathered since the last frame."""
        commands, self.pending = self.pending, []
        step(self.state, dt, commands)
        self.sound_manager.play_events(self.state.events)

    def draw_map(self) -> None:
        """Draw the static grid and path once."""
        drawer = self.map_drawer
        drawer.color(COLOR_GRID)
        drawer.pensize(1)
        for column in range(MAP_COLUMNS + 1):
            self._line(drawer, (column * CELL_WIDTH, 0), (column * CELL_WIDTH, SCREEN_HEIGHT))
        for row in range(MAP_ROWS + 1):
            self._line(drawer, (0, row * CELL_HEIGHT), (SCREEN_WIDTH, row * CELL_HEIGHT))

        drawer.color(COLOR_PATH)
        drawer.pensize(PATH_WIDTH * 0.3)
        drawer.goto(to_screen(self.state.path.start))
        drawer.pendown()
        for waypoint in self.state.path.waypoints[1:]:
            drawer.goto(to_screen(waypoint))
        drawer.penup()

    @staticmethod
    def _line(drawer: turtle.Turtle, start: Vec2, end: Vec2) -> None:
        drawer.goto(to_screen(start))
        drawer.pendown()
        drawer.goto(to_screen(end))
        drawer.penup()

    def draw(self) -> None:
        """Draw the game state."""
        self.object_drawer.clear()
        self.ui_drawer.clear()

        view = snapshot(self.state)
        self.draw_towers(view)
        self.draw_enemies(view)
        self.draw_projectiles(view)
        if view.session.placement_mode:
            self.draw_placement_preview()
        self.draw_ui(view)

        self.screen.update()

    def draw_towers(self, view: Snapshot) -> None:
        """Draw towers and their range rings."""
        drawer = self.object_drawer
        for tower in view.towers:
            self._ring(tower.position, tower.range, COLOR_TOWER_RANGE, 3)
            drawer.goto(to_screen(tower.position))
            drawer.dot(CELL_HEIGHT * 0.84, COLOR_TOWER)

    def draw_enemies(self, view: Snapshot) -> None:
        """Draw alive enemies with health bars."""
        drawer = self.object_drawer
        bar_width = CELL_WIDTH * 0.84
        for enemy in view.enemies:
            if not enemy.alive:
                continue
            x, y = enemy.position
            color = COLOR_ENEMY_HIT if enemy.health_ratio < ENEMY_HIT_COLOR_RATIO else COLOR_ENEMY
            drawer.goto(to_screen(enemy.position))
            drawer.dot(CELL_HEIGHT * 0.76, color)

            bar_left = x - bar_width / 2
            bar_y = y - CELL_HEIGHT * 0.58
            drawer.pensize(6)
            drawer.color(COLOR_HEALTH_BACK)
            self._line(drawer, (bar_left, bar_y), (bar_left + bar_width, bar_y))
            if enemy.health_ratio > 0:
                drawer.color(COLOR_HEALTH)
                self._line(drawer, (bar_left, bar_y), (bar_left + bar_width * enemy.health_ratio, bar_y))

    def draw_projectiles(self, view: Snapshot) -> None:
        drawer = self.object_drawer
        for projectile in view.projectiles:
            if projectile.active:
                drawer.goto(to_screen(projectile.position))
                drawer.dot(CELL_HEIGHT * 0.3, COLOR_PROJECTILE)

    def draw_placement_preview(self) -> None:
        """Shade the hovered cell green or red and show the future range."""
        if self.hover is None:
            return
        center = snap_to_cell(self.hover)
        if center is None:
            return
        allowed = check_placement(self.state, self.hover).allowed
        drawer = self.object_drawer
        column, row = cell_at(self.hover)
        drawer.goto(to_screen((column * CELL_WIDTH, row * CELL_HEIGHT)))
        drawer.color(COLOR_PREVIEW_OK if allowed else COLOR_PREVIEW_BAD)
        drawer.setheading(0)
        drawer.begin_fill()
        for side in (CELL_WIDTH, CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT):
            drawer.forward(side)
            drawer.right(90)
        drawer.end_fill()
        self._ring(center, TOWER_RANGE, COLOR_TOWER, 2)

    def _ring(self, center: Vec2, radius: float, color: str, width: int) -> None:
        drawer = self.object_drawer
        x, y = to_screen(center)
        drawer.goto(x, y - radius)
        drawer.setheading(0)
        drawer.color(color)
        drawer.pensize(width)
        drawer.pendown()
        drawer.circle(radius)
        drawer.penup()

    def draw_ui(self, view: Snapshot) -> None:
        """Draw the HUD."""
        session = view.session
        drawer = self.ui_drawer
        drawer.goto(to_screen((0, 0)))
        drawer.color(COLOR_UI_BG)
        drawer.setheading(0)
        drawer.begin_fill()
        for side in (260, 140, 260, 140):
            drawer.forward(side)
            drawer.right(90)
        drawer.end_fill()

        drawer.color(COLOR_UI_TEXT)
        lines = [
            (f"Money: ${session.money}", 18, "bold"),
            (f"Lives: {session.lives}", 18, "bold"),
            (f"Wave: {session.wave}", 18, "bold"),
            ("T: build tower", 12, "normal"),
        ]
        if session.placement_mode:
            lines.append(("Click to place (right click cancels)", 10, "normal"))
        for index, (text, size, weight) in enumerate(lines):
            drawer.goto(to_screen((18, 40 + index * 28)))
            drawer.write(text, font=("Arial", size, weight))

        if session.wave_delay > 0:
            drawer.goto(to_screen((SCREEN_WIDTH / 2, 34)))
            drawer.color(COLOR_UI_BG)
            drawer.write("Next wave coming...", align="center", font=("Arial", 16, "normal"))

        if session.game_over:
            drawer.goto(to_screen((SCREEN_WIDTH / 2, SCREEN_HEIGHT / 2)))
            drawer.color(COLOR_GAME_OVER)
            drawer.write("GAME OVER! Press R to restart", align="center", font=("Arial", 30, "bold"))

    def run(self) -> None:
        """Main game loop."""
        try:
            while True:
                self.update(FRAME_DT)
                self.draw()
                time.sleep(1 / FPS)
        except turtle.Terminator:
            # Window closed by the user.
            self.sound_manager.stop_all()
        except KeyboardInterrupt:
            self.sound_manager.stop_all()
            self.screen.bye()
