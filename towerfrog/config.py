"""Game configuration constants."""

SCREEN_WIDTH = 960
SCREEN_HEIGHT = 540

MAP_COLUMNS = 24
MAP_ROWS = 15

CELL_WIDTH = SCREEN_WIDTH / MAP_COLUMNS
CELL_HEIGHT = SCREEN_HEIGHT / MAP_ROWS

COLOR_BACKGROUND = "#f5f5fa"
COLOR_GRID = "#dcdce6"
COLOR_PATH = "#78b4ff"
COLOR_ENEMY = "#dc5050"
COLOR_ENEMY_HIT = "#ffb4b4"
COLOR_HEALTH_BACK = "#505050"
COLOR_HEALTH = "#00c000"
COLOR_TOWER = "#3c78dc"
COLOR_TOWER_RANGE = "#c5d7f5"
COLOR_PROJECTILE = "#ffb43c"
COLOR_UI_BG = "#1e1e28"
COLOR_UI_TEXT = "#f0f0ff"
COLOR_PREVIEW_OK = "#a8e6a8"
COLOR_PREVIEW_BAD = "#f2a0a0"
COLOR_GAME_OVER = "#ff0000"

INITIAL_LIVES = 10
MAX_LIVES = 10
INITIAL_MONEY = 100

TOWER_COST = 50
TOWER_RANGE = CELL_HEIGHT * 2.5
TOWER_FIRE_INTERVAL = 0.7

PROJECTILE_SPEED = 320.0
PROJECTILE_DAMAGE = 30.0
PROJECTILE_HIT_RADIUS = CELL_HEIGHT * 0.28

ENEMY_BASE_SPEED = 60.0
ENEMY_SPEED_PER_WAVE = 2.0
ENEMY_BASE_HEALTH = 40.0
ENEMY_HEALTH_PER_WAVE = 10.0
# Extra per-wave growth once the wave number passes LATE_WAVE_THRESHOLD.
LATE_WAVE_THRESHOLD = 5
LATE_WAVE_SPEED_BONUS = 1.5
LATE_WAVE_HEALTH_BONUS = 8.0
ENEMY_HIT_COLOR_RATIO = 0.7

KILL_REWARD_BASE = 10
KILL_REWARD_PER_WAVE = 2

SPAWN_INTERVAL = 1.0
WAVE_DELAY = 1.5

PATH_WIDTH = CELL_HEIGHT * 0.8
OCCUPIED_RADIUS = CELL_WIDTH * 0.2

# L-shaped route, in map coordinates (origin top-left, y pointing down).
PATH_WAYPOINTS = [
    (0.0, CELL_HEIGHT * 4.5),
    (CELL_WIDTH * 10.5, CELL_HEIGHT * 4.5),
    (CELL_WIDTH * 10.5, CELL_HEIGHT * 12.5),
    (CELL_WIDTH * 22.5, CELL_HEIGHT * 12.5),
]

FPS = 60
FRAME_DT = 1.0 / FPS

SOUND_VOLUME = 0.7
ENABLE_SOUND = True
