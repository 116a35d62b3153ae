from dataclasses import dataclass

# ----- Window & grid -----
WIDTH, HEIGHT = 800, 600
CELL_SIZE = 50                 # px per cell
CELL_GAP = 3                   # px between drawn cells
HUD_HEIGHT = 48

# ----- Colors -----
BG     = (24, 16, 40)
EMPTY  = (76, 29, 149)
WHITE  = (240, 240, 245)
LIME   = (190, 242, 100)
RED    = (239, 68, 68)
TEXT   = (220, 220, 230)
PAUSED = (217, 119, 6)

# ----- Directions (drow, dcol) -----
UP, DOWN, LEFT, RIGHT = (-1, 0), (1, 0), (0, -1), (0, 1)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)
DIRECTION_NAMES = {UP: "up", DOWN: "down", LEFT: "left", RIGHT: "right"}

# ----- Initial layout -----
INITIAL_SNAKE = ((3, 5), (4, 5), (5, 5))   # head first, vertical
INITIAL_DIRECTION = LEFT
RESET_FOOD_CELL = (2, 2)

# ----- Tunables -----
@dataclass
class Config:
    seed: int | None = None
    cell_size: int = CELL_SIZE
    move_every_ms: int = 160
    second_ms: int = 1000

CFG = Config()
