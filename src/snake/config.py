from dataclasses import dataclass
from typing import Optional

# ----- Board & window -----
BOARD_SIZE = 20
CANVAS_SIZE = 400
CELL_SIZE = CANVAS_SIZE // BOARD_SIZE
HUD_HEIGHT = 48
WIDTH, HEIGHT = CANVAS_SIZE, CANVAS_SIZE + HUD_HEIGHT

# ----- Rules (fixed, not runtime-configurable) -----
TICK_MS = 150
FOOD_REWARD = 10
FPS = 60  # render cap; movement is gated by the tick scheduler

# ----- Colors -----
BG        = (255, 255, 255)
GRID      = (43, 47, 59)
HEAD      = (0, 255, 0)
BODY      = (0, 230, 0)
FOOD      = (255, 51, 51)
HUD_BG    = (20, 20, 24)
HUD_TEXT  = (220, 220, 230)
BUTTON    = (60, 60, 72)
OVERLAY   = (0, 0, 0, 140)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)

START_POS = (BOARD_SIZE // 2, BOARD_SIZE // 2)
START_DIRECTION = UP


# ----- Launch options (nothing here changes the rules) -----
@dataclass
class Config:
    seed: Optional[int] = None
    log_level: str = "INFO"
