# game.py
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple
import logging

import numpy as np  # type: ignore

from .config import (
    BOARD_SIZE, FOOD_REWARD,
    START_POS, START_DIRECTION,
)

logger = logging.getLogger(__name__)

Position = Tuple[int, int]
Direction = Tuple[int, int]


class GameStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class Outcome(Enum):
    IDLE = "idle"
    MOVED = "moved"
    ATE = "ate"
    WALL_COLLISION = "wall_collision"
    SELF_COLLISION = "self_collision"


# ---------- Helpers ----------
def in_bounds(x: int, y: int) -> bool:
    return 0 <= x < BOARD_SIZE and 0 <= y < BOARD_SIZE

def is_opposite(a: Direction, b: Direction) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def spawn_food(snake: List[Position], rng: np.random.Generator) -> Optional[Position]:
    """Pick a uniformly random free cell, or None when the snake fills the board."""
    if len(set(snake)) >= BOARD_SIZE * BOARD_SIZE:
        return None
    while True:
        fx, fy = (int(v) for v in rng.integers(0, BOARD_SIZE, size=2))
        if (fx, fy) not in snake:
            return (fx, fy)


# ---------- State ----------
@dataclass
class GameState:
    snake: List[Position]          # head at index 0
    direction: Direction           # committed by the last step
    pending: Direction             # used by the next step
    food: Optional[Position]
    score: int = 0
    status: GameStatus = GameStatus.NOT_STARTED


@dataclass(frozen=True)
class Snapshot:
    """Committed state handed to the render surface."""
    snake: Tuple[Position, ...]
    direction: Direction
    food: Optional[Position]
    score: int
    status: GameStatus

    @property
    def head(self) -> Position:
        return self.snake[0]


def new_game_state(rng: np.random.Generator) -> GameState:
    snake = [START_POS]
    return GameState(
        snake=snake,
        direction=START_DIRECTION,
        pending=START_DIRECTION,
        food=spawn_food(snake, rng),
    )


# ---------- Engine ----------
class GameEngine:
    """
    Owns the board model and applies one movement step per tick.

    Invalid calls (out-of-turn input, reversals, stepping a stopped game)
    are no-ops; collisions are reported through Outcome and GameStatus.OVER.
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.state = new_game_state(self.rng)

    @property
    def status(self) -> GameStatus:
        return self.state.status

    @property
    def score(self) -> int:
        return self.state.score

    def reset(self) -> None:
        self.state = new_game_state(self.rng)

    # ----- status transitions -----
    def start(self) -> bool:
        if self.state.status is not GameStatus.NOT_STARTED:
            return False
        self.state.status = GameStatus.RUNNING
        return True

    def pause(self) -> bool:
        if self.state.status is not GameStatus.RUNNING:
            return False
        self.state.status = GameStatus.PAUSED
        return True

    def resume(self) -> bool:
        if self.state.status is not GameStatus.PAUSED:
            return False
        self.state.status = GameStatus.RUNNING
        return True

    # ----- input -----
    def set_direction(self, direction: Direction) -> bool:
        """Queue a turn for the next step (no 180° turns). Return True if accepted."""
        if self.state.status is not GameStatus.RUNNING:
            return False
        if is_opposite(direction, self.state.direction):
            return False
        self.state.pending = direction
        return True

    # ----- update -----
    def step(self) -> Outcome:
        """
        Advance the game by exactly one cell.

        Every check runs before the snake is touched, so the state is either
        fully advanced or left as it was.
        """
        state = self.state
        if state.status is not GameStatus.RUNNING:
            return Outcome.IDLE

        # Commit direction once per tick
        state.direction = state.pending

        hx, hy = state.snake[0]
        dx, dy = state.direction
        nx, ny = hx + dx, hy + dy

        # Wall collision
        if not in_bounds(nx, ny):
            state.status = GameStatus.OVER
            logger.debug("Wall collision at %s, score %d", (nx, ny), state.score)
            return Outcome.WALL_COLLISION

        new_head = (nx, ny)

        # Self collision (the tail still counts: it has not moved yet)
        if new_head in state.snake:
            state.status = GameStatus.OVER
            logger.debug("Self collision at %s, score %d", new_head, state.score)
            return Outcome.SELF_COLLISION

        # Move / grow
        state.snake.insert(0, new_head)
        if new_head == state.food:
            state.score += FOOD_REWARD
            state.food = spawn_food(state.snake, self.rng)
            if state.food is None:
                logger.info("No space left for food, game over with score %d", state.score)
                state.status = GameStatus.OVER
            return Outcome.ATE

        state.snake.pop()
        return Outcome.MOVED

    def snapshot(self) -> Snapshot:
        state = self.state
        return Snapshot(
            snake=tuple(state.snake),
            direction=state.direction,
            food=state.food,
            score=state.score,
            status=state.status,
        )
