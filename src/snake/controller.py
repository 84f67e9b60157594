# controller.py
from typing import Callable, Dict, Optional
import logging

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import Direction, GameEngine, GameStatus, Outcome
from .render import RenderSurface
from .scheduler import TickScheduler

logger = logging.getLogger(__name__)

KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}
TOGGLE_KEY = pygame.K_SPACE

COLLISION_MESSAGES = {
    Outcome.WALL_COLLISION: "You hit the wall!",
    Outcome.SELF_COLLISION: "You hit yourself!",
}
BOARD_FULL_MESSAGE = "No space left, game over!"


def log_event(message: str) -> None:
    """Default lifecycle-event sink."""
    logger.info(message)


class GameController:
    """
    Drives a GameEngine: routes key presses and button actions, owns the tick
    scheduler, and notifies the render surface and the score/event sinks.
    """

    def __init__(
        self,
        engine: GameEngine,
        render: RenderSurface,
        score_sink: Callable[[int], None] = lambda score: None,
        event_sink: Callable[[str], None] = log_event,
        clock: Optional[Callable[[], int]] = None,
    ):
        self.engine = engine
        self.render = render
        self.score_sink = score_sink
        self.event_sink = event_sink
        self.clock = clock or pygame.time.get_ticks
        self.scheduler = TickScheduler(self.tick)

    # ----- lifecycle -----
    def start(self) -> None:
        if not self.engine.start():
            return
        self.scheduler.start(self.clock())
        self.event_sink("Game started! Use the arrow keys to move")
        self.draw()

    def pause(self) -> None:
        if not self.engine.pause():
            return
        self.scheduler.cancel()
        self.event_sink("Game paused")
        self.draw()

    def resume(self) -> None:
        if not self.engine.resume():
            return
        self.scheduler.start(self.clock())
        self.event_sink("Game resumed")
        self.draw()

    def toggle_pause(self) -> None:
        if self.engine.status is GameStatus.RUNNING:
            self.pause()
        elif self.engine.status is GameStatus.PAUSED:
            self.resume()

    def reset(self) -> None:
        self.scheduler.cancel()
        self.engine.reset()
        self.score_sink(self.engine.score)
        self.draw()

    # ----- loop -----
    def tick(self) -> None:
        """One scheduled step: advance the engine, then report and render."""
        outcome = self.engine.step()
        if outcome is Outcome.IDLE:
            return

        if outcome is Outcome.ATE:
            self.score_sink(self.engine.score)
            self.event_sink(f"Score: {self.engine.score}!")
            if self.engine.status is GameStatus.OVER:
                self.event_sink(BOARD_FULL_MESSAGE)
        elif outcome in COLLISION_MESSAGES:
            self.event_sink(COLLISION_MESSAGES[outcome])

        if self.engine.status is GameStatus.OVER:
            self.scheduler.cancel()
        self.draw()

    def update(self, now_ms: Optional[int] = None) -> bool:
        """Called every frame; runs the tick when it is due."""
        return self.scheduler.poll(self.clock() if now_ms is None else now_ms)

    def draw(self) -> None:
        self.render.draw(self.engine.snapshot())

    # ----- input -----
    def handle_key(self, key: int) -> bool:
        """Route a key press. Return True if the key was consumed."""
        status = self.engine.status
        if key == TOGGLE_KEY:
            if status is GameStatus.NOT_STARTED:
                self.start()
            else:
                self.toggle_pause()
            return True

        direction = KEY_DIRECTIONS.get(key)
        if direction is None:
            return False
        # Arrows only steer a running game; otherwise they pass through.
        if status is not GameStatus.RUNNING:
            return False
        self.engine.set_direction(direction)
        return True

    def handle_action(self, action: str) -> None:
        """On-screen buttons."""
        if action == "start":
            self.start()
        elif action == "pause":
            self.toggle_pause()
        elif action in ("reset", "play_again"):
            self.reset()
        else:
            logger.debug("Ignoring unknown action %r", action)
