# render.py
from dataclasses import dataclass
from typing import List, Optional, Protocol, Tuple
import pygame  # type: ignore

from .config import (
    WIDTH, CANVAS_SIZE, CELL_SIZE, BOARD_SIZE, HUD_HEIGHT,
    BG, GRID, HEAD, BODY, FOOD, HUD_BG, HUD_TEXT, BUTTON, OVERLAY,
)
from .game import GameStatus, Snapshot


class RenderSurface(Protocol):
    def draw(self, snap: Snapshot) -> None: ...


# ---------- Buttons ----------
@dataclass(frozen=True)
class Button:
    action: str
    label: str
    rect: pygame.Rect


BUTTON_W, BUTTON_H = 96, 30

def _hud_button(slot: int, action: str, label: str) -> Button:
    x = 8 + slot * (BUTTON_W + 8)
    y = CANVAS_SIZE + (HUD_HEIGHT - BUTTON_H) // 2
    return Button(action, label, pygame.Rect(x, y, BUTTON_W, BUTTON_H))

def button_layout(status: GameStatus) -> List[Button]:
    """Buttons visible for a given status, in draw order."""
    if status is GameStatus.NOT_STARTED:
        buttons = [_hud_button(0, "start", "Start")]
    elif status is GameStatus.RUNNING:
        buttons = [_hud_button(0, "pause", "Pause")]
    elif status is GameStatus.PAUSED:
        buttons = [_hud_button(0, "pause", "Resume")]
    else:
        buttons = []
    buttons.append(_hud_button(1, "reset", "Reset"))
    if status is GameStatus.OVER:
        rect = pygame.Rect(0, 0, BUTTON_W + 24, BUTTON_H)
        rect.center = (CANVAS_SIZE // 2, CANVAS_SIZE // 2 + 80)
        buttons.append(Button("play_again", "Play again", rect))
    return buttons


# ---------- Drawing helpers ----------
def cell_rect(gx: int, gy: int, inset: int = 0) -> pygame.Rect:
    return pygame.Rect(
        gx * CELL_SIZE + inset, gy * CELL_SIZE + inset,
        CELL_SIZE - 2 * inset, CELL_SIZE - 2 * inset,
    )

def draw_cell(screen: pygame.Surface, gx: int, gy: int, color: Tuple[int, int, int]) -> None:
    pygame.draw.rect(screen, color, cell_rect(gx, gy, inset=1))

def draw_grid(screen: pygame.Surface) -> None:
    for i in range(BOARD_SIZE + 1):
        pos = i * CELL_SIZE
        pygame.draw.line(screen, GRID, (pos, 0), (pos, CANVAS_SIZE))
        pygame.draw.line(screen, GRID, (0, pos), (CANVAS_SIZE, pos))

def draw_food(screen: pygame.Surface, food: Tuple[int, int]) -> None:
    center = cell_rect(*food).center
    pygame.draw.circle(screen, FOOD, center, (CELL_SIZE - 4) // 2)

def draw_button(screen: pygame.Surface, font: pygame.font.Font, button: Button) -> None:
    pygame.draw.rect(screen, BUTTON, button.rect, border_radius=4)
    label = font.render(button.label, True, HUD_TEXT)
    screen.blit(label, label.get_rect(center=button.rect.center))

def draw_centered(screen: pygame.Surface, font: pygame.font.Font, text: str, dy: int, color=HUD_TEXT) -> None:
    surf = font.render(text, True, color)
    screen.blit(surf, surf.get_rect(center=(CANVAS_SIZE // 2, CANVAS_SIZE // 2 + dy)))

def draw_overlay(screen: pygame.Surface) -> None:
    # Dim the board with a translucent layer
    overlay = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE), pygame.SRCALPHA)
    overlay.fill(OVERLAY)
    screen.blit(overlay, (0, 0))


# ---------- Screens ----------
def draw_game(screen: pygame.Surface, snap: Snapshot) -> None:
    screen.fill(BG)
    draw_grid(screen)
    if snap.food is not None:
        draw_food(screen, snap.food)
    # body first so the head stays on top
    for x, y in snap.snake[1:]:
        draw_cell(screen, x, y, BODY)
    draw_cell(screen, snap.head[0], snap.head[1], HEAD)

def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    pygame.draw.rect(screen, HUD_BG, pygame.Rect(0, CANVAS_SIZE, WIDTH, HUD_HEIGHT))
    for button in button_layout(snap.status):
        if button.action != "play_again":
            draw_button(screen, font, button)
    txt = font.render(f"Score: {snap.score}", True, HUD_TEXT)
    screen.blit(txt, txt.get_rect(midright=(WIDTH - 12, CANVAS_SIZE + HUD_HEIGHT // 2)))

def draw_start_screen(screen: pygame.Surface, font: pygame.font.Font) -> None:
    draw_overlay(screen)
    draw_centered(screen, font, "SNAKE", -16)
    draw_centered(screen, font, "Press SPACE or Start to play", 16)

def draw_paused(screen: pygame.Surface, font: pygame.font.Font) -> None:
    draw_overlay(screen)
    draw_centered(screen, font, "PAUSED", 0)

def draw_game_over(screen: pygame.Surface, font: pygame.font.Font, score: int) -> None:
    draw_overlay(screen)
    draw_centered(screen, font, "GAME OVER", -16)
    draw_centered(screen, font, f"Score: {score}", 16)
    for button in button_layout(GameStatus.OVER):
        if button.action == "play_again":
            draw_button(screen, font, button)


# ---------- Renderers ----------
class PygameRenderer:
    """Draws snapshots onto a pygame surface; the caller flips the display."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font):
        self.screen = screen
        self.font = font
        self.last: Optional[Snapshot] = None

    def draw(self, snap: Snapshot) -> None:
        self.last = snap
        draw_game(self.screen, snap)
        if snap.status is GameStatus.NOT_STARTED:
            draw_start_screen(self.screen, self.font)
        elif snap.status is GameStatus.PAUSED:
            draw_paused(self.screen, self.font)
        elif snap.status is GameStatus.OVER:
            draw_game_over(self.screen, self.font, snap.score)
        draw_hud(self.screen, self.font, snap)

    def button_at(self, pos: Tuple[int, int]) -> Optional[str]:
        """Action name of the visible button under ``pos``, if any."""
        if self.last is None:
            return None
        for button in button_layout(self.last.status):
            if button.rect.collidepoint(pos):
                return button.action
        return None


class HeadlessRenderer:
    """Keeps the latest snapshot instead of drawing it."""

    def __init__(self):
        self.last: Optional[Snapshot] = None
        self.frames = 0

    def draw(self, snap: Snapshot) -> None:
        self.last = snap
        self.frames += 1
