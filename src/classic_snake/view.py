"""Pygame desktop front-end."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pygame

from classic_snake.controller import GameState
from classic_snake.inputs import map_key
from classic_snake.snake import Direction
from classic_snake.ticker import FrameClockTicker

if TYPE_CHECKING:
    from classic_snake.controller import GameController, Snapshot

logger = logging.getLogger(__name__)

FPS = 60
HUD_HEIGHT = 32

BACKGROUND = (240, 240, 240)
GRID_LINE = (224, 224, 224)
PELLET = (244, 67, 54)
SNAKE_HEAD = (46, 125, 50)
SNAKE_BODY = (76, 175, 80)
EYE = (255, 255, 255)
HUD_BG = (33, 33, 33)
HUD_TEXT = (250, 250, 250)
OVERLAY = (0, 0, 0, 160)

EYE_SIZE = 3
EYE_OFFSET = 5


def _eye_rects(
    x: int, y: int, cell: int, direction: Direction,
) -> tuple[pygame.Rect, pygame.Rect]:
    """Two eye rectangles on the leading edge of a head cell at (x, y)."""
    near = EYE_OFFSET
    far = cell - EYE_OFFSET - EYE_SIZE
    if direction is Direction.RIGHT:
        points = ((cell - EYE_OFFSET, near), (cell - EYE_OFFSET, far))
    elif direction is Direction.LEFT:
        points = ((EYE_OFFSET - EYE_SIZE, near), (EYE_OFFSET - EYE_SIZE, far))
    elif direction is Direction.UP:
        points = ((near, EYE_OFFSET - EYE_SIZE), (far, EYE_OFFSET - EYE_SIZE))
    else:
        points = ((near, cell - EYE_OFFSET), (far, cell - EYE_OFFSET))
    return tuple(
        pygame.Rect(x + dx, y + dy, EYE_SIZE, EYE_SIZE) for dx, dy in points
    )


def draw_board(
    surface: pygame.Surface, snapshot: Snapshot, grid_size: int, cell: int,
) -> None:
    """Draw grid, pellet, and snake onto *surface* starting at (0, 0)."""
    size = grid_size * cell
    surface.fill(BACKGROUND, pygame.Rect(0, 0, size, size))
    for i in range(grid_size + 1):
        pygame.draw.line(surface, GRID_LINE, (i * cell, 0), (i * cell, size))
        pygame.draw.line(surface, GRID_LINE, (0, i * cell), (size, i * cell))

    if snapshot.pellet is not None:
        col, row = snapshot.pellet
        center = (col * cell + cell // 2, row * cell + cell // 2)
        pygame.draw.circle(surface, PELLET, center, max(cell // 2 - 2, 1))

    for i, (col, row) in enumerate(snapshot.snake):
        x, y = col * cell, row * cell
        color = SNAKE_HEAD if i == 0 else SNAKE_BODY
        surface.fill(color, pygame.Rect(x + 1, y + 1, cell - 2, cell - 2))
        if i == 0:
            for eye in _eye_rects(x, y, cell, snapshot.direction):
                surface.fill(EYE, eye)


def hud_text(snapshot: Snapshot) -> str:
    level = snapshot.food_level
    return (
        f"Score {snapshot.score}   Best {snapshot.high_score}   "
        f"Food: {level.identifier}   [{snapshot.state.value}]"
    )


def _draw_hud(
    surface: pygame.Surface, snapshot: Snapshot, font: pygame.font.Font, top: int,
) -> None:
    width = surface.get_width()
    surface.fill(HUD_BG, pygame.Rect(0, top, width, HUD_HEIGHT))
    label = font.render(hud_text(snapshot), True, HUD_TEXT)
    surface.blit(label, (8, top + (HUD_HEIGHT - label.get_height()) // 2))


def _draw_banner(
    surface: pygame.Surface, font: pygame.font.Font, lines: list[str], size: int,
) -> None:
    shade = pygame.Surface((size, size), pygame.SRCALPHA)
    shade.fill(OVERLAY)
    surface.blit(shade, (0, 0))
    total = sum(font.get_linesize() for _ in lines)
    y = (size - total) // 2
    for line in lines:
        label = font.render(line, True, HUD_TEXT)
        surface.blit(label, ((size - label.get_width()) // 2, y))
        y += font.get_linesize()


def _banner_lines(snapshot: Snapshot) -> list[str]:
    if snapshot.state is GameState.IDLE:
        return ["Press Enter to start"]
    if snapshot.state is GameState.PAUSED:
        return ["Paused", "Space to resume"]
    if snapshot.state is GameState.GAME_OVER:
        return ["Game Over", f"Final score: {snapshot.score}", "Enter to play again"]
    return []


class PygameView:
    """Window, event pump, and frame loop around a :class:`GameController`.

    The controller must be built with a :class:`FrameClockTicker`; the view
    feeds it frame time so ticks happen on the main loop.
    """

    def __init__(self, controller: GameController) -> None:
        if not isinstance(controller.ticker, FrameClockTicker):
            raise ValueError("PygameView requires a FrameClockTicker.")
        self.controller = controller
        self.ticker: FrameClockTicker = controller.ticker
        self.latest = controller.snapshot()
        controller.subscribe(self._on_snapshot)

    def _on_snapshot(self, snapshot: Snapshot) -> None:
        self.latest = snapshot

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Apply one pygame event; return False when the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                return False
            action = map_key(pygame.key.name(event.key))
            if action is not None:
                self.controller.handle_input(action)
        return True

    def draw(self, surface: pygame.Surface, font: pygame.font.Font) -> None:
        cfg = self.controller.config
        size = cfg.window_size
        draw_board(surface, self.latest, cfg.grid_size, cfg.cell_size)
        lines = _banner_lines(self.latest)
        if lines:
            _draw_banner(surface, font, lines, size)
        _draw_hud(surface, self.latest, font, size)

    def run(self) -> int:
        """Open the window and run until closed. Returns the last score."""
        cfg = self.controller.config
        pygame.init()
        try:
            screen = pygame.display.set_mode(
                (cfg.window_size, cfg.window_size + HUD_HEIGHT),
            )
            pygame.display.set_caption("Snake")
            font = pygame.font.Font(None, 24)
            clock = pygame.time.Clock()
            running = True
            while running:
                for event in pygame.event.get():
                    if not self.handle_event(event):
                        running = False
                        break
                self.ticker.advance(clock.tick(FPS))
                self.draw(screen, font)
                pygame.display.flip()
        finally:
            self.ticker.stop()
            pygame.quit()
        logger.info("Window closed with score %d.", self.latest.score)
        return self.latest.score
