import pygame

from .game_engine import GameMode, State
from .settings import (
    BACKGROUND,
    FPS_GREEN,
    LARGE_FONT_SIZE,
    LETTERBOX,
    SCORE_FONT_SIZE,
    SMALL_FONT_SIZE,
    VIRTUAL_HEIGHT,
    VIRTUAL_WIDTH,
    WHITE,
)


class Renderer:
    """
    Draws the engine at a fixed virtual resolution, then scales the result
    (nearest-neighbour) into the window, letterboxed to keep the aspect ratio.
    """
    def __init__(self, width=VIRTUAL_WIDTH, height=VIRTUAL_HEIGHT):
        self.width = width
        self.height = height
        self.base = pygame.Surface((width, height))

        self.small_font = pygame.font.Font(None, SMALL_FONT_SIZE)
        self.large_font = pygame.font.Font(None, LARGE_FONT_SIZE)
        self.score_font = pygame.font.Font(None, SCORE_FONT_SIZE)

    # ---------- Text helpers ----------
    def _print_centered(self, text, font, y, x_offset=0, color=WHITE):
        surf = font.render(text, False, color)
        self.base.blit(surf, surf.get_rect(midtop=(self.width // 2 + x_offset, y)))

    def _print(self, text, font, pos, color=WHITE):
        self.base.blit(font.render(text, False, color), pos)

    # ---------- Frame ----------
    def draw(self, engine, fps=0.0):
        self.base.fill(BACKGROUND)

        if engine.state is State.START:
            self._draw_start(engine)
        elif engine.state is State.SERVE:
            self._print_centered(f"Player {engine.serving_player}'s serve!", self.small_font, 10)
            self._print_centered("Press Enter to serve!", self.small_font, 22)
        elif engine.state is State.DONE:
            self._print_centered(f"Player {engine.winning_player} wins!", self.large_font, 10)
            self._print_centered("Press Enter to restart!", self.small_font, 32)

        # Score goes under the entities so the ball can pass over it
        self._draw_score(engine)

        pygame.draw.rect(self.base, WHITE, engine.player1.rect())
        pygame.draw.rect(self.base, WHITE, engine.player2.rect())
        pygame.draw.rect(self.base, WHITE, engine.ball.rect())

        self._print(f"FPS: {int(fps)}", self.small_font, (10, 10), color=FPS_GREEN)
        return self.base

    def _draw_start(self, engine):
        self._print_centered("Welcome to Pong!", self.small_font, 10)
        self._print_centered("Press 0,1 or 2 to change the game mode", self.small_font, 22)
        self._print_centered("Press Enter to begin!", self.small_font, 34)
        self._print_centered("Press Q to quit!", self.small_font, 46)

        self._print_centered("GAME MODE:", self.small_font, 64, x_offset=-70)
        self._print_centered(engine.mode.label, self.small_font, 64, x_offset=50)
        if engine.mode is not GameMode.PLAYER_VS_PLAYER:
            self._print_centered(f"AI: {engine.difficulty.label} [PRESS T to Toggle]",
                                 self.small_font, 76)

    def _draw_score(self, engine):
        p1 = self.score_font.render(str(engine.player1_score), False, WHITE)
        p2 = self.score_font.render(str(engine.player2_score), False, WHITE)
        self.base.blit(p1, (self.width // 2 - 50, self.height // 3))
        self.base.blit(p2, (self.width // 2 + 30, self.height // 3))

    # ---------- Scaling ----------
    def viewport(self, window_size):
        """Largest rect with the virtual aspect ratio that fits, centered."""
        win_w, win_h = window_size
        scale = min(win_w / self.width, win_h / self.height)
        w, h = int(self.width * scale), int(self.height * scale)
        return pygame.Rect((win_w - w) // 2, (win_h - h) // 2, w, h)

    def present(self, screen):
        view = self.viewport(screen.get_size())
        screen.fill(LETTERBOX)
        screen.blit(pygame.transform.scale(self.base, view.size), view.topleft)
