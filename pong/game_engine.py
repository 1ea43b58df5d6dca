import logging
import random
from enum import Enum, IntEnum

import pygame

from .ai import Difficulty, ai_velocity, next_difficulty
from .ball import Ball
from .paddle import Paddle
from .settings import (
    BALL_HEIGHT,
    BALL_WIDTH,
    BOUNCE_DY_RANGE,
    BOUNCE_SPEEDUP,
    KEY_CANCEL,
    KEY_DIFFICULTY,
    KEY_QUIT,
    KEYS_CONFIRM,
    LEFT_PADDLE_OFFSET,
    MODE_KEYS,
    PADDLE_HEIGHT,
    PADDLE_MARGIN,
    PADDLE_SPEED,
    PADDLE_START_OFFSET,
    PADDLE_WIDTH,
    PLAYER1_KEYS,
    PLAYER2_KEYS,
    RIGHT_PADDLE_OFFSET,
    SERVE_DX_RANGE,
    SERVE_DY_RANGE,
    WINNING_SCORE,
)

logger = logging.getLogger(__name__)


class State(Enum):
    START = "start"   # title screen, mode and difficulty selection
    SERVE = "serve"   # waiting for Enter to serve
    PLAY = "play"     # ball in play
    DONE = "done"     # match over, waiting for restart


class GameMode(IntEnum):
    AI_VS_AI = 0
    PLAYER_VS_AI = 1
    PLAYER_VS_PLAYER = 2

    @property
    def label(self) -> str:
        return self.name.replace("_", " ")


class Cue(Enum):
    """Sound cues emitted by the engine; the audio layer decides how to play them."""
    PADDLE_HIT = "paddle_hit"
    SCORE = "score"
    WALL_HIT = "wall_hit"


# ----------------- Game Engine -----------------
class GameEngine:
    def __init__(self, width, height, rng=None):
        self.width = width
        self.height = height
        self.rng = rng or random.Random()

        # Entities
        self.player1 = Paddle(PADDLE_MARGIN, PADDLE_START_OFFSET,
                              PADDLE_WIDTH, PADDLE_HEIGHT, height)
        self.player2 = Paddle(width - PADDLE_MARGIN, height - PADDLE_START_OFFSET,
                              PADDLE_WIDTH, PADDLE_HEIGHT, height)
        self.ball = Ball(width / 2 - BALL_WIDTH / 2, height / 2 - BALL_HEIGHT / 2,
                         BALL_WIDTH, BALL_HEIGHT)

        # Scoreboard; whoever gets scored on serves next
        self.player1_score = 0
        self.player2_score = 0
        self.serving_player = 1
        self.winning_player = 0

        # Selections made on the start screen; they survive a return to START
        self.mode = GameMode.PLAYER_VS_PLAYER
        self.difficulty = Difficulty.EASY

        self.state = State.START
        self.request_quit = False
        self._cues = []

    # ---------- Helpers ----------
    def _set_state(self, state):
        if state is not self.state:
            logger.debug("State %s -> %s", self.state.value, state.value)
        self.state = state

    def _reset_scores(self):
        self.player1_score = 0
        self.player2_score = 0

    def _emit(self, cue):
        self._cues.append(cue)

    def drain_cues(self):
        """Return the cues emitted since the last call and clear the queue."""
        cues, self._cues = self._cues, []
        return cues

    def opponent(self, player):
        return 2 if player == 1 else 1

    # ---------- Input ----------
    def handle_input(self, events):
        for event in events:
            if event.type == pygame.KEYDOWN:
                self.key_pressed(event.key)

    def key_pressed(self, key):
        if key == KEY_QUIT:
            self.request_quit = True
        elif key in KEYS_CONFIRM:
            self._confirm()
        elif key == KEY_CANCEL:
            self._cancel()

        # Mode and difficulty can only be changed on the start screen
        if self.state is State.START:
            if key in MODE_KEYS:
                self.mode = GameMode(MODE_KEYS[key])
                logger.info("Game mode: %s", self.mode.label)
            elif key == KEY_DIFFICULTY:
                self.difficulty = next_difficulty(self.difficulty)
                logger.info("AI difficulty: %s", self.difficulty.label)

    def _confirm(self):
        if self.state is State.START:
            self._set_state(State.SERVE)
        elif self.state is State.SERVE:
            # Launch with a fresh serve even if no frame ran while serving
            self._serve()
            self._set_state(State.PLAY)
        elif self.state is State.DONE:
            # Restart; the loser of the last match serves first
            self.ball.reset()
            self._reset_scores()
            self.serving_player = self.opponent(self.winning_player)
            self._set_state(State.SERVE)

    def _cancel(self):
        self.ball.reset()
        self._reset_scores()
        self._set_state(State.START)

    # ---------- Update ----------
    def update(self, dt: float, held=None):
        """
        Advance one frame. `held` maps pygame key codes to pressed flags,
        as returned by pygame.key.get_pressed().
        """
        if self.state is State.SERVE:
            self._serve()
        elif self.state is State.PLAY:
            self._paddle_collisions()
            self._wall_collisions()
            self._check_scoring()

        self._apply_controls(held)

        if self.state is State.PLAY:
            self.ball.update(dt)

        # Paddles can move no matter what state we're in
        self.player1.update(dt)
        self.player2.update(dt)

    def _serve(self):
        self.ball.dy = self.rng.randint(*SERVE_DY_RANGE)
        dx = self.rng.randint(*SERVE_DX_RANGE)
        self.ball.dx = dx if self.serving_player == 1 else -dx

    def _bounce_off(self, new_x):
        self.ball.dx = -self.ball.dx * BOUNCE_SPEEDUP
        self.ball.x = new_x

        # Keep vertical direction, randomize its speed
        dy = self.rng.randint(*BOUNCE_DY_RANGE)
        self.ball.dy = -dy if self.ball.dy < 0 else dy

        self._emit(Cue.PADDLE_HIT)

    def _paddle_collisions(self):
        if self.ball.collides(self.player1):
            self._bounce_off(self.player1.x + LEFT_PADDLE_OFFSET)
        if self.ball.collides(self.player2):
            self._bounce_off(self.player2.x + RIGHT_PADDLE_OFFSET)

    def _wall_collisions(self):
        if self.ball.y <= 0:
            self.ball.y = 0.0
            self.ball.dy = -self.ball.dy
            self._emit(Cue.WALL_HIT)

        bottom = self.height - self.ball.height
        if self.ball.y >= bottom:
            self.ball.y = float(bottom)
            self.ball.dy = -self.ball.dy
            self._emit(Cue.WALL_HIT)

    def _check_scoring(self):
        if self.ball.x < 0:
            self.serving_player = 1
            self.player2_score += 1
            self._point_scored(2, self.player2_score)
        elif self.ball.x > self.width:
            self.serving_player = 2
            self.player1_score += 1
            self._point_scored(1, self.player1_score)

    def _point_scored(self, player, score):
        self._emit(Cue.SCORE)
        logger.info("Player %d scores (%d - %d)", player,
                    self.player1_score, self.player2_score)

        self.ball.reset()
        if score >= WINNING_SCORE:
            self.winning_player = player
            logger.info("Player %d wins the match", player)
            self._set_state(State.DONE)
        else:
            self._set_state(State.SERVE)

    def _apply_controls(self, held):
        if self.mode is GameMode.AI_VS_AI:
            self._ai_control(self.player1)
            self._ai_control(self.player2)
        elif self.mode is GameMode.PLAYER_VS_AI:
            self._player_control(self.player1, PLAYER1_KEYS, held)
            self._ai_control(self.player2)
        else:
            self._player_control(self.player1, PLAYER1_KEYS, held)
            self._player_control(self.player2, PLAYER2_KEYS, held)

    def _player_control(self, paddle, keys, held):
        up_key, down_key = keys
        if held is not None and held[up_key]:
            paddle.dy = -PADDLE_SPEED
        elif held is not None and held[down_key]:
            paddle.dy = PADDLE_SPEED
        else:
            paddle.dy = 0.0

    def _ai_control(self, paddle):
        paddle.dy = ai_velocity(paddle, self.ball, self.difficulty, self.width)
