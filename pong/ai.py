from enum import IntEnum

from .settings import AI_ENGAGE_DIVISOR, AI_SPEED_DIVISORS, PADDLE_SPEED


class Difficulty(IntEnum):
    EASY = 0
    MEDIUM = 1
    HARD = 2
    GOD = 3

    @property
    def label(self) -> str:
        return self.name


def next_difficulty(difficulty: Difficulty) -> Difficulty:
    # EASY -> MEDIUM -> HARD -> GOD -> EASY
    return Difficulty((int(difficulty) + 1) % len(Difficulty))


def paddle_speed(difficulty: Difficulty) -> float:
    return PADDLE_SPEED / AI_SPEED_DIVISORS[int(difficulty)]


def ai_velocity(paddle, ball, difficulty: Difficulty, field_width: float) -> float:
    """
    Vertical velocity for an AI-driven paddle.

    The paddle chases the ball's vertical center at a speed set by the
    difficulty tier, but only once the ball is horizontally closer than
    two thirds of the field. Positive moves down, negative moves up.
    """
    is_ball_close = abs(paddle.x - ball.x) < field_width / AI_ENGAGE_DIVISOR
    if not is_ball_close:
        return 0.0

    speed = paddle_speed(difficulty)
    paddle_center = paddle.center_y()
    ball_center = ball.center_y()
    if paddle_center < ball_center:
        return speed
    if paddle_center > ball_center:
        return -speed
    return 0.0
