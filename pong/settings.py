import pygame

# Size of the actual window
WINDOW_WIDTH, WINDOW_HEIGHT = 1280, 720

# Size we draw at; scaled up to the window every frame for the retro look
VIRTUAL_WIDTH, VIRTUAL_HEIGHT = 432, 243

FPS = 60

# Paddles (speeds in pixels/sec)
PADDLE_WIDTH = 5
PADDLE_HEIGHT = 20
PADDLE_SPEED = 200
PADDLE_MARGIN = 10
PADDLE_START_OFFSET = 30

# Ball
BALL_WIDTH = 4
BALL_HEIGHT = 4

# Rules
WINNING_SCORE = 10

# Serve velocity ranges (pixels/sec)
SERVE_DX_RANGE = (140, 200)
SERVE_DY_RANGE = (-50, 50)

# Paddle bounce
BOUNCE_SPEEDUP = 1.03
BOUNCE_DY_RANGE = (10, 150)
LEFT_PADDLE_OFFSET = 5    # ball.x = left paddle x + 5
RIGHT_PADDLE_OFFSET = -4  # ball.x = right paddle x - 4

# AI: paddle speed divisor per difficulty tier, and how close the ball
# must be (field width / divisor) before the AI reacts
AI_SPEED_DIVISORS = (1.8, 1.5, 1.2, 1.0)
AI_ENGAGE_DIVISOR = 1.5

# Colors
BACKGROUND = (40, 45, 52)
WHITE = (255, 255, 255)
FPS_GREEN = (0, 255, 0)
LETTERBOX = (0, 0, 0)

# Font sizes (default pygame font, virtual pixels)
SMALL_FONT_SIZE = 12
LARGE_FONT_SIZE = 24
SCORE_FONT_SIZE = 48

# Key bindings
KEYS_CONFIRM = (pygame.K_RETURN, pygame.K_KP_ENTER)
KEY_CANCEL = pygame.K_ESCAPE
KEY_QUIT = pygame.K_q
KEY_DIFFICULTY = pygame.K_t
MODE_KEYS = {pygame.K_0: 0, pygame.K_1: 1, pygame.K_2: 2}
PLAYER1_KEYS = (pygame.K_w, pygame.K_s)       # (up, down)
PLAYER2_KEYS = (pygame.K_UP, pygame.K_DOWN)
