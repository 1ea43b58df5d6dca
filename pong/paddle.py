import pygame


class Paddle:
    def __init__(self, x, y, width, height, field_height):
        self.x = float(x)
        self.y = float(y)
        self.width = width
        self.height = height
        self.field_height = field_height
        # Vertical velocity in pixels/sec; set each frame by a player or the AI
        self.dy = 0.0

    def update(self, dt: float):
        # Clamp to the playfield: top edge at 0, bottom edge at field height
        if self.dy < 0:
            self.y = max(0.0, self.y + self.dy * dt)
        else:
            self.y = min(self.field_height - self.height, self.y + self.dy * dt)

    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def center_y(self):
        return self.y + self.height / 2.0
