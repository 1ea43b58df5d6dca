import pygame


class Ball:
    def __init__(self, x, y, width, height):
        self.spawn_x = x
        self.spawn_y = y
        self.width = width
        self.height = height
        self.reset()

    def collides(self, paddle) -> bool:
        """
        Axis-aligned box test against a paddle. Edges that merely touch
        count as a hit.
        """
        if self.x > paddle.x + paddle.width or paddle.x > self.x + self.width:
            return False
        if self.y > paddle.y + paddle.height or paddle.y > self.y + self.height:
            return False
        return True

    def reset(self):
        # Back to the middle of the field, not moving
        self.x = float(self.spawn_x)
        self.y = float(self.spawn_y)
        self.dx = 0.0
        self.dy = 0.0

    def update(self, dt: float):
        self.x += self.dx * dt
        self.y += self.dy * dt

    def rect(self):
        return pygame.Rect(int(self.x), int(self.y), int(self.width), int(self.height))

    def center_y(self):
        return self.y + self.height / 2.0
