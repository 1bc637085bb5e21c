"""Ball logic for Pong."""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from config import Config
from field import Rectangle, Viewport
from paddle import Paddle

WALL = "wall"
PADDLE = "paddle"


@dataclass
class Ball:
    """
    The ball with position and velocity in units/second.

    Collisions only flip the sign of one velocity axis. The ball is never
    pushed out of a paddle, so it can stay overlapping for a few frames
    and flip back and forth until its travel carries it clear.
    """

    x: float
    y: float
    vx: float = 300.0
    vy: float = 300.0
    radius: float = 15.0
    speed_x: float = 300.0  # Magnitudes restored on reset
    speed_y: float = 300.0
    symmetric_walls: bool = False

    def update(
        self,
        elapsed: float,
        paddle_left: Paddle,
        paddle_right: Paddle,
        viewport_height: float,
    ) -> Optional[str]:
        """
        Advance the ball by one frame and resolve collisions.

        Args:
            elapsed: Seconds since the last frame
            paddle_left: The left paddle
            paddle_right: The right paddle
            viewport_height: Current height of the play area

        Returns:
            None if nothing was hit, WALL or PADDLE otherwise
            (PADDLE if both happened in the same frame)
        """
        if elapsed <= 0:
            return None

        # Update position
        self.x += self.vx * elapsed
        self.y += self.vy * elapsed

        event = None

        # Past a wall, vy always points back into the court.
        top = self.radius if self.symmetric_walls else 0.0
        vy = self.vy
        if self.y <= top:
            self.vy = abs(self.vy)
        elif self.y >= viewport_height - self.radius:
            self.vy = -abs(self.vy)
        if self.vy != vy:
            event = WALL

        ball_rect = self.rect
        if ball_rect.overlaps(paddle_left.rect) or ball_rect.overlaps(paddle_right.rect):
            self.vx = -self.vx
            event = PADDLE

        return event

    def reset(self, viewport_width: float, viewport_height: float, direction: int = 1) -> None:
        """
        Recenter the ball and restore the default velocity.

        Args:
            viewport_width, viewport_height: Current play area size
            direction: 1 to serve toward the right, -1 toward the left
        """
        self.x = viewport_width / 2
        self.y = viewport_height / 2
        self.vx = math.copysign(self.speed_x, direction)
        self.vy = self.speed_y

    @property
    def rect(self) -> Rectangle:
        """Square bounding box around the ball."""
        return Rectangle(
            self.x - self.radius,
            self.y - self.radius,
            self.radius * 2,
            self.radius * 2,
        )

    @property
    def position(self) -> Tuple[float, float]:
        """Get ball position as tuple."""
        return (self.x, self.y)

    @property
    def velocity(self) -> Tuple[float, float]:
        """Get ball velocity as tuple."""
        return (self.vx, self.vy)


def create_ball(config: Config, viewport: Viewport) -> Ball:
    """Create a ball at the center of the viewport with the default velocity."""
    center_x, center_y = viewport.center
    return Ball(
        x=center_x,
        y=center_y,
        vx=config.ball_speed_x,
        vy=config.ball_speed_y,
        radius=config.ball_radius,
        speed_x=config.ball_speed_x,
        speed_y=config.ball_speed_y,
        symmetric_walls=config.symmetric_walls,
    )
