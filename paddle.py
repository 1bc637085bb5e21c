"""Paddle logic for Pong."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from config import Config
from field import Rectangle, Viewport
from input_handler import Control, FrameInput


class Side(Enum):
    """Which side of the court a paddle defends."""

    LEFT = "left"
    RIGHT = "right"


# (up, down) controls for each side
SIDE_CONTROLS = {
    Side.LEFT: (Control.LEFT_UP, Control.LEFT_DOWN),
    Side.RIGHT: (Control.RIGHT_UP, Control.RIGHT_DOWN),
}


@dataclass
class Paddle:
    """
    A player's paddle.

    x is the left edge of the paddle and stays fixed for a side;
    y is the vertical center and is the only coordinate input changes.
    """

    side: Side
    x: float
    y: float
    width: float = 20.0
    height: float = 100.0
    speed: float = 300.0
    score: int = 0

    def update(self, frame_input: FrameInput, elapsed: Optional[float] = None) -> None:
        """
        Move the paddle according to this side's controls.

        Args:
            frame_input: Input snapshot for the current frame
            elapsed: Seconds since the last frame (defaults to frame_input.elapsed)
        """
        if elapsed is None:
            elapsed = frame_input.elapsed

        up, down = SIDE_CONTROLS[self.side]
        direction = 0
        if frame_input.is_held(up):
            direction -= 1
        if frame_input.is_held(down):
            direction += 1

        if elapsed > 0:
            self.y += direction * self.speed * elapsed

        self.y = frame_input.viewport.clamp_y(self.y, self.height / 2)

    def reset(self, viewport_height: float) -> None:
        """Recenter the paddle vertically. Score is kept."""
        self.y = viewport_height / 2

    def move_to_anchor(self, viewport_width: float) -> None:
        """Keep the paddle against its own edge of the viewport."""
        self.x = anchor_x(self.side, viewport_width, self.width)

    @property
    def rect(self) -> Rectangle:
        """Bounding box of the paddle."""
        return Rectangle(self.x, self.y - self.height / 2, self.width, self.height)

    @property
    def position(self) -> Tuple[float, float]:
        """Get paddle position as tuple."""
        return (self.x, self.y)


def anchor_x(side: Side, viewport_width: float, paddle_width: float) -> float:
    """Horizontal position of a paddle for the given side."""
    if side == Side.LEFT:
        return 0.0
    return viewport_width - paddle_width


def create_paddles(config: Config, viewport: Viewport) -> Tuple[Paddle, Paddle]:
    """
    Create both paddles at their starting positions.

    Returns:
        Tuple of (left, right)
    """
    _, center_y = viewport.center
    left, right = (
        Paddle(
            side=side,
            x=anchor_x(side, viewport.width, config.paddle_width),
            y=center_y,
            width=config.paddle_width,
            height=config.paddle_height,
            speed=config.paddle_speed,
        )
        for side in (Side.LEFT, Side.RIGHT)
    )
    return (left, right)
