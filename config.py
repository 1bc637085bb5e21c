"""Configuration for Pong."""

from dataclasses import dataclass
from typing import Tuple

Color = Tuple[int, int, int]


@dataclass
class Config:
    """Configuration parameters for the game."""

    # Initial window size (the window is resizable)
    viewport_width: int = 800
    viewport_height: int = 600

    # Paddle properties
    paddle_width: float = 20.0
    paddle_height: float = 100.0
    paddle_speed: float = 300.0  # units/second

    # Ball properties
    ball_radius: float = 15.0
    ball_speed_x: float = 300.0  # units/second
    ball_speed_y: float = 300.0
    # Top wall bounces at y <= 0 and bottom at y >= height - radius.
    # Set to bounce at y <= radius on top as well.
    symmetric_walls: bool = False

    # Display settings
    fps: int = 60
    text_size: int = 20
    background_color: Color = (0, 0, 0)
    paddle_color: Color = (255, 255, 255)
    ball_color: Color = (0, 121, 241)
    text_color: Color = (255, 255, 255)

    # Prompts
    title_prompt: str = "Press SPACE to start the game"
    continue_prompt: str = "Press Space to Play Again"
    title: str = "PongGame"


# Default configuration instance
DEFAULT_CONFIG = Config()
