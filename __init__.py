"""
Pong

A two-player Pong game: two keyboard paddles, a bouncing ball,
collision scoring and a round-reset flow.
"""

from app import AppShell, AppState
from ball import Ball, create_ball
from config import DEFAULT_CONFIG, Config
from field import Rectangle, Viewport
from input_handler import Control, FrameInput
from match import MatchController, Phase, RoundResult
from paddle import Paddle, Side, create_paddles

__version__ = "0.1.0"

__all__ = [
    "Config",
    "DEFAULT_CONFIG",
    "Rectangle",
    "Viewport",
    "Control",
    "FrameInput",
    "Paddle",
    "Side",
    "create_paddles",
    "Ball",
    "create_ball",
    "MatchController",
    "Phase",
    "RoundResult",
    "AppShell",
    "AppState",
]
