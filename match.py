"""Match logic for Pong."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from ball import PADDLE, WALL, create_ball
from config import Config
from debug import DebugLogger, EventType, GameValidator
from field import Viewport
from input_handler import Control, FrameInput
from paddle import Side, create_paddles
from renderer import Surface

WINNER_LABELS = {
    Side.LEFT: "First Player is the Winner",
    Side.RIGHT: "Second Player is the Winner",
}


class Phase(Enum):
    """Current phase of a match."""

    ROUND_ACTIVE = "round_active"  # Ball in play
    ROUND_OVER = "round_over"  # Waiting for START to serve again


@dataclass
class RoundResult:
    """Result of a completed round."""

    winner: Side
    scores: Tuple[int, int]  # (left, right) after the round
    rally: int  # Paddle hits during the round
    frame: int  # Match frame on which the round ended


class MatchController:
    """
    Runs one match, one frame at a time.

    Owns both paddles and the ball. Each call to tick() performs exactly
    one frame of work: it updates the simulation, issues draw calls and
    returns. Waiting for the next frame is left to the caller.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        viewport: Optional[Viewport] = None,
        logger: Optional[DebugLogger] = None,
    ):
        self.config = config or Config()
        viewport = viewport or Viewport(self.config.viewport_width, self.config.viewport_height)
        self.left, self.right = create_paddles(self.config, viewport)
        self.ball = create_ball(self.config, viewport)

        self.phase = Phase.ROUND_ACTIVE
        self.winner_label = ""
        self.last_result: Optional[RoundResult] = None
        self.rounds_played = 0
        self.rally = 0
        self.frame = 0

        self.logger = logger
        self.validator = GameValidator(logger) if logger else None
        self._log(EventType.ROUND_START, {"round": 1}, "Round 1 started")

    @property
    def scores(self) -> Tuple[int, int]:
        """Current (left, right) score."""
        return (self.left.score, self.right.score)

    def _log(self, event_type: EventType, data, message: str) -> None:
        if self.logger is not None:
            self.logger.log(event_type, data, message)

    def tick(self, frame_input: FrameInput, surface: Surface) -> Optional[RoundResult]:
        """
        Run one frame of the match.

        Returns:
            The RoundResult if a round ended on this frame, None otherwise
        """
        self.frame += 1
        if self.phase == Phase.ROUND_ACTIVE:
            return self._tick_round_active(frame_input, surface)
        self._tick_round_over(frame_input, surface)
        return None

    def _tick_round_active(self, frame_input: FrameInput, surface: Surface) -> Optional[RoundResult]:
        config = self.config
        width = frame_input.viewport_width
        height = frame_input.viewport_height
        elapsed = frame_input.elapsed

        surface.draw_text(
            f"{self.left.score}:{self.right.score}",
            width / 2,
            20,
            config.text_size,
            config.text_color,
        )

        self.right.move_to_anchor(width)
        self.left.update(frame_input, elapsed)
        self.right.update(frame_input, elapsed)
        event = self.ball.update(elapsed, self.left, self.right, height)

        if event == PADDLE:
            self.rally += 1
            self._log(
                EventType.BALL_PADDLE_HIT,
                {"x": self.ball.x, "y": self.ball.y, "vx": self.ball.vx},
                f"Paddle hit #{self.rally}",
            )
        elif event == WALL:
            self._log(
                EventType.BALL_WALL_BOUNCE,
                {"x": self.ball.x, "y": self.ball.y, "vy": self.ball.vy},
                "Wall bounce",
            )

        if self.validator is not None:
            self.validator.validate_paddle(self.left, height)
            self.validator.validate_paddle(self.right, height)
            self.validator.validate_ball(self.ball, height, elapsed)

        for paddle in (self.left, self.right):
            rect = paddle.rect
            surface.draw_rect(rect.x, rect.y, rect.width, rect.height, config.paddle_color)
        surface.draw_circle(self.ball.x, self.ball.y, self.ball.radius, config.ball_color)

        # Left boundary is checked first so a single frame can never
        # award two points.
        if self.ball.x < self.left.x:
            return self._end_round(Side.RIGHT)
        if self.ball.x > self.right.x:
            return self._end_round(Side.LEFT)
        return None

    def _tick_round_over(self, frame_input: FrameInput, surface: Surface) -> None:
        config = self.config
        x = frame_input.viewport_width / 2 - 100
        y = frame_input.viewport_height / 2

        surface.draw_text(self.winner_label, x, y, config.text_size, config.text_color)
        surface.draw_text(config.continue_prompt, x, y + 20, config.text_size, config.text_color)

        if frame_input.was_pressed(Control.START):
            self.start_round(frame_input.viewport)

    def _end_round(self, winner: Side) -> RoundResult:
        """Award the point and switch to ROUND_OVER."""
        paddle = self.left if winner == Side.LEFT else self.right
        paddle.score += 1

        self.phase = Phase.ROUND_OVER
        self.winner_label = WINNER_LABELS[winner]
        self.rounds_played += 1

        result = RoundResult(
            winner=winner,
            scores=self.scores,
            rally=self.rally,
            frame=self.frame,
        )
        self.last_result = result
        self._log(
            EventType.ROUND_END,
            {"winner": winner.value, "scores": result.scores, "rally": result.rally},
            self.winner_label,
        )
        return result

    def start_round(self, viewport: Viewport) -> None:
        """
        Serve a new round. Positions are reset, scores are kept.

        The ball is served toward the player who lost the previous round.
        """
        direction = 1
        if self.last_result is not None and self.last_result.winner == Side.RIGHT:
            direction = -1

        self.ball.reset(viewport.width, viewport.height, direction)
        self.left.move_to_anchor(viewport.width)
        self.right.move_to_anchor(viewport.width)
        self.left.reset(viewport.height)
        self.right.reset(viewport.height)

        self.phase = Phase.ROUND_ACTIVE
        self.rally = 0
        round_number = self.rounds_played + 1
        self._log(
            EventType.ROUND_START,
            {"round": round_number, "direction": direction},
            f"Round {round_number} started",
        )
