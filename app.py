"""Title screen and match lifecycle for Pong."""

from enum import Enum
from typing import Optional

from config import Config
from debug import DebugLogger, EventType
from input_handler import Control, FrameInput
from match import MatchController
from paddle import Side
from renderer import Surface
from stats_tracker import StatsTracker


class AppState(Enum):
    """Top-level application state."""

    IDLE = "idle"  # Title prompt
    IN_MATCH = "in_match"


class AppShell:
    """
    Shows the title prompt and owns the current match.

    A fresh MatchController is created every time a match starts and is
    dropped when the players leave it, so nothing carries over between
    matches except the session statistics.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        logger: Optional[DebugLogger] = None,
        stats: Optional[StatsTracker] = None,
    ):
        self.config = config or Config()
        self.logger = logger
        self.stats = stats or StatsTracker()
        self.state = AppState.IDLE
        self.match: Optional[MatchController] = None
        self.quit_requested = False

    @property
    def running(self) -> bool:
        """True until a quit was requested from the title screen."""
        return not self.quit_requested

    def tick(self, frame_input: FrameInput, surface: Surface) -> None:
        """Run one frame of whichever state is active."""
        surface.clear(self.config.background_color)

        if self.state == AppState.IDLE:
            self._tick_idle(frame_input, surface)
        else:
            self._tick_match(frame_input, surface)

        if self.logger is not None:
            self.logger.next_frame()

    def _tick_idle(self, frame_input: FrameInput, surface: Surface) -> None:
        config = self.config
        surface.draw_text(
            config.title_prompt,
            frame_input.viewport_width / 2 - 100,
            frame_input.viewport_height / 2,
            config.text_size,
            config.text_color,
        )

        if frame_input.was_pressed(Control.QUIT):
            self.quit_requested = True
        elif frame_input.is_held(Control.START):
            self.start_match(frame_input)

    def _tick_match(self, frame_input: FrameInput, surface: Surface) -> None:
        if frame_input.was_pressed(Control.QUIT):
            self.end_match()
            return

        result = self.match.tick(frame_input, surface)
        if result is not None:
            self.stats.add_round(0 if result.winner == Side.LEFT else 1, result.rally)

    def start_match(self, frame_input: FrameInput) -> MatchController:
        """Create a new match sized to the current viewport."""
        if self.logger is not None:
            self.logger.log(
                EventType.MATCH_START,
                {"viewport": (frame_input.viewport_width, frame_input.viewport_height)},
                f"Match {self.stats.match_count + 1} started",
            )
        self.match = MatchController(self.config, frame_input.viewport, self.logger)
        self.state = AppState.IN_MATCH
        return self.match

    def end_match(self) -> None:
        """Drop the current match and return to the title prompt."""
        if self.match is not None:
            scores = self.match.scores
            self.stats.end_match(scores)
            if self.logger is not None:
                self.logger.log(
                    EventType.MATCH_END,
                    {"scores": scores},
                    f"Match ended {scores[0]}:{scores[1]}",
                )
        self.match = None
        self.state = AppState.IDLE
