"""
Debug logging system for Pong.

Records game events frame by frame so a session can be inspected
after the fact, and validates paddle/ball state as the game runs.
"""

import json
from dataclasses import dataclass
from typing import List, Dict, Any
from enum import Enum


class EventType(Enum):
    """Types of debug events."""

    # Ball events
    BALL_WALL_BOUNCE = "ball_wall_bounce"
    BALL_PADDLE_HIT = "ball_paddle_hit"

    # Match events
    MATCH_START = "match_start"
    MATCH_END = "match_end"
    ROUND_START = "round_start"
    ROUND_END = "round_end"

    # Validation events
    VALIDATION_WARNING = "validation_warning"


@dataclass
class DebugEvent:
    """A single debug event."""

    frame: int
    event_type: EventType
    data: Dict[str, Any]
    message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "frame": self.frame,
            "type": self.event_type.value,
            "data": self.data,
            "message": self.message,
        }


class DebugLogger:
    """
    Logger for tracking game state and events.

    Use this to:
    - Follow rounds and collisions as they happen
    - Spot invariant violations reported by GameValidator
    """

    def __init__(self, enabled: bool = True, max_events: int = 10000):
        self.enabled = enabled
        self.max_events = max_events
        self.events: List[DebugEvent] = []
        self.frame = 0
        self.print_live = False  # Print events as they happen

    def log(self, event_type: EventType, data: Dict[str, Any], message: str = ""):
        """Log a debug event."""
        if not self.enabled:
            return

        event = DebugEvent(
            frame=self.frame,
            event_type=event_type,
            data=data,
            message=message,
        )
        self.events.append(event)

        if self.print_live:
            self._print_event(event)

        # Limit stored events
        if len(self.events) > self.max_events:
            self.events = self.events[-self.max_events:]

    def _print_event(self, event: DebugEvent):
        """Print an event to console."""
        print(f"[{event.frame:05d}] {event.event_type.value}: {event.message}")
        if event.data:
            for key, value in event.data.items():
                print(f"        {key}: {value}")

    def next_frame(self):
        """Advance to next frame."""
        self.frame += 1

    def get_events_by_type(self, event_type: EventType) -> List[DebugEvent]:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def print_summary(self):
        """Print a summary of logged events."""
        print("\n" + "=" * 60)
        print("DEBUG LOG SUMMARY")
        print("=" * 60)
        print(f"Total frames: {self.frame}")
        print(f"Total events: {len(self.events)}")

        counts: Dict[str, int] = {}
        for event in self.events:
            type_name = event.event_type.value
            counts[type_name] = counts.get(type_name, 0) + 1

        print("\nEvents by type:")
        for type_name, count in sorted(counts.items()):
            print(f"  {type_name}: {count}")

        warnings = self.get_events_by_type(EventType.VALIDATION_WARNING)
        if warnings:
            print(f"\n⚠ VALIDATION WARNINGS: {len(warnings)}")
            for event in warnings[:5]:
                print(f"  Frame {event.frame}: {event.message}")
            if len(warnings) > 5:
                print(f"  ... and {len(warnings) - 5} more")

        print("=" * 60)

    def export_json(self, filepath: str):
        """Export all events to JSON file."""
        data = {
            "total_frames": self.frame,
            "events": [e.to_dict() for e in self.events],
        }
        with open(filepath, "w") as f:
            json.dump(data, f, indent=2)
        print(f"Exported {len(self.events)} events to {filepath}")


class GameValidator:
    """
    Validates game state to catch bugs early.

    Checks for:
    - Paddles leaving the vertical viewport
    - Ball escaping vertically by more than one frame of travel
    """

    def __init__(self, logger: DebugLogger):
        self.logger = logger

    def validate_paddle(self, paddle, viewport_height: float) -> bool:
        """Check the paddle is fully on screen."""
        half = paddle.height / 2
        if viewport_height < paddle.height:
            # Degenerate viewport: paddle is parked at the center
            return True
        if paddle.y < half or paddle.y > viewport_height - half:
            self.logger.log(
                EventType.VALIDATION_WARNING,
                {"side": paddle.side.value, "y": paddle.y, "viewport_height": viewport_height},
                f"{paddle.side.value} paddle out of bounds: y={paddle.y:.1f}",
            )
            return False
        return True

    def validate_ball(self, ball, viewport_height: float, elapsed: float) -> bool:
        """Check the ball is within one frame of travel of the viewport."""
        tolerance = abs(ball.vy) * max(elapsed, 0.0) + ball.radius
        if ball.y < -tolerance or ball.y > viewport_height + tolerance:
            self.logger.log(
                EventType.VALIDATION_WARNING,
                {"x": ball.x, "y": ball.y, "viewport_height": viewport_height},
                f"Ball y position out of bounds: {ball.y:.1f}",
            )
            return False
        return True
