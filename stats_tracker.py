"""Statistics tracking for Pong."""

from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple


@dataclass
class MatchStats:
    """Statistics for a single finished match."""

    match_num: int
    scores: Tuple[int, int]  # (left, right)
    rounds: int
    longest_rally: int


class StatsTracker:
    """Tracks round and match statistics for the running session.

    Nothing is written to disk; the history lives as long as the process.
    """

    def __init__(self, max_history: int = 200):
        self.max_history = max_history

        # Session totals
        self.round_wins = [0, 0]  # [left, right]
        self.rounds_played = 0
        self.match_count = 0

        # Current match tracking
        self.current_rallies: List[int] = []

        self.matches: Deque[MatchStats] = deque(maxlen=max_history)

        # Event log
        self.event_log: Deque[str] = deque(maxlen=8)

    def add_round(self, winner_index: int, rally: int) -> None:
        """Record a finished round. winner_index is 0 for left, 1 for right."""
        self.round_wins[winner_index] += 1
        self.rounds_played += 1
        self.current_rallies.append(rally)
        side = "Left" if winner_index == 0 else "Right"
        self.log_event(f"{side} scores (rally {rally})")

    def end_match(self, scores: Tuple[int, int]) -> MatchStats:
        """Close the current match and start tracking a new one."""
        self.match_count += 1
        stats = MatchStats(
            match_num=self.match_count,
            scores=scores,
            rounds=len(self.current_rallies),
            longest_rally=max(self.current_rallies, default=0),
        )
        self.matches.append(stats)
        self.current_rallies = []
        self.log_event(f"Match {stats.match_num} ended {scores[0]}:{scores[1]}")
        return stats

    def log_event(self, message: str) -> None:
        """Add an event to the log."""
        self.event_log.append(message)

    @property
    def longest_rally(self) -> int:
        """Longest rally seen this session."""
        best = max(self.current_rallies, default=0)
        for stats in self.matches:
            best = max(best, stats.longest_rally)
        return best

    def print_summary(self) -> None:
        """Print session totals."""
        print("\n=== Session ===")
        print(f"Matches: {self.match_count}")
        print(f"Rounds:  {self.rounds_played}")
        print(f"Wins:    Left={self.round_wins[0]} Right={self.round_wins[1]}")
        print(f"Longest rally: {self.longest_rally}")
        if self.event_log:
            print("Recent:")
            for message in self.event_log:
                print(f"  {message}")
        print("===============\n")
