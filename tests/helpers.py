"""Shared test doubles."""

from typing import List, Tuple

from renderer import Surface


class RecordingSurface(Surface):
    """Surface that records draw calls instead of drawing."""

    def __init__(self):
        self.calls: List[Tuple] = []
        self.frames = 0
        self.closed = False

    def clear(self, color):
        self.calls.append(("clear", color))

    def draw_rect(self, x, y, width, height, color):
        self.calls.append(("rect", x, y, width, height, color))

    def draw_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def draw_text(self, text, x, y, size, color):
        self.calls.append(("text", text, x, y, size, color))

    def next_frame(self) -> float:
        self.frames += 1
        return 1 / 60

    def close(self):
        self.closed = True

    def texts(self) -> List[str]:
        return [call[1] for call in self.calls if call[0] == "text"]

    def kinds(self) -> List[str]:
        return [call[0] for call in self.calls]

    def reset(self):
        self.calls = []
