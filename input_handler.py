"""Input sampling for Pong."""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional

from field import Viewport

try:
    import pygame

    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False


class Control(Enum):
    """Logical game controls."""

    LEFT_UP = "left_up"
    LEFT_DOWN = "left_down"
    RIGHT_UP = "right_up"
    RIGHT_DOWN = "right_down"
    START = "start"  # Shared by the title screen and round restart
    QUIT = "quit"


@dataclass(frozen=True)
class FrameInput:
    """
    Snapshot of the input state for a single frame.

    The simulation only ever reads input through this object, so a test
    can drive any number of frames without a window or a live clock.
    """

    viewport_width: float
    viewport_height: float
    elapsed: float = 0.0
    held: FrozenSet[Control] = dataclass_field(default_factory=frozenset)
    pressed: FrozenSet[Control] = dataclass_field(default_factory=frozenset)

    def is_held(self, control: Control) -> bool:
        """Level-triggered: is the control down right now."""
        return control in self.held

    def was_pressed(self, control: Control) -> bool:
        """Edge-triggered: did the control go down during this frame."""
        return control in self.pressed

    @property
    def viewport(self) -> Viewport:
        """Viewport size reported for this frame."""
        return Viewport(self.viewport_width, self.viewport_height)

    @classmethod
    def build(
        cls,
        viewport_width: float,
        viewport_height: float,
        elapsed: float = 0.0,
        held: Iterable[Control] = (),
        pressed: Iterable[Control] = (),
    ) -> "FrameInput":
        """Create a snapshot from any iterables of controls."""
        return cls(
            viewport_width=viewport_width,
            viewport_height=viewport_height,
            elapsed=elapsed,
            held=frozenset(held),
            pressed=frozenset(pressed),
        )


def default_key_bindings() -> Dict[int, Control]:
    """Map pygame key codes to controls."""
    if not PYGAME_AVAILABLE:
        raise ImportError("pygame required: pip install pygame")
    return {
        pygame.K_w: Control.LEFT_UP,
        pygame.K_s: Control.LEFT_DOWN,
        pygame.K_UP: Control.RIGHT_UP,
        pygame.K_DOWN: Control.RIGHT_DOWN,
        pygame.K_SPACE: Control.START,
        pygame.K_ESCAPE: Control.QUIT,
    }


class InputHandler:
    """Handles pygame events and produces one FrameInput per frame.

    Separates input polling from the simulation. The frame loop calls
    process_events() once per frame, then sample() to get the snapshot
    the game logic consumes.
    """

    def __init__(self, key_bindings: Optional[Dict[int, Control]] = None):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required: pip install pygame")
        self._key_bindings = key_bindings or default_key_bindings()
        self._pressed: FrozenSet[Control] = frozenset()
        self.quit_requested = False

    def process_events(self) -> None:
        """Process all pending pygame events and record new key presses."""
        pressed = set()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.quit_requested = True
            elif event.type == pygame.KEYDOWN:
                control = self._key_bindings.get(event.key)
                if control is not None:
                    pressed.add(control)
        self._pressed = frozenset(pressed)

    def held_controls(self) -> FrozenSet[Control]:
        """Controls whose keys are currently down."""
        keys = pygame.key.get_pressed()
        return frozenset(
            control for key, control in self._key_bindings.items() if keys[key]
        )

    def sample(self, elapsed: float) -> FrameInput:
        """Build the snapshot for this frame."""
        width, height = pygame.display.get_surface().get_size()
        return FrameInput(
            viewport_width=width,
            viewport_height=height,
            elapsed=elapsed,
            held=self.held_controls(),
            pressed=self._pressed,
        )

    @property
    def running(self) -> bool:
        """True if the window has not been closed."""
        return not self.quit_requested
