"""Drawing surfaces for Pong."""

from typing import Dict, Optional

try:
    import pygame
    PYGAME_AVAILABLE = True
except ImportError:
    PYGAME_AVAILABLE = False

from config import Color, Config


class Surface:
    """Primitive drawing interface the game issues its draw calls against.

    The game never touches pygame directly; everything goes through these
    calls so a recording surface can stand in during tests.
    """

    def clear(self, color: Color) -> None:
        raise NotImplementedError

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        raise NotImplementedError

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        raise NotImplementedError

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        raise NotImplementedError

    def next_frame(self) -> float:
        """Commit the frame, wait for the next one and return elapsed seconds."""
        raise NotImplementedError

    def close(self) -> None:
        pass


class PygameSurface(Surface):
    """Resizable pygame window paced by a clock."""

    def __init__(self, config: Optional[Config] = None):
        if not PYGAME_AVAILABLE:
            raise ImportError("pygame required: pip install pygame")

        self.config = config or Config()
        pygame.init()
        self.screen = pygame.display.set_mode(
            (self.config.viewport_width, self.config.viewport_height), pygame.RESIZABLE
        )
        pygame.display.set_caption(self.config.title)
        self.clock = pygame.time.Clock()
        self._fonts: Dict[int, "pygame.font.Font"] = {}
        self._initialized = True

    def _font(self, size: int) -> "pygame.font.Font":
        if size not in self._fonts:
            self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def clear(self, color: Color) -> None:
        self.screen.fill(color)

    def draw_rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None:
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        self.screen.blit(self._font(size).render(text, True, color), (int(x), int(y)))

    def next_frame(self) -> float:
        pygame.display.flip()
        return self.clock.tick(self.config.fps) / 1000.0

    def close(self) -> None:
        if self._initialized:
            pygame.quit()
            self._initialized = False
