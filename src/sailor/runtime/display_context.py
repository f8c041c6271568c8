from __future__ import annotations

from dataclasses import dataclass

import pygame

from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

WINDOW_CAPTION = "Sailor"


@dataclass
class DisplayContext:
    """Track and initialize pygame display resources."""

    screen_size: tuple[int, int]
    fullscreen: bool = False
    screen: pygame.Surface | None = None
    clock: pygame.time.Clock | None = None

    def initialize(self) -> None:
        pygame.init()
        flags = pygame.FULLSCREEN if self.fullscreen else pygame.RESIZABLE
        logger.info(
            "Opening %dx%d window (fullscreen=%s)",
            self.screen_size[0],
            self.screen_size[1],
            self.fullscreen,
        )
        self.screen = pygame.display.set_mode(self.screen_size, flags)
        pygame.display.set_caption(WINDOW_CAPTION)
        self.clock = pygame.time.Clock()

    def ensure_initialized(self) -> None:
        if self.clock is None or self.screen is None:
            raise RuntimeError("GameLoop failed to initialize display surfaces")

    def set_screen(self, screen: pygame.Surface) -> None:
        self.screen = screen

    def set_clock(self, clock: pygame.time.Clock) -> None:
        self.clock = clock

    def get_size(self) -> tuple[int, int]:
        if self.screen is None:
            raise RuntimeError("Screen is not initialized")
        return self.screen.get_size()

    def present(self) -> None:
        pygame.display.flip()
