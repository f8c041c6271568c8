from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pygame

from sailor.peripheral.core.manager import PeripheralManager
from sailor.runtime.display_context import DisplayContext
from sailor.runtime.peripheral_runtime import PeripheralRuntime
from sailor.runtime.pygame_event_handler import PygameEventHandler
from sailor.utilities.env.rendering import DEFAULT_MAX_FPS
from sailor.utilities.logging import get_logger

if TYPE_CHECKING:
    from sailor.renderers import StatefulBaseRenderer

logger = get_logger(__name__)


class GameLoop:
    """Single-threaded frame loop.

    Every tick publishes ``game_tick`` (which advances the scene state), pumps
    pygame events, draws the renderers in order and paces to ``max_fps``.
    """

    def __init__(
        self,
        display: DisplayContext,
        peripheral_manager: PeripheralManager,
        peripheral_runtime: PeripheralRuntime,
        event_handler: PygameEventHandler,
        max_fps: int = DEFAULT_MAX_FPS,
    ) -> None:
        self.display = display
        self.peripheral_manager = peripheral_manager
        self.peripheral_runtime = peripheral_runtime
        self.event_handler = event_handler
        self.max_fps = max_fps
        self.renderers: list["StatefulBaseRenderer[Any]"] = []
        self.initialized = False
        self.running = False
        self.frame_count = 0

    def add_renderer(self, renderer: "StatefulBaseRenderer[Any]") -> None:
        self.renderers.append(renderer)

    def set_screen(self, screen: pygame.Surface) -> None:
        self.display.set_screen(screen)
        self.peripheral_manager.window.on_next(screen)

    def set_clock(self, clock: pygame.time.Clock) -> None:
        self.display.set_clock(clock)
        self.peripheral_manager.clock.on_next(clock)

    def run(self, frames: int | None = None) -> None:
        """Run until the window closes, or for ``frames`` ticks when given."""

        logger.info("Starting GameLoop")
        if not self.renderers:
            raise RuntimeError("Unable to start as no renderers were added.")
        if not self.initialized:
            self._initialize()

        self.running = True
        logger.info("Entering main loop.")
        try:
            while self.running:
                self._one_loop()
                if frames is not None and self.frame_count >= frames:
                    logger.info("Stopping after %d frames", self.frame_count)
                    self.running = False
        finally:
            for renderer in self.renderers:
                renderer.reset()
            pygame.quit()

    def _initialize(self) -> None:
        self.display.initialize()
        self.display.ensure_initialized()
        assert self.display.screen is not None and self.display.clock is not None
        self.set_screen(self.display.screen)
        self.set_clock(self.display.clock)
        self.peripheral_runtime.detect_and_start()
        for renderer in self.renderers:
            renderer.initialize(
                window=self.display.screen,
                clock=self.display.clock,
                peripheral_manager=self.peripheral_manager,
            )
        self.initialized = True

    def _one_loop(self) -> None:
        self.display.ensure_initialized()
        assert self.display.screen is not None and self.display.clock is not None
        self.running = self.event_handler.handle_events()
        self.peripheral_runtime.tick()
        for renderer in self.renderers:
            renderer.process(self.display.screen, self.display.clock)
        self.display.present()
        self.display.clock.tick(self.max_fps)
        self.frame_count += 1
