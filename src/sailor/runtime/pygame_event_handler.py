from __future__ import annotations

import pygame

from sailor.peripheral.core import Input
from sailor.peripheral.core.manager import PeripheralManager
from sailor.peripheral.keyboard import KEY_DOWN_EVENT
from sailor.runtime.display_context import DisplayContext
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

PRIMARY_BUTTON = 1


class PygameEventHandler:
    """Translate pygame events into taps and peripheral inputs."""

    def __init__(self, peripheral_manager: PeripheralManager, display: DisplayContext) -> None:
        self._peripheral_manager = peripheral_manager
        self._display = display

    def handle_events(self) -> bool:
        running = True
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type == pygame.KEYDOWN:
                self._peripheral_manager.dispatch(
                    Input(event_type=KEY_DOWN_EVENT, data=event.key)
                )
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == PRIMARY_BUTTON:
                self._tap(event.pos)
            elif event.type == pygame.FINGERDOWN:
                width, height = self._display.get_size()
                self._tap((event.x * width, event.y * height))
            elif event.type == pygame.VIDEORESIZE:
                self._window_resized()
        return running

    def _tap(self, position: tuple[float, float]) -> None:
        logger.debug("Tap at (%.0f, %.0f)", position[0], position[1])
        self._peripheral_manager.taps.on_next((float(position[0]), float(position[1])))

    def _window_resized(self) -> None:
        screen = pygame.display.get_surface()
        if screen is None:
            return
        self._display.set_screen(screen)
        logger.info("Window resized to %dx%d", *screen.get_size())
        self._peripheral_manager.window.on_next(screen)
