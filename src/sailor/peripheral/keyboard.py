from typing import Iterator, Self

import pygame

from sailor.animation.easing import clamp
from sailor.peripheral.core import Input
from sailor.peripheral.tilt import TiltSensor
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

KEY_DOWN_EVENT = "keyboard.key_down"
TILT_STEP_DEGREES = 15.0
MAX_TILT_DEGREES = 90.0


class KeyboardTiltSensor(TiltSensor):
    """Desktop stand-in for the accelerometer.

    Left and right arrows nudge the tilt, down re-centres it.
    """

    def __init__(self, step: float = TILT_STEP_DEGREES) -> None:
        super().__init__()
        self.step = step
        self.degrees = 0.0

    def __repr__(self) -> str:
        return f"KeyboardTiltSensor(degrees={self.degrees})"

    @classmethod
    def detect(cls) -> Iterator[Self]:
        yield cls()

    def handle_input(self, input: Input) -> None:
        if input.event_type != KEY_DOWN_EVENT:
            return
        key = input.data
        if key == pygame.K_LEFT:
            degrees = self.degrees - self.step
        elif key == pygame.K_RIGHT:
            degrees = self.degrees + self.step
        elif key == pygame.K_DOWN:
            degrees = 0.0
        else:
            return

        self.degrees = clamp(degrees, -MAX_TILT_DEGREES, MAX_TILT_DEGREES)
        logger.debug("Keyboard tilt now %.1f degrees", self.degrees)
        self.publish(self.degrees)
