from __future__ import annotations

from sailor.peripheral.core.manager import PeripheralManager
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)


class PeripheralRuntime:
    """Manage peripheral lifecycle for the runtime."""

    def __init__(self, peripheral_manager: PeripheralManager) -> None:
        self._peripheral_manager = peripheral_manager

    def detect_and_start(self) -> None:
        logger.info(
            "Attempting to detect tilt sensors (source=%s)",
            self._peripheral_manager.tilt_source.value,
        )
        self._peripheral_manager.detect()
        peripherals = self._peripheral_manager.peripherals
        logger.info(
            "Detected attached peripherals - found %d. peripherals=%s",
            len(peripherals),
            peripherals,
        )
        logger.info("Starting all peripherals")
        self._peripheral_manager.start()

    def tick(self) -> None:
        self._peripheral_manager.game_tick.on_next(True)
