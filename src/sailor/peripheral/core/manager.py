import threading
from functools import cached_property
from typing import Any, Iterable

import reactivex
from reactivex.subject import BehaviorSubject, Subject

from sailor.peripheral.core import Input, Peripheral
from sailor.peripheral.keyboard import KeyboardTiltSensor
from sailor.peripheral.sensor import AccelerometerTiltSensor
from sailor.utilities.env import Configuration, TiltSource
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

Point = tuple[float, float]


class PeripheralManager:
    """Coordinate detection and execution of available peripherals.

    Besides the detected peripherals the manager owns the per-frame subjects
    the runtime publishes into: ``game_tick``, ``window``, ``clock`` and the
    ``taps`` made on the window.
    """

    def __init__(self, *, tilt_source: TiltSource | None = None) -> None:
        self._peripherals: list[Peripheral[Any]] = []
        self._threads: list[threading.Thread] = []
        self._started = False
        self._tilt_source = tilt_source

    @property
    def peripherals(self) -> tuple[Peripheral[Any], ...]:
        return tuple(self._peripherals)

    @property
    def tilt_source(self) -> TiltSource:
        if self._tilt_source is None:
            self._tilt_source = Configuration.tilt_source()
        return self._tilt_source

    def detect(self) -> None:
        for peripheral in self._iter_detected_peripherals():
            self._register_peripheral(peripheral)

    def register(self, peripheral: Peripheral[Any]) -> None:
        """Manually register ``peripheral`` with the manager."""

        self._register_peripheral(peripheral)

    def _iter_detected_peripherals(self) -> Iterable[Peripheral[Any]]:
        source = self.tilt_source
        if source is TiltSource.NONE:
            return

        if source in (TiltSource.AUTO, TiltSource.SERIAL):
            accelerometers = list(AccelerometerTiltSensor.detect())
            if accelerometers:
                yield from accelerometers
                return
            if source is TiltSource.SERIAL:
                logger.warning("No serial accelerometer found; tilt stays at 0")
                return

        yield from KeyboardTiltSensor.detect()

    def start(self) -> None:
        if self._started:
            raise ValueError("Manager has already been started")

        self._started = True
        for peripheral in self._peripherals:
            logger.info(f"Attempting to start peripheral '{peripheral}'")
            if not peripheral.needs_thread():
                peripheral.run()
                continue
            thread = threading.Thread(
                target=peripheral.run,
                name=f"peripheral-{type(peripheral).__name__}",
                daemon=True,
            )
            thread.start()
            self._threads.append(thread)

    def _register_peripheral(self, peripheral: Peripheral[Any]) -> None:
        self._peripherals.append(peripheral)

    def dispatch(self, input: Input) -> None:
        """Forward ``input`` to every registered peripheral."""

        for peripheral in self._peripherals:
            peripheral.handle_input(input)

    @cached_property
    def game_tick(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def window(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def clock(self) -> reactivex.Subject[Any]:
        return BehaviorSubject[Any](None)

    @cached_property
    def taps(self) -> reactivex.Subject[Point]:
        return Subject()
