from __future__ import annotations

import math
from functools import cached_property
from typing import TYPE_CHECKING

import reactivex
from reactivex import operators as ops
from reactivex.subject import Subject

from sailor.peripheral.core import Peripheral, PeripheralMessageEnvelope
from sailor.peripheral.core.providers import ObservableProvider
from sailor.utilities.logging import get_logger

if TYPE_CHECKING:
    from sailor.peripheral.core.manager import PeripheralManager

logger = get_logger(__name__)


def finite_or_zero(degrees: float) -> float:
    try:
        value = float(degrees)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


class TiltSensor(Peripheral[float]):
    """A peripheral publishing the device tilt in degrees.

    Readings are pushed with :meth:`publish` from whatever thread the sensor
    runs on; subscribers only ever keep the latest value.
    """

    @cached_property
    def _readings(self) -> Subject[float]:
        return Subject()

    def _event_stream(self) -> reactivex.Observable[float]:
        return self._readings

    def publish(self, degrees: float) -> None:
        self._readings.on_next(finite_or_zero(degrees))


class TiltProvider(ObservableProvider[float]):
    """Latest tilt across every registered :class:`TiltSensor`.

    Starts at ``0.0`` and stays there when no sensor is attached.
    """

    def __init__(self, peripheral_manager: PeripheralManager) -> None:
        self._pm = peripheral_manager

    def observable(self) -> reactivex.Observable[float]:
        sensors = [
            peripheral.observe
            for peripheral in self._pm.peripherals
            if isinstance(peripheral, TiltSensor)
        ]
        if not sensors:
            logger.info("No tilt sensor attached; tilt stays at 0")
            return reactivex.just(0.0)

        return reactivex.merge(*sensors).pipe(
            ops.map(PeripheralMessageEnvelope[float].unwrap_peripheral),
            ops.map(finite_or_zero),
            ops.start_with(0.0),
            ops.distinct_until_changed(),
            ops.share(),
        )
