import json
import math
import time
from dataclasses import dataclass
from typing import Any, Iterator, Mapping, Self

import serial

from sailor.peripheral.core import PeripheralInfo
from sailor.peripheral.tilt import TiltSensor
from sailor.utilities.env import Configuration, get_device_ports
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

RECONNECT_DELAY_S = 1.0
ACCELERATION_EVENT_TYPES = {"acceleration", "sensor.acceleration"}


@dataclass
class Acceleration:
    x: float
    y: float
    z: float

    def tilt_degrees(self) -> float:
        """Portrait upright reads 0, landscape reads +/-90."""

        return math.degrees(math.atan2(self.x, self.y))


class AccelerometerTiltSensor(TiltSensor):
    """Serial accelerometer emitting newline-delimited JSON readings."""

    def __init__(self, port: str, baudrate: int) -> None:
        super().__init__()
        self.port = port
        self.baudrate = baudrate
        self.acceleration: Acceleration | None = None

    def __repr__(self) -> str:
        return f"AccelerometerTiltSensor(port={self.port!r}, baudrate={self.baudrate})"

    def peripheral_info(self) -> PeripheralInfo:
        return PeripheralInfo(id=self.port, kind="accelerometer")

    @classmethod
    def detect(cls) -> Iterator[Self]:
        baudrate = Configuration.accelerometer_baudrate()
        port = Configuration.accelerometer_port()
        if port is not None:
            yield cls(port=port, baudrate=baudrate)
            return
        for detected in get_device_ports(Configuration.accelerometer_match()):
            yield cls(port=detected, baudrate=baudrate)

    def needs_thread(self) -> bool:
        return True

    def _connect_to_ser(self) -> serial.Serial:
        return serial.Serial(self.port, self.baudrate)

    def run(self) -> None:
        # Reconnect after any failure; readings simply pause meanwhile.
        while True:
            try:
                ser = self._connect_to_ser()
            except (serial.SerialException, OSError):
                logger.exception("Failed to connect to accelerometer on %s", self.port)
                time.sleep(RECONNECT_DELAY_S)
                continue
            try:
                while True:
                    for datum in ser.readlines(ser.in_waiting or 1):
                        self._process_data(datum)
            except (serial.SerialException, OSError):
                logger.exception("Accelerometer on %s encountered an error", self.port)
            finally:
                ser.close()
            time.sleep(RECONNECT_DELAY_S)

    def _process_data(self, data: bytes) -> None:
        bus_data = data.decode("utf-8", errors="replace").strip()
        if not bus_data.startswith("{"):
            logger.debug("Ignoring non-JSON sensor payload: %r", bus_data)
            return
        try:
            parsed: dict[str, Any] = json.loads(bus_data)
        except json.JSONDecodeError:
            logger.debug("Failed to decode JSON: %s", bus_data)
            return
        if not isinstance(parsed, dict):
            logger.debug("Ignoring non-object sensor payload: %s", bus_data)
            return
        self._update_due_to_data(parsed)

    def _update_due_to_data(self, data: Mapping[str, Any]) -> None:
        payload = data.get("data")
        if data.get("event_type") not in ACCELERATION_EVENT_TYPES:
            return
        if not isinstance(payload, Mapping):
            logger.debug("Ignoring malformed sensor payload: %s", payload)
            return
        try:
            acceleration = Acceleration(
                x=float(payload["x"]),
                y=float(payload["y"]),
                z=float(payload["z"]),
            )
        except (KeyError, TypeError, ValueError):
            logger.debug("Accelerometer payload missing axis components: %s", payload)
            return

        self.acceleration = acceleration
        self.publish(acceleration.tilt_degrees())
