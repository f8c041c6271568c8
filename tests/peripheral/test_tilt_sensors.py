"""Tests for the serial accelerometer and the keyboard tilt stand-in."""

from __future__ import annotations

import json
import math

import pygame
import pytest

from sailor.peripheral.core import Input, PeripheralMessageEnvelope
from sailor.peripheral.keyboard import KEY_DOWN_EVENT, KeyboardTiltSensor
from sailor.peripheral.sensor import Acceleration, AccelerometerTiltSensor
from sailor.peripheral.tilt import finite_or_zero


def _collect(sensor) -> list[float]:
    received: list[float] = []
    sensor.observe.subscribe(
        lambda envelope: received.append(PeripheralMessageEnvelope.unwrap_peripheral(envelope))
    )
    return received


def _line(payload: object) -> bytes:
    return (json.dumps(payload) + "\n").encode("utf-8")


class TestAcceleration:
    @pytest.mark.parametrize(
        ("x", "y", "expected"),
        [(0.0, 9.8, 0.0), (9.8, 0.0, 90.0), (-9.8, 0.0, -90.0), (1.0, 1.0, 45.0)],
    )
    def test_tilt_degrees(self, x: float, y: float, expected: float) -> None:
        assert Acceleration(x=x, y=y, z=0.0).tilt_degrees() == pytest.approx(expected)


class TestAccelerometerTiltSensor:
    """Parse the board's JSON lines into tilt readings and ignore everything else."""

    def test_acceleration_line_publishes_tilt(self) -> None:
        sensor = AccelerometerTiltSensor(port="/dev/null", baudrate=115200)
        received = _collect(sensor)

        sensor._process_data(
            _line({"event_type": "acceleration", "data": {"x": 9.8, "y": 0.0, "z": 0.0}})
        )

        assert received == [pytest.approx(90.0)]
        assert sensor.acceleration == Acceleration(9.8, 0.0, 0.0)

    def test_namespaced_event_type_is_accepted(self) -> None:
        sensor = AccelerometerTiltSensor(port="/dev/null", baudrate=115200)
        received = _collect(sensor)

        sensor._process_data(
            _line({"event_type": "sensor.acceleration", "data": {"x": 0, "y": 1, "z": 0}})
        )

        assert received == [0.0]

    @pytest.mark.parametrize(
        "raw",
        [
            b"booting...\n",
            b"{not json\n",
            _line([1, 2, 3]),
            _line({"event_type": "rotary", "data": {"x": 1, "y": 1, "z": 1}}),
            _line({"event_type": "acceleration", "data": {"x": 1}}),
            _line({"event_type": "acceleration", "data": "oops"}),
        ],
    )
    def test_ignores_malformed_lines(self, raw: bytes) -> None:
        sensor = AccelerometerTiltSensor(port="/dev/null", baudrate=115200)
        received = _collect(sensor)

        sensor._process_data(raw)

        assert received == []

    def test_detect_prefers_configured_port(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAILOR_ACCELEROMETER_PORT", "/dev/ttyACM3")
        monkeypatch.setenv("SAILOR_ACCELEROMETER_BAUDRATE", "9600")

        sensors = list(AccelerometerTiltSensor.detect())

        assert [(sensor.port, sensor.baudrate) for sensor in sensors] == [("/dev/ttyACM3", 9600)]
        assert sensors[0].needs_thread()

    def test_detect_scans_matching_ports(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from sailor.peripheral import sensor as sensor_module

        monkeypatch.delenv("SAILOR_ACCELEROMETER_PORT", raising=False)
        monkeypatch.setattr(
            sensor_module, "get_device_ports", lambda match: iter(["/dev/a", "/dev/b"])
        )

        assert [sensor.port for sensor in AccelerometerTiltSensor.detect()] == ["/dev/a", "/dev/b"]


class TestKeyboardTiltSensor:
    """Arrow keys nudge the tilt in fixed steps within +/-90 degrees."""

    def _press(self, sensor: KeyboardTiltSensor, key: int) -> None:
        sensor.handle_input(Input(event_type=KEY_DOWN_EVENT, data=key))

    def test_arrows_step_and_recentre(self) -> None:
        sensor = KeyboardTiltSensor()
        received = _collect(sensor)

        self._press(sensor, pygame.K_RIGHT)
        self._press(sensor, pygame.K_RIGHT)
        self._press(sensor, pygame.K_LEFT)
        self._press(sensor, pygame.K_DOWN)

        assert received == [15.0, 30.0, 15.0, 0.0]

    def test_tilt_is_clamped(self) -> None:
        sensor = KeyboardTiltSensor()
        for _ in range(10):
            self._press(sensor, pygame.K_LEFT)

        assert sensor.degrees == -90.0

    def test_other_keys_and_events_are_ignored(self) -> None:
        sensor = KeyboardTiltSensor()
        received = _collect(sensor)

        self._press(sensor, pygame.K_a)
        sensor.handle_input(Input(event_type="other", data=pygame.K_RIGHT))

        assert received == []


@pytest.mark.parametrize(
    ("raw", "expected"),
    [(12.5, 12.5), (math.nan, 0.0), (math.inf, 0.0), ("7", 7.0), (None, 0.0)],
)
def test_finite_or_zero(raw: object, expected: float) -> None:
    assert finite_or_zero(raw) == expected  # type: ignore[arg-type]
