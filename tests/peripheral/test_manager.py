from __future__ import annotations

import pygame
import pytest

from sailor.peripheral.core import Input, Peripheral
from sailor.peripheral.core.manager import PeripheralManager
from sailor.peripheral.keyboard import KEY_DOWN_EVENT, KeyboardTiltSensor
from sailor.peripheral.sensor import AccelerometerTiltSensor
from sailor.peripheral.tilt import TiltProvider
from sailor.utilities.env import TiltSource


class _StubPeripheral(Peripheral):
    def __init__(self) -> None:
        self.inputs: list[Input] = []
        self.ran = False

    def handle_input(self, input: Input) -> None:
        self.inputs.append(input)

    def run(self) -> None:
        self.ran = True


def _no_accelerometers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(AccelerometerTiltSensor, "detect", classmethod(lambda cls: iter(())))


class TestPeripheralManager:
    """Group peripheral manager tests so tilt detection follows the configured source."""

    def test_none_source_detects_nothing(self) -> None:
        manager = PeripheralManager(tilt_source=TiltSource.NONE)
        manager.detect()

        assert manager.peripherals == ()

    def test_auto_falls_back_to_keyboard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _no_accelerometers(monkeypatch)
        manager = PeripheralManager(tilt_source=TiltSource.AUTO)
        manager.detect()

        assert [type(p) for p in manager.peripherals] == [KeyboardTiltSensor]

    def test_serial_source_never_uses_keyboard(self, monkeypatch: pytest.MonkeyPatch) -> None:
        _no_accelerometers(monkeypatch)
        manager = PeripheralManager(tilt_source=TiltSource.SERIAL)
        manager.detect()

        assert manager.peripherals == ()

    def test_auto_prefers_accelerometer(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(
            AccelerometerTiltSensor,
            "detect",
            classmethod(lambda cls: iter([cls(port="/dev/x", baudrate=115200)])),
        )
        manager = PeripheralManager(tilt_source=TiltSource.AUTO)
        manager.detect()

        assert [type(p) for p in manager.peripherals] == [AccelerometerTiltSensor]

    def test_tilt_source_defaults_to_configuration(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SAILOR_TILT_SOURCE", "keyboard")

        assert PeripheralManager().tilt_source is TiltSource.KEYBOARD

    def test_start_runs_inline_peripherals_once(self) -> None:
        manager = PeripheralManager(tilt_source=TiltSource.NONE)
        stub = _StubPeripheral()
        manager.register(stub)

        manager.start()
        assert stub.ran
        with pytest.raises(ValueError):
            manager.start()

    def test_dispatch_reaches_every_peripheral(self) -> None:
        manager = PeripheralManager(tilt_source=TiltSource.NONE)
        stubs = [_StubPeripheral(), _StubPeripheral()]
        for stub in stubs:
            manager.register(stub)

        manager.dispatch(Input(event_type=KEY_DOWN_EVENT, data=pygame.K_LEFT))

        assert all(len(stub.inputs) == 1 for stub in stubs)


class TestTiltProvider:
    def test_without_sensors_tilt_is_zero(self, manager: PeripheralManager) -> None:
        received: list[float] = []
        TiltProvider(manager).observable().subscribe(received.append)

        assert received == [0.0]

    def test_streams_keyboard_tilt(self) -> None:
        manager = PeripheralManager(tilt_source=TiltSource.KEYBOARD)
        manager.detect()
        received: list[float] = []
        TiltProvider(manager).observable().subscribe(received.append)

        manager.dispatch(Input(event_type=KEY_DOWN_EVENT, data=pygame.K_RIGHT))
        manager.dispatch(Input(event_type=KEY_DOWN_EVENT, data=pygame.K_DOWN))

        assert received == [0.0, 15.0, 0.0]

    def test_repeated_readings_are_collapsed(self) -> None:
        manager = PeripheralManager(tilt_source=TiltSource.KEYBOARD)
        manager.detect()
        sensor = manager.peripherals[0]
        received: list[float] = []
        TiltProvider(manager).observable().subscribe(received.append)

        sensor.publish(5.0)
        sensor.publish(5.0)
        sensor.publish(float("nan"))

        assert received == [0.0, 5.0, 0.0]
