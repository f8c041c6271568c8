import os

from sailor.utilities.env.enums import TiltSource
from sailor.utilities.env.parsing import _env_enum, _env_int


class PeripheralConfiguration:
    @classmethod
    def tilt_source(cls) -> TiltSource:
        return _env_enum("SAILOR_TILT_SOURCE", TiltSource, default=TiltSource.AUTO)

    @classmethod
    def accelerometer_port(cls) -> str | None:
        port = os.environ.get("SAILOR_ACCELEROMETER_PORT")
        if port is None or port.strip() == "" or port.strip().lower() == "auto":
            return None
        return port.strip()

    @classmethod
    def accelerometer_match(cls) -> str:
        return os.environ.get("SAILOR_ACCELEROMETER_MATCH", "usb")

    @classmethod
    def accelerometer_baudrate(cls) -> int:
        return _env_int("SAILOR_ACCELEROMETER_BAUDRATE", default=115200, minimum=1)
