from enum import StrEnum


class TiltSource(StrEnum):
    AUTO = "auto"
    SERIAL = "serial"
    KEYBOARD = "keyboard"
    NONE = "none"
