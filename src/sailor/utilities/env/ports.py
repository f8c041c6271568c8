import platform
from pathlib import Path
from typing import Iterator

import serial.tools.list_ports

SERIAL_BY_ID = Path("/dev/serial/by-id")


def get_device_ports(match: str) -> Iterator[str]:
    """Yield serial ports whose id, name or description contains ``match``."""

    directory_matches = tuple(_iter_directory_ports(SERIAL_BY_ID, match))
    if directory_matches:
        yield from directory_matches
        return

    if platform.system() in {"Darwin", "Windows"} or not SERIAL_BY_ID.exists():
        yield from _iter_serial_ports(match)


def _iter_directory_ports(base_port: Path, match: str) -> Iterator[str]:
    lower_match = match.lower()
    try:
        if not base_port.exists():
            return
        for entry in sorted(base_port.iterdir()):
            if lower_match in entry.name.lower():
                yield str(entry)
    except (FileNotFoundError, PermissionError):
        return


def _iter_serial_ports(match: str) -> Iterator[str]:
    lower_match = match.lower()
    for port in serial.tools.list_ports.comports():
        port_name = Path(port.device).name
        description = getattr(port, "description", "") or ""
        if lower_match in description.lower() or lower_match in port_name.lower():
            yield port.device
