from sailor.utilities.env.config import Configuration  # noqa: F401
from sailor.utilities.env.enums import TiltSource  # noqa: F401
from sailor.utilities.env.ports import get_device_ports  # noqa: F401
