from sailor.utilities.env.peripheral import PeripheralConfiguration
from sailor.utilities.env.rendering import RenderingConfiguration
from sailor.utilities.env.scene import SceneConfiguration


class Configuration(
    RenderingConfiguration,
    PeripheralConfiguration,
    SceneConfiguration,
):
    """Aggregate environment configuration helpers."""
