from sailor.renderers.atomic import AtomicBaseRenderer  # noqa: F401
from sailor.renderers.stateful import StatefulBaseRenderer  # noqa: F401
