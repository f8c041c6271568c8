from sailor.utilities.env.parsing import _env_flag, _env_float, _env_int

DEFAULT_SCREEN_WIDTH = 540
DEFAULT_SCREEN_HEIGHT = 960
DEFAULT_MAX_FPS = 60
DEFAULT_DENSITY = 1.0


class RenderingConfiguration:
    @classmethod
    def screen_size(cls) -> tuple[int, int]:
        return (
            _env_int("SAILOR_SCREEN_WIDTH", default=DEFAULT_SCREEN_WIDTH, minimum=1),
            _env_int("SAILOR_SCREEN_HEIGHT", default=DEFAULT_SCREEN_HEIGHT, minimum=1),
        )

    @classmethod
    def max_fps(cls) -> int:
        return _env_int("SAILOR_MAX_FPS", default=DEFAULT_MAX_FPS, minimum=1)

    @classmethod
    def density(cls) -> float:
        return _env_float(
            "SAILOR_DENSITY", default=DEFAULT_DENSITY, minimum=0.5, maximum=4.0
        )

    @classmethod
    def fullscreen(cls) -> bool:
        return _env_flag("SAILOR_FULLSCREEN")
