from sailor.utilities.env.parsing import _env_flag, _env_optional_int


class SceneConfiguration:
    @classmethod
    def random_seed(cls) -> int | None:
        return _env_optional_int("SAILOR_RANDOM_SEED")

    @classmethod
    def show_clouds(cls) -> bool:
        return _env_flag("SAILOR_SHOW_CLOUDS")

    @classmethod
    def show_rain(cls) -> bool:
        return _env_flag("SAILOR_SHOW_RAIN")
