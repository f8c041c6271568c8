from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from sailor.renderers.celestial.state import CelestialState
from sailor.renderers.clouds.state import CloudField
from sailor.renderers.menu.state import EffectToggles, MenuController
from sailor.renderers.rain.state import RainField
from sailor.renderers.sea.state import SeaState
from sailor.renderers.sky.state import SkyState, SkyStateMachine
from sailor.renderers.stars.state import StarField

Point = tuple[float, float]


class Layer(StrEnum):
    """Scene layers, declared back to front."""

    SKY = "sky"
    SEA_BACK = "sea_back"
    SHIP = "ship"
    SEA_FRONT = "sea_front"
    SUN = "sun"
    MOON = "moon"
    STARS = "stars"
    CLOUDS = "clouds"
    RAIN = "rain"
    MENU = "menu"


@dataclass(frozen=True)
class SceneFrameInput:
    width: int
    height: int
    dt_ms: float
    tilt_degrees: float = 0.0
    taps: tuple[Point, ...] = ()


@dataclass
class SceneState:
    """Everything the scene shows, advanced in place once per frame.

    The menu and the sky's own dwell timer are the only writers of the effect
    toggles and sky state.
    """

    toggles: EffectToggles = field(default_factory=EffectToggles)
    sky: SkyStateMachine = field(default_factory=SkyStateMachine)
    sea: SeaState = field(default_factory=SeaState)
    celestial: CelestialState = field(default_factory=CelestialState)
    clouds: CloudField = field(default_factory=CloudField)
    rain: RainField = field(default_factory=RainField)
    stars: StarField = field(default_factory=StarField)
    menu: MenuController = field(default_factory=MenuController)
    is_sea_expanded: bool = True
    has_appeared: bool = False
    width: int = 0
    height: int = 0
    density: float = 1.0
    time_ms: float = 0.0
    frame_count: int = 0

    @classmethod
    def initial(
        cls,
        *,
        show_clouds: bool = False,
        show_rain: bool = False,
        sky: SkyState = SkyState.DAY,
        density: float = 1.0,
    ) -> SceneState:
        return cls(
            toggles=EffectToggles(show_clouds=show_clouds, show_rain=show_rain),
            sky=SkyStateMachine(state=sky),
            celestial=CelestialState.for_sky(sky),
            density=density,
        )

    @property
    def show_clouds(self) -> bool:
        return self.toggles.show_clouds

    @property
    def show_rain(self) -> bool:
        return self.toggles.show_rain

    @property
    def sky_state(self) -> SkyState:
        return self.sky.state

    @property
    def sea_level(self) -> float:
        return self.sea.sea_level

    @property
    def total_sea_height(self) -> float:
        return self.sea.metrics.total_height

    @property
    def time_s(self) -> float:
        return self.time_ms / 1000.0
