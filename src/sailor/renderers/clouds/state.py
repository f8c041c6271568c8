from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

from sailor.display.color import GRAY, WHITE, Color
from sailor.renderers.sea.state import ship_top_y
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

GLYPH_GRID = 24.0
GLYPH_HEIGHT = 20.0
SPAWN_CHANCE = 0.02
CLEARANCE_DP = 0.0

MIN_SIZE, SIZE_SPAN = 30.0, 40.0
MIN_SPEED, SPEED_SPAN = 20.0, 50.0
MIN_ALPHA, ALPHA_SPAN = 0.3, 0.4
INITIAL_CLOUDS = (3, 5)

RAIN_BAND_COUNT = 3
RAIN_BAND_SPACING_PX = 260.0
RAIN_BAND_WIDTH_FACTOR = 1.5
RAIN_MIN_ALPHA, RAIN_ALPHA_SPAN = 0.6, 0.4

CloudMode = tuple[bool, bool]


@dataclass
class Cloud:
    x: float
    y: float
    size: float
    speed: float
    alpha: float
    color: Color
    is_rain_cloud: bool = False

    def pixel_size(self, density: float) -> float:
        # Rain bands are already sized in pixels.
        return self.size if self.is_rain_cloud else self.size * density

    def cull_x(self, density: float) -> float:
        return -self.size * density * 2.0


def cloud_height_px(size: float, density: float) -> float:
    return GLYPH_HEIGHT / GLYPH_GRID * size * density


@dataclass
class CloudField:
    """Drifting clouds, or three static bands while it rains.

    Changing ``(show_clouds, show_rain)`` wipes the population and reseeds it
    for the new mode.
    """

    clouds: list[Cloud] = field(default_factory=list)
    mode: CloudMode | None = None

    def set_mode(
        self,
        *,
        show_clouds: bool,
        show_rain: bool,
        width: float,
        sea_level: float,
        density: float,
        rng: Random,
    ) -> bool:
        mode = (show_clouds, show_rain)
        if mode == self.mode:
            return False
        self.clouds = []
        if width <= 0:
            return True
        self.mode = mode
        if show_rain:
            self.clouds.extend(self._rain_bands(width, density, rng))
        elif show_clouds:
            count = rng.randint(*INITIAL_CLOUDS)
            for _ in range(count):
                self.clouds.append(
                    self._drifting_cloud(rng.random() * width, sea_level, density, rng)
                )
        logger.info(
            "Cloud field reseeded for clouds=%s rain=%s with %d clouds",
            show_clouds,
            show_rain,
            len(self.clouds),
        )
        return True

    def update(
        self,
        *,
        dt_s: float,
        show_clouds: bool,
        show_rain: bool,
        width: float,
        sea_level: float,
        density: float,
        rng: Random,
    ) -> None:
        self.set_mode(
            show_clouds=show_clouds,
            show_rain=show_rain,
            width=width,
            sea_level=sea_level,
            density=density,
            rng=rng,
        )
        if show_rain:
            return

        survivors: list[Cloud] = []
        for cloud in self.clouds:
            cloud.x -= cloud.speed * dt_s * density
            if cloud.x >= cloud.cull_x(density):
                survivors.append(cloud)
        self.clouds = survivors

        if show_clouds and width > 0 and rng.random() < SPAWN_CHANCE:
            cloud = self._drifting_cloud(0.0, sea_level, density, rng)
            cloud.x = width + cloud.size * density * 2.0
            self.clouds.append(cloud)

    @staticmethod
    def _drifting_cloud(x: float, sea_level: float, density: float, rng: Random) -> Cloud:
        size = rng.random() * SIZE_SPAN + MIN_SIZE
        speed = rng.random() * SPEED_SPAN + MIN_SPEED
        highest_top = (
            ship_top_y(sea_level, density)
            - cloud_height_px(size, density)
            - CLEARANCE_DP * density
        )
        y = rng.random() * max(highest_top, 0.0)
        alpha = rng.random() * ALPHA_SPAN + MIN_ALPHA
        return Cloud(x=x, y=y, size=size, speed=speed, alpha=alpha, color=WHITE)

    @staticmethod
    def _rain_bands(width: float, density: float, rng: Random) -> list[Cloud]:
        size = width / density * RAIN_BAND_WIDTH_FACTOR
        alpha = rng.random() * RAIN_ALPHA_SPAN + RAIN_MIN_ALPHA
        return [
            Cloud(
                x=index * RAIN_BAND_SPACING_PX,
                y=0.0,
                size=size,
                speed=0.0,
                alpha=alpha,
                color=GRAY,
                is_rain_cloud=True,
            )
            for index in range(RAIN_BAND_COUNT)
        ]
