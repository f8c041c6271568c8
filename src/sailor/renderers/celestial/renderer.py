from sailor.display.canvas import Canvas
from sailor.display.color import DARK_GRAY, Color
from sailor.renderers.celestial.state import (MOON_OFFSET_X_DP, MOON_SIZE_DP,
                                              SUN_OFFSET_X_DP, SUN_SIZE_DP,
                                              CelestialState)

SUN_COLOR = Color.from_hex("#FFC107")
SUN_CORE_RATIO = 0.25
SUN_RAY_COUNT = 8
SUN_RAY_WIDTH_RATIO = 0.08
SUN_RAY_HEIGHT_RATIO = 0.3
SUN_RAY_CORNER_RATIO = 0.04

MOON_COLOR = Color.from_hex("#CFD8DC")
MOON_GLOW_RATIO = 1.1
MOON_GLOW_ALPHA = 0.2
MOON_COVER_TRAVEL = 2.5
# (dx, dy, radius) as fractions of the moon radius, then alpha.
MOON_CRATERS = (
    (-0.3, -0.3, 0.2, 0.3),
    (0.4, 0.0, 0.15, 0.2),
    (0.0, 0.35, 0.25, 0.25),
)


class SunRenderer:
    def __init__(self, density: float = 1.0) -> None:
        self.density = density

    def draw(self, canvas: Canvas, celestial: CelestialState) -> None:
        size = SUN_SIZE_DP * self.density
        center_x = SUN_OFFSET_X_DP * self.density + size / 2.0
        center_y = celestial.sun_y + size / 2.0

        core_radius = size * SUN_CORE_RATIO
        canvas.fill_circle((center_x, center_y), core_radius, SUN_COLOR)

        ray_width = size * SUN_RAY_WIDTH_RATIO
        ray_height = size * SUN_RAY_HEIGHT_RATIO
        ray_offset = core_radius + ray_height / 2.0
        for index in range(SUN_RAY_COUNT):
            with canvas.saved():
                canvas.translate(center_x, center_y)
                canvas.rotate(celestial.sun_angle + index * 360.0 / SUN_RAY_COUNT)
                canvas.translate(-ray_width / 2.0, -ray_offset)
                canvas.fill_round_rect(
                    0.0,
                    0.0,
                    ray_width,
                    ray_height,
                    size * SUN_RAY_CORNER_RATIO,
                    SUN_COLOR,
                )


class MoonRenderer:
    """Full moon with craters and glow, revealed by a sliding cover disc.

    The cover is painted in the sky colour behind it so the reveal reads as a
    waxing phase against any background.
    """

    def __init__(self, density: float = 1.0) -> None:
        self.density = density

    def draw(
        self,
        canvas: Canvas,
        celestial: CelestialState,
        sky_color: tuple[int, int, int],
    ) -> None:
        size = MOON_SIZE_DP * self.density
        radius = size / 2.0
        center_x = MOON_OFFSET_X_DP * self.density + radius
        center_y = celestial.moon_y + radius

        canvas.fill_circle((center_x, center_y), radius, MOON_COLOR)
        for dx, dy, crater_radius, alpha in MOON_CRATERS:
            canvas.fill_circle(
                (center_x + radius * dx, center_y + radius * dy),
                radius * crater_radius,
                DARK_GRAY,
                alpha,
            )
        canvas.fill_circle(
            (center_x, center_y), radius * MOON_GLOW_RATIO, MOON_COLOR, MOON_GLOW_ALPHA
        )

        if celestial.moon_cover_visible:
            cover_x = center_x + radius * MOON_COVER_TRAVEL * celestial.moon_phase.value
            canvas.fill_circle((cover_x, center_y), radius, sky_color)
