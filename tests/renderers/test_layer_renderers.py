"""Pixel checks for individual layer renderers."""

from __future__ import annotations

import pygame
import pytest

from sailor.display.canvas import Canvas
from sailor.display.color import BLACK, WHITE
from sailor.renderers.celestial.renderer import (MOON_COLOR, SUN_COLOR,
                                                 MoonRenderer, SunRenderer)
from sailor.renderers.celestial.state import CelestialState
from sailor.renderers.clouds.renderer import CloudRenderer, cloud_glyph
from sailor.renderers.clouds.state import Cloud, CloudField
from sailor.renderers.menu.renderer import MenuRenderer
from sailor.renderers.menu.state import MenuController
from sailor.renderers.rain.renderer import RainRenderer
from sailor.renderers.rain.state import RainDrop, RainField
from sailor.renderers.sky.state import SkyState


def _pixel(canvas: Canvas, x: int, y: int) -> tuple[int, int, int]:
    return tuple(canvas.surface.get_at((x, y)))[:3]


@pytest.fixture()
def canvas() -> Canvas:
    surface = pygame.Surface((400, 400))
    surface.fill(BLACK.tuple())
    return Canvas(surface)


class TestCloudRenderer:
    def test_glyph_spans_icon_grid(self) -> None:
        assert cloud_glyph(2.0).bounds() == pytest.approx((0.0, 8.0, 48.0, 40.0), abs=0.5)

    def test_opaque_cloud_is_drawn_at_its_position(self, canvas: Canvas) -> None:
        field = CloudField(clouds=[Cloud(x=10, y=10, size=48, speed=0, alpha=1.0, color=WHITE)])
        CloudRenderer().draw(canvas, field)

        assert _pixel(canvas, 10 + 24, 10 + 28) == (255, 255, 255)
        assert _pixel(canvas, 5, 5) == (0, 0, 0)

    def test_rain_band_is_flipped(self, canvas: Canvas) -> None:
        """Rain bands hang upside down, so the flat base faces the sky."""
        band = Cloud(x=0, y=0, size=240, speed=0, alpha=1.0, color=WHITE, is_rain_cloud=True)
        CloudRenderer().draw(canvas, CloudField(clouds=[band]))

        assert _pixel(canvas, 120, 10)[0] > 200
        assert _pixel(canvas, 120, 170) == (0, 0, 0)


class TestCelestialRenderers:
    def test_sun_core_is_drawn(self, canvas: Canvas) -> None:
        celestial = CelestialState.for_sky(SkyState.DAY)
        SunRenderer().draw(canvas, celestial)

        assert _pixel(canvas, 16 + 75, 80 + 75) == SUN_COLOR.tuple()

    def test_moon_cover_hides_moon_at_rise(self, canvas: Canvas) -> None:
        celestial = CelestialState.for_sky(SkyState.NIGHT)
        celestial.update(dt_ms=16, sky=SkyState.NIGHT, show_rain=False, sea_level=400)
        MoonRenderer().draw(canvas, celestial, (0, 0, 0))

        assert _pixel(canvas, 40 + 60, 80 + 60) == (0, 0, 0)

    def test_moon_fully_revealed(self, canvas: Canvas) -> None:
        celestial = CelestialState.for_sky(SkyState.NIGHT)
        for _ in range(10):
            celestial.update(dt_ms=1000, sky=SkyState.NIGHT, show_rain=False, sea_level=400)
        MoonRenderer().draw(canvas, celestial, (0, 0, 0))

        assert _pixel(canvas, 40 + 60 + 30, 80 + 60 - 40) == MOON_COLOR.tuple()


class TestMenuRenderer:
    def test_open_card_tints_background(self, canvas: Canvas) -> None:
        menu = MenuController()
        menu.open()
        for _ in range(60):
            menu.update(16)
        MenuRenderer().draw(canvas, menu, 400)

        card = menu.layout(400, 1.0).card
        r, g, b = _pixel(canvas, int(card.left) + 4, int(card.bottom) - 20)
        assert 0 < r < 60 and r == g == b

    def test_closed_menu_draws_orbiting_icons(self, canvas: Canvas) -> None:
        menu = MenuController()
        MenuRenderer().draw(canvas, menu, 400)

        drawn = {
            _pixel(canvas, x, y)
            for x in range(300, 360)
            for y in range(70, 140)
        }
        assert (255, 255, 255) in drawn


class TestRainRenderer:
    def test_drop_is_a_vertical_streak(self, canvas: Canvas) -> None:
        field = RainField(drops=[RainDrop(x=50, y=50, length=20, speed=0, alpha=1.0)])
        RainRenderer().draw(canvas, field)

        assert _pixel(canvas, 50, 60) == (255, 255, 255)
        assert _pixel(canvas, 60, 60) == (0, 0, 0)
