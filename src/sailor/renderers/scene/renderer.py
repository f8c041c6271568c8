from __future__ import annotations

from typing import Callable

from pygame import Surface
from pygame.time import Clock

from sailor.display.canvas import Canvas
from sailor.renderers import StatefulBaseRenderer
from sailor.renderers.celestial.renderer import MoonRenderer, SunRenderer
from sailor.renderers.clouds.renderer import CloudRenderer
from sailor.renderers.menu.renderer import MenuRenderer
from sailor.renderers.rain.renderer import RainRenderer
from sailor.renderers.scene.composer import SceneComposer
from sailor.renderers.scene.provider import SceneStateProvider
from sailor.renderers.scene.state import Layer, SceneState
from sailor.renderers.sea.renderer import SeaRenderer
from sailor.renderers.sky.renderer import SkyRenderer
from sailor.renderers.stars.renderer import StarRenderer

LayerDraw = Callable[[Canvas, SceneState], None]


class SailorSceneRenderer(StatefulBaseRenderer[SceneState]):
    """Draw the composed scene, one layer at a time from back to front."""

    def __init__(
        self,
        builder: SceneStateProvider,
        density: float = 1.0,
        composer: SceneComposer | None = None,
    ) -> None:
        super().__init__(builder=builder)
        self.composer = composer or builder.composer
        self.density = density
        self.sky = SkyRenderer()
        self.sea = SeaRenderer(density)
        self.sun = SunRenderer(density)
        self.moon = MoonRenderer(density)
        self.stars = StarRenderer()
        self.clouds = CloudRenderer(density)
        self.rain = RainRenderer()
        self.menu = MenuRenderer(density)
        self._layers: dict[Layer, LayerDraw] = {
            Layer.SKY: lambda canvas, state: self.sky.draw(canvas, state.sky),
            Layer.SEA_BACK: lambda canvas, state: self.sea.draw_back_wave(canvas, state.sea),
            Layer.SHIP: lambda canvas, state: self.sea.draw_ship(canvas, state.sea),
            Layer.SEA_FRONT: lambda canvas, state: self.sea.draw_front_wave(canvas, state.sea),
            Layer.SUN: self._draw_sun,
            Layer.MOON: self._draw_moon,
            Layer.STARS: self._draw_stars,
            Layer.CLOUDS: lambda canvas, state: self.clouds.draw(canvas, state.clouds),
            Layer.RAIN: lambda canvas, state: self.rain.draw(canvas, state.rain),
            Layer.MENU: lambda canvas, state: self.menu.draw(canvas, state.menu, state.width),
        }

    def _draw_sun(self, canvas: Canvas, state: SceneState) -> None:
        with canvas.clipped(0, 0, state.width, state.sea_level):
            self.sun.draw(canvas, state.celestial)

    def _draw_moon(self, canvas: Canvas, state: SceneState) -> None:
        with canvas.clipped(0, 0, state.width, state.sea_level):
            self.moon.draw(canvas, state.celestial, state.sky.color)

    def _draw_stars(self, canvas: Canvas, state: SceneState) -> None:
        with canvas.clipped(0, 0, state.width, state.sea_level):
            self.stars.draw(canvas, state.stars, state.time_s)

    def real_process(self, window: Surface, clock: Clock) -> None:
        width, height = window.get_size()
        if width == 0 or height == 0:
            return
        canvas = Canvas(window)
        for layer in self.composer.visible_layers(self.state):
            self._layers[layer](canvas, self.state)
