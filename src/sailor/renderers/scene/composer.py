from __future__ import annotations

from random import Random

from sailor.renderers.celestial.state import moon_visible, sun_visible
from sailor.renderers.menu.state import MenuController
from sailor.renderers.scene.state import (Layer, Point, SceneFrameInput,
                                          SceneState)
from sailor.renderers.sea.state import target_body_fraction
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)


class SceneComposer:
    """Advance every layer in dependency order and decide what is drawn.

    One pass per frame: taps, then the tilt spring and sea geometry, then
    everything that reads the sea level (sky bodies, particles, stars).
    """

    def step(self, state: SceneState, frame: SceneFrameInput, rng: Random) -> SceneState:
        for tap in frame.taps:
            self.route_tap(state, tap)

        dt_ms = max(frame.dt_ms, 0.0)
        dt_s = dt_ms / 1000.0
        state.width = frame.width
        state.height = frame.height
        state.time_ms += dt_ms
        density = state.density

        state.sea.update(
            dt_ms=dt_ms,
            width=frame.width,
            height=frame.height,
            tilt_degrees=frame.tilt_degrees,
            target_fraction=target_body_fraction(
                has_appeared=state.has_appeared,
                is_expanded=state.is_sea_expanded,
            ),
            density=density,
        )
        sea_level = state.sea_level

        sky = state.sky.update(dt_ms)
        state.celestial.update(
            dt_ms=dt_ms, sky=sky, show_rain=state.show_rain, sea_level=sea_level
        )

        state.clouds.update(
            dt_s=dt_s,
            show_clouds=state.show_clouds,
            show_rain=state.show_rain,
            width=frame.width,
            sea_level=sea_level,
            density=density,
            rng=rng,
        )
        if state.show_rain:
            state.rain.update(
                dt_s=dt_s,
                width=frame.width,
                sea_level=sea_level,
                density=density,
                rng=rng,
            )
        else:
            state.rain.clear()
        if moon_visible(sky):
            state.stars.ensure(
                width=frame.width,
                height=frame.height,
                sea_level=sea_level,
                density=density,
                rng=rng,
            )

        state.menu.update(dt_ms)
        state.has_appeared = True
        state.frame_count += 1
        return state

    def route_tap(self, state: SceneState, point: Point) -> None:
        """Send a tap to the top-most layer that accepts it."""

        hit = state.menu.handle_tap(point, state.width, state.density)
        if hit.consumed:
            if hit.action is not None:
                before = state.toggles
                state.toggles = MenuController.apply(hit.action, state.sky, state.toggles)
                if state.toggles != before:
                    logger.info(
                        "Effects now clouds=%s rain=%s",
                        state.show_clouds,
                        state.show_rain,
                    )
            return

        if state.sea.contains(point, state.width):
            state.is_sea_expanded = not state.is_sea_expanded
            logger.info("Sea %s", "expanded" if state.is_sea_expanded else "collapsed")

    def visible_layers(self, state: SceneState) -> list[Layer]:
        layers = [Layer.SKY]
        if state.total_sea_height > 0:
            layers.extend([Layer.SEA_BACK, Layer.SHIP, Layer.SEA_FRONT])
        if sun_visible(state.sky_state, state.show_rain):
            layers.append(Layer.SUN)
        if moon_visible(state.sky_state):
            layers.extend([Layer.MOON, Layer.STARS])
        if state.show_clouds or state.show_rain:
            layers.append(Layer.CLOUDS)
        if state.show_rain:
            layers.append(Layer.RAIN)
        layers.append(Layer.MENU)
        return layers
