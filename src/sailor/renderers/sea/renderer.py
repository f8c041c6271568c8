from contextlib import contextmanager
from typing import Iterator

from sailor.display.canvas import Canvas
from sailor.display.color import WHITE, Color
from sailor.display.path import Path
from sailor.renderers.sea.state import (SEA_SCALE, SHIP_FOLD, SHIP_HULL,
                                        SHIP_PIVOT_OFFSET_DP, SHIP_SAIL,
                                        SHIP_SCALE, SeaState)

BACK_WAVE_COLOR = Color.from_hex("#4FC3F7")
FRONT_WAVE_COLOR = Color.from_hex("#039BE5")
SAIL_COLOR = Color.from_hex("#1565C0")
FOLD_COLOR = Color.from_hex("#90CAF9")


class SeaRenderer:
    """Back wave, ship and front wave, drawn in that order by the scene.

    All three share the sea canvas transform: anchored at sea level, rotated
    against the smoothed tilt and scaled about the canvas centre.
    """

    def __init__(self, density: float = 1.0) -> None:
        self.density = density

    @contextmanager
    def _sea_transform(self, canvas: Canvas, sea: SeaState) -> Iterator[Canvas]:
        with canvas.saved():
            canvas.translate(0.0, sea.sea_level)
            pivot = sea.geometry.pivot
            canvas.rotate(-sea.rotation, pivot=pivot)
            canvas.scale(SEA_SCALE, pivot=pivot)
            yield canvas

    def draw_back_wave(self, canvas: Canvas, sea: SeaState) -> None:
        if sea.geometry.is_empty():
            return
        with self._sea_transform(canvas, sea):
            canvas.fill_polygon(sea.geometry.back.tolist(), BACK_WAVE_COLOR)

    def draw_front_wave(self, canvas: Canvas, sea: SeaState) -> None:
        if sea.geometry.is_empty():
            return
        with self._sea_transform(canvas, sea):
            canvas.fill_polygon(sea.geometry.front.tolist(), FRONT_WAVE_COLOR)

    def draw_ship(self, canvas: Canvas, sea: SeaState) -> None:
        if sea.geometry.is_empty():
            return
        ship = sea.geometry.ship
        with self._sea_transform(canvas, sea):
            canvas.translate(ship.x, ship.y - SHIP_PIVOT_OFFSET_DP * self.density)
            canvas.rotate(ship.tilt_degrees)
            canvas.scale(SHIP_SCALE * self.density)
            canvas.fill_path(Path.polygon(list(SHIP_HULL)), WHITE)
            canvas.fill_path(Path.polygon(list(SHIP_SAIL)), SAIL_COLOR)
            canvas.fill_path(Path.polygon(list(SHIP_FOLD)), FOLD_COLOR)
