import math

from sailor.display.canvas import Canvas
from sailor.display.color import WHITE
from sailor.display.path import Path
from sailor.renderers.clouds.renderer import cloud_glyph
from sailor.renderers.menu.state import (CARD_CORNER_DP, ICON_SIZE_DP,
                                         MENU_BUTTONS, MenuAction,
                                         MenuController)

CARD_ALPHA = 0.1
ICON_GRID = 24.0


def _crescent(scale: float) -> Path:
    outer_c, outer_r = (12.0, 12.0), 9.0
    inner_c, inner_r = (15.5, 10.5), 7.5
    path = Path()
    for step in range(25):
        angle = math.radians(40.0 + 280.0 * step / 24)
        x = outer_c[0] + outer_r * math.cos(angle)
        y = outer_c[1] - outer_r * math.sin(angle)
        path.line_to(x * scale, y * scale)
    for step in range(25):
        angle = math.radians(300.0 - 240.0 * step / 24)
        x = inner_c[0] + inner_r * math.cos(angle)
        y = inner_c[1] - inner_r * math.sin(angle)
        path.line_to(x * scale, y * scale)
    return path.close()


class MenuRenderer:
    def __init__(self, density: float = 1.0) -> None:
        self.density = density

    def draw(self, canvas: Canvas, menu: MenuController, width: float) -> None:
        if menu.is_open:
            self._draw_card(canvas, menu, width)
            return
        for action, center in zip(MENU_BUTTONS, menu.orbit_positions(width, self.density)):
            self._draw_icon(canvas, action, center, 1.0)

    def _draw_card(self, canvas: Canvas, menu: MenuController, width: float) -> None:
        alpha = menu.card_alpha.value
        layout = menu.layout(width, self.density)
        card = layout.card
        canvas.fill_round_rect(
            card.left,
            card.top,
            card.width,
            card.height,
            CARD_CORNER_DP * self.density,
            WHITE,
            CARD_ALPHA * alpha,
        )
        for action, button in zip(MENU_BUTTONS, layout.buttons):
            self._draw_icon(canvas, action, button.center, alpha)

    def _draw_icon(
        self,
        canvas: Canvas,
        action: MenuAction,
        center: tuple[float, float],
        alpha: float,
    ) -> None:
        size = ICON_SIZE_DP * self.density
        scale = size / ICON_GRID
        with canvas.saved():
            canvas.translate(center[0] - size / 2.0, center[1] - size / 2.0)
            match action:
                case MenuAction.TOGGLE_CLOUDS:
                    canvas.fill_path(cloud_glyph(scale), WHITE, alpha)
                case MenuAction.GO_TO_DAY_SIDE:
                    self._draw_sun_icon(canvas, scale, alpha)
                case MenuAction.TOGGLE_RAIN:
                    self._draw_grain_icon(canvas, scale, alpha)
                case MenuAction.BRIGHTNESS_CYCLE:
                    canvas.fill_path(_crescent(scale), WHITE, alpha)

    @staticmethod
    def _draw_sun_icon(canvas: Canvas, scale: float, alpha: float) -> None:
        canvas.fill_circle((12.0 * scale, 12.0 * scale), 5.0 * scale, WHITE, alpha)
        for index in range(8):
            angle = math.radians(index * 45.0)
            start = (12.0 + 7.5 * math.cos(angle), 12.0 + 7.5 * math.sin(angle))
            end = (12.0 + 10.5 * math.cos(angle), 12.0 + 10.5 * math.sin(angle))
            canvas.stroke_line(
                (start[0] * scale, start[1] * scale),
                (end[0] * scale, end[1] * scale),
                1.6 * scale,
                WHITE,
                alpha,
            )

    @staticmethod
    def _draw_grain_icon(canvas: Canvas, scale: float, alpha: float) -> None:
        for x, y in ((6.0, 18.0), (10.0, 14.0), (14.0, 10.0), (18.0, 6.0),
                     (6.0, 10.0), (10.0, 6.0), (14.0, 18.0), (18.0, 14.0)):
            canvas.fill_circle((x * scale, y * scale), 2.0 * scale, WHITE, alpha)
