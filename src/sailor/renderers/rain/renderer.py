from sailor.display.canvas import Canvas
from sailor.display.color import WHITE
from sailor.renderers.rain.state import RainField

STROKE_WIDTH_PX = 2.0


class RainRenderer:
    def draw(self, canvas: Canvas, field: RainField) -> None:
        for drop in field.drops:
            canvas.stroke_line(
                (drop.x, drop.y),
                (drop.x, drop.y + drop.length),
                STROKE_WIDTH_PX,
                WHITE,
                drop.alpha,
            )
