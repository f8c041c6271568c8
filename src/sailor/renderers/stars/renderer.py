from sailor.display.canvas import Canvas
from sailor.display.color import WHITE
from sailor.renderers.stars.state import StarField


class StarRenderer:
    def draw(self, canvas: Canvas, field: StarField, time_s: float) -> None:
        for star in field.stars:
            canvas.fill_circle((star.x, star.y), star.radius, WHITE, star.alpha(time_s))
