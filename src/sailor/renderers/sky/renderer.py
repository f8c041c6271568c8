from sailor.display.canvas import Canvas
from sailor.renderers.sky.state import SkyStateMachine


class SkyRenderer:
    """Fill the whole screen with the current tweened sky colour."""

    def draw(self, canvas: Canvas, sky: SkyStateMachine) -> None:
        canvas.fill(sky.color)
