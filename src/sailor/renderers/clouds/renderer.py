from sailor.display.canvas import Canvas
from sailor.display.path import Path
from sailor.renderers.clouds.state import GLYPH_GRID, CloudField

RAIN_CLOUD_ALPHA = 0.95
RAIN_CLOUD_ROTATION = 180.0


def cloud_glyph(scale: float) -> Path:
    """The cloud icon outline on a 24-unit grid, scaled by ``scale``."""

    def s(*values: float) -> list[float]:
        return [value * scale for value in values]

    return (
        Path()
        .move_to(*s(19.35, 10.04))
        .cubic_to(*s(18.67, 6.59, 15.64, 4.0, 12.0, 4.0))
        .cubic_to(*s(9.11, 4.0, 6.6, 5.64, 5.35, 8.04))
        .cubic_to(*s(2.34, 8.36, 0.0, 10.91, 0.0, 14.0))
        .cubic_to(*s(0.0, 17.31, 2.69, 20.0, 6.0, 20.0))
        .line_to(*s(18.0, 20.0))
        .cubic_to(*s(21.31, 20.0, 24.0, 17.31, 24.0, 14.0))
        .cubic_to(*s(24.0, 11.03, 22.05, 8.53, 19.35, 10.04))
        .close()
    )


class CloudRenderer:
    def __init__(self, density: float = 1.0) -> None:
        self.density = density

    def draw(self, canvas: Canvas, field: CloudField) -> None:
        for cloud in field.clouds:
            size_px = cloud.pixel_size(self.density)
            if size_px <= 0:
                continue
            glyph = cloud_glyph(size_px / GLYPH_GRID)
            with canvas.saved():
                canvas.translate(cloud.x, cloud.y)
                if cloud.is_rain_cloud:
                    canvas.rotate(RAIN_CLOUD_ROTATION, pivot=(size_px / 2.0, size_px / 2.5))
                    canvas.fill_path(glyph, cloud.color, RAIN_CLOUD_ALPHA)
                else:
                    canvas.fill_path(glyph, cloud.color, cloud.alpha)
