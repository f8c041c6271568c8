from __future__ import annotations

import numpy as np

CURVE_SEGMENTS = 12


class Path:
    """Minimal vector path: straight segments and cubic Béziers.

    Curves are flattened into line segments as they are added, so a path is
    just a list of closed or open polylines ready for the canvas.
    """

    def __init__(self) -> None:
        self._contours: list[list[tuple[float, float]]] = []
        self._current: list[tuple[float, float]] | None = None

    def move_to(self, x: float, y: float) -> Path:
        self._current = [(float(x), float(y))]
        self._contours.append(self._current)
        return self

    def line_to(self, x: float, y: float) -> Path:
        if self._current is None:
            return self.move_to(x, y)
        self._current.append((float(x), float(y)))
        return self

    def cubic_to(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        x3: float,
        y3: float,
    ) -> Path:
        if self._current is None:
            self.move_to(x1, y1)
        assert self._current is not None
        x0, y0 = self._current[-1]
        t = np.linspace(0.0, 1.0, CURVE_SEGMENTS + 1)[1:]
        inv = 1.0 - t
        xs = inv**3 * x0 + 3 * inv**2 * t * x1 + 3 * inv * t**2 * x2 + t**3 * x3
        ys = inv**3 * y0 + 3 * inv**2 * t * y1 + 3 * inv * t**2 * y2 + t**3 * y3
        self._current.extend(zip(xs.tolist(), ys.tolist()))
        return self

    def close(self) -> Path:
        if self._current is not None and len(self._current) > 1:
            if self._current[0] != self._current[-1]:
                self._current.append(self._current[0])
        self._current = None
        return self

    @classmethod
    def polygon(cls, points: list[tuple[float, float]]) -> Path:
        path = cls()
        for index, (x, y) in enumerate(points):
            if index == 0:
                path.move_to(x, y)
            else:
                path.line_to(x, y)
        return path.close()

    def contours(self) -> list[np.ndarray]:
        return [np.asarray(contour, dtype=float) for contour in self._contours if contour]

    def is_empty(self) -> bool:
        return not any(len(contour) >= 3 for contour in self._contours)

    def bounds(self) -> tuple[float, float, float, float] | None:
        """``(min_x, min_y, max_x, max_y)`` over every point, or ``None``."""

        points = [point for contour in self._contours for point in contour]
        if not points:
            return None
        array = np.asarray(points, dtype=float)
        min_x, min_y = array.min(axis=0)
        max_x, max_y = array.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)
