"""Draw context used by every scene layer.

Wraps a ``pygame.Surface`` with an affine transform stack (kept as numpy
3x3 matrices), a rectangular clip and per-call alpha. Shapes are transformed
into screen space before pygame rasterises them, so rotated and scaled
geometry stays crisp.
"""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Callable, Iterator, Sequence

import numpy as np
import pygame

from sailor.animation.easing import clamp
from sailor.display.color import Color
from sailor.display.path import Path

RGB = tuple[int, int, int]
ColorLike = Color | RGB
Point = tuple[float, float]

ARC_SEGMENTS = 6

DrawFn = Callable[[pygame.Surface, tuple[int, ...], tuple[float, float]], None]


def _rgb(color: ColorLike) -> RGB:
    if isinstance(color, Color):
        return color.tuple()
    return (int(color[0]), int(color[1]), int(color[2]))


def _translation(dx: float, dy: float) -> np.ndarray:
    return np.array([[1.0, 0.0, dx], [0.0, 1.0, dy], [0.0, 0.0, 1.0]])


def _rotation(degrees: float) -> np.ndarray:
    radians = math.radians(degrees)
    cos, sin = math.cos(radians), math.sin(radians)
    return np.array([[cos, -sin, 0.0], [sin, cos, 0.0], [0.0, 0.0, 1.0]])


def _scaling(sx: float, sy: float) -> np.ndarray:
    return np.array([[sx, 0.0, 0.0], [0.0, sy, 0.0], [0.0, 0.0, 1.0]])


class Canvas:
    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self._matrix = np.identity(3)
        self._saved: list[np.ndarray] = []

    @property
    def size(self) -> tuple[int, int]:
        return self.surface.get_size()

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix.copy()

    @contextmanager
    def saved(self) -> Iterator[Canvas]:
        self._saved.append(self._matrix.copy())
        try:
            yield self
        finally:
            self._matrix = self._saved.pop()

    def translate(self, dx: float, dy: float) -> None:
        self._matrix = self._matrix @ _translation(dx, dy)

    def rotate(self, degrees: float, pivot: Point = (0.0, 0.0)) -> None:
        """Rotate clockwise on screen (y grows downward) about ``pivot``."""

        px, py = pivot
        self._matrix = self._matrix @ _translation(px, py) @ _rotation(degrees) @ _translation(-px, -py)

    def scale(self, sx: float, sy: float | None = None, pivot: Point = (0.0, 0.0)) -> None:
        px, py = pivot
        self._matrix = (
            self._matrix
            @ _translation(px, py)
            @ _scaling(sx, sx if sy is None else sy)
            @ _translation(-px, -py)
        )

    @contextmanager
    def clipped(self, left: float, top: float, right: float, bottom: float) -> Iterator[Canvas]:
        """Restrict drawing to a screen-space rectangle, nested inside any active clip."""

        previous = self.surface.get_clip()
        rect = pygame.Rect(
            math.floor(left),
            math.floor(top),
            max(0, math.ceil(right) - math.floor(left)),
            max(0, math.ceil(bottom) - math.floor(top)),
        )
        self.surface.set_clip(rect.clip(previous))
        try:
            yield self
        finally:
            self.surface.set_clip(previous)

    def map_points(self, points: np.ndarray | Sequence[Point]) -> np.ndarray:
        array = np.asarray(points, dtype=float).reshape(-1, 2)
        homogeneous = np.column_stack([array, np.ones(len(array))])
        return (homogeneous @ self._matrix.T)[:, :2]

    def _scale_factor(self) -> float:
        return math.sqrt(abs(np.linalg.det(self._matrix[:2, :2])))

    def fill(self, color: ColorLike) -> None:
        self.surface.fill(_rgb(color))

    def fill_path(self, path: Path, color: ColorLike, alpha: float = 1.0) -> None:
        contours = [self.map_points(contour) for contour in path.contours() if len(contour) >= 3]
        if not contours:
            return

        def draw(target: pygame.Surface, rgba: tuple[int, ...], offset: tuple[float, float]) -> None:
            for contour in contours:
                pygame.draw.polygon(target, rgba, (contour + offset).tolist())

        self._composite(np.concatenate(contours), alpha, color, draw)

    def fill_polygon(self, points: Sequence[Point], color: ColorLike, alpha: float = 1.0) -> None:
        self.fill_path(Path.polygon(list(points)), color, alpha)

    def fill_circle(
        self,
        center: Point,
        radius: float,
        color: ColorLike,
        alpha: float = 1.0,
    ) -> None:
        screen_radius = radius * self._scale_factor()
        if screen_radius <= 0:
            return
        (cx, cy), = self.map_points([center])
        bounds = np.array(
            [[cx - screen_radius, cy - screen_radius], [cx + screen_radius, cy + screen_radius]]
        )

        def draw(target: pygame.Surface, rgba: tuple[int, ...], offset: tuple[float, float]) -> None:
            pygame.draw.circle(target, rgba, (cx + offset[0], cy + offset[1]), screen_radius)

        self._composite(bounds, alpha, color, draw)

    def fill_round_rect(
        self,
        left: float,
        top: float,
        width: float,
        height: float,
        corner: float,
        color: ColorLike,
        alpha: float = 1.0,
    ) -> None:
        if width <= 0 or height <= 0:
            return
        corner = clamp(corner, 0.0, min(width, height) / 2.0)
        right, bottom = left + width, top + height
        centres = (
            (right - corner, top + corner, -90.0),
            (right - corner, bottom - corner, 0.0),
            (left + corner, bottom - corner, 90.0),
            (left + corner, top + corner, 180.0),
        )
        points: list[Point] = []
        for cx, cy, start in centres:
            for step in range(ARC_SEGMENTS + 1):
                angle = math.radians(start + 90.0 * step / ARC_SEGMENTS)
                points.append((cx + corner * math.cos(angle), cy + corner * math.sin(angle)))
        self.fill_polygon(points, color, alpha)

    def stroke_line(
        self,
        start: Point,
        end: Point,
        width: float,
        color: ColorLike,
        alpha: float = 1.0,
    ) -> None:
        """Stroke a segment with round caps."""

        (x0, y0), (x1, y1) = self.map_points([start, end])
        half = width * self._scale_factor() / 2.0
        if half <= 0:
            return
        length = math.hypot(x1 - x0, y1 - y0)
        if length > 0:
            nx, ny = -(y1 - y0) / length * half, (x1 - x0) / length * half
        else:
            nx, ny = 0.0, 0.0
        quad = np.array(
            [[x0 + nx, y0 + ny], [x1 + nx, y1 + ny], [x1 - nx, y1 - ny], [x0 - nx, y0 - ny]]
        )
        ends = np.array([[x0, y0], [x1, y1]])
        bounds = np.vstack([quad, ends - half, ends + half])

        def draw(target: pygame.Surface, rgba: tuple[int, ...], offset: tuple[float, float]) -> None:
            if length > 0:
                pygame.draw.polygon(target, rgba, (quad + offset).tolist())
            pygame.draw.circle(target, rgba, (x0 + offset[0], y0 + offset[1]), half)
            pygame.draw.circle(target, rgba, (x1 + offset[0], y1 + offset[1]), half)

        self._composite(bounds, alpha, color, draw)

    def _composite(
        self,
        points: np.ndarray,
        alpha: float,
        color: ColorLike,
        draw: DrawFn,
    ) -> None:
        alpha = clamp(alpha, 0.0, 1.0)
        if alpha <= 0.0:
            return
        rgb = _rgb(color)
        if alpha >= 1.0:
            draw(self.surface, rgb, (0.0, 0.0))
            return

        min_x, min_y = np.floor(points.min(axis=0))
        max_x, max_y = np.ceil(points.max(axis=0))
        area = pygame.Rect(
            int(min_x) - 1,
            int(min_y) - 1,
            int(max_x - min_x) + 3,
            int(max_y - min_y) + 3,
        ).clip(self.surface.get_clip())
        if area.width <= 0 or area.height <= 0:
            return

        layer = pygame.Surface(area.size, pygame.SRCALPHA)
        draw(layer, (*rgb, int(round(alpha * 255))), (float(-area.x), float(-area.y)))
        self.surface.blit(layer, area.topleft)
