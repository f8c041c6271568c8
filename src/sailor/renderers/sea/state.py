"""Sea surface geometry and the ship riding it.

The sea is drawn on its own canvas anchored to the bottom of the screen,
``total_height`` pixels tall. Inside that canvas the wave mean line sits one
amplitude below the top so crests have room. Sea level is the screen ``y`` of
the canvas top.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import numpy as np

from sailor.animation import (InfiniteTransition, SpringDamper, Tween, clamp,
                              fast_out_slow_in)

BASE_AMPLITUDE_DP = 15.0
WAVE_PERIOD_MS = 2000.0
SAMPLE_STEP_PX = 10.0
DRAW_RANGE_FACTOR = 4.0
CLOSING_DEPTH_PX = 4000.0
SEA_SCALE = 1.2

BACK_WAVE_FREQUENCY = 4.0 * math.pi
BACK_WAVE_PHASE_SHIFT = 1.0
BACK_WAVE_AMPLITUDE_RATIO = 0.7
FRONT_WAVE_FREQUENCY = 2.5 * math.pi

EXPANSION_DURATION_MS = 1200.0
EXPANDED_FRACTION = 0.3
COLLAPSED_FRACTION = 0.1

TILT_SHRINK_START_DEGREES = 60.0
TILT_SHRINK_SPAN_DEGREES = 30.0
MAX_TILT_HEIGHT_REDUCTION = 0.25

SHIP_PIVOT_OFFSET_DP = 15.0
SHIP_SCALE = 4.5
SHIP_SLOPE_DELTA_PX = 5.0

SHIP_HULL = ((-40.0, -10.0), (40.0, -10.0), (20.0, 15.0), (-20.0, 15.0))
SHIP_SAIL = ((0.0, -10.0), (0.0, -55.0), (30.0, -10.0))
SHIP_FOLD = ((0.0, -10.0), (0.0, -40.0), (-20.0, -10.0))
# Sail height, in sprite units, that clouds keep clear of.
SHIP_CLEARANCE_HEIGHT = 32.0

# Closure points around the sampled crest in each outline.
_HEAD_POINTS = 2
_TAIL_POINTS = 3


def amplitude_factor(rotation_degrees: float) -> float:
    return clamp(0.3 + 0.7 * abs(math.cos(math.radians(rotation_degrees))), 0.0, 1.0)


def tilt_height_progress(rotation_degrees: float) -> float:
    rotation_abs = abs(rotation_degrees)
    if rotation_abs <= TILT_SHRINK_START_DEGREES:
        return 0.0
    return clamp(
        (rotation_abs - TILT_SHRINK_START_DEGREES) / TILT_SHRINK_SPAN_DEGREES, 0.0, 1.0
    )


@dataclass(frozen=True, slots=True)
class SeaMetrics:
    body_height: float
    amplitude: float
    total_height: float
    sea_level: float
    height_offset: float = 0.0

    @classmethod
    def empty(cls, screen_height: float = 0.0) -> SeaMetrics:
        return cls(
            body_height=0.0,
            amplitude=0.0,
            total_height=0.0,
            sea_level=max(screen_height, 0.0),
        )


def sea_metrics(
    width: float,
    height: float,
    body_fraction: float,
    rotation_degrees: float,
    density: float = 1.0,
) -> SeaMetrics:
    if width <= 0 or height <= 0:
        return SeaMetrics.empty(height)

    height_offset = height * MAX_TILT_HEIGHT_REDUCTION * tilt_height_progress(rotation_degrees)
    body_height = height * clamp(body_fraction, 0.0, 1.0) - height_offset
    amplitude = BASE_AMPLITUDE_DP * density * amplitude_factor(rotation_degrees)
    total_height = body_height + amplitude if body_height > 0 else 0.0
    return SeaMetrics(
        body_height=max(body_height, 0.0),
        amplitude=amplitude,
        total_height=total_height,
        sea_level=height - total_height,
        height_offset=height_offset,
    )


def back_wave_y(
    x: np.ndarray | float, width: float, phase: float, mid_line_y: float, amplitude: float
) -> np.ndarray | float:
    return mid_line_y + amplitude * BACK_WAVE_AMPLITUDE_RATIO * np.sin(
        (x / width) * BACK_WAVE_FREQUENCY + phase + BACK_WAVE_PHASE_SHIFT
    )


def front_wave_y(
    x: np.ndarray | float, width: float, phase: float, mid_line_y: float, amplitude: float
) -> np.ndarray | float:
    return mid_line_y + amplitude * np.sin((x / width) * FRONT_WAVE_FREQUENCY + phase)


def sample_xs(width: float, height: float) -> np.ndarray:
    draw_range = max(width, height) * DRAW_RANGE_FACTOR
    start_x = (width - draw_range) / 2.0
    end_x = start_x + draw_range
    return np.arange(start_x, end_x + SAMPLE_STEP_PX / 2.0, SAMPLE_STEP_PX)


@dataclass(frozen=True, slots=True)
class ShipPose:
    x: float
    y: float
    tilt_degrees: float


def ship_pose(width: float, phase: float, mid_line_y: float, amplitude: float) -> ShipPose:
    """Anchor the ship on the front wave at mid-screen, tilted along the local slope."""

    if width <= 0:
        return ShipPose(x=0.0, y=mid_line_y, tilt_degrees=0.0)
    ship_x = width / 2.0
    anchor_y = float(front_wave_y(ship_x, width, phase, mid_line_y, amplitude))
    y_next = float(front_wave_y(ship_x + SHIP_SLOPE_DELTA_PX, width, phase, mid_line_y, amplitude))
    y_prev = float(front_wave_y(ship_x - SHIP_SLOPE_DELTA_PX, width, phase, mid_line_y, amplitude))
    tilt = math.degrees(math.atan2(y_next - y_prev, 2.0 * SHIP_SLOPE_DELTA_PX))
    return ShipPose(x=ship_x, y=anchor_y, tilt_degrees=tilt)


@dataclass(frozen=True)
class WaveGeometry:
    """Closed outlines for both waves in sea-canvas coordinates.

    Each outline starts and ends at ``height + CLOSING_DEPTH_PX`` so the fill
    reaches well past the bottom of the screen once rotated.
    """

    width: float
    height: float
    mid_line_y: float
    amplitude: float
    back: np.ndarray
    front: np.ndarray
    ship: ShipPose

    @classmethod
    def empty(cls) -> WaveGeometry:
        nothing = np.zeros((0, 2))
        return cls(
            width=0.0,
            height=0.0,
            mid_line_y=0.0,
            amplitude=0.0,
            back=nothing,
            front=nothing,
            ship=ShipPose(0.0, 0.0, 0.0),
        )

    def is_empty(self) -> bool:
        return len(self.front) == 0

    @property
    def pivot(self) -> tuple[float, float]:
        return (self.width / 2.0, self.height / 2.0)

    @property
    def front_samples(self) -> np.ndarray:
        return self.front[_HEAD_POINTS:-_TAIL_POINTS]

    @property
    def back_samples(self) -> np.ndarray:
        return self.back[_HEAD_POINTS:-_TAIL_POINTS]


def _outline(xs: np.ndarray, ys: np.ndarray, mid_line_y: float, bottom: float) -> np.ndarray:
    start_x, end_x = float(xs[0]), float(xs[-1])
    head = np.array([[start_x, bottom], [start_x, mid_line_y]])
    tail = np.array([[end_x, mid_line_y], [end_x, bottom], [start_x, bottom]])
    return np.vstack([head, np.column_stack([xs, ys]), tail])


def wave_geometry(width: float, height: float, phase: float, amplitude: float) -> WaveGeometry:
    if width <= 0 or height <= 0:
        return WaveGeometry.empty()

    amplitude = max(amplitude, 0.0)
    mid_line_y = amplitude
    xs = sample_xs(width, height)
    bottom = height + CLOSING_DEPTH_PX
    back = _outline(xs, back_wave_y(xs, width, phase, mid_line_y, amplitude), mid_line_y, bottom)
    front = _outline(xs, front_wave_y(xs, width, phase, mid_line_y, amplitude), mid_line_y, bottom)
    return WaveGeometry(
        width=width,
        height=height,
        mid_line_y=mid_line_y,
        amplitude=amplitude,
        back=back,
        front=front,
        ship=ship_pose(width, phase, mid_line_y, amplitude),
    )


def target_body_fraction(*, has_appeared: bool, is_expanded: bool) -> float:
    if not has_appeared:
        return 0.0
    return EXPANDED_FRACTION if is_expanded else COLLAPSED_FRACTION


def ship_top_y(sea_level: float, density: float) -> float:
    """Screen ``y`` that cloud bottoms must stay above, measured from a level ship at sea level."""

    return sea_level - SHIP_PIVOT_OFFSET_DP * density - SHIP_CLEARANCE_HEIGHT * SHIP_SCALE * density


@dataclass
class SeaState:
    phase_clock: InfiniteTransition = field(
        default_factory=lambda: InfiniteTransition(period_ms=WAVE_PERIOD_MS)
    )
    body_fraction: Tween = field(
        default_factory=lambda: Tween(
            value=0.0, duration_ms=EXPANSION_DURATION_MS, easing=fast_out_slow_in
        )
    )
    tilt: SpringDamper = field(default_factory=SpringDamper)
    metrics: SeaMetrics = field(default_factory=SeaMetrics.empty)
    geometry: WaveGeometry = field(default_factory=WaveGeometry.empty)

    @property
    def phase(self) -> float:
        return self.phase_clock.fraction * 2.0 * math.pi

    @property
    def rotation(self) -> float:
        """Smoothed rotation in degrees; the sea is drawn rotated by its negation."""

        return self.tilt.value

    @property
    def sea_level(self) -> float:
        return self.metrics.sea_level

    def update(
        self,
        *,
        dt_ms: float,
        width: float,
        height: float,
        tilt_degrees: float,
        target_fraction: float,
        density: float = 1.0,
    ) -> None:
        self.phase_clock.advance(dt_ms)
        self.tilt.step(-tilt_degrees, dt_ms / 1000.0)
        self.body_fraction.animate_to(target_fraction)
        self.body_fraction.advance(dt_ms)
        self.metrics = sea_metrics(
            width, height, self.body_fraction.value, self.rotation, density
        )
        self.geometry = wave_geometry(
            width, self.metrics.total_height, self.phase, self.metrics.amplitude
        )

    def contains(self, point: tuple[float, float], width: float) -> bool:
        """Whether a screen point lands on the sea canvas."""

        x, y = point
        return self.metrics.total_height > 0 and 0 <= x <= width and y >= self.sea_level
