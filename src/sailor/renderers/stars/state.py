from __future__ import annotations

import math
from dataclasses import dataclass, field
from random import Random

from sailor.animation import clamp

STAR_COUNT = 100
PADDING_DP = 140.0
MIN_ALPHA = 0.4
MAX_ALPHA = 0.9

StarKey = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class Star:
    x: float
    y: float
    radius: float
    phase: float
    speed: float
    amplitude: float
    base_alpha: float

    def alpha(self, time_s: float) -> float:
        twinkle = math.sin(time_s * self.speed + self.phase) * self.amplitude
        return clamp(self.base_alpha + twinkle, MIN_ALPHA, MAX_ALPHA)


def generate_stars(
    width: float,
    height: float,
    sea_level: float,
    density: float,
    rng: Random,
) -> list[Star]:
    if width <= 0 or height <= 0:
        return []

    max_y = max(sea_level - PADDING_DP * density, 0.0)
    return [
        Star(
            x=rng.random() * width,
            y=rng.random() * max_y,
            radius=rng.random() * 1.5 + 1.0,
            phase=rng.random() * 2.0 * math.pi,
            speed=rng.random() * 0.6 + 0.2,
            amplitude=rng.random() * 0.15 + 0.05,
            base_alpha=rng.random() * 0.3 + 0.55,
        )
        for _ in range(STAR_COUNT)
    ]


@dataclass
class StarField:
    """Star population keyed by ``(width, height, sea_level)``.

    Stars carry no per-frame state: their brightness is a function of the
    scene clock alone.
    """

    stars: list[Star] = field(default_factory=list)
    key: StarKey | None = None

    def ensure(
        self,
        *,
        width: float,
        height: float,
        sea_level: float,
        density: float,
        rng: Random,
    ) -> bool:
        key = (width, height, sea_level)
        if key == self.key:
            return False
        self.key = key
        self.stars = generate_stars(width, height, sea_level, density, rng)
        return True
