from __future__ import annotations

from dataclasses import dataclass, field
from random import Random

SPAWN_CHANCE = 0.8
SPAWN_BAND = 0.4
MIN_LENGTH, LENGTH_SPAN = 8.0, 12.0
MIN_SPEED, SPEED_SPAN = 300.0, 400.0
MIN_ALPHA, ALPHA_SPAN = 0.4, 0.6


@dataclass
class RainDrop:
    x: float
    y: float
    length: float
    speed: float
    alpha: float


@dataclass
class RainField:
    drops: list[RainDrop] = field(default_factory=list)

    def clear(self) -> None:
        self.drops = []

    def update(
        self,
        *,
        dt_s: float,
        width: float,
        sea_level: float,
        density: float,
        rng: Random,
    ) -> None:
        survivors: list[RainDrop] = []
        for drop in self.drops:
            drop.y += drop.speed * dt_s * density
            # A drop is gone once it has passed the water line.
            if drop.y <= sea_level:
                survivors.append(drop)
        self.drops = survivors

        if width > 0 and sea_level > 0 and rng.random() < SPAWN_CHANCE:
            self.drops.append(
                RainDrop(
                    x=rng.random() * width,
                    y=rng.random() * (sea_level * SPAWN_BAND),
                    length=rng.random() * LENGTH_SPAN + MIN_LENGTH,
                    speed=rng.random() * SPEED_SPAN + MIN_SPEED,
                    alpha=rng.random() * ALPHA_SPAN + MIN_ALPHA,
                )
            )
