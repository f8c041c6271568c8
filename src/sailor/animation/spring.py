from __future__ import annotations

import math
from dataclasses import dataclass

STIFFNESS_VERY_LOW = 50.0
STIFFNESS_MEDIUM_LOW = 400.0
DAMPING_RATIO_LOW_BOUNCY = 0.75

MAX_SUBSTEP_S = 1.0 / 240.0


@dataclass
class SpringDamper:
    """Unit-mass damped spring chasing a moving target.

    Integrated with semi-implicit Euler over sub-steps no longer than
    ``MAX_SUBSTEP_S`` so long frames stay stable.
    """

    stiffness: float = STIFFNESS_VERY_LOW
    damping_ratio: float = DAMPING_RATIO_LOW_BOUNCY
    value: float = 0.0
    velocity: float = 0.0

    def step(self, target: float, dt_s: float) -> float:
        if dt_s <= 0:
            return self.value
        if not math.isfinite(target):
            target = 0.0

        omega = math.sqrt(self.stiffness)
        damping = 2.0 * self.damping_ratio * omega
        steps = max(1, math.ceil(dt_s / MAX_SUBSTEP_S))
        h = dt_s / steps
        for _ in range(steps):
            acceleration = -self.stiffness * (self.value - target) - damping * self.velocity
            self.velocity += acceleration * h
            self.value += self.velocity * h
        return self.value

    def is_at_rest(self, target: float, tolerance: float = 0.01) -> bool:
        return abs(self.value - target) < tolerance and abs(self.velocity) < tolerance
