from __future__ import annotations

from dataclasses import dataclass, field

from sailor.animation import (InfiniteTransition, Tween, fast_out_slow_in,
                              lerp, linear)
from sailor.renderers.sky.state import SkyState

SKY_Y_PX = 80.0
BELOW_HORIZON_OFFSET_PX = 200.0
POSITION_TWEEN_MS = 2600.0

SUN_OFFSET_X_DP = 16.0
SUN_SIZE_DP = 150.0
SUN_ROTATION_PERIOD_MS = 16000.0

MOON_OFFSET_X_DP = 40.0
MOON_SIZE_DP = 120.0
MOON_PHASE_DURATION_MS = 8000.0
MOON_COVER_LIMIT = 0.98


def sun_visible(sky: SkyState, show_rain: bool) -> bool:
    return sky is not SkyState.NIGHT and not show_rain


def moon_visible(sky: SkyState) -> bool:
    return sky in (SkyState.NIGHT, SkyState.SUNRISE)


def sun_target_progress(sky: SkyState) -> float:
    """0 is high in the sky, 1 is below the horizon."""

    return 0.0 if sky in (SkyState.DAY, SkyState.SUNRISE) else 1.0


def moon_target_progress(sky: SkyState) -> float:
    return 0.0 if sky is SkyState.NIGHT else 1.0


def _position_tween(progress: float) -> Tween:
    return Tween(value=progress, duration_ms=POSITION_TWEEN_MS, easing=fast_out_slow_in)


@dataclass
class CelestialState:
    """Sun and moon motion.

    Vertical positions are tweened as a progress between the sky position and
    a point below the horizon. The horizon end is resolved against the live
    sea level every frame so the bodies follow the sea as it grows or tilts.
    """

    sun_progress: Tween = field(default_factory=lambda: _position_tween(0.0))
    moon_progress: Tween = field(default_factory=lambda: _position_tween(1.0))
    sun_rotation: InfiniteTransition = field(
        default_factory=lambda: InfiniteTransition(period_ms=SUN_ROTATION_PERIOD_MS)
    )
    moon_phase: Tween = field(
        default_factory=lambda: Tween(value=0.0, duration_ms=MOON_PHASE_DURATION_MS, easing=linear)
    )
    sea_level: float = 0.0
    show_sun: bool = True
    show_moon: bool = False

    @classmethod
    def for_sky(cls, sky: SkyState) -> CelestialState:
        return cls(
            sun_progress=_position_tween(sun_target_progress(sky)),
            moon_progress=_position_tween(moon_target_progress(sky)),
        )

    def update(self, *, dt_ms: float, sky: SkyState, show_rain: bool, sea_level: float) -> None:
        self.sea_level = sea_level
        self.sun_progress.animate_to(sun_target_progress(sky))
        self.moon_progress.animate_to(moon_target_progress(sky))
        self.sun_progress.advance(dt_ms)
        self.moon_progress.advance(dt_ms)
        self.sun_rotation.advance(dt_ms)

        moon_now_visible = moon_visible(sky)
        if moon_now_visible and not self.show_moon:
            self.moon_phase.snap_to(0.0)
            self.moon_phase.animate_to(1.0)
        self.show_moon = moon_now_visible
        self.show_sun = sun_visible(sky, show_rain)
        self.moon_phase.advance(dt_ms)

    @property
    def below_horizon_y(self) -> float:
        return self.sea_level + BELOW_HORIZON_OFFSET_PX

    @property
    def sun_y(self) -> float:
        return lerp(SKY_Y_PX, self.below_horizon_y, self.sun_progress.value)

    @property
    def moon_y(self) -> float:
        return lerp(SKY_Y_PX, self.below_horizon_y, self.moon_progress.value)

    @property
    def sun_angle(self) -> float:
        return self.sun_rotation.fraction * 360.0

    @property
    def moon_cover_visible(self) -> bool:
        return self.moon_phase.value < MOON_COVER_LIMIT
