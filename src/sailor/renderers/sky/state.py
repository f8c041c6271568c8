from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from sailor.animation import ColorTween, fast_out_slow_in
from sailor.display.color import Color
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

COLOR_TWEEN_MS = 2500.0
DWELL_MS = 2600.0


class SkyState(StrEnum):
    DAY = "day"
    SUNSET = "sunset"
    NIGHT = "night"
    SUNRISE = "sunrise"


SKY_COLORS: dict[SkyState, Color] = {
    SkyState.DAY: Color.from_hex("#00013E"),
    SkyState.SUNSET: Color.from_hex("#FF8C42"),
    SkyState.NIGHT: Color.from_hex("#000000"),
    SkyState.SUNRISE: Color.from_hex("#FFB347"),
}

# Sunset and Sunrise are transitional; Day and Night wait for a command.
AUTO_ADVANCE: dict[SkyState, SkyState] = {
    SkyState.SUNSET: SkyState.NIGHT,
    SkyState.SUNRISE: SkyState.DAY,
}


@dataclass
class SkyStateMachine:
    """Day/Sunset/Night/Sunrise cycle with a timed hand-off out of dusk and dawn."""

    state: SkyState = SkyState.DAY
    dwell_ms: float = 0.0
    background: ColorTween = field(init=False)

    def __post_init__(self) -> None:
        self.background = ColorTween(
            color=SKY_COLORS[self.state].tuple(),
            duration_ms=COLOR_TWEEN_MS,
            easing=fast_out_slow_in,
        )

    @property
    def color(self) -> tuple[int, int, int]:
        return self.background.color

    def transition_to(self, state: SkyState) -> bool:
        if state is self.state:
            return False
        logger.info("Sky state %s -> %s", self.state.value, state.value)
        self.state = state
        self.dwell_ms = 0.0
        self.background.animate_to(SKY_COLORS[state].tuple())
        return True

    def brightness_cycle(self) -> bool:
        """Day fades to Sunset and Night brightens to Sunrise; dusk and dawn ignore it."""

        if self.state is SkyState.DAY:
            return self.transition_to(SkyState.SUNSET)
        if self.state is SkyState.NIGHT:
            return self.transition_to(SkyState.SUNRISE)
        return False

    def go_to_day_side(self) -> bool:
        if self.state is SkyState.NIGHT:
            return self.transition_to(SkyState.SUNRISE)
        return self.transition_to(SkyState.DAY)

    def update(self, dt_ms: float) -> SkyState:
        self.dwell_ms += max(dt_ms, 0.0)
        next_state = AUTO_ADVANCE.get(self.state)
        if next_state is not None and self.dwell_ms >= DWELL_MS:
            self.transition_to(next_state)
        self.background.advance(dt_ms)
        return self.state
