from __future__ import annotations

from dataclasses import dataclass, field

from sailor.animation.easing import Easing, clamp, fast_out_slow_in, lerp

Color = tuple[int, int, int]


@dataclass
class Tween:
    """A scalar that animates toward its latest target over ``duration_ms``.

    Changing the target mid-flight restarts the animation from the value
    currently on screen, so retargeting never jumps.
    """

    value: float
    duration_ms: float
    easing: Easing = fast_out_slow_in
    _start: float = field(init=False)
    _target: float = field(init=False)
    _elapsed_ms: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self._start = self.value
        self._target = self.value
        self._elapsed_ms = self.duration_ms

    @property
    def target(self) -> float:
        return self._target

    @property
    def is_running(self) -> bool:
        return self._elapsed_ms < self.duration_ms

    def animate_to(self, target: float) -> None:
        if target == self._target:
            return
        self._start = self.value
        self._target = target
        self._elapsed_ms = 0.0

    def snap_to(self, target: float) -> None:
        self.value = self._start = self._target = target
        self._elapsed_ms = self.duration_ms

    def advance(self, dt_ms: float) -> float:
        self._elapsed_ms = min(self._elapsed_ms + max(dt_ms, 0.0), self.duration_ms)
        if self.duration_ms <= 0:
            progress = 1.0
        else:
            progress = clamp(self._elapsed_ms / self.duration_ms, 0.0, 1.0)
        self.value = lerp(self._start, self._target, self.easing(progress))
        return self.value


@dataclass
class ColorTween:
    """RGB counterpart of :class:`Tween`; channels share one progress curve."""

    color: Color
    duration_ms: float
    easing: Easing = fast_out_slow_in
    _progress: Tween = field(init=False)
    _from: Color = field(init=False)
    _to: Color = field(init=False)

    def __post_init__(self) -> None:
        self._progress = Tween(value=1.0, duration_ms=self.duration_ms, easing=self.easing)
        self._from = self.color
        self._to = self.color

    @property
    def target(self) -> Color:
        return self._to

    def animate_to(self, target: Color) -> None:
        if target == self._to:
            return
        self._from = self.color
        self._to = target
        self._progress.snap_to(0.0)
        self._progress.animate_to(1.0)

    def advance(self, dt_ms: float) -> Color:
        fraction = self._progress.advance(dt_ms)
        self.color = tuple(
            int(round(clamp(lerp(start, end, fraction), 0.0, 255.0)))
            for start, end in zip(self._from, self._to)
        )  # type: ignore[assignment]
        return self.color


@dataclass
class InfiniteTransition:
    """Linear clock that wraps back to zero every ``period_ms``."""

    period_ms: float
    elapsed_ms: float = 0.0

    def advance(self, dt_ms: float) -> float:
        if self.period_ms > 0:
            self.elapsed_ms = (self.elapsed_ms + max(dt_ms, 0.0)) % self.period_ms
        return self.fraction

    @property
    def fraction(self) -> float:
        if self.period_ms <= 0:
            return 0.0
        return self.elapsed_ms / self.period_ms
