from __future__ import annotations

import logging
import random

import reactivex
from pygame.time import Clock
from reactivex import operators as ops

from sailor.peripheral.core.manager import PeripheralManager
from sailor.peripheral.core.providers import ObservableProvider
from sailor.peripheral.tilt import TiltProvider
from sailor.renderers.scene.composer import SceneComposer
from sailor.renderers.scene.state import Point, SceneFrameInput, SceneState
from sailor.utilities.logging import get_logger
from sailor.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

MIN_FRAME_MS = 1000.0 / 120.0
MAX_FRAME_MS = 100.0


def frame_dt_ms(raw_ms: float) -> float:
    """Clamp the clock's last frame time; a zero first frame stays zero."""

    if raw_ms <= 0:
        return 0.0
    return min(max(raw_ms, MIN_FRAME_MS), MAX_FRAME_MS)


class SceneStateProvider(ObservableProvider[SceneState]):
    def __init__(
        self,
        peripheral_manager: PeripheralManager,
        tilt: TiltProvider,
        composer: SceneComposer | None = None,
        initial_state: SceneState | None = None,
        seed: int | None = None,
    ) -> None:
        self._peripheral_manager = peripheral_manager
        self._tilt = tilt
        self._composer = composer or SceneComposer()
        self._initial_state = initial_state
        self._rng = random.Random(seed)
        self._pending_taps: list[Point] = []
        peripheral_manager.taps.subscribe(on_next=self._pending_taps.append)

    @property
    def composer(self) -> SceneComposer:
        return self._composer

    def observable(self) -> reactivex.Observable[SceneState]:
        window_sizes = self._peripheral_manager.window.pipe(
            ops.filter(lambda window: window is not None),
            ops.map(lambda window: window.get_size()),
            ops.distinct_until_changed(),
            ops.share(),
        )
        clocks = self._peripheral_manager.clock.pipe(
            ops.filter(lambda clock: clock is not None),
            ops.share(),
        )
        tilts = self._tilt.observable().pipe(
            ops.start_with(0.0),
            ops.share(),
        )
        frame_inputs = self._peripheral_manager.game_tick.pipe(
            ops.with_latest_from(window_sizes, clocks, tilts),
            ops.map(self._to_frame_input),
        )

        initial_state = self._initial_state or SceneState.initial()

        return frame_inputs.pipe(
            ops.scan(self._step, seed=initial_state),
            ops.start_with(initial_state),
            ops.share(),
        )

    def _step(self, state: SceneState, frame: SceneFrameInput) -> SceneState:
        state = self._composer.step(state, frame, self._rng)
        get_logging_controller().log(
            key="scene.frame",
            logger=logger,
            level=logging.DEBUG,
            msg="scene.frame",
            extra={
                "frame": state.frame_count,
                "sky": state.sky_state.value,
                "sea_level": state.sea_level,
                "clouds": len(state.clouds.clouds),
                "drops": len(state.rain.drops),
            },
        )
        return state

    def _drain_taps(self) -> tuple[Point, ...]:
        taps = tuple(self._pending_taps)
        self._pending_taps.clear()
        return taps

    def _to_frame_input(
        self,
        latest: tuple[object | None, tuple[int, int], Clock, float],
    ) -> SceneFrameInput:
        _, window_size, clock, tilt_degrees = latest
        width, height = window_size
        return SceneFrameInput(
            width=width,
            height=height,
            dt_ms=frame_dt_ms(clock.get_time()),
            tilt_degrees=tilt_degrees,
            taps=self._drain_taps(),
        )
