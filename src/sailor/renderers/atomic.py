from __future__ import annotations

import logging
import time
from dataclasses import replace
from typing import Any, Callable, Generic, TypeVar, final

import pygame

from sailor.peripheral.core.manager import PeripheralManager
from sailor.utilities.logging import get_logger
from sailor.utilities.logging_control import get_logging_controller

logger = get_logger(__name__)

StateT = TypeVar("StateT")


class AtomicBaseRenderer(Generic[StateT]):
    """Base renderer that draws the latest state snapshot it was handed."""

    def __init__(self, *args, **kwargs) -> None:
        self.initialized = False
        self.warmup = True
        self._state: StateT | None = None

    def _create_initial_state(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        peripheral_manager: PeripheralManager,
    ) -> StateT:
        raise NotImplementedError

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        peripheral_manager: PeripheralManager,
    ) -> None:
        self._state = self._create_initial_state(
            window=window,
            clock=clock,
            peripheral_manager=peripheral_manager,
        )
        if self.warmup:
            self.process(window, clock)
        self.initialized = True

    @property
    def state(self) -> StateT:
        assert self._state is not None
        return self._state

    def has_state(self) -> bool:
        return self._state is not None

    def set_state(self, state: StateT) -> None:
        self._state = state

    def update_state(self, **changes: Any) -> None:
        assert self._state is not None
        self._state = replace(self._state, **changes)

    def mutate_state(self, mutator: Callable[[StateT], StateT]) -> None:
        assert self._state is not None
        self._state = mutator(self._state)

    @property
    def name(self) -> str:
        return self.__class__.__name__

    def is_initialized(self) -> bool:
        return self.initialized

    @final
    def process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        start_ns = time.perf_counter_ns()
        self.real_process(window=window, clock=clock)
        duration_ms = (time.perf_counter_ns() - start_ns) / 1_000_000
        get_logging_controller().log(
            key="renderer.frame",
            logger=logger,
            level=logging.DEBUG,
            msg="renderer.frame",
            extra={"renderer": self.name, "duration_ms": duration_ms},
        )

    def real_process(self, window: pygame.Surface, clock: pygame.time.Clock) -> None:
        raise NotImplementedError("Please implement")

    def reset(self) -> None:
        pass
