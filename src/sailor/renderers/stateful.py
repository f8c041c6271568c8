from __future__ import annotations

from typing import Generic

import pygame
from reactivex import Observable
from reactivex.disposable import Disposable

from sailor.peripheral.core.manager import PeripheralManager
from sailor.peripheral.core.providers import ObservableProvider
from sailor.renderers.atomic import AtomicBaseRenderer, StateT
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)


class StatefulBaseRenderer(AtomicBaseRenderer[StateT], Generic[StateT]):
    def __init__(
        self,
        builder: ObservableProvider[StateT],
        *args,
        **kwargs,
    ) -> None:
        self.builder = builder
        self._subscription: Disposable | None = None
        super().__init__(*args, **kwargs)

    def state_observable(self, peripheral_manager: PeripheralManager) -> Observable[StateT]:
        return self.builder.observable()

    def initialize(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
        peripheral_manager: PeripheralManager,
    ) -> None:
        logger.info("Subscribing %s to its state stream", self.name)
        observable = self.state_observable(peripheral_manager=peripheral_manager)
        self._subscription = observable.subscribe(on_next=self.set_state)
        if self.warmup and self.has_state():
            self.process(window, clock)
        self.initialized = True

    def reset(self) -> None:
        if self._subscription is not None:
            self._subscription.dispose()
            self._subscription = None
        super().reset()
