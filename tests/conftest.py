import random
from collections import deque
from typing import Callable

import pygame
import pytest
from hypothesis import HealthCheck, settings

from sailor.peripheral.core.manager import PeripheralManager
from sailor.utilities.env import TiltSource

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")


class _StubClock:
    def __init__(
        self,
        *times: int,
        default: int = 0,
        repeat_last: bool = True,
    ) -> None:
        self._times: deque[int] = deque(times)
        self._last: int | None = None
        self._default = default
        self._repeat_last = repeat_last

    def get_time(self) -> int:
        if self._times:
            self._last = self._times.popleft()
            return self._last

        if self._repeat_last and self._last is not None:
            return self._last

        return self._default

    def tick(self, framerate: int = 0) -> int:
        return self.get_time()


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> None:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    patcher.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def init_pygame() -> None:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def stub_clock_factory() -> Callable[..., _StubClock]:
    def _factory(*times: int, **kwargs) -> _StubClock:
        return _StubClock(*times, **kwargs)

    return _factory


@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def manager() -> PeripheralManager:
    return PeripheralManager(tilt_source=TiltSource.NONE)
