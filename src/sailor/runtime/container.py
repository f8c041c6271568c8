from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from lagom import Container, Singleton

from sailor.peripheral.core.manager import PeripheralManager
from sailor.peripheral.tilt import TiltProvider
from sailor.renderers.scene.composer import SceneComposer
from sailor.renderers.scene.provider import SceneStateProvider
from sailor.renderers.scene.renderer import SailorSceneRenderer
from sailor.renderers.scene.state import SceneState
from sailor.runtime.display_context import DisplayContext
from sailor.runtime.game_loop import GameLoop
from sailor.runtime.peripheral_runtime import PeripheralRuntime
from sailor.runtime.pygame_event_handler import PygameEventHandler
from sailor.utilities.env import Configuration, TiltSource
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)

RuntimeContainer = Container


@dataclass(frozen=True)
class RuntimeSettings:
    screen_size: tuple[int, int]
    max_fps: int
    density: float
    fullscreen: bool
    seed: int | None
    tilt_source: TiltSource
    show_clouds: bool
    show_rain: bool

    @classmethod
    def from_environment(cls, **overrides: Any) -> RuntimeSettings:
        """Read settings from the environment; non-``None`` overrides win."""

        settings = cls(
            screen_size=Configuration.screen_size(),
            max_fps=Configuration.max_fps(),
            density=Configuration.density(),
            fullscreen=Configuration.fullscreen(),
            seed=Configuration.random_seed(),
            tilt_source=Configuration.tilt_source(),
            show_clouds=Configuration.show_clouds(),
            show_rain=Configuration.show_rain(),
        )
        changes = {key: value for key, value in overrides.items() if value is not None}
        if not changes:
            return settings
        return replace(settings, **changes)


def _build_peripheral_manager(resolver: RuntimeContainer) -> PeripheralManager:
    return PeripheralManager(tilt_source=resolver[RuntimeSettings].tilt_source)


def _build_display_context(resolver: RuntimeContainer) -> DisplayContext:
    settings = resolver[RuntimeSettings]
    return DisplayContext(screen_size=settings.screen_size, fullscreen=settings.fullscreen)


def _build_peripheral_runtime(resolver: RuntimeContainer) -> PeripheralRuntime:
    return PeripheralRuntime(resolver[PeripheralManager])


def _build_event_handler(resolver: RuntimeContainer) -> PygameEventHandler:
    return PygameEventHandler(resolver[PeripheralManager], resolver[DisplayContext])


def _build_tilt_provider(resolver: RuntimeContainer) -> TiltProvider:
    return TiltProvider(resolver[PeripheralManager])


def _build_scene_provider(resolver: RuntimeContainer) -> SceneStateProvider:
    settings = resolver[RuntimeSettings]
    return SceneStateProvider(
        peripheral_manager=resolver[PeripheralManager],
        tilt=resolver[TiltProvider],
        composer=resolver[SceneComposer],
        initial_state=SceneState.initial(
            show_clouds=settings.show_clouds,
            show_rain=settings.show_rain,
            density=settings.density,
        ),
        seed=settings.seed,
    )


def _build_scene_renderer(resolver: RuntimeContainer) -> SailorSceneRenderer:
    return SailorSceneRenderer(
        builder=resolver[SceneStateProvider],
        density=resolver[RuntimeSettings].density,
        composer=resolver[SceneComposer],
    )


def _build_game_loop(resolver: RuntimeContainer) -> GameLoop:
    loop = GameLoop(
        display=resolver[DisplayContext],
        peripheral_manager=resolver[PeripheralManager],
        peripheral_runtime=resolver[PeripheralRuntime],
        event_handler=resolver[PygameEventHandler],
        max_fps=resolver[RuntimeSettings].max_fps,
    )
    loop.add_renderer(resolver[SailorSceneRenderer])
    return loop


def build_runtime_container(
    settings: RuntimeSettings,
    overrides: Mapping[type[Any], object] | None = None,
) -> RuntimeContainer:
    container = RuntimeContainer()
    logger.debug(
        "Configuring Lagom runtime container with overrides=%s.",
        set(overrides.keys()) if overrides else set(),
    )
    _bind(container, overrides, RuntimeSettings, settings)
    _bind(container, overrides, PeripheralManager, Singleton(_build_peripheral_manager))
    _bind(container, overrides, DisplayContext, Singleton(_build_display_context))
    _bind(container, overrides, PeripheralRuntime, Singleton(_build_peripheral_runtime))
    _bind(container, overrides, PygameEventHandler, Singleton(_build_event_handler))
    _bind(container, overrides, TiltProvider, Singleton(_build_tilt_provider))
    _bind(container, overrides, SceneComposer, Singleton(SceneComposer))
    _bind(container, overrides, SceneStateProvider, Singleton(_build_scene_provider))
    _bind(container, overrides, SailorSceneRenderer, Singleton(_build_scene_renderer))
    _bind(container, overrides, GameLoop, Singleton(_build_game_loop))
    return container


def _bind(
    container: RuntimeContainer,
    overrides: Mapping[type[Any], object] | None,
    key: type[Any],
    value: object,
) -> None:
    if overrides and key in overrides:
        container[key] = overrides[key]
        logger.debug("Applied Lagom override for %s.", key)
        return
    container[key] = value
    logger.debug("Registered Lagom provider for %s.", key)
