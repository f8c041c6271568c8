from typing import Annotated, Optional

import typer

from sailor.runtime.container import RuntimeSettings, build_runtime_container
from sailor.runtime.game_loop import GameLoop
from sailor.utilities.env import Configuration, TiltSource
from sailor.utilities.logging import get_logger

logger = get_logger(__name__)


def run_command(
    width: Annotated[Optional[int], typer.Option("--width", min=1)] = None,
    height: Annotated[Optional[int], typer.Option("--height", min=1)] = None,
    max_fps: Annotated[Optional[int], typer.Option("--max-fps", min=1)] = None,
    frames: Annotated[
        Optional[int],
        typer.Option("--frames", min=1, help="Stop after this many frames"),
    ] = None,
    seed: Annotated[
        Optional[int], typer.Option("--seed", help="Seed for clouds, rain and stars")
    ] = None,
    tilt_source: Annotated[
        Optional[str],
        typer.Option("--tilt-source", help="auto, serial, keyboard or none"),
    ] = None,
    fullscreen: bool = typer.Option(False, "--fullscreen", help="Open fullscreen"),
) -> None:
    try:
        default_width, default_height = Configuration.screen_size()
        settings = RuntimeSettings.from_environment(
            screen_size=(width or default_width, height or default_height),
            max_fps=max_fps,
            seed=seed,
            tilt_source=TiltSource(tilt_source.lower()) if tilt_source else None,
            fullscreen=fullscreen or None,
        )
    except ValueError as exc:
        logger.error("Invalid run options: %s", exc)
        raise typer.Exit(code=1) from exc

    resolver = build_runtime_container(settings)
    loop = resolver.resolve(GameLoop)
    loop.run(frames=frames)
