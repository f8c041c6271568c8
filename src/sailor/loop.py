import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from sailor.cli.commands.run import run_command

app = typer.Typer()


@app.callback()
def cli() -> None:
    """Tilt-driven sea scene with a sailing ship, weather and a day cycle."""


app.command(name="run")(run_command)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
