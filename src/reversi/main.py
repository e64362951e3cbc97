import logging
import os
import typer
from enum import Enum
from typing import Annotated, Optional

from reversi.config import FRONTEND, LOG_LEVEL
from reversi.frontend.base import BaseFrontend
from reversi.frontend.text import TextFrontend

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from reversi.frontend.window import Window  # noqa:E402

app = typer.Typer()


class Mode(str, Enum):
    TEXT = "text"
    WINDOW = "window"


def get_frontend(mode: Mode) -> BaseFrontend:
    if mode == Mode.WINDOW:
        return Window()
    return TextFrontend()


def get_default_mode() -> Mode:
    try:
        return Mode(FRONTEND)
    except ValueError:
        choices = ", ".join(mode.value for mode in Mode)
        raise typer.BadParameter(
            f'REVERSI_FRONTEND is "{FRONTEND}", expected one of: {choices}',
            param_hint="'MODE'",
        )


@app.command()
def main(
    mode: Annotated[
        Optional[Mode],
        typer.Argument(help="Front-end to play with, defaults to REVERSI_FRONTEND."),
    ] = None,
) -> None:
    """Play a game of Reversi between two players on one machine."""
    if mode is None:
        mode = get_default_mode()

    logging.basicConfig(level=LOG_LEVEL)
    get_frontend(mode).run()


if __name__ == "__main__":
    app()
