import os
import typer
from typing import Annotated

from flipbot import config
from flipbot.arguments import Arguments

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "hide"

from flipbot.window import Window  # noqa:E402

app = typer.Typer()


@app.command()
def main(
    think_delay_ms: Annotated[int, typer.Option("-d")] = config.THINK_DELAY_MS,
    verbose: Annotated[bool, typer.Option("-v")] = config.VERBOSE,
) -> None:
    args = Arguments(think_delay_ms, verbose)
    Window(args).run()


if __name__ == "__main__":
    app()
