"""
Command line entry point.

    numguess [--no-save] [--scores-file PATH] [--top N]

Defaults come from env vars / .env (see config.py); flags win.
"""

import logging
from pathlib import Path
from typing import Optional

import typer

from .config import load_settings
from .console import ConsoleIO
from .session import GameSession
from .store import ScoreStore

app = typer.Typer(add_completion=False)


@app.command()
def main(
    no_save: bool = typer.Option(False, "--no-save", help="Play without saving any result."),
    scores_file: Optional[Path] = typer.Option(None, "--scores-file", help="Where results are stored."),
    top: Optional[int] = typer.Option(None, "--top", min=1, help="How many leaderboard rows to show."),
):
    try:
        settings = load_settings()
    except RuntimeError as exc:
        typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2)
    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    store = ScoreStore(
        scores_file or settings.scores_file,
        enabled=not (no_save or settings.no_save),
    )
    store.load()

    session = GameSession(
        ConsoleIO(),
        store,
        top_n=top or settings.top_n,
        exit_command=settings.exit_command,
    )
    session.run()
