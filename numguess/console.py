"""
Line-oriented console I/O.
The session only talks to an object with ask/say/warn, so tests can swap in
a scripted fake. One prompt is outstanding at a time.
"""

from typing import Protocol

import typer


class GameIO(Protocol):
    def ask(self, question: str) -> str: ...

    def say(self, text: str = "") -> None: ...

    def warn(self, text: str) -> None: ...


class ConsoleIO:
    """Real terminal: blocks on each prompt until a line is typed."""

    def ask(self, question: str) -> str:
        answer = typer.prompt(question, default="", show_default=False, prompt_suffix="")
        return answer.strip()

    def say(self, text: str = "") -> None:
        typer.echo(text)

    def warn(self, text: str) -> None:
        typer.secho(text, fg=typer.colors.YELLOW, err=True)
