"""
- ScriptedIO: fake console that replays typed answers and keeps everything printed.
- store / scores_path: a ScoreStore on a temp file so tests never touch a real scores.json.
- fixed_secret: makes the secret predictable (patches the symbol the session uses).
"""
from typing import List

import pytest

import numguess.session as session_module
from numguess.store import ScoreStore


class ScriptedIO:
    def __init__(self, answers: List[str]):
        self.answers = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        self.warnings: List[str] = []

    def ask(self, question: str) -> str:
        self.prompts.append(question)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for prompt {question!r}")
        return self.answers.pop(0).strip()

    def say(self, text: str = "") -> None:
        self.output.append(text)

    def warn(self, text: str) -> None:
        self.warnings.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def make_io():
    return ScriptedIO


@pytest.fixture
def scores_path(tmp_path):
    return tmp_path / "scores.json"


@pytest.fixture
def store(scores_path):
    s = ScoreStore(scores_path)
    s.load()
    return s


@pytest.fixture
def fixed_secret(monkeypatch):
    """Call fixed_secret(42) to make every new round use 42."""
    def _fix(value: int):
        monkeypatch.setattr(session_module, "draw_secret", lambda low, high: value)
    return _fix


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "NUMGUESS_SCORES_FILE",
        "NUMGUESS_NO_SAVE",
        "NUMGUESS_TOP_N",
        "NUMGUESS_EXIT_COMMAND",
        "NUMGUESS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
