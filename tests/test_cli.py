"""
Testing the command line entry point via typer's CliRunner.
- fixed_secret patches session.draw_secret so the typed guesses are known to win.
"""

import json

from typer.testing import CliRunner

from numguess.cli import app

runner = CliRunner()


def test_full_game_saves_result(scores_path, fixed_secret):
    fixed_secret(42)
    typed = "\n".join(["Ana", "2", "50", "42", "n"]) + "\n"

    result = runner.invoke(app, ["--scores-file", str(scores_path)], input=typed)

    assert result.exit_code == 0, result.output
    assert "Correct! The number was 42." in result.output
    assert "Result saved to scores.json." in result.output
    assert "1. Ana • 2 attempts" in result.output

    data = json.loads(scores_path.read_text(encoding="utf-8"))
    assert len(data) == 1
    assert data[0]["name"] == "Ana"
    assert data[0]["attempts"] == 2
    assert data[0]["difficulty"] == "Normal"
    assert set(data[0]) == {"name", "attempts", "timeMs", "difficulty", "date"}


def test_no_save_flag_leaves_file_alone(scores_path, fixed_secret):
    fixed_secret(7)
    typed = "\n".join(["", "1", "7", "n"]) + "\n"

    result = runner.invoke(app, ["--no-save", "--scores-file", str(scores_path)], input=typed)

    assert result.exit_code == 0, result.output
    assert "Result NOT saved (saving disabled)." in result.output
    assert "No saved records yet." in result.output
    assert not scores_path.exists()


def test_no_save_from_env(scores_path, fixed_secret, monkeypatch):
    fixed_secret(7)
    monkeypatch.setenv("NUMGUESS_NO_SAVE", "true")
    monkeypatch.setenv("NUMGUESS_SCORES_FILE", str(scores_path))
    typed = "\n".join(["", "1", "7", "n"]) + "\n"

    result = runner.invoke(app, [], input=typed)

    assert result.exit_code == 0, result.output
    assert "Result NOT saved (saving disabled)." in result.output
    assert not scores_path.exists()


def test_bad_env_config_exits_with_message(scores_path, monkeypatch):
    monkeypatch.setenv("NUMGUESS_TOP_N", "0")

    result = runner.invoke(app, ["--scores-file", str(scores_path)], input="")

    assert result.exit_code == 2
    assert "Configuration error: NUMGUESS_TOP_N must be at least 1" in result.output
    assert not scores_path.exists()
