"""
Testing the scoreboard formatter.
"""

from numguess.leaderboard import EMPTY_MESSAGE, rank, render
from numguess.schemas import ScoreRecord


def rec(name, attempts, elapsed_ms):
    return ScoreRecord(
        name=name,
        attempts=attempts,
        elapsed_ms=elapsed_ms,
        difficulty="Easy",
        timestamp="2026-10-18T12:00:00.000Z",
    )


def test_empty_input_has_explicit_message():
    assert render([]) == EMPTY_MESSAGE


def test_rank_by_attempts_then_time():
    records = [rec("c", 5, 100), rec("a", 2, 9000), rec("b", 2, 3000)]
    assert [r.name for r in rank(records)] == ["b", "a", "c"]


def test_rank_is_stable_for_ties():
    records = [rec("first", 3, 1000), rec("second", 3, 1000), rec("third", 3, 1000)]
    assert [r.name for r in rank(records)] == ["first", "second", "third"]


def test_render_does_not_mutate_and_is_repeatable():
    records = [rec("slow", 4, 70_000), rec("fast", 1, 5_000), rec("mid", 2, 0)]
    original_order = list(records)

    first = render(records, top_n=5)
    second = render(records, top_n=5)

    assert first == second
    assert records == original_order


def test_render_format_and_top_n():
    records = [rec(f"p{i}", i, 61_000) for i in range(1, 8)]
    output = render(records, top_n=3).splitlines()

    assert output[0] == "--- Top Scores ---"
    assert len(output) == 4
    assert output[1] == "1. p1 • 1 attempts • 01:01 • Easy • 2026-10-18T12:00:00.000Z"
    assert output[3].startswith("3. p3 ")
