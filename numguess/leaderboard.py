"""
Scoreboard rendering: fewest attempts first, then fastest time.
"""

from typing import List, Sequence

from .engine import format_time
from .schemas import ScoreRecord

EMPTY_MESSAGE = "No saved records yet."


def rank(records: Sequence[ScoreRecord]) -> List[ScoreRecord]:
    # sorted() is stable and works on a copy
    return sorted(records, key=lambda r: (r.attempts, r.elapsed_ms))


def render(records: Sequence[ScoreRecord], top_n: int = 5) -> str:
    if not records:
        return EMPTY_MESSAGE

    lines = ["--- Top Scores ---"]
    for position, r in enumerate(rank(records)[:top_n], start=1):
        lines.append(
            f"{position}. {r.name} • {r.attempts} attempts • {format_time(r.elapsed_ms)}"
            f" • {r.difficulty} • {r.timestamp}"
        )
    return "\n".join(lines)
