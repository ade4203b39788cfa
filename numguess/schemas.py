"""
Explicit validation & Pydantic models
- RoundConfig: bounds and attempt limit chosen for one round.
- RoundResult: what a finished round hands to the score store.
- ScoreRecord: one persisted outcome, with the stable on-disk field names
  {name, attempts, timeMs, difficulty, date, note?}.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .types import RoundOutcome

LOSS_NOTE = "loss/exit"


# 1. Bounds and attempt limit for a round (immutable once picked)
class RoundConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    min_value: int = Field(..., description="Smallest value the secret can take")
    max_value: int = Field(..., description="Largest value the secret can take")
    max_attempts: int = Field(..., gt=0, description="Guesses allowed in the round")
    label: str = Field(..., description="Difficulty label shown on the leaderboard")

    @model_validator(mode="after")
    def check_bounds(self) -> "RoundConfig":
        if self.max_value <= self.min_value:
            raise ValueError("max_value must be greater than min_value.")
        return self


# 2. One persisted round outcome
class ScoreRecord(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Player name")
    attempts: int = Field(..., ge=0, description="Guesses used")
    elapsed_ms: int = Field(0, ge=0, alias="timeMs", description="Time to win in ms (0 if not won)")
    difficulty: str = Field(..., description="Difficulty label")
    timestamp: str = Field(..., alias="date", description="ISO-8601 time the record was made")
    note: Optional[str] = Field(None, description="Extra note, ex. 'loss/exit'")


# 3. Outcome of a round, before it becomes a ScoreRecord
class RoundResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    outcome: RoundOutcome
    attempts: int = Field(..., ge=0)
    elapsed_ms: int = Field(0, ge=0)
    name: str
    difficulty: str
    secret: int

    @property
    def finished(self) -> bool:
        """Only a win counts as a finished round."""
        return self.outcome == "won"

    def to_record(self, timestamp: str) -> ScoreRecord:
        return ScoreRecord(
            name=self.name,
            attempts=self.attempts,
            elapsed_ms=self.elapsed_ms if self.finished else 0,
            difficulty=self.difficulty,
            timestamp=timestamp,
            note=None if self.finished else LOSS_NOTE,
        )
