"""
Labels for clarity.
"""

from typing import Literal

Tier = Literal["easy", "normal", "hard", "custom"]
RoundOutcome = Literal["won", "exhausted", "exit"]
# What ScoreStore.append did with a record
SaveStatus = Literal["saved", "disabled", "failed"]
