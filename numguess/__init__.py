"""Terminal number guessing game with difficulty tiers, hints and a leaderboard."""

__version__ = "1.0.0"
