"""
Pure game logic (no console, no storage).
After every wrong guess we derive hints from the attempt count and the
distance between the guess and the secret:
- direction: always ("higher" / "lower")
- parity: on the 2nd attempt
- approximate range: halfway through the attempts
- proximity: on the second to last attempt

Same inputs always give the same hints.
"""

import math
from secrets import randbelow
from typing import List, Literal

Direction = Literal["higher", "lower"]


def draw_secret(min_value: int, max_value: int) -> int:
    """Uniform pick in [min_value, max_value], both ends included."""
    return min_value + randbelow(max_value - min_value + 1)


def is_win(secret: int, guess: int) -> bool:
    return secret == guess


def direction(secret: int, guess: int) -> Direction:
    return "higher" if guess < secret else "lower"


def range_window(secret: int, min_value: int, max_value: int):
    """
    Example:
      min=1, max=100, secret=42
      width = max(5, 99 // 6) = 16
      low   = max(1, 42 - 8)   = 34
      high  = min(100, 42 + 8) = 50
    Returns (low, high), clamped to the round bounds.
    """
    width = max(5, (max_value - min_value) // 6)
    low = max(min_value, secret - width // 2)
    high = min(max_value, secret + math.ceil(width / 2))
    return low, high


def proximity(secret: int, guess: int) -> str:
    delta = abs(secret - guess)
    if delta <= 2:
        return "very close"
    if delta <= 5:
        return "close"
    return "still far"


def hints_for(
    secret: int,
    guess: int,
    attempts_used: int,
    max_attempts: int,
    min_value: int,
    max_value: int,
) -> List[str]:
    """Hints to show after a guess, in display order. A correct guess gets none."""
    if is_win(secret, guess):
        return []

    # 1. Direction is always shown
    hints = [f"The number is {direction(secret, guess).upper()}."]

    # 2. At most one progressive hint; earlier rules win when thresholds coincide
    if attempts_used == 2:
        parity = "even" if secret % 2 == 0 else "odd"
        hints.append(f"Hint: the number is {parity}.")
    elif attempts_used == math.ceil(max_attempts / 2):
        low, high = range_window(secret, min_value, max_value)
        hints.append(f"Hint: it is between {low} and {high} (approximate range).")
    elif attempts_used == max_attempts - 1:
        closeness = proximity(secret, guess)
        if closeness == "very close":
            hints.append("Final hint: you are VERY CLOSE (difference <= 2).")
        elif closeness == "close":
            hints.append("Final hint: you are close (difference <= 5).")
        else:
            hints.append("Final hint: still far, follow the higher/lower hint.")

    return hints


def format_time(ms: float) -> str:
    """Milliseconds -> 'mm:ss' (whole seconds, rounded down)."""
    seconds = int(ms // 1000)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"
